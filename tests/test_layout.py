"""
Tests for ring layout.

Tests cover:
- Ring count and ring filling order
- Running-sum latitude/longitude seeds
- Determinism and edge cases (empty list, invalid ring size)
"""

import math

import pytest

from wordsphere.model.config import ConfigurationError
from wordsphere.model.layout import layout, ring_count, seed_angles


def _words(n):
    return [str(i) for i in range(n)]


def _rings(labels):
    """Group labels by latitude, keeping first-seen order."""
    rings = {}
    for label in labels:
        rings.setdefault(round(label.latitude, 9), []).append(label)
    return list(rings.values())


# ============== Ring count ==============

@pytest.mark.parametrize("n, per_ring, expected", [(0, 7, 0), (1, 7, 1), (7, 7, 1), (8, 7, 2), (50, 7, 8), (49, 7, 7)])
def test_ring_count(n, per_ring, expected):
    assert ring_count(n, per_ring) == expected


@pytest.mark.parametrize("per_ring", [0, -3])
def test_non_positive_ring_size_fails_fast(per_ring):
    with pytest.raises(ConfigurationError):
        ring_count(10, per_ring)
    with pytest.raises(ConfigurationError):
        layout(_words(10), per_ring, 200.0, 0.2)


# ============== Seeds ==============

def test_fifty_words_seven_per_ring():
    labels = layout(_words(50), 7, 200.0, 0.2)
    rings = _rings(labels)

    assert len(labels) == 50
    assert len(rings) == 8
    assert [len(r) for r in rings] == [7, 7, 7, 7, 7, 7, 7, 1]
    assert rings[-1][0].text == "49"


def test_rings_are_filled_in_word_order():
    labels = layout(_words(50), 7, 200.0, 0.2)
    rings = _rings(labels)
    assert [label.text for label in rings[0]] == _words(7)
    assert [label.text for label in rings[1]] == [str(i) for i in range(7, 14)]


def test_output_order_equals_input_order():
    words = ["alpha", "beta", "gamma", "delta", "epsilon"]
    labels = layout(words, 2, 100.0, 0.2)
    assert [label.text for label in labels] == words


def test_ring_latitudes_are_evenly_spaced_between_poles():
    labels = layout(_words(50), 7, 200.0, 0.2)
    latitudes = [ring[0].latitude for ring in _rings(labels)]
    assert latitudes == pytest.approx([20.0 * (r + 1) for r in range(8)])
    assert all(0.0 < lat < 180.0 for lat in latitudes)


def test_longitudes_start_one_step_in_and_accumulate():
    seeds = list(seed_angles(4, 4))
    assert [lon for _, lon in seeds[:3]] == [90.0, 180.0, 270.0]
    # The fourth step wraps 360 back to 0
    assert seeds[3][1] == 0.0


def test_seed_angles_reproduce_running_sum():
    n, per_ring = 23, 6
    seeds = list(seed_angles(n, per_ring))

    lat_step = 180.0 / (ring_count(n, per_ring) + 1)
    lon_step = 360.0 / per_ring
    expected = []
    lat = 0.0
    for row in range(ring_count(n, per_ring)):
        lat = (lat + lat_step) % 180.0
        lon = 0.0
        for col in range(per_ring):
            if row * per_ring + col < n:
                lon = (lon + lon_step) % 360.0
                expected.append((lat, lon))

    assert seeds == expected


def test_partially_filled_last_ring_stops_early():
    seeds = list(seed_angles(10, 4))
    assert len(seeds) == 10
    last_ring = seeds[8:]
    assert [lon for _, lon in last_ring] == [90.0, 180.0]


def test_layout_projects_every_label():
    labels = layout(_words(12), 5, 150.0, 0.2)
    for label in labels:
        x, y, z = label.position
        assert math.isclose(x * x + y * y + z * z, 150.0 ** 2, rel_tol=1e-9)
        assert 0.2 <= label.factor <= 1.0


def test_layout_is_deterministic():
    first = layout(_words(50), 7, 200.0, 0.2)
    second = layout(_words(50), 7, 200.0, 0.2)
    assert [(l.latitude, l.longitude) for l in first] == [(l.latitude, l.longitude) for l in second]
    assert first == second


def test_empty_word_list_gives_no_labels():
    assert layout([], 7, 200.0, 0.2) == []
    assert list(seed_angles(0, 7)) == []


def test_layout_returns_fresh_labels():
    words = _words(3)
    first = layout(words, 7, 200.0, 0.2)
    second = layout(words, 7, 200.0, 0.2)
    assert all(a is not b for a, b in zip(first, second))
