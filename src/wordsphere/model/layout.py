"""
Ring Layout
===========
Assigns every word a seed (latitude, longitude) on a grid of latitude rings.

Words are consumed in order: the first `labels_per_ring` words form ring 0,
the next batch ring 1, and so on. The last ring may be partially filled.

Both angles are running sums. Each ring adds one latitude step to the previous
ring's latitude (mod 180) and, inside a ring, each word adds one longitude step
to the previous word's longitude (mod 360), starting from 0. Once a sum wraps
the result is not bit-identical to `(index + 1) * step`.
"""
from __future__ import annotations

import logging
import math
from typing import Iterator, Sequence

from wordsphere.model.config import ConfigurationError
from wordsphere.model.label import Label
from wordsphere.model.projection import LATITUDE_PERIOD, LONGITUDE_PERIOD

logger = logging.getLogger(__name__)


def ring_count(n_words: int, labels_per_ring: int) -> int:
    """Number of latitude rings needed for `n_words`."""
    _check_labels_per_ring(labels_per_ring)
    return math.ceil(n_words / labels_per_ring)


def seed_angles(n_words: int, labels_per_ring: int) -> Iterator[tuple[float, float]]:
    """
    Yield the seed (latitude, longitude) of each word, in word order.

    Args:
        n_words: Number of words to place.
        labels_per_ring: Number of words per latitude ring.

    Raises:
        ConfigurationError: If `labels_per_ring` is not positive.
    """
    rings = ring_count(n_words, labels_per_ring)
    latitude_step = LATITUDE_PERIOD / (rings + 1)
    longitude_step = LONGITUDE_PERIOD / labels_per_ring

    latitude = 0.0
    for row in range(rings):
        latitude += latitude_step
        latitude %= LATITUDE_PERIOD
        longitude = 0.0
        for col in range(labels_per_ring):
            if row * labels_per_ring + col >= n_words:
                return
            longitude += longitude_step
            longitude %= LONGITUDE_PERIOD
            yield latitude, longitude


def layout(
    words: Sequence[str],
    labels_per_ring: int,
    radius: float,
    min_factor: float
) -> list[Label]:
    """
    Build a fresh label collection for `words`.

    Args:
        words: Label texts; output order equals this order.
        labels_per_ring: Number of words per latitude ring.
        radius: Sphere radius used for the initial projection.
        min_factor: Lower bound of the depth factor.

    Returns:
        A new list of projected labels. An empty word list gives an empty list.
    """
    labels = []
    for text, (latitude, longitude) in zip(words, seed_angles(len(words), labels_per_ring)):
        label = Label(text=text)
        label.place(radius, latitude, longitude, min_factor)
        labels.append(label)

    logger.debug(
        f"Laid out {len(labels)} labels on {ring_count(len(words), labels_per_ring)} rings "
        f"({labels_per_ring} per ring)."
    )
    return labels


def _check_labels_per_ring(labels_per_ring: int) -> None:
    if labels_per_ring <= 0:
        raise ConfigurationError(f"labels_per_ring must be positive, got {labels_per_ring}.")
