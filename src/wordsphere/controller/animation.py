"""
Animation Driver
================
Advances every label by a fixed angular step per tick.

The host decides when a tick happens (Qt timer, render loop, test harness);
the driver only knows how far to move. Stopping the animation means either
not calling `tick` or pausing the driver.
"""
from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from wordsphere.model.label import Label
from wordsphere.model.projection import LATITUDE_PERIOD, LONGITUDE_PERIOD, project_many, wrap_angles

logger = logging.getLogger(__name__)


class AnimationDriver:
    """
    Rotates a label collection around the sphere.

    Args:
        bottom_offset: Longitude step in degrees per tick.
        up_offset: Latitude step in degrees per tick (0 keeps rotation horizontal).
    """

    def __init__(self, bottom_offset: float = 1.0, up_offset: float = 0.0) -> None:
        self.bottom_offset = bottom_offset
        self.up_offset = up_offset
        self.tick_count = 0
        self._paused = False

    @property
    def is_running(self) -> bool:
        return not self._paused

    def pause(self) -> None:
        if not self._paused:
            logger.debug(f"Animation paused after {self.tick_count} ticks.")
        self._paused = True

    def resume(self) -> None:
        if self._paused:
            logger.debug("Animation resumed.")
        self._paused = False

    def set_step(self, bottom_offset: float, up_offset: float = 0.0) -> None:
        """Change the per-tick angular step; applies from the next tick."""
        self.bottom_offset = bottom_offset
        self.up_offset = up_offset

    def tick(self, labels: Sequence[Label], radius: float, min_factor: float) -> None:
        """
        Advance all labels by one step and re-project them in place.

        Args:
            labels: Label collection to mutate.
            radius: Sphere radius.
            min_factor: Lower bound of the depth factor.
        """
        if self._paused or not labels:
            return

        latitudes = np.fromiter((label.latitude for label in labels), dtype=np.float64, count=len(labels))
        longitudes = np.fromiter((label.longitude for label in labels), dtype=np.float64, count=len(labels))
        latitudes = wrap_angles(latitudes + self.up_offset, LATITUDE_PERIOD)
        longitudes = wrap_angles(longitudes + self.bottom_offset, LONGITUDE_PERIOD)

        points, factors = project_many(radius, latitudes, longitudes, min_factor)

        for i, label in enumerate(labels):
            label.latitude = float(latitudes[i])
            label.longitude = float(longitudes[i])
            label.x, label.y, label.z = (float(v) for v in points[i])
            label.factor = float(factors[i])

        self.tick_count += 1
