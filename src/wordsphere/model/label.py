from __future__ import annotations

from dataclasses import dataclass

from wordsphere.model.projection import normalize_latitude, normalize_longitude, project


@dataclass
class Label:
    """
    A single word on the sphere.

    Angles are stored normalized (latitude in [0, 180), longitude in [0, 360)).
    The cartesian position and factor are derived from them by `place`.
    """
    text: str
    latitude: float = 0.0
    longitude: float = 0.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    factor: float = 0.0

    @property
    def position(self) -> tuple[float, float, float]:
        return self.x, self.y, self.z

    def place(self, radius: float, latitude: float, longitude: float, min_factor: float) -> None:
        """Move the label to the given angles and recompute its projection."""
        p = project(radius, latitude, longitude, min_factor)
        self.latitude = normalize_latitude(latitude)
        self.longitude = normalize_longitude(longitude)
        self.x, self.y, self.z = p.x, p.y, p.z
        self.factor = p.factor
