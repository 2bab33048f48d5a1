"""
Spherical Projection
====================
Converts (latitude, longitude) angles on a sphere into cartesian coordinates
and a depth factor used to scale text size and opacity.

Conventions:
    - Angles are in degrees.
    - Latitude is the polar angle from the top pole (0 = top, 180 = bottom).
    - Longitude is the azimuth around the polar (y) axis.
    - The factor depends on longitude only: 1.0 at 90 deg (facing the viewer),
      0.0 at 270 deg (far side) before clamping to the minimum factor.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

LATITUDE_PERIOD = 180.0
LONGITUDE_PERIOD = 360.0


@dataclass(frozen=True)
class Projection:
    """Result of projecting one pair of angles onto the sphere."""
    x: float
    y: float
    z: float
    factor: float


def _wrap(angle: float, period: float) -> float:
    # A tiny negative angle rounds up to exactly `period` under %
    wrapped = angle % period
    return 0.0 if wrapped >= period else wrapped


def normalize_latitude(latitude: float) -> float:
    """Wrap latitude into [0, 180)."""
    return _wrap(latitude, LATITUDE_PERIOD)


def normalize_longitude(longitude: float) -> float:
    """Wrap longitude into [0, 360)."""
    return _wrap(longitude, LONGITUDE_PERIOD)


def wrap_angles(angles: npt.ArrayLike, period: float) -> npt.NDArray[np.float64]:
    """Vectorised angle wrap into [0, period)."""
    wrapped = np.mod(np.asarray(angles, dtype=np.float64), period)
    return np.where(wrapped >= period, 0.0, wrapped)


def size_factor(longitude: float, min_factor: float) -> float:
    """
    Piecewise-linear depth factor for a longitude.

    Args:
        longitude: Longitude in degrees. Expected to be normalized already.
        min_factor: Lower bound of the result.

    Returns:
        max(min_factor, f(longitude)) where f rises from 0.5 at 0 deg to 1.0 at
        90 deg, falls to 0.0 at 270 deg and rises back to 0.5 at 360 deg.

    Notes:
        lon_rad / pi is evaluated as lon / 180 so that the breakpoints
        (0.5, 1.0, 0.0) are exact.
    """
    turns = longitude / 180.0
    if 0.0 <= longitude <= 90.0:
        factor = turns + 0.5
    elif 270.0 <= longitude <= 360.0:
        factor = turns - 1.5
    else:
        factor = -turns + 1.5
    return max(min_factor, factor)


def project(radius: float, latitude: float, longitude: float, min_factor: float) -> Projection:
    """
    Project a point given by sphere angles.

    Args:
        radius: Sphere radius.
        latitude: Polar angle in degrees, any real value.
        longitude: Azimuth in degrees, any real value.
        min_factor: Lower bound of the depth factor.

    Returns:
        Projection with x, y, z on the sphere surface and the clamped factor.
    """
    lat = normalize_latitude(latitude)
    lon = normalize_longitude(longitude)
    lat_rad = math.radians(lat)
    lon_rad = math.radians(lon)

    y = radius * math.cos(lat_rad)
    z = -radius * math.sin(lat_rad) * math.sin(lon_rad)
    x = radius * math.sin(lat_rad) * math.cos(lon_rad)
    return Projection(x=x, y=y, z=z, factor=size_factor(lon, min_factor))


def project_many(
    radius: float,
    latitudes: npt.ArrayLike,
    longitudes: npt.ArrayLike,
    min_factor: float
) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """
    Vectorised version of `project` for a batch of angle pairs.

    Args:
        radius: Sphere radius.
        latitudes: (N,) latitudes in degrees.
        longitudes: (N,) longitudes in degrees.
        min_factor: Lower bound of the depth factor.

    Returns:
        Tuple (points, factors): (N, 3) array of x, y, z and (N,) array of factors.

    Raises:
        ValueError: If the two angle arrays differ in shape.
    """
    lat = wrap_angles(latitudes, LATITUDE_PERIOD)
    lon = wrap_angles(longitudes, LONGITUDE_PERIOD)
    if lat.shape != lon.shape:
        raise ValueError(f"Expected matching shapes, got {lat.shape} and {lon.shape}.")

    lat_rad = np.radians(lat)
    lon_rad = np.radians(lon)
    sin_lat = np.sin(lat_rad)

    points = np.column_stack((
        radius * sin_lat * np.cos(lon_rad),
        radius * np.cos(lat_rad),
        -radius * sin_lat * np.sin(lon_rad),
    )).reshape(-1, 3)

    turns = lon / 180.0
    factors = np.select(
        [lon <= 90.0, lon >= 270.0],
        [turns + 0.5, turns - 1.5],
        default=-turns + 1.5,
    )
    return points, np.maximum(factors, min_factor)
