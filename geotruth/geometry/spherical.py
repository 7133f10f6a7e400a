"""
Spherical Earth Geometry
========================

Geographic coordinates on a spherical Earth, their 3-D Cartesian
representation on the rendered globe, and great-circle (geodesic)
distance and interpolation.

Globe convention
----------------
X+ points at (lat 0, lon 0), Y+ at the North Pole, and longitude is
negated before use so that east appears to the right when looking at
the prime meridian from outside the sphere::

    x = r cos(lat) cos(-lon)
    y = r sin(lat)
    z = r cos(lat) sin(-lon)

All calculations are pure functions of their arguments.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import List, Tuple, Union

import numpy as np

from geotruth.utils.constants import EARTH_RADIUS_KM, GLOBE_RADIUS

logger = logging.getLogger(__name__)

# Below this central angle (radians) two points are treated as identical
_COINCIDENT_EPS = 1e-12


# =============================================================================
# Geographic Coordinates
# =============================================================================

def normalize_longitude(lon_deg):
    """
    Wrap longitude into [-180, 180).

    Parameters
    ----------
    lon_deg : float or array_like
        Longitude in degrees, any value

    Returns
    -------
    lon : float or ndarray
        Equivalent longitude in [-180, 180)
    """
    lon = np.mod(np.asarray(lon_deg, dtype=float) + 180.0, 360.0) - 180.0
    # np.mod can round up to exactly 360 for tiny negative inputs
    lon = np.where(lon >= 180.0, lon - 360.0, lon)
    if lon.ndim == 0:
        return float(lon)
    return lon


def clamp_latitude(lat_deg):
    """Clamp latitude into [-90, 90]."""
    lat = np.clip(np.asarray(lat_deg, dtype=float), -90.0, 90.0)
    if lat.ndim == 0:
        return float(lat)
    return lat


@dataclass(frozen=True)
class GeoCoordinate:
    """
    Immutable geographic position.

    Longitude is circular and always normalised into [-180, 180);
    latitude outside [-90, 90] is clamped to the nearest pole.

    Attributes
    ----------
    lat : float
        Latitude in degrees
    lon : float
        Longitude in degrees
    """
    lat: float
    lon: float

    def __post_init__(self):
        if not (np.isfinite(self.lat) and np.isfinite(self.lon)):
            raise ValueError(
                f"Coordinates must be finite. Got lat={self.lat}, lon={self.lon}"
            )
        object.__setattr__(self, "lat", clamp_latitude(self.lat))
        object.__setattr__(self, "lon", normalize_longitude(self.lon))

    def as_lonlat(self) -> Tuple[float, float]:
        """(lon, lat) pair in GeoJSON order."""
        return self.lon, self.lat

    def isclose(self, other: "GeoCoordinate", atol: float = 1e-9) -> bool:
        """Compare positions, treating longitudes as circular and poles as single points."""
        if abs(self.lat - other.lat) > atol:
            return False
        if abs(abs(self.lat) - 90.0) <= atol:
            return True
        dlon = abs(normalize_longitude(self.lon - other.lon))
        return dlon <= atol


# =============================================================================
# Cartesian Conversion
# =============================================================================

def lat_lon_to_cartesian(lat_deg, lon_deg, radius: float = GLOBE_RADIUS) -> np.ndarray:
    """
    Convert latitude/longitude to globe Cartesian coordinates.

    Parameters
    ----------
    lat_deg : float or array_like
        Latitude in degrees
    lon_deg : float or array_like
        Longitude in degrees
    radius : float
        Sphere radius (scene units)

    Returns
    -------
    xyz : ndarray
        Array of shape (..., 3)
    """
    if radius <= 0:
        raise ValueError(f"Sphere radius must be positive. Got {radius}")

    lat = np.radians(lat_deg)
    lon = -np.radians(lon_deg)

    x = radius * np.cos(lat) * np.cos(lon)
    y = radius * np.sin(lat)
    z = radius * np.cos(lat) * np.sin(lon)

    return np.stack([x, y, z], axis=-1)


def to_cartesian(coord: GeoCoordinate, radius: float = GLOBE_RADIUS) -> Tuple[float, float, float]:
    """Map a coordinate onto a sphere of the given radius (globe convention)."""
    x, y, z = lat_lon_to_cartesian(coord.lat, coord.lon, radius)
    return float(x), float(y), float(z)


def from_cartesian(x: float, y: float, z: float) -> GeoCoordinate:
    """
    Inverse of `to_cartesian` for a point at any distance from the centre.

    Raises
    ------
    ValueError
        If the point is the origin (direction undefined)
    """
    r = np.sqrt(x * x + y * y + z * z)
    if r == 0:
        raise ValueError("Cannot convert the origin to a geographic coordinate")

    lat = np.degrees(np.arcsin(np.clip(y / r, -1.0, 1.0)))
    lon = -np.degrees(np.arctan2(z, x))

    return GeoCoordinate(float(lat), float(lon))


def _unit_vector(coord: GeoCoordinate) -> np.ndarray:
    """Unit vector in the right-handed geographic frame (Z+ = North Pole)."""
    lat = np.radians(coord.lat)
    lon = np.radians(coord.lon)
    return np.array([
        np.cos(lat) * np.cos(lon),
        np.cos(lat) * np.sin(lon),
        np.sin(lat),
    ])


def _from_unit_vector(v: np.ndarray) -> GeoCoordinate:
    lat = np.degrees(np.arctan2(v[2], np.hypot(v[0], v[1])))
    lon = np.degrees(np.arctan2(v[1], v[0]))
    return GeoCoordinate(float(lat), float(lon))


# =============================================================================
# Great-Circle Distance
# =============================================================================

def central_angle(start: GeoCoordinate, end: GeoCoordinate) -> float:
    """
    Angular separation of two points on the sphere (haversine formula).

    Returns
    -------
    angle : float
        Central angle in radians, in [0, pi]
    """
    lat1 = np.radians(start.lat)
    lat2 = np.radians(end.lat)
    dlat = np.radians(end.lat - start.lat)
    dlon = np.radians(end.lon - start.lon)

    h = (np.sin(dlat / 2) ** 2
         + np.cos(lat1) * np.cos(lat2) * np.sin(dlon / 2) ** 2)
    h = np.clip(h, 0.0, 1.0)

    return float(2 * np.arctan2(np.sqrt(h), np.sqrt(1 - h)))


def haversine_distance_km(
    start: GeoCoordinate,
    end: GeoCoordinate,
    earth_radius: float = EARTH_RADIUS_KM,
) -> float:
    """
    Great-circle distance between two points.

    Parameters
    ----------
    start, end : GeoCoordinate
        End points
    earth_radius : float
        Sphere radius in km (mean Earth radius by default)

    Returns
    -------
    distance : float
        Distance in km; symmetric, zero for identical points and
        pi * R for antipodal points
    """
    return earth_radius * central_angle(start, end)


# =============================================================================
# Great-Circle Interpolation
# =============================================================================

class GreatCirclePath(Sequence):
    """
    Evenly spaced points along the minor great-circle arc between two points.

    The path is lazy: points are computed by spherical linear
    interpolation (slerp) on access, so it can be indexed, iterated
    any number of times and sliced without materialising all points.
    Index 0 is exactly ``start`` and index ``n`` exactly ``end``.

    Parameters
    ----------
    start, end : GeoCoordinate
        Arc end points
    n : int
        Number of intervals; the path holds ``n + 1`` points

    Notes
    -----
    For antipodal end points the great circle is not unique. The path
    then follows an arbitrary but deterministic half circle (through
    the pole-ward perpendicular of ``start``); callers that care about
    the route should avoid antipodal input.
    """

    def __init__(self, start: GeoCoordinate, end: GeoCoordinate, n: int = 100):
        if n < 1:
            raise ValueError(f"Number of intervals must be at least 1. Got {n}")

        self.start = start
        self.end = end
        self.n = int(n)

        self._a = _unit_vector(start)
        b = _unit_vector(end)

        cross = np.cross(self._a, b)
        self.angle = float(np.arctan2(np.linalg.norm(cross), np.dot(self._a, b)))

        self.is_degenerate = self.angle < _COINCIDENT_EPS
        self.is_antipodal = np.pi - self.angle < 1e-9

        if self.is_antipodal:
            logger.debug("Antipodal great circle requested, picking arbitrary route")
            axis = np.array([0.0, 0.0, 1.0])
            if abs(np.dot(axis, self._a)) > 0.9:
                axis = np.array([1.0, 0.0, 0.0])
            perp = np.cross(np.cross(self._a, axis), self._a)
            self._perp = perp / np.linalg.norm(perp)
        else:
            self._b = b

    def __len__(self) -> int:
        return self.n + 1

    def __getitem__(self, index: Union[int, slice]):
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(len(self)))]

        if index < 0:
            index += len(self)
        if not 0 <= index <= self.n:
            raise IndexError("great-circle path index out of range")

        if index == 0:
            return self.start
        if index == self.n:
            return self.end
        if self.is_degenerate:
            return self.start

        f = index / self.n

        if self.is_antipodal:
            theta = f * np.pi
            v = np.cos(theta) * self._a + np.sin(theta) * self._perp
            return _from_unit_vector(v)

        sin_d = np.sin(self.angle)
        A = np.sin((1 - f) * self.angle) / sin_d
        B = np.sin(f * self.angle) / sin_d

        return _from_unit_vector(A * self._a + B * self._b)

    def __repr__(self) -> str:
        return (f"GreatCirclePath(start={self.start!r}, end={self.end!r}, "
                f"n={self.n})")

    def to_list(self) -> List[GeoCoordinate]:
        """Materialise all points."""
        return list(self)


def interpolate_great_circle(
    start: GeoCoordinate,
    end: GeoCoordinate,
    n: int = 100,
) -> GreatCirclePath:
    """
    Great-circle path of ``n + 1`` points from ``start`` to ``end``.

    Identical end points give ``n + 1`` copies of ``start``.
    See `GreatCirclePath` for the antipodal case.
    """
    return GreatCirclePath(start, end, n)
