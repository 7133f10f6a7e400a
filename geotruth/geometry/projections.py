"""
Map Projections
===============

Forward and inverse projections between geographic coordinates and the
plane (or globe) space of each view:

- ``MERCATOR``: cylindrical conformal projection, x = lon, y = ln tan(pi/4 + lat/2)
- ``AZIMUTHAL``: azimuthal equidistant projection centred on the North
  Pole, the "flat Earth" map; radius = colatitude, angle = longitude
- ``SPHERE``: the 3-D globe (see `geotruth.geometry.spherical`)

Plane coordinates are in radians of arc on a unit sphere with y pointing
north (Mercator) or towards lon 180 (azimuthal); views apply their own
pixel scale and translation.

Inverse projections return ``None`` for points outside the image of the
forward projection instead of extrapolating.
"""

import logging
from enum import Enum
from typing import Optional, Sequence, Tuple

import numpy as np

from geotruth.geometry.spherical import (
    GeoCoordinate,
    from_cartesian,
    lat_lon_to_cartesian,
)
from geotruth.utils.constants import (
    AZIMUTHAL_DISC_RADIUS,
    GLOBE_RADIUS,
    MERCATOR_MAX_LATITUDE,
)

logger = logging.getLogger(__name__)

# Slack for points sitting on the boundary of a projection image
_BOUNDARY_TOL = 1e-9


class ProjectionType(Enum):
    """View in which a line is drawn or rendered."""
    SPHERE = "sphere"
    MERCATOR = "mercator"
    AZIMUTHAL = "azimuthal"

    @classmethod
    def from_name(cls, name) -> "ProjectionType":
        """Parse a projection name (``globe`` is accepted for the sphere)."""
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower()
        if key == "globe":
            key = "sphere"
        for member in cls:
            if member.value == key:
                return member
        raise ValueError(
            f"Unknown projection: {name}. Use 'sphere', 'mercator' or 'azimuthal'"
        )

    @property
    def is_planar(self) -> bool:
        return self is not ProjectionType.SPHERE


# =============================================================================
# Mercator
# =============================================================================

def mercator_xy(lat_deg, lon_deg, max_latitude: float = MERCATOR_MAX_LATITUDE) -> np.ndarray:
    """
    Vectorised Mercator forward projection.

    Latitudes beyond ``max_latitude`` are clamped, since y diverges at
    the poles.

    Returns
    -------
    xy : ndarray
        Array of shape (..., 2)
    """
    lat = np.clip(np.asarray(lat_deg, dtype=float), -max_latitude, max_latitude)
    x = np.radians(lon_deg)
    y = np.log(np.tan(np.pi / 4 + np.radians(lat) / 2))
    return np.stack([x, y], axis=-1)


def to_mercator(
    coord: GeoCoordinate,
    max_latitude: float = MERCATOR_MAX_LATITUDE,
) -> Tuple[float, float]:
    """Project a coordinate onto the Mercator plane (latitude clamped)."""
    if abs(coord.lat) > max_latitude:
        logger.debug(f"Clamping latitude {coord.lat:.4f} for Mercator")
    x, y = mercator_xy(coord.lat, coord.lon, max_latitude)
    return float(x), float(y)


def mercator_y_limit(max_latitude: float = MERCATOR_MAX_LATITUDE) -> float:
    """Largest |y| produced by the clamped forward projection."""
    return float(np.log(np.tan(np.pi / 4 + np.radians(max_latitude) / 2)))


def from_mercator(
    x: float,
    y: float,
    max_latitude: float = MERCATOR_MAX_LATITUDE,
) -> Optional[GeoCoordinate]:
    """
    Inverse Mercator projection.

    Returns
    -------
    coord : GeoCoordinate or None
        None when (x, y) lies outside the map rectangle
    """
    if not (np.isfinite(x) and np.isfinite(y)):
        return None
    if abs(x) > np.pi + _BOUNDARY_TOL:
        return None
    if abs(y) > mercator_y_limit(max_latitude) + _BOUNDARY_TOL:
        return None

    lat = np.degrees(2 * np.arctan(np.exp(y)) - np.pi / 2)
    lon = np.degrees(x)
    return GeoCoordinate(float(lat), float(lon))


# =============================================================================
# Azimuthal Equidistant (North Pole centred)
# =============================================================================

def azimuthal_xy(lat_deg, lon_deg) -> np.ndarray:
    """
    Vectorised north-polar azimuthal equidistant forward projection.

    Notes
    -----
    The South Pole maps onto the whole boundary circle of radius pi
    (one point per longitude), not onto a single point. This stretching
    of the southern hemisphere is inherent to the flat-Earth map.

    Returns
    -------
    xy : ndarray
        Array of shape (..., 2)
    """
    rho = np.radians(90.0 - np.asarray(lat_deg, dtype=float))
    theta = np.radians(lon_deg)
    x = rho * np.sin(theta)
    y = -rho * np.cos(theta)
    return np.stack([x, y], axis=-1)


def to_azimuthal_equidistant(coord: GeoCoordinate) -> Tuple[float, float]:
    """Project a coordinate onto the flat-Earth disc."""
    x, y = azimuthal_xy(coord.lat, coord.lon)
    return float(x), float(y)


def from_azimuthal_equidistant(x: float, y: float) -> Optional[GeoCoordinate]:
    """
    Inverse azimuthal equidistant projection.

    Returns
    -------
    coord : GeoCoordinate or None
        None for points outside the disc of radius pi
    """
    if not (np.isfinite(x) and np.isfinite(y)):
        return None

    rho = np.hypot(x, y)
    if rho > AZIMUTHAL_DISC_RADIUS + _BOUNDARY_TOL:
        return None
    if rho == 0:
        return GeoCoordinate(90.0, 0.0)

    rho = min(rho, AZIMUTHAL_DISC_RADIUS)
    lat = 90.0 - np.degrees(rho)
    lon = np.degrees(np.arctan2(x, -y))
    return GeoCoordinate(float(lat), float(lon))


# =============================================================================
# Dispatch
# =============================================================================

def project_points(
    lat_deg,
    lon_deg,
    projection: ProjectionType,
    radius: float = GLOBE_RADIUS,
    max_latitude: float = MERCATOR_MAX_LATITUDE,
) -> np.ndarray:
    """
    Project arrays of latitudes/longitudes into a view's space.

    Returns
    -------
    points : ndarray
        Shape (..., 2) for planar views, (..., 3) for the sphere
    """
    projection = ProjectionType.from_name(projection)
    if projection is ProjectionType.MERCATOR:
        return mercator_xy(lat_deg, lon_deg, max_latitude)
    if projection is ProjectionType.AZIMUTHAL:
        return azimuthal_xy(lat_deg, lon_deg)
    return lat_lon_to_cartesian(lat_deg, lon_deg, radius)


def project(
    coord: GeoCoordinate,
    projection: ProjectionType,
    radius: float = GLOBE_RADIUS,
    max_latitude: float = MERCATOR_MAX_LATITUDE,
) -> np.ndarray:
    """Project a single coordinate into a view's space."""
    return project_points(coord.lat, coord.lon, projection, radius, max_latitude)


def unproject(
    point: Sequence[float],
    projection: ProjectionType,
    max_latitude: float = MERCATOR_MAX_LATITUDE,
) -> Optional[GeoCoordinate]:
    """
    Map a point in a view's space back to a geographic coordinate.

    Returns None when the point has no geographic pre-image.
    """
    projection = ProjectionType.from_name(projection)
    if projection is ProjectionType.MERCATOR:
        return from_mercator(point[0], point[1], max_latitude)
    if projection is ProjectionType.AZIMUTHAL:
        return from_azimuthal_equidistant(point[0], point[1])

    x, y, z = point
    if not np.all(np.isfinite([x, y, z])) or (x == 0 and y == 0 and z == 0):
        return None
    return from_cartesian(x, y, z)


def visible_width(projection: ProjectionType) -> Optional[float]:
    """
    Horizontal extent of a planar view in projection units.

    Both maps are 2*pi wide: the Mercator rectangle spans lon -180..180,
    the azimuthal disc has radius pi. None for the globe.
    """
    projection = ProjectionType.from_name(projection)
    if projection is ProjectionType.SPHERE:
        return None
    return 2 * np.pi
