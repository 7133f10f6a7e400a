"""
Shared constants.

Constants
---------
EARTH_RADIUS_KM : float
    Mean Earth radius (km)
AXIAL_TILT_DEG : float
    Obliquity used by the declination model (deg)
SEMI_MAJOR_AXIS : float
    Semi-major axis of Earth's orbit (million km)
ECCENTRICITY : float
    Orbital eccentricity derived from perihelion/aphelion distances
MERCATOR_MAX_LATITUDE : float
    Latitude beyond which Mercator input is clamped (deg)
"""

from geotruth.utils.constants import (
    EARTH_RADIUS_KM,
    AXIAL_TILT_DEG,
    AXIAL_TILT,
    DAYS_PER_YEAR,
    HOURS_PER_DAY,
    PERIHELION_DISTANCE,
    APHELION_DISTANCE,
    SEMI_MAJOR_AXIS,
    ECCENTRICITY,
    PERIHELION_DAY,
    MERCATOR_MAX_LATITUDE,
    AZIMUTHAL_DISC_RADIUS,
    SEASON_MARKER_DAYS,
)

__all__ = [
    "EARTH_RADIUS_KM",
    "AXIAL_TILT_DEG",
    "AXIAL_TILT",
    "DAYS_PER_YEAR",
    "HOURS_PER_DAY",
    "PERIHELION_DISTANCE",
    "APHELION_DISTANCE",
    "SEMI_MAJOR_AXIS",
    "ECCENTRICITY",
    "PERIHELION_DAY",
    "MERCATOR_MAX_LATITUDE",
    "AZIMUTHAL_DISC_RADIUS",
    "SEASON_MARKER_DAYS",
]
