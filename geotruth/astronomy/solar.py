"""
Solar Geometry
==============

Position of the Sun relative to the Earth for a simulated instant:
declination, subsolar point, terminator (day/night boundary), day/night
classification, and the derived quantities the views display.

The declination model is the sinusoidal approximation

    decl = 23.5 deg * sin(2 pi / 365 * (day - 81))

which places the equinoxes near days 81 and 263 and the solstices near
days 172 and 355. It assumes circular-orbit timing and is meant for
visualisation, not ephemeris-grade accuracy.

References
----------
- Cooper, P.I. (1969). The absorption of radiation in solar stills.
  Solar Energy 12(3), 333-346.
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

import numpy as np

from geotruth.core.clock import SimulatedInstant, wrap_day_of_year
from geotruth.geometry.spherical import (
    GeoCoordinate,
    central_angle,
    normalize_longitude,
    to_cartesian,
)
from geotruth.utils.constants import (
    AUTUMN_START_DAY,
    AXIAL_TILT_DEG,
    DAYS_PER_YEAR,
    DEGREES_PER_HOUR,
    MARCH_EQUINOX_DAY,
    SPRING_START_DAY,
    SUMMER_START_DAY,
    WINTER_START_DAY,
)


@dataclass(frozen=True)
class SolarState:
    """
    Derived solar quantities for one instant.

    Attributes
    ----------
    declination_deg : float
        Solar declination in degrees
    subsolar_point : GeoCoordinate
        Point where the Sun is at the zenith
    """
    declination_deg: float
    subsolar_point: GeoCoordinate


def solar_declination(day_of_year: int) -> float:
    """
    Solar declination for a day of the year.

    Parameters
    ----------
    day_of_year : int
        Day number, wrapped into 1..365

    Returns
    -------
    declination : float
        Declination in degrees, within +/-23.5
    """
    day = wrap_day_of_year(day_of_year)
    return float(AXIAL_TILT_DEG * np.sin(2 * np.pi / DAYS_PER_YEAR * (day - MARCH_EQUINOX_DAY)))


def subsolar_longitude(hour_of_day: float) -> float:
    """Longitude of the subsolar point: 0 at 12:00 UTC, moving 15 deg/h westward."""
    return normalize_longitude(-DEGREES_PER_HOUR * (hour_of_day - 12.0))


def subsolar_point(instant: SimulatedInstant) -> GeoCoordinate:
    """Point on Earth where the Sun is directly overhead."""
    return GeoCoordinate(
        solar_declination(instant.day_of_year),
        subsolar_longitude(instant.hour_of_day),
    )


def solar_state(instant: SimulatedInstant) -> SolarState:
    """Declination and subsolar point together."""
    point = subsolar_point(instant)
    return SolarState(declination_deg=point.lat, subsolar_point=point)


def terminator(instant: SimulatedInstant, n: int = 360) -> np.ndarray:
    """
    Day/night boundary: the great circle 90 deg away from the subsolar point.

    Parameters
    ----------
    instant : SimulatedInstant
        Simulated time
    n : int
        Number of intervals; ``n + 1`` points are returned

    Returns
    -------
    ring : ndarray
        Shape (n + 1, 2) with columns (lon, lat) in degrees, walking the
        azimuth around the subsolar point from 0 to 2 pi. The ring is
        closed: the last point repeats the first.
    """
    if n < 1:
        raise ValueError(f"Number of intervals must be at least 1. Got {n}")

    sun = subsolar_point(instant)
    lat0 = np.radians(sun.lat)
    lon0 = np.radians(sun.lon)

    azimuth = np.linspace(0.0, 2 * np.pi, n + 1)

    # Destination at angular distance 90 deg: cos(d) = 0, sin(d) = 1
    lat = np.arcsin(np.clip(np.cos(lat0) * np.cos(azimuth), -1.0, 1.0))
    lon = lon0 + np.arctan2(
        np.sin(azimuth) * np.cos(lat0),
        -np.sin(lat0) * np.sin(lat),
    )

    ring = np.column_stack([normalize_longitude(np.degrees(lon)), np.degrees(lat)])
    ring[-1] = ring[0]
    return ring


def is_daylight(coord: GeoCoordinate, instant: SimulatedInstant) -> bool:
    """True when the Sun is above the horizon (within 90 deg of the subsolar point)."""
    return central_angle(coord, subsolar_point(instant)) < np.pi / 2


def solar_elevation(coord: GeoCoordinate, instant: SimulatedInstant) -> float:
    """Geometric elevation of the Sun above the horizon in degrees (negative at night)."""
    return float(90.0 - np.degrees(central_angle(coord, subsolar_point(instant))))


def sun_direction(instant: SimulatedInstant) -> Tuple[float, float, float]:
    """Unit vector from the Earth's centre towards the Sun, in globe coordinates."""
    return to_cartesian(subsolar_point(instant), 1.0)


def season(day_of_year: int) -> str:
    """
    Northern Hemisphere season for a day of the year.

    Spring [80, 172), Summer [172, 266), Autumn [266, 355), Winter otherwise.
    """
    day = wrap_day_of_year(day_of_year)
    if SPRING_START_DAY <= day < SUMMER_START_DAY:
        return "Spring"
    if SUMMER_START_DAY <= day < AUTUMN_START_DAY:
        return "Summer"
    if AUTUMN_START_DAY <= day < WINTER_START_DAY:
        return "Autumn"
    return "Winter"


def noon_insolation(latitude_deg, day_of_year: int):
    """
    Relative intensity of sunlight at local noon.

    ``max(0, cos(lat - declination))``: 1 where the noon Sun is at the
    zenith, 0 where it does not rise above the horizon.

    Parameters
    ----------
    latitude_deg : float or array_like
        Latitude in degrees
    day_of_year : int
        Day number

    Returns
    -------
    intensity : float or ndarray
        Values in [0, 1]
    """
    delta = np.radians(np.asarray(latitude_deg, dtype=float) - solar_declination(day_of_year))
    intensity = np.maximum(0.0, np.cos(delta))
    if intensity.ndim == 0:
        return float(intensity)
    return intensity


def night_polygon(instant: SimulatedInstant, n: int = 180) -> Dict[str, Any]:
    """
    GeoJSON polygon covering the night side, for shading 2-D maps.

    The terminator is ordered by longitude and closed along the map
    edges through the pole that is in darkness (South Pole while the
    subsolar point is north of the equator, North Pole otherwise).

    Returns
    -------
    feature : dict
        GeoJSON ``Feature`` with a single closed ``Polygon`` ring
    """
    sun = subsolar_point(instant)
    ring = terminator(instant, n)[:-1]
    ring = ring[np.argsort(ring[:, 0], kind="stable")]

    dark_pole = -90.0 if sun.lat > 0 else 90.0

    coordinates = [[-180.0, float(ring[0, 1])]]
    coordinates.extend([float(lon), float(lat)] for lon, lat in ring)
    coordinates.append([180.0, float(ring[-1, 1])])
    coordinates.append([180.0, dark_pole])
    coordinates.append([-180.0, dark_pole])
    coordinates.append(list(coordinates[0]))

    return {
        "type": "Feature",
        "properties": {},
        "geometry": {
            "type": "Polygon",
            "coordinates": [coordinates],
        },
    }
