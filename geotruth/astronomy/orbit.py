"""
Orbital Mechanics
=================

Earth's position on its elliptical orbit for a day of the year, from
Kepler's equation:

    M = 2 pi (day - perihelion_day) / 365.25       (mean anomaly)
    E = M + e sin(E)                               (eccentric anomaly)
    nu = 2 atan2(sqrt(1+e) sin(E/2), sqrt(1-e) cos(E/2))   (true anomaly)
    r = a (1 - e^2) / (1 + e cos(nu))              (orbit equation)

with a = 149.6 million km and e = 0.0167 derived from the perihelion
(147.1) and aphelion (152.1) distances. Angle and distance are computed
from one shared true anomaly, so they always describe the same point.

This is independent of the sinusoidal declination model in
`geotruth.astronomy.solar`; the two approximations are not reconciled.

References
----------
- Meeus, J. (1998). Astronomical Algorithms, 2nd ed., ch. 30.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

import numpy as np

from geotruth.core.clock import wrap_day_of_year
from geotruth.utils.constants import (
    ANOMALISTIC_YEAR_DAYS,
    ECCENTRICITY,
    KEPLER_ITERATIONS,
    ORBIT_SCALE,
    PERIHELION_DAY,
    SEASON_MARKER_DAYS,
    SEMI_MAJOR_AXIS,
)


@dataclass(frozen=True)
class OrbitalState:
    """
    Earth's orbital position for one day.

    Attributes
    ----------
    true_anomaly : float
        Angle from perihelion in radians, in (-pi, pi]
    distance_million_km : float
        Earth-Sun distance in millions of km
    """
    true_anomaly: float
    distance_million_km: float


def mean_anomaly(day_of_year: float) -> float:
    """Mean anomaly in radians for a (possibly fractional) day of the year."""
    return 2 * np.pi * (day_of_year - PERIHELION_DAY) / ANOMALISTIC_YEAR_DAYS


def solve_kepler(
    mean_anomaly_rad: float,
    eccentricity: float = ECCENTRICITY,
    iterations: int = KEPLER_ITERATIONS,
) -> float:
    """
    Solve Kepler's equation E = M + e sin(E) by fixed-point iteration.

    The iteration contracts by a factor e per step, so ten steps
    leave an error below e**10 ~ 1e-18 for Earth's orbit.

    Returns
    -------
    E : float
        Eccentric anomaly in radians
    """
    E = mean_anomaly_rad
    for _ in range(iterations):
        E = mean_anomaly_rad + eccentricity * np.sin(E)
    return float(E)


def true_anomaly_from_eccentric(E: float, eccentricity: float = ECCENTRICITY) -> float:
    """Half-angle conversion from eccentric to true anomaly (radians)."""
    return float(2 * np.arctan2(
        np.sqrt(1 + eccentricity) * np.sin(E / 2),
        np.sqrt(1 - eccentricity) * np.cos(E / 2),
    ))


def orbital_radius(true_anomaly_rad: float) -> float:
    """Orbit equation: Earth-Sun distance (million km) at a true anomaly."""
    return float(SEMI_MAJOR_AXIS * (1 - ECCENTRICITY**2)
                 / (1 + ECCENTRICITY * np.cos(true_anomaly_rad)))


def orbital_state(day_of_year: int) -> OrbitalState:
    """
    True anomaly and distance computed together from one Kepler solution.

    Parameters
    ----------
    day_of_year : int
        Day number, wrapped into 1..365
    """
    day = wrap_day_of_year(day_of_year)
    E = solve_kepler(mean_anomaly(day))
    nu = true_anomaly_from_eccentric(E)
    return OrbitalState(true_anomaly=nu, distance_million_km=orbital_radius(nu))


def orbital_angle(day_of_year: int) -> float:
    """True anomaly of the Earth (radians from perihelion)."""
    return orbital_state(day_of_year).true_anomaly


def earth_sun_distance(day_of_year: int) -> float:
    """
    Earth-Sun distance in millions of km.

    About 147.1 at perihelion (day 3) and 152.1 at aphelion (day ~186).
    """
    return orbital_state(day_of_year).distance_million_km


# =============================================================================
# Scene placement for the orbital view
# =============================================================================

def earth_orbital_position(
    day_of_year: int,
    orbit_scale: float = ORBIT_SCALE,
) -> Tuple[float, float, float]:
    """
    Earth's position in the solar-system scene (Sun at the origin).

    The orbit lies in the x-z plane with perihelion on +x; distances are
    scaled so that the semi-major axis is ``orbit_scale`` scene units.
    """
    state = orbital_state(day_of_year)
    r = state.distance_million_km / SEMI_MAJOR_AXIS * orbit_scale
    return (float(np.cos(state.true_anomaly) * r),
            0.0,
            float(np.sin(state.true_anomaly) * r))


def orbit_path(n: int = 128, orbit_scale: float = ORBIT_SCALE) -> np.ndarray:
    """
    The full orbit ellipse as a closed ring of scene points.

    Returns
    -------
    points : ndarray
        Shape (n + 1, 3), first and last points equal
    """
    if n < 1:
        raise ValueError(f"Number of intervals must be at least 1. Got {n}")

    nu = np.linspace(0.0, 2 * np.pi, n + 1)
    r = SEMI_MAJOR_AXIS * (1 - ECCENTRICITY**2) / (1 + ECCENTRICITY * np.cos(nu))
    r = r / SEMI_MAJOR_AXIS * orbit_scale

    points = np.column_stack([np.cos(nu) * r, np.zeros_like(nu), np.sin(nu) * r])
    points[-1] = points[0]
    return points


def season_markers(orbit_scale: float = ORBIT_SCALE) -> Dict[str, Tuple[float, float, float]]:
    """Scene positions of the equinoxes and solstices on the orbit."""
    return {
        label: earth_orbital_position(day, orbit_scale)
        for label, day in SEASON_MARKER_DAYS.items()
    }
