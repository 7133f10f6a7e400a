"""
Astronomy Module
================

Sun-Earth geometry driven by the simulated clock.

solar
    Declination, subsolar point, terminator, day/night classification
orbit
    Kepler solution for Earth's true anomaly and Earth-Sun distance
"""

from geotruth.astronomy.solar import (
    SolarState,
    solar_declination,
    subsolar_longitude,
    subsolar_point,
    solar_state,
    terminator,
    is_daylight,
    solar_elevation,
    sun_direction,
    season,
    noon_insolation,
    night_polygon,
)

from geotruth.astronomy.orbit import (
    OrbitalState,
    mean_anomaly,
    solve_kepler,
    true_anomaly_from_eccentric,
    orbital_radius,
    orbital_state,
    orbital_angle,
    earth_sun_distance,
    earth_orbital_position,
    orbit_path,
    season_markers,
)

__all__ = [
    # Solar geometry
    "SolarState",
    "solar_declination",
    "subsolar_longitude",
    "subsolar_point",
    "solar_state",
    "terminator",
    "is_daylight",
    "solar_elevation",
    "sun_direction",
    "season",
    "noon_insolation",
    "night_polygon",
    # Orbit
    "OrbitalState",
    "mean_anomaly",
    "solve_kepler",
    "true_anomaly_from_eccentric",
    "orbital_radius",
    "orbital_state",
    "orbital_angle",
    "earth_sun_distance",
    "earth_orbital_position",
    "orbit_path",
    "season_markers",
]
