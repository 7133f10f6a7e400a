"""
Physical and model constants for the spherical/flat Earth comparison.

Distances are in kilometres (or millions of kilometres for the orbit),
angles in degrees unless the name says otherwise.
"""

import numpy as np

# Earth
EARTH_RADIUS_KM = 6371.0  # mean radius
AXIAL_TILT_DEG = 23.5
AXIAL_TILT = np.radians(AXIAL_TILT_DEG)

# Calendar model (non-leap, circular)
DAYS_PER_YEAR = 365
HOURS_PER_DAY = 24.0
DEGREES_PER_HOUR = 15.0  # Earth rotation rate as seen from the Sun
MARCH_EQUINOX_DAY = 81  # zero crossing of the declination model

# Orbit (millions of km)
PERIHELION_DISTANCE = 147.1  # around January 3
APHELION_DISTANCE = 152.1  # around July 4
SEMI_MAJOR_AXIS = (PERIHELION_DISTANCE + APHELION_DISTANCE) / 2
ECCENTRICITY = (APHELION_DISTANCE - PERIHELION_DISTANCE) / (
    APHELION_DISTANCE + PERIHELION_DISTANCE
)  # ~0.0167
PERIHELION_DAY = 3
ANOMALISTIC_YEAR_DAYS = 365.25
KEPLER_ITERATIONS = 10

# Season boundaries (Northern Hemisphere, day of year)
SPRING_START_DAY = 80
SUMMER_START_DAY = 172
AUTUMN_START_DAY = 266
WINTER_START_DAY = 355

SEASON_MARKER_DAYS = {
    "March equinox": SPRING_START_DAY,
    "June solstice": SUMMER_START_DAY,
    "September equinox": AUTUMN_START_DAY,
    "December solstice": WINTER_START_DAY,
}

# Projections
MERCATOR_MAX_LATITUDE = 85.0511287798  # square Web Mercator extent
AZIMUTHAL_DISC_RADIUS = np.pi  # colatitude of the South Pole, radians

# Scene scales used by the 3-D views
GLOBE_RADIUS = 1.0
ORBIT_SCALE = 4.0
