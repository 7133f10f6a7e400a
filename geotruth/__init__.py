"""
GeoTruth: geometry for comparing a spherical Earth with flat-Earth maps.

Computes what a synchronized multi-view Earth visualizer shows: where a
point sits on the globe, on a Mercator map and on the north-polar
azimuthal equidistant "flat Earth" disc; how a line drawn in one of those
views looks in the others; and where the Sun and the Earth are for a
simulated day and hour.

Modules
-------
geometry
    Coordinate conversion, projections, great circles, line re-projection
astronomy
    Solar declination, subsolar point, terminator, Kepler orbit
core
    Simulated clock and application state (time, animation, drawn lines)
config
    Visualizer configuration from dicts, JSON or YAML
visualization
    Matplotlib renderings of the views
utils
    Physical and rendering constants
"""

__version__ = "0.1.0"
__author__ = "GeoTruth Contributors"

from geotruth.geometry import (
    GeoCoordinate,
    GreatCirclePath,
    LineSegment,
    ProjectionType,
    haversine_distance_km,
    project,
    reproject_line,
    unproject,
)
from geotruth.astronomy import (
    orbital_state,
    solar_state,
    terminator,
)
from geotruth.core import GeoTruthState, SimulatedInstant

__all__ = [
    "__version__",
    "GeoCoordinate",
    "GreatCirclePath",
    "LineSegment",
    "ProjectionType",
    "haversine_distance_km",
    "project",
    "reproject_line",
    "unproject",
    "orbital_state",
    "solar_state",
    "terminator",
    "GeoTruthState",
    "SimulatedInstant",
]
