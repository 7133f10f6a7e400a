"""
Core simulation state: the simulated clock and the application state.
"""

from geotruth.core.clock import (
    SimulatedInstant,
    advance_time,
    current_instant,
    wrap_day_of_year,
    DEFAULT_REFERENCE_YEAR,
)
from geotruth.core.state import GeoTruthState

__all__ = [
    "SimulatedInstant",
    "advance_time",
    "current_instant",
    "wrap_day_of_year",
    "DEFAULT_REFERENCE_YEAR",
    "GeoTruthState",
]
