"""
Application State
=================

Explicit state owned by the application root and passed to the views:
the simulated instant, animation settings and the list of user-drawn
lines. The geometry and astronomy functions never touch this object;
views read from it and call them with plain values.

There must be a single writer: one animation driver calling `tick`
per rendered frame.
"""

import logging
import uuid
from dataclasses import dataclass, field
from typing import List, Optional

from geotruth.core.clock import SimulatedInstant, advance_time
from geotruth.geometry.paths import LineSegment
from geotruth.geometry.projections import ProjectionType
from geotruth.geometry.spherical import GeoCoordinate

logger = logging.getLogger(__name__)


@dataclass
class GeoTruthState:
    """
    Mutable state of the visualizer.

    Attributes
    ----------
    instant : SimulatedInstant
        Current simulated time
    animation_speed : float
        Simulated hours per real second
    is_animating : bool
        Whether `tick` advances the clock
    lines : list of LineSegment
        User-drawn lines in creation order
    """
    instant: SimulatedInstant = field(default_factory=SimulatedInstant)
    animation_speed: float = 1.0
    is_animating: bool = False
    lines: List[LineSegment] = field(default_factory=list)

    # -------------------------------------------------------------------------
    # Time
    # -------------------------------------------------------------------------

    def set_day_of_year(self, day: int) -> None:
        self.instant = SimulatedInstant(day, self.instant.hour_of_day)

    def set_hour_of_day(self, hour: float) -> None:
        self.instant = SimulatedInstant(self.instant.day_of_year, hour)

    def toggle_animation(self) -> bool:
        self.is_animating = not self.is_animating
        return self.is_animating

    def tick(self, delta_seconds: float) -> SimulatedInstant:
        """Advance the clock by one frame if animation is enabled."""
        if self.is_animating and delta_seconds > 0:
            self.instant = advance_time(self.instant, delta_seconds, self.animation_speed)
        return self.instant

    # -------------------------------------------------------------------------
    # Lines
    # -------------------------------------------------------------------------

    def add_line(
        self,
        start: GeoCoordinate,
        end: GeoCoordinate,
        source_projection: ProjectionType,
    ) -> LineSegment:
        """Create a line with a fresh id; its distance is fixed at creation."""
        line = LineSegment(
            start=start,
            end=end,
            source_projection=source_projection,
            line_id=uuid.uuid4().hex[:8],
        )
        self.lines.append(line)
        logger.debug(
            f"Added line {line.line_id} on {line.source_projection.value}: "
            f"{line.distance_km:.1f} km"
        )
        return line

    def get_line(self, line_id: str) -> Optional[LineSegment]:
        for line in self.lines:
            if line.line_id == line_id:
                return line
        return None

    def remove_line(self, line_id: str) -> LineSegment:
        """
        Delete a line.

        Raises
        ------
        KeyError
            If no line has this id
        """
        for i, line in enumerate(self.lines):
            if line.line_id == line_id:
                return self.lines.pop(i)
        raise KeyError(f"No line with id {line_id}")

    def clear_lines(self) -> None:
        self.lines.clear()
