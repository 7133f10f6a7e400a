"""Tests for the application state container."""

import pytest

from geotruth.core.clock import SimulatedInstant
from geotruth.core.state import GeoTruthState
from geotruth.geometry.projections import ProjectionType
from geotruth.geometry.spherical import GeoCoordinate, haversine_distance_km


LONDON = GeoCoordinate(51.5, 0.0)
CAPE_TOWN = GeoCoordinate(-33.9, 18.4)


class TestTimeControls:
    """Tests for clock manipulation."""

    def test_set_day_keeps_hour(self):
        state = GeoTruthState(instant=SimulatedInstant(10, 7.5))
        state.set_day_of_year(200)
        assert state.instant == SimulatedInstant(200, 7.5)

    def test_set_day_wraps(self):
        """Out-of-range days wrap."""
        state = GeoTruthState()
        state.set_day_of_year(400)
        assert state.instant.day_of_year == 35

    def test_set_hour_carries(self):
        """Setting hour 30 moves to the next day."""
        state = GeoTruthState(instant=SimulatedInstant(10, 0.0))
        state.set_hour_of_day(30.0)
        assert state.instant == SimulatedInstant(11, 6.0)

    def test_tick_only_when_animating(self):
        """The clock is frozen unless animation is enabled."""
        state = GeoTruthState(instant=SimulatedInstant(1, 0.0), animation_speed=24.0)
        state.tick(1.0)
        assert state.instant == SimulatedInstant(1, 0.0)

        assert state.toggle_animation() is True
        state.tick(1.0)
        assert state.instant == SimulatedInstant(2, 0.0)

    def test_tick_ignores_nonpositive_delta(self):
        """Zero or negative frame times leave the clock alone."""
        state = GeoTruthState(is_animating=True)
        before = state.instant
        state.tick(0.0)
        state.tick(-0.5)
        assert state.instant == before

    def test_toggle(self):
        state = GeoTruthState()
        assert state.toggle_animation() is True
        assert state.toggle_animation() is False


class TestLines:
    """Tests for user-drawn line management."""

    def test_add_line(self):
        """Lines get an id and a fixed distance."""
        state = GeoTruthState()
        line = state.add_line(LONDON, CAPE_TOWN, "azimuthal")
        assert line.line_id
        assert line.source_projection is ProjectionType.AZIMUTHAL
        assert line.distance_km == haversine_distance_km(LONDON, CAPE_TOWN)
        assert state.lines == [line]

    def test_ids_unique(self):
        state = GeoTruthState()
        ids = {state.add_line(LONDON, CAPE_TOWN, "mercator").line_id for _ in range(20)}
        assert len(ids) == 20

    def test_distance_independent_of_time(self):
        """Changing the clock does not alter line distances."""
        state = GeoTruthState()
        line = state.add_line(LONDON, CAPE_TOWN, "sphere")
        state.set_day_of_year(300)
        assert state.get_line(line.line_id).distance_km == line.distance_km

    def test_remove_line(self):
        state = GeoTruthState()
        keep = state.add_line(LONDON, CAPE_TOWN, "sphere")
        drop = state.add_line(CAPE_TOWN, LONDON, "mercator")
        assert state.remove_line(drop.line_id) is drop
        assert state.lines == [keep]

    def test_remove_unknown_raises(self):
        """Removing a missing id raises KeyError."""
        with pytest.raises(KeyError):
            GeoTruthState().remove_line("nope")

    def test_get_unknown_returns_none(self):
        assert GeoTruthState().get_line("nope") is None

    def test_clear(self):
        state = GeoTruthState()
        state.add_line(LONDON, CAPE_TOWN, "sphere")
        state.clear_lines()
        assert state.lines == []
