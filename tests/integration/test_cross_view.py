"""
Integration tests for the cross-view workflow.

Tests the path from configuration to state to rendered geometry, and
the behaviour of lines drawn in one view and shown in the others.
"""

import numpy as np
import pytest

from geotruth.astronomy import orbital_state, solar_state, terminator
from geotruth.config import ConfigurationManager
from geotruth.geometry import (
    GeoCoordinate,
    LineSegment,
    ProjectionType,
    haversine_distance_km,
    interpolate_great_circle,
    lat_lon_to_cartesian,
    project,
    reproject_line,
    source_path_coordinates,
)


LONDON = GeoCoordinate(51.5, 0.0)
CAPE_TOWN = GeoCoordinate(-33.9, 18.4)


class TestLondonCapeTown:
    """A line from London to Cape Town drawn on the flat-Earth map."""

    @pytest.fixture
    def line(self):
        return LineSegment(LONDON, CAPE_TOWN, ProjectionType.AZIMUTHAL)

    def test_distance_is_haversine(self, line):
        """The label distance is the true great-circle distance."""
        assert abs(line.distance_km - 9660) < 50
        assert line.distance_km == haversine_distance_km(LONDON, CAPE_TOWN)

    def test_distance_independent_of_source(self):
        """Drawing the same end points in any view gives the same distance."""
        distances = {
            LineSegment(LONDON, CAPE_TOWN, projection).distance_km
            for projection in ProjectionType
        }
        assert len(distances) == 1

    def test_globe_path_endpoints(self, line):
        """On the globe the path starts and ends at the cities."""
        polylines = reproject_line(line, ProjectionType.SPHERE, n=100)
        assert len(polylines) == 1
        path = polylines[0]
        assert path.shape == (101, 3)
        assert np.allclose(path[0], lat_lon_to_cartesian(51.5, 0.0))
        assert np.allclose(path[-1], lat_lon_to_cartesian(-33.9, 18.4))
        assert np.allclose(np.linalg.norm(path, axis=1), 1.0)

    def test_samples_straight_on_flat_map(self, line):
        """Every globe sample projects back onto the straight flat-map line."""
        p0 = project(LONDON, ProjectionType.AZIMUTHAL)
        p1 = project(CAPE_TOWN, ProjectionType.AZIMUTHAL)
        d = p1 - p0
        for i, coord in enumerate(source_path_coordinates(line, n=50)):
            q = project(coord, ProjectionType.AZIMUTHAL) - p0
            assert abs(d[0] * q[1] - d[1] * q[0]) < 1e-9
            assert np.isclose(np.dot(q, d) / np.dot(d, d), i / 50)

    def test_flat_map_rendering_is_straight(self, line):
        """In its own view the line is a plain straight segment."""
        polylines = reproject_line(line, ProjectionType.AZIMUTHAL)
        assert len(polylines) == 1
        assert len(polylines[0]) == 2

    def test_globe_drawn_line_is_great_circle(self):
        """Drawn on the globe, the same line is the geodesic."""
        line = LineSegment(LONDON, CAPE_TOWN, ProjectionType.SPHERE)
        path = reproject_line(line, ProjectionType.SPHERE, n=20)[0]
        expected = [
            lat_lon_to_cartesian(c.lat, c.lon)
            for c in interpolate_great_circle(LONDON, CAPE_TOWN, 20)
        ]
        assert np.allclose(path, expected)


class TestStraightLinesThatAreGeodesics:
    """Map lines that coincide with great circles."""

    def test_meridian_on_flat_map(self):
        """A radial flat-map line follows its meridian, a great circle."""
        start, end = GeoCoordinate(60.0, 30.0), GeoCoordinate(-20.0, 30.0)
        samples = source_path_coordinates(LineSegment(start, end, "azimuthal"), n=16)
        for got, expected in zip(samples, interpolate_great_circle(start, end, 16)):
            assert got.isclose(expected, atol=1e-9)

    def test_equator_on_mercator(self):
        """A horizontal line on the Mercator equator follows the equator."""
        start, end = GeoCoordinate(0.0, -30.0), GeoCoordinate(0.0, 30.0)
        samples = source_path_coordinates(LineSegment(start, end, "mercator"), n=12)
        for got, expected in zip(samples, interpolate_great_circle(start, end, 12)):
            assert got.isclose(expected, atol=1e-9)


class TestSeamWrap:
    """A Mercator line spanning the +/-180 deg longitudes."""

    @pytest.fixture
    def line(self):
        return LineSegment(GeoCoordinate(0.0, 170.0), GeoCoordinate(0.0, -170.0), "mercator")

    def test_mercator_rendering_is_straight_segment(self, line):
        """On its own map the line stays a single straight segment."""
        polylines = reproject_line(line, ProjectionType.MERCATOR)
        assert len(polylines) == 1
        assert polylines[0].shape == (2, 2)

    def test_azimuthal_rendering_continuous(self, line):
        """On the flat-Earth map it is one arc without seam artifacts."""
        polylines = reproject_line(line, ProjectionType.AZIMUTHAL, n=100)
        assert len(polylines) == 1
        steps = np.linalg.norm(np.diff(polylines[0], axis=0), axis=1)
        assert np.all(steps < np.pi)
        assert len(polylines[0]) == 101


class TestConfiguredWorkflow:
    """Configuration through state to rendered geometry."""

    def test_full_workflow(self):
        manager = ConfigurationManager()
        loaded = manager.load_config({
            "clock": {"day_of_year": 172, "hour_of_day": 12.0, "animation_speed": 24.0},
            "sampling": {"line_samples": 40},
        })
        assert loaded.is_valid
        config = loaded.config

        state = manager.initial_state(config)
        state.add_line(LONDON, CAPE_TOWN, "azimuthal")
        state.add_line(GeoCoordinate(40.7, -74.0), GeoCoordinate(35.7, 139.7), "mercator")

        for line in state.lines:
            for projection in ProjectionType:
                polylines = reproject_line(line, projection, n=config.sampling.line_samples)
                assert polylines
                assert all(len(piece) >= 2 for piece in polylines)

        sun = solar_state(state.instant).subsolar_point
        assert sun.lat > 23.0

        state.toggle_animation()
        state.tick(1.0)
        assert state.instant.day_of_year == 173
        assert orbital_state(state.instant.day_of_year).distance_million_km > 150.0

        ring = terminator(state.instant, n=config.sampling.terminator_points)
        assert ring.shape == (config.sampling.terminator_points + 1, 2)
