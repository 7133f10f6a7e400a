"""Tests for Mercator and azimuthal equidistant projections."""

import numpy as np
import pytest

from geotruth.geometry.projections import (
    ProjectionType,
    azimuthal_xy,
    from_azimuthal_equidistant,
    from_mercator,
    mercator_xy,
    mercator_y_limit,
    project,
    to_azimuthal_equidistant,
    to_mercator,
    unproject,
    visible_width,
)
from geotruth.geometry.spherical import GeoCoordinate
from geotruth.utils.constants import MERCATOR_MAX_LATITUDE


class TestProjectionType:
    """Tests for projection name parsing."""

    def test_from_name(self):
        """Names are case insensitive."""
        assert ProjectionType.from_name("Mercator") is ProjectionType.MERCATOR
        assert ProjectionType.from_name("azimuthal") is ProjectionType.AZIMUTHAL

    def test_globe_alias(self):
        """'globe' refers to the sphere."""
        assert ProjectionType.from_name("globe") is ProjectionType.SPHERE

    def test_passthrough(self):
        """Members are returned unchanged."""
        assert ProjectionType.from_name(ProjectionType.SPHERE) is ProjectionType.SPHERE

    def test_unknown_raises(self):
        """Unknown projections raise ValueError."""
        with pytest.raises(ValueError):
            ProjectionType.from_name("robinson")

    def test_is_planar(self):
        """Only the maps are planar."""
        assert ProjectionType.MERCATOR.is_planar
        assert ProjectionType.AZIMUTHAL.is_planar
        assert not ProjectionType.SPHERE.is_planar


class TestMercator:
    """Tests for the Mercator projection."""

    def test_origin(self):
        """(0, 0) maps to the centre of the map."""
        assert np.allclose(to_mercator(GeoCoordinate(0.0, 0.0)), (0.0, 0.0))

    def test_x_is_longitude_radians(self):
        """x is longitude in radians."""
        x, _ = to_mercator(GeoCoordinate(0.0, 90.0))
        assert np.isclose(x, np.pi / 2)

    def test_square_extent(self):
        """The clamp latitude gives a square map (|y| = pi)."""
        assert np.isclose(mercator_y_limit(), np.pi, atol=1e-6)

    def test_latitude_clamped(self):
        """Latitudes beyond the limit project like the limit."""
        _, y_pole = to_mercator(GeoCoordinate(90.0, 0.0))
        _, y_max = to_mercator(GeoCoordinate(MERCATOR_MAX_LATITUDE, 0.0))
        assert np.isfinite(y_pole)
        assert np.isclose(y_pole, y_max)

    def test_symmetric_about_equator(self):
        """Southern latitudes mirror northern ones."""
        _, y_n = to_mercator(GeoCoordinate(40.0, 0.0))
        _, y_s = to_mercator(GeoCoordinate(-40.0, 0.0))
        assert np.isclose(y_n, -y_s)

    def test_inverse_outside_returns_none(self):
        """Points off the map have no pre-image."""
        assert from_mercator(4.0, 0.0) is None
        assert from_mercator(0.0, 4.0) is None
        assert from_mercator(float("nan"), 0.0) is None

    def test_round_trip(self):
        """Random points inside the clamp survive the round trip."""
        rng = np.random.default_rng(0)
        for lat, lon in zip(rng.uniform(-85, 85, 200), rng.uniform(-180, 180, 200)):
            coord = GeoCoordinate(lat, lon)
            assert from_mercator(*to_mercator(coord)).isclose(coord, atol=1e-9)

    def test_vectorised(self):
        """Array input produces (..., 2)."""
        xy = mercator_xy(np.array([0.0, 45.0]), np.array([0.0, 10.0]))
        assert xy.shape == (2, 2)


class TestAzimuthalEquidistant:
    """Tests for the north-polar azimuthal equidistant projection."""

    def test_north_pole_at_centre(self):
        """The North Pole is the centre of the disc."""
        assert np.allclose(to_azimuthal_equidistant(GeoCoordinate(90.0, 0.0)), (0.0, 0.0))

    def test_radius_is_colatitude(self):
        """Distance from the centre equals colatitude in radians."""
        x, y = to_azimuthal_equidistant(GeoCoordinate(30.0, 77.0))
        assert np.isclose(np.hypot(x, y), np.radians(60.0))

    def test_prime_meridian_points_down(self):
        """Longitude 0 points along -y."""
        x, y = to_azimuthal_equidistant(GeoCoordinate(0.0, 0.0))
        assert np.isclose(x, 0.0)
        assert np.isclose(y, -np.pi / 2)

    def test_south_pole_on_rim(self):
        """The South Pole maps onto the rim of radius pi."""
        for lon in (0.0, 90.0, -135.0):
            x, y = to_azimuthal_equidistant(GeoCoordinate(-90.0, lon))
            assert np.isclose(np.hypot(x, y), np.pi)

    def test_inverse_centre(self):
        """The centre maps back to the North Pole."""
        coord = from_azimuthal_equidistant(0.0, 0.0)
        assert coord.lat == 90.0

    def test_inverse_outside_disc_returns_none(self):
        """Points outside the disc have no pre-image."""
        assert from_azimuthal_equidistant(3.2, 0.0) is None
        assert from_azimuthal_equidistant(2.5, 2.5) is None

    def test_round_trip(self):
        """Random points survive the round trip."""
        rng = np.random.default_rng(1)
        for lat, lon in zip(rng.uniform(-89, 89, 200), rng.uniform(-180, 180, 200)):
            coord = GeoCoordinate(lat, lon)
            back = from_azimuthal_equidistant(*to_azimuthal_equidistant(coord))
            assert back.isclose(coord, atol=1e-9)

    def test_vectorised(self):
        """Array input produces (..., 2)."""
        assert azimuthal_xy(np.zeros(3), np.zeros(3)).shape == (3, 2)


class TestDispatch:
    """Tests for projection dispatch."""

    def test_project_shapes(self):
        """Maps give 2-D points, the sphere 3-D points."""
        coord = GeoCoordinate(10.0, 20.0)
        assert project(coord, ProjectionType.MERCATOR).shape == (2,)
        assert project(coord, ProjectionType.AZIMUTHAL).shape == (2,)
        assert project(coord, ProjectionType.SPHERE).shape == (3,)

    def test_project_accepts_names(self):
        """String names work as projections."""
        coord = GeoCoordinate(10.0, 20.0)
        assert np.allclose(project(coord, "mercator"), to_mercator(coord))

    def test_unproject_round_trip(self):
        """unproject inverts project in every view."""
        coord = GeoCoordinate(-12.0, 130.0)
        for projection in ProjectionType:
            back = unproject(project(coord, projection), projection)
            assert back.isclose(coord, atol=1e-9)

    def test_unproject_sphere_origin_none(self):
        """The globe centre has no pre-image."""
        assert unproject((0.0, 0.0, 0.0), ProjectionType.SPHERE) is None

    def test_visible_width(self):
        """Both maps are 2 pi wide; the globe has no seam."""
        assert np.isclose(visible_width(ProjectionType.MERCATOR), 2 * np.pi)
        assert np.isclose(visible_width(ProjectionType.AZIMUTHAL), 2 * np.pi)
        assert visible_width(ProjectionType.SPHERE) is None
