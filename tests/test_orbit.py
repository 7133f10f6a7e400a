"""Tests for Earth's orbital position."""

import numpy as np
import pytest

from geotruth.astronomy.orbit import (
    earth_orbital_position,
    earth_sun_distance,
    mean_anomaly,
    orbit_path,
    orbital_angle,
    orbital_radius,
    orbital_state,
    season_markers,
    solve_kepler,
    true_anomaly_from_eccentric,
)
from geotruth.utils.constants import (
    APHELION_DISTANCE,
    ECCENTRICITY,
    PERIHELION_DISTANCE,
    SEMI_MAJOR_AXIS,
)


class TestKeplerSolver:
    """Tests for Kepler's equation."""

    def test_zero_mean_anomaly(self):
        """M = 0 gives E = 0."""
        assert solve_kepler(0.0) == 0.0

    @pytest.mark.parametrize("M", [0.1, 1.0, 2.5, np.pi, 5.0])
    def test_satisfies_equation(self, M):
        """The solution satisfies E - e sin(E) = M."""
        E = solve_kepler(M)
        assert np.isclose(E - ECCENTRICITY * np.sin(E), M, atol=1e-12)

    def test_circular_orbit(self):
        """With e = 0 all anomalies coincide."""
        assert solve_kepler(1.2, eccentricity=0.0) == 1.2
        assert np.isclose(true_anomaly_from_eccentric(1.2, eccentricity=0.0), 1.2)

    def test_mean_anomaly_zero_at_perihelion(self):
        """Mean anomaly starts at perihelion (day 3)."""
        assert mean_anomaly(3) == 0.0


class TestEarthSunDistance:
    """Tests for the Earth-Sun distance."""

    def test_perihelion(self):
        """About 147.1 million km on day 3."""
        assert abs(earth_sun_distance(3) - 147.1) < 0.1

    def test_aphelion(self):
        """About 152.1 million km on day 186."""
        assert abs(earth_sun_distance(186) - 152.1) < 0.1

    def test_bounded_by_apsides(self):
        """Distance stays between perihelion and aphelion all year."""
        distances = np.array([earth_sun_distance(d) for d in range(1, 366)])
        assert np.all(distances >= PERIHELION_DISTANCE - 1e-9)
        assert np.all(distances <= APHELION_DISTANCE + 1e-9)
        assert np.argmin(distances) + 1 == 3

    def test_orbit_equation_at_apsides(self):
        """r(0) = a(1 - e) and r(pi) = a(1 + e)."""
        assert np.isclose(orbital_radius(0.0), SEMI_MAJOR_AXIS * (1 - ECCENTRICITY))
        assert np.isclose(orbital_radius(np.pi), SEMI_MAJOR_AXIS * (1 + ECCENTRICITY))


class TestOrbitalState:
    """Tests for the combined orbital state."""

    def test_angle_and_distance_consistent(self):
        """Distance follows from the same true anomaly."""
        for day in (1, 50, 172, 300):
            state = orbital_state(day)
            assert np.isclose(state.distance_million_km, orbital_radius(state.true_anomaly))

    def test_true_anomaly_zero_at_perihelion(self):
        """True anomaly is zero on day 3."""
        assert orbital_angle(3) == 0.0

    def test_true_anomaly_increases(self):
        """The Earth moves forward in its orbit."""
        assert 0 < orbital_angle(50) < orbital_angle(100) < np.pi

    def test_day_wraps(self):
        """Days outside 1..365 wrap around."""
        assert orbital_state(368) == orbital_state(3)


class TestOrbitScene:
    """Tests for orbital scene placement."""

    def test_perihelion_on_positive_x(self):
        """Perihelion lies on +x at a(1 - e) in scene units."""
        x, y, z = earth_orbital_position(3, orbit_scale=4.0)
        assert np.isclose(x, 4.0 * PERIHELION_DISTANCE / SEMI_MAJOR_AXIS)
        assert y == 0.0
        assert np.isclose(z, 0.0)

    def test_orbit_path_closed(self):
        """The orbit ring has n + 1 points and is closed."""
        ring = orbit_path(n=64)
        assert ring.shape == (65, 3)
        assert np.array_equal(ring[0], ring[-1])
        assert np.allclose(ring[:, 1], 0.0)

    def test_orbit_path_invalid_n(self):
        """At least one interval is required."""
        with pytest.raises(ValueError):
            orbit_path(n=0)

    def test_position_on_path_radius(self):
        """Earth's position lies within the scaled apsides."""
        r = np.linalg.norm(earth_orbital_position(100, orbit_scale=1.0))
        assert 1 - ECCENTRICITY - 1e-12 <= r <= 1 + ECCENTRICITY + 1e-12

    def test_season_markers(self):
        """Four markers at the equinoxes and solstices."""
        markers = season_markers()
        assert set(markers) == {
            "March equinox", "June solstice", "September equinox", "December solstice",
        }
        assert markers["June solstice"] == earth_orbital_position(172)
