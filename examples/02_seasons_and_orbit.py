#!/usr/bin/env python3
"""
Example 02: Seasons, Daylight and the Orbit
===========================================

This example steps the simulated clock through a year and reports the
solar declination, the Earth-Sun distance and the daylight at a few
latitudes.

Features demonstrated:
1. Solar declination and subsolar point
2. Earth-Sun distance from Kepler's equation
3. Noon insolation versus latitude
4. Animating the clock with GeoTruthState.tick
5. Declination and distance plotted over a year

OFFLINE OPERATION
-----------------
All calculations use closed-form models; no ephemeris data is needed.

Usage:
    python examples/02_seasons_and_orbit.py [--no-plot]
"""

import argparse
import sys
import numpy as np

# Plotting imports
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

# GeoTruth imports
from geotruth.astronomy import (
    earth_sun_distance,
    is_daylight,
    noon_insolation,
    orbital_angle,
    season,
    solar_declination,
    solar_state,
)
from geotruth.core import GeoTruthState, SimulatedInstant
from geotruth.geometry import GeoCoordinate
from geotruth.utils.constants import SEASON_MARKER_DAYS
from geotruth.visualization import plot_orbit_view


def main(args):
    print("=" * 70)
    print("Example 02: Seasons, Daylight and the Orbit")
    print("=" * 70)
    print()

    # ---------------------------------------------------------------------
    # 1. Equinoxes and solstices
    # ---------------------------------------------------------------------
    print("1. Equinoxes and Solstices")
    print("-" * 40)
    print(f"   {'Event':<20s} {'Day':>4s} {'Decl':>7s} {'Dist (Mkm)':>11s} {'Anomaly':>8s}")

    for label, day in SEASON_MARKER_DAYS.items():
        decl = solar_declination(day)
        dist = earth_sun_distance(day)
        nu = np.degrees(orbital_angle(day))
        print(f"   {label:<20s} {day:4d} {decl:7.2f} {dist:11.2f} {nu:8.1f}")
    print()

    # ---------------------------------------------------------------------
    # 2. Perihelion and aphelion
    # ---------------------------------------------------------------------
    print("2. Earth-Sun Distance")
    print("-" * 40)
    days = np.arange(1, 366)
    distances = np.array([earth_sun_distance(d) for d in days])
    print(f"   Perihelion: day {days[np.argmin(distances)]:3d}, {distances.min():.2f} million km")
    print(f"   Aphelion:   day {days[np.argmax(distances)]:3d}, {distances.max():.2f} million km")
    print("   Note: the Earth is closest to the Sun in northern winter.")
    print()

    # ---------------------------------------------------------------------
    # 3. Noon insolation by latitude
    # ---------------------------------------------------------------------
    print("3. Relative Noon Insolation")
    print("-" * 40)
    latitudes = [80, 60, 40, 20, 0, -20, -40, -60, -80]
    print(f"   {'Lat':>5s} {'Jun 21':>8s} {'Dec 21':>8s}")
    for lat in latitudes:
        june = noon_insolation(lat, 172)
        december = noon_insolation(lat, 355)
        print(f"   {lat:5d} {june:8.3f} {december:8.3f}")
    print()

    # ---------------------------------------------------------------------
    # 4. Animating one day at 1 day per second
    # ---------------------------------------------------------------------
    print("4. Animation (24 simulated hours per second, 4 frames per second)")
    print("-" * 40)
    state = GeoTruthState(instant=SimulatedInstant(172, 0.0), animation_speed=24.0)
    state.toggle_animation()
    oslo = GeoCoordinate(59.9, 10.8)
    for _ in range(5):
        sun = solar_state(state.instant).subsolar_point
        lit = "day" if is_daylight(oslo, state.instant) else "night"
        print(f"   Day {state.instant.day_of_year:3d} {state.instant.hour_of_day:5.1f} h "
              f"sun at ({sun.lat:6.2f}, {sun.lon:7.2f})  Oslo: {lit}")
        state.tick(0.25)
    print(f"   Season: {season(state.instant.day_of_year)}")
    print()

    # ---------------------------------------------------------------------
    # 5. Plots
    # ---------------------------------------------------------------------
    if not args.no_plot:
        fig, axes = plt.subplots(1, 3, figsize=(18, 5))

        decl = [solar_declination(d) for d in days]
        axes[0].plot(days, decl, 'b-', linewidth=2)
        axes[0].axhline(0, color='gray', lw=0.5)
        axes[0].set_xlabel('Day of year')
        axes[0].set_ylabel('Declination (deg)')
        axes[0].set_title('Solar Declination')
        axes[0].grid(True, alpha=0.3)

        axes[1].plot(days, distances, 'r-', linewidth=2)
        axes[1].set_xlabel('Day of year')
        axes[1].set_ylabel('Distance (million km)')
        axes[1].set_title('Earth-Sun Distance')
        axes[1].grid(True, alpha=0.3)

        plot_orbit_view(state.instant, ax=axes[2])

        plt.tight_layout()
        plt.savefig('outputs/02_seasons_and_orbit.png', dpi=150, bbox_inches='tight')
        plt.close()
        print("   Saved: outputs/02_seasons_and_orbit.png")
        print()

    print("=" * 70)
    print("SUMMARY")
    print("=" * 70)
    print("""
    Seasons follow the declination of the Sun, not the Earth-Sun
    distance: perihelion falls in early January, in northern winter.
    """)

    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description='Seasons, Daylight and the Orbit')
    parser.add_argument('--no-plot', action='store_true', help='Skip plot generation')
    args = parser.parse_args()

    import os
    os.makedirs('outputs', exist_ok=True)

    sys.exit(main(args))
