#!/usr/bin/env python3
"""
Example 01: Straight Lines Across Views
=======================================

This example draws the same pair of cities on each view and shows how a
line that is straight in one view looks in the others.

Features demonstrated:
1. Great-circle distance between cities
2. A straight line on the flat-Earth map re-projected onto the globe
3. Deviation of the flat-map path from the true great circle
4. A Mercator line crossing the antimeridian
5. Static rendering of all views

Usage:
    python examples/01_cross_view_lines.py [--no-plot]
"""

import argparse
import sys

# Plotting imports
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

# GeoTruth imports
from geotruth.core import GeoTruthState, SimulatedInstant
from geotruth.geometry import (
    GeoCoordinate,
    LineSegment,
    ProjectionType,
    central_angle,
    format_distance,
    haversine_distance_km,
    interpolate_great_circle,
    reproject_line,
    source_path_coordinates,
)
from geotruth.utils.constants import EARTH_RADIUS_KM
from geotruth.visualization import plot_all_views


CITIES = {
    "London": GeoCoordinate(51.5, 0.0),
    "Cape Town": GeoCoordinate(-33.9, 18.4),
    "New York": GeoCoordinate(40.7, -74.0),
    "Tokyo": GeoCoordinate(35.7, 139.7),
    "Sydney": GeoCoordinate(-33.9, 151.2),
    "Buenos Aires": GeoCoordinate(-34.6, -58.4),
}


def max_deviation_km(start, end, source, n=200):
    """Largest distance between a source-view path and the great circle."""
    path = source_path_coordinates(LineSegment(start, end, source), n)
    geodesic = list(interpolate_great_circle(start, end, n))
    return max(
        central_angle(p, g) * EARTH_RADIUS_KM
        for p, g in zip(path, geodesic) if p is not None
    )


def main(args):
    print("=" * 70)
    print("Example 01: Straight Lines Across Views")
    print("=" * 70)
    print()

    # ---------------------------------------------------------------------
    # 1. Great-circle distances
    # ---------------------------------------------------------------------
    print("1. Great-Circle Distances")
    print("-" * 40)

    pairs = [
        ("London", "Cape Town"),
        ("New York", "Tokyo"),
        ("Sydney", "Buenos Aires"),
    ]
    for a, b in pairs:
        d = haversine_distance_km(CITIES[a], CITIES[b])
        print(f"   {a:>12s} -> {b:<12s} {d:8.0f} km  ({format_distance(d)})")
    print()

    # ---------------------------------------------------------------------
    # 2. Flat-map line on the globe
    # ---------------------------------------------------------------------
    print("2. London -> Cape Town drawn on the flat-Earth map")
    print("-" * 40)

    state = GeoTruthState(instant=SimulatedInstant(172, 12.0))
    line = state.add_line(CITIES["London"], CITIES["Cape Town"], ProjectionType.AZIMUTHAL)

    for target in ProjectionType:
        pieces = reproject_line(line, target, n=100)
        points = sum(len(p) for p in pieces)
        print(f"   {target.value:>10s}: {len(pieces)} polyline(s), {points} points")

    print(f"   Label distance: {format_distance(line.distance_km)}")
    print()

    # ---------------------------------------------------------------------
    # 3. Deviation from the great circle
    # ---------------------------------------------------------------------
    print("3. Maximum deviation from the great circle")
    print("-" * 40)
    print(f"   {'Route':<28s} {'Mercator':>10s} {'Flat map':>10s}")

    for a, b in pairs:
        start, end = CITIES[a], CITIES[b]
        merc = max_deviation_km(start, end, ProjectionType.MERCATOR)
        flat = max_deviation_km(start, end, ProjectionType.AZIMUTHAL)
        print(f"   {a + ' -> ' + b:<28s} {merc:8.0f} km {flat:8.0f} km")
    print()

    # ---------------------------------------------------------------------
    # 4. Antimeridian crossing
    # ---------------------------------------------------------------------
    print("4. Lines spanning the +/-180 deg longitudes")
    print("-" * 40)

    merc_line = state.add_line(GeoCoordinate(0.0, 170.0), GeoCoordinate(0.0, -170.0), "mercator")
    globe_line = state.add_line(GeoCoordinate(10.0, 170.0), GeoCoordinate(10.0, -170.0), "sphere")

    for label, seg in (("Mercator-drawn", merc_line), ("Globe-drawn", globe_line)):
        for target in (ProjectionType.MERCATOR, ProjectionType.AZIMUTHAL):
            pieces = reproject_line(seg, target)
            print(f"   {label:>15s} on {target.value:<10s}: {len(pieces)} polyline(s)")
    print()

    # ---------------------------------------------------------------------
    # 5. Rendering
    # ---------------------------------------------------------------------
    if not args.no_plot:
        fig = plot_all_views(state.instant, state.lines)
        fig.savefig('outputs/01_cross_view_lines.png', dpi=150, bbox_inches='tight')
        plt.close(fig)
        print("   Saved: outputs/01_cross_view_lines.png")
        print()

    print("=" * 70)
    print("SUMMARY")
    print("=" * 70)
    print("""
    A straight line on a map is only a geodesic in special cases
    (meridians on the flat map, the equator on Mercator). Everywhere
    else the drawn route differs from the great circle, while the
    distance label always shows the true great-circle distance.
    """)

    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description='Straight Lines Across Views')
    parser.add_argument('--no-plot', action='store_true', help='Skip plot generation')
    args = parser.parse_args()

    import os
    os.makedirs('outputs', exist_ok=True)

    sys.exit(main(args))
