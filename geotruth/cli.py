"""
Command-line interface for GeoTruth.

Provides CLI commands for:
- Solar geometry at a simulated instant
- Earth's orbital position for a day of the year
- Great-circle distances
- Re-projecting a drawn line into another view
- Rendering the views to an image
"""

import argparse
import json
import logging
import sys
from pathlib import Path

import numpy as np
import yaml

from geotruth import __version__


def setup_logging(verbose: bool = False) -> None:
    """Configure logging on stderr; stdout carries the command output."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def parse_coordinate(text: str):
    """Parse ``"lat,lon"`` into a GeoCoordinate."""
    from geotruth.geometry import GeoCoordinate

    try:
        lat, lon = (float(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Expected 'lat,lon' in degrees, got '{text}'"
        )
    return GeoCoordinate(lat, lon)


def _load_config(args: argparse.Namespace):
    from geotruth.config import ConfigurationManager, VisualizerConfig

    if not args.config:
        return VisualizerConfig()

    loaded = ConfigurationManager().load_config(args.config)
    if not loaded.is_valid:
        raise ValueError(
            "Invalid configuration: " + "; ".join(loaded.validation_errors)
        )
    return loaded.config


def _instant(args: argparse.Namespace, config):
    from geotruth.core import SimulatedInstant

    day = args.day if args.day is not None else config.clock.day_of_year
    hour = args.hour if args.hour is not None else config.clock.hour_of_day
    return SimulatedInstant(day, hour)


def _emit(result: dict, output_format: str) -> None:
    if output_format == "yaml":
        print(yaml.safe_dump(result, sort_keys=False), end="")
    else:
        print(json.dumps(result, indent=2))


def run_solar(args: argparse.Namespace, config) -> dict:
    """Solar geometry for the requested instant."""
    from geotruth.astronomy import is_daylight, season, solar_elevation, solar_state

    instant = _instant(args, config)
    state = solar_state(instant)
    result = {
        "day_of_year": instant.day_of_year,
        "hour_of_day": instant.hour_of_day,
        "season": season(instant.day_of_year),
        "declination_deg": state.declination_deg,
        "subsolar_point": {"lat": state.subsolar_point.lat, "lon": state.subsolar_point.lon},
    }
    if args.at is not None:
        result["location"] = {
            "lat": args.at.lat,
            "lon": args.at.lon,
            "daylight": is_daylight(args.at, instant),
            "solar_elevation_deg": solar_elevation(args.at, instant),
        }
    return result


def run_orbit(args: argparse.Namespace, config) -> dict:
    """Orbital state for the requested day."""
    from geotruth.astronomy import orbital_state, season

    instant = _instant(args, config)
    state = orbital_state(instant.day_of_year)
    return {
        "day_of_year": instant.day_of_year,
        "season": season(instant.day_of_year),
        "true_anomaly_deg": float(np.degrees(state.true_anomaly)),
        "distance_million_km": state.distance_million_km,
    }


def run_distance(args: argparse.Namespace, config) -> dict:
    """Great-circle distance between two points."""
    from geotruth.geometry import format_distance, haversine_distance_km

    distance = haversine_distance_km(args.start, args.end)
    return {
        "start": {"lat": args.start.lat, "lon": args.start.lon},
        "end": {"lat": args.end.lat, "lon": args.end.lon},
        "distance_km": distance,
        "label": format_distance(distance),
    }


def run_reproject(args: argparse.Namespace, config) -> dict:
    """Path of a drawn line in a target view."""
    from geotruth.geometry import LineSegment, reproject_line

    line = LineSegment(args.start, args.end, args.source)
    samples = args.samples or config.sampling.line_samples
    polylines = reproject_line(
        line,
        args.target,
        n=samples,
        radius=config.projection.globe_radius,
        max_latitude=config.projection.mercator_max_latitude,
    )
    return {
        "source": line.source_projection.value,
        "target": args.target,
        "distance_km": line.distance_km,
        "segments": [piece.tolist() for piece in polylines],
    }


def run_render(args: argparse.Namespace, config) -> dict:
    """Render all views to an image file."""
    import matplotlib
    matplotlib.use('Agg')
    import matplotlib.pyplot as plt

    from geotruth.core import GeoTruthState
    from geotruth.geometry import geojson_rings
    from geotruth.visualization import plot_all_views

    state = GeoTruthState(instant=_instant(args, config))
    for entry in args.line or []:
        source, start, end = entry
        state.add_line(parse_coordinate(start), parse_coordinate(end), source)

    land_rings = None
    if args.land:
        with open(args.land) as f:
            land_rings = geojson_rings(json.load(f))

    output = Path(args.output or Path(config.output.output_path) / "views.png")
    output.parent.mkdir(parents=True, exist_ok=True)

    fig = plot_all_views(state.instant, state.lines, land_rings,
                         samples=config.sampling.line_samples)
    fig.savefig(output, dpi=150, bbox_inches='tight')
    plt.close(fig)

    logging.getLogger(__name__).info(f"Saved views to {output}")
    return {"output": str(output), "lines": len(state.lines)}


def run_init_config(args: argparse.Namespace, config) -> dict:
    """Write an example configuration file."""
    from geotruth.config import ConfigurationManager

    ConfigurationManager().save_example_config(args.path)
    return {"output": args.path}


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    from geotruth.geometry import ProjectionType

    projections = [p.value for p in ProjectionType]

    parser = argparse.ArgumentParser(
        prog="geotruth",
        description="GeoTruth: spherical vs flat Earth geometry",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Subsolar point at the June solstice, noon UTC
    geotruth solar --day 172 --hour 12

    # Is it daytime in Sydney on December 21, 12:00 UTC?
    geotruth solar --day 355 --hour 12 --at=-33.9,151.2

    # London to Cape Town drawn on the flat map, seen on the globe
    geotruth reproject --start=51.5,0 --end=-33.9,18.4 --source azimuthal --target sphere

    # Render all views with one line
    geotruth render --day 80 --line mercator 40,-74 51.5,0 -o views.png

Coordinates starting with '-' must be attached with '=' (--at=-33.9,151.2).
        """,
    )

    # Global options
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"GeoTruth {__version__}",
    )
    parser.add_argument(
        "-c", "--config",
        type=str,
        help="Path to JSON or YAML configuration file",
    )
    parser.add_argument(
        "-f", "--format",
        type=str,
        choices=["json", "yaml"],
        help="Output format",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    def add_time_options(p):
        p.add_argument("--day", type=int, help="Day of year (1-365)")
        p.add_argument("--hour", type=float, help="UTC hour of day [0, 24)")

    solar = sub.add_parser("solar", help="Solar declination and subsolar point")
    add_time_options(solar)
    solar.add_argument("--at", type=parse_coordinate, help="Location 'lat,lon' to classify")
    solar.set_defaults(handler=run_solar)

    orbit = sub.add_parser("orbit", help="Earth's orbital position and distance")
    add_time_options(orbit)
    orbit.set_defaults(handler=run_orbit)

    distance = sub.add_parser("distance", help="Great-circle distance")
    distance.add_argument("--start", type=parse_coordinate, required=True, help="'lat,lon'")
    distance.add_argument("--end", type=parse_coordinate, required=True, help="'lat,lon'")
    distance.set_defaults(handler=run_distance)

    reproject = sub.add_parser("reproject", help="Re-project a drawn line into another view")
    reproject.add_argument("--start", type=parse_coordinate, required=True, help="'lat,lon'")
    reproject.add_argument("--end", type=parse_coordinate, required=True, help="'lat,lon'")
    reproject.add_argument("--source", choices=projections, required=True,
                           help="View the line was drawn on")
    reproject.add_argument("--target", choices=projections, required=True,
                           help="View to render the line in")
    reproject.add_argument("-n", "--samples", type=int, help="Sampling intervals")
    reproject.set_defaults(handler=run_reproject)

    render = sub.add_parser("render", help="Render the views to an image")
    add_time_options(render)
    render.add_argument("--line", nargs=3, action="append",
                        metavar=("SOURCE", "START", "END"),
                        help="Line drawn on SOURCE from 'lat,lon' to 'lat,lon'")
    render.add_argument("--land", type=str, help="GeoJSON file with land polygons")
    render.add_argument("-o", "--output", type=str, help="Output image path")
    render.set_defaults(handler=run_render)

    init = sub.add_parser("init-config", help="Write an example configuration file")
    init.add_argument("path", type=str, help="Output path (.json or .yaml)")
    init.set_defaults(handler=run_init_config)

    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = _load_config(args)
        result = args.handler(args, config)
        _emit(result, args.format or config.output.format)
        return 0
    except Exception as e:
        logging.exception(f"Command failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
