"""
Cross-View Line Projection
==========================

A line drawn on one view is straight *in that view's space*: a planar
straight segment on the Mercator or flat-Earth map, a geodesic on the
globe. This module reconstructs that path in geographic coordinates and
re-expresses it in any other view, which is how a straight line on the
flat map becomes a curve on the globe and vice versa.

Paths are returned as lists of disjoint polylines (numpy arrays). A new
polyline starts wherever a sample has no image in the target view or
where consecutive samples lie half the view width apart or more (the
Mercator +/-180 deg seam, a pole crossing, or the rim of the flat-Earth
disc).
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

import numpy as np

from geotruth.geometry.spherical import (
    GeoCoordinate,
    haversine_distance_km,
    interpolate_great_circle,
)
from geotruth.geometry.projections import (
    ProjectionType,
    project,
    project_points,
    unproject,
    visible_width,
)
from geotruth.utils.constants import GLOBE_RADIUS, MERCATOR_MAX_LATITUDE

logger = logging.getLogger(__name__)

DEFAULT_LINE_SAMPLES = 100
SEAM_TOLERANCE = 1e-6  # relative, on the half-width split threshold


@dataclass(frozen=True)
class LineSegment:
    """
    A user-drawn line between two geographic points.

    Attributes
    ----------
    start : GeoCoordinate
        First end point
    end : GeoCoordinate
        Second end point
    source_projection : ProjectionType
        View the line was drawn on; defines which path is "straight"
    line_id : str, optional
        Identifier assigned by the owning state container
    distance_km : float
        Great-circle distance between the end points, independent of
        the source view (computed, not passed in)
    """
    start: GeoCoordinate
    end: GeoCoordinate
    source_projection: ProjectionType
    line_id: Optional[str] = None
    distance_km: float = field(init=False)

    def __post_init__(self):
        object.__setattr__(
            self, "source_projection", ProjectionType.from_name(self.source_projection)
        )
        object.__setattr__(
            self, "distance_km", haversine_distance_km(self.start, self.end)
        )


def format_distance(distance_km: float) -> str:
    """Distance label as shown next to a line ("9.7k km", "850 km")."""
    if distance_km >= 1000:
        return f"{distance_km / 1000:.1f}k km"
    return f"{distance_km:.0f} km"


# =============================================================================
# Source-space reconstruction
# =============================================================================

def source_path_coordinates(
    line: LineSegment,
    n: int = DEFAULT_LINE_SAMPLES,
    max_latitude: float = MERCATOR_MAX_LATITUDE,
) -> List[Optional[GeoCoordinate]]:
    """
    Geographic samples of the path as drawn in the line's source view.

    Parameters
    ----------
    line : LineSegment
        Line to sample
    n : int
        Number of intervals; ``n + 1`` samples are returned
    max_latitude : float
        Mercator clamp latitude in degrees

    Returns
    -------
    samples : list of GeoCoordinate or None
        Evenly spaced along the straight line in source space. The first
        and last entries are exactly the line end points; interior
        samples without a geographic pre-image are None.

    Notes
    -----
    A Mercator-drawn line is straight between the *clamped* end points,
    since that is where it sits on the map. An end point poleward of
    ``max_latitude`` is still returned exactly, so the first (or last)
    step runs along its meridian from the clamp latitude to the true
    latitude, the same direction Mercator's vertical lines take.
    """
    if n < 1:
        raise ValueError(f"Number of intervals must be at least 1. Got {n}")

    source = line.source_projection

    if source is ProjectionType.SPHERE:
        # Drawn on the globe: geodesic by construction
        return list(interpolate_great_circle(line.start, line.end, n))

    p0 = project(line.start, source, max_latitude=max_latitude)
    p1 = project(line.end, source, max_latitude=max_latitude)

    samples: List[Optional[GeoCoordinate]] = [line.start]
    for i in range(1, n):
        t = i / n
        point = p0 + t * (p1 - p0)
        samples.append(unproject(point, source, max_latitude=max_latitude))
    samples.append(line.end)

    return samples


# =============================================================================
# Seam handling
# =============================================================================

def split_at_seams(points: np.ndarray, width: Optional[float]) -> List[np.ndarray]:
    """
    Split a polyline wherever consecutive points are half the view width apart.

    Parameters
    ----------
    points : ndarray
        Shape (k, 2) or (k, 3)
    width : float or None
        Visible width of the view; None disables splitting (globe)

    Returns
    -------
    segments : list of ndarray
        Pieces with at least two points each

    Notes
    -----
    The step is the planar distance between samples, so both kinds of
    discontinuity are caught: the +/-180 deg edge of the Mercator
    rectangle (a jump in x) and the South Pole rim of the flat-Earth disc
    (a jump across the disc, often mostly in y). A path through a pole
    flips longitude by exactly 180 deg, which on Mercator is a step of
    exactly width / 2; the comparison therefore allows a small relative
    tolerance.
    """
    points = np.asarray(points, dtype=float)
    if len(points) == 0:
        return []

    if width is None:
        pieces = [points]
    else:
        steps = np.linalg.norm(np.diff(points[:, :2], axis=0), axis=1)
        jumps = steps >= (width / 2) * (1 - SEAM_TOLERANCE)
        breaks = np.nonzero(jumps)[0] + 1
        pieces = np.split(points, breaks)

    return [p for p in pieces if len(p) >= 2]


def _polylines_from_samples(
    samples: Sequence[Optional[GeoCoordinate]],
    target: ProjectionType,
    radius: float,
    max_latitude: float,
) -> List[np.ndarray]:
    runs: List[List[GeoCoordinate]] = [[]]
    dropped = 0
    for coord in samples:
        if coord is None:
            dropped += 1
            if runs[-1]:
                runs.append([])
            continue
        runs[-1].append(coord)

    if dropped:
        logger.debug(f"Dropped {dropped} samples without a geographic pre-image")

    width = visible_width(target)
    polylines: List[np.ndarray] = []
    for run in runs:
        if len(run) < 2:
            continue
        lats = np.array([c.lat for c in run])
        lons = np.array([c.lon for c in run])
        points = project_points(lats, lons, target, radius, max_latitude)
        polylines.extend(split_at_seams(points, width))

    return polylines


# =============================================================================
# Cross-view projection
# =============================================================================

def reproject_line(
    line: LineSegment,
    target_projection: ProjectionType,
    n: int = DEFAULT_LINE_SAMPLES,
    radius: float = GLOBE_RADIUS,
    max_latitude: float = MERCATOR_MAX_LATITUDE,
) -> List[np.ndarray]:
    """
    Render a line in a target view.

    Parameters
    ----------
    line : LineSegment
        Line to render
    target_projection : ProjectionType
        View to render into
    n : int
        Number of sampling intervals for cross-view paths
    radius : float
        Globe radius for the sphere view
    max_latitude : float
        Mercator clamp latitude in degrees

    Returns
    -------
    polylines : list of ndarray
        Disjoint pieces of the path in target space, each of shape
        (k, 2) for the maps or (k, 3) for the globe

    Notes
    -----
    - Same planar view: the two projected end points, a plain straight
      segment, whatever longitudes it spans.
    - Globe lines on the globe: the great circle, since that is the
      straight line of the sphere.
    - Otherwise the straight source-space line is sampled, unprojected
      and projected into the target view, then split at seams.
    """
    target = ProjectionType.from_name(target_projection)

    if target is line.source_projection and target.is_planar:
        p0 = project(line.start, target, radius, max_latitude)
        p1 = project(line.end, target, radius, max_latitude)
        return [np.array([p0, p1])]

    samples = source_path_coordinates(line, n, max_latitude)
    return _polylines_from_samples(samples, target, radius, max_latitude)


def project_rings(
    rings: Iterable[Sequence[Sequence[float]]],
    target_projection: ProjectionType,
    radius: float = GLOBE_RADIUS,
    max_latitude: float = MERCATOR_MAX_LATITUDE,
) -> List[np.ndarray]:
    """
    Project polygon rings given as [lon, lat] lists (GeoJSON order).

    Used for continent outlines from the world-geometry source and for
    the terminator ring. Each ring is split at view seams.
    """
    target = ProjectionType.from_name(target_projection)
    width = visible_width(target)

    polylines: List[np.ndarray] = []
    for ring in rings:
        ring = np.asarray(ring, dtype=float)
        if ring.ndim != 2 or len(ring) < 2:
            continue
        points = project_points(ring[:, 1], ring[:, 0], target, radius, max_latitude)
        polylines.extend(split_at_seams(points, width))

    return polylines


def geojson_rings(geometry: dict) -> List[List[List[float]]]:
    """
    Extract exterior and interior rings from a GeoJSON geometry or feature collection.

    Supports Polygon, MultiPolygon, Feature and FeatureCollection; other
    geometry types are ignored.
    """
    kind = geometry.get("type")

    if kind == "FeatureCollection":
        rings = []
        for feature in geometry.get("features", []):
            rings.extend(geojson_rings(feature))
        return rings
    if kind == "Feature":
        return geojson_rings(geometry.get("geometry") or {})
    if kind == "Polygon":
        return list(geometry["coordinates"])
    if kind == "MultiPolygon":
        return [ring for polygon in geometry["coordinates"] for ring in polygon]

    return []
