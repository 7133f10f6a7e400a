"""
Geometry Module
===============

Coordinate conversion and path geometry shared by every view:

- Geographic <-> globe Cartesian coordinates
- Mercator and north-polar azimuthal equidistant ("flat Earth") projections
- Great-circle distance and interpolation
- Re-projection of user-drawn lines between views

All functions are pure and take every input explicitly.
"""

from geotruth.geometry.spherical import (
    GeoCoordinate,
    normalize_longitude,
    clamp_latitude,
    lat_lon_to_cartesian,
    to_cartesian,
    from_cartesian,
    central_angle,
    haversine_distance_km,
    GreatCirclePath,
    interpolate_great_circle,
)

from geotruth.geometry.projections import (
    ProjectionType,
    mercator_xy,
    to_mercator,
    from_mercator,
    azimuthal_xy,
    to_azimuthal_equidistant,
    from_azimuthal_equidistant,
    project,
    project_points,
    unproject,
    visible_width,
)

from geotruth.geometry.paths import (
    LineSegment,
    format_distance,
    source_path_coordinates,
    split_at_seams,
    reproject_line,
    project_rings,
    geojson_rings,
)

__all__ = [
    # Coordinates
    "GeoCoordinate",
    "normalize_longitude",
    "clamp_latitude",
    "lat_lon_to_cartesian",
    "to_cartesian",
    "from_cartesian",
    # Great circles
    "central_angle",
    "haversine_distance_km",
    "GreatCirclePath",
    "interpolate_great_circle",
    # Projections
    "ProjectionType",
    "mercator_xy",
    "to_mercator",
    "from_mercator",
    "azimuthal_xy",
    "to_azimuthal_equidistant",
    "from_azimuthal_equidistant",
    "project",
    "project_points",
    "unproject",
    "visible_width",
    # Lines
    "LineSegment",
    "format_distance",
    "source_path_coordinates",
    "split_at_seams",
    "reproject_line",
    "project_rings",
    "geojson_rings",
]
