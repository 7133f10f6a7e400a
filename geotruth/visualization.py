"""
Static Views
============

Matplotlib renderings of the synchronized views: the Mercator map, the
azimuthal equidistant "flat Earth" disc, the globe and the orbital
view. Each plot accepts the same simulated instant and line list, so a
line drawn in one view can be compared across all of them.

All functions return the matplotlib axis for flexibility.
"""

from typing import Iterable, List, Optional, Sequence

import numpy as np

from geotruth.astronomy.orbit import (
    earth_orbital_position,
    orbit_path,
    season_markers,
)
from geotruth.astronomy.solar import season, solar_state, terminator
from geotruth.core.clock import SimulatedInstant
from geotruth.geometry.paths import (
    LineSegment,
    format_distance,
    project_rings,
    reproject_line,
)
from geotruth.geometry.projections import ProjectionType, project
from geotruth.utils.constants import (
    AZIMUTHAL_DISC_RADIUS,
    MERCATOR_MAX_LATITUDE,
    ORBIT_SCALE,
)

# Line palette, cycled in creation order
LINE_COLORS = [
    '#06b6d4', '#8b5cf6', '#ec4899', '#f59e0b', '#10b981',
    '#ef4444', '#3b82f6', '#f97316', '#14b8a6', '#a855f7',
]


def line_color(index: int) -> str:
    return LINE_COLORS[index % len(LINE_COLORS)]


def _graticule(projection: ProjectionType, step: int = 30) -> List[np.ndarray]:
    rings = []
    lats = np.linspace(-90, 90, 181)
    for lon in range(-180, 180, step):
        rings.append(np.column_stack([np.full_like(lats, lon), lats]))
    lons = np.linspace(-180, 180, 361)
    for lat in range(-60, 90, step):
        rings.append(np.column_stack([lons, np.full_like(lons, lat)]))
    return project_rings(rings, projection)


def _draw_map(
    ax,
    projection: ProjectionType,
    instant: SimulatedInstant,
    lines: Sequence[LineSegment],
    land_rings: Optional[Iterable[Sequence[Sequence[float]]]],
    samples: int,
):
    for piece in _graticule(projection):
        ax.plot(piece[:, 0], piece[:, 1], color='#cbd5e1', lw=0.5, zorder=1)

    if land_rings is not None:
        for piece in project_rings(land_rings, projection):
            ax.plot(piece[:, 0], piece[:, 1], color='#475569', lw=0.7, zorder=2)

    for piece in project_rings([terminator(instant)], projection):
        ax.plot(piece[:, 0], piece[:, 1], color='#f59e0b', lw=1.2, ls='--', zorder=3)

    sun = solar_state(instant).subsolar_point
    sx, sy = project(sun, projection)
    ax.scatter([sx], [sy], s=120, c='#facc15', edgecolors='#b45309', zorder=6)

    for i, line in enumerate(lines):
        color = line_color(i)
        for piece in reproject_line(line, projection, n=samples):
            ax.plot(piece[:, 0], piece[:, 1], color=color, lw=2, zorder=4)
        ends = np.array([project(line.start, projection), project(line.end, projection)])
        ax.scatter(ends[:, 0], ends[:, 1], s=20, c=color, zorder=5)
        mid = ends.mean(axis=0)
        ax.annotate(format_distance(line.distance_km), mid, fontsize=8, color=color)

    ax.set_aspect('equal')
    ax.set_xticks([])
    ax.set_yticks([])


def plot_mercator_view(
    instant: SimulatedInstant,
    lines: Sequence[LineSegment] = (),
    land_rings=None,
    samples: int = 100,
    ax=None,
):
    """
    Mercator map with terminator, subsolar point and lines.

    Parameters
    ----------
    instant : SimulatedInstant
        Simulated time
    lines : sequence of LineSegment
        User-drawn lines
    land_rings : iterable of [lon, lat] rings, optional
        Continent outlines from the world-geometry source
    samples : int
        Sampling intervals for lines drawn on other views
    ax : matplotlib axis, optional
    """
    import matplotlib.pyplot as plt

    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 7))

    _draw_map(ax, ProjectionType.MERCATOR, instant, lines, land_rings, samples)

    y_max = np.log(np.tan(np.pi / 4 + np.radians(MERCATOR_MAX_LATITUDE) / 2))
    ax.set_xlim(-np.pi, np.pi)
    ax.set_ylim(-y_max, y_max)
    ax.set_title('Mercator')
    return ax


def plot_azimuthal_view(
    instant: SimulatedInstant,
    lines: Sequence[LineSegment] = (),
    land_rings=None,
    samples: int = 100,
    ax=None,
):
    """
    North-polar azimuthal equidistant ("flat Earth") disc.

    Parameters are as for `plot_mercator_view`.
    """
    import matplotlib.pyplot as plt
    from matplotlib.patches import Circle

    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 8))

    ax.add_patch(Circle((0, 0), AZIMUTHAL_DISC_RADIUS, fill=False,
                        ec='#94a3b8', lw=2, zorder=0))
    _draw_map(ax, ProjectionType.AZIMUTHAL, instant, lines, land_rings, samples)

    lim = AZIMUTHAL_DISC_RADIUS * 1.05
    ax.set_xlim(-lim, lim)
    ax.set_ylim(-lim, lim)
    ax.set_title('Flat Earth (azimuthal equidistant)')
    return ax


def plot_globe_view(
    instant: SimulatedInstant,
    lines: Sequence[LineSegment] = (),
    samples: int = 100,
    ax=None,
):
    """
    Wireframe globe with terminator and lines (3-D axis).

    The scene uses the globe convention (Y up); matplotlib's z axis
    shows the globe's y so north points up.
    """
    import matplotlib.pyplot as plt

    if ax is None:
        fig = plt.figure(figsize=(8, 8))
        ax = fig.add_subplot(projection='3d')

    for piece in _graticule(ProjectionType.SPHERE):
        ax.plot(piece[:, 0], piece[:, 2], piece[:, 1], color='#cbd5e1', lw=0.5)

    for piece in project_rings([terminator(instant)], ProjectionType.SPHERE, radius=1.002):
        ax.plot(piece[:, 0], piece[:, 2], piece[:, 1], color='#f59e0b', lw=1.2, ls='--')

    for i, line in enumerate(lines):
        for piece in reproject_line(line, ProjectionType.SPHERE, n=samples, radius=1.005):
            ax.plot(piece[:, 0], piece[:, 2], piece[:, 1], color=line_color(i), lw=2)

    sun = np.asarray(project(solar_state(instant).subsolar_point, ProjectionType.SPHERE))
    ax.scatter([sun[0]], [sun[2]], [sun[1]], s=80, c='#facc15')

    ax.set_box_aspect((1, 1, 1))
    ax.set_axis_off()
    ax.set_title('Globe')
    return ax


def plot_orbit_view(
    instant: SimulatedInstant,
    orbit_scale: float = ORBIT_SCALE,
    ax=None,
):
    """
    Orbit of the Earth seen from above the ecliptic, with season markers.

    The eccentricity is drawn to scale, so the ellipse looks circular.
    """
    import matplotlib.pyplot as plt

    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 8))

    ring = orbit_path(orbit_scale=orbit_scale)
    ax.plot(ring[:, 0], ring[:, 2], color='#64748b', lw=1)
    ax.scatter([0], [0], s=400, c='#facc15', edgecolors='#b45309', zorder=3)

    for label, (x, _, z) in season_markers(orbit_scale).items():
        ax.scatter([x], [z], s=20, c='#f59e0b', zorder=3)
        ax.annotate(label, (x, z), textcoords="offset points", xytext=(5, 5), fontsize=8)

    ex, _, ez = earth_orbital_position(instant.day_of_year, orbit_scale)
    ax.scatter([ex], [ez], s=80, c='#3b82f6', zorder=4)
    ax.annotate(f"Day {instant.day_of_year} ({season(instant.day_of_year)})",
                (ex, ez), textcoords="offset points", xytext=(8, -12), fontsize=9)

    ax.set_aspect('equal')
    ax.set_title('Orbit')
    ax.grid(True, alpha=0.3)
    return ax


def plot_all_views(
    instant: SimulatedInstant,
    lines: Sequence[LineSegment] = (),
    land_rings=None,
    samples: int = 100,
):
    """Figure with the Mercator, flat-Earth, globe and orbit views side by side."""
    import matplotlib.pyplot as plt

    fig = plt.figure(figsize=(20, 5))
    plot_mercator_view(instant, lines, land_rings, samples, ax=fig.add_subplot(1, 4, 1))
    plot_azimuthal_view(instant, lines, land_rings, samples, ax=fig.add_subplot(1, 4, 2))
    plot_globe_view(instant, lines, samples, ax=fig.add_subplot(1, 4, 3, projection='3d'))
    plot_orbit_view(instant, ax=fig.add_subplot(1, 4, 4))
    fig.tight_layout()
    return fig
