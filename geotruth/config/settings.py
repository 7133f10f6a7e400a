"""
Visualizer configuration data structures.

Defines the configuration schema for the clock, sampling densities,
projection parameters and output, loadable from dicts, JSON or YAML.
"""

from dataclasses import dataclass, field
from typing import Dict, Any
import json

import yaml

from geotruth.core.clock import DEFAULT_REFERENCE_YEAR
from geotruth.utils.constants import (
    GLOBE_RADIUS,
    MERCATOR_MAX_LATITUDE,
    ORBIT_SCALE,
)


@dataclass
class ClockConfig:
    """Initial simulated time and animation settings.

    Attributes:
        day_of_year: Initial day (1-365)
        hour_of_day: Initial UTC hour [0, 24)
        animation_speed: Simulated hours per real second
        reference_year: Non-leap year used to express instants as dates
    """
    day_of_year: int = 172
    hour_of_day: float = 12.0
    animation_speed: float = 1.0
    reference_year: int = DEFAULT_REFERENCE_YEAR


@dataclass
class SamplingConfig:
    """Number of intervals used when sampling curves.

    Attributes:
        line_samples: Intervals per re-projected user line
        terminator_points: Intervals of the terminator ring
        night_polygon_points: Intervals of the night-side polygon
        orbit_points: Intervals of the orbit ellipse
    """
    line_samples: int = 100
    terminator_points: int = 360
    night_polygon_points: int = 180
    orbit_points: int = 128


@dataclass
class ProjectionConfig:
    """Projection parameters.

    Attributes:
        mercator_max_latitude: Latitude clamp for Mercator input (deg)
        globe_radius: Radius of the 3-D globe in scene units
        orbit_scale: Scene size of the orbit's semi-major axis
    """
    mercator_max_latitude: float = MERCATOR_MAX_LATITUDE
    globe_radius: float = GLOBE_RADIUS
    orbit_scale: float = ORBIT_SCALE


@dataclass
class OutputConfig:
    """Output format configuration.

    Attributes:
        format: Serialisation of CLI results (json, yaml)
        output_path: Directory for rendered figures
    """
    format: str = "json"
    output_path: str = "./output"


@dataclass
class VisualizerConfig:
    """Complete visualizer configuration.

    Example YAML input:
        clock:
          day_of_year: 355
          hour_of_day: 6.5
        sampling:
          line_samples: 200
        projection:
          mercator_max_latitude: 85.0
    """
    clock: ClockConfig = field(default_factory=ClockConfig)
    sampling: SamplingConfig = field(default_factory=SamplingConfig)
    projection: ProjectionConfig = field(default_factory=ProjectionConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "VisualizerConfig":
        """Create VisualizerConfig from a dictionary.

        Missing sections and keys take their defaults.

        Args:
            config_dict: Configuration dictionary

        Returns:
            VisualizerConfig instance
        """
        config_dict = config_dict or {}

        clock_dict = config_dict.get("clock", {})
        clock = ClockConfig(
            day_of_year=clock_dict.get("day_of_year", 172),
            hour_of_day=clock_dict.get("hour_of_day", 12.0),
            animation_speed=clock_dict.get("animation_speed", 1.0),
            reference_year=clock_dict.get("reference_year", DEFAULT_REFERENCE_YEAR),
        )

        sampling_dict = config_dict.get("sampling", {})
        sampling = SamplingConfig(
            line_samples=sampling_dict.get("line_samples", 100),
            terminator_points=sampling_dict.get("terminator_points", 360),
            night_polygon_points=sampling_dict.get("night_polygon_points", 180),
            orbit_points=sampling_dict.get("orbit_points", 128),
        )

        proj_dict = config_dict.get("projection", {})
        projection = ProjectionConfig(
            mercator_max_latitude=proj_dict.get("mercator_max_latitude", MERCATOR_MAX_LATITUDE),
            globe_radius=proj_dict.get("globe_radius", GLOBE_RADIUS),
            orbit_scale=proj_dict.get("orbit_scale", ORBIT_SCALE),
        )

        out_dict = config_dict.get("output", {})
        output = OutputConfig(
            format=out_dict.get("format", "json"),
            output_path=out_dict.get("output_path", "./output"),
        )

        return cls(
            clock=clock,
            sampling=sampling,
            projection=projection,
            output=output,
        )

    @classmethod
    def from_json(cls, json_path: str) -> "VisualizerConfig":
        """Load configuration from a JSON file."""
        with open(json_path, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)

    @classmethod
    def from_yaml(cls, yaml_path: str) -> "VisualizerConfig":
        """Load configuration from a YAML file."""
        with open(yaml_path, 'r') as f:
            config_dict = yaml.safe_load(f)
        return cls.from_dict(config_dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a nested dictionary."""
        return {
            "clock": {
                "day_of_year": self.clock.day_of_year,
                "hour_of_day": self.clock.hour_of_day,
                "animation_speed": self.clock.animation_speed,
                "reference_year": self.clock.reference_year,
            },
            "sampling": {
                "line_samples": self.sampling.line_samples,
                "terminator_points": self.sampling.terminator_points,
                "night_polygon_points": self.sampling.night_polygon_points,
                "orbit_points": self.sampling.orbit_points,
            },
            "projection": {
                "mercator_max_latitude": self.projection.mercator_max_latitude,
                "globe_radius": self.projection.globe_radius,
                "orbit_scale": self.projection.orbit_scale,
            },
            "output": {
                "format": self.output.format,
                "output_path": self.output.output_path,
            },
        }

    def to_json(self, json_path: str, indent: int = 2) -> None:
        """Save configuration to a JSON file."""
        with open(json_path, 'w') as f:
            json.dump(self.to_dict(), f, indent=indent)

    def to_yaml(self, yaml_path: str) -> None:
        """Save configuration to a YAML file."""
        with open(yaml_path, 'w') as f:
            yaml.safe_dump(self.to_dict(), f, sort_keys=False)

    def validate(self) -> list:
        """Validate configuration parameters.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if not 1 <= self.clock.day_of_year <= 365:
            errors.append("day_of_year must be between 1 and 365")
        if not 0 <= self.clock.hour_of_day < 24:
            errors.append("hour_of_day must be in [0, 24)")
        year = self.clock.reference_year
        if year % 4 == 0 and (year % 100 != 0 or year % 400 == 0):
            errors.append("reference_year must not be a leap year")

        for name in ("line_samples", "terminator_points",
                     "night_polygon_points", "orbit_points"):
            if getattr(self.sampling, name) < 1:
                errors.append(f"{name} must be at least 1")

        if not 0 < self.projection.mercator_max_latitude < 90:
            errors.append("mercator_max_latitude must be between 0 and 90 degrees")
        if self.projection.globe_radius <= 0:
            errors.append("globe_radius must be positive")
        if self.projection.orbit_scale <= 0:
            errors.append("orbit_scale must be positive")

        if self.output.format not in ("json", "yaml"):
            errors.append(f"Invalid output format: {self.output.format}")

        return errors
