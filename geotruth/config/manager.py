"""
Configuration Manager for the visualizer.

Handles loading and validation of configurations and builds the
initial application state from them.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from geotruth.config.settings import VisualizerConfig
from geotruth.core.clock import SimulatedInstant
from geotruth.core.state import GeoTruthState

logger = logging.getLogger(__name__)


@dataclass
class LoadedConfiguration:
    """Container for a loaded and validated configuration.

    Attributes:
        config: The configuration settings
        is_valid: Whether the configuration passed validation
        validation_errors: List of validation error messages
    """
    config: VisualizerConfig
    is_valid: bool
    validation_errors: list


class ConfigurationManager:
    """Loads visualizer configurations.

    Example:
        >>> manager = ConfigurationManager()
        >>> loaded = manager.load_config({"clock": {"day_of_year": 355}})
        >>> if loaded.is_valid:
        ...     state = manager.initial_state(loaded.config)
    """

    def __init__(self, base_path: Optional[str] = None):
        """Initialize the configuration manager.

        Args:
            base_path: Base path for relative file references.
                      Defaults to current working directory.
        """
        self.base_path = Path(base_path) if base_path else Path.cwd()

    def load_config(
        self,
        config_source: Dict[str, Any] | str,
    ) -> LoadedConfiguration:
        """Load and validate a configuration.

        Args:
            config_source: Configuration dictionary, JSON path, or YAML path

        Returns:
            LoadedConfiguration with the parsed config and validation result

        Raises:
            FileNotFoundError: If a config path does not exist
            ValueError: If the file suffix is not supported
            TypeError: If the source is neither a dict nor a path string
        """
        if isinstance(config_source, dict):
            config = VisualizerConfig.from_dict(config_source)
        elif isinstance(config_source, str):
            path = self.resolve_path(config_source)
            if not path.exists():
                raise FileNotFoundError(f"Configuration file not found: {path}")
            if path.suffix.lower() == '.json':
                config = VisualizerConfig.from_json(str(path))
            elif path.suffix.lower() in ('.yaml', '.yml'):
                config = VisualizerConfig.from_yaml(str(path))
            else:
                raise ValueError(f"Unsupported config file format: {path.suffix}")
            logger.info(f"Loaded configuration from {path}")
        else:
            raise TypeError(f"Invalid config source type: {type(config_source)}")

        validation_errors = config.validate()
        is_valid = len(validation_errors) == 0

        if not is_valid:
            for error in validation_errors:
                logger.warning(f"Configuration validation error: {error}")

        return LoadedConfiguration(
            config=config,
            is_valid=is_valid,
            validation_errors=validation_errors,
        )

    def resolve_path(self, path: str) -> Path:
        """Resolve a path relative to base_path."""
        p = Path(path)
        if p.is_absolute():
            return p
        return (self.base_path / p).resolve()

    @staticmethod
    def initial_state(config: VisualizerConfig) -> GeoTruthState:
        """Build the application state described by a configuration."""
        return GeoTruthState(
            instant=SimulatedInstant(config.clock.day_of_year, config.clock.hour_of_day),
            animation_speed=config.clock.animation_speed,
        )

    @staticmethod
    def create_example_config() -> Dict[str, Any]:
        """Create an example configuration dictionary."""
        return {
            "clock": {
                "day_of_year": 355,
                "hour_of_day": 12.0,
                "animation_speed": 24.0,
                "reference_year": 2025,
            },
            "sampling": {
                "line_samples": 100,
                "terminator_points": 360,
            },
            "projection": {
                "mercator_max_latitude": 85.0511287798,
            },
            "output": {
                "format": "json",
                "output_path": "./output",
            },
        }

    def save_example_config(self, output_path: str) -> None:
        """Save an example configuration file (.json, or YAML otherwise)."""
        example = self.create_example_config()
        path = Path(output_path)
        with open(path, 'w') as f:
            if path.suffix.lower() == '.json':
                json.dump(example, f, indent=2)
            else:
                yaml.safe_dump(example, f, sort_keys=False)
        logger.info(f"Saved example configuration to {output_path}")
