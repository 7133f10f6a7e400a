"""
Configuration management for the visualizer.

This module provides:
- VisualizerConfig: Data class for clock, sampling, projection and output settings
- ConfigurationManager: Loading and validation of configurations
"""

from geotruth.config.settings import (
    VisualizerConfig,
    ClockConfig,
    SamplingConfig,
    ProjectionConfig,
    OutputConfig,
)
from geotruth.config.manager import ConfigurationManager, LoadedConfiguration

__all__ = [
    "VisualizerConfig",
    "ClockConfig",
    "SamplingConfig",
    "ProjectionConfig",
    "OutputConfig",
    "ConfigurationManager",
    "LoadedConfiguration",
]
