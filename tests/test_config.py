"""Tests for visualizer configuration."""

import json

import pytest
import yaml

from geotruth.config import (
    ConfigurationManager,
    VisualizerConfig,
)
from geotruth.core.clock import SimulatedInstant


class TestVisualizerConfig:
    """Tests for the configuration data classes."""

    def test_defaults_valid(self):
        """The default configuration passes validation."""
        assert VisualizerConfig().validate() == []

    def test_from_dict_partial(self):
        """Missing sections and keys take defaults."""
        config = VisualizerConfig.from_dict({"clock": {"day_of_year": 355}})
        assert config.clock.day_of_year == 355
        assert config.clock.hour_of_day == 12.0
        assert config.sampling.line_samples == 100

    def test_from_dict_none(self):
        """An empty YAML document gives defaults."""
        assert VisualizerConfig.from_dict(None).to_dict() == VisualizerConfig().to_dict()

    def test_validation_errors(self):
        """Out-of-range values are reported."""
        config = VisualizerConfig.from_dict({
            "clock": {"day_of_year": 0, "hour_of_day": 24.0, "reference_year": 2024},
            "sampling": {"line_samples": 0},
            "projection": {"mercator_max_latitude": 90.0, "globe_radius": -1.0},
            "output": {"format": "xml"},
        })
        errors = config.validate()
        assert len(errors) == 7
        assert any("leap" in e for e in errors)
        assert any("line_samples" in e for e in errors)

    def test_json_round_trip(self, tmp_path):
        """Saving and loading JSON preserves values."""
        config = VisualizerConfig.from_dict({"clock": {"hour_of_day": 6.5}})
        path = tmp_path / "config.json"
        config.to_json(str(path))
        assert VisualizerConfig.from_json(str(path)).to_dict() == config.to_dict()

    def test_yaml_round_trip(self, tmp_path):
        """Saving and loading YAML preserves values."""
        config = VisualizerConfig.from_dict({"sampling": {"terminator_points": 720}})
        path = tmp_path / "config.yaml"
        config.to_yaml(str(path))
        assert VisualizerConfig.from_yaml(str(path)).to_dict() == config.to_dict()


class TestConfigurationManager:
    """Tests for configuration loading."""

    def test_load_dict(self):
        loaded = ConfigurationManager().load_config({"clock": {"day_of_year": 80}})
        assert loaded.is_valid
        assert loaded.config.clock.day_of_year == 80

    def test_load_invalid_dict(self):
        """Invalid configurations load but are flagged."""
        loaded = ConfigurationManager().load_config({"clock": {"day_of_year": 400}})
        assert not loaded.is_valid
        assert loaded.validation_errors

    def test_load_yaml_relative_to_base(self, tmp_path):
        """Relative paths resolve against base_path."""
        (tmp_path / "viz.yaml").write_text(yaml.safe_dump({"clock": {"hour_of_day": 3.0}}))
        loaded = ConfigurationManager(base_path=str(tmp_path)).load_config("viz.yaml")
        assert loaded.config.clock.hour_of_day == 3.0

    def test_load_json(self, tmp_path):
        path = tmp_path / "viz.json"
        path.write_text(json.dumps({"output": {"format": "yaml"}}))
        loaded = ConfigurationManager().load_config(str(path))
        assert loaded.config.output.format == "yaml"

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ConfigurationManager().load_config(str(tmp_path / "missing.yaml"))

    def test_unsupported_suffix_raises(self, tmp_path):
        path = tmp_path / "viz.ini"
        path.write_text("[clock]\n")
        with pytest.raises(ValueError):
            ConfigurationManager().load_config(str(path))

    def test_invalid_source_type_raises(self):
        with pytest.raises(TypeError):
            ConfigurationManager().load_config(42)

    def test_initial_state(self):
        """The configured clock becomes the initial state."""
        config = VisualizerConfig.from_dict({
            "clock": {"day_of_year": 355, "hour_of_day": 6.0, "animation_speed": 24.0},
        })
        state = ConfigurationManager.initial_state(config)
        assert state.instant == SimulatedInstant(355, 6.0)
        assert state.animation_speed == 24.0
        assert not state.is_animating
        assert state.lines == []

    @pytest.mark.parametrize("name", ["example.json", "example.yaml"])
    def test_example_config_valid(self, tmp_path, name):
        """The example configuration loads and validates."""
        manager = ConfigurationManager()
        path = tmp_path / name
        manager.save_example_config(str(path))
        assert manager.load_config(str(path)).is_valid
