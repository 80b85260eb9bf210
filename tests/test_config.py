"""Tests for settings schemas and YAML configuration loading."""

import logging
from pathlib import Path

import pytest
import yaml

from posetime.config import InterpolationSettings, OutputSettings, PosetimeConfig, SettingsManager
from posetime.geometry import Pose, TimedPose, Vector3
from posetime.interpolation import pose_at

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def write_yaml(path: Path, data) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data))
    return path


class TestSchemas:
    def test_interpolation_defaults(self) -> None:
        settings = InterpolationSettings()
        assert settings.slerp_dot_threshold == 0.9995
        assert settings.normalize_epsilon == 1e-10
        assert settings.min_time_gap == 1e-9
        assert settings.original_sample_tolerance == 1e-9

    def test_output_defaults(self) -> None:
        output = OutputSettings()
        assert output.output_dir == "interpolation_results"
        assert output.save_csv
        assert not output.save_plot

    def test_output_directory(self, tmp_path: Path) -> None:
        config = PosetimeConfig(output=OutputSettings(output_dir="run1"))
        assert config.get_output_directory(tmp_path) == tmp_path / "data" / "results" / "run1"


class TestSettingsManager:
    def test_load_absolute_path(self, tmp_path: Path) -> None:
        path = write_yaml(tmp_path / "cfg.yaml", {
            "name": "Arm",
            "interpolation": {"slerp_dot_threshold": 0.99, "min_time_gap": 1e-6},
            "output": {"output_dir": "arm_results", "save_plot": True},
        })
        config = SettingsManager(tmp_path).load_config(path)
        assert config.name == "Arm"
        assert config.interpolation.slerp_dot_threshold == 0.99
        assert config.interpolation.min_time_gap == 1e-6
        assert config.interpolation.normalize_epsilon == 1e-10
        assert config.output.output_dir == "arm_results"
        assert config.output.save_plot

    def test_relative_path_resolves_under_configs_dir(self, tmp_path: Path) -> None:
        write_yaml(tmp_path / "data" / "configs" / "rel.yaml", {"name": "Relative"})
        manager = SettingsManager(tmp_path)
        config = manager.load_config("rel.yaml")
        assert config.name == "Relative"
        assert manager.config_directory == tmp_path / "data" / "configs"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            SettingsManager(tmp_path).load_config("missing.yaml")

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        config = SettingsManager(tmp_path).load_config(path)
        assert config == PosetimeConfig()

    def test_non_mapping_root_raises(self, tmp_path: Path) -> None:
        path = write_yaml(tmp_path / "list.yaml", [1, 2, 3])
        with pytest.raises(ValueError):
            SettingsManager(tmp_path).load_config(path)

    def test_unknown_keys_warn_and_are_ignored(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        path = write_yaml(tmp_path / "cfg.yaml", {"interpolation": {"bogus": 1, "min_time_gap": 0.5}})
        with caplog.at_level(logging.WARNING, logger="posetime.config.settings_manager"):
            config = SettingsManager(tmp_path).load_config(path)
        assert config.interpolation.min_time_gap == 0.5
        assert "bogus" in caplog.text

    def test_get_output_directory_creates_it(self, tmp_path: Path) -> None:
        manager = SettingsManager(tmp_path)
        output_dir = manager.get_output_directory(PosetimeConfig())
        assert output_dir.is_dir()
        assert output_dir == tmp_path / "data" / "results" / "interpolation_results"

    def test_bundled_default_config(self) -> None:
        config = SettingsManager(PROJECT_ROOT).load_config("default_config.yaml")
        assert config.name == "Demo Trajectory"
        assert config.interpolation == InterpolationSettings()


class TestSettingsValidation:
    @pytest.mark.parametrize("threshold", [1.0, 1.5, -0.1, float("nan")])
    def test_dot_threshold_outside_unit_interval(self, threshold: float) -> None:
        with pytest.raises(ValueError, match="slerp_dot_threshold"):
            InterpolationSettings(slerp_dot_threshold=threshold)

    def test_zero_dot_threshold_allowed(self) -> None:
        assert InterpolationSettings(slerp_dot_threshold=0.0).slerp_dot_threshold == 0.0

    @pytest.mark.parametrize("name", ["normalize_epsilon", "min_time_gap", "original_sample_tolerance"])
    def test_negative_thresholds_rejected(self, name: str) -> None:
        with pytest.raises(ValueError, match=name):
            InterpolationSettings(**{name: -1e-9})

    @pytest.mark.parametrize("name", ["normalize_epsilon", "min_time_gap", "original_sample_tolerance"])
    def test_zero_thresholds_allowed(self, name: str) -> None:
        assert getattr(InterpolationSettings(**{name: 0.0}), name) == 0.0

    def test_numeric_strings_converted(self) -> None:
        settings = InterpolationSettings(min_time_gap="1e-6", slerp_dot_threshold="0.99")
        assert settings.min_time_gap == 1e-6
        assert isinstance(settings.min_time_gap, float)
        assert settings.slerp_dot_threshold == 0.99

    def test_non_numeric_string_rejected(self) -> None:
        with pytest.raises(ValueError, match="min_time_gap"):
            InterpolationSettings(min_time_gap="tiny")

    def test_output_flags_must_be_boolean(self) -> None:
        assert OutputSettings(save_plot="True").save_plot is True
        assert OutputSettings(save_csv="false").save_csv is False
        with pytest.raises(ValueError, match="save_csv"):
            OutputSettings(save_csv="no thanks")


class TestRawYamlValues:
    def test_exponent_without_decimal_point(self, tmp_path: Path) -> None:
        # safe_dump always writes 1.0e-06; hand-written files often omit the ".0"
        path = tmp_path / "cfg.yaml"
        path.write_text("interpolation:\n  min_time_gap: 1e-6\n  normalize_epsilon: 1e-12\n")
        config = SettingsManager(tmp_path).load_config(path)
        assert config.interpolation.min_time_gap == 1e-6
        assert isinstance(config.interpolation.min_time_gap, float)
        assert config.interpolation.normalize_epsilon == 1e-12

        samples = [
            TimedPose(0.0, Pose(Vector3(0.0, 0.0, 0.0))),
            TimedPose(1.0, Pose(Vector3(2.0, 0.0, 0.0))),
        ]
        result = pose_at(samples, 0.5, config.interpolation)
        assert result.pose.position == Vector3(1.0, 0.0, 0.0)

    def test_bad_value_in_file_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "cfg.yaml"
        path.write_text("interpolation:\n  slerp_dot_threshold: 1.0\n")
        with pytest.raises(ValueError, match="slerp_dot_threshold"):
            SettingsManager(tmp_path).load_config(path)

    def test_non_numeric_value_in_file_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "cfg.yaml"
        path.write_text("interpolation:\n  min_time_gap: soon\n")
        with pytest.raises(ValueError, match="min_time_gap"):
            SettingsManager(tmp_path).load_config(path)
