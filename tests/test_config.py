"""Tests for YAML configuration loading."""

from pathlib import Path

import pytest

from token_estimator.config import (
    CONFIG_ENV,
    LOG_LEVEL_ENV,
    MODE_ENV,
    ConfigError,
    EstimatorConfig,
    load_config,
)
from token_estimator.core import EstimateMode


class TestDefaults:
    """Test configuration without a file."""

    def test_defaults(self):
        cfg = load_config()

        assert cfg == EstimatorConfig()
        assert cfg.preview_chars == 60
        assert cfg.mode is EstimateMode.ADVANCED
        assert cfg.quit_command == "quit"
        assert cfg.log_level == "WARNING"
        assert cfg.telemetry_path is None
        assert cfg.samples_path is None

    def test_empty_file_gives_defaults(self, temp_dir):
        path = temp_dir / "empty.yaml"
        path.write_text("")

        assert load_config(path) == EstimatorConfig()


class TestLoadFromFile:
    """Test YAML parsing and validation."""

    def test_values_are_applied(self, write_yaml):
        path = write_yaml("config.yaml", {
            "preview_chars": 20,
            "mode": "quick",
            "log_level": "debug",
            "telemetry_path": "out/telemetry.jsonl",
        })
        cfg = load_config(path)

        assert cfg.preview_chars == 20
        assert cfg.mode is EstimateMode.QUICK
        assert cfg.log_level == "DEBUG"
        assert cfg.telemetry_path == Path("out/telemetry.jsonl")

    def test_env_expansion(self, write_yaml, monkeypatch):
        monkeypatch.setenv("TE_HOME", "/var/te")
        path = write_yaml("config.yaml", {
            "telemetry_path": "${TE_HOME:.}/t.jsonl",
            "samples_path": "${TE_MISSING_DIR:fallback}/s.yaml",
        })
        cfg = load_config(path)

        assert cfg.telemetry_path == Path("/var/te/t.jsonl")
        assert cfg.samples_path == Path("fallback/s.yaml")

    def test_path_from_environment(self, write_yaml, monkeypatch):
        path = write_yaml("config.yaml", {"quit_command": "exit"})
        monkeypatch.setenv(CONFIG_ENV, str(path))

        assert load_config().quit_command == "exit"

    def test_env_overrides_file(self, write_yaml, monkeypatch):
        path = write_yaml("config.yaml", {"mode": "quick", "log_level": "INFO"})
        monkeypatch.setenv(MODE_ENV, "basic")
        monkeypatch.setenv(LOG_LEVEL_ENV, "error")
        cfg = load_config(path)

        assert cfg.mode is EstimateMode.BASIC
        assert cfg.log_level == "ERROR"


class TestConfigErrors:
    """Test invalid configuration handling."""

    def test_missing_file(self, temp_dir):
        with pytest.raises(ConfigError, match="not found"):
            load_config(temp_dir / "nope.yaml")

    def test_not_a_mapping(self, write_yaml):
        path = write_yaml("config.yaml", ["a", "b"])
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)

    def test_invalid_yaml(self, temp_dir):
        path = temp_dir / "bad.yaml"
        path.write_text("mode: [unclosed")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path)

    def test_unknown_key(self, write_yaml):
        path = write_yaml("config.yaml", {"colour": "blue"})
        with pytest.raises(ConfigError, match="colour"):
            load_config(path)

    @pytest.mark.parametrize("doc", [
        {"preview_chars": 0},
        {"mode": "exact"},
        {"log_level": "LOUD"},
    ])
    def test_invalid_values(self, write_yaml, doc):
        path = write_yaml("config.yaml", doc)
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(path)

    def test_config_error_is_value_error(self):
        assert issubclass(ConfigError, ValueError)
