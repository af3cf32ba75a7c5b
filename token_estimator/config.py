"""
YAML configuration for the estimator shell.

Example:
    preview_chars: 80
    mode: quick
    telemetry_path: "${TOKEN_ESTIMATOR_HOME:.}/telemetry.jsonl"
    samples_path: samples.yaml

Env expansion: "${ENV_VAR:default}" inside strings.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .core.tokens import EstimateMode

logger = logging.getLogger(__name__)

CONFIG_ENV = "TOKEN_ESTIMATOR_CONFIG"
LOG_LEVEL_ENV = "TOKEN_ESTIMATOR_LOG_LEVEL"
MODE_ENV = "TOKEN_ESTIMATOR_MODE"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigError(ValueError):
    """Raised when configuration cannot be loaded or is invalid."""


class EstimatorConfig(BaseModel):
    """Settings for reports, the interactive loop and telemetry."""

    model_config = ConfigDict(extra="forbid")

    preview_chars: int = Field(default=60, ge=1, description="Text preview width in reports")
    mode: EstimateMode = Field(default=EstimateMode.ADVANCED, description="Default estimator")
    quit_command: str = Field(default="quit", description="Line that ends interactive mode")
    prompt: str = Field(default="> ", description="Interactive prompt")
    log_level: str = Field(default="WARNING", description="Logging level name")
    telemetry_path: Optional[Path] = Field(default=None, description="JSONL telemetry file")
    samples_path: Optional[Path] = Field(default=None, description="YAML file with report samples")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level


def _expand_env(val: Any) -> Any:
    if isinstance(val, str) and "${" in val:
        # ${VAR:default}
        out = ""
        i = 0
        while i < len(val):
            if val[i : i + 2] == "${":
                j = val.find("}", i + 2)
                if j == -1:
                    out += val[i:]
                    break
                expr = val[i + 2 : j]
                if ":" in expr:
                    key, default = expr.split(":", 1)
                else:
                    key, default = expr, ""
                out += os.getenv(key, default)
                i = j + 1
            else:
                out += val[i]
                i += 1
        return out
    if isinstance(val, dict):
        return {k: _expand_env(v) for k, v in val.items()}
    if isinstance(val, list):
        return [_expand_env(v) for v in val]
    return val


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            doc = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(doc, dict):
        raise ConfigError(f"Config file {path} must contain a mapping, got {type(doc).__name__}")
    return doc


def load_config(path: Optional[Union[str, Path]] = None) -> EstimatorConfig:
    """
    Load configuration from YAML.

    Args:
        path: Config file. Falls back to $TOKEN_ESTIMATOR_CONFIG, then defaults.

    Returns:
        Validated configuration with environment overrides applied.
    """
    if path is None:
        path = os.getenv(CONFIG_ENV) or None

    data: Dict[str, Any] = {}
    if path is not None:
        p = Path(path)
        data = _expand_env(_read_yaml(p))
        logger.info(f"Loaded config from {p}")

    if os.getenv(LOG_LEVEL_ENV):
        data["log_level"] = os.environ[LOG_LEVEL_ENV]
    if os.getenv(MODE_ENV):
        data["mode"] = os.environ[MODE_ENV]

    try:
        return EstimatorConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
