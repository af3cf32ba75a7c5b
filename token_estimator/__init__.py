"""Token Estimator - heuristic LLM token counts without a tokenizer model."""

from .core import (
    CODE_PATTERNS,
    EstimateMode,
    TextStats,
    TokenCounter,
    estimate_advanced,
    estimate_basic,
    estimate_quick,
)
from .config import ConfigError, EstimatorConfig, load_config

__version__ = "0.1.0"

__all__ = [
    "CODE_PATTERNS",
    "TextStats",
    "estimate_basic",
    "estimate_advanced",
    "estimate_quick",
    "EstimateMode",
    "TokenCounter",
    "ConfigError",
    "EstimatorConfig",
    "load_config",
]
