"""Core estimation utilities for Token Estimator."""

from .estimator import (
    CODE_PATTERNS,
    TextStats,
    estimate_advanced,
    estimate_basic,
    estimate_quick,
)
from .tokens import EstimateMode, TokenCounter
from .telemetry import probe, log_event

__all__ = [
    "CODE_PATTERNS",
    "TextStats",
    "estimate_basic",
    "estimate_advanced",
    "estimate_quick",
    "EstimateMode",
    "TokenCounter",
    "probe",
    "log_event",
]
