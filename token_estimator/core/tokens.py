"""Shared token counter for consistent estimates across callers."""

from __future__ import annotations
from enum import Enum
from typing import Callable, Dict, Union

from .estimator import TextInput, estimate_advanced, estimate_basic, estimate_quick


class EstimateMode(str, Enum):
    """Which heuristic a counter uses."""
    BASIC = "basic"          # character-class scan
    ADVANCED = "advanced"    # scan + code/prose correction
    QUICK = "quick"          # characters per token only


def _basic_tokens(text: TextInput) -> int:
    return estimate_basic(text).tokens


_ESTIMATORS: Dict[EstimateMode, Callable[[TextInput], int]] = {
    EstimateMode.BASIC: _basic_tokens,
    EstimateMode.ADVANCED: estimate_advanced,
    EstimateMode.QUICK: estimate_quick,
}


class TokenCounter:
    """Count tokens with one of the heuristic estimators."""

    def __init__(self, mode: Union[EstimateMode, str] = EstimateMode.ADVANCED):
        self.mode = EstimateMode(mode)
        self._estimate = _ESTIMATORS[self.mode]

    def count(self, text: TextInput) -> int:
        """Estimated token count of ``text`` (0 for empty text)."""
        if not text:
            return 0
        return self._estimate(text)

    def __repr__(self) -> str:
        return f"TokenCounter(mode={self.mode.value!r})"
