"""Sample texts shown by the demo report."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Union

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)


class Sample(BaseModel):
    """A labelled text to report on."""

    label: str = Field(..., description="Heading shown in the report")
    text: str = Field(..., description="Text to estimate")


BUILTIN_SAMPLES: List[Sample] = [
    Sample(
        label="Simple English",
        text="Hello world! This is a simple test sentence.",
    ),
    Sample(
        label="C Code",
        text='int main() { printf("Hello\\n"); return 0; }',
    ),
    Sample(
        label="Complex English",
        text=(
            "The quick brown fox jumps over the lazy dog. This is a longer sentence "
            "with more complex vocabulary and sophisticated linguistic structures."
        ),
    ),
    Sample(
        label="JavaScript Code",
        text=(
            "function calculateFactorial(n) {\n"
            "  if (n <= 1) return 1;\n"
            "  return n * calculateFactorial(n - 1);\n"
            "}"
        ),
    ),
    Sample(
        label="Python Code",
        text=(
            "import numpy as np\n"
            "from sklearn.model_selection import train_test_split\n"
            "X_train, X_test = train_test_split(data, test_size=0.2)"
        ),
    ),
    Sample(
        label="Latin Text",
        text=(
            "Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod "
            "tempor incididunt ut labore et dolore magna aliqua."
        ),
    ),
]


def load_samples(path: Union[str, Path]) -> List[Sample]:
    """
    Load samples from a YAML list of ``{label, text}`` mappings.

    A top-level ``samples:`` key holding the list is accepted as well.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Samples YAML not found: {p}")
    try:
        with p.open("r", encoding="utf-8") as f:
            doc = yaml.safe_load(f) or []
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {p}: {e}") from e
    if isinstance(doc, dict):
        doc = doc.get("samples") or []
    if not isinstance(doc, list):
        raise ValueError(f"Samples file {p} must contain a list")

    out: List[Sample] = []
    for idx, row in enumerate(doc):
        if not isinstance(row, dict):
            raise ValueError(f"Sample #{idx} in {p} is not a mapping")
        try:
            out.append(Sample(**row))
        except ValidationError as e:
            raise ValueError(f"Sample #{idx} in {p} is invalid: {e}") from e
    logger.info(f"Loaded {len(out)} samples from {p}")
    return out
