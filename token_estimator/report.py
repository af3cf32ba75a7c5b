"""Report building and console rendering for estimates."""

from __future__ import annotations

import json
from typing import Iterable, List

from pydantic import BaseModel, Field
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .core.estimator import TextInput, as_text, estimate_advanced, estimate_basic, estimate_quick

ELLIPSIS = "..."

BANNER_TITLE = "Token Count Estimator"
BANNER_LEGEND = [
    "c/t = characters to token.",
    "cpt = characters per token.",
    "Estimated: Factors basic code patterns only, educated guess.",
    "Adjusted: Estimated, scaled up for code and down for prose.",
    "Guessed: Goes only by ~4cpt for text, ~3cpt for code.",
]


class EstimateReport(BaseModel):
    """All three estimates for one labelled text."""

    label: str = Field(..., description="Report heading")
    preview: str = Field(..., description="Truncated text")
    chars: int = Field(..., ge=0, description="Characters in the text")
    words: int = Field(..., ge=0, description="Words in the text")
    tokens: int = Field(..., ge=0, description="Basic estimate")
    adjusted_tokens: int = Field(..., ge=0, description="Advanced estimate")
    guessed_tokens: int = Field(..., ge=0, description="Quick estimate")
    ratio: float = Field(..., ge=0.0, description="Characters per estimated token")


def format_preview(text: str, limit: int = 60) -> str:
    """First ``limit`` characters of ``text``, with an ellipsis if cut."""
    if len(text) > limit:
        return text[:limit] + ELLIPSIS
    return text


def chars_per_token(chars: int, tokens: int) -> float:
    """Characters per token; 0.0 when there are no tokens."""
    if tokens == 0:
        return 0.0
    return chars / float(tokens)


def build_report(label: str, text: TextInput, preview_chars: int = 60) -> EstimateReport:
    """Run every estimator over ``text`` and collect the results."""
    text = as_text(text)
    stats = estimate_basic(text)
    return EstimateReport(
        label=label,
        preview=format_preview(text, preview_chars),
        chars=stats.chars,
        words=stats.words,
        tokens=stats.tokens,
        adjusted_tokens=estimate_advanced(text),
        guessed_tokens=estimate_quick(text),
        ratio=chars_per_token(stats.chars, stats.tokens),
    )


def render_banner(console: Console) -> None:
    console.print(f"[bold]{BANNER_TITLE}[/bold]")
    console.print("=" * len(BANNER_TITLE))
    for line in BANNER_LEGEND:
        console.print(line, highlight=False)


def render_report(console: Console, report: EstimateReport) -> None:
    """Print one report as a two-column rich table."""
    # Label and text are user input; keep them out of markup parsing
    table = Table(title=Text(f"=== {report.label} ===", style="bold"), show_header=False, title_justify="left")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    table.add_row("Text", Text(report.preview))
    table.add_row("Characters", str(report.chars))
    table.add_row("Words", str(report.words))
    table.add_row("Estimated Tokens", str(report.tokens))
    table.add_row("Adjusted Tokens", str(report.adjusted_tokens))
    table.add_row("Guessed Tokens", str(report.guessed_tokens))
    table.add_row("Ratio (c/t)", f"{report.ratio:.2f}")

    console.print()
    console.print(table)


def reports_to_json(reports: Iterable[EstimateReport]) -> str:
    data: List[dict] = [r.model_dump() for r in reports]
    return json.dumps(data, indent=2, ensure_ascii=False)
