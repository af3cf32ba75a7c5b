"""Tests for report building and rendering."""

import json

import pytest
from rich.console import Console

from token_estimator.report import (
    BANNER_TITLE,
    build_report,
    chars_per_token,
    format_preview,
    render_banner,
    render_report,
    reports_to_json,
)


class TestFormatPreview:
    """Test text truncation."""

    def test_short_text_unchanged(self):
        assert format_preview("hello") == "hello"

    def test_exact_limit_unchanged(self):
        text = "x" * 60
        assert format_preview(text) == text

    def test_long_text_truncated(self):
        assert format_preview("x" * 61) == "x" * 60 + "..."

    def test_custom_limit(self):
        assert format_preview("abcdef", 3) == "abc..."


class TestCharsPerToken:
    """Test the ratio guard."""

    def test_zero_tokens(self):
        assert chars_per_token(10, 0) == 0.0

    def test_ratio(self):
        assert chars_per_token(44, 14) == pytest.approx(44 / 14)


class TestBuildReport:
    """Test report assembly."""

    def test_sample_report(self, simple_english):
        report = build_report(simple_english.label, simple_english.text)

        assert report.label == "Simple English"
        assert report.preview == simple_english.text
        assert report.chars == 44
        assert report.words == 8
        assert report.tokens == 14
        assert report.adjusted_tokens == 14
        assert report.guessed_tokens == 11
        assert report.ratio == pytest.approx(44 / 14)

    def test_empty_text(self):
        report = build_report("Empty", "")
        assert report.tokens == 0
        assert report.ratio == 0.0

    def test_whitespace_has_no_tokens(self):
        report = build_report("Blank", "   ")
        assert report.chars == 3
        assert report.tokens == 0
        assert report.ratio == 0.0

    def test_bytes_input(self):
        report = build_report("Bytes", b"hello")
        assert report.preview == "hello"
        assert report.tokens == 2


class TestRendering:
    """Test console output."""

    @pytest.fixture
    def console(self):
        return Console(record=True, width=120, color_system=None)

    def test_render_report(self, console, c_code):
        render_report(console, build_report(c_code.label, c_code.text))
        out = console.export_text()

        assert "=== C Code ===" in out
        assert "Estimated Tokens" in out
        assert "19" in out
        assert "22" in out
        assert "2.26" in out

    def test_markup_in_text_is_literal(self, console):
        render_report(console, build_report("[bold]x[/bold]", "[red]alert[/red]"))
        out = console.export_text()

        assert "[red]alert[/red]" in out
        assert "[bold]x[/bold]" in out

    def test_render_banner(self, console):
        render_banner(console)
        out = console.export_text()

        assert BANNER_TITLE in out
        assert "c/t = characters to token." in out

    def test_reports_to_json(self, simple_english):
        data = json.loads(reports_to_json([build_report(simple_english.label, simple_english.text)]))

        assert len(data) == 1
        assert data[0]["label"] == "Simple English"
        assert data[0]["guessed_tokens"] == 11
