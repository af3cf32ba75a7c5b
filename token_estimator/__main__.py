"""CLI interface for token estimation."""

import logging
import sys
from pathlib import Path
from typing import List, Optional

import click
from rich.console import Console

from .config import ConfigError, EstimatorConfig, load_config
from .core import EstimateMode, TokenCounter, probe
from .core.estimator import TextInput
from .report import (
    EstimateReport,
    build_report,
    render_banner,
    render_report,
    reports_to_json,
)
from .samples import BUILTIN_SAMPLES, Sample, load_samples

console = Console()
logger = logging.getLogger(__name__)

USER_INPUT_LABEL = "User Input"


def _report(cfg: EstimatorConfig, label: str, text: TextInput) -> EstimateReport:
    """Build a report, recording its timing when telemetry is configured."""
    with probe(label, cfg.telemetry_path, {"chars": len(text)}) as meta:
        report = build_report(label, text, cfg.preview_chars)
        meta.update(
            tokens=report.tokens,
            adjusted_tokens=report.adjusted_tokens,
            guessed_tokens=report.guessed_tokens,
        )
    return report


def _emit(reports: List[EstimateReport], format: str) -> None:
    if format == 'json':
        click.echo(reports_to_json(reports))
    else:
        for report in reports:
            render_report(console, report)


@click.group(invoke_without_command=True)
@click.option('--config', '-c', 'config_path', type=click.Path(dir_okay=False, path_type=Path),
              default=None, help='YAML config file')
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path]):
    """Estimate LLM token counts without a tokenizer model.

    With no command, prints the sample report and then reads lines
    interactively.
    """
    try:
        cfg = load_config(config_path)
    except ConfigError as e:
        raise click.ClickException(str(e))

    logging.basicConfig(
        level=getattr(logging, cfg.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    ctx.obj = cfg

    if ctx.invoked_subcommand is None:
        ctx.invoke(demo)
        ctx.invoke(interactive)


@cli.command()
@click.option('--format', '-f', type=click.Choice(['table', 'json']), default='table',
              help='Output format')
@click.option('--samples', '-s', 'samples_path', type=click.Path(dir_okay=False, path_type=Path),
              default=None, help='YAML file with {label, text} samples')
@click.pass_obj
def demo(cfg: EstimatorConfig, format: str, samples_path: Optional[Path]):
    """Report on the built-in (or configured) sample texts."""
    samples_path = samples_path or cfg.samples_path
    samples: List[Sample] = BUILTIN_SAMPLES
    if samples_path is not None:
        try:
            samples = load_samples(samples_path)
        except (FileNotFoundError, ValueError) as e:
            raise click.ClickException(str(e))

    if not samples:
        logger.warning("No samples to report on")

    reports = [_report(cfg, s.label, s.text) for s in samples]
    if format == 'table':
        render_banner(console)
    _emit(reports, format)


@cli.command()
@click.argument('text', required=False)
@click.option('--file', '-i', 'file_path', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              default=None, help='Read the text from a file, one character per byte')
@click.option('--mode', '-m', type=click.Choice([m.value for m in EstimateMode]), default=None,
              help='Estimator used by --format count')
@click.option('--format', '-f', type=click.Choice(['table', 'json', 'count']), default='table',
              help='Output format')
@click.pass_obj
def analyze(cfg: EstimatorConfig, text: Optional[str], file_path: Optional[Path],
            mode: Optional[str], format: str):
    """Estimate tokens for TEXT, a file, or standard input."""
    if text is not None and file_path is not None:
        raise click.UsageError("Pass either TEXT or --file, not both")

    if file_path is not None:
        label = file_path.name
        text = file_path.read_bytes()
    elif text is not None:
        label = USER_INPUT_LABEL
    else:
        label = USER_INPUT_LABEL
        text = sys.stdin.read()

    if format == 'count':
        counter = TokenCounter(mode or cfg.mode)
        with probe(label, cfg.telemetry_path, {"chars": len(text), "mode": counter.mode.value}) as meta:
            tokens = counter.count(text)
            meta["tokens"] = tokens
        click.echo(str(tokens))
        return

    _emit([_report(cfg, label, text)], format)


@cli.command()
@click.pass_obj
def interactive(cfg: EstimatorConfig):
    """Read lines from stdin and report on each until EOF or the quit command."""
    stream = sys.stdin
    console.print(f"\n\nEnter text to analyze (or '{cfg.quit_command}' to exit):", markup=False, highlight=False)

    while True:
        console.print(f"\n{cfg.prompt}", end="", markup=False, highlight=False)
        line = stream.readline()
        if not line:
            break

        line = line.rstrip("\n")
        if line == cfg.quit_command:
            break
        if not line:
            continue

        render_report(console, _report(cfg, USER_INPUT_LABEL, line))

    logger.debug("Interactive session finished")


if __name__ == "__main__":
    cli()
