"""CLI handler for the classify subcommand."""

from __future__ import annotations

import orjson
import typer

from feature_finder.config.loader import load_config
from feature_finder.config.schema import OutputFormat
from feature_finder.features.classifier import FeatureClassifier
from feature_finder.features.models import AxisResults, parse_category
from feature_finder.features.symbols import resolve_symbols
from feature_finder.utils.logging_setup import setup_logging

END_MARKER = "========END========"


def emit_results(results: AxisResults, output_format: OutputFormat) -> None:
    if output_format == OutputFormat.JSON:
        typer.echo(orjson.dumps(results.to_dict()).decode("utf-8"))
        return
    for line in results.report_lines():
        typer.echo(line)
    typer.echo(END_MARKER)


def run_classify(
    tokens: list[str],
    category: str,
    config_path: str | None,
    format_override: str | None,
    verbose: bool = False,
) -> None:
    cfg = load_config(config_path)
    setup_logging(cfg.log_level, verbose)

    try:
        output_format = OutputFormat(format_override) if format_override else cfg.output_format
        parsed = parse_category(category)
        symbols = resolve_symbols(parsed, tokens)
        results = FeatureClassifier(cfg).classify(parsed, symbols)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    emit_results(results, output_format)
