"""CLI handler for the classify-batch subcommand."""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from feature_finder.config.loader import load_config
from feature_finder.features.batch import classify_jsonl
from feature_finder.features.classifier import FeatureClassifier
from feature_finder.utils.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def run_batch(
    config_path: str | None, input_override: str | None, output_override: str | None
) -> None:
    cfg = load_config(config_path)
    setup_logging(cfg.log_level)

    input_path = Path(input_override) if input_override else cfg.batch.input_path
    if input_path is None:
        typer.echo("No input file: pass --input or set batch.input_path", err=True)
        raise typer.Exit(code=1)
    output_path = Path(output_override) if output_override else cfg.batch.output_path

    logger.info("Classifying queries from %s", input_path)
    try:
        summary = classify_jsonl(input_path, output_path, FeatureClassifier(cfg))
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(f"{summary.written} results written to {output_path}")
    if summary.skipped:
        typer.echo(f"{summary.skipped} lines skipped: {summary.skipped_lines}", err=True)
