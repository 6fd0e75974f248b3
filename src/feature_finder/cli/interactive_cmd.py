"""CLI handler for the interactive subcommand.

Asks three questions in the classic console order: how many
symbols, each symbol in turn, then the category selector.
"""

from __future__ import annotations

import typer

from feature_finder.config.loader import load_config
from feature_finder.features.classifier import FeatureClassifier
from feature_finder.features.errors import SymbolCountError
from feature_finder.features.models import parse_category
from feature_finder.features.symbols import resolve_symbols
from feature_finder.utils.logging_setup import setup_logging

from .classify_cmd import emit_results


def run_interactive(config_path: str | None) -> None:
    cfg = load_config(config_path)
    setup_logging(cfg.log_level)
    classifier = FeatureClassifier(cfg)

    try:
        count = typer.prompt("How many consonants/vowels?", type=int)
        if not 1 <= count <= cfg.max_symbols:
            raise SymbolCountError(count, cfg.max_symbols)
        tokens = [typer.prompt(f"Enter symbol {i + 1}.") for i in range(count)]
        selector = typer.prompt("Vowel or consonant? Enter 0 if consonant, 1 if vowel.")
        category = parse_category(selector)
        results = classifier.classify(category, resolve_symbols(category, tokens))
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    emit_results(results, cfg.output_format)
