"""CLI handler for the chart subcommand."""

from __future__ import annotations

import typer

from feature_finder.features.models import Category, parse_category
from feature_finder.features.symbols import symbol_chart
from feature_finder.features.tables import id_range


def run_chart(category: str | None) -> None:
    try:
        categories = [parse_category(category)] if category else list(Category)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    for cat in categories:
        ids = id_range(cat)
        typer.echo(f"{cat.value.upper()}S ({ids.start}-{ids.stop - 1})")
        for symbol_id, ipa in symbol_chart(cat):
            typer.echo(f"  {symbol_id:>2}: {ipa}")
