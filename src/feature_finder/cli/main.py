"""Main Typer application with four subcommands."""

from __future__ import annotations

import typer

app = typer.Typer(
    name="feature-finder",
    help="Find the articulatory features shared by English consonants or vowels.",
    no_args_is_help=True,
)


@app.command(context_settings={"ignore_unknown_options": True})
def classify(
    symbols: list[str] = typer.Argument(
        ..., help="Symbol identifiers (consonants 1-25, vowels 1-15) or IPA symbols; "
        "negative numbers are accepted as out-of-range identifiers"
    ),
    category: str = typer.Option(
        ..., "--category", "-k", help="consonant or vowel (or 0 / 1)"
    ),
    config: str = typer.Option(None, "--config", "-c", help="Path to config YAML"),
    output_format: str = typer.Option(
        None, "--format", "-f", help="Override output format: text or json"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log merge decisions"),
) -> None:
    """Report the common value of every axis for the given symbols."""
    from .classify_cmd import run_classify

    run_classify(symbols, category, config, output_format, verbose)


@app.command()
def chart(
    category: str = typer.Option(
        None, "--category", "-k", help="Only show consonants or vowels"
    ),
) -> None:
    """Print the chart of numbered consonants and vowels."""
    from .chart_cmd import run_chart

    run_chart(category)


@app.command()
def interactive(
    config: str = typer.Option(None, "--config", "-c", help="Path to config YAML"),
) -> None:
    """Ask for the symbols and the category, then report common features."""
    from .interactive_cmd import run_interactive

    run_interactive(config)


@app.command()
def classify_batch(
    config: str = typer.Option(None, "--config", "-c", help="Path to config YAML"),
    input_path: str = typer.Option(
        None, "--input", "-i", help="Override JSONL query file"
    ),
    output_path: str = typer.Option(
        None, "--output", "-o", help="Override JSONL results file"
    ),
) -> None:
    """Classify every query of a JSONL file."""
    from .batch_cmd import run_batch

    run_batch(config, input_path, output_path)


if __name__ == "__main__":
    app()
