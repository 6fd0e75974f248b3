"""Logging configuration shared by the command-line entry points."""

from __future__ import annotations

import logging
import sys


def setup_logging(level: str = "INFO", verbose: bool = False) -> None:
    """Send log records to stderr so stdout carries only results.

    ``verbose`` forces DEBUG, which includes per-axis merge decisions.
    """
    numeric = logging.DEBUG if verbose else getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s [%(levelname)-7s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )
