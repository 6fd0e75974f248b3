"""Load and validate feature finder configuration from YAML."""

from __future__ import annotations

from pathlib import Path

import yaml

from .schema import FinderConfig


def load_config(path: Path | str | None) -> FinderConfig:
    """Read a YAML file and return a validated FinderConfig.

    ``None`` returns the defaults.
    """
    if path is None:
        return FinderConfig()
    path = Path(path)
    with path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh)
    if raw is None:
        raw = {}
    return FinderConfig.model_validate(raw)
