"""Pydantic v2 configuration models for the feature finder."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


class BatchConfig(BaseModel):
    """Input and output locations for ``classify-batch``."""

    input_path: Path | None = None
    output_path: Path = Path("results.jsonl")


class FinderConfig(BaseModel):
    """Top-level feature finder configuration."""

    max_symbols: int = Field(default=7, ge=1)
    log_level: str = "INFO"
    output_format: OutputFormat = OutputFormat.TEXT
    batch: BatchConfig = Field(default_factory=BatchConfig)
