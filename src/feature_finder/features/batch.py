"""JSONL batch classification.

Each input line is a query such as
``{"id": "q1", "category": "vowel", "symbols": [1, "ɪ"]}``; each output line
is the query's ``AxisResults`` with the query id attached.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import orjson

from feature_finder.features.classifier import FeatureClassifier
from feature_finder.features.models import AxisResults, Category, parse_category
from feature_finder.features.symbols import resolve_symbols

logger = logging.getLogger(__name__)


@dataclass
class ClassificationQuery:
    """One request read from a batch input file."""

    category: Category
    symbols: list[int]
    id: str = ""

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> ClassificationQuery:
        category = parse_category(d["category"])
        tokens = d["symbols"]
        if not isinstance(tokens, list):
            raise ValueError(f"'symbols' must be a list, got {type(tokens).__name__}")
        return cls(
            category=category,
            symbols=resolve_symbols(category, tokens),
            id=str(d.get("id", "")),
        )


@dataclass
class BatchSummary:
    written: int = 0
    skipped: int = 0
    skipped_lines: list[int] = field(default_factory=list)


def classify_jsonl(
    input_path: Path, output_path: Path, classifier: FeatureClassifier
) -> BatchSummary:
    """Classify every query in *input_path*, writing results to *output_path*.

    Malformed lines are logged and skipped; blank lines are ignored. Raises
    ``ValueError`` when both paths name the same file.
    """
    if input_path.resolve() == output_path.resolve():
        raise ValueError(f"Output path {output_path} would overwrite the input file")
    summary = BatchSummary()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with input_path.open("rb") as fin, output_path.open("wb") as fout:
        for line_no, line in enumerate(fin, start=1):
            if not line.strip():
                continue
            try:
                query = ClassificationQuery.from_dict(orjson.loads(line))
                results = classifier.classify(query.category, query.symbols)
            except (orjson.JSONDecodeError, KeyError, TypeError, ValueError) as exc:
                logger.warning("Skipping line %d of %s: %s", line_no, input_path.name, exc)
                summary.skipped += 1
                summary.skipped_lines.append(line_no)
                continue
            fout.write(orjson.dumps(_with_id(query, results)) + b"\n")
            summary.written += 1
    logger.info(
        "Wrote %d results to %s (%d lines skipped)",
        summary.written, output_path, summary.skipped,
    )
    return summary


def _with_id(query: ClassificationQuery, results: AxisResults) -> dict[str, Any]:
    record = results.to_dict()
    if query.id:
        record = {"id": query.id, **record}
    return record
