"""Classifier evaluating every axis of a category over a symbol sequence.

Axes are independent: each runs its own reducer over the full input, so an
identifier that aborts one axis does not affect the others.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from feature_finder.config.schema import FinderConfig
from feature_finder.features.errors import SymbolCountError
from feature_finder.features.models import (
    Axis,
    AxisKind,
    AxisResults,
    Category,
    axes_for,
    parse_category,
)
from feature_finder.features.reducers import reduce_flat, reduce_hierarchical
from feature_finder.features.tables import table_for

logger = logging.getLogger(__name__)

_REDUCERS = {
    AxisKind.FLAT: reduce_flat,
    AxisKind.HIERARCHICAL: reduce_hierarchical,
}


def evaluate_axis(axis: Axis, symbols: Sequence[int]) -> str | None:
    """Run the reducer for *axis* over *symbols*."""
    result = _REDUCERS[axis.kind](symbols, table_for(axis))
    logger.debug("%s over %s -> %s", axis.value, list(symbols), result)
    return result


class FeatureClassifier:
    """Finds the features shared by a sequence of consonants or vowels."""

    def __init__(self, config: FinderConfig | None = None) -> None:
        self.config = config or FinderConfig()

    def classify(
        self, category: Category | str | int, symbols: Sequence[int]
    ) -> AxisResults:
        category = parse_category(category)
        symbols = list(symbols)
        if not 1 <= len(symbols) <= self.config.max_symbols:
            raise SymbolCountError(len(symbols), self.config.max_symbols)

        results = AxisResults(category=category, symbols=symbols)
        for axis in axes_for(category):
            results.values[axis] = evaluate_axis(axis, symbols)
        logger.info(
            "Classified %d %s(s): %d of %d axes in common",
            len(symbols), category.value,
            len(results.common_features()), len(results.values),
        )
        return results


def classify(category: Category | str | int, symbols: Sequence[int]) -> AxisResults:
    """Classify *symbols* with the default configuration."""
    return FeatureClassifier().classify(category, symbols)
