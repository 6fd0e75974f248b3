"""Consensus reducers folding per-symbol feature values into one label.

Two reducers cover every axis:

- ``reduce_flat`` requires strict equality of labels across all symbols.
- ``reduce_hierarchical`` also accepts a one-hop match between a general
  label and a specific refinement (``Labial`` vs ``Labial/Velar`` vs
  ``Velar``). Each step compares only the running consensus with the next
  symbol, and any match coarsens the consensus, discarding its specific
  label. The result therefore depends on symbol order:
  ``Nasal/Stop, Stop, Nasal/Stop`` agrees on ``Stop`` while
  ``Nasal/Stop, Nasal/Stop, Stop`` has no common manner.

Both return ``None`` as soon as a symbol has no entry in the table or
cannot be merged; nothing here raises.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from feature_finder.features.models import FeatureValue
from feature_finder.features.tables import FeatureTable

logger = logging.getLogger(__name__)


def merge_flat(consensus: FeatureValue, value: FeatureValue) -> FeatureValue | None:
    if value.general == consensus.general:
        return consensus
    return None


def merge_hierarchical(
    consensus: FeatureValue, value: FeatureValue
) -> FeatureValue | None:
    """Merge one symbol's value into the running consensus.

    Cases are tried in order; the first that applies wins.
    """
    cg, cs = consensus.general, consensus.specific
    ng, ns = value.general, value.specific

    if cg == ng:
        return consensus.coarsen()
    if cs is not None and ns is not None and cs == ns:
        return FeatureValue(cs)
    if cs is not None and cs == ng:
        return value.coarsen()
    if ns is not None and ns == cg:
        return FeatureValue(ns)
    return None


def _reduce(symbols, table, merge) -> str | None:
    consensus: FeatureValue | None = None
    for position, symbol_id in enumerate(symbols):
        value = table.get(symbol_id)
        if value is None:
            logger.debug("Symbol %r at position %d is out of range", symbol_id, position)
            return None
        if consensus is None:
            consensus = value
            continue
        merged = merge(consensus, value)
        if merged is None:
            logger.debug(
                "Conflict at position %d: %s does not merge with %s",
                position, value, consensus,
            )
            return None
        consensus = merged
    if consensus is None:
        return None
    return consensus.general


def reduce_flat(symbols: Sequence[int], table: FeatureTable) -> str | None:
    """Return the label shared by every symbol, or ``None``."""
    return _reduce(symbols, table, merge_flat)


def reduce_hierarchical(symbols: Sequence[int], table: FeatureTable) -> str | None:
    """Return the general label of the folded consensus, or ``None``."""
    return _reduce(symbols, table, merge_hierarchical)
