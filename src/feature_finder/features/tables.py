"""Symbol feature tables for the English consonants and vowels.

Each symbol is identified by a small integer scoped to its category
(consonants 1-25, vowels 1-15). Every (category, axis) pair has its own
table, total over the category's identifier range and undefined outside it.

Simplifications carried by the data:
- lateral and retroflex liquids are merged into ``Liquid``
- ``w`` is placed as ``Labial`` refined by ``Velar`` rather than ``Bilabial``
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from feature_finder.features.models import Axis, Category, FeatureValue

CONSONANT_IDS = range(1, 26)
VOWEL_IDS = range(1, 16)

_ID_RANGES: dict[Category, range] = {
    Category.CONSONANT: CONSONANT_IDS,
    Category.VOWEL: VOWEL_IDS,
}

FeatureTable = Mapping[int, FeatureValue]


def _table(groups: Iterable[tuple[Iterable[int], FeatureValue]]) -> FeatureTable:
    table: dict[int, FeatureValue] = {}
    for ids, value in groups:
        for symbol_id in ids:
            if symbol_id in table:
                raise ValueError(f"Symbol {symbol_id} assigned twice")
            table[symbol_id] = value
    return MappingProxyType(dict(sorted(table.items())))


def _flat(groups: Iterable[tuple[Iterable[int], str]]) -> FeatureTable:
    return _table((ids, FeatureValue(label)) for ids, label in groups)


_PLACE = _table([
    ((1, 2, 3), FeatureValue("Labial", "Bilabial")),       # p b m
    ((4, 5), FeatureValue("Labial", "Labiodental")),       # f v
    ((6, 7), FeatureValue("Dental")),                      # θ ð
    (range(8, 15), FeatureValue("Alveolar")),              # t d n s z l r
    (range(15, 19), FeatureValue("Alveopalatal")),         # ʃ ʒ ʧ ʤ
    ((19,), FeatureValue("Palatal")),                      # j
    ((20, 21, 22), FeatureValue("Velar")),                 # k g ŋ
    ((23,), FeatureValue("Labial", "Velar")),              # w
    ((24, 25), FeatureValue("Glottal")),                   # ʔ h
])

_MANNER = _table([
    ((1, 2, 8, 9, 20, 21, 24), FeatureValue("Stop")),
    ((3, 10, 22), FeatureValue("Nasal", "Stop")),
    ((4, 5, 6, 7, 11, 12, 15, 16, 25), FeatureValue("Fricative")),
    ((17, 18), FeatureValue("Affricate")),
    ((13, 14), FeatureValue("Liquid")),
    ((19, 23), FeatureValue("Glide")),
])

_VOICING = _flat([
    ((1, 4, 6, 8, 11, 15, 17, 20, 24, 25), "Voiceless"),
    ((2, 3, 5, 7, 9, 10, 12, 13, 14, 16, 18, 19, 21, 22, 23), "Voiced"),
])

_HEIGHT = _flat([
    (range(1, 5), "High"),
    (range(5, 12), "Mid"),
    (range(12, 16), "Low"),
])

_BACKNESS = _flat([
    ((1, 2, 5, 6, 12), "Front"),
    ((7, 8, 13, 14), "Central"),
    ((3, 4, 9, 10, 11, 15), "Back"),
])

_TENSENESS = _flat([
    ((1, 3, 5, 9, 10, 13, 14, 15), "Tensed"),
    ((2, 4, 6, 7, 8, 11, 12), "Laxed"),
])

_ROUNDEDNESS = _flat([
    ((3, 4, 9, 10, 11), "Rounded"),
    ((1, 2, 5, 6, 7, 8, 12, 13, 14, 15), "Unrounded"),
])

_DIPHTHONG = _table([
    ((1, 2, 3, 4, 6, 7, 8, 11, 12, 15), FeatureValue("Simple Vowel")),
    ((10, 13, 14), FeatureValue("Diphthong", "Major Diphthong")),
    ((5, 9), FeatureValue("Diphthong", "Minor Diphthong")),
])

FEATURE_TABLES: Mapping[Axis, FeatureTable] = MappingProxyType({
    Axis.PLACE: _PLACE,
    Axis.MANNER: _MANNER,
    Axis.VOICING: _VOICING,
    Axis.HEIGHT: _HEIGHT,
    Axis.BACKNESS: _BACKNESS,
    Axis.TENSENESS: _TENSENESS,
    Axis.ROUNDEDNESS: _ROUNDEDNESS,
    Axis.DIPHTHONG: _DIPHTHONG,
})


def table_for(axis: Axis) -> FeatureTable:
    """Return the read-only identifier -> FeatureValue table for *axis*."""
    return FEATURE_TABLES[axis]


def id_range(category: Category) -> range:
    """Return the valid identifier range for *category*."""
    return _ID_RANGES[category]


def lookup(axis: Axis, symbol_id: int) -> FeatureValue | None:
    """Look up one symbol's value on *axis*; ``None`` when out of range."""
    return FEATURE_TABLES[axis].get(symbol_id)
