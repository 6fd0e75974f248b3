"""IPA chart for the numbered consonants and vowels, and token resolution."""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from feature_finder.features.errors import UnknownSymbolError
from feature_finder.features.models import Category, parse_category

# identifier -> IPA as printed in the chart; "/" separates alternative spellings
CONSONANT_CHART: Mapping[int, str] = MappingProxyType({
    1: "p", 2: "b", 3: "m", 4: "f", 5: "v",
    6: "θ", 7: "ð", 8: "t", 9: "d", 10: "n",
    11: "s", 12: "z", 13: "l", 14: "r", 15: "ʃ",
    16: "ʒ", 17: "ʧ", 18: "ʤ", 19: "j", 20: "k",
    21: "g", 22: "ŋ", 23: "w", 24: "ʔ", 25: "h",
})

VOWEL_CHART: Mapping[int, str] = MappingProxyType({
    1: "i", 2: "ɪ", 3: "u", 4: "ʊ", 5: "e/ej",
    6: "ɛ", 7: "ə", 8: "ʌ", 9: "o/ow", 10: "ɔj",
    11: "ɔ", 12: "æ", 13: "aj", 14: "aw", 15: "ɑ",
})

_CHARTS: dict[Category, Mapping[int, str]] = {
    Category.CONSONANT: CONSONANT_CHART,
    Category.VOWEL: VOWEL_CHART,
}

# Spellings not printed in the chart
_EXTRA_SPELLINGS: dict[Category, dict[str, int]] = {
    Category.CONSONANT: {
        "t͡ʃ": 17, "tʃ": 17,
        "d͡ʒ": 18, "dʒ": 18,
        "ɡ": 21,  # U+0261 script g
        "ɹ": 14,
    },
    Category.VOWEL: {
        "ɔɪ": 10, "aɪ": 13, "aʊ": 14,
        "eɪ": 5, "oʊ": 9,
    },
}

_IPA_BRACKET_RE = re.compile(r"^[/\[\]]+|[/\[\]]+$")


def _build_index(category: Category) -> dict[str, int]:
    index: dict[str, int] = {}
    for symbol_id, ipa in _CHARTS[category].items():
        for spelling in ipa.split("/"):
            index[unicodedata.normalize("NFC", spelling)] = symbol_id
    for spelling, symbol_id in _EXTRA_SPELLINGS[category].items():
        index[unicodedata.normalize("NFC", spelling)] = symbol_id
    return index


_INDEX: dict[Category, dict[str, int]] = {
    category: _build_index(category) for category in Category
}


def clean_token(token: str) -> str:
    """NFC-normalise a token and strip whitespace and ``/.../``/``[...]``."""
    text = unicodedata.normalize("NFC", token).strip()
    return _IPA_BRACKET_RE.sub("", text).strip()


def symbol_chart(category: Category | str) -> list[tuple[int, str]]:
    """Return ``(identifier, ipa)`` pairs for *category* in identifier order."""
    return sorted(_CHARTS[parse_category(category)].items())


def resolve_symbol(category: Category | str, token: str | int) -> int:
    """Resolve an identifier or IPA token to a symbol identifier.

    Decimal tokens are returned unchanged even when out of range, so the
    engine can report them as ``None`` per axis. IPA tokens must appear in
    the chart (or one of its alternative spellings). Booleans are rejected
    even though they are ints.
    """
    category = parse_category(category)
    if isinstance(token, bool):
        raise UnknownSymbolError(str(token), category.value)
    if isinstance(token, int):
        return token
    cleaned = clean_token(token)
    if re.fullmatch(r"[+-]?\d+", cleaned):
        return int(cleaned)
    symbol_id = _INDEX[category].get(cleaned)
    if symbol_id is None:
        raise UnknownSymbolError(token, category.value)
    return symbol_id


def resolve_symbols(category: Category | str, tokens: Iterable[str | int]) -> list[int]:
    return [resolve_symbol(category, token) for token in tokens]
