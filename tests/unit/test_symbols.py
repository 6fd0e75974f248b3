"""Tests for the IPA chart and symbol token resolution."""

from __future__ import annotations

import pytest

from feature_finder.features.errors import InvalidCategoryError, UnknownSymbolError
from feature_finder.features.models import Category
from feature_finder.features.symbols import (
    clean_token,
    resolve_symbol,
    resolve_symbols,
    symbol_chart,
)


class TestSymbolChart:
    def test_consonant_chart(self):
        chart = symbol_chart(Category.CONSONANT)
        assert len(chart) == 25
        assert chart[0] == (1, "p")
        assert chart[-1] == (25, "h")

    def test_vowel_chart(self):
        chart = symbol_chart("vowel")
        assert len(chart) == 15
        assert (5, "e/ej") in chart


class TestResolveSymbol:
    def test_identifier_passthrough(self):
        assert resolve_symbol(Category.CONSONANT, "7") == 7
        assert resolve_symbol(Category.CONSONANT, 7) == 7

    def test_out_of_range_identifier_kept(self):
        """Range is checked per axis by the engine, not here."""
        assert resolve_symbol(Category.CONSONANT, "30") == 30
        assert resolve_symbol(Category.VOWEL, "0") == 0

    def test_ipa_lookup_is_category_scoped(self):
        assert resolve_symbol(Category.CONSONANT, "j") == 19
        assert resolve_symbol(Category.VOWEL, "i") == 1

    def test_alternative_spellings(self):
        assert resolve_symbol(Category.VOWEL, "e") == 5
        assert resolve_symbol(Category.VOWEL, "ej") == 5
        assert resolve_symbol(Category.VOWEL, "ow") == 9
        assert resolve_symbol(Category.CONSONANT, "tʃ") == 17
        assert resolve_symbol(Category.CONSONANT, "d͡ʒ") == 18
        assert resolve_symbol(Category.CONSONANT, "ɡ") == 21

    def test_brackets_and_whitespace(self):
        assert resolve_symbol(Category.CONSONANT, " /ʃ/ ") == 15
        assert resolve_symbol(Category.VOWEL, "[æ]") == 12

    def test_boolean_rejected(self):
        with pytest.raises(UnknownSymbolError):
            resolve_symbol(Category.CONSONANT, True)
        with pytest.raises(UnknownSymbolError):
            resolve_symbol(Category.VOWEL, False)

    def test_unknown_symbol(self):
        with pytest.raises(UnknownSymbolError, match="vowel"):
            resolve_symbol(Category.VOWEL, "p")

    def test_unknown_category(self):
        with pytest.raises(InvalidCategoryError):
            resolve_symbol("glide", "w")

    def test_resolve_many(self):
        assert resolve_symbols("consonant", ["p", "2", "m"]) == [1, 2, 3]


class TestCleanToken:
    def test_strips_delimiters(self):
        assert clean_token("/θ/") == "θ"

    def test_nfc(self):
        # e + combining acute composes to a single code point
        assert clean_token("e\u0301") == "\u00e9"
