"""Input errors raised at the driver seam.

The reducers never raise: a mismatch or an out-of-range identifier is a
``None`` outcome for that axis. These exceptions cover input that is outside
the engine's domain altogether.
"""

from __future__ import annotations


class InvalidCategoryError(ValueError):
    """The category selector is neither consonant nor vowel."""

    def __init__(self, token: object) -> None:
        super().__init__(f"Invalid Input: unknown category {token!r}")
        self.token = token


class UnknownSymbolError(ValueError):
    """A symbol token is neither an identifier nor a charted IPA symbol."""

    def __init__(self, token: str, category: str) -> None:
        super().__init__(f"Unknown {category} symbol: {token!r}")
        self.token = token
        self.category = category


class SymbolCountError(ValueError):
    """The symbol sequence is empty or longer than the configured maximum."""

    def __init__(self, count: int, max_symbols: int) -> None:
        super().__init__(
            f"Expected between 1 and {max_symbols} symbols, got {count}"
        )
        self.count = count
        self.max_symbols = max_symbols
