"""Data models for the feature lookup and merge engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from feature_finder.features.errors import InvalidCategoryError


class Category(str, Enum):
    CONSONANT = "consonant"
    VOWEL = "vowel"


class AxisKind(str, Enum):
    FLAT = "flat"
    HIERARCHICAL = "hierarchical"


class Axis(str, Enum):
    """One dimension of phonetic classification."""

    PLACE = "place"
    MANNER = "manner"
    VOICING = "voicing"
    HEIGHT = "height"
    BACKNESS = "backness"
    TENSENESS = "tenseness"
    ROUNDEDNESS = "roundedness"
    DIPHTHONG = "diphthong"

    @property
    def description(self) -> str:
        return _AXIS_INFO[self][0]

    @property
    def kind(self) -> AxisKind:
        return _AXIS_INFO[self][1]

    @property
    def category(self) -> Category:
        return _AXIS_INFO[self][2]


# Declaration order here is the report order for each category
_AXIS_INFO: dict[Axis, tuple[str, AxisKind, Category]] = {
    Axis.PLACE: ("place of articulation", AxisKind.HIERARCHICAL, Category.CONSONANT),
    Axis.MANNER: ("manner of articulation", AxisKind.HIERARCHICAL, Category.CONSONANT),
    Axis.VOICING: ("voicing", AxisKind.FLAT, Category.CONSONANT),
    Axis.HEIGHT: ("height of the tongue", AxisKind.FLAT, Category.VOWEL),
    Axis.BACKNESS: ("backness of the tongue", AxisKind.FLAT, Category.VOWEL),
    Axis.TENSENESS: ("tenseness of the vocal tract", AxisKind.FLAT, Category.VOWEL),
    Axis.ROUNDEDNESS: ("roundedness of the lips", AxisKind.FLAT, Category.VOWEL),
    Axis.DIPHTHONG: ("simple/complex vowel", AxisKind.HIERARCHICAL, Category.VOWEL),
}

# Numeric selectors used by the interactive prompt
_CATEGORY_SELECTORS: dict[str, Category] = {
    "0": Category.CONSONANT,
    "1": Category.VOWEL,
}


def axes_for(category: Category) -> tuple[Axis, ...]:
    """Return the axes evaluated for *category*, in report order."""
    return tuple(axis for axis in Axis if axis.category == category)


def parse_category(token: str | int | Category) -> Category:
    """Parse a category selector: ``consonant``/``vowel`` or ``0``/``1``."""
    if isinstance(token, Category):
        return token
    key = str(token).strip().lower()
    if key in _CATEGORY_SELECTORS:
        return _CATEGORY_SELECTORS[key]
    try:
        return Category(key)
    except ValueError:
        raise InvalidCategoryError(token) from None


@dataclass(frozen=True)
class FeatureValue:
    """A feature label, optionally refined by a more specific label.

    Flat axes only ever use ``general``. On hierarchical axes ``specific``
    refines ``general`` (``Labial``/``Bilabial``); ``None`` means the general
    label is the finest classification available for the symbol.
    """

    general: str
    specific: str | None = None

    def coarsen(self) -> FeatureValue:
        return FeatureValue(self.general)


@dataclass
class AxisResults:
    """Per-axis outcome of one classification call.

    Only evaluated axes appear in ``values``. A present axis mapped to
    ``None`` means the symbols share no common value on it; an absent axis
    was never evaluated.
    """

    category: Category
    symbols: list[int] = field(default_factory=list)
    values: dict[Axis, str | None] = field(default_factory=dict)

    def __getitem__(self, key: Axis | str) -> str | None:
        try:
            axis = Axis(key)
        except ValueError:
            raise KeyError(key) from None
        return self.values[axis]

    def __iter__(self):
        return iter(self.values.items())

    def is_evaluated(self, axis: Axis | str) -> bool:
        try:
            return Axis(axis) in self.values
        except ValueError:
            return False

    def common_features(self) -> dict[str, str]:
        return {axis.value: value for axis, value in self.values.items() if value is not None}

    def report_lines(self) -> list[str]:
        lines = []
        for axis, value in self.values.items():
            if value is None:
                lines.append(f"There is no common {axis.description}.")
            else:
                lines.append(f"The common {axis.description} is: {value}")
        return lines

    def to_dict(self) -> dict[str, Any]:
        return {
            "category": self.category.value,
            "symbols": list(self.symbols),
            "results": {axis.value: value for axis, value in self.values.items()},
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> AxisResults:
        return cls(
            category=Category(d["category"]),
            symbols=list(d.get("symbols", [])),
            values={Axis(k): v for k, v in d.get("results", {}).items()},
        )
