"""Shared data models for ingredient search."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Hashable, Iterable

from ingredient_search.normalization import NormalizedKey, fold_text, normalize


class Category(str, Enum):
    MEAT = "meat"
    VEGETABLE = "vegetable"
    SEAFOOD = "seafood"
    SPICE = "spice"
    FRUIT = "fruit"
    GRAIN = "grain"
    OTHER = "other"

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]


CATEGORY_LABELS: dict[Category, str] = {
    Category.MEAT: "Thịt",
    Category.VEGETABLE: "Rau củ",
    Category.SEAFOOD: "Hải sản",
    Category.SPICE: "Gia vị",
    Category.FRUIT: "Trái cây",
    Category.GRAIN: "Ngũ cốc",
    Category.OTHER: "Khác",
}


class MatchStrategy(str, Enum):
    EXACT = "exact"
    ALIAS = "alias"
    DIACRITIC_INSENSITIVE = "diacritic_insensitive"
    SUBSTRING = "substring"
    FUZZY_EDIT = "fuzzy_edit"


@dataclass(frozen=True)
class CandidateKey:
    text: str
    key: NormalizedKey
    folded: str
    is_alias: bool


@dataclass(frozen=True)
class IngredientEntry:
    id: Hashable
    canonical_name: str
    aliases: tuple[str, ...] = ()
    category: Category = Category.OTHER
    candidates: tuple[CandidateKey, ...] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if not isinstance(self.canonical_name, str) or not self.canonical_name.strip():
            raise ValueError(f"Ingredient {self.id!r} has an empty canonical name")
        aliases = tuple(alias for alias in self.aliases if alias)
        object.__setattr__(self, "aliases", aliases)
        object.__setattr__(self, "category", Category(self.category))
        candidates = [_candidate(self.canonical_name, is_alias=False)]
        candidates.extend(_candidate(alias, is_alias=True) for alias in aliases)
        object.__setattr__(self, "candidates", tuple(candidates))

    @property
    def normalized_name(self) -> NormalizedKey:
        return self.candidates[0].key

    @property
    def category_label(self) -> str:
        return self.category.label


def _candidate(text: str, *, is_alias: bool) -> CandidateKey:
    return CandidateKey(
        text=text, key=normalize(text), folded=fold_text(text), is_alias=is_alias
    )


@dataclass(frozen=True)
class ScoringWeights:
    exact_score: float = 1.0
    containment_floor: float = 0.6
    containment_ceiling: float = 0.9


@dataclass(frozen=True)
class SearchOptions:
    limit: int = 20
    min_confidence: float = 0.3
    categories: frozenset[str] | None = None
    weights: ScoringWeights = field(default_factory=ScoringWeights)

    def __post_init__(self) -> None:
        if self.categories is not None:
            object.__setattr__(self, "categories", _category_values(self.categories))


def _category_values(
    categories: Category | str | Iterable[Category | str],
) -> frozenset[str]:
    if isinstance(categories, str):
        categories = (categories,)
    values: set[str] = set()
    for category in categories:
        if isinstance(category, Category):
            values.add(category.value)
        else:
            values.add(str(category).strip().lower())
    return frozenset(values)


@dataclass(frozen=True)
class MatchResult:
    entry_id: Hashable
    entry: IngredientEntry = field(repr=False, compare=False)
    score: float
    matched_on: MatchStrategy
    matched_text: str

    @property
    def name(self) -> str:
        return self.entry.canonical_name

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.entry_id,
            "name": self.entry.canonical_name,
            "normalized_name": self.entry.normalized_name.value,
            "aliases": list(self.entry.aliases),
            "category": self.entry.category.value,
            "category_label": self.entry.category_label,
            "score": round(self.score, 4),
            "matched_on": self.matched_on.value,
            "matched_text": self.matched_text,
        }


@dataclass(frozen=True)
class FormatCheck:
    is_valid: bool
    reason: str | None = None


@dataclass(frozen=True)
class ValidatedIngredient:
    original: str
    match: MatchResult

    def to_dict(self) -> dict[str, Any]:
        return {"original": self.original, **self.match.to_dict()}


@dataclass(frozen=True)
class InvalidIngredient:
    original: str
    reason: str
    suggestions: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "original": self.original,
            "reason": self.reason,
            "suggestions": list(self.suggestions),
        }


@dataclass(frozen=True)
class ValidationWarning:
    original: str
    message: str
    corrected: str | None = None
    confidence: float | None = None
    suggestions: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "original": self.original,
            "message": self.message,
            "corrected": self.corrected,
            "confidence": round(self.confidence, 4)
            if self.confidence is not None
            else None,
            "suggestions": list(self.suggestions),
        }


@dataclass
class ValidationReport:
    valid: list[ValidatedIngredient] = field(default_factory=list)
    invalid: list[InvalidIngredient] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": [item.to_dict() for item in self.valid],
            "invalid": [item.to_dict() for item in self.invalid],
            "warnings": [item.to_dict() for item in self.warnings],
        }
