"""Batch ingredient validation against a catalog.

Each submitted name is searched; a confident best match is accepted (with a
correction warning when the spelling differs from the catalog), a middling one
comes back as invalid with suggestions. A name with no hit at all is retried
through its cleaned form and single words before it is reported as not
found. Nothing is written anywhere; unknown names are only logged.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Sequence

from ingredient_search.config import (
    ACCEPT_THRESHOLD,
    MAX_BATCH,
    SUGGEST_THRESHOLD,
    scoring_weights,
)
from ingredient_search.matching import search
from ingredient_search.models import (
    FormatCheck,
    IngredientEntry,
    InvalidIngredient,
    MatchResult,
    MatchStrategy,
    ScoringWeights,
    SearchOptions,
    ValidatedIngredient,
    ValidationReport,
    ValidationWarning,
)
from ingredient_search.normalization import ingredient_variations, normalize_text
from ingredient_search.telemetry import get_logger, log_event

MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 100
MAX_SUGGESTIONS = 3
SEARCH_LIMIT = 5

_DIGITS_ONLY_RE = re.compile(r"^\d+$")
_SYMBOLS_ONLY_RE = re.compile(r"^[^\w\s]+$")

_EXACT_STRATEGIES = {
    MatchStrategy.EXACT,
    MatchStrategy.ALIAS,
    MatchStrategy.DIACRITIC_INSENSITIVE,
}

logger = get_logger("validation")


def check_ingredient_format(name: object) -> FormatCheck:
    if not isinstance(name, str):
        return FormatCheck(False, "Ingredient name must be a non-empty string")
    trimmed = name.strip()
    if not trimmed:
        return FormatCheck(False, "Ingredient name cannot be empty")
    if len(trimmed) > MAX_NAME_LENGTH:
        return FormatCheck(
            False, f"Ingredient name too long (max {MAX_NAME_LENGTH} characters)"
        )
    if len(trimmed) < MIN_NAME_LENGTH:
        return FormatCheck(
            False, f"Ingredient name too short (min {MIN_NAME_LENGTH} characters)"
        )
    if _DIGITS_ONLY_RE.match(trimmed):
        return FormatCheck(False, "Ingredient name cannot be only numbers")
    if _SYMBOLS_ONLY_RE.match(trimmed):
        return FormatCheck(False, "Ingredient name contains only special characters")
    return FormatCheck(True)


def _correction_message(strategy: MatchStrategy) -> str:
    if strategy in _EXACT_STRATEGIES:
        return "Ingredient name corrected to standard form"
    return "Ingredient name auto-corrected based on similarity"


def _search_variations(
    name: str, entries: list[IngredientEntry], options: SearchOptions
) -> list[MatchResult]:
    """Retry with the cleaned name and its single words, best hit per entry."""
    best: dict = {}
    for variant in ingredient_variations(name)[1:]:
        for result in search(variant, entries, options):
            current = best.get(result.entry_id)
            if current is None or result.score > current.score:
                best[result.entry_id] = result
    ranked = sorted(best.values(), key=lambda item: (-item.score, item.entry_id))
    return ranked[: options.limit]


def validate_ingredients(
    names: Sequence[str],
    catalog: Iterable[IngredientEntry],
    *,
    accept_threshold: float = ACCEPT_THRESHOLD,
    suggest_threshold: float = SUGGEST_THRESHOLD,
    max_batch: int = MAX_BATCH,
    weights: ScoringWeights | None = None,
) -> ValidationReport:
    if not names:
        raise ValueError("At least one ingredient is required")
    if len(names) > max_batch:
        raise ValueError(f"Maximum {max_batch} ingredients allowed per request")

    # Materialize once; the catalog may be a one-shot iterable.
    entries = list(catalog)
    options = SearchOptions(
        limit=SEARCH_LIMIT,
        min_confidence=suggest_threshold,
        weights=weights if weights is not None else scoring_weights(),
    )
    report = ValidationReport()

    for raw in names:
        check = check_ingredient_format(raw)
        if not check.is_valid:
            report.invalid.append(
                InvalidIngredient(original=str(raw), reason=check.reason or "invalid")
            )
            continue

        name = raw.strip()
        results = search(name, entries, options) or _search_variations(
            name, entries, options
        )
        best = results[0] if results else None

        if best is not None and best.score >= accept_threshold:
            report.valid.append(ValidatedIngredient(original=name, match=best))
            if name != best.name:
                report.warnings.append(
                    ValidationWarning(
                        original=name,
                        corrected=best.name,
                        confidence=best.score,
                        message=_correction_message(best.matched_on),
                    )
                )
            continue

        if best is not None:
            suggestions = [result.name for result in results[:MAX_SUGGESTIONS]]
            report.invalid.append(
                InvalidIngredient(
                    original=name,
                    reason="Ingredient not found in master list",
                    suggestions=suggestions,
                )
            )
            report.warnings.append(
                ValidationWarning(
                    original=name,
                    message="Ingredient not found. Did you mean one of these?",
                    suggestions=suggestions,
                )
            )
            continue

        log_event(
            logger,
            "ingredient_not_found",
            level=logging.WARNING,
            original=name,
            normalized=normalize_text(name),
        )
        report.invalid.append(
            InvalidIngredient(original=name, reason="Ingredient not found in master list")
        )
        report.warnings.append(
            ValidationWarning(original=name, message="Ingredient not found in database")
        )

    log_event(
        logger,
        "ingredient_validation",
        total=len(names),
        valid=len(report.valid),
        invalid=len(report.invalid),
        warnings=len(report.warnings),
    )
    return report
