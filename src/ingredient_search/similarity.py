"""Edit-distance similarity on normalized keys."""

from __future__ import annotations

from rapidfuzz.distance import Levenshtein


def levenshtein(a: str, b: str) -> int:
    """Insert/delete/substitute distance between two strings."""
    return Levenshtein.distance(a, b)


def edit_similarity(a: str, b: str) -> float:
    """``1 - distance / longest length``, floored at zero."""
    if not a and not b:
        return 1.0
    return max(0.0, Levenshtein.normalized_similarity(a, b))
