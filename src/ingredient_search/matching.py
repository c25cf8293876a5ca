"""Query-to-catalog matching and ranking.

Each catalog entry is scored against the query through its canonical name and
every alias. A candidate string goes through the strategies in priority order
and the first one that applies decides its score:

1. exact key equality (``exact``, or ``diacritic_insensitive`` when the query's
   own diacritics disagree with the candidate's),
2. key equality on an alias (``alias``),
3. one key containing the other (``substring``), scaled by the length ratio
   into ``[containment_floor, containment_ceiling]``,
4. normalized Levenshtein similarity (``fuzzy_edit``).

An entry scores as well as its best candidate. Entries under the confidence
floor are dropped, the rest are sorted by score then id, and only then cut to
the limit.
"""

from __future__ import annotations

from typing import Iterable

from ingredient_search.models import (
    CandidateKey,
    IngredientEntry,
    MatchResult,
    MatchStrategy,
    ScoringWeights,
    SearchOptions,
)
from ingredient_search.normalization import NormalizedKey, fold_text, normalize
from ingredient_search.similarity import edit_similarity

_DEFAULT_OPTIONS = SearchOptions()


def containment_score(
    query: NormalizedKey, candidate: NormalizedKey, weights: ScoringWeights
) -> float | None:
    if not query or not candidate:
        return None
    if query.value in candidate.value or candidate.value in query.value:
        ratio = min(len(query), len(candidate)) / max(len(query), len(candidate))
        span = weights.containment_ceiling - weights.containment_floor
        return weights.containment_floor + span * ratio
    return None


def score_candidate(
    query: NormalizedKey,
    query_folded: str,
    candidate: CandidateKey,
    weights: ScoringWeights,
) -> tuple[float, MatchStrategy]:
    if query == candidate.key:
        if candidate.is_alias:
            return weights.exact_score, MatchStrategy.ALIAS
        # A query typed without marks is an exact hit; conflicting marks are not.
        if query_folded == candidate.folded or query_folded == query.value:
            return weights.exact_score, MatchStrategy.EXACT
        return weights.exact_score, MatchStrategy.DIACRITIC_INSENSITIVE

    contained = containment_score(query, candidate.key, weights)
    if contained is not None:
        return contained, MatchStrategy.SUBSTRING

    return edit_similarity(query.value, candidate.key.value), MatchStrategy.FUZZY_EDIT


def score_text(
    query: str, candidate: str, weights: ScoringWeights | None = None
) -> float:
    """Score any pair of display strings, e.g. a query against a category label."""
    key = normalize(query)
    if not key:
        return 0.0
    weights = weights or ScoringWeights()
    target = CandidateKey(
        text=candidate,
        key=normalize(candidate),
        folded=fold_text(candidate),
        is_alias=False,
    )
    score, _ = score_candidate(key, fold_text(query), target, weights)
    return score


def score_entry(
    query: NormalizedKey,
    query_folded: str,
    entry: IngredientEntry,
    weights: ScoringWeights,
) -> MatchResult:
    scored: list[MatchResult] = []
    for candidate in entry.candidates:
        score, strategy = score_candidate(query, query_folded, candidate, weights)
        scored.append(
            MatchResult(
                entry_id=entry.id,
                entry=entry,
                score=score,
                matched_on=strategy,
                matched_text=candidate.text,
            )
        )
    # max() keeps the first of equal scores, so the canonical name wins ties.
    return max(scored, key=lambda item: item.score)


def _in_categories(entry: IngredientEntry, options: SearchOptions) -> bool:
    if options.categories is None:
        return True
    return entry.category.value in options.categories


def search(
    query: str,
    catalog: Iterable[IngredientEntry],
    options: SearchOptions | None = None,
) -> list[MatchResult]:
    options = options or _DEFAULT_OPTIONS
    key = normalize(query)
    if not key or options.limit <= 0:
        return []
    query_folded = fold_text(query)

    matches: list[MatchResult] = []
    for entry in catalog:
        if not _in_categories(entry, options):
            continue
        result = score_entry(key, query_folded, entry, options.weights)
        if result.score >= options.min_confidence:
            matches.append(result)

    matches.sort(key=lambda item: (-item.score, item.entry_id))
    return matches[: options.limit]


def best_match(
    query: str,
    catalog: Iterable[IngredientEntry],
    options: SearchOptions | None = None,
) -> MatchResult | None:
    results = search(query, catalog, options)
    return results[0] if results else None
