"""Script to search the ingredient catalog."""

from __future__ import annotations

import argparse
import json
import sys
import time
from pathlib import Path

try:
    from ingredient_search.catalog import load_catalog
    from ingredient_search.config import (
        CATALOG_PATH,
        DEFAULT_LIMIT,
        DEFAULT_MIN_CONFIDENCE,
        scoring_weights,
    )
    from ingredient_search.matching import search
    from ingredient_search.models import Category, SearchOptions
    from ingredient_search.telemetry import configure_logging, log_event
except ModuleNotFoundError:
    repo_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(repo_root / "src"))
    from ingredient_search.catalog import load_catalog  # type: ignore[reportMissingImports]
    from ingredient_search.config import (  # type: ignore[reportMissingImports]
        CATALOG_PATH,
        DEFAULT_LIMIT,
        DEFAULT_MIN_CONFIDENCE,
        scoring_weights,
    )
    from ingredient_search.matching import search  # type: ignore[reportMissingImports]
    from ingredient_search.models import (  # type: ignore[reportMissingImports]
        Category,
        SearchOptions,
    )
    from ingredient_search.telemetry import (  # type: ignore[reportMissingImports]
        configure_logging,
        log_event,
    )


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Search the ingredient catalog")
    parser.add_argument("query", type=str, help="Ingredient name, any spelling")
    parser.add_argument(
        "--limit", type=int, default=DEFAULT_LIMIT, help="Maximum results to return"
    )
    parser.add_argument(
        "--min-confidence",
        type=float,
        default=DEFAULT_MIN_CONFIDENCE,
        help="Drop matches scoring below this value (0-1)",
    )
    parser.add_argument(
        "--category",
        action="append",
        choices=[category.value for category in Category],
        default=None,
        help="Restrict to a category (repeatable)",
    )
    parser.add_argument(
        "--catalog",
        type=Path,
        default=CATALOG_PATH,
        help="Path to a JSON catalog (defaults to the bundled master list)",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print results as a JSON array"
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logger = configure_logging()
    start = time.perf_counter()
    catalog = load_catalog(args.catalog)
    options = SearchOptions(
        limit=args.limit,
        min_confidence=args.min_confidence,
        categories=frozenset(args.category) if args.category else None,
        weights=scoring_weights(),
    )
    results = search(args.query, catalog, options)
    total_latency_ms = (time.perf_counter() - start) * 1000

    log_event(
        logger,
        "search",
        query=args.query,
        limit=args.limit,
        min_confidence=args.min_confidence,
        categories=args.category,
        catalog_size=len(catalog),
        results=len(results),
        total_latency_ms=total_latency_ms,
    )

    if args.json:
        print(
            json.dumps(
                [result.to_dict() for result in results], ensure_ascii=False, indent=2
            )
        )
        return
    if not results:
        print("No matches.")
        return
    for idx, result in enumerate(results, start=1):
        print(
            f"#{idx} {result.name} [{result.entry.category_label}]"
            f" score={result.score:.4f} matched_on={result.matched_on.value}"
        )


if __name__ == "__main__":
    main()
