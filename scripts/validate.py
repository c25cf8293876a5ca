"""Script to validate a batch of ingredient names against the catalog."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

try:
    from ingredient_search.catalog import load_catalog
    from ingredient_search.config import (
        ACCEPT_THRESHOLD,
        CATALOG_PATH,
        MAX_BATCH,
        SUGGEST_THRESHOLD,
    )
    from ingredient_search.telemetry import configure_logging
    from ingredient_search.validation import validate_ingredients
except ModuleNotFoundError:
    repo_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(repo_root / "src"))
    from ingredient_search.catalog import load_catalog  # type: ignore[reportMissingImports]
    from ingredient_search.config import (  # type: ignore[reportMissingImports]
        ACCEPT_THRESHOLD,
        CATALOG_PATH,
        MAX_BATCH,
        SUGGEST_THRESHOLD,
    )
    from ingredient_search.telemetry import configure_logging  # type: ignore[reportMissingImports]
    from ingredient_search.validation import validate_ingredients  # type: ignore[reportMissingImports]


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Validate ingredient names")
    parser.add_argument("names", nargs="+", help="Ingredient names to validate")
    parser.add_argument(
        "--catalog",
        type=Path,
        default=CATALOG_PATH,
        help="Path to a JSON catalog (defaults to the bundled master list)",
    )
    parser.add_argument(
        "--accept-threshold",
        type=float,
        default=ACCEPT_THRESHOLD,
        help="Score needed to accept a match",
    )
    parser.add_argument(
        "--suggest-threshold",
        type=float,
        default=SUGGEST_THRESHOLD,
        help="Score needed to offer a suggestion",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    configure_logging()
    catalog = load_catalog(args.catalog)
    try:
        report = validate_ingredients(
            args.names,
            catalog,
            accept_threshold=args.accept_threshold,
            suggest_threshold=args.suggest_threshold,
            max_batch=MAX_BATCH,
        )
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    print(json.dumps(report.to_dict(), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
