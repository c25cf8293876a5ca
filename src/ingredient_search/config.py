"""Configuration for ingredient_search callers (env-overridable).

The matching engine never reads these values itself; scripts, the UI and the
eval harness read them and pass them in explicitly.
"""

from __future__ import annotations

import os
from pathlib import Path

from ingredient_search.models import ScoringWeights


def _env_path(key: str, default: Path) -> Path:
    return Path(os.getenv(key, str(default))).expanduser()


def _env_int(key: str, default: int) -> int:
    try:
        return int(os.getenv(key, default))
    except (TypeError, ValueError):
        return default


PROJECT_ROOT = Path(__file__).resolve().parents[2]
PACKAGE_DIR = Path(__file__).resolve().parent

CATALOG_PATH = _env_path("INGS_CATALOG_PATH", PACKAGE_DIR / "master_ingredients.json")

DEFAULT_LIMIT = _env_int("INGS_LIMIT", 20)
DEFAULT_MIN_CONFIDENCE = _env_int("INGS_MIN_CONFIDENCE", 30) / 100.0

CONTAINMENT_FLOOR = _env_int("INGS_CONTAINMENT_FLOOR", 60) / 100.0
CONTAINMENT_CEILING = _env_int("INGS_CONTAINMENT_CEILING", 90) / 100.0

ACCEPT_THRESHOLD = _env_int("INGS_ACCEPT_THRESHOLD", 80) / 100.0
SUGGEST_THRESHOLD = _env_int("INGS_SUGGEST_THRESHOLD", 60) / 100.0
MAX_BATCH = _env_int("INGS_MAX_BATCH", 20)


def scoring_weights() -> ScoringWeights:
    """Containment range from the environment, for callers to pass to ``search``."""
    return ScoringWeights(
        containment_floor=CONTAINMENT_FLOOR,
        containment_ceiling=CONTAINMENT_CEILING,
    )
