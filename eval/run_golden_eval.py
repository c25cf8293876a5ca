"""Run golden ingredient-search evaluation against a catalog."""

from __future__ import annotations

import argparse
import json
import subprocess
import time
from datetime import datetime, timezone
from pathlib import Path

from ingredient_search.catalog import load_catalog
from ingredient_search.config import (
    CATALOG_PATH,
    DEFAULT_MIN_CONFIDENCE,
    scoring_weights,
)
from ingredient_search.matching import search
from ingredient_search.models import MatchResult, ScoringWeights, SearchOptions

METRICS = ("recall", "mrr", "top1")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run golden ingredient-search evaluation")
    parser.add_argument(
        "--cases",
        type=Path,
        default=Path("eval/golden_search.jsonl"),
        help="Path to golden search cases (jsonl)",
    )
    parser.add_argument(
        "--catalog",
        type=Path,
        default=CATALOG_PATH,
        help="Path to the JSON catalog to evaluate against",
    )
    parser.add_argument(
        "--top-k",
        type=int,
        default=5,
        help="Top-k cutoff for recall",
    )
    parser.add_argument(
        "--min-confidence",
        type=float,
        default=DEFAULT_MIN_CONFIDENCE,
        help="Confidence floor passed to search",
    )
    parser.add_argument(
        "--report-path",
        type=Path,
        default=Path("eval/reports/latest.json"),
        help="Path to write eval report artifact",
    )
    parser.add_argument(
        "--history-dir",
        type=Path,
        default=Path("eval/reports/history"),
        help="Directory for timestamped report history",
    )
    return parser.parse_args()


def _load_previous_report(path: Path) -> dict | None:
    if not path.exists():
        return None
    try:
        return json.loads(path.read_text())
    except json.JSONDecodeError:
        return None


def _compute_deltas(current: dict, previous: dict | None) -> dict | None:
    if not previous:
        return None
    current_metrics = current.get("metrics@k")
    previous_metrics = previous.get("metrics@k")
    if not isinstance(current_metrics, dict) or not isinstance(previous_metrics, dict):
        return None
    deltas: dict[str, dict[str, float]] = {}
    for kind, metrics in current_metrics.items():
        if not isinstance(metrics, dict):
            continue
        prev = previous_metrics.get(kind, {})
        if not isinstance(prev, dict):
            continue
        deltas[kind] = {}
        for metric, value in metrics.items():
            prev_value = prev.get(metric)
            if isinstance(value, (int, float)) and isinstance(prev_value, (int, float)):
                deltas[kind][metric] = value - prev_value
    return deltas


def load_cases(path: Path) -> list[dict]:
    cases: list[dict] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        if not line.strip():
            continue
        cases.append(json.loads(line))
    return cases


def recall_at_k(results: list[MatchResult], expected_ids: list[str]) -> float:
    if not expected_ids:
        return 0.0
    found = {result.entry_id for result in results}
    return float(any(expected in found for expected in expected_ids))


def mrr_at_k(results: list[MatchResult], expected_ids: list[str]) -> float:
    if not expected_ids:
        return 0.0
    for rank, result in enumerate(results, start=1):
        if result.entry_id in expected_ids:
            return 1.0 / rank
    return 0.0


def top1(results: list[MatchResult], expected_ids: list[str]) -> float:
    return float(bool(results) and results[0].entry_id in expected_ids)


def _get_git_commit() -> str | None:
    try:
        result = subprocess.run(
            ["git", "rev-parse", "HEAD"],
            check=True,
            capture_output=True,
            text=True,
        )
    except (subprocess.CalledProcessError, FileNotFoundError):
        return None
    return result.stdout.strip() or None


def evaluate(
    cases: list[dict],
    catalog,
    *,
    top_k: int,
    min_confidence: float,
    weights: ScoringWeights | None = None,
) -> dict:
    if weights is None:
        weights = scoring_weights()
    totals: dict[str, dict[str, float]] = {"overall": dict.fromkeys(METRICS, 0.0)}
    counts: dict[str, int] = {"overall": 0}
    per_case: list[dict[str, object]] = []
    for case in cases:
        query = case["query"]
        expected = case.get("expected_ids", [])
        kind = case.get("kind", "other")
        k = int(case.get("top_k", top_k))
        start = time.perf_counter()
        options = SearchOptions(limit=k, min_confidence=min_confidence, weights=weights)
        results = search(query, catalog, options)
        latency_ms = (time.perf_counter() - start) * 1000
        metrics = {
            "recall": recall_at_k(results, expected),
            "mrr": mrr_at_k(results, expected),
            "top1": top1(results, expected),
        }
        for bucket in ("overall", kind):
            totals.setdefault(bucket, dict.fromkeys(METRICS, 0.0))
            counts[bucket] = counts.get(bucket, 0) + 1
            for metric, value in metrics.items():
                totals[bucket][metric] += value
        per_case.append(
            {
                "id": case.get("id"),
                "query": query,
                "kind": kind,
                "top_k": k,
                "metrics": metrics,
                "top_result": results[0].to_dict() if results else None,
                "latency_ms": latency_ms,
            }
        )

    summary = {
        bucket: {metric: value / max(counts[bucket], 1) for metric, value in metrics.items()}
        for bucket, metrics in totals.items()
    }
    return {
        "cases": len(cases),
        "metrics@k": summary,
        "cases_detail": per_case,
    }


def main() -> None:
    args = parse_args()
    cases = load_cases(args.cases)
    catalog = load_catalog(args.catalog)
    weights = scoring_weights()
    report = evaluate(
        cases,
        catalog,
        top_k=args.top_k,
        min_confidence=args.min_confidence,
        weights=weights,
    )
    report.update(
        {
            "catalog_path": str(args.catalog),
            "catalog_size": len(catalog),
            "top_k_default": args.top_k,
            "min_confidence": args.min_confidence,
            "containment": [weights.containment_floor, weights.containment_ceiling],
            "git_commit": _get_git_commit(),
        }
    )
    previous = _load_previous_report(args.report_path)
    deltas = _compute_deltas(report, previous)
    if deltas:
        report["metrics_delta"] = deltas

    args.report_path.parent.mkdir(parents=True, exist_ok=True)
    args.report_path.write_text(json.dumps(report, indent=2, ensure_ascii=False))

    timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    args.history_dir.mkdir(parents=True, exist_ok=True)
    history_path = args.history_dir / f"report_{timestamp}.json"
    history_path.write_text(json.dumps(report, indent=2, ensure_ascii=False))

    print(json.dumps(report, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
