from __future__ import annotations

import runpy
from pathlib import Path

import pytest

from ingredient_search.models import Category, IngredientEntry, ScoringWeights

REPO_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture(scope="module")
def golden() -> dict:
    return runpy.run_path(str(REPO_ROOT / "eval" / "run_golden_eval.py"))


def _catalog() -> list[IngredientEntry]:
    return [
        IngredientEntry("a", "Thịt bò", ("beef",), Category.MEAT),
        IngredientEntry("b", "Thịt bò xay", ("ground beef",), Category.MEAT),
        IngredientEntry("c", "Cà chua", ("tomato",), Category.VEGETABLE),
    ]


def test_evaluate_aggregates_by_kind(golden: dict) -> None:
    cases = [
        {"id": "1", "query": "beef", "expected_ids": ["a"], "kind": "alias"},
        {"id": "2", "query": "thit bo", "expected_ids": ["b"], "kind": "partial"},
        {"id": "3", "query": "xyz123", "expected_ids": ["c"], "kind": "partial"},
    ]
    report = golden["evaluate"](cases, _catalog(), top_k=5, min_confidence=0.3)
    metrics = report["metrics@k"]
    assert report["cases"] == 3
    assert metrics["alias"] == {"recall": 1.0, "mrr": 1.0, "top1": 1.0}
    assert metrics["partial"]["recall"] == 0.5
    assert metrics["partial"]["mrr"] == 0.25
    assert metrics["partial"]["top1"] == 0.0
    assert metrics["overall"]["recall"] == pytest.approx(2 / 3)
    assert report["cases_detail"][2]["top_result"] is None


def test_golden_cases_file_is_well_formed(golden: dict) -> None:
    cases = golden["load_cases"](REPO_ROOT / "eval" / "golden_search.jsonl")
    assert cases
    assert all(case["query"] and case["expected_ids"] for case in cases)


def test_compute_deltas(golden: dict) -> None:
    current = {"metrics@k": {"overall": {"recall": 0.9, "mrr": 0.8, "top1": 0.7}}}
    previous = {"metrics@k": {"overall": {"recall": 0.8, "mrr": 0.8}}}
    deltas = golden["_compute_deltas"](current, previous)
    assert deltas["overall"]["recall"] == pytest.approx(0.1)
    assert deltas["overall"]["mrr"] == 0.0
    assert "top1" not in deltas["overall"]
    assert golden["_compute_deltas"](current, None) is None


def test_evaluate_passes_scoring_weights(golden: dict) -> None:
    cases = [{"id": "1", "query": "bo xay", "expected_ids": ["b"], "kind": "partial"}]
    default = golden["evaluate"](cases, _catalog(), top_k=5, min_confidence=0.3)
    narrow = golden["evaluate"](
        cases,
        _catalog(),
        top_k=5,
        min_confidence=0.3,
        weights=ScoringWeights(containment_floor=0.5, containment_ceiling=0.7),
    )
    assert default["cases_detail"][0]["top_result"]["score"] == pytest.approx(
        0.6 + 0.3 * 6 / 11, abs=1e-4
    )
    assert narrow["cases_detail"][0]["top_result"]["score"] == pytest.approx(
        0.5 + 0.2 * 6 / 11, abs=1e-4
    )
