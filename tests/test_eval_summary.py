from __future__ import annotations

import runpy
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]


def test_render_summary_includes_metrics() -> None:
    report = {
        "cases": 2,
        "top_k_default": 5,
        "catalog_path": "master_ingredients.json",
        "catalog_size": 507,
        "git_commit": "abc123",
        "metrics@k": {
            "overall": {"recall": 1.0, "mrr": 0.75, "top1": 0.5},
            "alias": {"recall": 1.0, "mrr": 1.0, "top1": 1.0},
        },
        "metrics_delta": {"overall": {"recall": 0.1, "mrr": -0.05, "top1": 0.0}},
    }
    module = runpy.run_path(str(REPO_ROOT / "eval" / "summarize_eval.py"))
    summary = module["render_summary"](report)

    assert "Evaluation summary" in summary
    assert "master_ingredients.json (507 entries)" in summary
    lines = summary.splitlines()
    assert lines[-2].startswith("overall")
    assert lines[-1].startswith("alias")
    assert "+0.100" in summary
