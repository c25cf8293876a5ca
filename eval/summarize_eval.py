"""Human-readable summary for golden eval reports."""

from __future__ import annotations

import argparse
import json
from pathlib import Path


def _format_value(value: float | int | None) -> str:
    if isinstance(value, (int, float)):
        return f"{value:.3f}"
    return "n/a"


def _format_delta(value: float | int | None) -> str:
    if isinstance(value, (int, float)):
        return f"{value:+.3f}"
    return "n/a"


def render_summary(report: dict) -> str:
    lines: list[str] = []
    lines.append("Evaluation summary")
    lines.append(
        f"cases: {report.get('cases', 'n/a')} | top_k_default: {report.get('top_k_default', 'n/a')}"
    )
    lines.append(
        "catalog: {path} ({size} entries) | commit: {commit}".format(
            path=report.get("catalog_path", "n/a"),
            size=report.get("catalog_size", "n/a"),
            commit=report.get("git_commit", "n/a"),
        )
    )
    lines.append("")
    header = (
        f"{'kind':<12} {'recall':>7} {'mrr':>7} {'top1':>7}"
        f" {'Δrecall':>8} {'Δmrr':>7} {'Δtop1':>7}"
    )
    lines.append(header)
    metrics_by_kind = report.get("metrics@k", {})
    deltas_by_kind = report.get("metrics_delta", {})
    if not isinstance(metrics_by_kind, dict):
        metrics_by_kind = {}
    if not isinstance(deltas_by_kind, dict):
        deltas_by_kind = {}
    # "overall" first, then per-kind rows alphabetically.
    kinds = sorted(metrics_by_kind, key=lambda kind: (kind != "overall", kind))
    for kind in kinds:
        metrics = metrics_by_kind.get(kind, {})
        deltas = deltas_by_kind.get(kind, {})
        line = (
            f"{kind:<12}"
            f" {_format_value(metrics.get('recall')):>7}"
            f" {_format_value(metrics.get('mrr')):>7}"
            f" {_format_value(metrics.get('top1')):>7}"
            f" {_format_delta(deltas.get('recall')):>8}"
            f" {_format_delta(deltas.get('mrr')):>7}"
            f" {_format_delta(deltas.get('top1')):>7}"
        )
        lines.append(line)
    return "\n".join(lines)


def _load_report(path: Path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Summarize eval report JSON")
    parser.add_argument(
        "--report-path",
        type=Path,
        default=Path("eval/reports/latest.json"),
        help="Path to eval report JSON",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    report = _load_report(args.report_path)
    print(render_summary(report))


if __name__ == "__main__":
    main()
