"""Streamlit demo page for ingredient search."""

from __future__ import annotations

import html
import sys
import time
from pathlib import Path

import streamlit as st

try:
    from ingredient_search.catalog import load_catalog
    from ingredient_search.config import (
        DEFAULT_LIMIT,
        DEFAULT_MIN_CONFIDENCE,
        scoring_weights,
    )
    from ingredient_search.matching import search
    from ingredient_search.models import Category, SearchOptions
    from ingredient_search.telemetry import configure_logging, log_event
except ModuleNotFoundError:
    repo_root = Path(__file__).resolve().parents[2]
    sys.path.insert(0, str(repo_root / "src"))
    from ingredient_search.catalog import load_catalog  # type: ignore[reportMissingImports]
    from ingredient_search.config import (  # type: ignore[reportMissingImports]
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


MAX_LIMIT = 50


def _confidence_badge(score: float) -> str:
    if score >= 0.8:
        return "high"
    if score >= 0.6:
        return "medium"
    return "low"


def run() -> None:
    logger = configure_logging()
    st.set_page_config(page_title="Ingredient Search", layout="wide")
    st.markdown(
        """
        <style>
        .ing-card {
            border: 1px solid #d8dee4;
            border-radius: 10px;
            padding: 0.7rem 0.9rem;
            margin-bottom: 0.7rem;
            background: #ffffff;
        }
        .ing-meta {
            font-size: 0.82rem;
            color: #57606a;
            margin-top: 0.25rem;
        }
        .ing-high { color: #1a7f37; }
        .ing-medium { color: #9a6700; }
        .ing-low { color: #cf222e; }
        </style>
        """,
        unsafe_allow_html=True,
    )

    st.title("Ingredient Search")
    st.caption("Tìm nguyên liệu: có dấu hay không dấu, gõ sai hay gõ thiếu đều được.")

    catalog = load_catalog()
    with st.sidebar:
        st.subheader("Controls")
        labels = {category.label: category for category in Category}
        chosen = st.multiselect("Categories", list(labels))
        limit = st.slider(
            "Limit",
            min_value=1,
            max_value=MAX_LIMIT,
            value=max(1, min(DEFAULT_LIMIT, MAX_LIMIT)),
        )
        min_confidence = st.slider(
            "Min confidence",
            min_value=0.0,
            max_value=1.0,
            value=min(1.0, max(0.0, float(DEFAULT_MIN_CONFIDENCE))),
            step=0.05,
        )
        st.caption(f"{len(catalog)} ingredients loaded")

    query = st.text_input("Ingredient", placeholder="thit bo, ca chua, tomato...")
    if not query:
        return

    options = SearchOptions(
        limit=limit,
        min_confidence=min_confidence,
        categories=frozenset(labels[label] for label in chosen) if chosen else None,
        weights=scoring_weights(),
    )
    start = time.perf_counter()
    results = search(query, catalog, options)
    latency_ms = (time.perf_counter() - start) * 1000
    log_event(
        logger,
        "ui_search",
        query=query,
        limit=limit,
        min_confidence=min_confidence,
        categories=sorted(options.categories) if options.categories else None,
        results=len(results),
        latency_ms=latency_ms,
    )

    st.caption(f"{len(results)} matches in {latency_ms:.1f} ms")
    if not results:
        st.warning("No ingredient matched this query.")
        return

    for idx, result in enumerate(results, start=1):
        badge = _confidence_badge(result.score)
        aliases = ", ".join(result.entry.aliases) or "n/a"
        st.markdown(
            (
                '<div class="ing-card">'
                f"<strong>{idx}. {html.escape(result.name)}</strong>"
                f' <span class="ing-{badge}">{result.score:.2f}</span>'
                f'<div class="ing-meta">{html.escape(result.entry.category_label)}'
                f" | matched_on={result.matched_on.value}"
                f" via {html.escape(result.matched_text)}</div>"
                f'<div class="ing-meta">aliases: {html.escape(aliases)}</div>'
                "</div>"
            ),
            unsafe_allow_html=True,
        )


if __name__ == "__main__":
    run()
