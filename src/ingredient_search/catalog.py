"""Read-only catalog snapshots and the bundled master ingredient list."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Hashable, Iterable, Iterator

from ingredient_search.config import CATALOG_PATH
from ingredient_search.models import Category, IngredientEntry


class Catalog:
    """Immutable snapshot of ingredient entries with unique ids."""

    def __init__(self, entries: Iterable[IngredientEntry]) -> None:
        ordered = tuple(entries)
        by_id: dict[Hashable, IngredientEntry] = {}
        for entry in ordered:
            if entry.id in by_id:
                raise ValueError(f"Duplicate ingredient id in catalog: {entry.id!r}")
            by_id[entry.id] = entry
        self._entries = ordered
        self._by_id = by_id

    def __iter__(self) -> Iterator[IngredientEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._by_id

    def get(self, entry_id: Hashable) -> IngredientEntry | None:
        return self._by_id.get(entry_id)

    def categories(self) -> list[str]:
        return sorted({entry.category.value for entry in self._entries})

    def by_category(self, category: Category | str) -> list[IngredientEntry]:
        wanted = Category(category)
        return [entry for entry in self._entries if entry.category == wanted]


def entry_from_record(record: dict[str, Any]) -> IngredientEntry:
    aliases = record.get("aliases") or []
    category = str(record.get("category") or Category.OTHER.value).strip().lower()
    return IngredientEntry(
        id=record["id"],
        canonical_name=record["name"],
        aliases=tuple(str(alias) for alias in aliases),
        category=Category(category),
    )


def catalog_from_records(records: Iterable[dict[str, Any]]) -> Catalog:
    return Catalog(entry_from_record(record) for record in records)


@lru_cache(maxsize=8)
def _load_catalog(path: Path) -> Catalog:
    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, list):
        raise ValueError(f"Catalog file must hold a JSON array: {path}")
    return catalog_from_records(payload)


def load_catalog(path: Path | str | None = None) -> Catalog:
    resolved = Path(path).expanduser().resolve() if path else CATALOG_PATH.resolve()
    return _load_catalog(resolved)
