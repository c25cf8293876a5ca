import json
from pathlib import Path

import pytest

from ingredient_search.catalog import Catalog, entry_from_record, load_catalog
from ingredient_search.matching import search
from ingredient_search.models import Category, IngredientEntry, MatchStrategy
from ingredient_search.normalization import normalize


def test_entry_caches_normalized_candidates() -> None:
    entry = IngredientEntry("1", "Thịt bò", ["bò", "", "beef"], Category.MEAT)
    assert entry.aliases == ("bò", "beef")
    assert entry.normalized_name == normalize("thit bo")
    assert [candidate.key.value for candidate in entry.candidates] == [
        "thit bo",
        "bo",
        "beef",
    ]
    assert [candidate.is_alias for candidate in entry.candidates] == [
        False,
        True,
        True,
    ]


def test_entry_rejects_invalid_fields() -> None:
    with pytest.raises(ValueError):
        IngredientEntry("1", "   ", (), Category.MEAT)
    with pytest.raises(ValueError):
        IngredientEntry("1", "Sữa", (), "dairy")


def test_catalog_rejects_duplicate_ids() -> None:
    entries = [
        IngredientEntry("1", "Tôm", (), Category.SEAFOOD),
        IngredientEntry("1", "Cua", (), Category.SEAFOOD),
    ]
    with pytest.raises(ValueError):
        Catalog(entries)


def test_catalog_lookup_helpers() -> None:
    catalog = Catalog(
        [
            IngredientEntry("1", "Tôm", (), Category.SEAFOOD),
            IngredientEntry("2", "Tỏi", (), Category.VEGETABLE),
            IngredientEntry("3", "Cua", (), Category.SEAFOOD),
        ]
    )
    assert len(catalog) == 3
    assert "2" in catalog
    assert catalog.get("2").canonical_name == "Tỏi"
    assert catalog.get("missing") is None
    assert catalog.categories() == ["seafood", "vegetable"]
    assert [entry.id for entry in catalog.by_category("seafood")] == ["1", "3"]


def test_entry_from_record_defaults() -> None:
    entry = entry_from_record({"id": "x", "name": "Bột ngọt", "category": "Spice"})
    assert entry.category == Category.SPICE
    assert entry.aliases == ()
    other = entry_from_record({"id": "y", "name": "Sữa tươi", "category": None})
    assert other.category == Category.OTHER


def test_load_catalog_from_json(tmp_path: Path) -> None:
    path = tmp_path / "catalog.json"
    records = [
        {"id": "a", "name": "Cà chua", "category": "vegetable", "aliases": ["tomato"]},
        {"id": "b", "name": "Tôm", "category": "seafood", "aliases": []},
    ]
    path.write_text(json.dumps(records, ensure_ascii=False), encoding="utf-8")
    catalog = load_catalog(path)
    assert len(catalog) == 2
    assert search("tomato", catalog)[0].entry_id == "a"


def test_load_catalog_rejects_non_array(tmp_path: Path) -> None:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"id": "a"}), encoding="utf-8")
    with pytest.raises(ValueError):
        load_catalog(path)


def test_bundled_master_catalog() -> None:
    catalog = load_catalog()
    assert len(catalog) == 507
    assert catalog.get("ing-0001").canonical_name == "Thịt bò"
    assert set(catalog.categories()) <= {category.value for category in Category}

    top = search("thit bo", catalog)[0]
    assert top.entry_id == "ing-0001"
    assert top.matched_on == MatchStrategy.EXACT

    tomato = search("tomato", catalog)[0]
    assert tomato.entry_id == "ing-0041"
    assert tomato.matched_on == MatchStrategy.ALIAS

    peanut = search("Đậu phộng", catalog)[0]
    assert peanut.entry_id == "ing-0134"
