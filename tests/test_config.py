import importlib

import ingredient_search.config as config


def test_env_overrides_defaults(monkeypatch) -> None:
    monkeypatch.setenv("INGS_LIMIT", "7")
    monkeypatch.setenv("INGS_MIN_CONFIDENCE", "45")
    monkeypatch.setenv("INGS_MAX_BATCH", "not-a-number")
    try:
        reloaded = importlib.reload(config)
        assert reloaded.DEFAULT_LIMIT == 7
        assert reloaded.DEFAULT_MIN_CONFIDENCE == 0.45
        assert reloaded.MAX_BATCH == 20
    finally:
        monkeypatch.undo()
        importlib.reload(config)


def test_default_catalog_is_bundled() -> None:
    assert config.CATALOG_PATH.name == "master_ingredients.json"
    assert config.CATALOG_PATH.exists()
    assert config.CONTAINMENT_FLOOR < config.CONTAINMENT_CEILING


def test_containment_env_reaches_scoring_weights(monkeypatch) -> None:
    monkeypatch.setenv("INGS_CONTAINMENT_FLOOR", "50")
    monkeypatch.setenv("INGS_CONTAINMENT_CEILING", "70")
    try:
        reloaded = importlib.reload(config)
        weights = reloaded.scoring_weights()
        assert weights.containment_floor == 0.5
        assert weights.containment_ceiling == 0.7
        assert weights.exact_score == 1.0
    finally:
        monkeypatch.undo()
        importlib.reload(config)
