import json
import logging

from ingredient_search.telemetry import JsonFormatter, get_logger, log_event


def test_json_formatter_includes_extra_fields() -> None:
    record = logging.makeLogRecord(
        {
            "name": "ingredient_search.test",
            "msg": "search",
            "levelname": "INFO",
            "event": "search",
            "query": "Thịt bò",
            "results": 3,
        }
    )
    payload = json.loads(JsonFormatter().format(record))
    assert payload["message"] == "search"
    assert payload["level"] == "info"
    assert payload["query"] == "Thịt bò"
    assert payload["results"] == 3
    assert "ts" in payload
    assert "lineno" not in payload


def test_log_event_respects_level(caplog) -> None:
    logger = get_logger("test")
    with caplog.at_level(logging.INFO, logger="ingredient_search"):
        log_event(logger, "ingredient_not_found", level=logging.WARNING, original="xyz")
    record = caplog.records[-1]
    assert record.levelno == logging.WARNING
    assert record.event == "ingredient_not_found"
    assert record.original == "xyz"
