"""Structured Logging — JSON formatter output and setup idempotency."""

import json
import logging

from counterops.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "counterops.test", logging.INFO, __file__, 1, "hello %s", ("world",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_base_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "counterops.test"
    assert payload["message"] == "hello world"
    assert "timestamp" in payload


def test_json_formatter_surfaces_allowed_extras_only():
    payload = json.loads(JSONFormatter().format(_record(
        operation="set", namespace="ci-acme", counter_key="build-api",
        status_code=200, authenticated=True, admin_key="sekret123",
    )))
    assert payload["operation"] == "set"
    assert payload["counter_key"] == "build-api"
    assert payload["status_code"] == 200
    assert payload["authenticated"] is True
    assert "admin_key" not in payload


def test_setup_logging_is_idempotent():
    before = len(logging.root.handlers)
    level = logging.root.level
    setup_logging("DEBUG", "json")
    setup_logging("WARNING", "text")
    try:
        assert len(logging.root.handlers) == before + 1
        assert logging.root.level == logging.WARNING
    finally:
        for handler in list(logging.root.handlers):
            if handler.get_name() == "counterops":
                logging.root.removeHandler(handler)
        logging.root.setLevel(level)
