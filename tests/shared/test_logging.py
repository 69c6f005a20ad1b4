"""
Structured logging: JSON output, bound ids and structured fields.
"""

import json
import logging

from subscription_lifecycle.shared.utils import logging as logging_utils
from subscription_lifecycle.shared.utils.logging import (
    ContextualFormatter,
    JSONFormatter,
    current_context,
    get_logger,
    log_context,
    setup_logging,
)


def _record(message="hello", **attrs):
    record = logging.LogRecord("tests", logging.INFO, __file__, 10, message, None, None)
    for key, value in attrs.items():
        setattr(record, key, value)
    return record


def test_json_formatter_emits_core_fields():
    payload = json.loads(JSONFormatter().format(_record()))

    assert payload["message"] == "hello"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "tests"
    assert payload["service"] == "subscription-lifecycle"
    assert "request_id" not in payload
    assert "extra" not in payload


def test_json_formatter_includes_extra_fields():
    payload = json.loads(JSONFormatter().format(_record(extra_fields={"codes": [100, 103]})))

    assert payload["extra"] == {"codes": [100, 103]}


def test_json_formatter_includes_bound_ids():
    with log_context(request_id="req-1", user_id=42, subscription_id=7):
        payload = json.loads(JSONFormatter().format(_record()))

    assert payload["request_id"] == "req-1"
    assert payload["user_id"] == "42"
    assert payload["subscription_id"] == "7"


def test_text_formatter_renders_missing_ids_as_dash():
    line = ContextualFormatter().format(_record("Subscription 7 is now CANCELED"))

    assert "[req=- user=- sub=-]" in line
    assert line.endswith("Subscription 7 is now CANCELED")


def test_log_context_resets_on_exit():
    with log_context(request_id="req-1", user_id=42) as context:
        assert context == {"request_id": "req-1", "user_id": "42"}

    assert current_context() == {}


def test_log_context_generates_a_request_id_once():
    with log_context() as outer:
        assert outer["request_id"]

        with log_context(subscription_id=3) as inner:
            assert inner["request_id"] == outer["request_id"]
            assert inner["subscription_id"] == "3"

        assert "subscription_id" not in current_context()


def test_structured_logger_moves_kwargs_into_extra_fields(caplog):
    logger = get_logger("tests.structured")

    with caplog.at_level(logging.INFO, logger="tests.structured"):
        logger.info("Rejected subscription request", codes=[101])

    record = caplog.records[-1]
    assert record.extra_fields == {"codes": [101]}


def test_structured_logger_skips_disabled_levels(caplog):
    logger = get_logger("tests.disabled")

    with caplog.at_level(logging.WARNING, logger="tests.disabled"):
        logger.debug("not emitted", subscription_id=1)

    assert caplog.records == []


def test_lifecycle_event_fields(caplog):
    logger = get_logger("tests.lifecycle")

    with caplog.at_level(logging.INFO, logger="tests.lifecycle"):
        logger.log_lifecycle_event(
            "subscription_canceled",
            "Subscription 3 is now CANCELED",
            subscription_id=3,
            user_id=1,
        )

    record = caplog.records[-1]
    assert record.levelno == logging.INFO
    assert record.extra_fields == {"event": "subscription_canceled", "subscription_id": 3, "user_id": 1}


def test_get_logger_is_cached():
    assert get_logger("tests.cached") is get_logger("tests.cached")


def test_setup_logging_writes_json_to_the_log_file(monkeypatch, tmp_path):
    root_logger = logging.getLogger()
    saved_handlers, saved_level = root_logger.handlers[:], root_logger.level
    monkeypatch.setattr(logging_utils, "_logging_configured", False)
    log_file = tmp_path / "logs" / "service.log"

    try:
        setup_logging(log_level="debug", log_format="json", log_file=str(log_file), enable_console=False)
        handlers = root_logger.handlers[:]

        assert root_logger.level == logging.DEBUG
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, JSONFormatter)
        assert setup_logging().name == "startup"
        assert root_logger.handlers == handlers

        handlers[0].flush()
        first_line = log_file.read_text(encoding="utf-8").splitlines()[0]
        assert json.loads(first_line)["logger"] == "startup"
    finally:
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root_logger.addHandler(handler)
        root_logger.setLevel(saved_level)
