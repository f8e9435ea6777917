import json
import logging
import sys

from ose.utils.logging import ContextFilter, JSONFormatter, get_logger


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("ose.test", logging.INFO, __file__, 1, "curve ready", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_context_fields():
    payload = json.loads(JSONFormatter().format(_record(strategy="Long Call", symbol="AAPL", ignored="x")))

    assert payload["level"] == "INFO"
    assert payload["message"] == "curve ready"
    assert payload["strategy"] == "Long Call"
    assert payload["symbol"] == "AAPL"
    assert "ignored" not in payload
    assert "timestamp" in payload


def test_json_formatter_renders_exceptions():
    try:
        raise ValueError("bad strike")
    except ValueError:
        record = logging.LogRecord("ose.test", logging.ERROR, __file__, 1, "failed", None, sys.exc_info())

    payload = json.loads(JSONFormatter().format(record))

    assert "ValueError: bad strike" in payload["exception"]


def test_context_filter_keeps_explicit_values():
    record = _record(component="api")

    ContextFilter(run_id="run-1", component="cli").filter(record)

    assert record.component == "api"
    assert record.run_id == "run-1"


def test_get_logger_adds_context_filter_once():
    logger = get_logger("ose.tests.context", component="tests")
    get_logger("ose.tests.context", component="tests")

    assert sum(isinstance(f, ContextFilter) for f in logger.filters) == 1


def test_json_formatter_keeps_emitted_extra_fields():
    record = _record(attempt=2, error="boom", component_name="yfinance", type="YFinanceOptionsSource", points=201)

    payload = json.loads(JSONFormatter().format(record))

    assert payload["attempt"] == 2
    assert payload["error"] == "boom"
    assert payload["component_name"] == "yfinance"
    assert payload["type"] == "YFinanceOptionsSource"
    assert payload["points"] == 201
