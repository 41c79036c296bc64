"""
Unit tests for the optional structlog setup.
"""

import io
import json
import logging

import structlog

from rozetkapay.logging_config import add_sdk_context, configure_logging


def test_add_sdk_context():
    event = add_sdk_context(None, "info", {"event": "x"})

    assert event["sdk"] == "rozetkapay"


def test_production_renders_json_lines():
    stream = io.StringIO()
    configure_logging(log_level="INFO", environment="production", stream=stream)

    try:
        structlog.get_logger("rozetkapay.test").info("API request failed", status_code=503)
        line = json.loads(stream.getvalue().strip().splitlines()[-1])
    finally:
        structlog.reset_defaults()
        logging.getLogger().handlers.clear()

    assert line["event"] == "API request failed"
    assert line["status_code"] == 503
    assert line["sdk"] == "rozetkapay"
    assert line["level"] == "info"


def test_level_filters_debug():
    stream = io.StringIO()
    configure_logging(log_level="WARNING", environment="production", stream=stream)

    try:
        structlog.get_logger("rozetkapay.test").debug("Response status")
    finally:
        structlog.reset_defaults()
        logging.getLogger().handlers.clear()

    assert stream.getvalue() == ""
