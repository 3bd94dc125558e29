"""Verify the structured JSON log output."""

import io
import json
import logging

import pytest

from measurement.client import MeasurementClient
from measurement.utils.logging import JSONFormatter, configure_logging


@pytest.fixture
def restore_logger():
    logger = logging.getLogger("measurement")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


def test_json_entry(restore_logger):
    stream = io.StringIO()
    configure_logging("debug", stream=stream)
    logging.getLogger("measurement.client").info("sent %d hits", 3)

    entry = json.loads(stream.getvalue().strip())
    assert entry["level"] == "INFO"
    assert entry["component"] == "measurement.client"
    assert entry["message"] == "sent 3 hits"
    assert "timestamp" in entry


def test_exception_included(restore_logger):
    stream = io.StringIO()
    configure_logging("info", stream=stream)
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        logging.getLogger("measurement.transports").exception("send failed")

    entry = json.loads(stream.getvalue().strip())
    assert "RuntimeError: boom" in entry["exception"]


def test_reconfigure_does_not_duplicate(restore_logger):
    configure_logging("info", stream=io.StringIO())
    configure_logging("warning", stream=io.StringIO())
    json_handlers = [
        h for h in restore_logger.handlers if isinstance(h.formatter, JSONFormatter)
    ]
    assert len(json_handlers) == 1
    assert restore_logger.level == logging.WARNING


def test_hit_context_and_thread(restore_logger):
    stream = io.StringIO()
    configure_logging("debug", stream=stream)
    logging.getLogger("measurement.client").info(
        "Sending POST hit", extra={"method": "POST", "endpoint": "http://c.test/collect"},
    )

    entry = json.loads(stream.getvalue().strip())
    assert entry["method"] == "POST"
    assert entry["endpoint"] == "http://c.test/collect"
    assert "payload_bytes" not in entry
    assert entry["thread"] == "MainThread"


def test_client_send_carries_hit_context(restore_logger, transport, strict):
    stream = io.StringIO()
    configure_logging("debug", stream=stream)
    client = MeasurementClient("UA-1-1", method="POST", use_ssl=False,
                               transport=transport, policy=strict)
    client.send_hit("v=1&t=event")

    entries = [json.loads(line) for line in stream.getvalue().splitlines()]
    sent = [e for e in entries if e["message"].startswith("Sending")]
    assert sent[0]["method"] == "POST"
    assert sent[0]["payload_bytes"] == len("v=1&t=event")
