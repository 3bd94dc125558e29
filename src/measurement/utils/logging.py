"""Structured JSON logging for measurement components.

Besides the usual level/component/message triple, entries carry the
thread name (fire-and-forget sends log from worker threads) and any hit
context passed through ``extra=`` by the client.
"""

import logging
import json
import sys
from datetime import datetime, timezone

# Keys the client attaches via ``extra=`` when logging a send
HIT_CONTEXT_KEYS = ("method", "endpoint", "payload_bytes")


class JSONFormatter(logging.Formatter):
    """Emit one JSON object per record."""

    def format(self, record):
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "component": record.name,
            "thread": record.threadName,
            "message": record.getMessage(),
        }
        for key in HIT_CONTEXT_KEYS:
            value = getattr(record, key, None)
            if value is not None:
                entry[key] = value
        if record.exc_info and record.exc_info[0] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def configure_logging(level="info", stream=None):
    """Attach the JSON formatter to the ``measurement`` logger.

    Safe to call more than once: a handler installed by a previous call
    is replaced rather than duplicated.
    """
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(JSONFormatter())
    root = logging.getLogger("measurement")
    for existing in list(root.handlers):
        if isinstance(existing.formatter, JSONFormatter):
            root.removeHandler(existing)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.addHandler(handler)
    root.propagate = False
    return root
