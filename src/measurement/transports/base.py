"""Abstract transport interface.

A transport puts an already-assembled hit on the wire. It has exactly
two responsibilities: send (GET or POST, blocking or fire-and-forget)
and report health. Transports do NOT inspect, re-encode, validate or
split payloads.

Blocking sends return once response headers have arrived and raise
TransportError on network failure. Fire-and-forget sends return
immediately and report nothing to the caller: success and failure look
the same from the outside, failures are only logged and counted. There
is no handle to wait on and no way to cancel.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone

logger = logging.getLogger("measurement.transports")


@dataclass
class TransportHealth:
    """Delivery counters for a transport."""
    transport_type: str = ""
    requests_sent: int = 0
    errors: int = 0
    last_sent_at: datetime | None = None
    last_error: str = ""
    checked_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc)
    )


class Transport(ABC):
    """Abstract base for hit transports.

    The contract:
    - post(url, body, charset): blocking POST
    - post_async(url, body, charset): fire-and-forget POST
    - get(url): blocking GET
    - get_async(url): fire-and-forget GET
    - close(): release connections and worker threads
    """

    def __init__(self):
        self._requests_sent = 0
        self._errors = 0
        self._last_sent_at: datetime | None = None
        self._last_error = ""
        self._lock = threading.Lock()

    @property
    @abstractmethod
    def transport_type(self) -> str:
        """Return the transport type identifier (e.g. 'httpx')."""
        ...

    @abstractmethod
    def post(self, url: str, body: str, charset: str = "utf-8") -> None:
        ...

    @abstractmethod
    def post_async(self, url: str, body: str, charset: str = "utf-8") -> None:
        ...

    @abstractmethod
    def get(self, url: str) -> None:
        ...

    @abstractmethod
    def get_async(self, url: str) -> None:
        ...

    def close(self) -> None:
        """Release resources. Override when the transport holds any."""

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def health(self) -> TransportHealth:
        with self._lock:
            return TransportHealth(
                transport_type=self.transport_type,
                requests_sent=self._requests_sent,
                errors=self._errors,
                last_sent_at=self._last_sent_at,
                last_error=self._last_error,
            )

    def _record_sent(self) -> None:
        """Track delivery. Call from subclass after each response."""
        with self._lock:
            self._requests_sent += 1
            self._last_sent_at = datetime.now(timezone.utc)

    def _record_error(self, msg: str) -> None:
        """Track failures. Call from subclass on each failed send."""
        with self._lock:
            self._errors += 1
            self._last_error = msg
        logger.warning("Transport %s error: %s", self.transport_type, msg)
