"""HTTPX transport.

Sends hits with a shared ``httpx.Client``. Blocking sends stream the
response so that only the status line and headers are read; the
collection endpoint's body is never consumed. Fire-and-forget sends run
the same blocking call on a small thread pool and log any failure.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Optional

import httpx

from measurement.config import settings
from measurement.errors import TransportError
from measurement.models.request import FORM_CONTENT_TYPE
from measurement.transports.base import Transport

logger = logging.getLogger("measurement.transports.http")


class HttpxTransport(Transport):
    """Transport backed by httpx.

    Args:
        client: Pre-built client to use (tests pass one wired to
            ``httpx.MockTransport``). Created from settings when omitted;
            a client passed in is still closed by ``close()``.
        timeout: Per-request timeout in seconds.
        max_workers: Threads available to fire-and-forget sends.
    """

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        timeout: Optional[float] = None,
        max_workers: Optional[int] = None,
    ):
        super().__init__()
        self._client = client or httpx.Client(
            timeout=timeout if timeout is not None else settings.http_timeout,
        )
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers or settings.async_workers,
            thread_name_prefix="measurement-send",
        )
        self._closed = False

    @property
    def transport_type(self) -> str:
        return "httpx"

    def post(self, url: str, body: str, charset: str = "utf-8") -> None:
        headers = {"Content-Type": f"{FORM_CONTENT_TYPE}; charset={charset}"}
        self._send("POST", url, content=body.encode(charset), headers=headers)

    def get(self, url: str) -> None:
        self._send("GET", url)

    def post_async(self, url: str, body: str, charset: str = "utf-8") -> None:
        self._submit(self.post, url, body, charset)

    def get_async(self, url: str) -> None:
        self._submit(self.get, url)

    def close(self) -> None:
        """Wait for queued sends, then close the HTTP client.

        Fire-and-forget sends made after this point are dropped, logged
        and counted as errors; they never raise.
        """
        self._closed = True
        self._executor.shutdown(wait=True)
        self._client.close()
        logger.debug("HTTPX transport closed")

    def _send(self, method: str, url: str, **kwargs) -> None:
        try:
            with self._client.stream(method, url, **kwargs) as response:
                logger.debug(
                    "%s %s -> %d", method, _strip_query(url), response.status_code,
                )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            self._record_error(f"{method} {_strip_query(url)} failed: {e}")
            raise TransportError(f"{method} request failed: {e}", url=url) from e
        self._record_sent()

    def _submit(self, send, *args) -> None:
        if self._closed:
            self._record_error("transport is closed; hit dropped")
            return
        try:
            future = self._executor.submit(send, *args)
        except RuntimeError:
            # close() raced with this call and shut the pool down
            self._record_error("transport is closed; hit dropped")
            return
        future.add_done_callback(self._log_failure)

    def _log_failure(self, future: Future) -> None:
        exc = future.exception()
        # TransportError was already recorded and logged by _send
        if exc is not None and not isinstance(exc, TransportError):
            self._record_error(f"fire-and-forget send failed: {exc!r}")


def _strip_query(url: str) -> str:
    # GET payloads live in the query string; keep them out of the logs
    return url.split("?", 1)[0]
