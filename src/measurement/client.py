"""Measurement client.

The client holds the parameters shared by every hit of a session
(tracking id, client id, user agent, user language) and the delivery
settings (method, SSL endpoint). It prefixes its own parameters to a
record's fragment to produce the full payload, checks the payload
against the endpoint's size ceilings, and hands it to a transport.

Size violations are raised before any network I/O happens. Like field
validation they are governed by the client's ValidationPolicy; a
lenient client logs and sends anyway.

When no client id is set, a fresh random UUID is generated for every
serialized hit, so hits sent that way cannot be tied to one another.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Optional

from measurement.codec import byte_length
from measurement.config import settings
from measurement.errors import (
    ConfigurationError,
    PayloadTooLargeError,
    UrlTooLongError,
)
from measurement.hits import (
    AppEvent,
    Event,
    ExceptionHit,
    PageView,
    PayloadRecord,
    ScreenView,
    Social,
    WebEvent,
)
from measurement.models.fields import FieldProperty, RawField, ValidatedField
from measurement.models.request import HitRequest, HttpMethod
from measurement.policy import ValidationPolicy, resolve_policy
from measurement.transports.base import Transport
from measurement.transports.http import HttpxTransport

logger = logging.getLogger("measurement.client")

PROTOCOL_VERSION = "v=1"

MAX_POST_BODY = 8192
MAX_URL = 2000
MAX_USER_LANGUAGE = 20


class MeasurementClient:
    """Assembles hits for one tracking id and sends them.

    Args:
        tracking_id: Property id in ``UA-XXXX-Y`` form. Required.
        client_id: Stable id of the user/device. A new one is generated
            per hit when left unset.
        method: ``"GET"`` or ``"POST"``, case-insensitive.
        use_ssl: Send to the HTTPS endpoint.
        transport: Collaborator that performs the HTTP call. An
            HttpxTransport is created on first send when omitted.
        policy: Validation policy shared with the records this client
            builds. Defaults to the process-wide policy.
    """

    user_agent = FieldProperty("_user_agent", "User agent of the browser or device.")
    user_language = FieldProperty("_user_language", "Language, e.g. 'en-us'.")

    def __init__(
        self,
        tracking_id: str,
        client_id: Optional[uuid.UUID] = None,
        *,
        method: Optional[str] = None,
        use_ssl: Optional[bool] = None,
        user_agent: Optional[str] = None,
        user_language: Optional[str] = None,
        transport: Optional[Transport] = None,
        policy: Optional[ValidationPolicy] = None,
    ):
        if not tracking_id:
            raise ConfigurationError("tracking_id must not be empty")
        self.tracking_id = tracking_id
        self.client_id = client_id
        self.method = method or settings.method
        self.use_ssl = settings.use_ssl if use_ssl is None else use_ssl
        self.policy = resolve_policy(policy)
        self._transport = transport

        self._user_agent = ValidatedField("UserAgent", "ua", None, self.policy)
        self._user_language = RawField(
            "UserLanguage", "ul", MAX_USER_LANGUAGE, self.policy
        )
        self.user_agent = user_agent
        self.user_language = user_language

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def method(self) -> str:
        return self._method.value

    @method.setter
    def method(self, value: str) -> None:
        if value is None:
            raise ConfigurationError("method must not be None")
        try:
            self._method = HttpMethod(value.upper())
        except ValueError:
            raise ConfigurationError(
                f"Only 'POST' or 'GET' are valid methods, got {value!r}"
            ) from None

    @property
    def throw_on_validation_error(self) -> bool:
        """Strictness of this client's policy.

        With the default policy this is the process-wide switch: changing
        it here changes it for every record using that policy.
        """
        return self.policy.strict

    @throw_on_validation_error.setter
    def throw_on_validation_error(self, value: bool) -> None:
        self.policy.strict = bool(value)

    @property
    def endpoint(self) -> str:
        return settings.ssl_endpoint if self.use_ssl else settings.endpoint

    @property
    def transport(self) -> Transport:
        if self._transport is None:
            self._transport = HttpxTransport()
        return self._transport

    def close(self) -> None:
        if self._transport is not None:
            self._transport.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Payload assembly
    # ------------------------------------------------------------------

    def serialize(self, record: PayloadRecord) -> str:
        """Full wire payload: client parameters followed by the record's."""
        client_id = self.client_id if self.client_id is not None else uuid.uuid4()
        return (
            PROTOCOL_VERSION
            + f"&tid={self.tracking_id}"
            + f"&cid={client_id}"
            + self._user_agent.fragment()
            + self._user_language.fragment()
            + record.serialize()
        )

    def build_request(self, payload: str) -> HitRequest:
        """Wrap ``payload`` for the transport, enforcing size ceilings."""
        if self._method is HttpMethod.POST:
            size = byte_length(payload)
            if size > MAX_POST_BODY:
                if self.policy.strict:
                    raise PayloadTooLargeError(MAX_POST_BODY, size)
                logger.warning(
                    "POST body is %d bytes, over the %d byte limit; sending anyway",
                    size, MAX_POST_BODY,
                )
            return HitRequest(method=HttpMethod.POST, url=self.endpoint, payload=payload)

        url = f"{self.endpoint}?{payload}"
        size = byte_length(url)
        if size > MAX_URL:
            if self.policy.strict:
                raise UrlTooLongError(MAX_URL, size)
            logger.warning(
                "GET URL is %d bytes, over the %d byte limit; sending anyway",
                size, MAX_URL,
            )
        return HitRequest(method=HttpMethod.GET, url=url, payload=payload)

    # ------------------------------------------------------------------
    # Sending
    # ------------------------------------------------------------------

    def dispatch(self, record: PayloadRecord) -> None:
        """Serialize ``record`` and send it, blocking until the response."""
        self.send_hit(self.serialize(record))

    def dispatch_async(self, record: PayloadRecord) -> None:
        """Serialize ``record`` and send it without waiting."""
        self.send_hit_async(self.serialize(record))

    def send_hit(self, payload: str) -> None:
        """Send a pre-formatted, already encoded payload and wait."""
        request = self.build_request(payload)
        logger.debug(
            "Sending %s hit to %s", request.method.value, self.endpoint,
            extra=self._log_context(request),
        )
        if request.method is HttpMethod.POST:
            self.transport.post(request.url, request.body, request.charset)
        else:
            self.transport.get(request.url)

    def send_hit_async(self, payload: str) -> None:
        """Send a pre-formatted payload fire-and-forget.

        Size violations still raise here; delivery failures do not.
        """
        request = self.build_request(payload)
        logger.debug(
            "Queueing %s hit to %s", request.method.value, self.endpoint,
            extra=self._log_context(request),
        )
        if request.method is HttpMethod.POST:
            self.transport.post_async(request.url, request.body, request.charset)
        else:
            self.transport.get_async(request.url)

    def _log_context(self, request: HitRequest) -> dict[str, Any]:
        return {
            "method": request.method.value,
            "endpoint": self.endpoint,
            "payload_bytes": byte_length(request.payload),
        }

    # ------------------------------------------------------------------
    # Convenience senders
    # ------------------------------------------------------------------

    def _send(self, record_cls: type[PayloadRecord], wait: bool, fields: dict[str, Any]) -> None:
        record = record_cls(policy=self.policy, **fields)
        if wait:
            self.dispatch(record)
        else:
            self.dispatch_async(record)

    def page_view(self, **fields: Any) -> None:
        self._send(PageView, True, fields)

    def page_view_async(self, **fields: Any) -> None:
        self._send(PageView, False, fields)

    def screen_view(self, **fields: Any) -> None:
        self._send(ScreenView, True, fields)

    def screen_view_async(self, **fields: Any) -> None:
        self._send(ScreenView, False, fields)

    def event(self, **fields: Any) -> None:
        self._send(Event, True, fields)

    def event_async(self, **fields: Any) -> None:
        self._send(Event, False, fields)

    def app_event(self, **fields: Any) -> None:
        self._send(AppEvent, True, fields)

    def app_event_async(self, **fields: Any) -> None:
        self._send(AppEvent, False, fields)

    def web_event(self, **fields: Any) -> None:
        self._send(WebEvent, True, fields)

    def web_event_async(self, **fields: Any) -> None:
        self._send(WebEvent, False, fields)

    def exception(self, **fields: Any) -> None:
        self._send(ExceptionHit, True, fields)

    def exception_async(self, **fields: Any) -> None:
        self._send(ExceptionHit, False, fields)

    def social(self, **fields: Any) -> None:
        self._send(Social, True, fields)

    def social_async(self, **fields: Any) -> None:
        self._send(Social, False, fields)
