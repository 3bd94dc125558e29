"""Exception hierarchy for payload building and dispatch.

Payload problems (oversized fields, malformed values, missing required
fields, oversized requests) all derive from PayloadError and are only
raised while the active ValidationPolicy is strict. Configuration and
transport failures are raised unconditionally.
"""

from __future__ import annotations

from typing import Optional

__all__ = [
    "MeasurementError",
    "ConfigurationError",
    "PayloadError",
    "ValidationError",
    "FormatError",
    "MissingFieldError",
    "PayloadTooLargeError",
    "UrlTooLongError",
    "TransportError",
]


class MeasurementError(Exception):
    """Base exception for every failure raised by this package."""


class ConfigurationError(MeasurementError):
    """Raised when client settings or environment values are invalid."""


class PayloadError(MeasurementError, ValueError):
    """Base for violations of the wire protocol's payload rules."""


class ValidationError(PayloadError):
    """A field value exceeds its size ceiling."""

    def __init__(self, field: str, limit: int, actual: int, *, encoded: bool = True) -> None:
        measure = "URL encoded length" if encoded else "length"
        super().__init__(
            f"The {measure} of {field!r} should not exceed {limit} bytes (got {actual})"
        )
        self.field = field
        self.limit = limit
        self.actual = actual


class FormatError(PayloadError):
    """A field value breaks a structural rule."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class MissingFieldError(PayloadError):
    """A required field is empty at serialization time."""

    def __init__(self, field: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"The value of {field!r} must not be empty")
        self.field = field


class PayloadTooLargeError(PayloadError):
    """The POST body exceeds the endpoint's ceiling."""

    def __init__(self, limit: int, actual: int) -> None:
        super().__init__(
            f"The body of the post request exceeds {limit} bytes (got {actual})"
        )
        self.limit = limit
        self.actual = actual


class UrlTooLongError(PayloadError):
    """The encoded GET URL exceeds the endpoint's ceiling."""

    def __init__(self, limit: int, actual: int) -> None:
        super().__init__(
            f"The length of the entire encoded URL must be no longer than "
            f"{limit} bytes (got {actual})"
        )
        self.limit = limit
        self.actual = actual


class TransportError(MeasurementError):
    """A synchronous send failed at the network level."""

    def __init__(self, message: str, *, url: str = "") -> None:
        super().__init__(message)
        self.url = url
