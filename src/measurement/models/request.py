"""Outgoing request envelope.

A HitRequest is what the client hands to a transport: the method, the
full URL and, for POST, the body. The payload inside is never touched
again once it has been assembled -- transports only move bytes.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class HttpMethod(str, Enum):
    """Request methods the collection endpoint accepts."""
    GET = "GET"
    POST = "POST"


class HitRequest(BaseModel):
    """Immutable envelope around one assembled hit."""

    model_config = ConfigDict(frozen=True)

    method: HttpMethod = Field(
        description="GET puts the payload in the query string, POST in the body"
    )
    url: str = Field(
        description="Target URL; for GET this already includes '?<payload>'"
    )
    payload: str = Field(
        description="The serialized hit exactly as assembled"
    )
    charset: str = Field(
        default="utf-8",
        description="Encoding the transport uses for the POST body"
    )

    @property
    def body(self) -> Optional[str]:
        """POST body, or None for GET requests."""
        return self.payload if self.method is HttpMethod.POST else None
