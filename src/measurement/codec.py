"""Percent-encoding for query-string values.

Values are escaped the way RFC 3986 escapes a data string: only the
unreserved characters (ALPHA, DIGIT, ``-``, ``.``, ``_``, ``~``) pass
through and everything else, reserved delimiters included, becomes a
``%XX`` sequence of its UTF-8 bytes. This is stricter than escaping a
whole URL, which would leave ``/``, ``:`` or ``?`` alone.

Size ceilings in the protocol are expressed in bytes of the encoded
form, so ``byte_length`` measures UTF-8 bytes rather than code points.
"""

from __future__ import annotations

from urllib.parse import quote, unquote


def encode(text: str) -> str:
    """Percent-encode ``text`` as a query-string value."""
    return quote(text, safe="", encoding="utf-8", errors="strict")


def decode(text: str) -> str:
    """Reverse :func:`encode`."""
    return unquote(text, encoding="utf-8", errors="strict")


def byte_length(text: str) -> int:
    """Number of bytes ``text`` occupies on the wire."""
    return len(text.encode("utf-8"))
