"""Validated payload fields.

A ValidatedField holds one protocol parameter as a (raw, encoded) pair.
The encoded form is computed once, when the value is assigned, and the
size ceiling is enforced at that moment rather than at serialization
time. Empty values clear the field without any validation.

Three flavours exist because the protocol measures its limits in
different ways:

- ValidatedField: percent-encoded, limit applies to the encoded bytes
- RawField: sent verbatim, limit applies to the raw length
- PathField: percent-encoded, and the raw value must start with '/'

Records expose fields as plain string attributes through the
FieldProperty descriptor, so callers write ``hit.document_title = "x"``
and never handle the field objects themselves.
"""

from __future__ import annotations

from typing import Optional

from measurement.codec import byte_length, encode
from measurement.errors import FormatError, ValidationError
from measurement.policy import ValidationPolicy, resolve_policy


class ValidatedField:
    """A percent-encoded parameter with an encoded-length ceiling.

    ``max_bytes`` of None means the parameter is unbounded.
    """

    encoded_limit = True

    def __init__(
        self,
        name: str,
        key: str,
        max_bytes: Optional[int] = None,
        policy: Optional[ValidationPolicy] = None,
    ):
        self.name = name
        self.key = key
        self.max_bytes = max_bytes
        self.policy = resolve_policy(policy)
        self._raw: Optional[str] = None
        self._encoded: Optional[str] = None

    @property
    def raw(self) -> Optional[str]:
        return self._raw

    @property
    def encoded(self) -> Optional[str]:
        return self._encoded

    def __bool__(self) -> bool:
        return bool(self._encoded)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name}={self._raw!r})"

    def set(self, value: Optional[str]) -> None:
        """Assign ``value``, validating it against the active policy."""
        if not value:
            self.clear()
            return

        strict = self.policy.strict
        if strict:
            self._check_format(value)

        encoded = self._encode(value)
        if strict and self.max_bytes is not None:
            size = self._measure(value, encoded)
            if size > self.max_bytes:
                raise ValidationError(
                    self.name, self.max_bytes, size, encoded=self.encoded_limit
                )

        self._raw = value
        self._encoded = encoded

    def clear(self) -> None:
        self._raw = None
        self._encoded = None

    def fragment(self) -> str:
        """Return ``&key=value`` for this parameter, or '' when empty."""
        if not self._encoded:
            return ""
        return f"&{self.key}={self._encoded}"

    def _encode(self, value: str) -> str:
        return encode(value)

    def _measure(self, value: str, encoded: str) -> int:
        return byte_length(encoded)

    def _check_format(self, value: str) -> None:
        """Structural checks run before encoding. None by default."""


class RawField(ValidatedField):
    """A parameter sent without percent-encoding, limited by raw length."""

    encoded_limit = False

    def _encode(self, value: str) -> str:
        return value

    def _measure(self, value: str, encoded: str) -> int:
        return len(value)


class PathField(ValidatedField):
    """A percent-encoded URL path that must begin with '/'."""

    def _check_format(self, value: str) -> None:
        if not value.startswith("/"):
            raise FormatError(self.name, f"{self.name!r} should begin with '/'")


class FieldProperty:
    """Expose a ValidatedField held on an instance as a str attribute.

    ``path`` is a dotted attribute path from the owning instance to the
    field, e.g. ``"web.document_title"`` for a field living inside an
    embedded property group.
    """

    def __init__(self, path: str, doc: Optional[str] = None):
        self._path = path.split(".")
        self.__doc__ = doc

    def __set_name__(self, owner, name):
        self.name = name

    def field(self, instance) -> ValidatedField:
        target = instance
        for part in self._path:
            target = getattr(target, part)
        return target

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return self.field(instance).raw

    def __set__(self, instance, value: Optional[str]) -> None:
        self.field(instance).set(value)

    def __delete__(self, instance) -> None:
        self.field(instance).clear()
