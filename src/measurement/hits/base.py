"""Payload record base contract.

Every hit type is a PayloadRecord. A record is a disposable value
object: populate it, serialize it once, throw it away. Records are not
thread-safe; concurrent mutation of the same instance is the caller's
problem.

Serialization is layered. Each record emits its own ``&key=value``
pairs in the protocol's fixed order and then appends the fragment of
the class it extends, so the base class's DataSource parameter always
comes last. The order does not matter to the collection endpoint but
it is kept stable so serialized hits can be compared byte for byte.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, ClassVar, Optional

from measurement.errors import MissingFieldError
from measurement.models.fields import FieldProperty, ValidatedField
from measurement.policy import ValidationPolicy, resolve_policy

logger = logging.getLogger("measurement.hits")


class HitType(str, Enum):
    """Hit types defined by the protocol.

    TRANSACTION, ITEM and TIMING are reserved: no record implements them.
    """
    PAGEVIEW = "pageview"
    SCREENVIEW = "screenview"
    EVENT = "event"
    TRANSACTION = "transaction"
    ITEM = "item"
    SOCIAL = "social"
    EXCEPTION = "exception"
    TIMING = "timing"


class PayloadRecord:
    """Base for all hit records.

    Subclasses create their fields in ``_init_fields`` and override
    ``serialize``, calling the parent implementation and appending its
    result after their own parameters.

    Field values may be passed as keyword arguments; they are assigned
    in the order given, after all fields exist.
    """

    hit_type: ClassVar[HitType]

    data_source = FieldProperty(
        "_data_source", "Data source of the hit, e.g. 'app' or 'web'."
    )

    def __init__(self, policy: Optional[ValidationPolicy] = None, **values: Any):
        self.policy = resolve_policy(policy)
        self._init_fields()
        self.update(**values)

    def _init_fields(self) -> None:
        self._data_source = ValidatedField("DataSource", "ds", None, self.policy)

    def update(self, **values: Any) -> None:
        """Assign several fields at once by attribute name."""
        for name, value in values.items():
            attr = getattr(type(self), name, None)
            if not isinstance(attr, (FieldProperty, property)):
                raise TypeError(
                    f"{type(self).__name__} has no field named {name!r}"
                )
            setattr(self, name, value)

    def serialize(self) -> str:
        """Return this record's payload fragment."""
        return self._data_source.fragment()

    def _hit_type_fragment(self) -> str:
        return f"&t={self.hit_type.value}"

    def _required(self, field: ValidatedField, message: Optional[str] = None) -> str:
        """Fragment of a required field, enforcing presence per policy."""
        if field:
            return field.fragment()
        if self.policy.strict:
            raise MissingFieldError(field.name, message)
        logger.warning(
            "%s hit is missing required %s; sending without it",
            self.hit_type.value, field.name,
        )
        return ""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(t={self.hit_type.value})"
