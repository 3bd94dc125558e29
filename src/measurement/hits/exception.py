"""Exception hits, reporting crashes and errors from an app."""

from __future__ import annotations

from typing import Optional

from measurement.hits.base import HitType, PayloadRecord
from measurement.models.fields import FieldProperty, ValidatedField
from measurement.models.properties import AppProperty

MAX_EXCEPTION_DESCRIPTION = 150


class ExceptionHit(PayloadRecord):
    """An ``exception`` hit. Requires description and application name.

    ``is_fatal`` is tri-state: None leaves the parameter out, True and
    False are sent as ``1`` and ``0``.
    """

    hit_type = HitType.EXCEPTION

    exception_description = FieldProperty("_exception_description")
    screen_name = FieldProperty("app.screen_name")
    application_name = FieldProperty("app.application_name")
    application_version = FieldProperty("app.application_version")

    def _init_fields(self) -> None:
        super()._init_fields()
        self.app = AppProperty(self.policy)
        self._exception_description = ValidatedField(
            "ExceptionDescription", "exd", MAX_EXCEPTION_DESCRIPTION, self.policy
        )
        self._is_fatal: Optional[bool] = None

    @property
    def is_fatal(self) -> Optional[bool]:
        return self._is_fatal

    @is_fatal.setter
    def is_fatal(self, value: Optional[bool]) -> None:
        self._is_fatal = None if value is None else bool(value)

    def serialize(self) -> str:
        app = self.app
        parts = [
            self._required(self._exception_description),
            self._required(
                app.application_name,
                "'ApplicationName' is required for all hit types sent to app properties",
            ),
            app.screen_name.fragment(),
        ]
        if self._is_fatal is not None:
            parts.append(f"&exf={1 if self._is_fatal else 0}")
        parts.append(app.application_version.fragment())
        parts.append(self._hit_type_fragment())
        return "".join(parts) + super().serialize()
