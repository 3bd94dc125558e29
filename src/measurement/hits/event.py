"""Event hits.

Event is sent as-is to any property. AppEvent and WebEvent add the app
or web property group and put those parameters in front of the event's
own fragment.
"""

from __future__ import annotations

from typing import Optional

from measurement.errors import FormatError
from measurement.hits.base import HitType, PayloadRecord
from measurement.models.fields import FieldProperty, ValidatedField
from measurement.models.properties import AppProperty, WebProperty

MAX_EVENT_CATEGORY = 150
MAX_EVENT_ACTION = 500
MAX_EVENT_LABEL = 500


class Event(PayloadRecord):
    """An ``event`` hit. Requires category and action."""

    hit_type = HitType.EVENT

    event_category = FieldProperty("_event_category")
    event_action = FieldProperty("_event_action")
    event_label = FieldProperty("_event_label")

    def _init_fields(self) -> None:
        super()._init_fields()
        self._event_category = ValidatedField(
            "EventCategory", "ec", MAX_EVENT_CATEGORY, self.policy
        )
        self._event_action = ValidatedField(
            "EventAction", "ea", MAX_EVENT_ACTION, self.policy
        )
        self._event_label = ValidatedField(
            "EventLabel", "el", MAX_EVENT_LABEL, self.policy
        )
        self._event_value: Optional[int] = None

    @property
    def event_value(self) -> Optional[int]:
        """Non-negative integer value of the event."""
        return self._event_value

    @event_value.setter
    def event_value(self, value: Optional[int]) -> None:
        if value is not None and self.policy.strict:
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise FormatError(
                    "EventValue", f"'EventValue' must be a non-negative integer, got {value!r}"
                )
        self._event_value = value

    def serialize(self) -> str:
        parts = [
            self._required(self._event_category),
            self._required(self._event_action),
            self._hit_type_fragment(),
            self._event_label.fragment(),
        ]
        if self._event_value is not None:
            parts.append(f"&ev={self._event_value}")
        return "".join(parts) + super().serialize()


class AppEvent(Event):
    """An event sent to an app property. Also requires application name."""

    screen_name = FieldProperty("app.screen_name")
    application_name = FieldProperty("app.application_name")
    application_version = FieldProperty("app.application_version")

    def _init_fields(self) -> None:
        super()._init_fields()
        self.app = AppProperty(self.policy)

    def serialize(self) -> str:
        event_fragment = super().serialize()
        app = self.app
        parts = [
            self._required(
                app.application_name,
                "'ApplicationName' is required for all hit types sent to app properties",
            ),
            app.screen_name.fragment(),
            app.application_version.fragment(),
        ]
        return "".join(parts) + event_fragment


class WebEvent(Event):
    """An event sent to a web property, with optional document fields."""

    document_location = FieldProperty("web.document_location")
    document_host_name = FieldProperty("web.document_host_name")
    document_path = FieldProperty("web.document_path")
    document_title = FieldProperty("web.document_title")

    def _init_fields(self) -> None:
        super()._init_fields()
        self.web = WebProperty(self.policy)

    def serialize(self) -> str:
        event_fragment = super().serialize()
        web = self.web
        return (
            web.document_location.fragment()
            + web.document_host_name.fragment()
            + web.document_path.fragment()
            + web.document_title.fragment()
            + event_fragment
        )
