"""Screenview hits for mobile app properties."""

from __future__ import annotations

from measurement.hits.base import HitType, PayloadRecord
from measurement.models.fields import FieldProperty, RawField
from measurement.models.properties import AppProperty

MAX_APPLICATION_ID = 150
MAX_APPLICATION_INSTALLER_ID = 150


class ScreenView(PayloadRecord):
    """A ``screenview`` hit. Requires application name and screen name."""

    hit_type = HitType.SCREENVIEW

    screen_name = FieldProperty("app.screen_name")
    application_name = FieldProperty("app.application_name")
    application_version = FieldProperty("app.application_version")
    application_id = FieldProperty("_application_id")
    application_installer_id = FieldProperty("_application_installer_id")

    def _init_fields(self) -> None:
        super()._init_fields()
        self.app = AppProperty(self.policy)
        self._application_id = RawField(
            "ApplicationId", "aid", MAX_APPLICATION_ID, self.policy
        )
        self._application_installer_id = RawField(
            "ApplicationInstallerId", "aiid", MAX_APPLICATION_INSTALLER_ID, self.policy
        )

    def serialize(self) -> str:
        app = self.app
        parts = [
            self._required(
                app.application_name,
                "'ApplicationName' is required for all hit types sent to app properties",
            ),
            self._required(
                app.screen_name,
                "'ScreenName' is required on mobile properties for screenview hits",
            ),
            self._hit_type_fragment(),
            app.application_version.fragment(),
            self._application_id.fragment(),
            self._application_installer_id.fragment(),
        ]
        return "".join(parts) + super().serialize()
