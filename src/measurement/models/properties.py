"""Property groups shared by several hit types.

AppProperty carries the parameters common to hits sent to a mobile app
property; WebProperty carries the document parameters of a web
property. Records embed an instance of the group they need rather than
inheriting from it, which keeps each group's limits next to its fields.
"""

from __future__ import annotations

from typing import Optional

from measurement.models.fields import PathField, RawField, ValidatedField
from measurement.policy import ValidationPolicy

# Byte ceilings
MAX_SCREEN_NAME = 2048
MAX_APPLICATION_NAME = 100
MAX_APPLICATION_VERSION = 100

MAX_DOCUMENT_LOCATION = 2048
MAX_DOCUMENT_HOST_NAME = 100
MAX_DOCUMENT_PATH = 2048
MAX_DOCUMENT_TITLE = 1500


class AppProperty:
    """Screen name, application name and application version.

    ApplicationName is required on every hit sent to an app property;
    the records decide when to enforce that. ApplicationVersion is sent
    verbatim and limited by its raw length.
    """

    def __init__(self, policy: Optional[ValidationPolicy] = None):
        self.screen_name = ValidatedField(
            "ScreenName", "cd", MAX_SCREEN_NAME, policy
        )
        self.application_name = ValidatedField(
            "ApplicationName", "an", MAX_APPLICATION_NAME, policy
        )
        self.application_version = RawField(
            "ApplicationVersion", "av", MAX_APPLICATION_VERSION, policy
        )


class WebProperty:
    """Document location, host name, path and title.

    A pageview is valid when either the location or both host name and
    path are present.
    """

    def __init__(self, policy: Optional[ValidationPolicy] = None):
        self.document_location = ValidatedField(
            "DocumentLocation", "dl", MAX_DOCUMENT_LOCATION, policy
        )
        self.document_host_name = ValidatedField(
            "DocumentHostName", "dh", MAX_DOCUMENT_HOST_NAME, policy
        )
        self.document_path = PathField(
            "DocumentPath", "dp", MAX_DOCUMENT_PATH, policy
        )
        self.document_title = ValidatedField(
            "DocumentTitle", "dt", MAX_DOCUMENT_TITLE, policy
        )
