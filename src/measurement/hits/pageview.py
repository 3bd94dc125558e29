"""Pageview hits for web properties."""

from __future__ import annotations

from measurement.errors import MissingFieldError
from measurement.hits.base import HitType, PayloadRecord, logger
from measurement.models.fields import FieldProperty, ValidatedField
from measurement.models.properties import WebProperty

MAX_DOCUMENT_REFERRER = 2048


class PageView(PayloadRecord):
    """A ``pageview`` hit.

    Either ``document_location`` or both ``document_host_name`` and
    ``document_path`` must be set. When the location is present the host
    name and path are not sent at all.
    """

    hit_type = HitType.PAGEVIEW

    document_location = FieldProperty("web.document_location")
    document_host_name = FieldProperty("web.document_host_name")
    document_path = FieldProperty("web.document_path")
    document_title = FieldProperty("web.document_title")
    document_referrer = FieldProperty("_document_referrer")

    def _init_fields(self) -> None:
        super()._init_fields()
        self.web = WebProperty(self.policy)
        self._document_referrer = ValidatedField(
            "DocumentReferrer", "dr", MAX_DOCUMENT_REFERRER, self.policy
        )

    def serialize(self) -> str:
        web = self.web
        parts = []

        if web.document_location:
            parts.append(web.document_location.fragment())
        elif web.document_host_name and web.document_path:
            parts.append(web.document_host_name.fragment())
            parts.append(web.document_path.fragment())
        elif self.policy.strict:
            raise MissingFieldError(
                "DocumentLocation",
                "Either 'DocumentLocation' or both 'DocumentHostName' and "
                "'DocumentPath' have to be specified for the hit to be valid",
            )
        else:
            logger.warning("pageview hit has no document location; sending without it")

        parts.append(self._hit_type_fragment())
        parts.append(web.document_title.fragment())
        parts.append(self._document_referrer.fragment())
        return "".join(parts) + super().serialize()
