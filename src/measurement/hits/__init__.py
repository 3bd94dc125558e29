"""Hit record variants."""

from measurement.hits.base import HitType, PayloadRecord
from measurement.hits.event import AppEvent, Event, WebEvent
from measurement.hits.exception import ExceptionHit
from measurement.hits.pageview import PageView
from measurement.hits.screenview import ScreenView
from measurement.hits.social import Social

__all__ = [
    "AppEvent",
    "Event",
    "ExceptionHit",
    "HitType",
    "PageView",
    "PayloadRecord",
    "ScreenView",
    "Social",
    "WebEvent",
]
