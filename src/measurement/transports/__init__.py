"""Transport collaborators that put assembled hits on the wire."""

from measurement.transports.base import Transport, TransportHealth
from measurement.transports.http import HttpxTransport

__all__ = ["HttpxTransport", "Transport", "TransportHealth"]
