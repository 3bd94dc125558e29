"""Pytest configuration for the measurement test suite."""

import os
import uuid

# Ensure test environment variables are set before any imports
os.environ.setdefault("MEASUREMENT_LOG_LEVEL", "warning")
os.environ.setdefault("MEASUREMENT_THROW_ON_VALIDATION_ERROR", "true")

import pytest

from measurement.policy import ValidationPolicy, default_policy
from measurement.transports.base import Transport

FIXED_CLIENT_ID = uuid.UUID("35009a79-1a05-49d7-b876-2b884d0f825b")


class RecordingTransport(Transport):
    """Transport that remembers every call instead of sending it."""

    def __init__(self):
        super().__init__()
        self.calls: list[tuple] = []
        self.closed = False

    @property
    def transport_type(self) -> str:
        return "recording"

    def post(self, url, body, charset="utf-8"):
        self.calls.append(("post", url, body, charset))
        self._record_sent()

    def post_async(self, url, body, charset="utf-8"):
        self.calls.append(("post_async", url, body, charset))

    def get(self, url):
        self.calls.append(("get", url))
        self._record_sent()

    def get_async(self, url):
        self.calls.append(("get_async", url))

    def close(self):
        self.closed = True


@pytest.fixture(autouse=True)
def _reset_default_policy():
    """Tests that flip the shared switch must not leak into others."""
    default_policy.strict = True
    yield
    default_policy.strict = True


@pytest.fixture
def strict():
    return ValidationPolicy(strict=True)


@pytest.fixture
def lenient():
    return ValidationPolicy(strict=False)


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def client_id():
    return FIXED_CLIENT_ID
