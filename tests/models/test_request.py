"""Tests for the outgoing request envelope."""

import pydantic
import pytest

from measurement.models.request import HitRequest, HttpMethod


class TestHitRequest:

    def test_post_body(self):
        request = HitRequest(method=HttpMethod.POST, url="http://c.test/collect", payload="v=1")
        assert request.body == "v=1"
        assert request.charset == "utf-8"

    def test_get_has_no_body(self):
        request = HitRequest(method="GET", url="http://c.test/collect?v=1", payload="v=1")
        assert request.method is HttpMethod.GET
        assert request.body is None

    def test_frozen(self):
        request = HitRequest(method="POST", url="http://c.test/collect", payload="v=1")
        with pytest.raises(pydantic.ValidationError):
            request.payload = "v=2"

    def test_rejects_unknown_method(self):
        with pytest.raises(pydantic.ValidationError):
            HitRequest(method="PUT", url="http://c.test/collect", payload="v=1")
