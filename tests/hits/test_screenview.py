"""Tests for screenview serialization."""

import pytest

from measurement.errors import MissingFieldError, ValidationError
from measurement.hits import ScreenView


class TestScreenViewSerialize:

    def test_required_only(self, strict):
        hit = ScreenView(strict, application_name="My App", screen_name="Home")
        assert hit.serialize() == "&an=My%20App&cd=Home&t=screenview"

    def test_full_order(self, strict):
        hit = ScreenView(
            strict,
            application_installer_id="com.android.vending",
            application_id="com.example.app",
            application_version="1.2",
            screen_name="Home",
            application_name="App",
            data_source="app",
        )
        assert hit.serialize() == (
            "&an=App&cd=Home&t=screenview&av=1.2&aid=com.example.app"
            "&aiid=com.android.vending&ds=app"
        )

    def test_missing_application_name_first(self, strict):
        with pytest.raises(MissingFieldError) as exc:
            ScreenView(strict).serialize()
        assert exc.value.field == "ApplicationName"

    def test_missing_screen_name(self, strict):
        with pytest.raises(MissingFieldError) as exc:
            ScreenView(strict, application_name="App").serialize()
        assert exc.value.field == "ScreenName"

    def test_missing_lenient(self, lenient):
        assert ScreenView(lenient).serialize() == "&t=screenview"


class TestScreenViewFields:

    def test_application_id_raw_limit(self, strict):
        hit = ScreenView(strict)
        hit.application_id = "a" * 150
        with pytest.raises(ValidationError):
            hit.application_id = "a" * 151

    def test_installer_id_raw_limit(self, strict):
        hit = ScreenView(strict)
        hit.application_installer_id = "é" * 150
        with pytest.raises(ValidationError):
            hit.application_installer_id = "é" * 151

    def test_application_id_not_encoded(self, strict):
        hit = ScreenView(strict, application_name="App", screen_name="S",
                         application_id="a/b c")
        assert "&aid=a/b c" in hit.serialize()
