"""Verify measurement configuration loads from environment."""

import pytest

from measurement.errors import ConfigurationError


def test_settings_load(monkeypatch):
    """Settings should initialize with protocol defaults."""
    for name in ("MEASUREMENT_ENDPOINT", "MEASUREMENT_SSL_ENDPOINT",
                 "MEASUREMENT_METHOD", "MEASUREMENT_USE_SSL",
                 "MEASUREMENT_HTTP_TIMEOUT", "MEASUREMENT_ASYNC_WORKERS"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("MEASUREMENT_LOG_LEVEL", "info")
    from measurement.config import Settings
    s = Settings()
    assert s.version == "0.1.0"
    assert s.log_level == "info"
    assert s.endpoint == "http://www.google-analytics.com/collect"
    assert s.ssl_endpoint == "https://ssl.google-analytics.com/collect"
    assert s.method == "POST"
    assert s.use_ssl is False
    assert s.throw_on_validation_error is True
    assert s.http_timeout == 10.0
    assert s.async_workers == 4


def test_settings_overrides(monkeypatch):
    monkeypatch.setenv("MEASUREMENT_ENDPOINT", "http://collector.test/collect")
    monkeypatch.setenv("MEASUREMENT_METHOD", "get")
    monkeypatch.setenv("MEASUREMENT_THROW_ON_VALIDATION_ERROR", "false")
    monkeypatch.setenv("MEASUREMENT_HTTP_TIMEOUT", "2.5")
    from measurement.config import Settings
    s = Settings()
    assert s.endpoint == "http://collector.test/collect"
    assert s.method == "GET"
    assert s.throw_on_validation_error is False
    assert s.http_timeout == 2.5


@pytest.mark.parametrize("name,value", [
    ("MEASUREMENT_METHOD", "PUT"),
    ("MEASUREMENT_USE_SSL", "maybe"),
    ("MEASUREMENT_ASYNC_WORKERS", "many"),
    ("MEASUREMENT_ASYNC_WORKERS", "0"),
])
def test_settings_reject_bad_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    from measurement.config import Settings
    with pytest.raises(ConfigurationError):
        Settings()
