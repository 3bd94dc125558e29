"""Measurement configuration via environment variables.

Every tunable is read from a MEASUREMENT_* variable when Settings is
constructed. The collection endpoints, default request method and the
validation strictness switch all live here so that deployments can
change them without touching code.
"""

import os
import logging

from measurement.errors import ConfigurationError

logger = logging.getLogger("measurement.config")

DEFAULT_ENDPOINT = "http://www.google-analytics.com/collect"
DEFAULT_SSL_ENDPOINT = "https://ssl.google-analytics.com/collect"


def _env_bool(name: str, default: str) -> bool:
    raw = os.environ.get(name, default).strip().lower()
    if raw in ("1", "true", "yes", "on"):
        return True
    if raw in ("0", "false", "no", "off"):
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {raw!r}")


def _env_number(name: str, default: str, kind: type):
    raw = os.environ.get(name, default)
    try:
        return kind(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be {kind.__name__}, got {raw!r}") from e


class Settings:
    """All configuration sourced from environment."""

    def __init__(self):
        # Core
        self.version = "0.1.0"
        self.log_level = os.environ.get("MEASUREMENT_LOG_LEVEL", "info")

        # Collection endpoints
        self.endpoint = os.environ.get("MEASUREMENT_ENDPOINT", DEFAULT_ENDPOINT)
        self.ssl_endpoint = os.environ.get(
            "MEASUREMENT_SSL_ENDPOINT", DEFAULT_SSL_ENDPOINT
        )
        self.method = os.environ.get("MEASUREMENT_METHOD", "POST").upper()
        self.use_ssl = _env_bool("MEASUREMENT_USE_SSL", "false")

        # Payload validation
        self.throw_on_validation_error = _env_bool(
            "MEASUREMENT_THROW_ON_VALIDATION_ERROR", "true"
        )

        # Transport
        self.http_timeout = _env_number("MEASUREMENT_HTTP_TIMEOUT", "10.0", float)
        self.async_workers = _env_number("MEASUREMENT_ASYNC_WORKERS", "4", int)

        if self.method not in ("GET", "POST"):
            raise ConfigurationError(
                f"MEASUREMENT_METHOD must be GET or POST, got {self.method!r}"
            )
        if self.async_workers < 1:
            raise ConfigurationError("MEASUREMENT_ASYNC_WORKERS must be at least 1")

        logger.debug(
            "Settings loaded: endpoint=%s ssl_endpoint=%s method=%s strict=%s",
            self.endpoint, self.ssl_endpoint, self.method,
            self.throw_on_validation_error,
        )


settings = Settings()
