"""
Unit tests for settings, errors and logging helpers.
"""

import structlog

from resource_store import config
from resource_store.config import StoreSettings, get_settings, reset_settings
from resource_store.errors import (
    EntityNotFoundError,
    MissingListError,
    TransportError,
    ValidationError,
)
from resource_store.logging import (
    add_correlation_context,
    add_service_context,
    clear_context,
    configure_logging,
    set_request_id,
)


class TestSettings:
    """Test cases for StoreSettings."""

    def test_env_prefix(self, monkeypatch):
        """Environment variables use the RESOURCE_STORE_ prefix."""
        monkeypatch.setenv("RESOURCE_STORE_API_BASE_URL", "http://from-env")
        monkeypatch.setenv("RESOURCE_STORE_REQUEST_TIMEOUT", "2.5")
        s = StoreSettings()
        assert s.api_base_url == "http://from-env"
        assert s.request_timeout == 2.5

    def test_defaults(self):
        s = StoreSettings()
        assert s.default_group_key == "default"
        assert s.request_timeout > 0

    def test_get_settings_is_cached(self):
        reset_settings()
        try:
            assert get_settings() is get_settings()
        finally:
            reset_settings()
        assert config._settings is None


class TestErrors:
    """Test cases for error types."""

    def test_transport_error_response(self):
        err = TransportError("templates", "Unexpected status 502", details={"status_code": 502})
        response = err.to_response()

        assert response.code == "TRANSPORT_ERROR"
        assert response.message == "templates: Unexpected status 502"
        assert err.status_code == 502

    def test_not_found_is_transport_error(self):
        err = EntityNotFoundError("templates", 7)
        assert isinstance(err, TransportError)
        assert err.code == "ENTITY_NOT_FOUND"
        assert err.status_code == 404

    def test_validation_and_missing_list_codes(self):
        assert ValidationError().code == "VALIDATION_ERROR"
        assert MissingListError("g").details == {"group_key": "g"}


class TestCorrelationContext:
    """Test cases for log correlation."""

    def test_request_id_added(self):
        request_id = set_request_id("req-1")
        try:
            assert add_correlation_context(None, "info", {}) == {"request_id": request_id}
        finally:
            clear_context()

    def test_no_request_id(self):
        clear_context()
        assert add_correlation_context(None, "info", {}) == {}


class TestConfigureLogging:
    """Test cases for structlog configuration."""

    def test_service_name_stamped(self):
        processor = add_service_context("catalog")
        assert processor(None, "info", {"event": "x"}) == {"event": "x", "service": "catalog"}

    def test_configure_installs_json_renderer(self):
        try:
            configure_logging("catalog", "debug")
            processors = structlog.get_config()["processors"]
            assert isinstance(processors[-1], structlog.processors.JSONRenderer)
            assert add_correlation_context in processors
        finally:
            structlog.reset_defaults()
