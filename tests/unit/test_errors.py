"""Tests for exceptions, status translation, and error_handler."""

from __future__ import annotations

import pytest

from unifi_cloud.client.errors import (
    APIError,
    BadGatewayError,
    ConfigurationError,
    ForbiddenError,
    MethodNotAllowedError,
    NotFoundError,
    NotImplementedOperationError,
    RateLimitedError,
    ServerError,
    ServiceUnavailableError,
    TransportError,
    UnauthorizedError,
    UniFiCloudError,
    UnknownServiceError,
    UnknownStatusError,
    error_handler,
    translate_status,
)


class TestTranslateStatus:
    @pytest.mark.parametrize(
        ("status", "error_cls", "category", "text"),
        [
            (401, UnauthorizedError, "Unauthorized", "401 Unauthorized: msg"),
            (403, ForbiddenError, "Forbidden", "403 Forbidden: msg"),
            (404, NotFoundError, "NotFound", "404 Not Found: msg"),
            (405, MethodNotAllowedError, "MethodNotAllowed", "405 Method Not Allowed: msg"),
            (429, RateLimitedError, "RateLimited", "429 Rate Limit Exceeded: msg"),
            (500, ServerError, "ServerError", "500 Internal Server Error: msg"),
            (502, BadGatewayError, "BadGateway", "502 Bad Gateway: msg"),
            (503, ServiceUnavailableError, "ServiceUnavailable", "503 Service Unavailable: msg"),
        ],
    )
    def test_known_codes(self, status, error_cls, category, text):
        exc = translate_status(status, "msg")
        assert type(exc) is error_cls
        assert exc.category == category
        assert exc.status_code == status
        assert exc.detail == "msg"
        assert str(exc) == text

    def test_unauthorized_keeps_message(self):
        exc = translate_status(401, "bad")
        assert exc.category == "Unauthorized"
        assert "bad" in str(exc)

    def test_unknown_code(self):
        exc = translate_status(999, "x")
        assert isinstance(exc, UnknownStatusError)
        assert exc.category == "UnknownStatus"
        assert "999" in str(exc)
        assert str(exc) == "999 Unknown status code: x"

    def test_returns_rather_than_raises(self):
        assert isinstance(translate_status(500, "boom"), APIError)

    def test_deterministic(self):
        assert str(translate_status(418, "tea")) == str(translate_status(418, "tea"))


class TestExceptionHierarchy:
    def test_base_error(self):
        exc = UniFiCloudError("test")
        assert str(exc) == "test"
        assert exc.exit_code == 1

    def test_transport_error_keeps_message(self):
        exc = TransportError("Connection refused")
        assert isinstance(exc, UniFiCloudError)
        assert str(exc) == "Connection refused"
        assert exc.category == "TransportError"

    def test_api_errors_share_base(self):
        for code in (401, 403, 404, 405, 429, 500, 502, 503, 418):
            assert isinstance(translate_status(code, ""), UniFiCloudError)

    def test_other_categories(self):
        assert NotImplementedOperationError("nope").category == "NotImplemented"
        assert UnknownServiceError("bogus").category == "UnknownService"
        assert ConfigurationError("no key").exit_code == 11


class TestErrorHandler:
    def test_exits_with_error_code(self):
        @error_handler
        def raises_not_found():
            raise translate_status(404, "missing")

        with pytest.raises(SystemExit) as exc_info:
            raises_not_found()
        assert exc_info.value.code == 4

    def test_value_error_exits_one(self):
        @error_handler
        def raises_value():
            raise ValueError("bad format")

        with pytest.raises(SystemExit) as exc_info:
            raises_value()
        assert exc_info.value.code == 1

    def test_passes_through_normal_return(self):
        @error_handler
        def returns_value():
            return 42

        assert returns_value() == 42

    def test_does_not_catch_other_exceptions(self):
        @error_handler
        def raises_type_error():
            raise TypeError("bad type")

        with pytest.raises(TypeError):
            raises_type_error()
