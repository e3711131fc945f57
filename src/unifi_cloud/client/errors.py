"""Typed exceptions, status translation, and error handling decorator."""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

from rich.console import Console
from rich.markup import escape

F = TypeVar("F", bound=Callable[..., Any])

err_console = Console(stderr=True)


class UniFiCloudError(Exception):
    """Base exception for unifi-cloud."""

    category: str = "Error"
    exit_code: int = 1


class TransportError(UniFiCloudError):
    """The request failed before any HTTP response was received."""

    category = "TransportError"
    exit_code = 2


class APIError(UniFiCloudError):
    """The API answered with a status other than 200."""

    category = "UnknownStatus"
    exit_code = 8
    reason = "Unknown status code"

    def __init__(self, status_code: int, detail: str = "") -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"{status_code} {self.reason}: {detail}")


class UnauthorizedError(APIError):
    category = "Unauthorized"
    exit_code = 3
    reason = "Unauthorized"


class ForbiddenError(APIError):
    category = "Forbidden"
    exit_code = 3
    reason = "Forbidden"


class NotFoundError(APIError):
    category = "NotFound"
    exit_code = 4
    reason = "Not Found"


class MethodNotAllowedError(APIError):
    category = "MethodNotAllowed"
    exit_code = 5
    reason = "Method Not Allowed"


class RateLimitedError(APIError):
    category = "RateLimited"
    exit_code = 6
    reason = "Rate Limit Exceeded"


class ServerError(APIError):
    category = "ServerError"
    exit_code = 7
    reason = "Internal Server Error"


class BadGatewayError(APIError):
    category = "BadGateway"
    exit_code = 7
    reason = "Bad Gateway"


class ServiceUnavailableError(APIError):
    category = "ServiceUnavailable"
    exit_code = 7
    reason = "Service Unavailable"


class UnknownStatusError(APIError):
    """Status code with no dedicated category."""


class NotImplementedOperationError(UniFiCloudError):
    """The operation is intentionally unsupported for this resource family."""

    category = "NotImplemented"
    exit_code = 9


class UnknownServiceError(UniFiCloudError):
    """An accessor name outside hosts/sites/devices was requested."""

    category = "UnknownService"
    exit_code = 10


class ConfigurationError(UniFiCloudError):
    """Missing or invalid client configuration."""

    category = "Configuration"
    exit_code = 11


_STATUS_ERRORS: dict[int, type[APIError]] = {
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    405: MethodNotAllowedError,
    429: RateLimitedError,
    500: ServerError,
    502: BadGatewayError,
    503: ServiceUnavailableError,
}


def translate_status(status_code: int, message: str) -> APIError:
    """Map an HTTP status code and server message to a categorized error.

    The error is returned, not raised. Codes without a dedicated category
    become :class:`UnknownStatusError` with the numeric code in the message.
    """
    error_cls = _STATUS_ERRORS.get(status_code, UnknownStatusError)
    return error_cls(status_code, message)


def error_handler(func: F) -> F:
    """Decorator that catches UniFiCloudError and prints user-friendly messages."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except UniFiCloudError as exc:
            err_console.print(f"[bold red]Error:[/] {escape(str(exc))}")
            raise SystemExit(exc.exit_code)
        except ValueError as exc:
            err_console.print(f"[bold red]Error:[/] {escape(str(exc))}")
            raise SystemExit(1)

    return wrapper  # type: ignore[return-value]
