"""HTTP gateway for the UniFi Cloud API."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

import httpx

from unifi_cloud.client.auth import APIKeyAuth
from unifi_cloud.client.errors import (
    ConfigurationError,
    TransportError,
    err_console,
    translate_status,
)
from unifi_cloud.client.query import QueryParams, encode_query
from unifi_cloud.config.models import ClientProfile


def _trace(event_name: str, info: dict[str, Any]) -> None:
    """httpcore trace hook used when debug mode is on."""
    err_console.print(f"* {event_name} {info}", markup=False, highlight=False)


def _decode_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None


def _body_message(body: Any, default: str) -> str:
    if isinstance(body, dict) and body.get("message") is not None:
        return str(body["message"])
    return default


class RequestGateway:
    """Synchronous HTTP gateway for the UniFi Cloud API.

    Owns the credentials, base address, and timeout. ``timeout`` and
    ``debug`` may be changed at any time and apply to the next call.
    """

    def __init__(
        self,
        profile: ClientProfile,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._profile = profile.model_copy()
        try:
            self._client = httpx.Client(
                base_url=self._profile.base_url,
                auth=APIKeyAuth(self._profile.api_key),
                transport=transport,
            )
        except httpx.InvalidURL as exc:
            raise ConfigurationError(
                f"Invalid base URL {self._profile.base_url!r}: {exc}"
            ) from exc

    @property
    def api_key(self) -> str:
        return self._profile.api_key

    @property
    def base_url(self) -> str:
        return self._profile.base_url

    @property
    def timeout(self) -> int:
        return self._profile.timeout

    @timeout.setter
    def timeout(self, value: int) -> None:
        self._profile.timeout = value

    @property
    def debug(self) -> bool:
        return self._profile.debug

    @debug.setter
    def debug(self, value: bool) -> None:
        self._profile.debug = value

    @property
    def closed(self) -> bool:
        return self._client.is_closed

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> RequestGateway:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def request(
        self,
        method: str,
        path: str,
        *,
        query: QueryParams | None = None,
        json: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Issue one call and return the decoded JSON body.

        Raises :class:`TransportError` when no response was received, or a
        categorized :class:`APIError` for any status other than 200.
        """
        # Snapshot so a concurrent change cannot affect this call
        timeout = self.timeout
        debug = self.debug

        url = path
        if query is not None:
            url = f"{path}?{encode_query(query)}"

        request_headers = httpx.Headers(headers)
        request_headers["Accept"] = "application/json"

        extensions = {"trace": _trace} if debug else None

        try:
            response = self._client.request(
                method.upper(),
                url,
                json=json,
                headers=request_headers,
                timeout=timeout,
                extensions=extensions,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            body = _decode_body(exc.response)
            message = _body_message(body, str(exc))
            raise translate_status(exc.response.status_code, message) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(str(exc)) from exc

        body = _decode_body(response)
        if response.status_code == 200:
            return body
        raise translate_status(response.status_code, _body_message(body, "Unknown error"))

    def get(self, path: str, **kwargs: Any) -> Any:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, **kwargs: Any) -> Any:
        return self.request("POST", path, **kwargs)

    def put(self, path: str, **kwargs: Any) -> Any:
        return self.request("PUT", path, **kwargs)

    def delete(self, path: str, **kwargs: Any) -> Any:
        return self.request("DELETE", path, **kwargs)
