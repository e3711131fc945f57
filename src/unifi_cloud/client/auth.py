"""API key authentication for the UniFi Cloud API."""

from __future__ import annotations

from collections.abc import Generator

import httpx

from unifi_cloud.config.constants import API_KEY_HEADER


class APIKeyAuth(httpx.Auth):
    """Authenticate using a UniFi API key (X-API-KEY header).

    The header is set on the outgoing request, replacing any value the
    caller supplied.
    """

    def __init__(self, api_key: str) -> None:
        self.api_key = api_key

    def auth_flow(
        self, request: httpx.Request,
    ) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers[API_KEY_HEADER] = self.api_key
        yield request
