"""Shared helpers for CLI commands — client factory, options, response parsing."""

from __future__ import annotations

from typing import Annotated, Any

import typer

from unifi_cloud.client.unifi import UniFiClient
from unifi_cloud.config.manager import ConfigManager

# Shared Typer option type aliases
ProfileOpt = Annotated[
    str | None,
    typer.Option("--profile", "-p", help="Configuration profile"),
]
ApiKeyOpt = Annotated[
    str | None,
    typer.Option("--api-key", help="API key override"),
]
BaseUrlOpt = Annotated[
    str | None,
    typer.Option("--base-url", help="API base URL override"),
]
TimeoutOpt = Annotated[
    int | None,
    typer.Option("--timeout", min=1, help="Request timeout in seconds"),
]
DebugOpt = Annotated[
    bool,
    typer.Option("--debug", help="Trace HTTP transport activity to stderr"),
]
FormatOpt = Annotated[
    str,
    typer.Option("--format", "-f", help="Output format: table, json, yaml, csv"),
]


def get_manager() -> ConfigManager:
    return ConfigManager()


def make_client(
    profile: str | None,
    api_key: str | None,
    base_url: str | None,
    timeout: int | None = None,
    debug: bool = False,
) -> UniFiClient:
    """Create a UniFiClient from CLI options, env vars, or config profile."""
    resolved = get_manager().resolve_profile(
        profile_name=profile,
        api_key=api_key,
        base_url=base_url,
        timeout=timeout,
        debug=debug or None,
    )
    return UniFiClient.from_profile(resolved)


def extract_items(data: Any) -> list[Any]:
    """Extract the item list from an API response.

    The API wraps results as ``{"data": [...], "httpStatusCode": ..., "traceId": ...}``.
    """
    if isinstance(data, list):
        return list(data)
    if isinstance(data, dict):
        items = data.get("data")
        if isinstance(items, list):
            return list(items)
        if isinstance(items, dict):
            return [items]
    return []


def extract_record(data: Any) -> Any:
    """Unwrap a single-resource response."""
    if isinstance(data, dict) and isinstance(data.get("data"), dict):
        return data["data"]
    return data


def dig(item: Any, *keys: str) -> Any:
    """Follow nested dict keys, returning None where a level is missing."""
    for key in keys:
        if not isinstance(item, dict):
            return None
        item = item.get(key)
    return item
