"""Raw API commands — direct GET access to any endpoint."""

from __future__ import annotations

from typing import Annotated

import typer

from unifi_cloud.client.errors import error_handler
from unifi_cloud.commands._common import (
    ApiKeyOpt,
    BaseUrlOpt,
    DebugOpt,
    FormatOpt,
    ProfileOpt,
    TimeoutOpt,
    make_client,
)
from unifi_cloud.output.formatter import output

app = typer.Typer(name="api", help="Raw API access.")


def parse_params(pairs: list[str]) -> dict[str, str | list[str]]:
    """Parse ``key=value`` pairs; a repeated key becomes a list."""
    params: dict[str, str | list[str]] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"Expected key=value, got '{pair}'", param_hint="--param")
        if key in params:
            existing = params[key]
            params[key] = [*existing, value] if isinstance(existing, list) else [existing, value]
        else:
            params[key] = value
    return params


@app.command("get")
@error_handler
def api_get(
    path: Annotated[str, typer.Argument(help="API path (e.g. /ea/hosts)")],
    param: Annotated[
        list[str] | None,
        typer.Option("--param", "-P", help="Query parameter key=value (repeatable)"),
    ] = None,
    profile: ProfileOpt = None,
    api_key: ApiKeyOpt = None,
    base_url: BaseUrlOpt = None,
    timeout: TimeoutOpt = None,
    debug: DebugOpt = False,
    fmt: FormatOpt = "json",
) -> None:
    """Send a GET request to an API endpoint."""
    query = parse_params(param or [])
    if not path.startswith("/"):
        path = f"/{path}"
    with make_client(profile, api_key, base_url, timeout, debug) as client:
        data = client.request("GET", path, query=query or None)
        output(data, fmt)
