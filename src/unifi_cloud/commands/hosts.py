"""Host commands — list, show."""

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
    dig,
    extract_items,
    extract_record,
    make_client,
)
from unifi_cloud.output.formatter import output

app = typer.Typer(name="hosts", help="UniFi consoles and gateways on the account.")


@app.command("list")
@error_handler
def list_hosts(
    profile: ProfileOpt = None,
    api_key: ApiKeyOpt = None,
    base_url: BaseUrlOpt = None,
    timeout: TimeoutOpt = None,
    debug: DebugOpt = False,
    fmt: FormatOpt = "table",
) -> None:
    """List hosts."""
    with make_client(profile, api_key, base_url, timeout, debug) as client:
        data = client.hosts.list()
        items = extract_items(data)
        columns = ["ID", "Name", "Type", "IP Address", "Blocked"]
        rows = [
            [
                h.get("id", ""),
                dig(h, "reportedState", "name") or dig(h, "reportedState", "hostname"),
                h.get("type", ""),
                h.get("ipAddress", ""),
                h.get("isBlocked", ""),
            ]
            for h in items
        ]
        output(data, fmt, columns=columns, rows=rows, title="Hosts")


@app.command()
@error_handler
def show(
    host_id: Annotated[str, typer.Argument(help="Host ID")],
    profile: ProfileOpt = None,
    api_key: ApiKeyOpt = None,
    base_url: BaseUrlOpt = None,
    timeout: TimeoutOpt = None,
    debug: DebugOpt = False,
    fmt: FormatOpt = "table",
) -> None:
    """Show a single host."""
    with make_client(profile, api_key, base_url, timeout, debug) as client:
        data = client.hosts.get(host_id)
        output(extract_record(data) if fmt == "table" else data, fmt, title=f"Host: {host_id}")
