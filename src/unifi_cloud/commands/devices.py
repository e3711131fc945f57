"""Device commands.

The devices endpoint groups devices by host; the table view flattens the
groups into one row per device.
"""

from __future__ import annotations

from typing import Annotated, Any

import typer

from unifi_cloud.client.errors import error_handler
from unifi_cloud.commands._common import (
    ApiKeyOpt,
    BaseUrlOpt,
    DebugOpt,
    FormatOpt,
    ProfileOpt,
    TimeoutOpt,
    extract_items,
    make_client,
)
from unifi_cloud.output.formatter import output

app = typer.Typer(name="devices", help="Devices managed by hosts.")


def flatten_devices(groups: list[Any]) -> list[dict[str, Any]]:
    """Turn ``[{hostId, hostName, devices: [...]}, ...]`` into one dict per device."""
    flat: list[dict[str, Any]] = []
    for group in groups:
        if not isinstance(group, dict):
            continue
        for device in group.get("devices") or []:
            flat.append({"hostName": group.get("hostName", ""), **device})
    return flat


@app.command("list")
@error_handler
def list_devices(
    host_ids: Annotated[
        list[str] | None,
        typer.Option("--host-id", help="Only devices of this host (repeatable)"),
    ] = None,
    time: Annotated[
        str | None,
        typer.Option("--time", help="Last processed timestamp filter (RFC 3339)"),
    ] = None,
    profile: ProfileOpt = None,
    api_key: ApiKeyOpt = None,
    base_url: BaseUrlOpt = None,
    timeout: TimeoutOpt = None,
    debug: DebugOpt = False,
    fmt: FormatOpt = "table",
) -> None:
    """List devices, optionally filtered by host."""
    with make_client(profile, api_key, base_url, timeout, debug) as client:
        data = client.devices.list(host_ids=host_ids, time=time)
        columns = ["Host", "Name", "Model", "MAC", "IP", "Status", "Version"]
        rows = [
            [
                d.get("hostName", ""),
                d.get("name", ""),
                d.get("model", ""),
                d.get("mac", ""),
                d.get("ip", ""),
                d.get("status", ""),
                d.get("version", ""),
            ]
            for d in flatten_devices(extract_items(data))
        ]
        output(data, fmt, columns=columns, rows=rows, title="Devices")
