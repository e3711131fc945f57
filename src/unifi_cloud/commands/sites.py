"""Site commands."""

from __future__ import annotations

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
    make_client,
)
from unifi_cloud.output.formatter import output

app = typer.Typer(name="sites", help="Sites across all hosts.")


@app.command("list")
@error_handler
def list_sites(
    profile: ProfileOpt = None,
    api_key: ApiKeyOpt = None,
    base_url: BaseUrlOpt = None,
    timeout: TimeoutOpt = None,
    debug: DebugOpt = False,
    fmt: FormatOpt = "table",
) -> None:
    """List sites."""
    with make_client(profile, api_key, base_url, timeout, debug) as client:
        data = client.sites.list()
        columns = ["Site ID", "Host ID", "Name", "Description", "Timezone"]
        rows = [
            [
                s.get("siteId", ""),
                s.get("hostId", ""),
                dig(s, "meta", "name"),
                dig(s, "meta", "desc"),
                dig(s, "meta", "timezone"),
            ]
            for s in extract_items(data)
        ]
        output(data, fmt, columns=columns, rows=rows, title="Sites")
