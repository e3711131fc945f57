"""Root Typer app — global options and command group registration."""

from __future__ import annotations

from typing import Optional

import typer

from unifi_cloud import __version__
from unifi_cloud.commands import api, config_cmd, devices, hosts, sites

app = typer.Typer(
    name="unifi-cloud",
    help="CLI for the UniFi Cloud (Site Manager) API.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    if value:
        print(f"unifi-cloud {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
) -> None:
    """UniFi Cloud CLI: list hosts, sites, and devices."""


app.add_typer(config_cmd.app, name="config")
app.add_typer(hosts.app, name="hosts")
app.add_typer(sites.app, name="sites")
app.add_typer(devices.app, name="devices")
app.add_typer(api.app, name="api")


def main() -> None:
    app()
