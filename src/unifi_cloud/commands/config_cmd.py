"""Config commands — manage API key profiles."""

from __future__ import annotations

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.prompt import Confirm, Prompt

from unifi_cloud.client.errors import error_handler
from unifi_cloud.client.unifi import UniFiClient
from unifi_cloud.commands import _common
from unifi_cloud.commands._common import FormatOpt, extract_items
from unifi_cloud.config.constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from unifi_cloud.config.models import ClientProfile
from unifi_cloud.output.formatter import output

app = typer.Typer(name="config", help="Manage API key profiles and CLI configuration.")
console = Console()


def mask(secret: str) -> str:
    return secret[:4] + "..." if len(secret) > 8 else "***"


@app.command()
@error_handler
def init() -> None:
    """Interactive setup wizard — create your first profile."""
    mgr = _common.get_manager()
    console.print("[bold]UniFi Cloud CLI Setup[/]\n")

    name = Prompt.ask("Profile name", default="default")
    api_key = Prompt.ask("API key", password=True)
    base_url = Prompt.ask("API base URL", default=DEFAULT_BASE_URL)

    mgr.add_profile(ClientProfile(name=name, api_key=api_key, base_url=base_url))
    console.print(f"\n[green]Profile '{name}' saved.[/]")
    console.print(f"Config file: {mgr.config_path}")


@app.command()
@error_handler
def add(
    name: Annotated[str, typer.Argument(help="Profile name")],
    api_key: Annotated[str, typer.Option("--api-key", "-k", help="API key")],
    base_url: Annotated[str, typer.Option("--base-url", "-u", help="API base URL")] = DEFAULT_BASE_URL,
    timeout: Annotated[int, typer.Option("--timeout", min=1, help="Timeout in seconds")] = DEFAULT_TIMEOUT,
    debug: Annotated[bool, typer.Option("--debug", help="Enable transport tracing")] = False,
    set_default: Annotated[bool, typer.Option("--default", help="Set as default profile")] = False,
) -> None:
    """Add a profile."""
    mgr = _common.get_manager()
    mgr.add_profile(
        ClientProfile(name=name, api_key=api_key, base_url=base_url, timeout=timeout, debug=debug)
    )
    if set_default:
        mgr.set_default(name)
    console.print(f"[green]Profile '{name}' added.[/]")


@app.command("list")
@error_handler
def list_profiles(fmt: FormatOpt = "table") -> None:
    """List all configured profiles."""
    mgr = _common.get_manager()
    profiles = mgr.config.profiles
    if not profiles:
        console.print("[yellow]No profiles configured. Run 'unifi-cloud config init' to get started.[/]")
        return

    default = mgr.config.default_profile
    columns = ["Name", "Base URL", "Timeout", "Default"]
    rows = [
        [name, p.base_url, p.timeout, "*" if name == default else ""]
        for name, p in profiles.items()
    ]
    data = {
        "profiles": [
            {**p.model_dump(), "api_key": mask(p.api_key)} for p in profiles.values()
        ]
    }
    output(data, fmt, columns=columns, rows=rows, title="Profiles")


@app.command()
@error_handler
def show(
    name: Annotated[str, typer.Argument(help="Profile name")],
    fmt: FormatOpt = "table",
) -> None:
    """Show profile details."""
    profile = _common.get_manager().get_profile(name)
    if not profile:
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)
    data = profile.model_dump()
    data["api_key"] = mask(data["api_key"])
    output(data, fmt, title=f"Profile: {name}")


@app.command("set-default")
@error_handler
def set_default(
    name: Annotated[str, typer.Argument(help="Profile name to set as default")],
) -> None:
    """Set the default profile."""
    if _common.get_manager().set_default(name):
        console.print(f"[green]Default profile set to '{name}'.[/]")
    else:
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)


@app.command()
@error_handler
def test(
    name: Annotated[Optional[str], typer.Argument(help="Profile name (uses default if omitted)")] = None,
) -> None:
    """Check that the API key is accepted by listing hosts."""
    profile = _common.get_manager().resolve_profile(profile_name=name)
    console.print(f"Testing connection to [bold]{profile.base_url}[/]...")
    with UniFiClient.from_profile(profile) as client:
        hosts = extract_items(client.hosts.list())
    console.print(f"[green]Connected![/] {len(hosts)} host(s) visible to this key.")


@app.command()
@error_handler
def remove(
    name: Annotated[str, typer.Argument(help="Profile name to remove")],
    force: Annotated[bool, typer.Option("--force", help="Skip confirmation")] = False,
) -> None:
    """Remove a profile."""
    mgr = _common.get_manager()
    if not mgr.get_profile(name):
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)

    if not force and not Confirm.ask(f"Remove profile '{name}'?"):
        console.print("Cancelled.")
        return

    mgr.remove_profile(name)
    console.print(f"[green]Profile '{name}' removed.[/]")
