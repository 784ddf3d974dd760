"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client, describe_http_error
from cli.ui_components import build_settings_table, print_banner
from core.config import AppSettings, get_user_env_file

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(settings.listing_url, params={"limit": 1})
            response.raise_for_status()
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, describe_http_error(exc)


@app.command()
def run() -> None:
    """Show effective settings and check the listing endpoint."""

    settings = AppSettings()
    print_banner(_console)
    _console.print(build_settings_table(settings))

    table = Table(title="pokecards Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    env_file = get_user_env_file()
    table.add_row("User .env", "OK" if env_file.exists() else "OPTIONAL", str(env_file))

    ok_http, detail_http = asyncio.run(_check_http(settings))
    table.add_row("Listing endpoint", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_http:
        raise typer.Exit(code=1)


@app.command(name="env-file")
def env_file() -> None:
    """Print the path of the per-user .env file."""

    _console.print(str(get_user_env_file()), highlight=False, soft_wrap=True)
