"""pokecards CLI (Typer + Rich).

Commands:
- `show`: run one load cycle and print the card page.
- `doctor`: settings and connectivity diagnostics.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Callable, Optional

import typer
from rich.console import Console
from rich.markup import escape

from adapters.html_exporter import export_page_html
from adapters.json_exporter import export_entities_json
from adapters.pokeapi import open_pokeapi_source
from cli import doctor
from cli.ui_components import build_page
from core.config import AppSettings
from core.domain.language import Language
from core.domain.models import LoadStatus, SessionState
from core.logging_setup import configure_logging
from core.services.list_loader import DisplaySession

app = typer.Typer(no_args_is_help=True, help="Sorted PokéAPI cards in the terminal.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


async def load_session(
    settings: AppSettings,
    *,
    on_diagnostic: Callable[[str], None] | None = None,
) -> SessionState:
    """Activate one display session against the configured API."""

    async with open_pokeapi_source(settings, on_diagnostic=on_diagnostic) as source:
        session = DisplaySession(source=source, limit=settings.list_limit)
        return await session.activate()


@app.command()
def show(
    language: Optional[Language] = typer.Option(
        None, "--language", "-l", help="Label language (en/pt)."
    ),
    limit: Optional[int] = typer.Option(
        None, "--limit", min=1, max=2000, help="Override the listing size (default 48)."
    ),
    export_html: Optional[Path] = typer.Option(
        None, "--export-html", help="Also write the page as HTML to this path."
    ),
    export_json: Optional[Path] = typer.Option(
        None, "--export-json", help="Also write the loaded collection as JSON."
    ),
    diagnostics: bool = typer.Option(
        False, "--diagnostics", help="List missing card fields reported at ingestion."
    ),
) -> None:
    """Fetch, sort and render the cards."""

    overrides: dict[str, Any] = {}
    if language is not None:
        overrides["language"] = language
    if limit is not None:
        overrides["list_limit"] = limit
    settings = AppSettings(**overrides)
    configure_logging(settings.log_level)
    lang = settings.language

    collected: list[str] = []
    with _console.status(lang.text("loading")):
        state = asyncio.run(
            load_session(settings, on_diagnostic=collected.append if diagnostics else None)
        )

    _console.print(build_page(state, lang))

    if diagnostics:
        for message in collected:
            _console.print(f"[yellow]![/yellow] {escape(message)}", highlight=False)

    if export_html:
        out = export_page_html(state=state, output_path=export_html, language=lang)
        _console.print(f"[green]HTML written:[/green] {out}")
    if export_json and state.status is LoadStatus.LOADED:
        out = export_entities_json(state=state, output_path=export_json)
        _console.print(f"[green]JSON written:[/green] {out}")

    if state.status is LoadStatus.ERROR:
        raise typer.Exit(code=1)


def run() -> None:
    app()
