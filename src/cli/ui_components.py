"""UI components for the CLI (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Every builder is a pure function of its input: no I/O, no state.
"""

from __future__ import annotations

from typing import Iterable

from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from core.config import AppSettings
from core.domain.language import Language
from core.domain.models import DetailRecord, LoadStatus, SessionState

MISSING = "?"
CARD_WIDTH = 28


def build_card(record: DetailRecord, language: Language = Language.ENGLISH) -> Panel:
    """One card: image link, name and the EXP stat."""

    name = record.name or MISSING
    exp = MISSING if record.base_experience is None else str(record.base_experience)

    body = Text(justify="center")
    alt = language.text("image_alt", name=name)
    if record.image_url:
        body.append(alt, style=f"italic link {record.image_url}")
    else:
        body.append(alt, style="italic dim")
    body.append("\n\n")
    body.append(name, style="bold")
    body.append("\n")
    body.append(f"{language.text('stat')}: {exp}", style="green")

    return Panel(body, width=CARD_WIDTH, border_style="cyan", padding=(1, 1))


def build_card_grid(
    entities: Iterable[DetailRecord],
    language: Language = Language.ENGLISH,
) -> Columns:
    return Columns([build_card(e, language) for e in entities], equal=True)


def build_page(state: SessionState, language: Language = Language.ENGLISH) -> RenderableType:
    """Render the whole page for any session state."""

    if state.status is LoadStatus.LOADING:
        return Text(language.text("loading"))
    if state.status is LoadStatus.ERROR:
        return Text(language.error_message(state.error or ""), style="bold red")

    title = Text(language.text("title"), style="bold cyan")
    if not state.entities:
        return Group(title, Rule(), Text(language.text("empty"), style="dim"))
    return Group(title, Rule(), build_card_grid(state.entities, language))


def print_banner(console: Console) -> None:
    title = Text("pokecards", style="bold cyan")
    subtitle = Text("PokéAPI card viewer", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_settings_table(settings: AppSettings) -> Table:
    """Table of effective settings (used by `doctor`)."""

    table = Table(title="Settings")
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("api_base_url", settings.api_base_url)
    table.add_row("list_limit", str(settings.list_limit))
    table.add_row("http_timeout_seconds", f"{settings.http_timeout_seconds:g}")
    table.add_row("user_agent", settings.user_agent)
    table.add_row("language", settings.language.label())
    table.add_row("log_level", settings.log_level)
    return table
