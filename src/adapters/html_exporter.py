"""HTML page export.

Why it lives in adapters:
- HTML is an infrastructure detail (Jinja2 templates).
- The core only knows the `SessionState`; the template decides the layout.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from core.domain.language import Language
from core.domain.models import SessionState


_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def _get_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
    )


def render_page_html(
    *,
    state: SessionState,
    language: Language = Language.ENGLISH,
) -> str:
    """Render a self-contained page for `state` (loading, error or cards)."""

    generated_at = datetime.now(timezone.utc).isoformat(timespec="seconds")
    template = _get_env().get_template("cards.html")
    return template.render(
        state=state,
        status=state.status.value,
        lang=language.value,
        t=language.text,
        error_message=language.error_message(state.error or ""),
        generated_at=generated_at,
    )


def export_page_html(
    *,
    state: SessionState,
    output_path: Path,
    language: Language = Language.ENGLISH,
) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    html = render_page_html(state=state, language=language)
    output_path.write_text(html, encoding="utf-8")
    return output_path
