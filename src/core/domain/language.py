"""Language utilities for pokecards.

This module centralizes the language options supported across the
application. Keeping it in the domain layer allows both CLI and exporters to
share a single source of truth without creating circular imports with
adapters.
"""

from __future__ import annotations

from enum import Enum


_LABELS: dict[str, dict[str, str]] = {
    "en": {
        "title": "Pokémons",
        "loading": "Loading...",
        "error": "Error",
        "image_alt": "Image of {name}",
        "stat": "EXP",
        "empty": "No entries.",
    },
    "pt": {
        "title": "Pokémons",
        "loading": "Carregando...",
        "error": "Erro",
        "image_alt": "Imagem do {name}",
        "stat": "EXP",
        "empty": "Nenhum registro.",
    },
}


class Language(str, Enum):
    """Supported natural-language choices for user-facing output."""

    ENGLISH = "en"
    PORTUGUESE = "pt"

    @classmethod
    def default(cls) -> "Language":
        """Return the default language used across the application."""

        return cls.ENGLISH

    def label(self) -> str:
        """Human readable label for prompts and logging."""

        return "Portuguese" if self is Language.PORTUGUESE else "English"

    def text(self, key: str, **values: object) -> str:
        template = _LABELS[self.value][key]
        return template.format(**values) if values else template

    def error_message(self, message: str) -> str:
        return f"{self.text('error')}: {message}"
