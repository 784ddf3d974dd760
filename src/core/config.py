"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking into the CLI.
- Lets adapters (HTTP, exporters) read configuration consistently.
- The API endpoint is an injected value, never a module-level constant.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.language import Language


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "pokecards"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "pokecards"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "pokecards"
    return Path.home() / ".config" / "pokecards"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typing and validation at the edge (env vars) without polluting the core.
    - A single configuration contract for CLI and adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="POKECARDS_",
        extra="ignore",
        case_sensitive=False,
        # Order: project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default="https://pokeapi.co/api/v2",
        min_length=8,
        description="Base URL of the PokéAPI (no trailing slash required).",
    )
    list_limit: int = Field(
        default=48,
        ge=1,
        le=2000,
        description="Number of summary references requested per load cycle.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    user_agent: str = Field(
        default="pokecards/0.1 (+https://local)",
        min_length=1,
        description="User-Agent sent with every request.",
    )
    language: Language = Field(
        default=Language.ENGLISH,
        description="Language for user-facing labels (en/pt).",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Root log level for the console handler.",
    )

    @property
    def listing_url(self) -> str:
        return f"{self.api_base_url.rstrip('/')}/pokemon"
