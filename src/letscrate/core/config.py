"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking them into the CLI.
- Lets adapters (HTTP, console) read config consistently.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

VERSION = "1.3"
API_VERSION = "1"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "letscrate"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "letscrate"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "letscrate"
    return Path.home() / ".config" / "letscrate"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typing and validation at the edge (env vars) without polluting the Core.
    - A single configuration contract for the CLI and the adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="LETSCRATE_",
        extra="ignore",
        case_sensitive=False,
        # Order: project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    base_url: str = Field(
        default="https://api.letscrate.com/1/",
        min_length=8,
        description="Base URL of the LetsCrate API (with trailing slash).",
    )
    share_url_base: str = Field(
        default="http://lts.cr/",
        min_length=1,
        description="Prefix for short link codes shown next to each entry.",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    user_agent: str = Field(
        default=f"letscrate-cli/{VERSION}",
        min_length=1,
        description="User-Agent sent with every API request.",
    )

    username: str | None = Field(
        default=None,
        description="Account name used when --login is not given.",
    )
    password: str | None = Field(
        default=None,
        description="Account password used when --login is not given.",
    )

    terminal_width: int | None = Field(
        default=None,
        ge=40,
        description="Force the output width instead of detecting the terminal.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Log level for the letscrate logger (DEBUG, INFO, WARNING...).",
    )
