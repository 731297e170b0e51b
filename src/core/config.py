"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking
  into the CLI.
- Lets adapters (JSON export) and the CLI read config consistently.

The classification thresholds are not settings: they are constants
in `core.services.temperature`.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.models import Currency
from core.domain.output_format import OutputFormat

APP_NAME = "weather-kit"
ENV_PREFIX = "WEATHER_KIT_"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str | None]) -> Path:
    """Write/update variables in the user's global .env file.

    `None` values are skipped, existing keys not mentioned are kept.
    """

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = [f"# {APP_NAME} user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typed and validated at the edge (env vars) without cluttering the core.
    - A single configuration contract for the CLI and adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
        # Project .env first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Root log level for the CLI.",
    )
    output_format: OutputFormat = Field(
        default=OutputFormat.TABLE,
        description="Default rendering for CLI results (table/json).",
    )
    default_currency: Currency = Field(
        default=Currency.EUR,
        description="Currency assumed for amounts given without one.",
    )
    export_dir: Path = Field(
        default=Path("exports"),
        description="Directory for JSON exports given as bare file names.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @field_validator("default_currency", mode="before")
    @classmethod
    def _upper_currency(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    def resolve_export_path(self, path: Path) -> Path:
        """Place bare file names under `export_dir`; keep explicit paths as given."""

        if path.is_absolute() or path.parent != Path("."):
            return path
        return self.export_dir / path
