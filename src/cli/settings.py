"""`config` commands: inspect and store settings."""

from __future__ import annotations

import typer
from rich.console import Console

from cli.ui_components import build_settings_table
from core.config import ENV_PREFIX, AppSettings, get_user_env_file, write_user_env_vars
from core.domain.models import Currency
from core.domain.output_format import OutputFormat
from core.logging import LOG_LEVELS

app = typer.Typer(no_args_is_help=True, help="Show and store weather-kit settings.")

_console = Console()


@app.command()
def show() -> None:
    """Show the effective settings and where the user .env lives."""

    settings = AppSettings()
    _console.print(build_settings_table(settings))
    _console.print(f"[dim]User config:[/dim] {get_user_env_file()}")


@app.command()
def setup() -> None:
    """Interactive setup (stores values in the user config .env).

    Saves editing the .env file by hand.
    """

    current = AppSettings()

    output_format = typer.prompt(
        "Output format (table/json)",
        default=current.output_format.value,
        show_default=True,
    ).strip().lower()
    currency = typer.prompt(
        "Default currency (EUR/USD)",
        default=current.default_currency.value,
        show_default=True,
    ).strip().upper()
    log_level = typer.prompt(
        "Log level",
        default=current.log_level,
        show_default=True,
    ).strip().upper()

    if output_format not in {f.value for f in OutputFormat}:
        raise typer.BadParameter(f"unknown output format: {output_format}")
    if currency not in {c.value for c in Currency}:
        raise typer.BadParameter(f"unknown currency: {currency}")
    if log_level not in LOG_LEVELS:
        raise typer.BadParameter(f"unknown log level: {log_level}")

    env_path = write_user_env_vars(
        {
            f"{ENV_PREFIX}OUTPUT_FORMAT": output_format,
            f"{ENV_PREFIX}DEFAULT_CURRENCY": currency,
            f"{ENV_PREFIX}LOG_LEVEL": log_level,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
