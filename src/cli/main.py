"""weather-kit command line.

Commands delegate to `core.services`; this module only parses arguments,
picks an output format and renders. Negative numbers must follow `--`,
e.g. `weather-kit classify -- -3 12`.
"""

from __future__ import annotations

import re
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Sequence

import typer
from pydantic import BaseModel, ValidationError
from rich.console import Console

from adapters.json_exporter import dumps, export_json
from cli import settings as settings_cli
from cli.ui_components import (
    build_classification_table,
    build_money_table,
    build_person_panel,
    print_banner,
)
from core.config import AppSettings
from core.domain.models import Currency, Money, PersonRecord
from core.domain.output_format import OutputFormat
from core.errors import DomainError
from core.logging import LOG_LEVELS, get_logger, setup_logging
from core.services.money import sum_money
from core.services.temperature import classify_many

app = typer.Typer(
    no_args_is_help=True,
    help="Classify temperatures, inspect people and add up money.",
)
app.add_typer(settings_cli.app, name="config")

_console = Console()
_err_console = Console(stderr=True)

logger = get_logger(__name__)

_AMOUNT_RE = re.compile(r"^(?P<amount>[-+]?\d+(?:\.\d+)?)(?P<currency>[A-Za-z]{3})?$")


@contextmanager
def _domain_errors() -> Iterator[None]:
    try:
        yield
    except DomainError as exc:
        _err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc


def _settings(ctx: typer.Context) -> AppSettings:
    if isinstance(ctx.obj, AppSettings):
        return ctx.obj
    return AppSettings()


def _emit(
    ctx: typer.Context,
    *,
    payload: BaseModel | Sequence[BaseModel],
    renderable: object,
    output_format: OutputFormat | None,
    export: Path | None,
) -> None:
    settings = _settings(ctx)
    fmt = output_format or settings.output_format

    if fmt is OutputFormat.JSON:
        typer.echo(dumps(payload))
    else:
        if _console.is_terminal:
            print_banner(_console)
        _console.print(renderable)

    if export is not None:
        path = export_json(payload=payload, output_path=settings.resolve_export_path(export))
        _err_console.print(f"[green]Exported to:[/green] {path}")


@app.callback()
def main(
    ctx: typer.Context,
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="DEBUG, INFO, WARNING or ERROR (overrides WEATHER_KIT_LOG_LEVEL).",
    ),
) -> None:
    """Load settings and configure logging for every command."""

    settings = AppSettings()
    level = (log_level or settings.log_level).upper()
    if level not in LOG_LEVELS:
        raise typer.BadParameter(f"unknown log level: {log_level}", param_hint="--log-level")
    setup_logging(level, console=_err_console)
    logger.debug("settings: %s", settings.model_dump(mode="json"))
    ctx.obj = settings


@app.command()
def classify(
    ctx: typer.Context,
    degrees: list[int] = typer.Argument(..., help="One or more readings in whole degrees."),
    output_format: OutputFormat | None = typer.Option(None, "--format", "-f", help="table or json."),
    export: Path | None = typer.Option(None, "--export", help="Also write the results as JSON."),
) -> None:
    """Classify temperature readings as cold, mild or hot."""

    with _domain_errors():
        results = classify_many(degrees)
    _emit(
        ctx,
        payload=results,
        renderable=build_classification_table(results),
        output_format=output_format,
        export=export,
    )


@app.command()
def person(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Person name (may be empty)."),
    age: int = typer.Argument(..., help="Age in years; negative values are accepted."),
    output_format: OutputFormat | None = typer.Option(None, "--format", "-f", help="table or json."),
    export: Path | None = typer.Option(None, "--export", help="Also write the record as JSON."),
) -> None:
    """Show a person record and whether the person is mature (older than 18)."""

    record = PersonRecord(name, age)
    _emit(
        ctx,
        payload=record,
        renderable=build_person_panel(record),
        output_format=output_format,
        export=export,
    )


def _parse_amount(token: str, default_currency: Currency) -> Money:
    match = _AMOUNT_RE.match(token.strip())
    if match is None:
        raise typer.BadParameter(f"invalid amount: {token!r}", param_hint="AMOUNTS")
    code = (match["currency"] or default_currency.value).upper()
    try:
        currency = Currency(code)
    except ValueError as exc:
        raise typer.BadParameter(f"unknown currency: {code}", param_hint="AMOUNTS") from exc
    try:
        return Money.of(match["amount"], currency)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc), param_hint="AMOUNTS") from exc


@app.command()
def money(
    ctx: typer.Context,
    amounts: list[str] = typer.Argument(..., help="Amounts like 10.00 or 29.99USD."),
    currency: Currency | None = typer.Option(
        None,
        "--currency",
        "-c",
        case_sensitive=False,
        help="Currency for amounts without a suffix (default from settings).",
    ),
    output_format: OutputFormat | None = typer.Option(None, "--format", "-f", help="table or json."),
    export: Path | None = typer.Option(None, "--export", help="Also write the total as JSON."),
) -> None:
    """Add up amounts that share one currency."""

    default_currency = currency or _settings(ctx).default_currency
    values = [_parse_amount(token, default_currency) for token in amounts]
    with _domain_errors():
        total = sum_money(values)
    # `amounts` is a required argument, so there is always at least one value.
    assert total is not None
    _emit(
        ctx,
        payload=total,
        renderable=build_money_table(values, total),
        output_format=output_format,
        export=export,
    )


def run() -> None:
    app()


if __name__ == "__main__":
    run()
