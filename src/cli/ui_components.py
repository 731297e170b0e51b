"""Rich UI components for the CLI.

Why separate components:
- Keeps command logic apart from visual details.
- Tables and panels can be reused across commands.
"""

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.config import AppSettings
from core.domain.models import ClassificationResult, Money, PersonRecord


def print_banner(console: Console) -> None:
    """Print the welcome banner (skipped for JSON output)."""

    title = Text("weather-kit", style="bold cyan")
    subtitle = Text("Temperatures • People • Money", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_classification_table(results: Sequence[ClassificationResult]) -> Table:
    """One row per reading; the label is styled in its own color."""

    table = Table(title="Temperature Classification")
    table.add_column("Degrees", style="white", justify="right", no_wrap=True)
    table.add_column("Label", no_wrap=True)
    table.add_column("Color", style="dim")
    for result in results:
        table.add_row(
            str(result.degrees),
            Text(result.label.value, style=f"bold {result.color.value}"),
            result.color.value,
        )
    return table


def build_person_panel(person: PersonRecord) -> Panel:
    body = Text()
    body.append("Name: ", style="bold")
    body.append(f"{person.name!r}\n")
    body.append("Age: ", style="bold")
    body.append(f"{person.age}\n")
    body.append("Mature: ", style="bold")
    if person.is_mature():
        body.append("yes", style="green")
    else:
        body.append("no", style="yellow")
    return Panel(body, title=Text("Person", style="bold magenta"), border_style="magenta")


def build_money_table(values: Sequence[Money], total: Money | None) -> Table:
    table = Table(title="Money")
    table.add_column("Amount", justify="right", style="white")
    table.add_column("Currency", style="cyan")
    for value in values:
        table.add_row(str(value.amount), value.currency.value)
    if total is not None:
        table.add_section()
        table.add_row(Text(str(total.amount), style="bold green"), total.currency.value)
    return table


def build_settings_table(settings: AppSettings) -> Table:
    table = Table(title="weather-kit settings")
    table.add_column("Setting", style="bright_green", no_wrap=True)
    table.add_column("Value", style="white")
    for name, value in settings.model_dump(mode="json").items():
        table.add_row(name, str(value))
    return table
