"""Output format choices for weather-kit.

Centralizing them in the domain layer lets both the settings and the CLI
share a single source of truth without importing each other.
"""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """How the CLI renders results."""

    TABLE = "table"
    JSON = "json"
