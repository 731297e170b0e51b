"""Domain errors.

Why a dedicated module:
- The CLI maps every `DomainError` to a readable message and exit code 1
  without knowing about individual failure cases.
- Each concrete error also derives from the builtin it refines, so callers
  that only know `ValueError`/`TypeError` keep working.

Field-level violations (e.g. a `None` name) stay as pydantic's
`ValidationError`; these classes cover rules that span more than one value.
"""

from __future__ import annotations


class DomainError(Exception):
    """Base class for errors raised by the domain layer."""


class CurrencyMismatchError(DomainError, ValueError):
    """Money values in different currencies were combined."""

    def __init__(self, *currencies: object) -> None:
        self.currencies = tuple(currencies)
        names = ", ".join(str(getattr(c, "value", c)) for c in self.currencies)
        super().__init__(f"Cannot combine money in different currencies: {names}")


class InvalidTemperatureError(DomainError, TypeError):
    """A temperature reading was not an integer."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Temperature must be an integer number of degrees, got {type(value).__name__}: {value!r}"
        )
