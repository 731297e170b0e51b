"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation and self-documenting fields (Field) without coupling
  the core to any I/O library.
- `model_dump(mode="json")` gives the exporter and the CLI a stable
  serialization for free.

Note:
- These models describe *what* the data is, not how it is computed. The
  classification and summation rules live in `core.services`.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict

from core.errors import CurrencyMismatchError


class Color(str, Enum):
    """Symbolic color attached to a temperature label."""

    BLUE = "blue"
    YELLOW = "yellow"
    RED = "red"


class TemperatureLabel(str, Enum):
    """Descriptive temperature category."""

    COLD = "cold"
    MILD = "mild"
    HOT = "hot"

    @property
    def color(self) -> Color:
        """Color that always goes together with this label."""

        return _LABEL_COLORS[self]


_LABEL_COLORS: dict[TemperatureLabel, Color] = {
    TemperatureLabel.COLD: Color.BLUE,
    TemperatureLabel.MILD: Color.YELLOW,
    TemperatureLabel.HOT: Color.RED,
}


class ClassificationResult(BaseModel):
    """Outcome of classifying a single temperature reading.

    Why a model instead of a tuple:
    - Label and color are validated as a pair (cold/blue, mild/yellow,
      hot/red); an inconsistent result cannot be built.
    - Frozen: results are values, computed fresh per call.
    """

    model_config = ConfigDict(frozen=True)

    degrees: int = Field(
        ...,
        strict=True,
        description="Temperature reading in whole degrees, as classified.",
    )
    label: TemperatureLabel = Field(
        ...,
        description="Category of the reading (cold, mild, hot).",
    )
    color: Color = Field(
        ...,
        description="Symbolic color matching the label.",
    )

    @model_validator(mode="after")
    def _label_matches_color(self) -> "ClassificationResult":
        if self.label.color is not self.color:
            raise ValueError(
                f"color {self.color.value!r} does not match label {self.label.value!r}"
            )
        return self


class PersonRecord(BaseModel):
    """A person with a name and an age.

    Both fields are mutable; assignments go through the same validation as
    construction, so `name` can never become `None`. Empty names and
    negative ages are accepted.
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str = Field(
        ...,
        description="Display name. Required, never None (may be empty).",
    )
    age: int = Field(
        ...,
        strict=True,
        description="Age in years. No range restriction.",
    )

    def __init__(self, name: str, age: int, **data: Any) -> None:
        super().__init__(name=name, age=age, **data)

    def is_mature(self) -> bool:
        """True when the person is strictly older than 18."""

        return self.age > 18

    def get_name(self) -> str:
        return self.name

    def set_name(self, name: str) -> None:
        self.name = name

    def get_age(self) -> int:
        return self.age

    def set_age(self, age: int) -> None:
        self.age = age


class Currency(str, Enum):
    """Supported currencies."""

    EUR = "EUR"
    USD = "USD"


class Money(BaseModel):
    """Exact decimal amount tagged with a currency.

    Amounts are parsed from strings so no float rounding creeps in:
    `Money.eur("29.99")` holds exactly `Decimal("29.99")`.
    """

    model_config = ConfigDict(frozen=True)

    amount: Decimal = Field(
        default=Decimal("0"),
        description="Exact amount in the given currency.",
    )
    currency: Currency = Field(
        default=Currency.EUR,
        description="Currency of the amount.",
    )

    @classmethod
    def of(cls, amount: str | Decimal, currency: Currency) -> "Money":
        return cls(amount=amount, currency=currency)

    @classmethod
    def eur(cls, amount: str | Decimal) -> "Money":
        return cls.of(amount, Currency.EUR)

    @classmethod
    def usd(cls, amount: str | Decimal) -> "Money":
        return cls.of(amount, Currency.USD)

    def __add__(self, other: object) -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        if other.currency is not self.currency:
            raise CurrencyMismatchError(self.currency, other.currency)
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def __str__(self) -> str:
        return f"{self.amount} {self.currency.value}"


ZERO_EUR = Money.eur("0.00")
