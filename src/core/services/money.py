"""Money summation."""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from core.domain.models import Money
from core.errors import CurrencyMismatchError
from core.logging import get_logger

logger = get_logger(__name__)


def sum_money(values: Sequence[Money]) -> Money | None:
    """Add up money values sharing a single currency.

    Returns `None` for an empty sequence. Mixed currencies raise
    `CurrencyMismatchError`; there is no conversion.
    """

    if not values:
        return None

    currencies = list(dict.fromkeys(value.currency for value in values))
    if len(currencies) != 1:
        raise CurrencyMismatchError(*currencies)

    total = sum((value.amount for value in values), Decimal("0"))
    logger.debug("summed %d values: %s %s", len(values), total, currencies[0].value)
    return Money(amount=total, currency=currencies[0])
