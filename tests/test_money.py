"""
Unit tests for Money values and summation.
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from core.domain.models import ZERO_EUR, Currency, Money
from core.errors import CurrencyMismatchError
from core.services.money import sum_money


def test_factories_parse_exact_decimals():
    money = Money.eur("29.99")

    assert money.amount == Decimal("29.99")
    assert money.currency is Currency.EUR
    assert Money.usd("10.00").currency is Currency.USD


def test_defaults_are_zero_euro():
    assert Money() == Money(amount=Decimal("0"), currency=Currency.EUR)
    assert ZERO_EUR == Money.eur("0.00")


def test_addition_in_same_currency():
    assert Money.eur("10.00") + Money.eur("29.99") == Money.eur("39.99")


def test_addition_across_currencies_fails():
    with pytest.raises(CurrencyMismatchError) as excinfo:
        Money.eur("1.00") + Money.usd("1.00")

    assert "EUR" in str(excinfo.value)
    assert "USD" in str(excinfo.value)


def test_addition_with_other_types_is_unsupported():
    with pytest.raises(TypeError):
        Money.eur("1.00") + 1


def test_sum_of_many():
    total = sum_money([Money.eur("10.00"), Money.eur("29.99"), Money.eur("10.00")])

    assert total == Money.eur("49.99")
    assert str(total) == "49.99 EUR"


def test_sum_of_nothing_is_none():
    assert sum_money([]) is None


def test_sum_of_mixed_currencies_fails():
    with pytest.raises(CurrencyMismatchError):
        sum_money([Money.eur("1.00"), Money.usd("2.00"), Money.eur("3.00")])


def test_money_is_frozen():
    with pytest.raises(ValidationError):
        Money.eur("1.00").amount = Decimal("2")


def test_garbage_amount_is_rejected():
    with pytest.raises(ValidationError):
        Money.eur("ten euros")


def test_equality_compares_value_not_scale():
    assert Money.eur("10") == Money.eur("10.00")
    assert str(Money.eur("10")) == "10 EUR"
