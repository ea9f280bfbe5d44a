# tests/test_common/test_money_utils.py
from decimal import Decimal

import pytest

from stockroom.common.utils.money_utils import format_money, round_money, to_money


@pytest.mark.parametrize(
    "amount,expected",
    [
        ("0.125", "0.13"),  # half-up, banker's rounding would give 0.12
        ("0.135", "0.14"),
        ("2.004", "2.00"),
        ("39.9", "39.90"),
    ],
)
def test_round_money_is_half_up(amount, expected) -> None:
    assert round_money(Decimal(amount)) == Decimal(expected)


def test_to_money_from_float_keeps_cents() -> None:
    assert to_money(0.1) == Decimal("0.10")
    assert to_money(3.99) == Decimal("3.99")


def test_to_money_accepts_strings_and_ints() -> None:
    assert to_money("4.25") == Decimal("4.25")
    assert to_money(2) == Decimal("2.00")
    assert to_money(Decimal("0.815")) == Decimal("0.82")


@pytest.mark.parametrize("value", ["abc", None, True, float("nan"), "Infinity"])
def test_to_money_rejects_non_amounts(value) -> None:
    with pytest.raises(ValueError):
        to_money(value)


def test_format_money() -> None:
    assert format_money(Decimal("39.9")) == "39.90"
    assert format_money(Decimal("0")) == "0.00"
