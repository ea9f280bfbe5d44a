"""Utility functions for currency amounts."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENT = Decimal("0.01")


def round_money(amount: Decimal) -> Decimal:
    """Rounds an amount to whole cents, half-up as on an invoice."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def to_money(value: Decimal | float | int | str) -> Decimal:
    """
    Converts a raw cost (DB DECIMAL, JSON float, form string) to a 2-digit Decimal.
    Floats go through str() so 0.1 stays 0.10 instead of 0.1000000000000000055...
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a monetary amount: {value!r}")
    if isinstance(value, float):
        value = str(value)
    try:
        amount = Decimal(value)
    except (InvalidOperation, TypeError) as e:
        raise ValueError(f"Not a monetary amount: {value!r}") from e
    if not amount.is_finite():
        raise ValueError(f"Not a monetary amount: {value!r}")
    return round_money(amount)


def format_money(amount: Decimal) -> str:
    """Formats an amount with exactly two fraction digits."""
    return f"{round_money(amount):.2f}"
