"""
Currency helpers for amounts and narrative text.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

DEFAULT_CURRENCY_SYMBOL = "R$"

Number = Union[Decimal, int, float]


def to_decimal(value: Number) -> Decimal:
    """
    Convert an amount or ratio to Decimal

    Floats go through their shortest repr, so 0.1 becomes Decimal('0.1')
    rather than its binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_amount(value: Number) -> int:
    """Round to the nearest whole currency unit, halves rounded up"""
    return int(to_decimal(value).quantize(Decimal('1'), rounding=ROUND_HALF_UP))


def format_currency(value: Number, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """
    Format an amount for display, e.g. R$ 1,234,567.89

    Negative amounts keep the sign in front of the symbol.
    """
    amount = to_decimal(value).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol} {abs(amount):,.2f}"


def format_multiplier(value: float) -> str:
    return f"{value:.2f}x"
