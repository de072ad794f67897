"""Display formatting for prices and summary labels."""
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

from .models import Category

CENTS = Decimal("0.01")


def to_amount(value: Union[Decimal, int, float, str]) -> Decimal:
    """Coerce a number to a Decimal rounded to cents."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def format_currency(amount, symbol: str = "$") -> str:
    """Format an amount as currency with two decimals, e.g. $1,072.50."""
    return f"{symbol}{to_amount(amount):,.2f}"


def format_price_label(price, symbol: str = "$") -> str:
    """Short price label for badges: "Free", "$30" or "$16.50"."""
    amount = to_amount(price)
    if amount == 0:
        return "Free"
    if amount == amount.to_integral_value():
        return f"{symbol}{int(amount):,}"
    return format_currency(amount, symbol)


def pluralize(count: int, category: Union[Category, str]) -> str:
    """Summary line label; appends "s" for counts above one ("3 childs")."""
    name = Category.parse(category).value
    return f"{count} {name}{'s' if count > 1 else ''}"
