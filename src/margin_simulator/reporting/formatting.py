"""Currency and percentage strings for displaying calculation results."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from margin_simulator.config import CURRENCY_SYMBOL

CENT = Decimal("0.01")
NARROW_NBSP = "\u202f"  # fr-FR thousands separator
NBSP = "\u00a0"


def _cents(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def format_currency(value: Decimal, symbol: str = CURRENCY_SYMBOL) -> str:
    """French-style amount, e.g. ``1 234,56 €``."""
    amount = _cents(value)
    sign = "-" if amount < 0 else ""
    digits = f"{abs(amount):,.2f}".replace(",", NARROW_NBSP).replace(".", ",")
    return f"{sign}{digits}{NBSP}{symbol}"


def format_plain_currency(value: Decimal, symbol: str = CURRENCY_SYMBOL) -> str:
    """Terminal-report amount, e.g. ``153.85 €``."""
    return f"{_cents(value):.2f} {symbol}"


def format_percent(value: Decimal) -> str:
    """Fraction as a percentage, e.g. 0.3333 -> ``33.33 %``."""
    return f"{_cents(value * 100):.2f} %"
