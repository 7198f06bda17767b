"""Pricing calculator: VAT, gross margin, taxes and net profit of a sale.

Every amount is HT (excluding tax) unless its name ends in ``_ttc``. Inputs
may be ``int``, ``float`` or ``Decimal``; results are always ``Decimal``.
Floats go through their repr so that ``0.2`` becomes ``Decimal("0.2")``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from margin_simulator.errors import InvalidPriceError, InvalidRateError, MarginTooHighError
from margin_simulator.models.result import CalculationResult, ScenarioKind
from margin_simulator.models.scenario import SaleScenario, TargetMarginScenario

ZERO = Decimal("0")
ONE = Decimal("1")
HUNDRED = Decimal("100")


def _to_decimal(value: Any) -> Decimal | None:
    """Finite Decimal for a numeric value, None for anything else."""
    if isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, int):
        number = Decimal(value)
    elif isinstance(value, float):
        number = Decimal(repr(value))
    else:
        return None
    return number if number.is_finite() else None


def normalize_rate(rate: Any, field: str = "rate") -> Decimal:
    """Return a rate as a decimal fraction.

    Values above 1 are read as percentages (20 -> 0.2); values in [0, 1] are
    already fractions, so exactly 1 means 100%.
    """
    number = _to_decimal(rate)
    if number is None:
        raise InvalidRateError(f"{field} must be a number, got {rate!r}", field, rate)
    if number < 0:
        raise InvalidRateError(f"{field} cannot be negative, got {rate!r}", field, rate)
    return number / HUNDRED if number > ONE else number


def _validate_price(value: Any, field: str) -> Decimal:
    number = _to_decimal(value)
    if number is None or number < 0:
        raise InvalidPriceError(f"{field} must be a positive number, got {value!r}", field, value)
    return number


def _optional_rate(rate: Any, field: str) -> Decimal:
    if rate is None or rate == "":
        return ZERO
    return normalize_rate(rate, field)


def calculate_with_sale_price(
    purchase_price_ht: Any,
    sale_price_ht: Any,
    vat_rate: Any,
    corporate_tax_rate: Any,
    other_contributions_rate: Any = None,
) -> CalculationResult:
    """Compute the full breakdown when the sale price is known."""
    purchase = _validate_price(purchase_price_ht, "purchase_price_ht")
    sale = _validate_price(sale_price_ht, "sale_price_ht")

    vat = normalize_rate(vat_rate, "vat_rate")
    corporate = normalize_rate(corporate_tax_rate, "corporate_tax_rate")
    other = _optional_rate(other_contributions_rate, "other_contributions_rate")

    vat_amount = sale * vat
    sale_price_ttc = sale + vat_amount
    gross_margin = sale - purchase
    # A zero sale price has no meaningful margin rate; report 0.
    gross_margin_rate = ZERO if sale == 0 else gross_margin / sale

    # Losses are neither taxed nor rebated.
    taxable_profit = max(gross_margin, ZERO)
    corporate_tax = taxable_profit * corporate
    other_contributions = taxable_profit * other
    net_profit = taxable_profit - corporate_tax - other_contributions

    return CalculationResult(
        scenario=ScenarioKind.PURCHASE_AND_SALE,
        purchase_price_ht=purchase,
        sale_price_ht=sale,
        sale_price_ttc=sale_price_ttc,
        vat_amount=vat_amount,
        vat_rate=vat,
        gross_margin=gross_margin,
        gross_margin_rate=gross_margin_rate,
        taxable_profit=taxable_profit,
        corporate_tax=corporate_tax,
        corporate_tax_rate=corporate,
        other_contributions=other_contributions,
        other_contributions_rate=other,
        net_profit=net_profit,
    )


def calculate_with_target_margin(
    purchase_price_ht: Any,
    target_margin_rate: Any,
    vat_rate: Any,
    corporate_tax_rate: Any,
    other_contributions_rate: Any = None,
) -> CalculationResult:
    """Derive the sale price from a target margin on sale price, then price it.

    The sale price is ``purchase / (1 - margin)``; everything else comes from
    :func:`calculate_with_sale_price` so both scenarios share one formula.
    """
    purchase = _validate_price(purchase_price_ht, "purchase_price_ht")

    margin_rate = normalize_rate(target_margin_rate, "target_margin_rate")
    if margin_rate >= ONE:
        raise MarginTooHighError(
            f"target_margin_rate must be below 100%, got {target_margin_rate!r}",
            "target_margin_rate",
            target_margin_rate,
        )

    sale_price_ht = purchase / (ONE - margin_rate)
    base = calculate_with_sale_price(
        purchase,
        sale_price_ht,
        vat_rate,
        corporate_tax_rate,
        other_contributions_rate,
    )
    return base.model_copy(update={
        "scenario": ScenarioKind.PURCHASE_AND_TARGET_MARGIN,
        "target_margin_rate": margin_rate,
    })


def calculate(scenario: SaleScenario | TargetMarginScenario) -> CalculationResult:
    """Run the calculator matching the scenario variant."""
    if isinstance(scenario, TargetMarginScenario):
        return calculate_with_target_margin(
            scenario.purchase_price_ht,
            scenario.target_margin_rate,
            scenario.vat_rate,
            scenario.corporate_tax_rate,
            scenario.other_contributions_rate,
        )
    return calculate_with_sale_price(
        scenario.purchase_price_ht,
        scenario.sale_price_ht,
        scenario.vat_rate,
        scenario.corporate_tax_rate,
        scenario.other_contributions_rate,
    )
