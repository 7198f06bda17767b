"""Configuration: default rates and display currency."""

from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

CURRENCY_SYMBOL = os.environ.get("MARGIN_SIM_CURRENCY_SYMBOL", "€")


class ConfigError(Exception):
    """An environment variable holds a value that cannot be used."""


@dataclass(frozen=True)
class DefaultRates:
    """Rates as typed by a user (percentages or fractions); the calculator normalizes them."""

    vat_rate: Decimal
    corporate_tax_rate: Decimal
    other_contributions_rate: Decimal


def _env_decimal(name: str, default: str) -> Decimal:
    raw = os.environ.get(name, default)
    try:
        return Decimal(raw.strip().replace(",", "."))
    except InvalidOperation:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from None


def get_default_rates() -> DefaultRates:
    return DefaultRates(
        vat_rate=_env_decimal("MARGIN_SIM_VAT_RATE", "20"),
        corporate_tax_rate=_env_decimal("MARGIN_SIM_CORPORATE_TAX_RATE", "25"),
        other_contributions_rate=_env_decimal("MARGIN_SIM_OTHER_CONTRIBUTIONS_RATE", "0"),
    )
