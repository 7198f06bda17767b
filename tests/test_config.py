"""Tests for environment-driven defaults."""

from __future__ import annotations

from decimal import Decimal

import pytest

from margin_simulator.config import ConfigError, get_default_rates


def test_defaults(monkeypatch) -> None:
    for name in ("MARGIN_SIM_VAT_RATE", "MARGIN_SIM_CORPORATE_TAX_RATE",
                 "MARGIN_SIM_OTHER_CONTRIBUTIONS_RATE"):
        monkeypatch.delenv(name, raising=False)
    rates = get_default_rates()
    assert rates.vat_rate == Decimal("20")
    assert rates.corporate_tax_rate == Decimal("25")
    assert rates.other_contributions_rate == Decimal("0")


def test_decimal_comma(monkeypatch) -> None:
    monkeypatch.setenv("MARGIN_SIM_VAT_RATE", "5,5")
    assert get_default_rates().vat_rate == Decimal("5.5")


def test_malformed_value(monkeypatch) -> None:
    monkeypatch.setenv("MARGIN_SIM_OTHER_CONTRIBUTIONS_RATE", "abc")
    with pytest.raises(ConfigError, match="MARGIN_SIM_OTHER_CONTRIBUTIONS_RATE"):
        get_default_rates()
