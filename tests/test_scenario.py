"""Tests for scenario input models."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from margin_simulator.calculator import calculate
from margin_simulator.errors import InvalidPriceError, InvalidRateError
from margin_simulator.models.scenario import SaleScenario, TargetMarginScenario, parse_scenario


class TestScenarioModels:
    def test_sale_scenario_defaults(self) -> None:
        scenario = SaleScenario(purchase_price_ht=100, sale_price_ht=150, vat_rate=20,
                                corporate_tax_rate=25)
        assert scenario.scenario == "purchaseAndSale"
        assert scenario.other_contributions_rate is None

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SaleScenario(purchase_price_ht=100, sale_price_ht=150, vat_rate=20,
                         corporate_tax_rate=25, discount=5)

    def test_missing_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TargetMarginScenario(purchase_price_ht=100, vat_rate=20, corporate_tax_rate=25)

    def test_frozen(self) -> None:
        scenario = SaleScenario(purchase_price_ht=100, sale_price_ht=150, vat_rate=20,
                                corporate_tax_rate=25)
        with pytest.raises(ValidationError):
            scenario.sale_price_ht = 200


class TestParseScenario:
    def test_sale_variant(self) -> None:
        scenario = parse_scenario({
            "scenario": "purchaseAndSale",
            "purchase_price_ht": Decimal("100"),
            "sale_price_ht": 150,
            "vat_rate": 20,
            "corporate_tax_rate": 25,
        })
        assert isinstance(scenario, SaleScenario)
        assert scenario.purchase_price_ht == Decimal("100")
        assert calculate(scenario).net_profit == Decimal("37.5")

    def test_values_are_not_coerced(self) -> None:
        scenario = parse_scenario({
            "scenario": "purchaseAndSale",
            "purchase_price_ht": "100",
            "sale_price_ht": 150,
            "vat_rate": True,
            "corporate_tax_rate": 25,
        })
        assert scenario.purchase_price_ht == "100"
        assert scenario.vat_rate is True

    def test_string_price_rejected_by_calculator(self) -> None:
        scenario = parse_scenario({
            "scenario": "purchaseAndSale",
            "purchase_price_ht": "100",
            "sale_price_ht": 150,
            "vat_rate": 20,
            "corporate_tax_rate": 25,
        })
        with pytest.raises(InvalidPriceError):
            calculate(scenario)

    def test_bool_rate_rejected_by_calculator(self) -> None:
        scenario = parse_scenario({
            "scenario": "purchaseAndTargetMargin",
            "purchase_price_ht": 100,
            "target_margin_rate": 0.35,
            "vat_rate": True,
            "corporate_tax_rate": 25,
        })
        with pytest.raises(InvalidRateError) as exc_info:
            calculate(scenario)
        assert exc_info.value.field == "vat_rate"

    def test_target_margin_variant(self) -> None:
        scenario = parse_scenario({
            "scenario": "purchaseAndTargetMargin",
            "purchase_price_ht": 100,
            "target_margin_rate": 0.35,
            "vat_rate": 0.2,
            "corporate_tax_rate": 0.25,
            "other_contributions_rate": 0,
        })
        assert isinstance(scenario, TargetMarginScenario)
        assert scenario.other_contributions_rate == 0

    def test_fields_must_match_variant(self) -> None:
        with pytest.raises(ValidationError):
            parse_scenario({
                "scenario": "purchaseAndSale",
                "purchase_price_ht": 100,
                "target_margin_rate": 0.35,
                "vat_rate": 0.2,
                "corporate_tax_rate": 0.25,
            })

    def test_unknown_tag_rejected(self) -> None:
        with pytest.raises(ValidationError):
            parse_scenario({"scenario": "bulk", "purchase_price_ht": 100})
