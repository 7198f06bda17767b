"""Scenario inputs: one pydantic model per way of pricing an item."""

from __future__ import annotations

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter

# Passed through untouched; the calculator decides what counts as a number.
Amount = Any


class SaleScenario(BaseModel):
    """Purchase price and sale price are both known."""

    scenario: Literal["purchaseAndSale"] = "purchaseAndSale"
    purchase_price_ht: Amount
    sale_price_ht: Amount
    vat_rate: Amount
    corporate_tax_rate: Amount
    other_contributions_rate: Optional[Amount] = None

    model_config = {"extra": "forbid", "frozen": True}


class TargetMarginScenario(BaseModel):
    """Purchase price is known, sale price is derived from a target margin."""

    scenario: Literal["purchaseAndTargetMargin"] = "purchaseAndTargetMargin"
    purchase_price_ht: Amount
    target_margin_rate: Amount
    vat_rate: Amount
    corporate_tax_rate: Amount
    other_contributions_rate: Optional[Amount] = None

    model_config = {"extra": "forbid", "frozen": True}


ScenarioInput = Annotated[
    Union[SaleScenario, TargetMarginScenario],
    Field(discriminator="scenario"),
]

_scenario_adapter: TypeAdapter[SaleScenario | TargetMarginScenario] = TypeAdapter(ScenarioInput)


def parse_scenario(data: dict[str, Any]) -> SaleScenario | TargetMarginScenario:
    """Build the scenario variant named by data["scenario"]."""
    return _scenario_adapter.validate_python(data)
