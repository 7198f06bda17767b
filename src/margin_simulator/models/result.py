"""Pydantic CalculationResult — the record returned by every calculator."""

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class ScenarioKind(str, Enum):
    PURCHASE_AND_SALE = "purchaseAndSale"
    PURCHASE_AND_TARGET_MARGIN = "purchaseAndTargetMargin"


class CalculationResult(BaseModel):
    """Financial breakdown of one pricing scenario. Rates are normalized decimals."""

    scenario: ScenarioKind
    purchase_price_ht: Decimal
    sale_price_ht: Decimal
    sale_price_ttc: Decimal
    vat_amount: Decimal
    vat_rate: Decimal
    gross_margin: Decimal
    gross_margin_rate: Decimal
    taxable_profit: Decimal
    corporate_tax: Decimal
    corporate_tax_rate: Decimal
    other_contributions: Decimal
    other_contributions_rate: Decimal
    net_profit: Decimal
    target_margin_rate: Optional[Decimal] = None

    model_config = {"frozen": True}
