"""Batch runner: price a list of named scenarios in one go."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from pydantic import BaseModel, TypeAdapter

from margin_simulator.calculator import calculate
from margin_simulator.config import get_default_rates
from margin_simulator.models.result import CalculationResult
from margin_simulator.models.scenario import (
    SaleScenario,
    ScenarioInput,
    TargetMarginScenario,
)


class BatchEntry(BaseModel):
    name: str
    scenario: ScenarioInput

    model_config = {"extra": "forbid"}


_entries_adapter = TypeAdapter(list[BatchEntry])


def default_scenarios() -> list[BatchEntry]:
    """The two reference scenarios, priced with the configured default rates.

    Raises ConfigError when a MARGIN_SIM_*_RATE variable is malformed.
    """
    defaults = get_default_rates()
    rates = {
        "vat_rate": defaults.vat_rate,
        "corporate_tax_rate": defaults.corporate_tax_rate,
        "other_contributions_rate": defaults.other_contributions_rate,
    }
    return [
        BatchEntry(
            name="Prix d'achat + prix de vente",
            scenario=SaleScenario(
                purchase_price_ht=Decimal("100"), sale_price_ht=Decimal("150"), **rates
            ),
        ),
        BatchEntry(
            name="Prix d'achat + marge cible",
            scenario=TargetMarginScenario(
                purchase_price_ht=Decimal("100"), target_margin_rate=Decimal("0.35"), **rates
            ),
        ),
    ]


def load_batch(path: str | Path) -> list[BatchEntry]:
    """Read a JSON list of {"name": ..., "scenario": {...}} entries."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f, parse_float=Decimal)
    return _entries_adapter.validate_python(data)


def run_batch(entries: list[BatchEntry]) -> list[tuple[str, CalculationResult]]:
    """Price every entry in order. The first invalid entry raises its PricingError."""
    return [(entry.name, calculate(entry.scenario)) for entry in entries]
