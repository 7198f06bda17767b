"""Labelled rows, rich tables and plain-text reports for calculation results."""

from __future__ import annotations

from decimal import Decimal
from typing import Callable

from rich.table import Table

from margin_simulator.models.result import CalculationResult
from margin_simulator.reporting.formatting import (
    format_currency,
    format_percent,
    format_plain_currency,
)

LABEL_WIDTH = 26


def build_rows(
    result: CalculationResult,
    currency: Callable[[Decimal], str] = format_currency,
) -> list[tuple[str, str]]:
    """Ordered (label, value) pairs describing a result."""

    def with_rate(amount: Decimal, rate: Decimal) -> str:
        return f"{currency(amount)} ({format_percent(rate)})"

    rows: list[tuple[str, str]] = []
    if result.target_margin_rate is not None:
        rows.append(("Marge cible", format_percent(result.target_margin_rate)))
    rows += [
        ("Prix d'achat HT", currency(result.purchase_price_ht)),
        ("Prix de vente HT", currency(result.sale_price_ht)),
        ("Prix de vente TTC", currency(result.sale_price_ttc)),
        ("TVA collectée", with_rate(result.vat_amount, result.vat_rate)),
        ("Marge brute", with_rate(result.gross_margin, result.gross_margin_rate)),
        ("Bénéfice imposable", currency(result.taxable_profit)),
        ("Impôt sur les sociétés", with_rate(result.corporate_tax, result.corporate_tax_rate)),
        ("Autres contributions", with_rate(result.other_contributions, result.other_contributions_rate)),
        ("Résultat net", currency(result.net_profit)),
    ]
    return rows


def results_table(title: str, result: CalculationResult) -> Table:
    table = Table(title=title)
    table.add_column("Poste", style="bold", width=LABEL_WIDTH)
    table.add_column("Montant", justify="right")

    rows = build_rows(result)
    for label, value in rows[:-1]:
        table.add_row(label, value)
    table.add_section()
    net_style = "green" if result.net_profit > 0 else "yellow"
    label, value = rows[-1]
    table.add_row(f"[bold]{label}[/bold]", f"[{net_style}]{value}[/{net_style}]")
    return table


def plain_report(name: str, result: CalculationResult) -> str:
    """Columnar text block, one ``label : value`` line per row."""
    lines = [f"=== {name} ==="]
    for label, value in build_rows(result, currency=format_plain_currency):
        lines.append(f"{label.ljust(LABEL_WIDTH)} : {value}")
    return "\n".join(lines)
