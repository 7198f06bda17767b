"""Click CLI — all user-facing commands."""

from __future__ import annotations

import json
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, Callable, NoReturn

import click
import structlog
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from margin_simulator.calculator import calculate_with_sale_price, calculate_with_target_margin
from margin_simulator.config import ConfigError, get_default_rates
from margin_simulator.errors import PricingError
from margin_simulator.logging_config import configure_logging
from margin_simulator.models.rates import CORPORATE_TAX_RATE_LABELS, VAT_RATE_LABELS
from margin_simulator.models.result import CalculationResult
from margin_simulator.reporting.batch import default_scenarios, load_batch, run_batch
from margin_simulator.reporting.reports import plain_report, results_table

console = Console()
log = structlog.get_logger(__name__)


class NonNegativeNumber(click.ParamType):
    """User text -> Decimal. Accepts a decimal comma ("19,6")."""

    name = "number"

    def __init__(self, optional: bool = False) -> None:
        self.optional = optional

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Decimal:
        if isinstance(value, Decimal):
            return value
        label = param.human_readable_name if param else "value"
        text = str(value).strip()
        if not text:
            if self.optional:
                return Decimal("0")
            self.fail(f"{label} is required", param, ctx)
        try:
            number = Decimal(text.replace(",", "."))
        except InvalidOperation:
            self.fail(f"{label} must be a positive number, got {text!r}", param, ctx)
        if not number.is_finite() or number < 0:
            self.fail(f"{label} must be a positive number, got {text!r}", param, ctx)
        return number


NUMBER = NonNegativeNumber()
OPTIONAL_NUMBER = NonNegativeNumber(optional=True)


def _rate_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Shared --vat-rate / --corporate-tax-rate / --other-rate options."""
    func = click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")(func)
    func = click.option("--other-rate", type=OPTIONAL_NUMBER,
                        help="Other contributions on taxable profit [default: $MARGIN_SIM_OTHER_CONTRIBUTIONS_RATE or 0]")(func)
    func = click.option("--corporate-tax-rate", type=NUMBER,
                        help="Corporate tax (IS) rate [default: $MARGIN_SIM_CORPORATE_TAX_RATE or 25]")(func)
    func = click.option("--vat-rate", type=NUMBER,
                        help="VAT rate, as 20 or 0.2 [default: $MARGIN_SIM_VAT_RATE or 20]")(func)
    return func


def _emit(title: str, result: CalculationResult, as_json: bool) -> None:
    if as_json:
        click.echo(json.dumps(result.model_dump(mode="json"), indent=2))
    else:
        console.print(results_table(title, result))


def _fail(exc: PricingError) -> NoReturn:
    log.info("calculation.rejected", kind=exc.kind.value, field=exc.field)
    console.print(f"[red]{escape(str(exc))}[/red]")
    raise SystemExit(1)


def _config_fail(exc: ConfigError) -> NoReturn:
    console.print(f"[red]Configuration error: {escape(str(exc))}[/red]")
    raise SystemExit(1)


def _with_defaults(vat_rate: Decimal | None, corporate_tax_rate: Decimal | None,
                   other_rate: Decimal | None) -> tuple[Decimal, Decimal, Decimal]:
    """Fill rates left off the command line from the environment defaults."""
    if vat_rate is not None and corporate_tax_rate is not None and other_rate is not None:
        return vat_rate, corporate_tax_rate, other_rate
    try:
        defaults = get_default_rates()
    except ConfigError as exc:
        _config_fail(exc)
    return (
        defaults.vat_rate if vat_rate is None else vat_rate,
        defaults.corporate_tax_rate if corporate_tax_rate is None else corporate_tax_rate,
        defaults.other_contributions_rate if other_rate is None else other_rate,
    )


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Debug logging on stderr")
@click.option("--log-json", is_flag=True, help="Log as JSON lines")
def cli(verbose: bool, log_json: bool) -> None:
    """Margin simulator — VAT, margin, corporate tax and net profit of a sale."""
    configure_logging(verbose=verbose, log_json=log_json)


@cli.command()
@click.argument("purchase_price", type=NUMBER)
@click.argument("sale_price", type=NUMBER)
@_rate_options
def sale(purchase_price: Decimal, sale_price: Decimal, vat_rate: Decimal | None,
         corporate_tax_rate: Decimal | None, other_rate: Decimal | None, as_json: bool) -> None:
    """Price a sale from its purchase and sale prices (HT)."""
    vat_rate, corporate_tax_rate, other_rate = _with_defaults(vat_rate, corporate_tax_rate, other_rate)
    log.debug("calculation.start", scenario="purchaseAndSale",
              purchase_price=str(purchase_price), sale_price=str(sale_price))
    try:
        result = calculate_with_sale_price(purchase_price, sale_price, vat_rate,
                                           corporate_tax_rate, other_rate)
    except PricingError as exc:
        _fail(exc)
    _emit("Prix d'achat + prix de vente", result, as_json)


@cli.command()
@click.argument("purchase_price", type=NUMBER)
@click.argument("target_margin", type=NUMBER)
@_rate_options
def margin(purchase_price: Decimal, target_margin: Decimal, vat_rate: Decimal | None,
           corporate_tax_rate: Decimal | None, other_rate: Decimal | None, as_json: bool) -> None:
    """Derive the sale price (HT) from a target margin on sale price."""
    vat_rate, corporate_tax_rate, other_rate = _with_defaults(vat_rate, corporate_tax_rate, other_rate)
    log.debug("calculation.start", scenario="purchaseAndTargetMargin",
              purchase_price=str(purchase_price), target_margin=str(target_margin))
    try:
        result = calculate_with_target_margin(purchase_price, target_margin, vat_rate,
                                              corporate_tax_rate, other_rate)
    except PricingError as exc:
        _fail(exc)
    _emit("Prix d'achat + marge cible", result, as_json)


@cli.command()
@click.argument("batch_file", required=False,
                type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--plain", is_flag=True, help="Plain columnar text instead of tables")
def report(batch_file: Path | None, plain: bool) -> None:
    """Run a JSON batch of named scenarios, or the reference scenarios."""
    if batch_file is None:
        try:
            entries = default_scenarios()
        except ConfigError as exc:
            _config_fail(exc)
    else:
        try:
            entries = load_batch(batch_file)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as exc:
            console.print(f"[red]Invalid batch file {batch_file}:[/red] {escape(str(exc))}")
            raise SystemExit(1)
    log.debug("batch.start", entries=len(entries), source=str(batch_file or "defaults"))

    try:
        results = run_batch(entries)
    except PricingError as exc:
        _fail(exc)

    for name, result in results:
        if plain:
            click.echo(plain_report(name, result))
            click.echo()
        else:
            console.print(results_table(name, result))
            console.print()


@cli.command()
def rates() -> None:
    """Show reference French VAT and corporate tax rates."""
    table = Table(title="Taux de référence")
    table.add_column("Impôt", style="bold", width=8)
    table.add_column("Taux", justify="right", width=6)
    table.add_column("Libellé", width=30)

    for rate, label in VAT_RATE_LABELS.items():
        table.add_row("TVA", str(rate), label)
    table.add_section()
    for rate, label in CORPORATE_TAX_RATE_LABELS.items():
        table.add_row("IS", str(rate), label)

    console.print(table)
