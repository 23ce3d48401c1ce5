#!/usr/bin/env python3
"""
Deductions CLI - Schedule A Medical Expense Threshold

Computes the 7.5%-of-AGI threshold and builds Schedule A summaries from an
expense export.
"""

import json
from pathlib import Path

import click

from ..classification.resolver import CategoryResolver
from ..core.currency import format_decimal_dollars
from ..core.dates import FinancialDate
from ..core.models import ExpenseRecord
from ..deductions.calculator import DeductionCalculator
from ..deductions.schedule_a import ScheduleASummary, available_tax_years
from ..taxonomy.store import TaxonomyStore


def _calculator(ctx: click.Context) -> DeductionCalculator:
    config = (ctx.obj or {}).get("config")
    if config is None:
        return DeductionCalculator()
    return DeductionCalculator(rate=config.deductions.agi_threshold_rate)


@click.command()
@click.option("--agi", required=True, help="Adjusted gross income in dollars")
@click.option("--total", default="0", help="Total medical expenses in dollars")
@click.pass_context
def threshold(ctx: click.Context, agi: str, total: str) -> None:
    """
    Show the AGI threshold and the deductible portion of medical expenses.

    Example:
      medexpense threshold --agi 100000 --total 10000
    """
    calculator = _calculator(ctx)
    try:
        summary = calculator.summarize(total, agi)
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    rate_percent = f"{(calculator.rate * 100).normalize():f}"
    click.echo(f"AGI threshold ({rate_percent}%): {format_decimal_dollars(summary.threshold)}")
    click.echo(f"Medical expenses tracked: {format_decimal_dollars(summary.total_medical_expenses)}")
    click.echo(f"Progress: {round(summary.progress_percent)}%")

    if summary.threshold_reached:
        click.echo("Threshold reached!")
    else:
        click.echo(f"{format_decimal_dollars(summary.remaining_to_threshold)} to reach threshold")

    click.echo(f"Potential deduction: {format_decimal_dollars(summary.deductible)}")


@click.command("schedule-a")
@click.argument("expenses_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--agi", required=True, help="Adjusted gross income in dollars")
@click.option("--year", type=int, default=None, help="Tax year (default: most recent year with expenses)")
@click.option("--output", "output_file", type=click.Path(dir_okay=False, path_type=Path), help="Write CSV here")
@click.pass_context
def schedule_a(ctx: click.Context, expenses_file: Path, agi: str, year: int | None, output_file: Path | None) -> None:
    """
    Summarize medical expenses for Schedule A from a JSON expense export.

    The export is a JSON list of expense records with at least id, date,
    amount (dollars) and category.

    Examples:
      medexpense schedule-a expenses.json --agi 85000 --year 2024
      medexpense schedule-a expenses.json --agi 85000 --output schedule_a_2024.csv
    """
    try:
        with open(expenses_file) as f:
            raw = json.load(f)
        expenses = [ExpenseRecord.from_dict(record) for record in raw]
    except (json.JSONDecodeError, KeyError, TypeError, ValueError, AttributeError) as e:
        raise click.ClickException(f"Could not read expenses from {expenses_file}: {e}") from e

    if year is None:
        years = available_tax_years(expenses)
        year = years[0] if years else FinancialDate.today().tax_year

    resolver = CategoryResolver(TaxonomyStore.default())
    try:
        summary = ScheduleASummary.build(expenses, agi, year, resolver, calculator=_calculator(ctx))
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    for line in summary.header_lines()[:-2]:
        click.echo(line)

    if not summary.expenses:
        click.echo(f"No medical or dental expenses found for {year}.")
    else:
        click.echo("By category:")
        for item in summary.breakdown:
            click.echo(f"  {item.category}: {item.count} expense(s), {item.total}")

    if output_file:
        summary.to_csv(output_file)
        click.echo(f"\n✅ Schedule A export written: {output_file}")
