#!/usr/bin/env python3
"""
Taxonomy CLI - Category Browsing, Search and Resolution

Command-line access to the medical expense taxonomy for checking how an
expense would be classified.
"""

import json

import click

from ..classification.disclosure import ConditionalDisclosureFlow, PrescriptionAnswer
from ..classification.resolver import CategoryResolver
from ..search.engine import SearchEngine
from ..taxonomy.store import TaxonomyStore


def _max_results(ctx: click.Context) -> int:
    config = (ctx.obj or {}).get("config")
    return config.search.max_results if config else 10


@click.command()
@click.option("--category", "category_label", help="Show subcategories of one category")
def categories(category_label: str | None) -> None:
    """
    List medical expense categories in browse order.

    Examples:
      medexpense categories
      medexpense categories --category "Dental & Vision"
    """
    store = TaxonomyStore.default()
    resolver = CategoryResolver(store)

    if category_label:
        category = store.find_category_by_label(category_label)
        if category is None:
            raise click.ClickException(f"Unknown category: {category_label}")

        click.echo(f"{category.label} [{category.irs_reference_tag}]")
        click.echo(f"  {category.description}")
        for sub in category.subcategories:
            click.echo(f"\n  {sub.label} [{sub.irs_reference_tag}]")
            click.echo(f"    {sub.description}")
            if sub.examples:
                suffix = "..." if len(sub.examples) > 2 else ""
                click.echo(f"    Examples: {', '.join(sub.examples[:2])}{suffix}")
        return

    for label in resolver.all_category_labels():
        count = len(resolver.subcategory_labels_for(label))
        click.echo(f"{label} ({count} types)")


@click.command()
@click.argument("query")
@click.option("--limit", type=int, default=None, help="Maximum number of suggestions")
@click.option("--json", "as_json", is_flag=True, help="Output results as JSON")
@click.pass_context
def search(ctx: click.Context, query: str, limit: int | None, as_json: bool) -> None:
    """
    Search categories for an expense description.

    Example:
      medexpense search "hearing aid batteries"
    """
    if limit is not None and limit <= 0:
        raise click.BadParameter("must be positive", param_hint="--limit")

    engine = SearchEngine(TaxonomyStore.default(), max_results=limit or _max_results(ctx))
    results = engine.search(query)

    if as_json:
        click.echo(json.dumps([result.to_dict() for result in results], indent=2))
        return

    if not results:
        click.echo("No matches found. Try browsing categories with: medexpense categories")
        return

    for result in results:
        click.echo(f"{result.relevance:>3}  {result.display_label}")
        click.echo(f"     {result.breadcrumb}")
        click.echo(f"     {result.description}")


@click.command()
@click.argument("category_label")
@click.argument("subcategory_label", required=False)
@click.option(
    "--interactive/--non-interactive",
    default=False,
    help="Ask the doctor-prescription question when the category requires it",
)
def resolve(category_label: str, subcategory_label: str | None, interactive: bool) -> None:
    """
    Show the IRS reference tag for a category selection.

    Examples:
      medexpense resolve "Dental & Vision" "Dental Care"
      medexpense resolve "Doctor-Prescribed Items" "Massage Therapy" --interactive
    """
    resolver = CategoryResolver(TaxonomyStore.default())
    resolution = resolver.resolve(category_label, subcategory_label)

    if resolution is None:
        raise click.ClickException(f"Not found: {category_label}. Pick a category from: medexpense categories")

    click.echo(f"IRS Reference Tag: {resolution.irs_reference_tag}")
    click.echo(f"Description: {resolution.description}")

    if not resolution.requires_prescription:
        return

    click.echo("\nThis expense is deductible only if prescribed by a doctor.")
    if not interactive:
        return

    answers: list[PrescriptionAnswer] = []
    flow = ConditionalDisclosureFlow(answers.append)
    flow.select(resolution)

    choice = click.prompt(
        "Did a doctor prescribe this for a specific medical condition?",
        type=click.Choice(["yes", "no", "unsure"]),
    )
    if choice == "yes":
        note = click.prompt("Doctor's note or prescription details (optional)", default="", show_default=False)
        flow.answer_prescribed(note)
    elif choice == "no":
        flow.answer_not_prescribed()
    else:
        flow.answer_unsure()

    answer = answers[0]
    status = {True: "confirmed", False: "not prescribed", None: "unsure"}[answer.prescribed]
    click.echo(f"Prescription: {status}")
    if answer.note:
        click.echo(f"Note: {answer.note}")
