"""CLI commands for browsing the catalog."""

from __future__ import annotations

import click

from storefront.domain.exceptions import DomainException
from storefront.domain.model.criteria import SortOrder
from storefront.infrastructure.cli.rendering import echo_categories, echo_products
from storefront.infrastructure.cli.session_loader import load_session


@click.command("list")
@click.option("--search", default="", help="Case-insensitive text to find in titles.")
@click.option("--category", default="", help="Exact category to show.")
@click.option(
    "--sort",
    "sort",
    default="none",
    help="Price order: none, asc (low to high) or desc (high to low).",
)
@click.pass_obj
def catalog_list(settings, search: str, category: str, sort: str) -> None:
    """List products, filtered and sorted."""
    try:
        sort_order = SortOrder.parse(sort)
    except DomainException as exc:
        raise click.BadParameter(str(exc), param_hint="--sort")

    session = load_session(settings)
    session.set_search_term(search)
    session.set_category(category)
    session.set_sort_order(sort_order)
    echo_products(session.view())


@click.command("categories")
@click.pass_obj
def catalog_categories(settings) -> None:
    """List the distinct categories in the catalog."""
    session = load_session(settings)
    echo_categories(session.view())
