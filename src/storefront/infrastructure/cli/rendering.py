"""Plain-text rendering of the storefront view for the terminal."""

from __future__ import annotations

import click

from storefront.application.dto import StorefrontView

TITLE_WIDTH = 32


def _clip(text: str, width: int) -> str:
    return text if len(text) <= width else text[: width - 3] + "..."


def echo_products(view: StorefrontView) -> None:
    click.echo(f"Products ({view.product_count})")
    if view.products_message:
        click.echo(view.products_message)
        return

    click.echo(
        f"{'ID':<6} {'Title':<{TITLE_WIDTH}} {'Category':<18} {'Price':>10}  {'Status':<12} {'Cart':<10}"
    )
    click.echo("-" * (TITLE_WIDTH + 62))
    for card in view.products:
        cart = card.button_label if card.can_add else "-"
        click.echo(
            f"{card.id:<6} {_clip(card.title, TITLE_WIDTH):<{TITLE_WIDTH}} "
            f"{_clip(card.category, 18):<18} {card.price:>10}  {card.stock_label:<12} {cart:<10}"
        )


def echo_categories(view: StorefrontView) -> None:
    if not view.categories:
        click.echo("No categories found.")
        return
    for category in view.categories:
        click.echo(category)


def echo_cart(view: StorefrontView) -> None:
    click.echo("Shopping Cart")
    if view.cart_message:
        click.echo(view.cart_message)
        return

    click.echo(f"Total Items: {view.total_items}")
    click.echo(f"Total Price: {view.total_price}")
    click.echo()
    click.echo(f"  {'ID':<6} {'Title':<{TITLE_WIDTH}} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-' * (TITLE_WIDTH + 35)}")
    for line in view.cart_lines:
        click.echo(
            f"  {line.id:<6} {_clip(line.title, TITLE_WIDTH):<{TITLE_WIDTH}} "
            f"{line.quantity:>5} {line.price:>10} {line.line_total:>10}"
        )


def echo_criteria(view: StorefrontView) -> None:
    c = view.criteria
    click.echo(
        f"search={c.search_term!r} category={c.category!r} sort={c.sort_order}"
    )
