"""Interactive shopping session.

Reads one command per line, so a session can also be piped in:

    printf 'add 1\\nadd 1\\ncart\\n' | storefront shop
"""

from __future__ import annotations

import shlex

import click

from storefront.application.dto import CartLineDTO
from storefront.application.storefront_session import StorefrontSession
from storefront.domain.exceptions import DomainException
from storefront.domain.model.criteria import SortOrder
from storefront.infrastructure.cli.rendering import (
    echo_cart,
    echo_categories,
    echo_criteria,
    echo_products,
)
from storefront.infrastructure.cli.session_loader import load_session

HELP_TEXT = """\
Commands:
  list                 show the visible products
  categories           show the categories
  search <text>        filter titles (no text clears the search)
  category <name>      filter by category (no name clears it)
  sort none|asc|desc   order by price
  clear                clear all filters
  add <id>             add one unit to the cart
  remove <id>          remove a product from the cart
  qty <id> <n>         set a quantity
  inc <id> / dec <id>  change a quantity by one
  cart                 show the cart
  help                 show this text
  quit                 leave"""


class ShopConsole:
    """Dispatches console commands to the session.

    Cart changes go through the session's ``CartActions`` handle only.
    """

    def __init__(self, session: StorefrontSession) -> None:
        self._session = session
        self._actions = session.actions()
        self._commands = {
            "list": self._list,
            "categories": self._categories,
            "search": self._search,
            "category": self._category,
            "sort": self._sort,
            "clear": self._clear,
            "add": self._add,
            "remove": self._remove,
            "qty": self._qty,
            "inc": self._inc,
            "dec": self._dec,
            "cart": self._cart,
            "help": self._help,
        }

    def execute(self, line: str) -> bool:
        """Run one command line. Returns False when the session should end."""
        try:
            words = shlex.split(line)
        except ValueError as exc:
            click.echo(f"Error: {exc}", err=True)
            return True
        if not words:
            return True

        name, args = words[0].lower(), words[1:]
        if name in ("quit", "exit"):
            return False

        command = self._commands.get(name)
        if command is None:
            click.echo(f"Unknown command '{name}'. Type 'help' for commands.", err=True)
            return True

        try:
            command(args)
        except DomainException as exc:
            click.echo(f"Error: {exc}", err=True)
        except click.UsageError as exc:
            click.echo(f"Error: {exc.message}", err=True)
        return True

    # --- Browsing -------------------------------------------------------------

    def _list(self, args: list[str]) -> None:
        echo_products(self._session.view())

    def _categories(self, args: list[str]) -> None:
        echo_categories(self._session.view())

    def _search(self, args: list[str]) -> None:
        self._session.set_search_term(" ".join(args))
        self._after_criteria_change()

    def _category(self, args: list[str]) -> None:
        self._session.set_category(" ".join(args))
        self._after_criteria_change()

    def _sort(self, args: list[str]) -> None:
        self._session.set_sort_order(SortOrder.parse(args[0] if args else "none"))
        self._after_criteria_change()

    def _clear(self, args: list[str]) -> None:
        self._session.clear_all_filters()
        self._after_criteria_change()

    def _after_criteria_change(self) -> None:
        view = self._session.view()
        echo_criteria(view)
        echo_products(view)

    # --- Cart -----------------------------------------------------------------

    def _add(self, args: list[str]) -> None:
        product_id = _one_arg(args, "add <id>")
        before = self._session.quantity_of(product_id)
        self._actions.add_to_cart(product_id)
        after = self._session.quantity_of(product_id)
        if after == before:
            click.echo(f"Product {product_id} not added (out of stock or at stock limit).")
        else:
            click.echo(f"Product {product_id} in cart: {after}")

    def _remove(self, args: list[str]) -> None:
        product_id = _one_arg(args, "remove <id>")
        self._actions.remove_from_cart(product_id)
        click.echo(f"Product {product_id} removed.")

    def _qty(self, args: list[str]) -> None:
        if len(args) != 2:
            raise click.UsageError("Usage: qty <id> <n>")
        product_id, raw = args
        try:
            quantity = int(raw)
        except ValueError:
            raise click.UsageError(f"Invalid quantity '{raw}'.") from None
        self._actions.update_quantity(product_id, quantity)
        self._report_quantity(product_id)

    def _inc(self, args: list[str]) -> None:
        line = self._line(_one_arg(args, "inc <id>"))
        if not line.can_increment:
            click.echo(f"Product {line.id} is at its stock limit.")
            return
        self._actions.increment(line)
        self._report_quantity(line.id)

    def _dec(self, args: list[str]) -> None:
        line = self._line(_one_arg(args, "dec <id>"))
        if not line.can_decrement:
            click.echo(f"Product {line.id} is at quantity 1; use 'remove' instead.")
            return
        self._actions.decrement(line)
        self._report_quantity(line.id)

    def _cart(self, args: list[str]) -> None:
        echo_cart(self._session.view())

    def _help(self, args: list[str]) -> None:
        click.echo(HELP_TEXT)

    def _line(self, product_id: str) -> CartLineDTO:
        for line in self._session.view().cart_lines:
            if line.id == product_id:
                return line
        raise click.UsageError(f"Product {product_id} is not in the cart.")

    def _report_quantity(self, product_id: str) -> None:
        quantity = self._session.quantity_of(product_id)
        if quantity:
            click.echo(f"Product {product_id} in cart: {quantity}")
        else:
            click.echo(f"Product {product_id} is not in the cart.")


def _one_arg(args: list[str], usage: str) -> str:
    if len(args) != 1:
        raise click.UsageError(f"Usage: {usage}")
    return args[0]


@click.command("shop")
@click.pass_obj
def shop(settings) -> None:
    """Start an interactive shopping session (cart is not saved)."""
    session = load_session(settings)
    console = ShopConsole(session)
    click.echo(f"{len(session.catalog)} products loaded. Type 'help' for commands.")

    while True:
        try:
            line = click.prompt("storefront", default="", show_default=False, prompt_suffix="> ")
        except click.Abort:
            break
        if not console.execute(line):
            break

    view = session.view()
    click.echo()
    click.echo(f"Leaving with {view.total_items} item(s), total {view.total_price}.")
