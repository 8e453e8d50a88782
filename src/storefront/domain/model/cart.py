"""Cart aggregate: the multiset of chosen products with quantities.

The Cart maps product id to a CartLine.  Lines keep the insertion order
of their first add, which is the order they are displayed in.

Rejected actions (stock-out product, quantity below one, unknown id,
quantity above the snapshotted stock when stock is enforced) leave the
cart unchanged and raise nothing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


@dataclass
class CartLine:
    """One product's entry in the cart.

    ``product`` is the snapshot captured at add-time; ``quantity`` is the
    only mutable field.
    """

    product: Product
    quantity: int = 1

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity

    @property
    def can_decrement(self) -> bool:
        return self.quantity > 1

    @property
    def can_increment(self) -> bool:
        return self.quantity < self.product.stock


class Cart:
    """Aggregate root for the shopping cart.

    Invariants (with ``enforce_stock=True``, the default):
    - every line has ``1 <= quantity <= product.stock``
    - a product with no stock never enters the cart

    With ``enforce_stock=False`` the upper bound is left to the caller:
    repeated adds and ``update_quantity`` may push a line past its stock.
    The lower bound and the stock-out rule hold in both modes.
    """

    def __init__(self, enforce_stock: bool = True) -> None:
        self.enforce_stock = enforce_stock
        self._lines: dict[str, CartLine] = {}

    # --- Mutations ------------------------------------------------------------

    def add(self, product: Product) -> None:
        """Add one unit of *product*, creating its line on first add."""
        if product.stock <= 0:
            logger.debug("Ignoring add of out-of-stock product %s", product.id)
            return

        line = self._lines.get(product.id)
        if line is None:
            self._lines[product.id] = CartLine(product=product, quantity=1)
            logger.debug("Added product %s to cart", product.id)
            return

        if self.enforce_stock and line.quantity >= line.product.stock:
            logger.debug(
                "Ignoring add of product %s: quantity already at stock (%d)",
                product.id,
                line.product.stock,
            )
            return
        line.quantity += 1
        logger.debug("Product %s quantity now %d", product.id, line.quantity)

    def remove(self, product_id: str) -> None:
        """Delete the line for *product_id*; absent ids are ignored."""
        if self._lines.pop(product_id, None) is not None:
            logger.debug("Removed product %s from cart", product_id)

    def update_quantity(self, product_id: str, new_quantity: int) -> None:
        """Set a line's quantity exactly.

        Quantities below one are rejected; a line only disappears through
        ``remove()``.
        """
        if new_quantity < 1:
            logger.debug(
                "Ignoring quantity %d for product %s: below 1", new_quantity, product_id
            )
            return

        line = self._lines.get(product_id)
        if line is None:
            return

        if self.enforce_stock and new_quantity > line.product.stock:
            logger.debug(
                "Ignoring quantity %d for product %s: stock is %d",
                new_quantity,
                product_id,
                line.product.stock,
            )
            return
        line.quantity = new_quantity

    # --- Derivations ----------------------------------------------------------

    def total_item_count(self) -> int:
        return sum(line.quantity for line in self._lines.values())

    def total_price(self) -> Money:
        """Sum of price x quantity, computed fresh and rounded to cents."""
        total = Money.zero()
        for line in self._lines.values():
            total = total + line.line_total
        return total.rounded()

    @property
    def lines(self) -> list[CartLine]:
        return list(self._lines.values())

    def get_line(self, product_id: str) -> CartLine | None:
        return self._lines.get(product_id)

    def quantity_of(self, product_id: str) -> int:
        line = self._lines.get(product_id)
        return line.quantity if line is not None else 0

    def __len__(self) -> int:
        return len(self._lines)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._lines
