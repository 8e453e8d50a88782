"""Product, an immutable catalog entry.

Products are created once by the catalog loader and never mutated.
Because the dataclass is frozen, holding a reference to a Product is the
same as holding a snapshot of it: a reloaded catalog produces new
instances and never changes the ones already captured in a cart.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product as delivered by the catalog source."""

    id: str
    title: str
    category: str
    price: Money
    image: str = ""
    stock: int = 0

    @property
    def in_stock(self) -> bool:
        return self.stock > 0
