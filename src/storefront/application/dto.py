"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry the storefront view from the application layer to the
presentation layer without exposing domain internals.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from storefront.domain.model.product import Product

NO_PRODUCTS_MESSAGE = "No products found"
EMPTY_CART_MESSAGE = "Your cart is empty"


@dataclass(frozen=True)
class ProductCardDTO:
    """Output: one product as listed, with its add-to-cart state."""

    id: str
    title: str
    category: str
    price: str  # formatted, e.g. "$20.00"
    image: str
    in_stock: bool
    stock_label: str  # "In Stock" / "Out of Stock"
    cart_quantity: int
    button_label: str  # "Add to Cart" / "Added (2)"

    @property
    def can_add(self) -> bool:
        return self.in_stock


@dataclass(frozen=True)
class CartLineDTO:
    """Output: one cart line with the state of its quantity controls."""

    id: str
    title: str
    image: str
    price: str
    quantity: int
    line_total: str
    can_decrement: bool
    can_increment: bool


@dataclass(frozen=True)
class CriteriaDTO:
    search_term: str
    category: str
    sort_order: str


@dataclass(frozen=True)
class StorefrontView:
    """Output: everything the presentation layer renders."""

    products: list[ProductCardDTO]
    categories: list[str]
    criteria: CriteriaDTO
    cart_lines: list[CartLineDTO]
    total_items: int
    total_price: str

    @property
    def product_count(self) -> int:
        return len(self.products)

    @property
    def products_message(self) -> str | None:
        return NO_PRODUCTS_MESSAGE if not self.products else None

    @property
    def cart_message(self) -> str | None:
        return EMPTY_CART_MESSAGE if not self.cart_lines else None


@dataclass(frozen=True)
class CartActions:
    """The three cart mutators, handed explicitly to whatever renders items."""

    add_to_cart: Callable[[str], None]
    remove_from_cart: Callable[[str], None]
    update_quantity: Callable[[str, int], None]

    def increment(self, line: CartLineDTO) -> None:
        self.update_quantity(line.id, line.quantity + 1)

    def decrement(self, line: CartLineDTO) -> None:
        self.update_quantity(line.id, line.quantity - 1)


@dataclass(frozen=True)
class CatalogLoadResult:
    """Output of a catalog load: the products, or an empty list and the reason."""

    products: list[Product]
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
