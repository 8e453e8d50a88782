"""Application service: the storefront session.

The session is the single owner of the catalog, the active criteria and
the cart.  Every mutation runs under one lock and finishes with an
explicit ``_recompute()``, so a caller never observes a projection built
from half-applied criteria.  Cart actions are independent of the
projection: a product can be added whether or not it is currently
visible.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from dataclasses import replace

from storefront.application.dto import (
    CartActions,
    CartLineDTO,
    CriteriaDTO,
    ProductCardDTO,
    StorefrontView,
)
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.cart import Cart, CartLine
from storefront.domain.model.criteria import FilterCriteria, SortOrder
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.service.catalog_projection import distinct_categories, project

logger = logging.getLogger(__name__)


class StorefrontSession:

    def __init__(
        self,
        catalog: Sequence[Product] = (),
        cart: Cart | None = None,
    ) -> None:
        self._lock = threading.RLock()
        self._catalog: list[Product] = list(catalog)
        self._by_id: dict[str, Product] = {p.id: p for p in self._catalog}
        self._criteria = FilterCriteria.cleared()
        self._cart = cart if cart is not None else Cart()
        self._visible: list[Product] = []
        self._categories: list[str] = []
        self._recompute()

    # --- Catalog --------------------------------------------------------------

    def load_catalog(self, products: Sequence[Product]) -> None:
        """Replace the catalog.  Cart lines keep the snapshots they captured."""
        with self._lock:
            self._catalog = list(products)
            self._by_id = {p.id: p for p in self._catalog}
            logger.info("Catalog replaced with %d products", len(self._catalog))
            self._recompute()

    @property
    def catalog(self) -> list[Product]:
        return list(self._catalog)

    # --- Criteria -------------------------------------------------------------

    @property
    def criteria(self) -> FilterCriteria:
        return self._criteria

    def set_search_term(self, search_term: str) -> None:
        self._apply_criteria(self._criteria.with_search_term(search_term))

    def set_category(self, category: str | None) -> None:
        self._apply_criteria(self._criteria.with_category(category))

    def set_sort_order(self, sort_order: SortOrder) -> None:
        self._apply_criteria(self._criteria.with_sort_order(sort_order))

    def clear_all_filters(self) -> None:
        """Reset search, category and sort in a single step."""
        self._apply_criteria(FilterCriteria.cleared())

    def _apply_criteria(self, criteria: FilterCriteria) -> None:
        with self._lock:
            self._criteria = criteria
            self._recompute()

    # --- Cart -----------------------------------------------------------------

    # Read access returns copies; the Cart itself only changes under the lock.

    @property
    def enforce_stock(self) -> bool:
        return self._cart.enforce_stock

    def quantity_of(self, product_id: str) -> int:
        with self._lock:
            return self._cart.quantity_of(product_id)

    def cart_line(self, product_id: str) -> CartLine | None:
        with self._lock:
            line = self._cart.get_line(product_id)
            return replace(line) if line is not None else None

    def cart_lines(self) -> list[CartLine]:
        with self._lock:
            return [replace(line) for line in self._cart.lines]

    def total_item_count(self) -> int:
        with self._lock:
            return self._cart.total_item_count()

    def total_price(self) -> Money:
        with self._lock:
            return self._cart.total_price()

    def add_to_cart(self, product_id: str) -> None:
        """Add one unit of a catalog product.

        Raises EntityNotFoundError if *product_id* is not in the catalog.
        """
        with self._lock:
            product = self._by_id.get(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
            self._cart.add(product)

    def remove_from_cart(self, product_id: str) -> None:
        with self._lock:
            self._cart.remove(product_id)

    def update_quantity(self, product_id: str, new_quantity: int) -> None:
        with self._lock:
            self._cart.update_quantity(product_id, new_quantity)

    def actions(self) -> CartActions:
        """Bound cart mutators for the presentation layer."""
        return CartActions(
            add_to_cart=self.add_to_cart,
            remove_from_cart=self.remove_from_cart,
            update_quantity=self.update_quantity,
        )

    # --- View -----------------------------------------------------------------

    @property
    def visible_products(self) -> list[Product]:
        return list(self._visible)

    @property
    def categories(self) -> list[str]:
        return list(self._categories)

    def view(self) -> StorefrontView:
        with self._lock:
            return StorefrontView(
                products=[self._to_card(p) for p in self._visible],
                categories=list(self._categories),
                criteria=CriteriaDTO(
                    search_term=self._criteria.search_term,
                    category=self._criteria.category,
                    sort_order=self._criteria.sort_order.value,
                ),
                cart_lines=[self._to_line_dto(line) for line in self._cart.lines],
                total_items=self._cart.total_item_count(),
                total_price=str(self._cart.total_price()),
            )

    def _recompute(self) -> None:
        self._visible = project(self._catalog, self._criteria)
        self._categories = distinct_categories(self._catalog)
        logger.debug(
            "Projection recomputed: %d of %d products visible",
            len(self._visible),
            len(self._catalog),
        )

    # --- Mapping --------------------------------------------------------------

    def _to_card(self, product: Product) -> ProductCardDTO:
        quantity = self._cart.quantity_of(product.id)
        return ProductCardDTO(
            id=product.id,
            title=product.title,
            category=product.category,
            price=str(product.price),
            image=product.image,
            in_stock=product.in_stock,
            stock_label="In Stock" if product.in_stock else "Out of Stock",
            cart_quantity=quantity,
            button_label=f"Added ({quantity})" if quantity else "Add to Cart",
        )

    @staticmethod
    def _to_line_dto(line: CartLine) -> CartLineDTO:
        return CartLineDTO(
            id=line.product_id,
            title=line.product.title,
            image=line.product.image,
            price=str(line.product.price),
            quantity=line.quantity,
            line_total=str(line.line_total),
            can_decrement=line.can_decrement,
            can_increment=line.can_increment,
        )
