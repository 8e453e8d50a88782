"""In-memory fakes and builders for testing.

The fake repositories implement the same abstract interface as the JSON
and HTTP repositories but never touch the filesystem or network.
"""

from __future__ import annotations

from storefront.domain.exceptions import CatalogError, CatalogUnavailableError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.catalog_repository import CatalogRepository


def make_product(
    id: str = "1",
    title: str = "Widget",
    category: str = "misc",
    price: str = "10.00",
    stock: int = 5,
    image: str = "",
) -> Product:
    return Product(
        id=id,
        title=title,
        category=category,
        price=Money.of(price),
        image=image,
        stock=stock,
    )


def demo_catalog() -> list[Product]:
    """The two-product catalog used by the end-to-end scenarios."""
    return [
        make_product("1", "Red Shirt", "apparel", "20", stock=3),
        make_product("2", "Blue Mug", "home", "8", stock=0),
    ]


class FakeCatalogRepository(CatalogRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._products = list(products or [])
        self.load_calls = 0

    def load(self) -> list[Product]:
        self.load_calls += 1
        return list(self._products)


class FailingCatalogRepository(CatalogRepository):

    def __init__(self, error: CatalogError | None = None) -> None:
        self._error = error or CatalogUnavailableError("Catalog request failed with HTTP 503")

    def load(self) -> list[Product]:
        raise self._error
