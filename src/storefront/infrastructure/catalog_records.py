"""Mapping of raw catalog records (decoded JSON) to Product.

Normalizing upstream data is the loader's job: the core assumes every
Product it sees has an id, a non-negative price and a non-negative stock.
Anything else is rejected here with CatalogDataError.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from storefront.domain.exceptions import CatalogDataError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money

REQUIRED_FIELDS = ("id", "title", "price")


def product_from_record(raw: Any, default_stock: int = 0) -> Product:
    """Build a Product from one decoded record.

    ``category`` and ``image`` default to empty strings.  Sources that
    carry no stock figure (the public fake-store API does not) get
    *default_stock*.
    """
    if not isinstance(raw, dict):
        raise CatalogDataError(f"Catalog record must be an object, got {type(raw).__name__}")

    missing = [name for name in REQUIRED_FIELDS if raw.get(name) in (None, "")]
    if missing:
        raise CatalogDataError(
            f"Catalog record {raw.get('id', '?')!r} is missing: {', '.join(missing)}"
        )

    product_id = str(raw["id"])
    price = _parse_price(product_id, raw["price"])
    stock = _parse_stock(product_id, raw.get("stock", default_stock))

    return Product(
        id=product_id,
        title=str(raw["title"]),
        category=str(raw.get("category") or ""),
        price=Money(price),
        image=str(raw.get("image") or ""),
        stock=stock,
    )


def products_from_records(records: Any, default_stock: int = 0) -> list[Product]:
    """Map a decoded JSON array to Products, enforcing unique ids."""
    if not isinstance(records, list):
        raise CatalogDataError(
            f"Catalog must be a JSON array, got {type(records).__name__}"
        )

    products: list[Product] = []
    seen: set[str] = set()
    for raw in records:
        product = product_from_record(raw, default_stock=default_stock)
        if product.id in seen:
            raise CatalogDataError(f"Duplicate product id {product.id!r} in catalog")
        seen.add(product.id)
        products.append(product)
    return products


# --- Field parsers -----------------------------------------------------------


def _parse_price(product_id: str, value: Any) -> Decimal:
    if isinstance(value, bool):
        raise CatalogDataError(f"Product {product_id!r} has an invalid price: {value!r}")
    try:
        price = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise CatalogDataError(
            f"Product {product_id!r} has an invalid price: {value!r}"
        ) from None
    if not price.is_finite() or price < 0:
        raise CatalogDataError(f"Product {product_id!r} has an invalid price: {value!r}")
    return price


def _parse_stock(product_id: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise CatalogDataError(f"Product {product_id!r} has an invalid stock: {value!r}")
    try:
        stock = int(value)
    except ValueError:
        raise CatalogDataError(
            f"Product {product_id!r} has an invalid stock: {value!r}"
        ) from None
    if stock < 0:
        raise CatalogDataError(f"Product {product_id!r} has negative stock: {stock}")
    return stock
