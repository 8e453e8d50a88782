"""Domain service: Catalog Projection.

Derives the list of products to display from the full catalog and the
active criteria.  Both functions are pure: the same inputs always give
the same output and the catalog is never modified, so the projection can
be recomputed after every criteria change.

Stages run in a fixed order:
  1. search: case-insensitive substring match on the title
  2. category: exact, case-sensitive equality
  3. sort: stable sort by price, either direction
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from storefront.domain.model.criteria import FilterCriteria, SortOrder
from storefront.domain.model.product import Product


def project(catalog: Sequence[Product], criteria: FilterCriteria) -> list[Product]:
    """Return the visible products for *criteria*, in display order."""
    visible = list(catalog)

    if criteria.search_term:
        needle = criteria.search_term.casefold()
        visible = [p for p in visible if needle in p.title.casefold()]

    if criteria.category:
        visible = [p for p in visible if p.category == criteria.category]

    # sorted() is stable in both directions, so equal prices keep catalog order
    if criteria.sort_order is SortOrder.ASCENDING_BY_PRICE:
        visible = sorted(visible, key=_price_key)
    elif criteria.sort_order is SortOrder.DESCENDING_BY_PRICE:
        visible = sorted(visible, key=_price_key, reverse=True)

    return visible


def distinct_categories(catalog: Iterable[Product]) -> list[str]:
    """Categories of the full catalog, deduplicated, in first-occurrence order."""
    return list(dict.fromkeys(p.category for p in catalog))


def _price_key(product: Product):
    return product.price.amount
