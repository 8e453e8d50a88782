"""Filter and sort criteria for the catalog projection."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from storefront.domain.exceptions import ValidationError


class SortOrder(Enum):
    NONE = "none"
    ASCENDING_BY_PRICE = "lowToHigh"
    DESCENDING_BY_PRICE = "highToLow"

    @staticmethod
    def parse(raw: str | None) -> SortOrder:
        """Accept the selector value (``lowToHigh``) or a short alias (``asc``)."""
        if raw is None or not raw.strip():
            return SortOrder.NONE
        key = raw.strip()
        for order in SortOrder:
            if order.value == key:
                return order
        try:
            return _SORT_ALIASES[key.lower()]
        except KeyError:
            raise ValidationError(
                f"Unknown sort order '{raw}'. Expected one of: none, asc, desc"
            ) from None


_SORT_ALIASES = {
    "none": SortOrder.NONE,
    "asc": SortOrder.ASCENDING_BY_PRICE,
    "ascending": SortOrder.ASCENDING_BY_PRICE,
    "lowtohigh": SortOrder.ASCENDING_BY_PRICE,
    "desc": SortOrder.DESCENDING_BY_PRICE,
    "descending": SortOrder.DESCENDING_BY_PRICE,
    "hightolow": SortOrder.DESCENDING_BY_PRICE,
}


@dataclass(frozen=True)
class FilterCriteria:
    """Search text, category choice and sort order, passed by value.

    An empty ``search_term`` or ``category`` means "no filter".
    """

    search_term: str = ""
    category: str = ""
    sort_order: SortOrder = SortOrder.NONE

    @staticmethod
    def cleared() -> FilterCriteria:
        return FilterCriteria()

    @property
    def is_default(self) -> bool:
        return self == FilterCriteria.cleared()

    def with_search_term(self, search_term: str) -> FilterCriteria:
        return replace(self, search_term=search_term or "")

    def with_category(self, category: str | None) -> FilterCriteria:
        return replace(self, category=category or "")

    def with_sort_order(self, sort_order: SortOrder) -> FilterCriteria:
        return replace(self, sort_order=sort_order)
