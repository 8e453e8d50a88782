"""Abstract source of the product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON file, HTTP API)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class CatalogRepository(ABC):

    @abstractmethod
    def load(self) -> list[Product]:
        """Return the full catalog in source order.

        Raises CatalogUnavailableError if the source cannot be reached and
        CatalogDataError if a record is malformed.
        """
