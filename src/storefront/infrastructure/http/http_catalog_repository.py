"""HTTP implementation of CatalogRepository.

Fetches the whole catalog in one GET.  The default endpoint is the
public fake-store API, which returns a JSON array of products without
a stock figure; ``default_stock`` fills it in.
"""

from __future__ import annotations

import logging

import httpx

from storefront.domain.exceptions import CatalogDataError, CatalogUnavailableError
from storefront.domain.model.product import Product
from storefront.domain.repository.catalog_repository import CatalogRepository
from storefront.infrastructure.catalog_records import products_from_records

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_URL = "https://fakestoreapi.com/products"


class HttpCatalogRepository(CatalogRepository):

    def __init__(
        self,
        url: str = DEFAULT_CATALOG_URL,
        timeout: float = 10.0,
        default_stock: int = 0,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self._default_stock = default_stock

    def load(self) -> list[Product]:
        response = self._get()
        try:
            payload = response.json()
        except ValueError as exc:
            raise CatalogDataError(f"Catalog at {self.url} did not return JSON") from exc

        products = products_from_records(payload, self._default_stock)
        logger.info("Fetched %d products from %s", len(products), self.url)
        return products

    def _get(self) -> httpx.Response:
        logger.debug("GET %s (timeout=%.1fs)", self.url, self.timeout)
        try:
            with httpx.Client() as client:
                response = client.get(
                    self.url,
                    headers={"Accept": "application/json"},
                    timeout=self.timeout,
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise CatalogUnavailableError(
                f"Catalog request failed with HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise CatalogUnavailableError(
                f"Catalog request to {self.url} failed: {exc}"
            ) from exc
        return response
