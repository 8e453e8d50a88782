"""Application service: Load Catalog use case.

A failed load never reaches the core as an exception: the session gets
an empty catalog and the caller decides how to surface ``error``.
"""

from __future__ import annotations

import logging

from storefront.application.dto import CatalogLoadResult
from storefront.domain.exceptions import CatalogError
from storefront.domain.repository.catalog_repository import CatalogRepository

logger = logging.getLogger(__name__)


class LoadCatalogHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    def handle(self) -> CatalogLoadResult:
        try:
            products = self._catalog_repo.load()
        except CatalogError as exc:
            logger.warning("Catalog load failed: %s", exc)
            return CatalogLoadResult(products=[], error=str(exc))
        return CatalogLoadResult(products=products)
