"""JSON-file-backed implementation of CatalogRepository."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from storefront.domain.exceptions import CatalogDataError, CatalogUnavailableError
from storefront.domain.model.product import Product
from storefront.domain.repository.catalog_repository import CatalogRepository
from storefront.infrastructure.catalog_records import products_from_records

logger = logging.getLogger(__name__)


class JsonCatalogRepository(CatalogRepository):

    def __init__(self, file_path: Path, default_stock: int = 0) -> None:
        self._file_path = file_path
        self._default_stock = default_stock

    # --- CatalogRepository interface ------------------------------------------

    def load(self) -> list[Product]:
        products = products_from_records(self._load_raw(), self._default_stock)
        logger.info("Loaded %d products from %s", len(products), self._file_path)
        return products

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> object:
        try:
            text = self._file_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise CatalogUnavailableError(
                f"Cannot read catalog file {self._file_path}: {exc.strerror or exc}"
            ) from exc
        except UnicodeDecodeError as exc:
            raise CatalogDataError(
                f"Catalog file {self._file_path} is not valid UTF-8: {exc.reason}"
            ) from exc
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise CatalogDataError(
                f"Catalog file {self._file_path} is not valid JSON: {exc.msg}"
            ) from exc
