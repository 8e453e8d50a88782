"""Tests for the LoadCatalog use case.

Mostly in-memory fake repositories; one case reads a file from tmp_path.
"""

import logging

from storefront.application.load_catalog import LoadCatalogHandler
from storefront.domain.exceptions import CatalogDataError
from storefront.infrastructure.persistence.json_catalog_repository import (
    JsonCatalogRepository,
)
from tests.fakes import FailingCatalogRepository, FakeCatalogRepository, demo_catalog


class TestLoadCatalog:

    def test_returns_products(self):
        repo = FakeCatalogRepository(demo_catalog())
        result = LoadCatalogHandler(repo).handle()
        assert result.ok
        assert [p.id for p in result.products] == ["1", "2"]
        assert repo.load_calls == 1

    def test_unavailable_source_gives_empty_catalog(self):
        result = LoadCatalogHandler(FailingCatalogRepository()).handle()
        assert not result.ok
        assert result.products == []
        assert "503" in result.error

    def test_malformed_data_gives_empty_catalog(self):
        repo = FailingCatalogRepository(CatalogDataError("Product '7' has negative stock: -1"))
        result = LoadCatalogHandler(repo).handle()
        assert result.products == []
        assert "negative stock" in result.error

    def test_failure_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="storefront.application.load_catalog"):
            LoadCatalogHandler(FailingCatalogRepository()).handle()
        assert "Catalog load failed" in caplog.text

    def test_undecodable_file_gives_empty_catalog(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_bytes(b'[{"id": 1, "title": "\xff\xfe", "price": 1}]')
        result = LoadCatalogHandler(JsonCatalogRepository(path)).handle()
        assert result.products == []
        assert "not valid UTF-8" in result.error
