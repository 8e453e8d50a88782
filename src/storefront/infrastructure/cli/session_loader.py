"""Builds a ready-to-use session from the CLI context settings."""

from __future__ import annotations

import click

from storefront.application.load_catalog import LoadCatalogHandler
from storefront.application.storefront_session import StorefrontSession
from storefront.infrastructure.bootstrap import (
    Settings,
    catalog_repository,
    storefront_session,
)


def load_session(settings: Settings) -> StorefrontSession:
    """Load the catalog and hand it to a fresh session.

    A failed load is reported on stderr; the session still starts, with
    an empty catalog.
    """
    session = storefront_session(settings)
    result = LoadCatalogHandler(catalog_repository(settings)).handle()
    if not result.ok:
        click.echo(f"Error loading products: {result.error}", err=True)
    session.load_catalog(result.products)
    return session
