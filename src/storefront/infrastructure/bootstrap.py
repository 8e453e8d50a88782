"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

Settings come from ``STOREFRONT_*`` environment variables; CLI options
override them.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from storefront.application.storefront_session import StorefrontSession
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import Cart
from storefront.domain.repository.catalog_repository import CatalogRepository
from storefront.infrastructure.http.http_catalog_repository import (
    DEFAULT_CATALOG_URL,
    HttpCatalogRepository,
)
from storefront.infrastructure.persistence.json_catalog_repository import (
    JsonCatalogRepository,
)

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    catalog_url: str = DEFAULT_CATALOG_URL
    catalog_file: Path | None = None
    http_timeout: float = 10.0
    default_stock: int = 10
    enforce_stock: bool = True
    log_level: str = "WARNING"

    @staticmethod
    def from_env(env: dict[str, str] | None = None) -> Settings:
        env = os.environ if env is None else env
        catalog_file = env.get("STOREFRONT_CATALOG_FILE")
        return Settings(
            catalog_url=env.get("STOREFRONT_CATALOG_URL", DEFAULT_CATALOG_URL),
            catalog_file=Path(catalog_file) if catalog_file else None,
            http_timeout=_parse_float(env, "STOREFRONT_HTTP_TIMEOUT", 10.0),
            default_stock=_parse_int(env, "STOREFRONT_DEFAULT_STOCK", 10),
            enforce_stock=_parse_bool(env, "STOREFRONT_ENFORCE_STOCK", True),
            log_level=_parse_level(env, "STOREFRONT_LOG_LEVEL", "WARNING"),
        )


def catalog_repository(settings: Settings) -> CatalogRepository:
    if settings.catalog_file is not None:
        return JsonCatalogRepository(settings.catalog_file, settings.default_stock)
    return HttpCatalogRepository(
        url=settings.catalog_url,
        timeout=settings.http_timeout,
        default_stock=settings.default_stock,
    )


def storefront_session(settings: Settings) -> StorefrontSession:
    return StorefrontSession(cart=Cart(enforce_stock=settings.enforce_stock))


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, force=True)


# --- Env parsing --------------------------------------------------------------


def _parse_int(env, name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"{name} must be an integer, got {raw!r}") from None


def _parse_float(env, name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValidationError(f"{name} must be a number, got {raw!r}") from None


def _parse_level(env, name: str, default: str) -> str:
    level = (env.get(name) or default).strip().upper()
    if level not in LOG_LEVELS:
        raise ValidationError(
            f"{name} must be one of {', '.join(LOG_LEVELS)}, got {level!r}"
        )
    return level


def _parse_bool(env, name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValidationError(f"{name} must be true or false, got {raw!r}")
