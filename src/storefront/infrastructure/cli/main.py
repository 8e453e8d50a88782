from dataclasses import replace
from pathlib import Path

import click

from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import LOG_LEVELS, Settings, configure_logging
from storefront.infrastructure.cli.catalog_commands import (
    catalog_categories,
    catalog_list,
)
from storefront.infrastructure.cli.shop_commands import shop


@click.group()
@click.option(
    "--catalog-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Load the catalog from a JSON file instead of the catalog URL.",
)
@click.option("--catalog-url", default=None, help="Catalog endpoint returning a JSON array.")
@click.option(
    "--log-level",
    type=click.Choice(list(LOG_LEVELS), case_sensitive=False),
    default=None,
    help="Logging threshold (default WARNING).",
)
@click.option(
    "--allow-overstock",
    is_flag=True,
    default=False,
    help="Do not cap cart quantities at the product's stock.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    catalog_file: Path | None,
    catalog_url: str | None,
    log_level: str | None,
    allow_overstock: bool,
) -> None:
    """Storefront — browse a catalog and fill a cart"""
    try:
        settings = Settings.from_env()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    # An explicit URL wins over a file configured in the environment
    if catalog_url is not None:
        settings = replace(settings, catalog_url=catalog_url, catalog_file=None)
    if catalog_file is not None:
        settings = replace(settings, catalog_file=catalog_file)
    if log_level is not None:
        settings = replace(settings, log_level=log_level.upper())
    if allow_overstock:
        settings = replace(settings, enforce_stock=False)

    configure_logging(settings.log_level)
    ctx.obj = settings


@cli.group()
def catalog() -> None:
    """Browse the catalog."""


# Register subcommands
catalog.add_command(catalog_categories)
catalog.add_command(catalog_list)
cli.add_command(shop)
