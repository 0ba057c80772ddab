from __future__ import annotations

import click

from catalog.infrastructure.cli.category_commands import category_add, category_list
from catalog.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_low_stock,
    product_search,
    product_show,
    product_update,
    product_value,
)
from catalog.infrastructure.cli.stock_commands import (
    stock_add,
    stock_check,
    stock_deduct,
    stock_set,
)
from catalog.infrastructure.logging_config import configure_logging


@click.group()
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (default: $CATALOG_LOG_LEVEL or WARNING).",
)
def cli(log_level: str | None) -> None:
    """Catalog: products, categories and stock"""
    configure_logging(log_level)


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def stock() -> None:
    """Manage stock levels."""


@cli.group()
def category() -> None:
    """Manage categories."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_low_stock)
product.add_command(product_search)
product.add_command(product_show)
product.add_command(product_update)
product.add_command(product_value)
stock.add_command(stock_add)
stock.add_command(stock_check)
stock.add_command(stock_deduct)
stock.add_command(stock_set)
category.add_command(category_add)
category.add_command(category_list)
