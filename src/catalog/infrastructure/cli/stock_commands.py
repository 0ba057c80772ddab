"""CLI commands for stock movements."""

from __future__ import annotations

import click

from catalog.application.adjust_stock import (
    AddStockHandler,
    CheckStockHandler,
    DeductStockHandler,
    SetStockHandler,
)
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import product_repository


@click.command("add")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units to add.")
def stock_add(product_id: int, quantity: int) -> None:
    """Restock a product."""
    handler = AddStockHandler(product_repo=product_repository())

    try:
        dto = handler.handle(product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} stock is now {dto.stock_quantity}")


@click.command("deduct")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units to remove.")
def stock_deduct(product_id: int, quantity: int) -> None:
    """Take units out of stock."""
    handler = DeductStockHandler(product_repo=product_repository())

    try:
        dto = handler.handle(product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} stock is now {dto.stock_quantity}")


@click.command("set")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="New stock level.")
def stock_set(product_id: int, quantity: int) -> None:
    """Overwrite the stock level of a product."""
    handler = SetStockHandler(product_repo=product_repository())

    try:
        dto = handler.handle(product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} stock set to {dto.stock_quantity}")


@click.command("check")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units required.")
def stock_check(product_id: int, quantity: int) -> None:
    """Check whether a quantity can be supplied."""
    handler = CheckStockHandler(product_repo=product_repository())

    try:
        available = handler.handle(product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if available:
        click.echo(f"Product #{product_id}: {quantity} units available")
    else:
        click.echo(f"Product #{product_id}: {quantity} units NOT available")
