"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from catalog.application.add_product import AddProductHandler
from catalog.application.delete_product import DeleteProductHandler
from catalog.application.dto import CreateProductSpec, ProductDTO, UpdateProductSpec
from catalog.application.inventory_reports import InventoryValueHandler, LowStockReportHandler
from catalog.application.show_products import (
    ListProductsHandler,
    SearchProductsHandler,
    ShowProductHandler,
)
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import category_repository, product_repository


def _display_table(products: list[ProductDTO]) -> None:
    """Shared formatting for product listings."""
    click.echo(f"{'ID':<6} {'SKU':<14} {'Name':<24} {'Price':>14} {'Stock':>8}")
    click.echo("-" * 70)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.sku:<14} {p.name:<24} {p.price:>14} {p.stock_quantity:>8}"
        )


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 1000 or 15.99).")
@click.option("--currency", default="JPY", show_default=True, help="ISO currency code.")
@click.option("--sku", required=True, help="Stock keeping unit, e.g. PROD-001.")
@click.option("--category-id", required=True, type=int, help="Category ID.")
@click.option("--description", default=None, help="Optional description.")
@click.option("--stock", default=0, type=int, show_default=True, help="Initial stock.")
def product_add(
    name: str,
    price: str,
    currency: str,
    sku: str,
    category_id: int,
    description: str | None,
    stock: int,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(
        product_repo=product_repository(),
        category_repo=category_repository(),
    )
    spec = CreateProductSpec(
        name=name,
        price=price,
        sku=sku,
        category_id=category_id,
        description=description,
        stock_quantity=stock,
        currency=currency,
    )

    try:
        dto = handler.handle(spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} '{dto.name}' ({dto.sku}) added at {dto.price}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = ListProductsHandler(product_repo=product_repository()).handle()

    if not products:
        click.echo("No products found.")
        return

    _display_table(products)


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_show(product_id: int) -> None:
    """Show a single product."""
    try:
        dto = ShowProductHandler(product_repo=product_repository()).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id}  {dto.name}")
    click.echo(f"SKU:         {dto.sku}")
    click.echo(f"Price:       {dto.price}")
    click.echo(f"Stock:       {dto.stock_quantity}")
    click.echo(f"Category:    #{dto.category_id}")
    if dto.description:
        click.echo(f"Description: {dto.description}")
    click.echo(f"Created:     {dto.created_at}")
    click.echo(f"Updated:     {dto.updated_at}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--description", default=None, help="New description.")
@click.option("--price", default=None, help="New price in the product's currency.")
@click.option("--category-id", default=None, type=int, help="New category ID.")
@click.option("--stock", default=None, type=int, help="New stock level.")
def product_update(
    product_id: int,
    name: str | None,
    description: str | None,
    price: str | None,
    category_id: int | None,
    stock: int | None,
) -> None:
    """Update some fields of a product (the SKU cannot be changed)."""
    handler = UpdateProductHandler(
        product_repo=product_repository(),
        category_repo=category_repository(),
    )
    spec = UpdateProductSpec(
        name=name,
        description=description,
        price=price,
        category_id=category_id,
        stock_quantity=stock,
    )

    try:
        dto = handler.handle(product_id, spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} updated")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_delete(product_id: int) -> None:
    """Delete a product (only allowed when its stock is zero)."""
    handler = DeleteProductHandler(
        product_repo=product_repository(),
        category_repo=category_repository(),
    )

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted")


@click.command("search")
@click.option("--term", required=True, help="Text to find in name or SKU.")
def product_search(term: str) -> None:
    """Search products by name or SKU."""
    products = SearchProductsHandler(product_repo=product_repository()).handle(term)

    if not products:
        click.echo(f"No products matching '{term}'.")
        return

    _display_table(products)


@click.command("low-stock")
@click.option("--threshold", default=5, type=int, show_default=True, help="Stock threshold.")
def product_low_stock(threshold: int) -> None:
    """List products at or below the stock threshold."""
    handler = LowStockReportHandler(product_repo=product_repository())

    try:
        products = handler.handle(threshold)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo(f"No products at or below {threshold} units.")
        return

    _display_table(products)


@click.command("value")
def product_value() -> None:
    """Show the total value of stock on hand, per currency."""
    lines = InventoryValueHandler(product_repo=product_repository()).handle()

    if not lines:
        click.echo("No products found.")
        return

    click.echo(f"{'Currency':<10} {'Products':>10} {'Total value':>20}")
    click.echo("-" * 42)
    for line in lines:
        click.echo(f"{line.currency:<10} {line.product_count:>10} {line.total:>20}")
