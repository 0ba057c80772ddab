"""CLI commands for categories."""

from __future__ import annotations

import click

from catalog.application.categories import AddCategoryHandler, ListCategoriesHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import category_repository


@click.command("add")
@click.option("--name", required=True, help="Category name.")
@click.option("--description", default=None, help="Optional description.")
def category_add(name: str, description: str | None) -> None:
    """Add a new category."""
    handler = AddCategoryHandler(category_repo=category_repository())

    try:
        dto = handler.handle(name=name, description=description)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category #{dto.id} '{dto.name}' added")


@click.command("list")
def category_list() -> None:
    """List all categories."""
    categories = ListCategoriesHandler(category_repo=category_repository()).handle()

    if not categories:
        click.echo("No categories found.")
        return

    click.echo(f"{'ID':<6} {'Name':<30} {'Products':>10}")
    click.echo("-" * 48)
    for c in categories:
        click.echo(f"{c.id:<6} {c.name:<30} {len(c.product_ids):>10}")
