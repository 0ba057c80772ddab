"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from catalog.domain.model.category import Category
from catalog.domain.model.product import Product


@dataclass(frozen=True)
class CreateProductSpec:
    """Input: a new product as requested by the user (primitive values)."""

    name: str
    price: Decimal | str | int
    sku: str
    category_id: int
    description: str | None = None
    stock_quantity: int = 0
    currency: str = "JPY"


@dataclass(frozen=True)
class UpdateProductSpec:
    """Input: partial update; ``None`` means "leave unchanged"."""

    name: str | None = None
    description: str | None = None
    price: Decimal | str | int | None = None
    category_id: int | None = None
    stock_quantity: int | None = None

    def is_empty(self) -> bool:
        return all(
            value is None
            for value in (
                self.name,
                self.description,
                self.price,
                self.category_id,
                self.stock_quantity,
            )
        )


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as displayed to the user."""

    id: int
    name: str
    description: str | None
    price: str  # formatted, e.g. "¥1,000"
    amount: str
    currency: str
    sku: str
    stock_quantity: int
    category_id: int
    created_at: str
    updated_at: str


@dataclass(frozen=True)
class CategoryDTO:
    id: int
    name: str
    description: str | None
    product_ids: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class InventoryValueDTO:
    """Output: total stock value for one currency."""

    currency: str
    total: str
    product_count: int


def to_product_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        description=product.description,
        price=str(product.price),
        amount=str(product.price.amount),
        currency=product.price.currency,
        sku=product.sku.value,
        stock_quantity=product.stock.value,
        category_id=product.category_id,
        created_at=product.created_at.strftime("%Y-%m-%d %H:%M:%S"),
        updated_at=product.updated_at.strftime("%Y-%m-%d %H:%M:%S"),
    )


def to_category_dto(category: Category) -> CategoryDTO:
    return CategoryDTO(
        id=category.id,
        name=category.name.value,
        description=category.description,
        product_ids=list(category.product_ids),
    )
