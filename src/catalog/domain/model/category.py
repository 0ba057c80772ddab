"""Category entity.

A simple reference entity.  Products point at a category by id only; the
``product_ids`` back-collection is informational and is maintained by the
application layer, never checked by the Product aggregate.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from catalog.domain.exceptions import InvalidCategoryNameError
from catalog.domain.validation_rules import validate_category_name


@dataclass(frozen=True)
class CategoryName:
    value: str

    def __post_init__(self) -> None:
        result = validate_category_name(self.value)
        if not result.is_valid:
            raise InvalidCategoryNameError(result.error_message, code=result.error_code)
        object.__setattr__(self, "value", self.value.strip())

    def __str__(self) -> str:
        return self.value


@dataclass
class Category:

    id: int | None
    name: CategoryName
    description: str | None = None
    product_ids: list[int] = field(default_factory=list)

    @staticmethod
    def create(name: str, description: str | None = None) -> Category:
        return Category(
            id=None,
            name=CategoryName(name),
            description=description.strip() if description else None,
        )

    def add_product(self, product_id: int) -> None:
        if product_id not in self.product_ids:
            self.product_ids.append(product_id)

    def remove_product(self, product_id: int) -> None:
        if product_id in self.product_ids:
            self.product_ids.remove(product_id)
