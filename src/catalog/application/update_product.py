"""Application service: Update Product use case.

Partial update: only the fields set on the UpdateProductSpec change.
The SKU is deliberately not updatable through this use case.
"""

from __future__ import annotations

import logging

from catalog.application.dto import ProductDTO, UpdateProductSpec, to_product_dto
from catalog.application.validators import validate_update_product
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.value_objects import Money
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo

    def handle(self, product_id: int, spec: UpdateProductSpec) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")

        validate_update_product(spec, product.price.currency)

        # Resolve everything that can fail before the first mutation.
        new_price = (
            Money.from_amount(spec.price, product.price.currency)
            if spec.price is not None
            else product.price
        )
        old_category = None
        new_category = None
        if spec.category_id is not None and spec.category_id != product.category_id:
            new_category = self._category_repo.get_by_id(spec.category_id)
            if new_category is None:
                raise EntityNotFoundError(f"Category #{spec.category_id} not found")
            old_category = self._category_repo.get_by_id(product.category_id)

        if spec.name is not None or spec.description is not None or spec.price is not None:
            product.update_basic_info(
                spec.name if spec.name is not None else product.name,
                spec.description if spec.description is not None else product.description,
                new_price,
            )
        if new_category is not None:
            product.change_category(new_category.id)
        if spec.stock_quantity is not None:
            product.set_stock_quantity(spec.stock_quantity)

        self._product_repo.save(product)

        if new_category is not None:
            if old_category is not None:
                old_category.remove_product(product.id)
                self._category_repo.save(old_category)
            new_category.add_product(product.id)
            self._category_repo.save(new_category)

        logger.info("Updated product #%s", product_id)
        return to_product_dto(product)
