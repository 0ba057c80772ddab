"""Application service: Add Product use case.

Orchestrates the checks that span more than one aggregate (SKU uniqueness,
category existence) and then lets the Product aggregate enforce its own
rules.
"""

from __future__ import annotations

import logging

from catalog.application.dto import CreateProductSpec, ProductDTO, to_product_dto
from catalog.application.validators import validate_create_product
from catalog.domain.exceptions import DuplicateSKUError, EntityNotFoundError
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money, ProductSKU, StockQuantity
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo

    def handle(self, spec: CreateProductSpec) -> ProductDTO:
        """Add a new product to the catalog.

        Steps:
        1. Validate the raw request (all field errors reported together).
        2. Build the value objects.
        3. Reject a SKU that is already in use (the domain cannot see other
           products, so uniqueness is checked here).
        4. Require the category to exist.
        5. Create, persist, and link the product to its category.
        """
        validate_create_product(spec)

        sku = ProductSKU.create(spec.sku)
        price = Money.from_amount(spec.price, spec.currency)
        stock = StockQuantity.from_initial_stock(spec.stock_quantity)

        if self._product_repo.exists_by_sku(sku):
            raise DuplicateSKUError(f"Product with SKU '{sku}' already exists")

        category = self._category_repo.get_by_id(spec.category_id)
        if category is None:
            raise EntityNotFoundError(f"Category #{spec.category_id} not found")

        product = Product.create(
            name=spec.name,
            description=spec.description,
            price=price,
            sku=sku,
            category_id=spec.category_id,
            stock=stock,
        )
        self._product_repo.save(product)

        category.add_product(product.id)
        self._category_repo.save(category)

        logger.info("Added product #%s sku=%s price=%s", product.id, sku, price)
        return to_product_dto(product)
