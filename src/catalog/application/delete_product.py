"""Application service: Delete Product use case.

Deletion is a persistence action, but whether it is allowed is a domain
decision: only products with zero stock may be removed.
"""

from __future__ import annotations

import logging

from catalog.domain.exceptions import EntityNotFoundError, ProductDeletionError
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo

    def handle(self, product_id: int) -> None:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")

        if not product.can_be_deleted():
            raise ProductDeletionError(
                f"Cannot delete product #{product_id} with {product.stock} units in stock. "
                f"Reduce stock to zero first."
            )

        self._product_repo.delete(product_id)

        category = self._category_repo.get_by_id(product.category_id)
        if category is not None:
            category.remove_product(product_id)
            self._category_repo.save(category)

        logger.info("Deleted product #%s sku=%s", product_id, product.sku)
