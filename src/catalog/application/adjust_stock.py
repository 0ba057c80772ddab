"""Application services: stock movements on a single product.

Each handler loads the product, delegates to the aggregate (which enforces
the StockQuantity rules) and persists the result.  A rejected movement is
raised to the caller and nothing is saved.
"""

from __future__ import annotations

import logging

from catalog.application.dto import ProductDTO, to_product_dto
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class _StockHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def _load(self, product_id: int) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")
        return product


class AddStockHandler(_StockHandler):

    def handle(self, product_id: int, quantity: int) -> ProductDTO:
        """Restock a product."""
        product = self._load(product_id)
        product.add_stock(quantity)
        self._product_repo.save(product)
        logger.info("Added %d units to product #%s (now %s)", quantity, product_id, product.stock)
        return to_product_dto(product)


class DeductStockHandler(_StockHandler):

    def handle(self, product_id: int, quantity: int) -> ProductDTO:
        """Take units out of stock (sale, consumption)."""
        product = self._load(product_id)
        product.deduct_stock(quantity)
        self._product_repo.save(product)
        logger.info(
            "Deducted %d units from product #%s (now %s)", quantity, product_id, product.stock
        )
        return to_product_dto(product)


class SetStockHandler(_StockHandler):

    def handle(self, product_id: int, quantity: int) -> ProductDTO:
        """Overwrite the stock level (inventory count adjustment)."""
        product = self._load(product_id)
        product.set_stock_quantity(quantity)
        self._product_repo.save(product)
        logger.info("Set stock of product #%s to %s", product_id, product.stock)
        return to_product_dto(product)


class CheckStockHandler(_StockHandler):

    def handle(self, product_id: int, quantity: int) -> bool:
        """True if *quantity* units can be supplied right now."""
        return self._load(product_id).is_in_stock(quantity)
