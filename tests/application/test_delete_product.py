"""Integration tests for the DeleteProduct use case."""

import pytest

from catalog.application.add_product import AddProductHandler
from catalog.application.adjust_stock import DeductStockHandler
from catalog.application.delete_product import DeleteProductHandler
from catalog.application.dto import CreateProductSpec
from catalog.domain.exceptions import EntityNotFoundError, ProductDeletionError
from catalog.domain.model.category import Category
from tests.fakes import FakeCategoryRepository, FakeProductRepository


def _setup(stock: int):
    product_repo = FakeProductRepository()
    category_repo = FakeCategoryRepository([Category.create("Tools")])
    AddProductHandler(product_repo, category_repo).handle(
        CreateProductSpec(name="Widget", price="500", sku="W-001", category_id=1, stock_quantity=stock)
    )
    return DeleteProductHandler(product_repo, category_repo), product_repo, category_repo


class TestDeleteProduct:

    def test_product_without_stock_is_deleted(self):
        handler, product_repo, category_repo = _setup(stock=0)
        handler.handle(1)
        assert product_repo.get_by_id(1) is None
        assert category_repo.get_by_id(1).product_ids == []

    def test_product_with_stock_is_kept(self):
        handler, product_repo, category_repo = _setup(stock=3)
        with pytest.raises(ProductDeletionError, match="3 units in stock"):
            handler.handle(1)
        assert product_repo.get_by_id(1) is not None
        assert category_repo.get_by_id(1).product_ids == [1]

    def test_deletable_after_stock_is_sold(self):
        handler, product_repo, _ = _setup(stock=3)
        DeductStockHandler(product_repo).handle(1, 3)
        handler.handle(1)
        assert product_repo.list_all() == []

    def test_missing_product(self):
        handler, _, _ = _setup(stock=0)
        with pytest.raises(EntityNotFoundError, match="not found"):
            handler.handle(99)
