"""Integration tests for the stock movement use cases."""

import pytest

from catalog.application.adjust_stock import (
    AddStockHandler,
    CheckStockHandler,
    DeductStockHandler,
    SetStockHandler,
)
from catalog.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    NegativeQuantityError,
    StockOverflowError,
)
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money, ProductSKU, StockQuantity
from catalog.domain.validation_rules import MAX_STOCK_QUANTITY
from tests.fakes import FakeProductRepository


def _repo(stock: int = 10) -> FakeProductRepository:
    product = Product.create(
        "Widget", None, Money.from_amount(100), ProductSKU.create("W-001"), 1,
        StockQuantity.create(stock),
    )
    return FakeProductRepository([product])


class TestAddStock:

    def test_adds_units(self):
        repo = _repo(10)
        dto = AddStockHandler(repo).handle(1, 5)
        assert dto.stock_quantity == 15
        assert repo.get_by_id(1).stock.value == 15

    def test_negative_quantity_rejected(self):
        repo = _repo(10)
        with pytest.raises(NegativeQuantityError):
            AddStockHandler(repo).handle(1, -1)
        assert repo.get_by_id(1).stock.value == 10

    def test_overflow_rejected(self):
        repo = _repo(MAX_STOCK_QUANTITY)
        with pytest.raises(StockOverflowError):
            AddStockHandler(repo).handle(1, 1)


class TestDeductStock:

    def test_deducts_units(self):
        repo = _repo(10)
        assert DeductStockHandler(repo).handle(1, 4).stock_quantity == 6

    def test_insufficient_stock_rejected(self):
        repo = _repo(2)
        with pytest.raises(InsufficientStockError, match="available 2, required 3"):
            DeductStockHandler(repo).handle(1, 3)
        assert repo.get_by_id(1).stock.value == 2

    def test_missing_product(self):
        with pytest.raises(EntityNotFoundError):
            DeductStockHandler(_repo()).handle(7, 1)


class TestSetAndCheckStock:

    def test_set_overwrites(self):
        repo = _repo(10)
        assert SetStockHandler(repo).handle(1, 3).stock_quantity == 3

    def test_set_negative_rejected(self):
        with pytest.raises(NegativeQuantityError):
            SetStockHandler(_repo()).handle(1, -3)

    def test_check(self):
        handler = CheckStockHandler(_repo(5))
        assert handler.handle(1, 5)
        assert not handler.handle(1, 6)
