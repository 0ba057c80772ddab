"""Integration tests for the AddProduct use case.

Uses in-memory fake repositories, no file I/O.
"""

from decimal import Decimal

import pytest

from catalog.application.add_product import AddProductHandler
from catalog.application.dto import CreateProductSpec
from catalog.application.validators import RequestValidationError
from catalog.domain.exceptions import DuplicateSKUError, EntityNotFoundError
from catalog.domain.model.category import Category
from tests.fakes import FakeCategoryRepository, FakeProductRepository


def _setup() -> tuple[AddProductHandler, FakeProductRepository, FakeCategoryRepository]:
    product_repo = FakeProductRepository()
    category_repo = FakeCategoryRepository([Category.create("Tools")])
    return AddProductHandler(product_repo, category_repo), product_repo, category_repo


def _spec(**overrides) -> CreateProductSpec:
    fields = dict(
        name="Widget",
        price="1000",
        sku="w-001",
        category_id=1,
        description="A fine widget",
        stock_quantity=10,
    )
    fields.update(overrides)
    return CreateProductSpec(**fields)


class TestAddProductHappyPath:

    def test_returns_dto(self):
        handler, _, _ = _setup()
        dto = handler.handle(_spec())
        assert dto.id == 1
        assert dto.name == "Widget"
        assert dto.sku == "W-001"
        assert dto.price == "¥1,000"
        assert dto.currency == "JPY"
        assert dto.stock_quantity == 10

    def test_persists_product(self):
        handler, product_repo, _ = _setup()
        dto = handler.handle(_spec())
        saved = product_repo.get_by_id(dto.id)
        assert saved is not None
        assert saved.price.amount == Decimal("1000")

    def test_links_product_to_category(self):
        handler, _, category_repo = _setup()
        dto = handler.handle(_spec())
        assert category_repo.get_by_id(1).product_ids == [dto.id]

    def test_other_currency(self):
        handler, _, _ = _setup()
        dto = handler.handle(_spec(price="15.99", currency="usd"))
        assert dto.price == "$15.99"
        assert dto.currency == "USD"

    def test_sequential_ids(self):
        handler, _, _ = _setup()
        first = handler.handle(_spec(sku="W-001"))
        second = handler.handle(_spec(sku="W-002"))
        assert second.id == first.id + 1


class TestAddProductRules:

    def test_duplicate_sku_rejected_case_insensitively(self):
        handler, product_repo, _ = _setup()
        handler.handle(_spec(sku="W-001"))
        with pytest.raises(DuplicateSKUError, match="already exists"):
            handler.handle(_spec(sku=" w-001 "))
        assert len(product_repo.list_all()) == 1

    def test_unknown_category_rejected(self):
        handler, product_repo, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Category #99"):
            handler.handle(_spec(category_id=99))
        assert product_repo.list_all() == []

    def test_all_invalid_fields_reported_together(self):
        handler, product_repo, _ = _setup()
        with pytest.raises(RequestValidationError) as exc_info:
            handler.handle(_spec(name="", price="0", sku="ab", stock_quantity=-1, category_id=0))
        assert set(exc_info.value.fields) == {
            "name", "price", "sku", "stock_quantity", "category_id",
        }
        assert product_repo.list_all() == []

    def test_forbidden_characters_in_name_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(RequestValidationError) as exc_info:
            handler.handle(_spec(name="<script>"))
        assert [e.code for e in exc_info.value.errors] == ["PRODUCT_005"]

    def test_jpy_price_with_decimals_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(RequestValidationError) as exc_info:
            handler.handle(_spec(price="10.5"))
        assert [(e.field, e.code) for e in exc_info.value.errors] == [("price", "MONEY_004")]

    def test_unsupported_currency_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(RequestValidationError) as exc_info:
            handler.handle(_spec(currency="XYZ"))
        assert exc_info.value.fields == ["currency"]

    def test_unparseable_price_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(RequestValidationError) as exc_info:
            handler.handle(_spec(price="ten"))
        assert exc_info.value.fields == ["price"]

    def test_long_description_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(RequestValidationError) as exc_info:
            handler.handle(_spec(description="d" * 501))
        assert [e.code for e in exc_info.value.errors] == ["PRODUCT_003"]
