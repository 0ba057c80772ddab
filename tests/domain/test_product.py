"""Unit tests for the Product aggregate."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from catalog.domain.exceptions import (
    CurrencyMismatchError,
    InsufficientStockError,
    InvalidCategoryError,
    InvalidDescriptionError,
    InvalidNameError,
    NegativeQuantityError,
    ValidationError,
)
from catalog.domain.model import product as product_module
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money, ProductSKU, StockQuantity


def _widget(stock: int = 10, price: int = 1000, **overrides) -> Product:
    kwargs = dict(
        name="Widget",
        description=None,
        price=Money.from_amount(price, "JPY"),
        sku=ProductSKU.create("W-001"),
        category_id=1,
        stock=StockQuantity.create(stock),
    )
    kwargs.update(overrides)
    return Product.create(**kwargs)


@pytest.fixture
def advance_clock(monkeypatch):
    """Return a function that moves the aggregate's clock forward."""

    def advance(hours: int = 1) -> datetime:
        moment = datetime.now(timezone.utc) + timedelta(hours=hours)
        monkeypatch.setattr(product_module, "_utcnow", lambda: moment)
        return moment

    return advance


class TestProductCreate:

    def test_creates_with_all_fields(self):
        p = _widget()
        assert p.id is None
        assert p.name == "Widget"
        assert p.description is None
        assert p.price == Money.from_amount(1000)
        assert p.sku == ProductSKU.create("w-001")
        assert p.stock.value == 10
        assert p.category_id == 1

    def test_timestamps_set_together(self):
        p = _widget()
        assert p.created_at == p.updated_at
        assert p.created_at.tzinfo is not None

    def test_name_and_description_are_trimmed(self):
        p = _widget(name="  Widget  ", description="  A fine widget  ")
        assert p.name == "Widget"
        assert p.description == "A fine widget"

    def test_stock_defaults_to_zero(self):
        p = Product.create("Widget", None, Money.from_amount(10), ProductSKU.create("W-001"), 1)
        assert p.stock == StockQuantity.zero()

    def test_empty_name_rejected(self):
        with pytest.raises(InvalidNameError, match="required"):
            _widget(name="")

    def test_blank_name_rejected(self):
        with pytest.raises(InvalidNameError):
            _widget(name="   ")

    def test_name_at_limit_accepted(self):
        assert len(_widget(name="x" * 100).name) == 100

    def test_name_too_long_rejected(self):
        with pytest.raises(InvalidNameError, match="100 characters"):
            _widget(name="x" * 101)

    def test_description_too_long_rejected(self):
        with pytest.raises(InvalidDescriptionError, match="500 characters"):
            _widget(description="d" * 501)

    @pytest.mark.parametrize("category_id", [0, -1, "1", True])
    def test_invalid_category_rejected(self, category_id):
        with pytest.raises(InvalidCategoryError):
            _widget(category_id=category_id)

    def test_primitive_price_rejected(self):
        with pytest.raises(TypeError, match="must be a Money"):
            Product.create("Widget", None, Decimal("1000"), ProductSKU.create("W-001"), 1)

    def test_non_text_name_rejected(self):
        with pytest.raises(InvalidNameError):
            _widget(name=123)

    def test_non_text_description_rejected(self):
        with pytest.raises(InvalidDescriptionError):
            _widget(description=42)

    def test_primitive_sku_rejected(self):
        with pytest.raises(TypeError, match="must be a ProductSKU"):
            _widget(sku="W-001")


class TestProductStock:

    def test_deduct_all_stock_allows_deletion(self):
        p = _widget(stock=10)
        p.deduct_stock(10)
        assert p.stock.value == 0
        assert p.can_be_deleted()

    def test_product_with_stock_cannot_be_deleted(self):
        assert not _widget(stock=1).can_be_deleted()

    def test_over_deduction_leaves_product_untouched(self, advance_clock):
        p = _widget(stock=10)
        before = p.updated_at
        advance_clock()
        with pytest.raises(InsufficientStockError):
            p.deduct_stock(11)
        assert p.stock.value == 10
        assert p.updated_at == before

    def test_add_stock(self, advance_clock):
        p = _widget(stock=10)
        later = advance_clock()
        p.add_stock(5)
        assert p.stock.value == 15
        assert p.updated_at == later

    def test_set_stock_quantity(self):
        p = _widget(stock=10)
        p.set_stock_quantity(3)
        assert p.stock.value == 3

    def test_set_negative_stock_rejected(self):
        p = _widget(stock=10)
        with pytest.raises(NegativeQuantityError):
            p.set_stock_quantity(-1)
        assert p.stock.value == 10

    def test_set_stock_value_object(self):
        p = _widget(stock=10)
        p.set_stock(StockQuantity.create(42))
        assert p.stock.value == 42

    def test_stock_queries(self):
        p = _widget(stock=4)
        assert p.is_in_stock(4)
        assert not p.is_in_stock(5)
        assert not p.is_in_stock(0)
        assert p.is_low_stock()
        assert not p.is_low_stock(3)
        assert not p.is_out_of_stock

    def test_restock_amount(self):
        assert _widget(stock=4).get_restock_amount(10) == 6


class TestProductBasicInfo:

    def test_update_basic_info(self, advance_clock):
        p = _widget()
        later = advance_clock()
        p.update_basic_info("Gadget", "Shiny", Money.from_amount(2000))
        assert p.name == "Gadget"
        assert p.description == "Shiny"
        assert p.price == Money.from_amount(2000)
        assert p.updated_at == later

    def test_invalid_name_leaves_product_untouched(self):
        p = _widget()
        with pytest.raises(InvalidNameError):
            p.update_basic_info("", "Shiny", Money.from_amount(2000))
        assert p.name == "Widget"
        assert p.description is None
        assert p.price == Money.from_amount(1000)

    def test_invalid_description_leaves_product_untouched(self):
        p = _widget()
        with pytest.raises(InvalidDescriptionError):
            p.update_basic_info("Gadget", "d" * 501, Money.from_amount(2000))
        assert p.name == "Widget"

    def test_update_price(self):
        p = _widget()
        p.update_price(Money.from_amount(1500))
        assert p.price == Money.from_amount(1500)

    def test_change_sku(self):
        p = _widget()
        p.change_sku(ProductSKU.create("G-002"))
        assert p.sku.value == "G-002"
        assert p.has_sku_prefix("g")

    def test_change_category(self):
        p = _widget()
        p.change_category(3)
        assert p.category_id == 3

    def test_change_category_rejects_zero(self):
        p = _widget()
        with pytest.raises(InvalidCategoryError):
            p.change_category(0)
        assert p.category_id == 1


class TestProductTimestamps:

    def test_updated_at_never_before_created_at(self, monkeypatch):
        p = _widget()
        earlier = p.created_at - timedelta(minutes=5)
        monkeypatch.setattr(product_module, "_utcnow", lambda: earlier)
        p.add_stock(1)
        assert p.updated_at >= p.created_at


class TestProductCalculations:

    def test_inventory_value(self):
        p = _widget(stock=4, price=250)
        assert p.calculate_inventory_value() == Money.from_amount(1000, "JPY")

    def test_inventory_value_of_empty_stock_is_zero(self):
        assert _widget(stock=0).calculate_inventory_value().is_zero

    def test_price_in_range_is_inclusive(self):
        p = _widget(price=1000)
        assert p.is_price_in_range(Money.from_amount(1000), Money.from_amount(2000))
        assert p.is_price_in_range(Money.from_amount(500), Money.from_amount(1000))
        assert not p.is_price_in_range(Money.from_amount(1001), Money.from_amount(2000))

    def test_price_range_in_other_currency_rejected(self):
        with pytest.raises(CurrencyMismatchError):
            _widget().is_price_in_range(Money.from_amount(1, "USD"), Money.from_amount(2, "USD"))

    def test_has_sku_prefix(self):
        assert _widget().has_sku_prefix("w")
        assert not _widget().has_sku_prefix("X")


class TestProductIdentity:

    def test_assign_id(self):
        p = _widget()
        p.assign_id(7)
        assert p.id == 7

    def test_reassigning_same_id_is_harmless(self):
        p = _widget()
        p.assign_id(7)
        p.assign_id(7)
        assert p.id == 7

    def test_reassigning_different_id_rejected(self):
        p = _widget()
        p.assign_id(7)
        with pytest.raises(ValidationError, match="cannot reassign"):
            p.assign_id(8)
