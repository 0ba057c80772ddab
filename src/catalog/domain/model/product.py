"""Product aggregate.

The Product is the aggregate root of the catalog.  It composes the Money,
ProductSKU and StockQuantity value objects and owns every cross-field rule:
name and description limits, the category reference, timestamps, and the
deletion precondition.

Each business operation validates all of its inputs *before* touching any
field, so a failed call leaves the product exactly as it was.
"""

from __future__ import annotations

from datetime import datetime, timezone

from catalog.domain.exceptions import (
    InvalidCategoryError,
    InvalidDescriptionError,
    InvalidNameError,
    ValidationError,
)
from catalog.domain.model.value_objects import (
    DEFAULT_LOW_STOCK_THRESHOLD,
    Money,
    ProductSKU,
    StockQuantity,
)
from catalog.domain.validation_rules import (
    validate_category_id,
    validate_product_description,
    validate_product_name,
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Product:
    """Aggregate root for catalog products.

    Use the ``Product.create()`` factory for new products; it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted products (with their original
    timestamps) without re-validating.  Attributes are read-only: state
    changes only through the named operations below.
    """

    def __init__(
        self,
        id: int | None,
        name: str,
        description: str | None,
        price: Money,
        sku: ProductSKU,
        stock: StockQuantity,
        category_id: int,
        created_at: datetime,
        updated_at: datetime,
    ) -> None:
        self._id = id
        self._name = name
        self._description = description
        self._price = _require(price, Money, "price")
        self._sku = _require(sku, ProductSKU, "sku")
        self._stock = _require(stock, StockQuantity, "stock")
        self._category_id = category_id
        self._created_at = created_at
        self._updated_at = updated_at

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        name: str,
        description: str | None,
        price: Money,
        sku: ProductSKU,
        category_id: int,
        stock: StockQuantity | None = None,
    ) -> Product:
        """Create a new product, enforcing all invariants.

        ``price``, ``sku`` and ``stock`` are value objects and therefore
        already valid; they are stored as given.
        """
        clean_name = _checked_name(name)
        clean_description = _checked_description(description)
        _check_category_id(category_id)

        now = _utcnow()
        return Product(
            id=None,
            name=clean_name,
            description=clean_description,
            price=price,
            sku=sku,
            stock=stock if stock is not None else StockQuantity.zero(),
            category_id=category_id,
            created_at=now,
            updated_at=now,
        )

    # --- Read accessors -------------------------------------------------------

    @property
    def id(self) -> int | None:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str | None:
        return self._description

    @property
    def price(self) -> Money:
        return self._price

    @property
    def sku(self) -> ProductSKU:
        return self._sku

    @property
    def stock(self) -> StockQuantity:
        return self._stock

    @property
    def category_id(self) -> int:
        return self._category_id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def assign_id(self, product_id: int) -> None:
        """Called by the repository when the product is first persisted."""
        if self._id is not None and self._id != product_id:
            raise ValidationError(
                f"Product already has ID {self._id}; cannot reassign to {product_id}"
            )
        self._id = product_id

    # --- Business operations --------------------------------------------------

    def update_basic_info(self, name: str, description: str | None, price: Money) -> None:
        clean_name = _checked_name(name)
        clean_description = _checked_description(description)
        _require(price, Money, "price")

        self._name = clean_name
        self._description = clean_description
        self._price = price
        self._touch()

    def update_price(self, price: Money) -> None:
        self._price = _require(price, Money, "price")
        self._touch()

    def change_sku(self, sku: ProductSKU) -> None:
        """Replace the SKU.  Uniqueness across products is the caller's job."""
        self._sku = _require(sku, ProductSKU, "sku")
        self._touch()

    def change_category(self, category_id: int) -> None:
        _check_category_id(category_id)
        self._category_id = category_id
        self._touch()

    def add_stock(self, quantity: int) -> None:
        self._stock = self._stock.add(quantity)
        self._touch()

    def deduct_stock(self, quantity: int) -> None:
        self._stock = self._stock.deduct(quantity)
        self._touch()

    def set_stock_quantity(self, quantity: int) -> None:
        self._stock = StockQuantity.create(quantity)
        self._touch()

    def set_stock(self, stock: StockQuantity) -> None:
        self._stock = _require(stock, StockQuantity, "stock")
        self._touch()

    # --- Queries --------------------------------------------------------------

    def is_in_stock(self, quantity: int) -> bool:
        return self._stock.is_sufficient(quantity)

    def is_low_stock(self, threshold: int = DEFAULT_LOW_STOCK_THRESHOLD) -> bool:
        return self._stock.is_low_stock(threshold)

    @property
    def is_out_of_stock(self) -> bool:
        return self._stock.is_out_of_stock

    def can_be_deleted(self) -> bool:
        """Only products with no stock left may be removed from the catalog."""
        return self._stock.is_out_of_stock

    def calculate_inventory_value(self) -> Money:
        return self._price.multiply(self._stock.value)

    def get_restock_amount(self, target_level: int) -> int:
        return self._stock.get_restock_amount(target_level)

    def is_price_in_range(self, min_price: Money, max_price: Money) -> bool:
        """Inclusive range check; currencies must match."""
        return min_price <= self._price <= max_price

    def has_sku_prefix(self, prefix: str) -> bool:
        return self._sku.has_prefix(prefix)

    # --- Internal helpers -----------------------------------------------------

    def _touch(self) -> None:
        self._updated_at = max(_utcnow(), self._created_at)

    def __repr__(self) -> str:
        return f"Product(id={self._id!r}, sku={self._sku.value!r}, name={self._name!r})"


def _require(value, expected: type, label: str):
    if not isinstance(value, expected):
        raise TypeError(
            f"Product {label} must be a {expected.__name__}, got {type(value).__name__}"
        )
    return value


def _checked_name(name: str) -> str:
    result = validate_product_name(name)
    if not result.is_valid:
        raise InvalidNameError(result.error_message, code=result.error_code)
    return name.strip()


def _checked_description(description: str | None) -> str | None:
    result = validate_product_description(description)
    if not result.is_valid:
        raise InvalidDescriptionError(result.error_message, code=result.error_code)
    return description.strip() if description is not None else None


def _check_category_id(category_id: int) -> None:
    result = validate_category_id(category_id)
    if not result.is_valid:
        raise InvalidCategoryError(result.error_message, code=result.error_code)
