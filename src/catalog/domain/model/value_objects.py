"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist: every
operation that "changes" one returns a new instance.  The rules themselves
live in ``catalog.domain.validation_rules`` so the request validators in
the application layer apply exactly the same checks.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from catalog.domain.exceptions import (
    CurrencyMismatchError,
    EmptySKUError,
    InsufficientStockError,
    InvalidAmountError,
    InvalidSKUFormatError,
    NegativeFactorError,
    NegativeQuantityError,
    NegativeResultError,
    SKUTooLongError,
    SKUTooShortError,
    StockOverflowError,
    ValidationError,
)
from catalog.domain.validation_rules import (
    MAX_STOCK_QUANTITY,
    max_decimal_places,
    normalize_sku,
    validate_currency,
    validate_money,
    validate_sku,
    validate_stock_quantity,
)

DEFAULT_CURRENCY = "JPY"
DEFAULT_LOW_STOCK_THRESHOLD = 5
DEFAULT_CRITICAL_STOCK_THRESHOLD = 1

_CURRENCY_SYMBOLS = {"JPY": "¥", "USD": "$", "EUR": "€"}


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.

    Build new prices with ``Money.from_amount()``, which applies every
    money rule (supported currency, non-negative, upper bound, precision).
    The plain constructor checks the currency (supported, non-blank) and
    that the amount is a finite, non-negative Decimal.  Arithmetic results go
    through it, so ``multiply`` by a fractional factor may produce more
    decimal places than the currency allows; round the result when that
    matters.
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise InvalidAmountError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise InvalidAmountError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise InvalidAmountError(
                f"Money amount cannot be negative, got {self.amount}", code="MONEY_001"
            )
        currency_result = validate_currency(self.currency)
        if not currency_result.is_valid:
            raise InvalidAmountError(currency_result.error_message, code=currency_result.error_code)
        object.__setattr__(self, "currency", self.currency.strip().upper())

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def from_amount(
        amount: str | float | int | Decimal,
        currency: str = DEFAULT_CURRENCY,
    ) -> Money:
        """Create a validated Money, coercing *amount* to Decimal safely."""
        value = _to_decimal(amount)
        result = validate_money(value, currency)
        if not result.is_valid:
            raise InvalidAmountError(result.error_message, code=result.error_code)
        return Money(value, currency)

    @staticmethod
    def zero(currency: str = DEFAULT_CURRENCY) -> Money:
        return Money.from_amount(0, currency)

    # --- Arithmetic -----------------------------------------------------------

    def add(self, other: Money) -> Money:
        self._assert_same_currency(other, "add")
        return Money(self.amount + other.amount, self.currency)

    def subtract(self, other: Money) -> Money:
        self._assert_same_currency(other, "subtract")
        result = self.amount - other.amount
        if result < Decimal("0"):
            raise NegativeResultError(
                f"Subtracting {other} from {self} would result in a negative amount"
            )
        return Money(result, self.currency)

    def multiply(self, factor: int | Decimal) -> Money:
        """Scale the amount, e.g. unit price x quantity or price x 0.9."""
        if isinstance(factor, bool) or not isinstance(factor, (int, Decimal)):
            raise TypeError(
                f"Can only multiply Money by int or Decimal, got {type(factor).__name__}"
            )
        if isinstance(factor, Decimal) and not factor.is_finite():
            raise InvalidAmountError(f"Multiplication factor must be finite, got {factor}")
        if factor < 0:
            raise NegativeFactorError(f"Multiplication factor cannot be negative, got {factor}")
        return Money(self.amount * factor, self.currency)

    def round(self, decimals: int = 2) -> Money:
        """Round half-to-even; the result is not re-validated."""
        return Money(round(self.amount, decimals), self.currency)

    def __add__(self, other: Money) -> Money:
        return self.add(other)

    def __sub__(self, other: Money) -> Money:
        return self.subtract(other)

    def __mul__(self, factor: int | Decimal) -> Money:
        return self.multiply(factor)

    # --- Comparison -----------------------------------------------------------

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other, "compare")
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._assert_same_currency(other, "compare")
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        self._assert_same_currency(other, "compare")
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        self._assert_same_currency(other, "compare")
        return self.amount >= other.amount

    @property
    def is_positive(self) -> bool:
        return self.amount > 0

    @property
    def is_zero(self) -> bool:
        return self.amount == 0

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        places = max_decimal_places(self.currency)
        formatted = f"{self.amount:,.{places}f}"
        symbol = _CURRENCY_SYMBOLS.get(self.currency)
        if symbol is None:
            return f"{formatted} {self.currency}"
        return f"{symbol}{formatted}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money, operation: str) -> None:
        if not isinstance(other, Money):
            raise TypeError(f"Cannot {operation} Money and {type(other).__name__}")
        if self.currency != other.currency:
            raise CurrencyMismatchError(
                f"Cannot {operation} different currencies: {self.currency} and {other.currency}"
            )


def _to_decimal(amount: str | float | int | Decimal) -> Decimal:
    if isinstance(amount, bool):
        raise InvalidAmountError(f"Invalid money amount: {amount!r}")
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except (InvalidOperation, ValueError, TypeError) as exc:
        raise InvalidAmountError(f"Invalid money amount: {amount!r}") from exc
    if not value.is_finite():
        raise InvalidAmountError(f"Invalid money amount: {amount!r}")
    return value


@dataclass(frozen=True, order=True)
class StockQuantity:
    """A non-negative number of units on hand.

    Never below zero and never above ``MAX_STOCK_QUANTITY``; ``add`` and
    ``deduct`` return new instances and refuse to cross either bound.
    """

    value: int = 0

    def __post_init__(self) -> None:
        _require_int(self.value, "Stock quantity")
        result = validate_stock_quantity(self.value)
        if not result.is_valid:
            error = NegativeQuantityError if result.error_code == "STOCK_001" else StockOverflowError
            raise error(result.error_message, code=result.error_code)

    @staticmethod
    def create(value: int) -> StockQuantity:
        return StockQuantity(value)

    @staticmethod
    def zero() -> StockQuantity:
        return StockQuantity(0)

    @staticmethod
    def from_initial_stock(initial_stock: int) -> StockQuantity:
        return StockQuantity(initial_stock)

    # --- Stock movements ------------------------------------------------------

    def add(self, quantity: int) -> StockQuantity:
        """Restock by *quantity* units."""
        _require_int(quantity, "Quantity")
        if quantity < 0:
            raise NegativeQuantityError(f"Cannot add negative quantity {quantity}")
        if self.value > MAX_STOCK_QUANTITY - quantity:
            raise StockOverflowError(
                f"Stock quantity would exceed maximum value {MAX_STOCK_QUANTITY}"
            )
        return StockQuantity(self.value + quantity)

    def deduct(self, quantity: int) -> StockQuantity:
        """Remove *quantity* units (sale, consumption)."""
        _require_int(quantity, "Quantity")
        if quantity < 0:
            raise NegativeQuantityError(f"Cannot deduct negative quantity {quantity}")
        if quantity > self.value:
            raise InsufficientStockError(
                f"Insufficient stock (available {self.value}, required {quantity})"
            )
        return StockQuantity(self.value - quantity)

    def set_to(self, quantity: int) -> StockQuantity:
        return StockQuantity(quantity)

    # --- Queries --------------------------------------------------------------

    def is_sufficient(self, required_quantity: int) -> bool:
        # A zero or negative demand is never a satisfiable request.
        if required_quantity <= 0:
            return False
        return self.value >= required_quantity

    def is_low_stock(self, threshold: int = DEFAULT_LOW_STOCK_THRESHOLD) -> bool:
        if threshold < 0:
            raise NegativeQuantityError(f"Threshold cannot be negative, got {threshold}")
        return self.value <= threshold

    def is_critical_stock(self, critical_threshold: int = DEFAULT_CRITICAL_STOCK_THRESHOLD) -> bool:
        if critical_threshold < 0:
            raise NegativeQuantityError(
                f"Critical threshold cannot be negative, got {critical_threshold}"
            )
        return self.value <= critical_threshold

    @property
    def is_out_of_stock(self) -> bool:
        return self.value == 0

    @property
    def is_available(self) -> bool:
        return self.value > 0

    def get_restock_amount(self, target_level: int) -> int:
        """Units needed to bring stock up to *target_level* (0 if already there)."""
        if target_level < 0:
            raise NegativeQuantityError(f"Target level cannot be negative, got {target_level}")
        return max(0, target_level - self.value)

    def get_stock_percentage(self, max_capacity: int) -> float:
        if max_capacity <= 0:
            raise ValidationError(f"Max capacity must be greater than zero, got {max_capacity}")
        return self.value / max_capacity * 100

    # --- Display --------------------------------------------------------------

    def format(self, unit: str) -> str:
        return f"{self.value} {unit}"

    def __str__(self) -> str:
        return str(self.value)


def _require_int(value: object, label: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{label} must be an integer, got {type(value).__name__}")


_SKU_ERRORS = {
    "SKU_001": EmptySKUError,
    "SKU_002": SKUTooShortError,
    "SKU_003": SKUTooLongError,
    "SKU_004": InvalidSKUFormatError,
}


@dataclass(frozen=True, eq=False)
class ProductSKU:
    """Stock Keeping Unit, e.g. ``PROD-001``.

    The raw input is trimmed and upper-cased before validation, so
    ``ProductSKU(" prod-001 ").value == "PROD-001"``.  Equality and hashing
    ignore case.
    """

    value: str

    def __post_init__(self) -> None:
        if self.value is not None and not isinstance(self.value, str):
            raise InvalidSKUFormatError(
                f"SKU must be a string, got {type(self.value).__name__}", code="SKU_004"
            )
        result = validate_sku(self.value)
        if not result.is_valid:
            raise _SKU_ERRORS[result.error_code](result.error_message, code=result.error_code)
        object.__setattr__(self, "value", normalize_sku(self.value))

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def create(value: str) -> ProductSKU:
        return ProductSKU(value)

    @staticmethod
    def create_with_prefix(prefix: str, number: int, padding: int = 3) -> ProductSKU:
        """Build ``PREFIX-<number zero-padded>``, e.g. ``("prod", 7) -> PROD-007``."""
        if not isinstance(prefix, str) or not prefix.strip():
            raise EmptySKUError("SKU prefix cannot be empty", code="SKU_001")
        if number < 0:
            raise InvalidSKUFormatError(
                f"SKU number cannot be negative, got {number}", code="SKU_004"
            )
        return ProductSKU(f"{prefix.strip().upper()}-{str(number).zfill(padding)}")

    @staticmethod
    def generate_random(prefix: str = "PROD") -> ProductSKU:
        return ProductSKU.create_with_prefix(prefix, random.randint(1, 99998), 5)

    @staticmethod
    def is_valid(value: str | None) -> bool:
        return isinstance(value, str) and validate_sku(value).is_valid

    # --- Queries --------------------------------------------------------------

    def has_prefix(self, prefix: str) -> bool:
        if prefix is None or not prefix.strip():
            return False
        return self.value.upper().startswith(prefix.upper())

    @property
    def prefix(self) -> str:
        """Part before the first hyphen, or the whole SKU if there is none."""
        index = self.value.find("-")
        return self.value[:index] if index > 0 else self.value

    @property
    def suffix(self) -> str:
        index = self.value.find("-")
        if 0 < index < len(self.value) - 1:
            return self.value[index + 1:]
        return ""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProductSKU):
            return NotImplemented
        return self.value.upper() == other.value.upper()

    def __hash__(self) -> int:
        return hash(self.value.upper())

    def __str__(self) -> str:
        return self.value
