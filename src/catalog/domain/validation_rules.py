"""Shared validation rules.

Pure functions that check a single business rule and return a
ValidationResult instead of raising.  Value objects call them from their
constructors and raise the matching domain exception; the application
request validators call the very same functions to collect field errors.
Thresholds and error codes therefore live in exactly one place.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal

# ---------------------------------------------------------------------------
# Business constants
# ---------------------------------------------------------------------------
MAX_MONEY_AMOUNT = Decimal("999999999")
SUPPORTED_CURRENCIES = frozenset(
    {"JPY", "USD", "EUR", "GBP", "AUD", "CAD", "CHF", "CNY", "KRW"}
)
ZERO_DECIMAL_CURRENCIES = frozenset({"JPY", "KRW"})
DEFAULT_DECIMAL_PLACES = 2

MAX_STOCK_QUANTITY = 2_147_483_647

SKU_MIN_LENGTH = 3
SKU_MAX_LENGTH = 50
SKU_PATTERN = re.compile(r"^[A-Z0-9-]{3,50}$")

PRODUCT_NAME_MAX_LENGTH = 100
PRODUCT_DESCRIPTION_MAX_LENGTH = 500
CATEGORY_NAME_MAX_LENGTH = 50

FORBIDDEN_TEXT_CHARACTERS = frozenset('<>"\'&')


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    error_message: str | None = None
    error_code: str | None = None

    @staticmethod
    def success() -> ValidationResult:
        return _SUCCESS

    @staticmethod
    def failure(message: str, code: str) -> ValidationResult:
        return ValidationResult(False, message, code)


_SUCCESS = ValidationResult(True)


# ---------------------------------------------------------------------------
# Money
# ---------------------------------------------------------------------------


def max_decimal_places(currency: str) -> int:
    """Number of minor-unit digits allowed for *currency*."""
    if currency.strip().upper() in ZERO_DECIMAL_CURRENCIES:
        return 0
    return DEFAULT_DECIMAL_PLACES


def decimal_places(amount: Decimal) -> int:
    """Significant digits after the decimal point (trailing zeros ignored)."""
    exponent = amount.normalize().as_tuple().exponent
    if not isinstance(exponent, int) or exponent >= 0:
        return 0
    return -exponent


def validate_currency(currency: str | None) -> ValidationResult:
    if not isinstance(currency, str) or not currency.strip():
        return ValidationResult.failure("Currency code is required", "MONEY_005")
    if currency.strip().upper() not in SUPPORTED_CURRENCIES:
        return ValidationResult.failure(
            f"Unsupported currency code: {currency!r}", "MONEY_006"
        )
    return ValidationResult.success()


def validate_non_negative_amount(amount: Decimal) -> ValidationResult:
    if amount < 0:
        return ValidationResult.failure(
            f"Amount cannot be negative, got {amount}", "MONEY_001"
        )
    return ValidationResult.success()


def validate_positive_amount(amount: Decimal) -> ValidationResult:
    if amount <= 0:
        return ValidationResult.failure(
            f"Amount must be greater than zero, got {amount}", "MONEY_002"
        )
    return ValidationResult.success()


def validate_amount_range(amount: Decimal) -> ValidationResult:
    if amount < 0 or amount > MAX_MONEY_AMOUNT:
        return ValidationResult.failure(
            f"Amount must be between 0 and {MAX_MONEY_AMOUNT:,}, got {amount}",
            "MONEY_003",
        )
    return ValidationResult.success()


def validate_decimal_precision(amount: Decimal, currency: str) -> ValidationResult:
    allowed = max_decimal_places(currency)
    if decimal_places(amount) > allowed:
        return ValidationResult.failure(
            f"{currency.strip().upper()} allows at most {allowed} decimal places, "
            f"got {amount}",
            "MONEY_004",
        )
    return ValidationResult.success()


def validate_money(amount: Decimal, currency: str | None) -> ValidationResult:
    """Composite rule used by ``Money.from_amount``.

    Order: currency -> non-negative -> range -> precision.  The first
    failing rule wins.
    """
    result = validate_currency(currency)
    if not result.is_valid:
        return result
    for result in (
        validate_non_negative_amount(amount),
        validate_amount_range(amount),
        validate_decimal_precision(amount, currency),
    ):
        if not result.is_valid:
            return result
    return ValidationResult.success()


def validate_request_price(amount: Decimal) -> ValidationResult:
    """Composite rule for incoming prices: zero is not a valid list price."""
    for result in (validate_positive_amount(amount), validate_amount_range(amount)):
        if not result.is_valid:
            return result
    return ValidationResult.success()


# ---------------------------------------------------------------------------
# Stock
# ---------------------------------------------------------------------------


def validate_stock_quantity(value: int) -> ValidationResult:
    if value < 0:
        return ValidationResult.failure(
            f"Stock quantity cannot be negative, got {value}", "STOCK_001"
        )
    if value > MAX_STOCK_QUANTITY:
        return ValidationResult.failure(
            f"Stock quantity cannot exceed {MAX_STOCK_QUANTITY}", "STOCK_002"
        )
    return ValidationResult.success()


# ---------------------------------------------------------------------------
# SKU
# ---------------------------------------------------------------------------


def normalize_sku(raw: str) -> str:
    return raw.strip().upper()


def validate_sku(raw: str | None) -> ValidationResult:
    """Validate a raw SKU; normalization is applied before the checks."""
    if not isinstance(raw, str) or not raw.strip():
        return ValidationResult.failure("SKU cannot be empty", "SKU_001")
    value = normalize_sku(raw)
    if len(value) < SKU_MIN_LENGTH:
        return ValidationResult.failure(
            f"SKU must be at least {SKU_MIN_LENGTH} characters long", "SKU_002"
        )
    if len(value) > SKU_MAX_LENGTH:
        return ValidationResult.failure(
            f"SKU cannot exceed {SKU_MAX_LENGTH} characters", "SKU_003"
        )
    if not SKU_PATTERN.match(value):
        return ValidationResult.failure(
            "SKU can only contain letters, digits and hyphens", "SKU_004"
        )
    return ValidationResult.success()


# ---------------------------------------------------------------------------
# Product / Category
# ---------------------------------------------------------------------------


def validate_product_name(name: str | None) -> ValidationResult:
    if not isinstance(name, str) or not name.strip():
        return ValidationResult.failure("Product name is required", "PRODUCT_001")
    if len(name.strip()) > PRODUCT_NAME_MAX_LENGTH:
        return ValidationResult.failure(
            f"Product name cannot exceed {PRODUCT_NAME_MAX_LENGTH} characters",
            "PRODUCT_002",
        )
    return ValidationResult.success()


def validate_product_description(description: str | None) -> ValidationResult:
    if description is None:
        return ValidationResult.success()
    if not isinstance(description, str):
        return ValidationResult.failure("Product description must be text", "PRODUCT_003")
    if len(description.strip()) > PRODUCT_DESCRIPTION_MAX_LENGTH:
        return ValidationResult.failure(
            f"Product description cannot exceed {PRODUCT_DESCRIPTION_MAX_LENGTH} characters",
            "PRODUCT_003",
        )
    return ValidationResult.success()


def validate_category_id(category_id: int) -> ValidationResult:
    if isinstance(category_id, bool) or not isinstance(category_id, int) or category_id <= 0:
        return ValidationResult.failure(
            f"Category ID must be a positive integer, got {category_id!r}",
            "PRODUCT_004",
        )
    return ValidationResult.success()


def validate_no_forbidden_characters(text: str | None) -> ValidationResult:
    if text and any(ch in FORBIDDEN_TEXT_CHARACTERS for ch in text):
        return ValidationResult.failure(
            "Text contains forbidden characters (< > \" ' &)", "PRODUCT_005"
        )
    return ValidationResult.success()


def validate_category_name(name: str | None) -> ValidationResult:
    if not isinstance(name, str) or not name.strip():
        return ValidationResult.failure("Category name is required", "CATEGORY_001")
    if len(name.strip()) > CATEGORY_NAME_MAX_LENGTH:
        return ValidationResult.failure(
            f"Category name cannot exceed {CATEGORY_NAME_MAX_LENGTH} characters",
            "CATEGORY_002",
        )
    return ValidationResult.success()
