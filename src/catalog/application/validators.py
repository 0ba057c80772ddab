"""Request validation for incoming product commands.

Runs before any domain object is built and reports *every* invalid field at
once, which is friendlier for a user filling in a form or CLI options than
the first-failure behaviour of the value objects.  The checks come from
``catalog.domain.validation_rules``, the same functions the value objects
use, plus two request-only rules: prices must be strictly positive and free
text may not contain markup characters.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from catalog.application.dto import CreateProductSpec, UpdateProductSpec
from catalog.domain.exceptions import ValidationError
from catalog.domain.validation_rules import (
    ValidationResult,
    validate_category_id,
    validate_currency,
    validate_decimal_precision,
    validate_no_forbidden_characters,
    validate_product_description,
    validate_product_name,
    validate_request_price,
    validate_sku,
    validate_stock_quantity,
)


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str
    code: str


class RequestValidationError(ValidationError):
    """One or more request fields failed validation."""

    def __init__(self, errors: list[FieldError]) -> None:
        super().__init__(
            "; ".join(f"{e.field}: {e.message}" for e in errors),
            code="REQUEST_INVALID",
        )
        self.errors = list(errors)

    @property
    def fields(self) -> list[str]:
        return [e.field for e in self.errors]


def validate_create_product(spec: CreateProductSpec) -> None:
    """Raise RequestValidationError listing every invalid field of *spec*."""
    errors: list[FieldError] = []

    _collect(errors, "name", validate_product_name(spec.name))
    _collect(errors, "name", validate_no_forbidden_characters(spec.name))
    _check_description(errors, spec.description)
    _check_price(errors, spec.price, spec.currency)
    _collect(errors, "sku", validate_sku(spec.sku))
    _check_stock(errors, spec.stock_quantity)
    _collect(errors, "category_id", validate_category_id(spec.category_id))

    if errors:
        raise RequestValidationError(errors)


def validate_update_product(spec: UpdateProductSpec, currency: str) -> None:
    """Validate only the fields that are set; an empty update is an error.

    *currency* is the product's current currency, used for the precision
    check of a new price.
    """
    if spec.is_empty():
        raise RequestValidationError(
            [FieldError("update", "At least one field must be provided", "REQUEST_EMPTY")]
        )

    errors: list[FieldError] = []
    if spec.name is not None:
        _collect(errors, "name", validate_product_name(spec.name))
        _collect(errors, "name", validate_no_forbidden_characters(spec.name))
    if spec.description is not None:
        _check_description(errors, spec.description)
    if spec.price is not None:
        _check_price(errors, spec.price, currency)
    if spec.stock_quantity is not None:
        _check_stock(errors, spec.stock_quantity)
    if spec.category_id is not None:
        _collect(errors, "category_id", validate_category_id(spec.category_id))

    if errors:
        raise RequestValidationError(errors)


# --- Internal helpers ---------------------------------------------------------


def _collect(errors: list[FieldError], field: str, result: ValidationResult) -> None:
    if not result.is_valid:
        errors.append(FieldError(field, result.error_message, result.error_code))


def _check_description(errors: list[FieldError], description: str | None) -> None:
    _collect(errors, "description", validate_product_description(description))
    _collect(errors, "description", validate_no_forbidden_characters(description))


def _check_price(errors: list[FieldError], raw: object, currency: str) -> None:
    amount = _parse_amount(raw)
    if amount is None:
        errors.append(FieldError("price", f"Invalid price: {raw!r}", "MONEY_000"))
        return
    _collect(errors, "price", validate_request_price(amount))
    currency_result = validate_currency(currency)
    _collect(errors, "currency", currency_result)
    if currency_result.is_valid:
        _collect(errors, "price", validate_decimal_precision(amount, currency))


def _check_stock(errors: list[FieldError], raw: object) -> None:
    if isinstance(raw, bool) or not isinstance(raw, int):
        errors.append(
            FieldError("stock_quantity", "Stock quantity must be an integer", "STOCK_000")
        )
        return
    _collect(errors, "stock_quantity", validate_stock_quantity(raw))


def _parse_amount(raw: object) -> Decimal | None:
    if isinstance(raw, bool):
        return None
    try:
        amount = raw if isinstance(raw, Decimal) else Decimal(str(raw))
    except (InvalidOperation, ValueError, TypeError):
        return None
    return amount if amount.is_finite() else None
