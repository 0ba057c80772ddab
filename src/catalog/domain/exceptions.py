"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the application and CLI layers can catch them uniformly and display
user-friendly messages.  Every exception carries a short machine-readable
``code``; rule-based failures reuse the code of the rule that rejected the
input (e.g. ``MONEY_003``), others default to the class name.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


# --- Money --------------------------------------------------------------------


class InvalidAmountError(ValidationError):
    """Amount negative, out of range, too precise, or currency unsupported."""


class CurrencyMismatchError(ValidationError):
    """Binary money operation across two different currencies."""


class NegativeResultError(ValidationError):
    """Money subtraction would go below zero."""


class NegativeFactorError(ValidationError):
    """Money multiplied by a negative factor."""


# --- Stock --------------------------------------------------------------------


class NegativeQuantityError(ValidationError):
    """A stock quantity (or stock operand) is negative."""


class StockOverflowError(ValidationError):
    """Stock would exceed the maximum representable quantity."""


class InsufficientStockError(ValidationError):
    """More stock requested than is on hand."""


# --- SKU ----------------------------------------------------------------------


class EmptySKUError(ValidationError):
    pass


class SKUTooShortError(ValidationError):
    pass


class SKUTooLongError(ValidationError):
    pass


class InvalidSKUFormatError(ValidationError):
    pass


# --- Product / Category -------------------------------------------------------


class InvalidNameError(ValidationError):
    pass


class InvalidDescriptionError(ValidationError):
    pass


class InvalidCategoryError(ValidationError):
    """Category reference is not a positive integer."""


class InvalidCategoryNameError(ValidationError):
    pass


# --- Raised by the application layer ------------------------------------------


class DuplicateSKUError(ValidationError):
    """Another product already uses this SKU."""


class ProductDeletionError(ValidationError):
    """Product still has stock and cannot be deleted."""
