"""
Domain exceptions for the goldbook ledger.

Provides specific exception types for different error scenarios.
"""

from typing import Any


class GoldbookError(Exception):
    """Base exception for all goldbook errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Storage Exceptions
class StorageError(GoldbookError):
    """Base exception for storage operations."""

    pass


class RecordNotFoundError(StorageError):
    """Base exception for a missing ledger record."""

    pass


class InvoiceNotFoundError(RecordNotFoundError):
    """Invoice not found in the record store."""

    def __init__(self, invoice_id: str):
        super().__init__(
            f"Invoice not found: {invoice_id}",
            code="INVOICE_NOT_FOUND",
            details={"invoice_id": invoice_id},
        )


class TraderNotFoundError(RecordNotFoundError):
    """Trader not found in the record store."""

    def __init__(self, trader_id: str):
        super().__init__(
            f"Trader not found: {trader_id}",
            code="TRADER_NOT_FOUND",
            details={"trader_id": trader_id},
        )


class TraderTransactionNotFoundError(RecordNotFoundError):
    """Trader transaction not found in the record store."""

    def __init__(self, transaction_id: str):
        super().__init__(
            f"Trader transaction not found: {transaction_id}",
            code="TRADER_TRANSACTION_NOT_FOUND",
            details={"transaction_id": transaction_id},
        )


class TransactionNotFoundError(RecordNotFoundError):
    """General treasury transaction not found in the record store."""

    def __init__(self, transaction_id: str):
        super().__init__(
            f"Transaction not found: {transaction_id}",
            code="TRANSACTION_NOT_FOUND",
            details={"transaction_id": transaction_id},
        )


class DatabaseError(StorageError):
    """Database operation failed."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            f"Database error during {operation}: {error}",
            code="DATABASE_ERROR",
            details={"operation": operation, "error": error},
        )


# Validation Exceptions
class ValidationError(GoldbookError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value is not None else None,
            },
        )


class InvalidAmountError(ValidationError):
    """Amount entered by the user is not a finite positive number."""

    def __init__(self, amount: Any, field: str = "amount"):
        super().__init__(
            field=field,
            message="Amount must be a finite number greater than zero",
            value=amount,
        )
        self.code = "INVALID_AMOUNT"


class PaymentExceedsBalanceError(ValidationError):
    """Payment is larger than what is outstanding on the invoice."""

    def __init__(self, invoice_id: str, amount: float, outstanding: float):
        super().__init__(
            field="amount",
            message=(
                f"Payment of {amount:.2f} exceeds the outstanding balance "
                f"of {outstanding:.2f}"
            ),
            value=amount,
        )
        self.code = "PAYMENT_EXCEEDS_BALANCE"
        self.details.update(
            {
                "invoice_id": invoice_id,
                "outstanding": outstanding,
            }
        )


class InvalidItemError(ValidationError):
    """Invoice item combines category, karat and sale type illegally."""

    def __init__(self, message: str, value: Any = None):
        super().__init__(field="items", message=message, value=value)
        self.code = "INVALID_ITEM"


class InvalidPhoneError(ValidationError):
    """Customer phone number cannot receive an invoice message."""

    def __init__(self, phone: str | None):
        super().__init__(
            field="phone",
            message="Phone number must be exactly 11 digits",
            value=phone,
        )
        self.code = "INVALID_PHONE"


class ConfigurationError(GoldbookError):
    """Configuration error."""

    pass
