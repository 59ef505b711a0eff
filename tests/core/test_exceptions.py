"""Unit tests for domain exceptions."""

import pytest

from goldbook.core.exceptions import (
    ConfigurationError,
    DatabaseError,
    GoldbookError,
    InvalidAmountError,
    InvalidItemError,
    InvalidPhoneError,
    InvoiceNotFoundError,
    PaymentExceedsBalanceError,
    RecordNotFoundError,
    StorageError,
    TraderNotFoundError,
    TraderTransactionNotFoundError,
    TransactionNotFoundError,
    ValidationError,
)


class TestGoldbookError:
    def test_basic_initialization(self):
        error = GoldbookError("Something broke")
        assert error.message == "Something broke"
        assert error.code == "GoldbookError"
        assert error.details == {}
        assert str(error) == "Something broke"

    def test_to_dict(self):
        error = GoldbookError("msg", code="CODE", details={"a": 1})
        assert error.to_dict() == {"error": "CODE", "message": "msg", "details": {"a": 1}}


class TestNotFoundErrors:
    @pytest.mark.parametrize(
        ("exc_type", "code"),
        [
            (InvoiceNotFoundError, "INVOICE_NOT_FOUND"),
            (TraderNotFoundError, "TRADER_NOT_FOUND"),
            (TraderTransactionNotFoundError, "TRADER_TRANSACTION_NOT_FOUND"),
            (TransactionNotFoundError, "TRANSACTION_NOT_FOUND"),
        ],
    )
    def test_codes_and_hierarchy(self, exc_type, code):
        error = exc_type("abc")
        assert error.code == code
        assert "abc" in error.message
        assert isinstance(error, RecordNotFoundError)
        assert isinstance(error, StorageError)


class TestValidationErrors:
    def test_validation_error_details(self):
        error = ValidationError(field="name", message="required", value="")
        assert error.code == "VALIDATION_ERROR"
        assert error.details["field"] == "name"
        assert error.details["value"] == ""

    def test_long_values_are_truncated(self):
        error = ValidationError(field="notes", message="bad", value="x" * 500)
        assert len(error.details["value"]) == 100

    def test_invalid_amount(self):
        error = InvalidAmountError("abc")
        assert error.code == "INVALID_AMOUNT"
        assert isinstance(error, ValidationError)

    def test_payment_exceeds_balance(self):
        error = PaymentExceedsBalanceError(invoice_id="inv-1", amount=150, outstanding=100)
        assert error.code == "PAYMENT_EXCEEDS_BALANCE"
        assert error.details["outstanding"] == 100
        assert "150.00" in error.message

    def test_invalid_item_and_phone(self):
        assert InvalidItemError("bad karat").details["field"] == "items"
        assert InvalidPhoneError("123").code == "INVALID_PHONE"


def test_database_error():
    error = DatabaseError("save_snapshot", "disk full")
    assert error.code == "DATABASE_ERROR"
    assert error.details == {"operation": "save_snapshot", "error": "disk full"}


def test_configuration_error_is_not_storage():
    assert not isinstance(ConfigurationError("x"), StorageError)
