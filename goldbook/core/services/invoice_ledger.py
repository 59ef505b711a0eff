"""
Invoice ledger service.

Layer-pure service keeping each invoice financially consistent as items
and payments change. NO infrastructure imports.
"""

import math
from collections.abc import Iterable
from datetime import datetime
from enum import Enum
from typing import Any

from goldbook.config import get_logger
from goldbook.core.entities import (
    Invoice,
    InvoiceItem,
    InvoiceTotals,
    Payment,
    PaymentDirection,
    PaymentMethod,
    compute_invoice_totals,
)
from goldbook.core.exceptions import InvalidAmountError, PaymentExceedsBalanceError

logger = get_logger(__name__)


class BalanceState(str, Enum):
    """Who owes whom on an invoice."""

    DUE = "DUE"  # customer still owes the store
    OWED_TO_CUSTOMER = "OWED_TO_CUSTOMER"
    SETTLED = "SETTLED"


class InvoiceLedgerService:
    """
    Pricing, payments and balance queries for sales invoices.

    Derived invoice fields are always recomputed from items and payments;
    nothing here trusts a stored net total or balance.
    """

    # Tolerance when comparing money against zero
    DEFAULT_CURRENCY_EPSILON = 0.01

    def __init__(
        self,
        currency_epsilon: float | None = None,
        enforce_payment_ceiling: bool = True,
    ):
        self._epsilon = (
            currency_epsilon
            if currency_epsilon is not None
            else self.DEFAULT_CURRENCY_EPSILON
        )
        self._enforce_ceiling = enforce_payment_ceiling

    @property
    def currency_epsilon(self) -> float:
        return self._epsilon

    # --- pricing ---

    def compute_item_total(self, item: InvoiceItem) -> float:
        """Line total of one item; non-positive weight prices at zero."""
        if item.weight <= 0:
            return 0.0
        return item.compute_total()

    def compute_invoice_totals(
        self,
        items: Iterable[InvoiceItem],
        payments: Iterable[Payment],
        shipping: float = 0.0,
    ) -> InvoiceTotals:
        return compute_invoice_totals(items, payments, shipping)

    def recompute(self, invoice: Invoice, **update: Any) -> Invoice:
        """Rebuild an invoice (optionally with changed fields) so every derived value is fresh."""
        data = invoice.model_dump()
        data.update(update)
        return Invoice.model_validate(data)

    # --- payments ---

    def validate_amount(self, amount: Any) -> float:
        """Coerce a typed payment amount, rejecting non-numeric, non-finite and non-positive input."""
        try:
            value = float(amount)
        except (TypeError, ValueError):
            raise InvalidAmountError(amount)
        if not math.isfinite(value) or value <= 0:
            raise InvalidAmountError(amount)
        return value

    def outstanding(self, invoice: Invoice, direction: PaymentDirection) -> float:
        """How much a payment in the given direction may settle."""
        if direction == PaymentDirection.DEBT:
            return invoice.remaining_balance
        return abs(invoice.remaining_balance)

    def validate_payment(
        self,
        invoice: Invoice,
        amount: Any,
        direction: PaymentDirection,
    ) -> float:
        """
        Check a payment before it is applied.

        Returns the amount as a float. With the ceiling enabled, a DEBT
        payment may not exceed the remaining balance and a CREDIT payment
        may not exceed its absolute value.

        Raises:
            InvalidAmountError: amount is not a positive finite number
            PaymentExceedsBalanceError: amount is above the outstanding balance
        """
        value = self.validate_amount(amount)
        if self._enforce_ceiling:
            outstanding = self.outstanding(invoice, direction)
            if value > outstanding + self._epsilon:
                raise PaymentExceedsBalanceError(
                    invoice_id=invoice.id,
                    amount=value,
                    outstanding=outstanding,
                )
        return value

    def apply_payment(
        self,
        invoice: Invoice,
        amount: Any,
        method: PaymentMethod = PaymentMethod.CASH,
        direction: PaymentDirection = PaymentDirection.DEBT,
        paid_at: datetime | None = None,
    ) -> Invoice:
        """
        Append a payment and return the recomputed invoice.

        DEBT appends +amount (customer pays the store), CREDIT appends
        -amount (store pays the customer). No ceiling is applied here;
        callers that want one use validate_payment first.
        """
        value = self.validate_amount(amount)
        signed = value if direction == PaymentDirection.DEBT else -value
        payment = Payment(method=method, amount=signed, date=paid_at or datetime.now())

        updated = self.recompute(invoice, payments=[*invoice.payments, payment])
        logger.debug(
            "payment_computed",
            invoice_id=invoice.id,
            amount=signed,
            method=method.value,
            remaining_balance=updated.remaining_balance,
        )
        return updated

    # --- balance queries ---

    def balance_state(self, invoice: Invoice) -> BalanceState:
        if invoice.remaining_balance > self._epsilon:
            return BalanceState.DUE
        if invoice.remaining_balance < -self._epsilon:
            return BalanceState.OWED_TO_CUSTOMER
        return BalanceState.SETTLED

    def is_settled(self, invoice: Invoice) -> bool:
        return self.balance_state(invoice) == BalanceState.SETTLED

    def customer_debts(self, invoices: Iterable[Invoice], query: str = "") -> list[Invoice]:
        """Invoices the customer still owes on, filtered by phone."""
        query = query.strip()
        return [
            inv
            for inv in invoices
            if inv.remaining_balance > self._epsilon
            and (not query or query in inv.customer.phone)
        ]

    def customer_credits(self, invoices: Iterable[Invoice], query: str = "") -> list[Invoice]:
        """Invoices where the store owes the customer, filtered by name or phone."""
        return [
            inv
            for inv in invoices
            if inv.remaining_balance < -self._epsilon and _matches_customer(inv, query)
        ]

    def search_invoices(self, invoices: Iterable[Invoice], query: str = "") -> list[Invoice]:
        """Case-insensitive customer name or phone match; a blank query matches all."""
        return [inv for inv in invoices if _matches_customer(inv, query)]

    def total_outstanding(self, invoices: Iterable[Invoice]) -> float:
        return sum(inv.remaining_balance for inv in self.customer_debts(invoices))

    def total_owed_to_customers(self, invoices: Iterable[Invoice]) -> float:
        return sum(abs(inv.remaining_balance) for inv in self.customer_credits(invoices))


def _matches_customer(invoice: Invoice, query: str) -> bool:
    needle = query.strip().lower()
    if not needle:
        return True
    return (
        needle in invoice.customer.name.lower()
        or needle in invoice.customer.phone
    )
