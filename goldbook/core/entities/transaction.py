"""General treasury transaction entities."""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import Field, field_validator

from goldbook.core.entities.common import (
    LedgerModel,
    LenientFloat,
    LenientStr,
    LocalDateTime,
    new_id,
)
from goldbook.core.entities.payment import PaymentMethod


class TransactionType(str, Enum):
    """Kinds of general transactions."""

    DEPOSIT = "DEPOSIT"
    EXPENSE = "EXPENSE"
    # Legacy kinds kept readable; they never move treasury money
    SALE = "SALE"
    PURCHASE = "PURCHASE"
    DEBT_PAYMENT = "DEBT_PAYMENT"
    CREDIT_PAYMENT = "CREDIT_PAYMENT"


class Transaction(LedgerModel):
    """A plain cash movement not tied to an invoice or a trader."""

    id: str = Field(default_factory=new_id)
    type: TransactionType
    date: LocalDateTime = Field(default_factory=datetime.now)
    description: LenientStr = ""
    amount: LenientFloat = 0.0  # always positive, type gives the direction
    payment_method: PaymentMethod = PaymentMethod.CASH

    @field_validator("payment_method", mode="before")
    @classmethod
    def default_to_cash(cls, v: Any) -> Any:
        return PaymentMethod.CASH if v in (None, "") else v

    @property
    def signed_amount(self) -> float:
        """Treasury effect: deposits add, expenses subtract, legacy kinds are neutral."""
        if self.type == TransactionType.DEPOSIT:
            return self.amount
        if self.type == TransactionType.EXPENSE:
            return -self.amount
        return 0.0
