"""Invoice payment entities."""

from datetime import datetime
from enum import Enum

from pydantic import ConfigDict, Field

from goldbook.core.entities.common import LedgerModel, LenientFloat, LocalDateTime, new_id


class PaymentMethod(str, Enum):
    """Payment rails, one treasury wallet each."""

    CASH = "CASH"
    E_WALLET = "E_WALLET"
    INSTAPAY = "INSTAPAY"
    FAWRY = "FAWRY"


class PaymentDirection(str, Enum):
    """Who pays whom when a payment is applied to an invoice."""

    DEBT = "DEBT"  # customer pays the store
    CREDIT = "CREDIT"  # store pays the customer


class Payment(LedgerModel):
    """
    One money movement tied to an invoice.

    The amount is signed: positive when the customer pays the store,
    negative when the store pays the customer. Payments are never edited;
    corrections are a delete followed by a new payment.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    method: PaymentMethod = PaymentMethod.CASH
    amount: LenientFloat = 0.0
    date: LocalDateTime = Field(default_factory=datetime.now)
