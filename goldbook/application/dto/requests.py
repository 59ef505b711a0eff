"""Request DTOs for API endpoints.

Pydantic v2 models for direct user entry. Weights and amounts a user
types must be strictly positive; optional numeric fields default to 0.
These are the ONLY contracts between API and use cases.
"""

import datetime as dt
from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator

from goldbook.core.entities import (
    Karat,
    PaymentDirection,
    PaymentMethod,
    ProductCategory,
    SaleChannel,
    SaleType,
    TraderCategory,
    TransactionType,
    WorkmanshipType,
)


def _day_start(day: dt.date | None) -> dt.datetime:
    """Entry forms pick a calendar day; records store its midnight."""
    return dt.datetime.combine(day or dt.date.today(), dt.time.min)


# --- Invoices ---


class CustomerRequest(BaseModel):
    name: str = Field(default="", description="Customer name")
    phone: str = Field(default="", description="Customer phone (11 digits for messaging)")
    address: str = Field(default="", description="Delivery address")


class InvoiceItemRequest(BaseModel):
    """One invoice line as typed into the sales form."""

    sale_type: SaleType = Field(..., description="SELL or BUY_BACK")
    category: ProductCategory = Field(..., description="GOLD or SILVER")
    karat: Karat | None = Field(default=None, description="18, 21 or 24; required for gold")
    weight: float = Field(..., gt=0, description="Weight in grams")
    price_per_gram: float = Field(..., ge=0, description="Price per gram")
    description: str | None = Field(default=None, description="Piece description")

    workmanship_type: WorkmanshipType = Field(
        default=WorkmanshipType.PER_GRAM,
        description="Sell lines only",
    )
    workmanship_value: float = Field(default=0.0, ge=0, description="Sell lines only")
    discount_percentage: float = Field(
        default=0.0,
        ge=0,
        le=100,
        description="Buy-back of 18k/21k gold and silver",
    )
    cash_back_per_gram: float = Field(default=0.0, ge=0, description="Buy-back of 24k gold")

    @model_validator(mode="after")
    def check_karat(self) -> "InvoiceItemRequest":
        if self.category == ProductCategory.GOLD and self.karat is None:
            raise ValueError("gold items require a karat")
        return self

    def to_entity_data(self) -> dict[str, Any]:
        """Only the fields that belong to the item's variant."""
        data: dict[str, Any] = {
            "sale_type": self.sale_type,
            "category": self.category,
            "karat": self.karat if self.category == ProductCategory.GOLD else None,
            "weight": self.weight,
            "price_per_gram": self.price_per_gram,
            "description": self.description.strip() if self.description else None,
        }
        if self.sale_type == SaleType.SELL:
            data["workmanship_type"] = self.workmanship_type
            data["workmanship_value"] = self.workmanship_value
        elif self.category == ProductCategory.GOLD and self.karat == Karat.K24:
            data["cash_back_per_gram"] = self.cash_back_per_gram
        else:
            data["discount_percentage"] = self.discount_percentage
        return data


class InvoicePaymentRequest(BaseModel):
    """
    A payment on the sales form.

    Entries carrying the id of a payment already on the invoice keep that
    payment as stored; entries without an id are new payments dated now.
    """

    id: str | None = Field(default=None, description="Id of a stored payment to keep")
    amount: float | None = Field(default=None, gt=0, description="Positive amount")
    method: PaymentMethod = Field(default=PaymentMethod.CASH)
    direction: PaymentDirection = Field(
        default=PaymentDirection.DEBT,
        description="DEBT: customer pays the store; CREDIT: store pays the customer",
    )

    @model_validator(mode="after")
    def check_amount(self) -> "InvoicePaymentRequest":
        if self.id is None and self.amount is None:
            raise ValueError("new payments require an amount")
        return self

    @property
    def signed_amount(self) -> float:
        amount = self.amount or 0.0
        return amount if self.direction == PaymentDirection.DEBT else -amount


class SaveInvoiceRequest(BaseModel):
    """Create or fully replace an invoice."""

    date: dt.date | None = Field(
        default=None,
        description="Invoice day; today for new invoices, the stored date on update",
    )
    channel: SaleChannel = Field(default=SaleChannel.STORE)
    customer: CustomerRequest = Field(default_factory=CustomerRequest)
    items: list[InvoiceItemRequest] = Field(..., min_length=1)
    payments: list[InvoicePaymentRequest] | None = Field(
        default=None,
        description="Omit on update to keep the stored payments",
    )
    shipping: float = Field(default=0.0, ge=0, description="Online orders only")
    notes: str = Field(default="")

    @property
    def invoice_date(self) -> dt.datetime:
        return _day_start(self.date)


class ApplyPaymentRequest(BaseModel):
    """Settle (part of) an open invoice balance."""

    amount: float = Field(..., description="Positive amount")
    method: PaymentMethod = Field(default=PaymentMethod.CASH)
    direction: PaymentDirection = Field(default=PaymentDirection.DEBT)


# --- Traders ---


class CreateTraderRequest(BaseModel):
    name: str = Field(..., min_length=1, description="Trader name")
    phone: str = Field(default="")
    category: TraderCategory = Field(default=TraderCategory.GOLD)


class UpdateTraderRequest(BaseModel):
    """Partial update; omitted fields keep their value."""

    name: str | None = Field(default=None, min_length=1)
    phone: str | None = None
    category: TraderCategory | None = None

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True, exclude_none=True)


class TraderTransactionRequest(BaseModel):
    """One exchange with a trader; every quantity defaults to 0."""

    date: dt.date | None = Field(default=None, description="Day of the exchange (defaults to today)")
    description: str = Field(default="")
    work_weight: float = Field(default=0.0, ge=0, description="Grams received")
    scrap_weight: float = Field(default=0.0, ge=0, description="Grams returned (gold)")
    workmanship_fee: float = Field(default=0.0, ge=0)
    silver_price_per_gram: float = Field(default=0.0, ge=0, description="Silver traders only")
    cash_payment: float = Field(default=0.0, ge=0, description="Cash paid to the trader")

    def to_entity_data(self) -> dict[str, Any]:
        data = self.model_dump(exclude={"date"})
        data["date"] = _day_start(self.date)
        data["description"] = self.description.strip()
        return data


class UpdateTraderTransactionRequest(BaseModel):
    date: dt.date | None = None
    description: str | None = None
    work_weight: float | None = Field(default=None, ge=0)
    scrap_weight: float | None = Field(default=None, ge=0)
    workmanship_fee: float | None = Field(default=None, ge=0)
    silver_price_per_gram: float | None = Field(default=None, ge=0)
    cash_payment: float | None = Field(default=None, ge=0)

    def changes(self) -> dict[str, Any]:
        data = self.model_dump(exclude_unset=True, exclude_none=True)
        if "date" in data:
            data["date"] = _day_start(data["date"])
        return data


# --- General transactions ---


class GeneralTransactionRequest(BaseModel):
    """A deposit into or an expense out of one wallet."""

    type: Literal[TransactionType.DEPOSIT, TransactionType.EXPENSE]
    amount: float = Field(..., gt=0)
    description: str = Field(default="")
    payment_method: PaymentMethod = Field(default=PaymentMethod.CASH)
    date: dt.date | None = Field(default=None, description="Defaults to today")

    @property
    def transaction_date(self) -> dt.datetime:
        return _day_start(self.date)
