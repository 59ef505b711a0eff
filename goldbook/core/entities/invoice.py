"""
Sales invoice domain entities.

Invoice items are a tagged variant: a sell line, a 24k gold buy-back
line (priced with a per-gram cash-back) and any other buy-back line
(priced with a percentage discount). Each variant computes its own
total; the invoice derives net total, amount paid and remaining balance
from its items and payments every time it is validated.
"""

from collections.abc import Iterable
from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    field_validator,
    model_validator,
)

from goldbook.core.entities.common import (
    LedgerModel,
    LenientFloat,
    LenientStr,
    LocalDateTime,
    new_id,
)
from goldbook.core.entities.payment import Payment


class SaleType(str, Enum):
    """Direction of an invoice line."""

    SELL = "SELL"
    BUY_BACK = "BUY_BACK"


class ProductCategory(str, Enum):
    """Metal category of an item or a trader."""

    GOLD = "GOLD"
    SILVER = "SILVER"


class Karat(int, Enum):
    """Gold purity grades handled by the store."""

    K18 = 18
    K21 = 21
    K24 = 24


class WorkmanshipType(str, Enum):
    """How the workmanship charge of a sold piece is priced."""

    PER_PIECE = "PER_PIECE"
    PER_GRAM = "PER_GRAM"


class SaleChannel(str, Enum):
    """Where the sale happened."""

    STORE = "STORE"
    ONLINE = "ONLINE"


class Customer(LedgerModel):
    """Customer contact details printed on the invoice."""

    name: LenientStr = ""
    phone: LenientStr = ""
    address: LenientStr = ""


class _InvoiceItemBase(LedgerModel):
    id: str = Field(default_factory=new_id)
    sale_type: SaleType
    category: ProductCategory
    karat: Karat | None = None
    weight: LenientFloat = 0.0  # grams
    price_per_gram: LenientFloat = 0.0
    description: str | None = None
    total: float = 0.0  # derived

    @model_validator(mode="before")
    @classmethod
    def drop_silver_karat(cls, data: Any) -> Any:
        """Silver has no karat; exported silver rows sometimes carry a stale one."""
        if isinstance(data, dict) and data.get("category") in (
            ProductCategory.SILVER,
            ProductCategory.SILVER.value,
        ):
            data = {**data, "karat": None}
        return data

    @model_validator(mode="after")
    def compute_line(self) -> "_InvoiceItemBase":
        """Validate the karat and compute total; non-positive weight prices at zero."""
        if self.category == ProductCategory.GOLD and self.karat is None:
            raise ValueError("gold items require a karat (18, 21 or 24)")
        self.total = self.compute_total() if self.weight > 0 else 0.0
        return self

    def compute_total(self) -> float:
        raise NotImplementedError

    @property
    def base_value(self) -> float:
        return self.weight * self.price_per_gram


class SellItem(_InvoiceItemBase):
    """A piece sold to the customer: metal value plus workmanship."""

    sale_type: SaleType = SaleType.SELL
    workmanship_type: WorkmanshipType = WorkmanshipType.PER_GRAM
    workmanship_value: LenientFloat = 0.0

    @field_validator("workmanship_type", mode="before")
    @classmethod
    def default_workmanship_type(cls, v: Any) -> Any:
        return WorkmanshipType.PER_GRAM if v in (None, "") else v

    @model_validator(mode="after")
    def check_sale_type(self) -> "SellItem":
        if self.sale_type != SaleType.SELL:
            raise ValueError("sell items must have sale_type SELL")
        return self

    @property
    def workmanship_cost(self) -> float:
        if self.workmanship_type == WorkmanshipType.PER_GRAM:
            return self.weight * self.workmanship_value
        return self.workmanship_value

    def compute_total(self) -> float:
        return self.base_value + self.workmanship_cost


class BuyBack24kItem(_InvoiceItemBase):
    """24k gold bought from the customer; cash-back raises the price paid per gram."""

    sale_type: SaleType = SaleType.BUY_BACK
    category: ProductCategory = ProductCategory.GOLD
    karat: Karat | None = Karat.K24
    cash_back_per_gram: LenientFloat = 0.0

    @model_validator(mode="after")
    def check_variant(self) -> "BuyBack24kItem":
        if (
            self.sale_type != SaleType.BUY_BACK
            or self.category != ProductCategory.GOLD
            or self.karat != Karat.K24
        ):
            raise ValueError("cash-back pricing applies to 24k gold buy-back only")
        return self

    def compute_total(self) -> float:
        return self.weight * (self.price_per_gram + self.cash_back_per_gram)


class BuyBackItem(_InvoiceItemBase):
    """18k/21k gold or silver bought from the customer at a discount."""

    sale_type: SaleType = SaleType.BUY_BACK
    discount_percentage: LenientFloat = 0.0

    @model_validator(mode="after")
    def check_variant(self) -> "BuyBackItem":
        if self.sale_type != SaleType.BUY_BACK:
            raise ValueError("buy-back items must have sale_type BUY_BACK")
        if self.category == ProductCategory.GOLD and self.karat == Karat.K24:
            raise ValueError("24k gold buy-back is priced with cash-back, not a discount")
        return self

    def compute_total(self) -> float:
        return self.base_value * (1 - self.discount_percentage / 100)


def _raw(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def item_variant(value: Any) -> str | None:
    """Resolve the variant tag of a raw or already-built invoice item."""
    if isinstance(value, dict):
        sale_type = value.get("saleType", value.get("sale_type"))
        category = value.get("category")
        karat = value.get("karat")
    else:
        sale_type = getattr(value, "sale_type", None)
        category = getattr(value, "category", None)
        karat = getattr(value, "karat", None)

    sale_type, category, karat = _raw(sale_type), _raw(category), _raw(karat)
    if sale_type == SaleType.SELL.value:
        return "sell"
    if sale_type != SaleType.BUY_BACK.value:
        return None
    if category == ProductCategory.GOLD.value and str(karat) == "24":
        return "buy_back_24k"
    return "buy_back"


InvoiceItem = Annotated[
    Union[
        Annotated[SellItem, Tag("sell")],
        Annotated[BuyBack24kItem, Tag("buy_back_24k")],
        Annotated[BuyBackItem, Tag("buy_back")],
    ],
    Discriminator(item_variant),
]


class InvoiceTotals(BaseModel):
    """Derived money figures of one invoice."""

    model_config = ConfigDict(frozen=True)

    net_total: float
    amount_paid: float
    remaining_balance: float


def compute_invoice_totals(
    items: Iterable[_InvoiceItemBase],
    payments: Iterable[Payment],
    shipping: float = 0.0,
) -> InvoiceTotals:
    """Net total is sells minus buy-backs plus shipping; payments are a signed sum."""
    sell_total = 0.0
    buy_back_total = 0.0
    for item in items:
        if item.sale_type == SaleType.SELL:
            sell_total += item.total
        else:
            buy_back_total += item.total

    net_total = sell_total - buy_back_total + shipping
    amount_paid = sum(p.amount for p in payments)
    return InvoiceTotals(
        net_total=net_total,
        amount_paid=amount_paid,
        remaining_balance=net_total - amount_paid,
    )


class Invoice(LedgerModel):
    """
    A sales / buy-back invoice with a customer.

    net_total, amount_paid and remaining_balance are recomputed on every
    validation; values supplied by the caller are overwritten.
    """

    id: str = Field(default_factory=new_id)
    date: LocalDateTime = Field(default_factory=datetime.now)
    channel: SaleChannel = SaleChannel.STORE
    customer: Customer = Field(default_factory=Customer)
    items: list[InvoiceItem] = Field(default_factory=list)
    payments: list[Payment] = Field(default_factory=list)
    shipping: LenientFloat = 0.0
    notes: LenientStr = ""

    # Derived
    net_total: float = 0.0
    amount_paid: float = 0.0
    remaining_balance: float = 0.0

    @model_validator(mode="after")
    def compute_totals(self) -> "Invoice":
        """Derive net total, amount paid and remaining balance."""
        totals = compute_invoice_totals(self.items, self.payments, self.effective_shipping)
        self.net_total = totals.net_total
        self.amount_paid = totals.amount_paid
        self.remaining_balance = totals.remaining_balance
        return self

    @property
    def effective_shipping(self) -> float:
        """Shipping only counts for online orders."""
        return self.shipping if self.channel == SaleChannel.ONLINE else 0.0

    @property
    def sell_total(self) -> float:
        return sum(i.total for i in self.items if i.sale_type == SaleType.SELL)

    @property
    def buy_back_total(self) -> float:
        return sum(i.total for i in self.items if i.sale_type == SaleType.BUY_BACK)

    @property
    def total_weight(self) -> float:
        return sum(i.weight for i in self.items)
