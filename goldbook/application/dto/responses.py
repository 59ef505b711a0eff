"""Response DTOs for API endpoints.

Pydantic v2 models for API response serialization. Derived reporting
entities (summaries, accounts, wallets) are plain data already and are
embedded as they are.
"""

from datetime import date, datetime

from pydantic import BaseModel, Field

from goldbook.core.entities import (
    DashboardTotals,
    Invoice,
    LogEntry,
    PurchasesSummary,
    SalesSummary,
    StoreInventory,
    Trader,
    TraderAccount,
    TraderTransaction,
    Transaction,
    TrendPoint,
    WalletBalances,
)
from goldbook.core.services import BalanceState, TimeRange

# --- Invoices ---


class CustomerResponse(BaseModel):
    name: str
    phone: str
    address: str


class InvoiceItemResponse(BaseModel):
    id: str
    sale_type: str
    category: str
    karat: int | None = None
    weight: float
    price_per_gram: float
    description: str | None = None
    total: float
    workmanship_type: str | None = None
    workmanship_value: float | None = None
    discount_percentage: float | None = None
    cash_back_per_gram: float | None = None


class PaymentResponse(BaseModel):
    id: str
    method: str
    amount: float
    date: datetime


class InvoiceResponse(BaseModel):
    """Invoice with freshly derived totals."""

    id: str
    date: datetime
    channel: str
    customer: CustomerResponse
    items: list[InvoiceItemResponse]
    payments: list[PaymentResponse]
    shipping: float
    notes: str
    net_total: float
    amount_paid: float
    remaining_balance: float
    balance_state: BalanceState

    @classmethod
    def from_entity(cls, invoice: Invoice, state: BalanceState) -> "InvoiceResponse":
        return cls(
            id=invoice.id,
            date=invoice.date,
            channel=invoice.channel.value,
            customer=CustomerResponse(**invoice.customer.model_dump()),
            items=[InvoiceItemResponse(**item.model_dump(mode="json")) for item in invoice.items],
            payments=[PaymentResponse(**p.model_dump(mode="json")) for p in invoice.payments],
            shipping=invoice.shipping,
            notes=invoice.notes,
            net_total=invoice.net_total,
            amount_paid=invoice.amount_paid,
            remaining_balance=invoice.remaining_balance,
            balance_state=state,
        )


class InvoiceListResponse(BaseModel):
    invoices: list[InvoiceResponse]
    total: int


class InvoiceMessageResponse(BaseModel):
    """Customer-facing summary text and the link that opens it in WhatsApp."""

    invoice_id: str
    phone: str
    message: str
    whatsapp_url: str


# --- Traders ---


class TraderResponse(BaseModel):
    id: str
    name: str
    phone: str
    category: str

    @classmethod
    def from_entity(cls, trader: Trader) -> "TraderResponse":
        return cls(
            id=trader.id,
            name=trader.name,
            phone=trader.phone,
            category=trader.category.value,
        )


class TraderTransactionResponse(BaseModel):
    id: str
    trader_id: str
    date: datetime
    description: str
    work_weight: float
    scrap_weight: float
    workmanship_fee: float
    silver_price_per_gram: float
    cash_payment: float

    @classmethod
    def from_entity(cls, txn: TraderTransaction) -> "TraderTransactionResponse":
        return cls(**txn.model_dump())


class TraderAccountResponse(BaseModel):
    trader: TraderResponse
    account: TraderAccount


class TraderDetailResponse(TraderAccountResponse):
    transactions: list[TraderTransactionResponse]


class TraderAccountsResponse(BaseModel):
    accounts: list[TraderAccountResponse]
    total: int


class DeleteTraderResponse(BaseModel):
    trader_id: str
    deleted_transactions: int


# --- Treasury ---


class TransactionResponse(BaseModel):
    id: str
    type: str
    date: datetime
    description: str
    amount: float
    payment_method: str

    @classmethod
    def from_entity(cls, txn: Transaction) -> "TransactionResponse":
        return cls(**txn.model_dump(mode="json"))


class WalletsResponse(BaseModel):
    cash: float
    e_wallet: float
    instapay: float
    fawry: float
    total: float

    @classmethod
    def from_entity(cls, wallets: WalletBalances) -> "WalletsResponse":
        return cls(**wallets.model_dump(), total=wallets.total)


class TreasuryResponse(BaseModel):
    wallets: WalletsResponse
    debts: list[InvoiceResponse]
    credits: list[InvoiceResponse]
    total_debts: float
    total_credits: float
    transactions: list[TransactionResponse]


# --- Reports ---


class DashboardResponse(BaseModel):
    """Home dashboard: windowed summaries, all-time inventory and totals, trend."""

    time_range: TimeRange
    totals: DashboardTotals
    sales_summary: SalesSummary
    purchases_summary: PurchasesSummary
    inventory: StoreInventory
    wallets: WalletsResponse
    trend: list[TrendPoint]


class LogEntryResponse(BaseModel):
    """One row of the unified log."""

    record_type: str
    id: str
    date: datetime
    description: str
    amount: float
    trader_name: str | None = None
    trader_category: str | None = None
    record: dict

    @classmethod
    def from_entry(cls, entry: LogEntry) -> "LogEntryResponse":
        record = entry.record
        trader_name = getattr(entry, "trader_name", None)
        trader_category = getattr(entry, "trader_category", None)

        if isinstance(record, Invoice):
            description = record.customer.name or record.customer.phone
            amount = record.net_total
        elif isinstance(record, TraderTransaction):
            description = record.description
            amount = record.cash_payment
        else:
            description = record.description
            amount = record.amount

        return cls(
            record_type=entry.record_type,
            id=entry.id,
            date=entry.date,
            description=description,
            amount=amount,
            trader_name=trader_name,
            trader_category=trader_category.value if trader_category else None,
            record=record.to_record(),
        )


class LogResponse(BaseModel):
    entries: list[LogEntryResponse]
    total: int


class DeleteRecordResponse(BaseModel):
    id: str
    record_type: str
    deleted: bool = True


# --- Common ---


class ComponentHealthResponse(BaseModel):
    name: str
    available: bool
    latency_ms: float | None = None
    error: str | None = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = "1.0.0"
    uptime_seconds: float
    database: ComponentHealthResponse | None = None


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. INVOICE_NOT_FOUND)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)


class TrendResponse(BaseModel):
    start: date
    end: date
    points: list[TrendPoint]
