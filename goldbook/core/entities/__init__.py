"""Core domain entities."""

from goldbook.core.entities.common import LedgerModel, new_id
from goldbook.core.entities.invoice import (
    BuyBack24kItem,
    BuyBackItem,
    Customer,
    Invoice,
    InvoiceItem,
    InvoiceTotals,
    Karat,
    ProductCategory,
    SaleChannel,
    SaleType,
    SellItem,
    WorkmanshipType,
    compute_invoice_totals,
)
from goldbook.core.entities.log_entry import (
    GeneralLogEntry,
    InvoiceLogEntry,
    LogEntry,
    RecordType,
    TraderTransactionLogEntry,
)
from goldbook.core.entities.payment import Payment, PaymentDirection, PaymentMethod
from goldbook.core.entities.snapshot import LedgerSnapshot
from goldbook.core.entities.summary import (
    BuyBackBuckets,
    DashboardTotals,
    GoldPurchasesSummary,
    KaratBuckets,
    PurchasesSummary,
    SalesSummary,
    SalesSummaryItem,
    SilverPurchasesSummary,
    StoreInventory,
    TraderAccount,
    TrendPoint,
    WalletBalances,
)
from goldbook.core.entities.trader import Trader, TraderCategory, TraderTransaction
from goldbook.core.entities.transaction import Transaction, TransactionType

__all__ = [
    "LedgerModel",
    "new_id",
    # Invoice entities
    "Invoice",
    "InvoiceItem",
    "InvoiceTotals",
    "SellItem",
    "BuyBack24kItem",
    "BuyBackItem",
    "Customer",
    "Karat",
    "ProductCategory",
    "SaleChannel",
    "SaleType",
    "WorkmanshipType",
    "compute_invoice_totals",
    # Payment entities
    "Payment",
    "PaymentMethod",
    "PaymentDirection",
    # Trader entities
    "Trader",
    "TraderCategory",
    "TraderTransaction",
    # General transactions
    "Transaction",
    "TransactionType",
    # Unified log
    "LogEntry",
    "RecordType",
    "InvoiceLogEntry",
    "GeneralLogEntry",
    "TraderTransactionLogEntry",
    # Derived reporting
    "SalesSummaryItem",
    "KaratBuckets",
    "BuyBackBuckets",
    "SalesSummary",
    "GoldPurchasesSummary",
    "SilverPurchasesSummary",
    "PurchasesSummary",
    "StoreInventory",
    "TrendPoint",
    "TraderAccount",
    "WalletBalances",
    "DashboardTotals",
    # Record store
    "LedgerSnapshot",
]
