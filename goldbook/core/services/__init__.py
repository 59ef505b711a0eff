"""
Core ledger services.

Layer-pure services that depend only on:
- goldbook/core/entities/*
- goldbook/core/exceptions.py

NO infrastructure imports and no I/O. Everything except LedgerBook is a
pure function of the records it is given.
"""

from goldbook.core.services.invoice_ledger import BalanceState, InvoiceLedgerService
from goldbook.core.services.invoice_messages import (
    build_invoice_message,
    build_whatsapp_link,
    format_currency,
    validate_customer_phone,
)
from goldbook.core.services.ledger_book import LedgerBook
from goldbook.core.services.summary import SummaryService, gold_equivalent
from goldbook.core.services.time_window import (
    TimeRange,
    TimeWindow,
    filter_by_window,
    in_window,
    resolve_window,
)
from goldbook.core.services.trader_ledger import TraderLedgerService
from goldbook.core.services.treasury import TreasuryService
from goldbook.core.services.unified_log import DELETED_TRADER_NAME, UnifiedLogService

__all__ = [
    # Record store
    "LedgerBook",
    # Invoice ledger
    "InvoiceLedgerService",
    "BalanceState",
    "build_invoice_message",
    "build_whatsapp_link",
    "format_currency",
    "validate_customer_phone",
    # Trader accounts
    "TraderLedgerService",
    # Treasury
    "TreasuryService",
    # Summaries
    "SummaryService",
    "gold_equivalent",
    # Unified log
    "UnifiedLogService",
    "DELETED_TRADER_NAME",
    # Time windows
    "TimeRange",
    "TimeWindow",
    "resolve_window",
    "in_window",
    "filter_by_window",
]
