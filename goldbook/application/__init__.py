"""
Application layer - Use cases, DTOs, and service factories.

Use cases load the ledger snapshot through the store port, run the
mutation or report through the core services, and write the result
back. They are the only entry point for API handlers.
"""

from goldbook.application.services import (
    get_invoice_ledger_service,
    get_summary_service,
    get_trader_ledger_service,
    get_treasury_service,
    get_unified_log_service,
    reset_services,
)
from goldbook.application.use_cases import (
    ApplyInvoicePaymentUseCase,
    BuildDashboardUseCase,
    DeleteRecordUseCase,
    InvoiceQueriesUseCase,
    ManageTradersUseCase,
    RecordGeneralTransactionUseCase,
    RecordTraderTransactionUseCase,
    SaveInvoiceUseCase,
    TraderAccountsUseCase,
    TreasuryOverviewUseCase,
)

__all__ = [
    # Use Cases
    "SaveInvoiceUseCase",
    "ApplyInvoicePaymentUseCase",
    "InvoiceQueriesUseCase",
    "DeleteRecordUseCase",
    "ManageTradersUseCase",
    "RecordTraderTransactionUseCase",
    "RecordGeneralTransactionUseCase",
    "BuildDashboardUseCase",
    "TreasuryOverviewUseCase",
    "TraderAccountsUseCase",
    # Service factories
    "get_invoice_ledger_service",
    "get_trader_ledger_service",
    "get_treasury_service",
    "get_summary_service",
    "get_unified_log_service",
    "reset_services",
]
