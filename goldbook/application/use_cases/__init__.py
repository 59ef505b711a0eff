"""Application use cases."""

from goldbook.application.use_cases.apply_invoice_payment import ApplyInvoicePaymentUseCase
from goldbook.application.use_cases.build_dashboard import BuildDashboardUseCase, DashboardResult
from goldbook.application.use_cases.delete_record import DeleteRecordResult, DeleteRecordUseCase
from goldbook.application.use_cases.invoice_queries import InvoiceMessage, InvoiceQueriesUseCase
from goldbook.application.use_cases.manage_traders import DeleteTraderResult, ManageTradersUseCase
from goldbook.application.use_cases.record_general_transaction import (
    RecordGeneralTransactionUseCase,
)
from goldbook.application.use_cases.record_trader_transaction import (
    RecordTraderTransactionUseCase,
)
from goldbook.application.use_cases.save_invoice import SaveInvoiceUseCase
from goldbook.application.use_cases.trader_accounts import TraderAccountsUseCase, TraderStatement
from goldbook.application.use_cases.treasury_overview import (
    TreasuryOverview,
    TreasuryOverviewUseCase,
)

__all__ = [
    "SaveInvoiceUseCase",
    "ApplyInvoicePaymentUseCase",
    "InvoiceQueriesUseCase",
    "InvoiceMessage",
    "DeleteRecordUseCase",
    "DeleteRecordResult",
    "ManageTradersUseCase",
    "DeleteTraderResult",
    "RecordTraderTransactionUseCase",
    "RecordGeneralTransactionUseCase",
    "BuildDashboardUseCase",
    "DashboardResult",
    "TreasuryOverviewUseCase",
    "TreasuryOverview",
    "TraderAccountsUseCase",
    "TraderStatement",
]
