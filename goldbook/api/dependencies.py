"""
Dependency injection container for FastAPI.

Every use case receives the ledger store from get_store, so tests can
point the whole API at another store with one dependency override.
"""

from fastapi import Depends

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
from goldbook.config import Settings, get_settings
from goldbook.core.interfaces import ILedgerStore
from goldbook.infrastructure.storage.sqlite import get_ledger_store


def get_app_settings() -> Settings:
    return get_settings()


async def get_store() -> ILedgerStore:
    """Ledger store used by all use cases."""
    return await get_ledger_store()


# Invoice use cases
def get_save_invoice_use_case(store: ILedgerStore = Depends(get_store)) -> SaveInvoiceUseCase:
    return SaveInvoiceUseCase(store)


def get_apply_payment_use_case(
    store: ILedgerStore = Depends(get_store),
) -> ApplyInvoicePaymentUseCase:
    return ApplyInvoicePaymentUseCase(store)


def get_invoice_queries_use_case(
    store: ILedgerStore = Depends(get_store),
) -> InvoiceQueriesUseCase:
    return InvoiceQueriesUseCase(store)


def get_delete_record_use_case(store: ILedgerStore = Depends(get_store)) -> DeleteRecordUseCase:
    return DeleteRecordUseCase(store)


# Trader use cases
def get_manage_traders_use_case(
    store: ILedgerStore = Depends(get_store),
) -> ManageTradersUseCase:
    return ManageTradersUseCase(store)


def get_trader_transaction_use_case(
    store: ILedgerStore = Depends(get_store),
) -> RecordTraderTransactionUseCase:
    return RecordTraderTransactionUseCase(store)


def get_trader_accounts_use_case(
    store: ILedgerStore = Depends(get_store),
) -> TraderAccountsUseCase:
    return TraderAccountsUseCase(store)


# Treasury and reports
def get_general_transaction_use_case(
    store: ILedgerStore = Depends(get_store),
) -> RecordGeneralTransactionUseCase:
    return RecordGeneralTransactionUseCase(store)


def get_treasury_overview_use_case(
    store: ILedgerStore = Depends(get_store),
) -> TreasuryOverviewUseCase:
    return TreasuryOverviewUseCase(store)


def get_dashboard_use_case(store: ILedgerStore = Depends(get_store)) -> BuildDashboardUseCase:
    return BuildDashboardUseCase(store)
