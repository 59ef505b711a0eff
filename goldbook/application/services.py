"""
Service factory functions for dependency injection.

Core services are configured from LedgerSettings here so that use cases
never read settings themselves. Instances are cached; reset_services()
drops them (tests change settings between runs).
"""

from goldbook.config import get_settings
from goldbook.core.entities import TraderCategory
from goldbook.core.services import (
    InvoiceLedgerService,
    SummaryService,
    TraderLedgerService,
    TreasuryService,
    UnifiedLogService,
)

_invoice_ledger_service: InvoiceLedgerService | None = None
_trader_ledger_service: TraderLedgerService | None = None
_treasury_service: TreasuryService | None = None
_summary_service: SummaryService | None = None
_unified_log_service: UnifiedLogService | None = None


def get_invoice_ledger_service() -> InvoiceLedgerService:
    global _invoice_ledger_service
    if _invoice_ledger_service is None:
        ledger = get_settings().ledger
        _invoice_ledger_service = InvoiceLedgerService(
            currency_epsilon=ledger.currency_epsilon,
            enforce_payment_ceiling=ledger.enforce_payment_ceiling,
        )
    return _invoice_ledger_service


def get_trader_ledger_service() -> TraderLedgerService:
    global _trader_ledger_service
    if _trader_ledger_service is None:
        ledger = get_settings().ledger
        _trader_ledger_service = TraderLedgerService(
            weight_epsilon=ledger.weight_epsilon,
            currency_epsilon=ledger.currency_epsilon,
        )
    return _trader_ledger_service


def get_treasury_service() -> TreasuryService:
    global _treasury_service
    if _treasury_service is None:
        _treasury_service = TreasuryService()
    return _treasury_service


def get_summary_service() -> SummaryService:
    global _summary_service
    if _summary_service is None:
        ledger = get_settings().ledger
        _summary_service = SummaryService(
            reference_karat=ledger.reference_karat,
            trend_days=ledger.trend_days,
            orphan_category=TraderCategory(ledger.deleted_trader_category),
        )
    return _summary_service


def get_unified_log_service() -> UnifiedLogService:
    global _unified_log_service
    if _unified_log_service is None:
        ledger = get_settings().ledger
        _unified_log_service = UnifiedLogService(
            deleted_trader_name=ledger.deleted_trader_name,
            deleted_trader_category=TraderCategory(ledger.deleted_trader_category),
        )
    return _unified_log_service


def reset_services() -> None:
    """Drop cached service instances."""
    global _invoice_ledger_service, _trader_ledger_service, _treasury_service
    global _summary_service, _unified_log_service
    _invoice_ledger_service = None
    _trader_ledger_service = None
    _treasury_service = None
    _summary_service = None
    _unified_log_service = None
