"""Build Dashboard Use Case - summaries, totals, inventory, trend and the unified log."""

from dataclasses import dataclass, field
from datetime import date, datetime

from goldbook.application.services import (
    get_summary_service,
    get_treasury_service,
    get_unified_log_service,
)
from goldbook.application.use_cases.base import LedgerUseCase
from goldbook.config import get_logger
from goldbook.core.entities import (
    DashboardTotals,
    LogEntry,
    PurchasesSummary,
    RecordType,
    SalesSummary,
    StoreInventory,
    TrendPoint,
    WalletBalances,
)
from goldbook.core.services import TimeRange, resolve_window

logger = get_logger(__name__)


@dataclass
class DashboardResult:
    """
    Everything the home screen shows.

    sales and purchases follow the selected window; inventory, totals,
    wallets and the trend always cover all records.
    """

    time_range: TimeRange
    sales: SalesSummary
    purchases: PurchasesSummary
    inventory: StoreInventory
    totals: DashboardTotals
    wallets: WalletBalances
    trend: list[TrendPoint] = field(default_factory=list)


class BuildDashboardUseCase(LedgerUseCase):
    """Read-only reporting over the current snapshot."""

    async def execute(
        self,
        time_range: TimeRange = TimeRange.ALL,
        start_date: date | None = None,
        end_date: date | None = None,
        now: datetime | None = None,
    ) -> DashboardResult:
        snapshot = await self._load_snapshot()
        now = now or datetime.now()
        window = resolve_window(time_range, now, start_date, end_date)

        summary = get_summary_service()
        treasury = get_treasury_service()
        sales, purchases = summary.summarize(snapshot, window)

        result = DashboardResult(
            time_range=time_range,
            sales=sales,
            purchases=purchases,
            inventory=summary.compute_store_inventory(snapshot),
            totals=treasury.compute_dashboard_totals(snapshot),
            wallets=treasury.wallets_for(snapshot),
            trend=summary.compute_trend(snapshot, today=now.date()),
        )
        logger.info(
            "dashboard_built",
            time_range=time_range.value,
            treasury_balance=result.totals.treasury_balance,
        )
        return result

    async def log(
        self,
        time_range: TimeRange = TimeRange.ALL,
        start_date: date | None = None,
        end_date: date | None = None,
        record_type: RecordType | None = None,
        query: str = "",
        now: datetime | None = None,
    ) -> list[LogEntry]:
        """Unified log, newest first, filtered by window, record type and text."""
        snapshot = await self._load_snapshot()
        window = resolve_window(time_range, now, start_date, end_date)

        service = get_unified_log_service()
        entries = service.merge_snapshot(snapshot)
        return service.filter(entries, window=window, record_type=record_type, query=query)

    async def trend(self, today: date | None = None) -> list[TrendPoint]:
        snapshot = await self._load_snapshot()
        return get_summary_service().compute_trend(snapshot, today=today)
