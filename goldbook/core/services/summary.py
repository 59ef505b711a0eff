"""
Summary aggregator.

Time-windowed sales and purchase statistics, store-wide inventory and
the daily trend series. The time window is applied by the caller through
the shared predicate in time_window; inventory always uses all records.
"""

from collections.abc import Iterable
from datetime import date, datetime, timedelta

from goldbook.config import get_logger
from goldbook.core.entities import (
    Invoice,
    Karat,
    LedgerSnapshot,
    ProductCategory,
    PurchasesSummary,
    SaleChannel,
    SalesSummary,
    SaleType,
    StoreInventory,
    Trader,
    TraderCategory,
    TraderTransaction,
    Transaction,
    TransactionType,
    TrendPoint,
)
from goldbook.core.services.time_window import TimeWindow, filter_by_window

logger = get_logger(__name__)


def gold_equivalent(weight: float, karat: Karat | int, reference_karat: int = 21) -> float:
    """Express a gold weight at the reference karat (pure gold content is preserved)."""
    return weight * int(karat) / reference_karat


class SummaryService:
    """Report aggregation over a ledger snapshot."""

    DEFAULT_REFERENCE_KARAT = 21
    DEFAULT_TREND_DAYS = 30

    def __init__(
        self,
        reference_karat: int | None = None,
        trend_days: int | None = None,
        orphan_category: TraderCategory = TraderCategory.GOLD,
    ):
        self._reference_karat = reference_karat or self.DEFAULT_REFERENCE_KARAT
        self._trend_days = trend_days or self.DEFAULT_TREND_DAYS
        self._orphan_category = orphan_category

    @property
    def reference_karat(self) -> int:
        return self._reference_karat

    def compute_sales_summary(self, invoices: Iterable[Invoice]) -> SalesSummary:
        """Route every invoice item into its channel/direction/category/karat bucket."""
        summary = SalesSummary()

        for invoice in invoices:
            channel = summary.online if invoice.channel == SaleChannel.ONLINE else summary.store
            for item in invoice.items:
                if item.sale_type == SaleType.SELL:
                    if item.category == ProductCategory.SILVER:
                        summary.silver.add(item.weight, item.total)
                    else:
                        channel.bucket(item.karat).add(item.weight, item.total)
                else:
                    if item.category == ProductCategory.SILVER:
                        summary.buy_back.silver.add(item.weight, item.total)
                    else:
                        summary.buy_back.bucket(item.karat).add(item.weight, item.total)

        ref = self._reference_karat
        summary.store_gold21_equivalent = summary.store.equivalent_weight(ref)
        summary.online_gold21_equivalent = summary.online.equivalent_weight(ref)
        summary.buy_back_gold21_equivalent = summary.buy_back.equivalent_weight(ref)
        return summary

    def compute_purchases_summary(
        self,
        traders: Iterable[Trader],
        trader_transactions: Iterable[TraderTransaction],
    ) -> PurchasesSummary:
        """Split trader activity by the category of the trader it belongs to."""
        categories = {t.id: t.category for t in traders}
        summary = PurchasesSummary()
        gold, silver = summary.gold, summary.silver

        for txn in trader_transactions:
            category = categories.get(txn.trader_id, self._orphan_category)
            if category == TraderCategory.SILVER:
                silver.total_work_weight += txn.work_weight
                silver.total_required_cash += txn.silver_required_cash
                silver.total_cash_paid += txn.cash_payment
            else:
                gold.total_work_weight += txn.work_weight
                gold.total_scrap_weight += txn.scrap_weight
                gold.total_workmanship_fee += txn.workmanship_fee

        gold.net_gold_balance = gold.total_work_weight - gold.total_scrap_weight
        silver.net_cash_balance = silver.total_required_cash - silver.total_cash_paid
        return summary

    def compute_store_inventory(self, snapshot: LedgerSnapshot) -> StoreInventory:
        """
        Physical stock on hand over all records, never time-filtered.

        gold = trader gold balance + bought-back gold - sold gold (all at
        the reference karat); silver = trader silver work + bought-back
        silver - sold silver.
        """
        sales = self.compute_sales_summary(snapshot.invoices)
        purchases = self.compute_purchases_summary(snapshot.traders, snapshot.trader_transactions)

        gold = (
            purchases.gold.net_gold_balance
            + sales.buy_back_gold21_equivalent
            - (sales.store_gold21_equivalent + sales.online_gold21_equivalent)
        )
        silver = (
            purchases.silver.total_work_weight
            + sales.buy_back.silver.weight
            - sales.silver.weight
        )
        return StoreInventory(total_gold_in_store=gold, total_silver_in_store=silver)

    def summarize(
        self,
        snapshot: LedgerSnapshot,
        window: TimeWindow,
    ) -> tuple[SalesSummary, PurchasesSummary]:
        """Sales and purchases summaries for the records inside the window."""
        invoices = filter_by_window(snapshot.invoices, window)
        trader_transactions = filter_by_window(snapshot.trader_transactions, window)
        logger.debug(
            "summary_window_applied",
            invoices=len(invoices),
            trader_transactions=len(trader_transactions),
        )
        return (
            self.compute_sales_summary(invoices),
            self.compute_purchases_summary(snapshot.traders, trader_transactions),
        )

    def compute_trend(
        self,
        snapshot: LedgerSnapshot,
        today: date | None = None,
    ) -> list[TrendPoint]:
        """
        One point per calendar day for the trailing trend_days days, oldest first.

        sales is the SELL revenue of the day; purchases is buy-back value
        plus trader cash payments plus expenses. Days without activity are
        zero-filled.
        """
        today = today or datetime.now().date()
        first_day = today - timedelta(days=self._trend_days - 1)
        points = {
            first_day + timedelta(days=offset): TrendPoint(day=first_day + timedelta(days=offset))
            for offset in range(self._trend_days)
        }

        for invoice in snapshot.invoices:
            point = points.get(invoice.date.date())
            if point is not None:
                point.sales += invoice.sell_total
                point.purchases += invoice.buy_back_total

        for txn in snapshot.trader_transactions:
            point = points.get(txn.date.date())
            if point is not None:
                point.purchases += txn.cash_payment

        for general in _expenses(snapshot.transactions):
            point = points.get(general.date.date())
            if point is not None:
                point.purchases += general.amount

        return [points[day] for day in sorted(points)]


def _expenses(transactions: Iterable[Transaction]) -> list[Transaction]:
    return [t for t in transactions if t.type == TransactionType.EXPENSE]
