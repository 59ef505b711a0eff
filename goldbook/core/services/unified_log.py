"""
Unified log merger.

Produces the read-only chronological feed of invoices, general
transactions and trader transactions shown on the dashboard. The feed
is derived on demand and is never stored back as a collection.
"""

from collections.abc import Iterable, Sequence

from goldbook.core.entities import (
    GeneralLogEntry,
    Invoice,
    InvoiceLogEntry,
    LedgerSnapshot,
    LogEntry,
    RecordType,
    Trader,
    TraderCategory,
    TraderTransaction,
    TraderTransactionLogEntry,
    Transaction,
)
from goldbook.core.services.time_window import TimeWindow

DELETED_TRADER_NAME = "تاجر محذوف"


class UnifiedLogService:
    """Merge, tag and filter the three record collections."""

    def __init__(
        self,
        deleted_trader_name: str = DELETED_TRADER_NAME,
        deleted_trader_category: TraderCategory = TraderCategory.GOLD,
    ):
        self._deleted_name = deleted_trader_name
        self._deleted_category = deleted_trader_category

    def merge(
        self,
        invoices: Iterable[Invoice],
        transactions: Iterable[Transaction],
        traders: Iterable[Trader],
        trader_transactions: Iterable[TraderTransaction],
    ) -> list[LogEntry]:
        """
        Tag every record and sort the lot newest first.

        Trader transactions whose trader no longer exists get the sentinel
        name and category. Entries with equal dates keep their input
        order (invoices, then general, then trader transactions).
        """
        by_id = {t.id: t for t in traders}

        entries: list[LogEntry] = [InvoiceLogEntry(record=inv) for inv in invoices]
        entries.extend(GeneralLogEntry(record=txn) for txn in transactions)
        for txn in trader_transactions:
            trader = by_id.get(txn.trader_id)
            entries.append(
                TraderTransactionLogEntry(
                    record=txn,
                    trader_name=trader.name if trader else self._deleted_name,
                    trader_category=trader.category if trader else self._deleted_category,
                )
            )

        # sorted() stays stable with reverse=True
        return sorted(entries, key=lambda e: e.date, reverse=True)

    def merge_snapshot(self, snapshot: LedgerSnapshot) -> list[LogEntry]:
        return self.merge(
            snapshot.invoices,
            snapshot.transactions,
            snapshot.traders,
            snapshot.trader_transactions,
        )

    def filter(
        self,
        entries: Sequence[LogEntry],
        window: TimeWindow | None = None,
        record_type: RecordType | None = None,
        query: str = "",
    ) -> list[LogEntry]:
        """Apply the time window, the record type and a free-text query, keeping order."""
        needle = query.strip().lower()
        result = []
        for entry in entries:
            if window is not None and not window.contains(entry.date):
                continue
            if record_type is not None and entry.record_type != record_type.value:
                continue
            if needle and needle not in _searchable_text(entry):
                continue
            result.append(entry)
        return result


def _searchable_text(entry: LogEntry) -> str:
    if isinstance(entry, InvoiceLogEntry):
        customer = entry.record.customer
        parts = [customer.name, customer.phone, entry.record.notes]
        parts.extend(item.description or "" for item in entry.record.items)
    elif isinstance(entry, TraderTransactionLogEntry):
        parts = [entry.trader_name, entry.record.description]
    else:
        parts = [entry.record.description]
    return " ".join(parts).lower()
