"""Storage infrastructure implementations."""

from goldbook.infrastructure.storage.sqlite import (
    SQLiteLedgerStore,
    close_pool,
    get_ledger_store,
    get_pool,
)

__all__ = [
    "SQLiteLedgerStore",
    "get_ledger_store",
    "get_pool",
    "close_pool",
]
