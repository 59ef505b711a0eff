"""SQLite storage for the ledger."""

from goldbook.infrastructure.storage.sqlite.connection import (
    ConnectionPool,
    close_pool,
    get_pool,
)
from goldbook.infrastructure.storage.sqlite.ledger_store import SQLiteLedgerStore

_ledger_store: SQLiteLedgerStore | None = None


async def get_ledger_store() -> SQLiteLedgerStore:
    """Get singleton ledger store instance."""
    global _ledger_store
    if _ledger_store is None:
        _ledger_store = SQLiteLedgerStore()
    return _ledger_store


def reset_ledger_store() -> None:
    global _ledger_store
    _ledger_store = None


__all__ = [
    "ConnectionPool",
    "get_pool",
    "close_pool",
    "SQLiteLedgerStore",
    "get_ledger_store",
    "reset_ledger_store",
]
