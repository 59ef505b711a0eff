"""Core interfaces (ports) for dependency injection."""

from goldbook.core.interfaces.ledger_store import ILedgerStore

__all__ = [
    "ILedgerStore",
]
