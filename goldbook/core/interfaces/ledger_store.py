"""Abstract interface for the ledger persistence sink."""

from abc import ABC, abstractmethod

from goldbook.core.entities.snapshot import LedgerSnapshot


class ILedgerStore(ABC):
    """
    Interface for persisting the four ledger record collections.

    The ledger core never calls this; use cases load a snapshot, run the
    mutation in memory and write the result back through the sink.
    """

    @abstractmethod
    async def load_snapshot(self) -> LedgerSnapshot:
        """Load all record collections."""
        pass

    @abstractmethod
    async def save_snapshot(self, snapshot: LedgerSnapshot) -> None:
        """Replace all stored record collections with the snapshot."""
        pass
