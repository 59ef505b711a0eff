"""Shared load -> mutate -> save plumbing for ledger use cases."""

from goldbook.application.services import get_invoice_ledger_service
from goldbook.core.entities import LedgerSnapshot
from goldbook.core.interfaces import ILedgerStore
from goldbook.core.services import LedgerBook


class LedgerUseCase:
    """
    Base for use cases working on the ledger snapshot.

    The store is injected for tests and lazily resolved to the SQLite
    store otherwise.
    """

    def __init__(self, store: ILedgerStore | None = None):
        self._store = store

    async def _get_store(self) -> ILedgerStore:
        if self._store is None:
            from goldbook.infrastructure.storage.sqlite import get_ledger_store

            self._store = await get_ledger_store()
        return self._store

    async def _load_snapshot(self) -> LedgerSnapshot:
        store = await self._get_store()
        return await store.load_snapshot()

    async def _open_book(self) -> LedgerBook:
        return LedgerBook(
            await self._load_snapshot(),
            invoice_ledger=get_invoice_ledger_service(),
        )

    async def _save(self, book: LedgerBook) -> None:
        store = await self._get_store()
        await store.save_snapshot(book.snapshot)
