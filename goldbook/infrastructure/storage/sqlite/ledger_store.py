"""SQLite implementation of the ledger persistence sink."""

import json

import aiosqlite
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from goldbook.config import get_logger
from goldbook.core.entities import (
    Invoice,
    LedgerSnapshot,
    Trader,
    TraderTransaction,
    Transaction,
)
from goldbook.core.exceptions import DatabaseError
from goldbook.core.interfaces import ILedgerStore
from goldbook.infrastructure.storage.sqlite.connection import ConnectionPool, get_pool

logger = get_logger(__name__)


def _payload(record: BaseModel) -> str:
    return json.dumps(record.to_record(), ensure_ascii=False)  # type: ignore[attr-defined]


class SQLiteLedgerStore(ILedgerStore):
    """
    Stores each collection in its own table as ordered JSON rows.

    save_snapshot rewrites all four tables inside one transaction, so a
    reader never sees half of a mutation.
    """

    def __init__(self, pool: ConnectionPool | None = None):
        self._pool = pool

    async def _get_pool(self) -> ConnectionPool:
        if self._pool is None:
            self._pool = await get_pool()
        return self._pool

    async def load_snapshot(self) -> LedgerSnapshot:
        pool = await self._get_pool()
        try:
            async with pool.acquire() as conn:
                invoices = await self._load(conn, "invoices", Invoice)
                transactions = await self._load(conn, "transactions", Transaction)
                traders = await self._load(conn, "traders", Trader)
                trader_transactions = await self._load(
                    conn, "trader_transactions", TraderTransaction
                )
        except aiosqlite.Error as e:
            raise DatabaseError("load_snapshot", str(e)) from e

        logger.debug(
            "snapshot_loaded",
            invoices=len(invoices),
            transactions=len(transactions),
            traders=len(traders),
            trader_transactions=len(trader_transactions),
        )
        return LedgerSnapshot(
            invoices=invoices,
            transactions=transactions,
            traders=traders,
            trader_transactions=trader_transactions,
        )

    async def _load(
        self,
        conn: aiosqlite.Connection,
        table: str,
        model: type[BaseModel],
    ) -> list:
        cursor = await conn.execute(f"SELECT id, payload FROM {table} ORDER BY position")
        records = []
        for row in await cursor.fetchall():
            try:
                records.append(model.model_validate(json.loads(row["payload"])))
            except (json.JSONDecodeError, PydanticValidationError) as e:
                raise DatabaseError(f"load {table} row {row['id']}", str(e)) from e
        return records

    async def save_snapshot(self, snapshot: LedgerSnapshot) -> None:
        pool = await self._get_pool()
        try:
            async with pool.transaction() as conn:
                for table in ("invoices", "transactions", "traders", "trader_transactions"):
                    await conn.execute(f"DELETE FROM {table}")

                await conn.executemany(
                    "INSERT INTO invoices (id, position, record_date, payload) VALUES (?, ?, ?, ?)",
                    [
                        (inv.id, pos, inv.date.isoformat(), _payload(inv))
                        for pos, inv in enumerate(snapshot.invoices)
                    ],
                )
                await conn.executemany(
                    "INSERT INTO transactions (id, position, record_date, payload) VALUES (?, ?, ?, ?)",
                    [
                        (txn.id, pos, txn.date.isoformat(), _payload(txn))
                        for pos, txn in enumerate(snapshot.transactions)
                    ],
                )
                await conn.executemany(
                    "INSERT INTO traders (id, position, payload) VALUES (?, ?, ?)",
                    [
                        (trader.id, pos, _payload(trader))
                        for pos, trader in enumerate(snapshot.traders)
                    ],
                )
                await conn.executemany(
                    """
                    INSERT INTO trader_transactions (id, position, trader_id, record_date, payload)
                    VALUES (?, ?, ?, ?, ?)
                    """,
                    [
                        (txn.id, pos, txn.trader_id, txn.date.isoformat(), _payload(txn))
                        for pos, txn in enumerate(snapshot.trader_transactions)
                    ],
                )
        except aiosqlite.Error as e:
            raise DatabaseError("save_snapshot", str(e)) from e

        logger.info(
            "snapshot_saved",
            invoices=len(snapshot.invoices),
            transactions=len(snapshot.transactions),
            traders=len(snapshot.traders),
            trader_transactions=len(snapshot.trader_transactions),
        )
