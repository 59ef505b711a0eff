"""Tests for SQLiteLedgerStore."""

import json

import pytest

from goldbook.core.entities import (
    BuyBack24kItem,
    LedgerSnapshot,
    PaymentMethod,
    SellItem,
    TraderCategory,
)
from goldbook.core.exceptions import DatabaseError
from goldbook.core.services import LedgerBook


class TestSQLiteLedgerStore:
    async def test_empty_database_loads_empty_snapshot(self, ledger_store):
        snapshot = await ledger_store.load_snapshot()
        assert snapshot.is_empty

    async def test_round_trip_keeps_records_and_order(self, ledger_store, sample_snapshot):
        await ledger_store.save_snapshot(sample_snapshot)
        loaded = await ledger_store.load_snapshot()

        assert [i.id for i in loaded.invoices] == [i.id for i in sample_snapshot.invoices]
        assert [t.id for t in loaded.transactions] == [t.id for t in sample_snapshot.transactions]
        assert [t.id for t in loaded.traders] == ["t-gold", "t-silver"]
        assert [t.id for t in loaded.trader_transactions] == [
            t.id for t in sample_snapshot.trader_transactions
        ]

    async def test_round_trip_keeps_item_variants_and_totals(self, ledger_store, sample_snapshot):
        await ledger_store.save_snapshot(sample_snapshot)
        loaded = await ledger_store.load_snapshot()

        first, second = loaded.invoices
        assert isinstance(first.items[0], SellItem)
        assert isinstance(second.items[0], BuyBack24kItem)
        assert first.net_total == pytest.approx(1050)
        assert first.remaining_balance == pytest.approx(250)
        assert first.payments[1].method == PaymentMethod.INSTAPAY
        assert loaded.traders[1].category == TraderCategory.SILVER
        assert loaded.trader_transactions[1].silver_price_per_gram == 15

    async def test_save_replaces_previous_snapshot(self, ledger_store, sample_snapshot):
        await ledger_store.save_snapshot(sample_snapshot)

        book = LedgerBook(sample_snapshot)
        book.delete_trader("t-silver")
        await ledger_store.save_snapshot(book.snapshot)

        loaded = await ledger_store.load_snapshot()
        assert [t.id for t in loaded.traders] == ["t-gold"]
        assert len(loaded.trader_transactions) == 1

    async def test_payload_is_camel_case_json(self, ledger_store, pool, sample_snapshot):
        await ledger_store.save_snapshot(sample_snapshot)

        async with pool.acquire() as conn:
            cursor = await conn.execute("SELECT payload FROM invoices ORDER BY position LIMIT 1")
            row = await cursor.fetchone()

        payload = json.loads(row["payload"])
        assert payload["customer"]["name"] == "أحمد علي"
        assert "remainingBalance" in payload
        assert payload["items"][0]["saleType"] == "SELL"

    async def test_stale_stored_totals_are_recomputed(self, ledger_store, pool, sample_snapshot):
        await ledger_store.save_snapshot(LedgerSnapshot(invoices=sample_snapshot.invoices[:1]))

        async with pool.transaction() as conn:
            cursor = await conn.execute("SELECT id, payload FROM invoices")
            row = await cursor.fetchone()
            payload = json.loads(row["payload"])
            payload["remainingBalance"] = 123456
            await conn.execute(
                "UPDATE invoices SET payload = ? WHERE id = ?",
                (json.dumps(payload), row["id"]),
            )

        loaded = await ledger_store.load_snapshot()
        assert loaded.invoices[0].remaining_balance == pytest.approx(250)

    async def test_corrupt_row_raises_database_error(self, ledger_store, pool):
        async with pool.transaction() as conn:
            await conn.execute(
                "INSERT INTO traders (id, position, payload) VALUES ('x', 0, 'not json')"
            )

        with pytest.raises(DatabaseError):
            await ledger_store.load_snapshot()
