"""Tests for the trader use cases."""

import pytest

from goldbook.application.dto.requests import (
    CreateTraderRequest,
    TraderTransactionRequest,
    UpdateTraderRequest,
    UpdateTraderTransactionRequest,
)
from goldbook.application.use_cases import (
    ManageTradersUseCase,
    RecordTraderTransactionUseCase,
    TraderAccountsUseCase,
)
from goldbook.core.entities import TraderCategory
from goldbook.core.exceptions import TraderNotFoundError, TraderTransactionNotFoundError


class TestManageTradersUseCase:
    async def test_create(self, mock_store, saved_snapshot):
        trader = await ManageTradersUseCase(mock_store).create(
            CreateTraderRequest(name="ورشة الأمل", phone=" 0111 ", category=TraderCategory.SILVER)
        )
        assert trader.phone == "0111"
        assert saved_snapshot().traders[0] == trader

    async def test_update_only_sent_fields(self, mock_store):
        trader = await ManageTradersUseCase(mock_store).update(
            "t-gold", UpdateTraderRequest(phone="0123")
        )
        assert trader.phone == "0123"
        assert trader.name == "الصاغة"
        assert trader.category == TraderCategory.GOLD

    async def test_delete_cascades(self, mock_store, saved_snapshot):
        result = await ManageTradersUseCase(mock_store).delete("t-silver")

        assert result.trader.id == "t-silver"
        assert len(result.transactions) == 1
        saved = saved_snapshot()
        assert [t.trader_id for t in saved.trader_transactions] == ["t-gold"]
        assert [t.id for t in saved.traders] == ["t-gold"]

    async def test_delete_unknown(self, mock_store):
        with pytest.raises(TraderNotFoundError):
            await ManageTradersUseCase(mock_store).delete("nope")


class TestRecordTraderTransactionUseCase:
    async def test_add_to_silver_trader(self, mock_store, saved_snapshot):
        txn = await RecordTraderTransactionUseCase(mock_store).add(
            "t-silver",
            TraderTransactionRequest(work_weight=10, silver_price_per_gram=20, description=" فضة "),
        )
        assert txn.trader_id == "t-silver"
        assert txn.silver_price_per_gram == 20
        assert txn.description == "فضة"
        assert txn.date.hour == 0
        assert saved_snapshot().trader_transactions[0] == txn

    async def test_gold_trader_drops_silver_price(self, mock_store):
        txn = await RecordTraderTransactionUseCase(mock_store).add(
            "t-gold", TraderTransactionRequest(work_weight=10, silver_price_per_gram=20)
        )
        assert txn.silver_price_per_gram == 0

    async def test_add_to_unknown_trader(self, mock_store):
        with pytest.raises(TraderNotFoundError):
            await RecordTraderTransactionUseCase(mock_store).add(
                "ghost", TraderTransactionRequest()
            )
        mock_store.save_snapshot.assert_not_awaited()

    async def test_update(self, mock_store, sample_snapshot):
        target = sample_snapshot.trader_transactions[0]
        txn = await RecordTraderTransactionUseCase(mock_store).update(
            target.id, UpdateTraderTransactionRequest(cash_payment=75)
        )
        assert txn.cash_payment == 75
        assert txn.work_weight == target.work_weight

    async def test_delete_unknown(self, mock_store):
        with pytest.raises(TraderTransactionNotFoundError):
            await RecordTraderTransactionUseCase(mock_store).delete("nope")


class TestTraderAccountsUseCase:
    async def test_all_accounts(self, mock_store):
        statements = await TraderAccountsUseCase(mock_store).execute()

        by_id = {s.trader.id: s.account for s in statements}
        assert by_id["t-gold"].gold_balance == pytest.approx(8)
        assert by_id["t-gold"].cash_balance == pytest.approx(100)
        assert by_id["t-silver"].cash_balance == pytest.approx(150)

    async def test_filter_by_category(self, mock_store):
        statements = await TraderAccountsUseCase(mock_store).execute(TraderCategory.SILVER)
        assert [s.trader.id for s in statements] == ["t-silver"]

    async def test_statement(self, mock_store):
        statement = await TraderAccountsUseCase(mock_store).statement("t-gold")
        assert statement.account.transaction_count == 1
        assert len(statement.transactions) == 1

    async def test_statement_unknown(self, mock_store):
        with pytest.raises(TraderNotFoundError):
            await TraderAccountsUseCase(mock_store).statement("nope")
