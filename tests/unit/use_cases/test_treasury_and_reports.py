"""Tests for treasury, general transaction, dashboard and delete use cases."""

from datetime import date, datetime

import pytest

from goldbook.application.dto.requests import GeneralTransactionRequest
from goldbook.application.use_cases import (
    BuildDashboardUseCase,
    DeleteRecordUseCase,
    RecordGeneralTransactionUseCase,
    TreasuryOverviewUseCase,
)
from goldbook.core.entities import PaymentMethod, RecordType, TransactionType
from goldbook.core.exceptions import InvoiceNotFoundError, TransactionNotFoundError
from goldbook.core.services import TimeRange


class TestRecordGeneralTransactionUseCase:
    async def test_add(self, mock_store, saved_snapshot):
        txn = await RecordGeneralTransactionUseCase(mock_store).add(
            GeneralTransactionRequest(
                type=TransactionType.EXPENSE,
                amount=80,
                payment_method=PaymentMethod.INSTAPAY,
                description=" إيجار ",
                date=date(2024, 6, 1),
            )
        )
        assert txn.date == datetime(2024, 6, 1)
        assert txn.description == "إيجار"
        assert saved_snapshot().transactions[0] == txn

    async def test_list(self, mock_store):
        assert len(await RecordGeneralTransactionUseCase(mock_store).list_transactions()) == 2

    async def test_delete_unknown(self, mock_store):
        with pytest.raises(TransactionNotFoundError):
            await RecordGeneralTransactionUseCase(mock_store).delete("nope")


class TestTreasuryOverviewUseCase:
    async def test_overview(self, mock_store):
        overview = await TreasuryOverviewUseCase(mock_store).execute()

        assert overview.wallets.total == pytest.approx(-1600)
        assert len(overview.debts) == 1
        assert overview.total_debts == pytest.approx(250)
        assert overview.credits == []
        assert overview.total_credits == 0
        assert len(overview.transactions) == 2

    async def test_debt_query_filters_by_phone(self, mock_store):
        overview = await TreasuryOverviewUseCase(mock_store).execute(debt_query="0119")
        assert overview.debts == []


class TestBuildDashboardUseCase:
    async def test_execute(self, mock_store):
        result = await BuildDashboardUseCase(mock_store).execute(
            TimeRange.TODAY, now=datetime(2024, 5, 3, 18, 0)
        )

        assert result.time_range == TimeRange.TODAY
        assert result.sales.store.gold21.weight == 10
        assert result.sales.buy_back.gold24.weight == 0
        assert result.purchases.gold.total_work_weight == 0
        # inventory and totals ignore the window
        assert result.inventory.total_silver_in_store == pytest.approx(20)
        assert result.totals.total_sales == pytest.approx(1050)
        assert result.wallets.total == pytest.approx(-1600)
        assert len(result.trend) == 30
        assert result.trend[-1].day == date(2024, 5, 3)

    async def test_log(self, mock_store):
        use_case = BuildDashboardUseCase(mock_store)

        entries = await use_case.log()
        assert len(entries) == 6

        traders = await use_case.log(record_type=RecordType.TRADER_TRANSACTION)
        assert len(traders) == 2

        custom = await use_case.log(
            TimeRange.CUSTOM, start_date=date(2024, 5, 2), end_date=date(2024, 5, 2)
        )
        assert [e.record_type for e in custom] == ["invoice", "general"]

    async def test_trend(self, mock_store):
        points = await BuildDashboardUseCase(mock_store).trend(today=date(2024, 5, 3))
        assert points[-1].sales == pytest.approx(1050)


class TestDeleteRecordUseCase:
    async def test_delete_general(self, mock_store, sample_snapshot, saved_snapshot):
        target = sample_snapshot.transactions[0]

        result = await DeleteRecordUseCase(mock_store).execute(target.id, RecordType.GENERAL)

        assert result.record_id == target.id
        assert len(saved_snapshot().transactions) == 1

    async def test_delete_missing(self, mock_store):
        with pytest.raises(InvoiceNotFoundError):
            await DeleteRecordUseCase(mock_store).execute("nope", RecordType.INVOICE)
        mock_store.save_snapshot.assert_not_awaited()
