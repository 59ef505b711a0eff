"""Record Trader Transaction Use Case - work, scrap, fees and cash with a trader."""

from goldbook.application.dto.requests import (
    TraderTransactionRequest,
    UpdateTraderTransactionRequest,
)
from goldbook.application.use_cases.base import LedgerUseCase
from goldbook.config import get_logger
from goldbook.core.entities import TraderCategory, TraderTransaction

logger = get_logger(__name__)


class RecordTraderTransactionUseCase(LedgerUseCase):
    """Add, edit and delete trader transactions."""

    async def add(self, trader_id: str, request: TraderTransactionRequest) -> TraderTransaction:
        """
        Record an exchange with an existing trader.

        Silver pricing only applies to silver traders; for gold traders the
        per-gram silver price is dropped.

        Raises:
            TraderNotFoundError: unknown trader
        """
        book = await self._open_book()
        trader = book.get_trader(trader_id)

        data = request.to_entity_data()
        if trader.category != TraderCategory.SILVER:
            data["silver_price_per_gram"] = 0.0

        txn = book.add_trader_transaction(TraderTransaction(trader_id=trader_id, **data))
        await self._save(book)
        logger.info(
            "trader_transaction_recorded",
            trader_id=trader_id,
            transaction_id=txn.id,
            work_weight=txn.work_weight,
            cash_payment=txn.cash_payment,
        )
        return txn

    async def update(
        self,
        transaction_id: str,
        request: UpdateTraderTransactionRequest,
    ) -> TraderTransaction:
        book = await self._open_book()
        txn = book.update_trader_transaction(transaction_id, request.changes())
        await self._save(book)
        return txn

    async def delete(self, transaction_id: str) -> TraderTransaction:
        book = await self._open_book()
        txn = book.delete_trader_transaction(transaction_id)
        await self._save(book)
        return txn
