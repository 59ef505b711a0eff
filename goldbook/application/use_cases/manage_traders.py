"""Manage Traders Use Case - add, edit and delete suppliers."""

from dataclasses import dataclass, field

from goldbook.application.dto.requests import CreateTraderRequest, UpdateTraderRequest
from goldbook.application.use_cases.base import LedgerUseCase
from goldbook.config import get_logger
from goldbook.core.entities import Trader, TraderTransaction

logger = get_logger(__name__)


@dataclass
class DeleteTraderResult:
    """The removed trader and the transactions removed with it."""

    trader: Trader
    transactions: list[TraderTransaction] = field(default_factory=list)


class ManageTradersUseCase(LedgerUseCase):
    """CRUD over traders. Deleting a trader also deletes all its transactions."""

    async def create(self, request: CreateTraderRequest) -> Trader:
        book = await self._open_book()
        trader = book.add_trader(
            Trader(name=request.name, phone=request.phone.strip(), category=request.category)
        )
        await self._save(book)
        return trader

    async def update(self, trader_id: str, request: UpdateTraderRequest) -> Trader:
        book = await self._open_book()
        trader = book.update_trader(trader_id, request.changes())
        await self._save(book)
        return trader

    async def delete(self, trader_id: str) -> DeleteTraderResult:
        book = await self._open_book()
        trader, removed = book.delete_trader(trader_id)
        await self._save(book)

        logger.info(
            "trader_removed_with_history",
            trader_id=trader_id,
            transactions=len(removed),
        )
        return DeleteTraderResult(trader=trader, transactions=removed)
