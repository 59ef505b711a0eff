"""Trader Accounts Use Case - balances per trader."""

from dataclasses import dataclass, field

from goldbook.application.services import get_trader_ledger_service
from goldbook.application.use_cases.base import LedgerUseCase
from goldbook.core.entities import Trader, TraderAccount, TraderCategory, TraderTransaction
from goldbook.core.exceptions import TraderNotFoundError


@dataclass
class TraderStatement:
    trader: Trader
    account: TraderAccount
    transactions: list[TraderTransaction] = field(default_factory=list)


class TraderAccountsUseCase(LedgerUseCase):
    """Derived trader balances; nothing here is stored."""

    async def execute(self, category: TraderCategory | None = None) -> list[TraderStatement]:
        """Accounts of every trader (optionally one category), in store order."""
        snapshot = await self._load_snapshot()
        traders = [t for t in snapshot.traders if category is None or t.category == category]
        accounts = get_trader_ledger_service().compute_accounts(
            traders, snapshot.trader_transactions
        )
        return [TraderStatement(trader=t, account=accounts[t.id]) for t in traders]

    async def statement(self, trader_id: str) -> TraderStatement:
        """One trader's account with its transactions, newest first."""
        snapshot = await self._load_snapshot()
        trader = next((t for t in snapshot.traders if t.id == trader_id), None)
        if trader is None:
            raise TraderNotFoundError(trader_id)

        service = get_trader_ledger_service()
        return TraderStatement(
            trader=trader,
            account=service.compute_account(trader, snapshot.trader_transactions),
            transactions=service.transactions_for_trader(trader_id, snapshot.trader_transactions),
        )
