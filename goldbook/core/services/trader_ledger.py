"""
Trader account ledger.

Balances are always a full re-scan of a trader's transactions; nothing
is accumulated incrementally or stored.
"""

from collections import defaultdict
from collections.abc import Iterable

from goldbook.core.entities import (
    Trader,
    TraderAccount,
    TraderCategory,
    TraderTransaction,
)


class TraderLedgerService:
    """
    Running position of the store against each trader.

    Gold traders: gold balance = work - scrap (grams), cash balance =
    fees - cash paid. Silver traders: the weight is priced into cash, so
    cash balance = sum(work * price + fee) - cash paid and there is no
    weight balance. Positive balances mean the store owes the trader.
    """

    DEFAULT_WEIGHT_EPSILON = 0.001
    DEFAULT_CURRENCY_EPSILON = 0.01

    def __init__(
        self,
        weight_epsilon: float | None = None,
        currency_epsilon: float | None = None,
    ):
        self._weight_epsilon = (
            weight_epsilon if weight_epsilon is not None else self.DEFAULT_WEIGHT_EPSILON
        )
        self._currency_epsilon = (
            currency_epsilon
            if currency_epsilon is not None
            else self.DEFAULT_CURRENCY_EPSILON
        )

    def compute_account(
        self,
        trader: Trader,
        transactions: Iterable[TraderTransaction],
    ) -> TraderAccount:
        """Account of one trader; transactions of other traders are ignored."""
        own = [t for t in transactions if t.trader_id == trader.id]
        return self._build_account(trader.id, trader.category, own)

    def compute_accounts(
        self,
        traders: Iterable[Trader],
        transactions: Iterable[TraderTransaction],
    ) -> dict[str, TraderAccount]:
        """Accounts keyed by trader id. Traders without transactions get a zero account."""
        grouped: dict[str, list[TraderTransaction]] = defaultdict(list)
        for txn in transactions:
            grouped[txn.trader_id].append(txn)

        return {
            trader.id: self._build_account(trader.id, trader.category, grouped.get(trader.id, []))
            for trader in traders
        }

    def transactions_for_trader(
        self,
        trader_id: str,
        transactions: Iterable[TraderTransaction],
    ) -> list[TraderTransaction]:
        """A trader's transactions, newest first."""
        own = [t for t in transactions if t.trader_id == trader_id]
        return sorted(own, key=lambda t: t.date, reverse=True)

    def _build_account(
        self,
        trader_id: str,
        category: TraderCategory,
        transactions: list[TraderTransaction],
    ) -> TraderAccount:
        work = sum(t.work_weight for t in transactions)
        scrap = sum(t.scrap_weight for t in transactions)
        fees = sum(t.workmanship_fee for t in transactions)
        paid = sum(t.cash_payment for t in transactions)

        if category == TraderCategory.SILVER:
            required = sum(t.silver_required_cash for t in transactions)
            gold_balance = 0.0
            cash_balance = required - paid
        else:
            required = 0.0
            gold_balance = work - scrap
            cash_balance = fees - paid

        return TraderAccount(
            trader_id=trader_id,
            category=category,
            transaction_count=len(transactions),
            total_work_weight=work,
            total_scrap_weight=scrap,
            total_workmanship_fee=fees,
            total_cash_payment=paid,
            total_required_cash=required,
            gold_balance=gold_balance,
            cash_balance=cash_balance,
            gold_owed_to_trader=gold_balance > self._weight_epsilon,
            gold_owed_by_trader=gold_balance < -self._weight_epsilon,
            cash_owed_to_trader=cash_balance > self._currency_epsilon,
            cash_owed_by_trader=cash_balance < -self._currency_epsilon,
        )
