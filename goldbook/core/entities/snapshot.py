"""The four record collections held by the ledger."""

from pydantic import BaseModel, Field

from goldbook.core.entities.invoice import Invoice
from goldbook.core.entities.trader import Trader, TraderTransaction
from goldbook.core.entities.transaction import Transaction


class LedgerSnapshot(BaseModel):
    """
    Source records of the whole ledger, newest first.

    Everything else (balances, summaries, the unified log) is derived
    from a snapshot on demand and never stored.
    """

    invoices: list[Invoice] = Field(default_factory=list)
    transactions: list[Transaction] = Field(default_factory=list)
    traders: list[Trader] = Field(default_factory=list)
    trader_transactions: list[TraderTransaction] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (
            self.invoices or self.transactions or self.traders or self.trader_transactions
        )
