"""Treasury Overview Use Case - wallets, customer debts and credits."""

from dataclasses import dataclass, field

from goldbook.application.services import get_invoice_ledger_service, get_treasury_service
from goldbook.application.use_cases.base import LedgerUseCase
from goldbook.core.entities import Invoice, Transaction, WalletBalances


@dataclass
class TreasuryOverview:
    wallets: WalletBalances
    debts: list[Invoice] = field(default_factory=list)
    credits: list[Invoice] = field(default_factory=list)
    transactions: list[Transaction] = field(default_factory=list)

    @property
    def total_debts(self) -> float:
        return sum(inv.remaining_balance for inv in self.debts)

    @property
    def total_credits(self) -> float:
        return sum(abs(inv.remaining_balance) for inv in self.credits)


class TreasuryOverviewUseCase(LedgerUseCase):
    async def execute(self, debt_query: str = "", credit_query: str = "") -> TreasuryOverview:
        """
        Wallet balances plus open customer balances.

        debt_query filters debts by phone; credit_query filters credits
        by customer name or phone.
        """
        snapshot = await self._load_snapshot()
        invoices = get_invoice_ledger_service()

        return TreasuryOverview(
            wallets=get_treasury_service().wallets_for(snapshot),
            debts=invoices.customer_debts(snapshot.invoices, debt_query),
            credits=invoices.customer_credits(snapshot.invoices, credit_query),
            transactions=list(snapshot.transactions),
        )
