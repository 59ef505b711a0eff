"""Treasury aggregation: wallet balances and dashboard totals."""

from collections.abc import Iterable

from goldbook.core.entities import (
    DashboardTotals,
    Invoice,
    LedgerSnapshot,
    PaymentMethod,
    SaleType,
    TraderTransaction,
    Transaction,
    TransactionType,
    WalletBalances,
)


class TreasuryService:
    """
    Cash position per payment rail, recomputed from the records every time.

    - invoice payments land in the wallet of their method (sign included)
    - deposits add to and expenses subtract from their payment method
    - trader cash payments always leave the CASH wallet
    """

    def compute_wallet_balances(
        self,
        invoices: Iterable[Invoice],
        transactions: Iterable[Transaction],
        trader_transactions: Iterable[TraderTransaction],
    ) -> WalletBalances:
        wallets = WalletBalances()

        for invoice in invoices:
            for payment in invoice.payments:
                wallets.add(payment.method, payment.amount)

        for txn in transactions:
            wallets.add(txn.payment_method, txn.signed_amount)

        for txn in trader_transactions:
            wallets.add(PaymentMethod.CASH, -txn.cash_payment)

        return wallets

    def compute_balance(
        self,
        invoices: Iterable[Invoice],
        transactions: Iterable[Transaction],
        trader_transactions: Iterable[TraderTransaction],
    ) -> float:
        """Grand total across all four wallets."""
        return self.compute_wallet_balances(invoices, transactions, trader_transactions).total

    def wallets_for(self, snapshot: LedgerSnapshot) -> WalletBalances:
        return self.compute_wallet_balances(
            snapshot.invoices, snapshot.transactions, snapshot.trader_transactions
        )

    def total_sales(self, invoices: Iterable[Invoice]) -> float:
        """Sum of all SELL item totals."""
        return sum(
            item.total
            for invoice in invoices
            for item in invoice.items
            if item.sale_type == SaleType.SELL
        )

    def total_purchases(
        self,
        invoices: Iterable[Invoice],
        transactions: Iterable[Transaction],
        trader_transactions: Iterable[TraderTransaction],
    ) -> float:
        """Cash paid out to customers, to traders, and as expenses."""
        paid_to_customers = sum(
            abs(payment.amount)
            for invoice in invoices
            for payment in invoice.payments
            if payment.amount < 0
        )
        paid_to_traders = sum(t.cash_payment for t in trader_transactions)
        expenses = sum(t.amount for t in transactions if t.type == TransactionType.EXPENSE)
        return paid_to_customers + paid_to_traders + expenses

    def compute_dashboard_totals(self, snapshot: LedgerSnapshot) -> DashboardTotals:
        total_sales = self.total_sales(snapshot.invoices)
        total_purchases = self.total_purchases(
            snapshot.invoices, snapshot.transactions, snapshot.trader_transactions
        )
        return DashboardTotals(
            total_sales=total_sales,
            total_purchases=total_purchases,
            net_profit=total_sales - total_purchases,
            treasury_balance=self.wallets_for(snapshot).total,
        )
