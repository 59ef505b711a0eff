"""Derived reporting entities: summaries, balances, trend points."""

from datetime import date

from pydantic import BaseModel, Field

from goldbook.core.entities.invoice import Karat
from goldbook.core.entities.payment import PaymentMethod
from goldbook.core.entities.trader import TraderCategory


class SalesSummaryItem(BaseModel):
    """Accumulated weight (grams) and cash for one bucket."""

    weight: float = 0.0
    cash: float = 0.0

    def add(self, weight: float, cash: float) -> None:
        self.weight += weight
        self.cash += cash


class KaratBuckets(BaseModel):
    """Gold buckets split by karat."""

    gold24: SalesSummaryItem = Field(default_factory=SalesSummaryItem)
    gold21: SalesSummaryItem = Field(default_factory=SalesSummaryItem)
    gold18: SalesSummaryItem = Field(default_factory=SalesSummaryItem)

    def bucket(self, karat: Karat) -> SalesSummaryItem:
        return getattr(self, f"gold{int(karat)}")

    @property
    def total_cash(self) -> float:
        return self.gold24.cash + self.gold21.cash + self.gold18.cash

    def equivalent_weight(self, reference_karat: int = 21) -> float:
        """Weight of all karats expressed at the reference karat."""
        return (
            self.gold24.weight * 24 / reference_karat
            + self.gold21.weight * 21 / reference_karat
            + self.gold18.weight * 18 / reference_karat
        )


class BuyBackBuckets(KaratBuckets):
    """Buy-back buckets: gold by karat plus silver."""

    silver: SalesSummaryItem = Field(default_factory=SalesSummaryItem)


class SalesSummary(BaseModel):
    """Invoice items routed by channel, direction, category and karat."""

    store: KaratBuckets = Field(default_factory=KaratBuckets)
    online: KaratBuckets = Field(default_factory=KaratBuckets)
    buy_back: BuyBackBuckets = Field(default_factory=BuyBackBuckets)
    silver: SalesSummaryItem = Field(default_factory=SalesSummaryItem)

    # Gold weights normalized to the reference karat, per channel
    store_gold21_equivalent: float = 0.0
    online_gold21_equivalent: float = 0.0
    buy_back_gold21_equivalent: float = 0.0


class GoldPurchasesSummary(BaseModel):
    total_work_weight: float = 0.0
    total_scrap_weight: float = 0.0
    total_workmanship_fee: float = 0.0
    net_gold_balance: float = 0.0


class SilverPurchasesSummary(BaseModel):
    total_work_weight: float = 0.0
    total_required_cash: float = 0.0
    total_cash_paid: float = 0.0
    net_cash_balance: float = 0.0


class PurchasesSummary(BaseModel):
    """Trader activity split by trader category."""

    gold: GoldPurchasesSummary = Field(default_factory=GoldPurchasesSummary)
    silver: SilverPurchasesSummary = Field(default_factory=SilverPurchasesSummary)


class StoreInventory(BaseModel):
    """Physical stock on hand, always computed over all-time records."""

    total_gold_in_store: float = 0.0  # grams at the reference karat
    total_silver_in_store: float = 0.0  # grams


class TrendPoint(BaseModel):
    """Net activity of one calendar day."""

    day: date
    sales: float = 0.0
    purchases: float = 0.0


class TraderAccount(BaseModel):
    """Running position of the store against one trader."""

    trader_id: str
    category: TraderCategory
    transaction_count: int = 0

    total_work_weight: float = 0.0
    total_scrap_weight: float = 0.0
    total_workmanship_fee: float = 0.0
    total_cash_payment: float = 0.0
    total_required_cash: float = 0.0  # silver pricing

    # Positive: store owes the trader; negative: trader owes the store
    gold_balance: float = 0.0  # grams, gold traders only
    cash_balance: float = 0.0

    gold_owed_to_trader: bool = False
    gold_owed_by_trader: bool = False
    cash_owed_to_trader: bool = False
    cash_owed_by_trader: bool = False


class WalletBalances(BaseModel):
    """Cash position per payment rail."""

    cash: float = 0.0
    e_wallet: float = 0.0
    instapay: float = 0.0
    fawry: float = 0.0

    def add(self, method: PaymentMethod, amount: float) -> None:
        field = method.value.lower()
        setattr(self, field, getattr(self, field) + amount)

    def get(self, method: PaymentMethod) -> float:
        return getattr(self, method.value.lower())

    @property
    def total(self) -> float:
        return self.cash + self.e_wallet + self.instapay + self.fawry

    def by_method(self) -> dict[PaymentMethod, float]:
        return {method: self.get(method) for method in PaymentMethod}


class DashboardTotals(BaseModel):
    """Headline figures of the home dashboard."""

    total_sales: float = 0.0
    total_purchases: float = 0.0
    net_profit: float = 0.0
    treasury_balance: float = 0.0
