"""Trader (supplier) domain entities."""

from datetime import datetime

from pydantic import Field

from goldbook.core.entities.common import (
    LedgerModel,
    LenientFloat,
    LenientStr,
    LocalDateTime,
    new_id,
)
from goldbook.core.entities.invoice import ProductCategory

# Traders are classified by the same metal categories as invoice items.
TraderCategory = ProductCategory


class Trader(LedgerModel):
    """A wholesale supplier of gold or silver work."""

    id: str = Field(default_factory=new_id)
    name: str
    phone: LenientStr = ""
    category: TraderCategory = TraderCategory.GOLD


class TraderTransaction(LedgerModel):
    """
    One exchange with a trader.

    Gold traders hand over work (grams) and take back scrap (grams) and a
    workmanship fee. Silver traders sell work at silver_price_per_gram, so
    their weight turns into cash owed. trader_id is a plain reference;
    the trader may no longer exist.
    """

    id: str = Field(default_factory=new_id)
    trader_id: str
    date: LocalDateTime = Field(default_factory=datetime.now)
    description: LenientStr = ""

    work_weight: LenientFloat = 0.0  # grams received
    scrap_weight: LenientFloat = 0.0  # grams returned, gold only
    workmanship_fee: LenientFloat = 0.0  # cash owed to trader
    silver_price_per_gram: LenientFloat = 0.0  # silver only
    cash_payment: LenientFloat = 0.0  # cash paid to trader

    @property
    def silver_required_cash(self) -> float:
        """Cash owed for this exchange under silver pricing."""
        return self.work_weight * self.silver_price_per_gram + self.workmanship_fee
