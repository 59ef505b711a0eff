"""Pytest configuration and fixtures."""

from collections.abc import Callable, Generator
from datetime import datetime
from pathlib import Path
from typing import Any

import pytest

from goldbook.application.services import reset_services
from goldbook.config import reset_settings
from goldbook.core.entities import (
    BuyBack24kItem,
    BuyBackItem,
    Customer,
    Invoice,
    Karat,
    LedgerSnapshot,
    Payment,
    PaymentMethod,
    ProductCategory,
    SaleChannel,
    SellItem,
    Trader,
    TraderCategory,
    TraderTransaction,
    Transaction,
    TransactionType,
    WorkmanshipType,
)
from goldbook.infrastructure.storage.sqlite import reset_ledger_store


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Point storage at a temp dir and drop every cached singleton."""
    monkeypatch.setenv("STORAGE_DATA_DIR", str(tmp_path / "data"))
    reset_settings()
    reset_services()
    reset_ledger_store()
    yield
    reset_settings()
    reset_services()
    reset_ledger_store()


def sell(
    weight: float = 10.0,
    price_per_gram: float = 100.0,
    karat: Karat | None = Karat.K21,
    category: ProductCategory = ProductCategory.GOLD,
    workmanship_type: WorkmanshipType = WorkmanshipType.PER_GRAM,
    workmanship_value: float = 0.0,
    description: str | None = None,
) -> SellItem:
    return SellItem(
        category=category,
        karat=karat,
        weight=weight,
        price_per_gram=price_per_gram,
        workmanship_type=workmanship_type,
        workmanship_value=workmanship_value,
        description=description,
    )


def buy_back(
    weight: float = 5.0,
    price_per_gram: float = 2500.0,
    karat: Karat | None = Karat.K21,
    category: ProductCategory = ProductCategory.GOLD,
    discount_percentage: float = 0.0,
) -> BuyBackItem:
    return BuyBackItem(
        category=category,
        karat=karat,
        weight=weight,
        price_per_gram=price_per_gram,
        discount_percentage=discount_percentage,
    )


def buy_back_24k(
    weight: float = 5.0,
    price_per_gram: float = 3000.0,
    cash_back_per_gram: float = 0.0,
) -> BuyBack24kItem:
    return BuyBack24kItem(
        weight=weight,
        price_per_gram=price_per_gram,
        cash_back_per_gram=cash_back_per_gram,
    )


def invoice(
    items: list | None = None,
    payments: list[float | tuple[float, PaymentMethod]] | None = None,
    date: datetime | None = None,
    channel: SaleChannel = SaleChannel.STORE,
    customer_name: str = "أحمد علي",
    phone: str = "01012345678",
    **kwargs: Any,
) -> Invoice:
    """Invoice with payments given as amounts or (amount, method) pairs."""
    built_payments = []
    for payment in payments or []:
        amount, method = payment if isinstance(payment, tuple) else (payment, PaymentMethod.CASH)
        built_payments.append(Payment(amount=amount, method=method))
    return Invoice(
        date=date or datetime(2024, 5, 1, 12, 0),
        channel=channel,
        customer=Customer(name=customer_name, phone=phone),
        items=items if items is not None else [sell()],
        payments=built_payments,
        **kwargs,
    )


def trader(name: str = "تاجر", category: TraderCategory = TraderCategory.GOLD) -> Trader:
    return Trader(name=name, category=category)


def trader_txn(trader_id: str, date: datetime | None = None, **amounts: float) -> TraderTransaction:
    return TraderTransaction(
        trader_id=trader_id,
        date=date or datetime(2024, 5, 1, 12, 0),
        **amounts,
    )


def general(
    type: TransactionType = TransactionType.DEPOSIT,
    amount: float = 100.0,
    method: PaymentMethod = PaymentMethod.CASH,
    date: datetime | None = None,
    description: str = "",
) -> Transaction:
    return Transaction(
        type=type,
        amount=amount,
        payment_method=method,
        date=date or datetime(2024, 5, 1, 12, 0),
        description=description,
    )


@pytest.fixture
def make_sell() -> Callable[..., SellItem]:
    return sell


@pytest.fixture
def make_buy_back() -> Callable[..., BuyBackItem]:
    return buy_back


@pytest.fixture
def make_buy_back_24k() -> Callable[..., BuyBack24kItem]:
    return buy_back_24k


@pytest.fixture
def make_invoice() -> Callable[..., Invoice]:
    return invoice


@pytest.fixture
def make_trader() -> Callable[..., Trader]:
    return trader


@pytest.fixture
def make_trader_txn() -> Callable[..., TraderTransaction]:
    return trader_txn


@pytest.fixture
def make_transaction() -> Callable[..., Transaction]:
    return general


@pytest.fixture
def sample_snapshot() -> LedgerSnapshot:
    """A small ledger touching every collection."""
    gold_trader = Trader(id="t-gold", name="الصاغة", category=TraderCategory.GOLD)
    silver_trader = Trader(id="t-silver", name="فضيات", category=TraderCategory.SILVER)
    return LedgerSnapshot(
        invoices=[
            invoice(
                items=[sell(weight=10, price_per_gram=100, workmanship_value=5)],
                payments=[500.0, (300.0, PaymentMethod.INSTAPAY)],
                date=datetime(2024, 5, 3, 10, 0),
            ),
            invoice(
                items=[buy_back_24k(weight=1, price_per_gram=3000)],
                payments=[-3000.0],
                date=datetime(2024, 5, 2, 10, 0),
                customer_name="سارة",
                phone="01198765432",
            ),
        ],
        transactions=[
            general(TransactionType.DEPOSIT, 1000.0, date=datetime(2024, 5, 2, 9, 0)),
            general(
                TransactionType.EXPENSE,
                200.0,
                PaymentMethod.E_WALLET,
                date=datetime(2024, 5, 1, 9, 0),
                description="كهرباء",
            ),
        ],
        traders=[gold_trader, silver_trader],
        trader_transactions=[
            trader_txn("t-gold", work_weight=10, scrap_weight=2, workmanship_fee=100),
            trader_txn(
                "t-silver",
                work_weight=20,
                silver_price_per_gram=15,
                workmanship_fee=50,
                cash_payment=200,
            ),
        ],
    )
