"""
Ledger book: the explicit record store.

Holds one LedgerSnapshot and exposes every mutation of the four record
collections. A mutation validates fully, then swaps in a new snapshot
(collections are never modified in place) and returns the affected
record. Persistence is the caller's concern.
"""

import math
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from goldbook.config import get_logger
from goldbook.core.entities import (
    Invoice,
    LedgerSnapshot,
    PaymentDirection,
    PaymentMethod,
    RecordType,
    Trader,
    TraderTransaction,
    Transaction,
    TransactionType,
    new_id,
)
from goldbook.core.exceptions import (
    InvalidAmountError,
    InvalidItemError,
    InvoiceNotFoundError,
    TraderNotFoundError,
    TraderTransactionNotFoundError,
    TransactionNotFoundError,
    ValidationError,
)
from goldbook.core.services.invoice_ledger import InvoiceLedgerService

logger = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)

# Fields a partial update may never touch
_IMMUTABLE_FIELDS = {"id", "trader_id", "traderId"}

_TRADER_TXN_AMOUNTS = (
    "work_weight",
    "scrap_weight",
    "workmanship_fee",
    "silver_price_per_gram",
    "cash_payment",
)


def _find(records: Iterable[M], record_id: str) -> M | None:
    return next((r for r in records if r.id == record_id), None)  # type: ignore[attr-defined]


def _replace(records: list[M], record: M) -> list[M]:
    return [record if r.id == record.id else r for r in records]  # type: ignore[attr-defined]


def _without(records: list[M], record_id: str) -> list[M]:
    return [r for r in records if r.id != record_id]  # type: ignore[attr-defined]


def _rebuild(model: type[M], record: BaseModel, changes: dict[str, Any]) -> M:
    data = record.model_dump()
    data.update({k: v for k, v in changes.items() if k not in _IMMUTABLE_FIELDS})
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or model.__name__
        raise ValidationError(field=field, message=error["msg"], value=error.get("input")) from e


class LedgerBook:
    """
    In-memory record store over a snapshot.

    Usage:
        book = LedgerBook(await store.load_snapshot())
        invoice = book.add_invoice(invoice)
        await store.save_snapshot(book.snapshot)
    """

    def __init__(
        self,
        snapshot: LedgerSnapshot | None = None,
        invoice_ledger: InvoiceLedgerService | None = None,
    ):
        self._snapshot = snapshot or LedgerSnapshot()
        self._invoices = invoice_ledger or InvoiceLedgerService()

    @property
    def snapshot(self) -> LedgerSnapshot:
        return self._snapshot

    def _commit(self, **collections: list) -> None:
        self._snapshot = self._snapshot.model_copy(update=collections)

    # --- lookups ---

    def get_invoice(self, invoice_id: str) -> Invoice:
        invoice = _find(self._snapshot.invoices, invoice_id)
        if invoice is None:
            raise InvoiceNotFoundError(invoice_id)
        return invoice

    def get_trader(self, trader_id: str) -> Trader:
        trader = _find(self._snapshot.traders, trader_id)
        if trader is None:
            raise TraderNotFoundError(trader_id)
        return trader

    def get_trader_transaction(self, transaction_id: str) -> TraderTransaction:
        txn = _find(self._snapshot.trader_transactions, transaction_id)
        if txn is None:
            raise TraderTransactionNotFoundError(transaction_id)
        return txn

    def get_transaction(self, transaction_id: str) -> Transaction:
        txn = _find(self._snapshot.transactions, transaction_id)
        if txn is None:
            raise TransactionNotFoundError(transaction_id)
        return txn

    # --- invoices ---

    def _build_invoice(self, invoice: Invoice, invoice_id: str) -> Invoice:
        try:
            built = self._invoices.recompute(invoice, id=invoice_id)
        except PydanticValidationError as e:
            raise InvalidItemError(str(e.errors()[0]["msg"]), value=invoice_id) from e
        if not built.items:
            raise InvalidItemError("an invoice needs at least one item", value=invoice_id)
        return built

    def add_invoice(self, invoice: Invoice) -> Invoice:
        """Store a new invoice under a fresh id; derived totals are recomputed."""
        created = self._build_invoice(invoice, new_id())
        self._commit(invoices=[created, *self._snapshot.invoices])
        logger.info(
            "invoice_added",
            invoice_id=created.id,
            items=len(created.items),
            net_total=created.net_total,
        )
        return created

    def update_invoice(self, invoice_id: str, invoice: Invoice) -> Invoice:
        """Replace an invoice wholesale, keeping its id and position."""
        self.get_invoice(invoice_id)
        updated = self._build_invoice(invoice, invoice_id)
        self._commit(invoices=_replace(self._snapshot.invoices, updated))
        logger.info("invoice_updated", invoice_id=invoice_id, net_total=updated.net_total)
        return updated

    def delete_invoice(self, invoice_id: str) -> Invoice:
        """Remove an invoice together with its embedded payments."""
        invoice = self.get_invoice(invoice_id)
        self._commit(invoices=_without(self._snapshot.invoices, invoice_id))
        logger.info("invoice_deleted", invoice_id=invoice_id)
        return invoice

    def apply_invoice_payment(
        self,
        invoice_id: str,
        amount: Any,
        method: PaymentMethod = PaymentMethod.CASH,
        direction: PaymentDirection = PaymentDirection.DEBT,
    ) -> Invoice:
        invoice = self.get_invoice(invoice_id)
        updated = self._invoices.apply_payment(invoice, amount, method, direction)
        self._commit(invoices=_replace(self._snapshot.invoices, updated))
        logger.info(
            "payment_applied",
            invoice_id=invoice_id,
            amount=updated.payments[-1].amount,
            method=method.value,
            remaining_balance=updated.remaining_balance,
        )
        return updated

    # --- traders ---

    def _check_trader_name(self, name: str) -> None:
        if not name or not name.strip():
            raise ValidationError(field="name", message="Trader name is required", value=name)

    def add_trader(self, trader: Trader) -> Trader:
        self._check_trader_name(trader.name)
        created = trader.model_copy(update={"id": new_id(), "name": trader.name.strip()})
        self._commit(traders=[created, *self._snapshot.traders])
        logger.info("trader_added", trader_id=created.id, category=created.category.value)
        return created

    def update_trader(self, trader_id: str, changes: dict[str, Any]) -> Trader:
        """Partial update of name, phone or category."""
        trader = self.get_trader(trader_id)
        updated = _rebuild(Trader, trader, changes)
        self._check_trader_name(updated.name)
        self._commit(traders=_replace(self._snapshot.traders, updated))
        logger.info("trader_updated", trader_id=trader_id, fields=sorted(changes))
        return updated

    def delete_trader(self, trader_id: str) -> tuple[Trader, list[TraderTransaction]]:
        """Delete a trader and, with it, every transaction that references it."""
        trader = self.get_trader(trader_id)
        removed = [t for t in self._snapshot.trader_transactions if t.trader_id == trader_id]
        self._commit(
            traders=_without(self._snapshot.traders, trader_id),
            trader_transactions=[
                t for t in self._snapshot.trader_transactions if t.trader_id != trader_id
            ],
        )
        logger.info("trader_deleted", trader_id=trader_id, cascaded=len(removed))
        return trader, removed

    # --- trader transactions ---

    def _check_trader_amounts(self, txn: TraderTransaction) -> None:
        for field in _TRADER_TXN_AMOUNTS:
            value = getattr(txn, field)
            if not math.isfinite(value) or value < 0:
                raise ValidationError(field=field, message="Must be zero or positive", value=value)

    def add_trader_transaction(self, txn: TraderTransaction) -> TraderTransaction:
        self.get_trader(txn.trader_id)
        self._check_trader_amounts(txn)
        created = txn.model_copy(update={"id": new_id()})
        self._commit(trader_transactions=[created, *self._snapshot.trader_transactions])
        logger.info(
            "trader_transaction_added",
            transaction_id=created.id,
            trader_id=created.trader_id,
        )
        return created

    def update_trader_transaction(
        self,
        transaction_id: str,
        changes: dict[str, Any],
    ) -> TraderTransaction:
        """Partial update; the id and the owning trader cannot change."""
        txn = self.get_trader_transaction(transaction_id)
        updated = _rebuild(TraderTransaction, txn, changes)
        self._check_trader_amounts(updated)
        self._commit(
            trader_transactions=_replace(self._snapshot.trader_transactions, updated)
        )
        logger.info("trader_transaction_updated", transaction_id=transaction_id)
        return updated

    def delete_trader_transaction(self, transaction_id: str) -> TraderTransaction:
        txn = self.get_trader_transaction(transaction_id)
        self._commit(
            trader_transactions=_without(self._snapshot.trader_transactions, transaction_id)
        )
        logger.info("trader_transaction_deleted", transaction_id=transaction_id)
        return txn

    # --- general transactions ---

    def add_general_transaction(self, txn: Transaction) -> Transaction:
        """Record a deposit or an expense; the amount must be positive."""
        if txn.type not in (TransactionType.DEPOSIT, TransactionType.EXPENSE):
            raise ValidationError(
                field="type",
                message="Only DEPOSIT and EXPENSE can be entered directly",
                value=txn.type.value,
            )
        if not math.isfinite(txn.amount) or txn.amount <= 0:
            raise InvalidAmountError(txn.amount)

        created = txn.model_copy(update={"id": new_id()})
        self._commit(transactions=[created, *self._snapshot.transactions])
        logger.info(
            "general_transaction_added",
            transaction_id=created.id,
            type=created.type.value,
            amount=created.amount,
        )
        return created

    def delete_general_transaction(self, transaction_id: str) -> Transaction:
        txn = self.get_transaction(transaction_id)
        self._commit(transactions=_without(self._snapshot.transactions, transaction_id))
        logger.info("general_transaction_deleted", transaction_id=transaction_id)
        return txn

    # --- unified log entry point ---

    def delete_record(self, record_id: str, record_type: RecordType) -> BaseModel:
        """Delete whatever a unified log entry points at."""
        deleters: dict[RecordType, Callable[[str], Any]] = {
            RecordType.INVOICE: self.delete_invoice,
            RecordType.GENERAL: self.delete_general_transaction,
            RecordType.TRADER_TRANSACTION: self.delete_trader_transaction,
        }
        return deleters[RecordType(record_type)](record_id)
