"""Unified transaction log entities (read-only feed)."""

from datetime import datetime
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from goldbook.core.entities.invoice import Invoice
from goldbook.core.entities.trader import TraderCategory, TraderTransaction
from goldbook.core.entities.transaction import Transaction


class RecordType(str, Enum):
    """Which record collection a log entry comes from."""

    INVOICE = "invoice"
    GENERAL = "general"
    TRADER_TRANSACTION = "traderTransaction"


class _LogEntryBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    record_type: str
    record: Invoice | Transaction | TraderTransaction

    @property
    def date(self) -> datetime:
        return self.record.date

    @property
    def id(self) -> str:
        return self.record.id


class InvoiceLogEntry(_LogEntryBase):
    record_type: Literal["invoice"] = "invoice"
    record: Invoice


class GeneralLogEntry(_LogEntryBase):
    record_type: Literal["general"] = "general"
    record: Transaction


class TraderTransactionLogEntry(_LogEntryBase):
    record_type: Literal["traderTransaction"] = "traderTransaction"
    record: TraderTransaction
    trader_name: str
    trader_category: TraderCategory


LogEntry = Annotated[
    Union[InvoiceLogEntry, GeneralLogEntry, TraderTransactionLogEntry],
    Field(discriminator="record_type"),
]
