"""Delete Record Use Case - delete what a unified log entry points at."""

from dataclasses import dataclass

from goldbook.application.use_cases.base import LedgerUseCase
from goldbook.config import get_logger
from goldbook.core.entities import RecordType

logger = get_logger(__name__)


@dataclass
class DeleteRecordResult:
    record_id: str
    record_type: RecordType


class DeleteRecordUseCase(LedgerUseCase):
    """Invoices, general transactions and trader transactions share one delete path."""

    async def execute(self, record_id: str, record_type: RecordType) -> DeleteRecordResult:
        book = await self._open_book()
        book.delete_record(record_id, record_type)
        await self._save(book)

        logger.info("record_deleted", record_id=record_id, record_type=record_type.value)
        return DeleteRecordResult(record_id=record_id, record_type=record_type)
