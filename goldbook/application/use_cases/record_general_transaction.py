"""Record General Transaction Use Case - deposits and expenses."""

from goldbook.application.dto.requests import GeneralTransactionRequest
from goldbook.application.use_cases.base import LedgerUseCase
from goldbook.core.entities import Transaction


class RecordGeneralTransactionUseCase(LedgerUseCase):
    async def list_transactions(self) -> list[Transaction]:
        snapshot = await self._load_snapshot()
        return list(snapshot.transactions)

    async def add(self, request: GeneralTransactionRequest) -> Transaction:
        book = await self._open_book()
        txn = book.add_general_transaction(
            Transaction(
                type=request.type,
                amount=request.amount,
                description=request.description.strip(),
                payment_method=request.payment_method,
                date=request.transaction_date,
            )
        )
        await self._save(book)
        return txn

    async def delete(self, transaction_id: str) -> Transaction:
        book = await self._open_book()
        txn = book.delete_general_transaction(transaction_id)
        await self._save(book)
        return txn
