"""Apply Invoice Payment Use Case - settle a debt or pay out a credit."""

from goldbook.application.dto.requests import ApplyPaymentRequest
from goldbook.application.services import get_invoice_ledger_service
from goldbook.application.use_cases.base import LedgerUseCase
from goldbook.config import get_logger
from goldbook.core.entities import Invoice

logger = get_logger(__name__)


class ApplyInvoicePaymentUseCase(LedgerUseCase):
    """Validate a payment against the open balance, then record it."""

    async def execute(self, invoice_id: str, request: ApplyPaymentRequest) -> Invoice:
        """
        Raises:
            InvoiceNotFoundError: unknown invoice
            InvalidAmountError: amount is not a positive number
            PaymentExceedsBalanceError: amount is above what is outstanding
        """
        book = await self._open_book()
        invoice = book.get_invoice(invoice_id)

        amount = get_invoice_ledger_service().validate_payment(
            invoice, request.amount, request.direction
        )
        updated = book.apply_invoice_payment(
            invoice_id, amount, request.method, request.direction
        )
        await self._save(book)

        logger.info(
            "invoice_payment_recorded",
            invoice_id=invoice_id,
            direction=request.direction.value,
            amount=amount,
            settled=get_invoice_ledger_service().is_settled(updated),
        )
        return updated
