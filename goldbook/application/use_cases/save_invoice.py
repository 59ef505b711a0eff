"""Save Invoice Use Case - create a new invoice or replace an existing one."""

from datetime import datetime

from goldbook.application.dto.requests import SaveInvoiceRequest
from goldbook.application.dto.responses import InvoiceResponse
from goldbook.application.services import get_invoice_ledger_service
from goldbook.application.use_cases.base import LedgerUseCase
from goldbook.config import get_logger
from goldbook.core.entities import Customer, Invoice, Payment
from goldbook.core.exceptions import ValidationError

logger = get_logger(__name__)


class SaveInvoiceUseCase(LedgerUseCase):
    """Build an invoice from the sales form and store it."""

    def build_invoice(
        self,
        request: SaveInvoiceRequest,
        existing: Invoice | None = None,
    ) -> Invoice:
        """
        Entity for the request; totals are derived.

        When replacing existing, its date and payments carry over unless
        the request changes them. New payments are dated now.
        """
        return Invoice(
            date=_invoice_date(request, existing),
            channel=request.channel,
            customer=Customer(**request.customer.model_dump()),
            items=[item.to_entity_data() for item in request.items],
            payments=_payments(request, existing),
            shipping=request.shipping,
            notes=request.notes.strip(),
        )

    async def execute(
        self,
        request: SaveInvoiceRequest,
        invoice_id: str | None = None,
    ) -> Invoice:
        """
        Create the invoice, or fully replace invoice_id when given.

        Raises:
            InvoiceNotFoundError: invoice_id does not exist
            InvalidItemError: an item combines category and karat illegally
            ValidationError: a payment id is not on the stored invoice
        """
        logger.info(
            "save_invoice_started",
            invoice_id=invoice_id,
            items=len(request.items),
            payments=len(request.payments) if request.payments is not None else None,
        )
        book = await self._open_book()

        if invoice_id is None:
            saved = book.add_invoice(self.build_invoice(request))
        else:
            existing = book.get_invoice(invoice_id)
            saved = book.update_invoice(invoice_id, self.build_invoice(request, existing))

        await self._save(book)
        logger.info(
            "save_invoice_complete",
            invoice_id=saved.id,
            net_total=saved.net_total,
            remaining_balance=saved.remaining_balance,
        )
        return saved

    def to_response(self, invoice: Invoice) -> InvoiceResponse:
        service = get_invoice_ledger_service()
        return InvoiceResponse.from_entity(invoice, service.balance_state(invoice))


def _invoice_date(request: SaveInvoiceRequest, existing: Invoice | None) -> datetime:
    # Same calendar day keeps the stored time of day
    if existing is not None and request.date in (None, existing.date.date()):
        return existing.date
    return request.invoice_date


def _payments(request: SaveInvoiceRequest, existing: Invoice | None) -> list[Payment]:
    stored = {p.id: p for p in existing.payments} if existing is not None else {}
    if request.payments is None:
        return list(stored.values())

    payments: list[Payment] = []
    kept: set[str] = set()
    for entry in request.payments:
        if entry.id is None:
            payments.append(Payment(method=entry.method, amount=entry.signed_amount))
            continue
        if entry.id not in stored:
            raise ValidationError(field="payments", message="Unknown payment id", value=entry.id)
        if entry.id in kept:
            raise ValidationError(field="payments", message="Duplicate payment id", value=entry.id)
        kept.add(entry.id)
        payments.append(stored[entry.id])
    return payments
