"""Invoice Queries Use Case - lookup, search and the customer message."""

from dataclasses import dataclass

from goldbook.application.services import get_invoice_ledger_service
from goldbook.application.use_cases.base import LedgerUseCase
from goldbook.core.entities import Invoice
from goldbook.core.services import build_invoice_message, build_whatsapp_link
from goldbook.core.services.invoice_messages import validate_customer_phone


@dataclass
class InvoiceMessage:
    invoice_id: str
    phone: str
    message: str
    whatsapp_url: str


class InvoiceQueriesUseCase(LedgerUseCase):
    async def search(self, query: str = "") -> list[Invoice]:
        """Invoices newest first, optionally filtered by customer name or phone."""
        snapshot = await self._load_snapshot()
        return get_invoice_ledger_service().search_invoices(snapshot.invoices, query)

    async def get(self, invoice_id: str) -> Invoice:
        book = await self._open_book()
        return book.get_invoice(invoice_id)

    async def message(self, invoice_id: str) -> InvoiceMessage:
        """
        Raises:
            InvoiceNotFoundError: unknown invoice
            InvalidPhoneError: customer phone is not 11 digits
        """
        invoice = await self.get(invoice_id)
        phone = validate_customer_phone(invoice.customer.phone)
        return InvoiceMessage(
            invoice_id=invoice.id,
            phone=phone,
            message=build_invoice_message(invoice),
            whatsapp_url=build_whatsapp_link(invoice),
        )
