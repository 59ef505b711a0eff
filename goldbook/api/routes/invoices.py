"""Sales invoice endpoints."""

from fastapi import APIRouter, Depends, Query, status

from goldbook.api.dependencies import (
    get_apply_payment_use_case,
    get_delete_record_use_case,
    get_invoice_queries_use_case,
    get_save_invoice_use_case,
)
from goldbook.application.dto.requests import ApplyPaymentRequest, SaveInvoiceRequest
from goldbook.application.dto.responses import (
    DeleteRecordResponse,
    ErrorResponse,
    InvoiceListResponse,
    InvoiceMessageResponse,
    InvoiceResponse,
)
from goldbook.application.services import get_invoice_ledger_service
from goldbook.application.use_cases import (
    ApplyInvoicePaymentUseCase,
    DeleteRecordUseCase,
    InvoiceQueriesUseCase,
    SaveInvoiceUseCase,
)
from goldbook.core.entities import Invoice, RecordType

router = APIRouter(prefix="/api/invoices", tags=["invoices"])


def invoice_to_response(invoice: Invoice) -> InvoiceResponse:
    return InvoiceResponse.from_entity(
        invoice, get_invoice_ledger_service().balance_state(invoice)
    )


def invoices_to_list(invoices: list[Invoice]) -> InvoiceListResponse:
    return InvoiceListResponse(
        invoices=[invoice_to_response(inv) for inv in invoices],
        total=len(invoices),
    )


@router.get("", response_model=InvoiceListResponse)
async def list_invoices(
    q: str = Query(default="", description="Customer name or phone"),
    use_case: InvoiceQueriesUseCase = Depends(get_invoice_queries_use_case),
) -> InvoiceListResponse:
    """Invoices newest first."""
    return invoices_to_list(await use_case.search(q))


@router.post(
    "",
    response_model=InvoiceResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_invoice(
    request: SaveInvoiceRequest,
    use_case: SaveInvoiceUseCase = Depends(get_save_invoice_use_case),
) -> InvoiceResponse:
    invoice = await use_case.execute(request)
    return use_case.to_response(invoice)


@router.get(
    "/{invoice_id}",
    response_model=InvoiceResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_invoice(
    invoice_id: str,
    use_case: InvoiceQueriesUseCase = Depends(get_invoice_queries_use_case),
) -> InvoiceResponse:
    return invoice_to_response(await use_case.get(invoice_id))


@router.put(
    "/{invoice_id}",
    response_model=InvoiceResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_invoice(
    invoice_id: str,
    request: SaveInvoiceRequest,
    use_case: SaveInvoiceUseCase = Depends(get_save_invoice_use_case),
) -> InvoiceResponse:
    """Replace the invoice; stored payments are kept by id, or all of them when omitted."""
    invoice = await use_case.execute(request, invoice_id=invoice_id)
    return use_case.to_response(invoice)


@router.delete(
    "/{invoice_id}",
    response_model=DeleteRecordResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_invoice(
    invoice_id: str,
    use_case: DeleteRecordUseCase = Depends(get_delete_record_use_case),
) -> DeleteRecordResponse:
    result = await use_case.execute(invoice_id, RecordType.INVOICE)
    return DeleteRecordResponse(id=result.record_id, record_type=result.record_type.value)


@router.post(
    "/{invoice_id}/payments",
    response_model=InvoiceResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def apply_payment(
    invoice_id: str,
    request: ApplyPaymentRequest,
    use_case: ApplyInvoicePaymentUseCase = Depends(get_apply_payment_use_case),
) -> InvoiceResponse:
    """DEBT: the customer pays off their balance. CREDIT: the store pays the customer."""
    return invoice_to_response(await use_case.execute(invoice_id, request))


@router.get(
    "/{invoice_id}/message",
    response_model=InvoiceMessageResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def invoice_message(
    invoice_id: str,
    use_case: InvoiceQueriesUseCase = Depends(get_invoice_queries_use_case),
) -> InvoiceMessageResponse:
    message = await use_case.message(invoice_id)
    return InvoiceMessageResponse(
        invoice_id=message.invoice_id,
        phone=message.phone,
        message=message.message,
        whatsapp_url=message.whatsapp_url,
    )
