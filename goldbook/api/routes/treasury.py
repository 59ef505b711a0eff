"""Treasury endpoints: wallets, customer balances and general transactions."""

from fastapi import APIRouter, Depends, Query, status

from goldbook.api.dependencies import (
    get_general_transaction_use_case,
    get_treasury_overview_use_case,
)
from goldbook.api.routes.invoices import invoice_to_response, invoices_to_list
from goldbook.application.dto.requests import GeneralTransactionRequest
from goldbook.application.dto.responses import (
    DeleteRecordResponse,
    ErrorResponse,
    InvoiceListResponse,
    TransactionResponse,
    TreasuryResponse,
    WalletsResponse,
)
from goldbook.application.use_cases import (
    RecordGeneralTransactionUseCase,
    TreasuryOverviewUseCase,
)
from goldbook.core.entities import RecordType

router = APIRouter(prefix="/api/treasury", tags=["treasury"])


@router.get("", response_model=TreasuryResponse)
async def treasury_overview(
    debt_q: str = Query(default="", description="Filter debts by phone"),
    credit_q: str = Query(default="", description="Filter credits by name or phone"),
    use_case: TreasuryOverviewUseCase = Depends(get_treasury_overview_use_case),
) -> TreasuryResponse:
    overview = await use_case.execute(debt_q, credit_q)
    return TreasuryResponse(
        wallets=WalletsResponse.from_entity(overview.wallets),
        debts=[invoice_to_response(inv) for inv in overview.debts],
        credits=[invoice_to_response(inv) for inv in overview.credits],
        total_debts=overview.total_debts,
        total_credits=overview.total_credits,
        transactions=[TransactionResponse.from_entity(t) for t in overview.transactions],
    )


@router.get("/wallets", response_model=WalletsResponse)
async def wallets(
    use_case: TreasuryOverviewUseCase = Depends(get_treasury_overview_use_case),
) -> WalletsResponse:
    overview = await use_case.execute()
    return WalletsResponse.from_entity(overview.wallets)


@router.get("/debts", response_model=InvoiceListResponse)
async def customer_debts(
    q: str = Query(default="", description="Customer phone"),
    use_case: TreasuryOverviewUseCase = Depends(get_treasury_overview_use_case),
) -> InvoiceListResponse:
    """Invoices the customer still owes on."""
    overview = await use_case.execute(debt_query=q)
    return invoices_to_list(overview.debts)


@router.get("/credits", response_model=InvoiceListResponse)
async def customer_credits(
    q: str = Query(default="", description="Customer name or phone"),
    use_case: TreasuryOverviewUseCase = Depends(get_treasury_overview_use_case),
) -> InvoiceListResponse:
    """Invoices where the store owes the customer."""
    overview = await use_case.execute(credit_query=q)
    return invoices_to_list(overview.credits)


@router.get("/transactions", response_model=list[TransactionResponse])
async def list_transactions(
    use_case: RecordGeneralTransactionUseCase = Depends(get_general_transaction_use_case),
) -> list[TransactionResponse]:
    return [TransactionResponse.from_entity(t) for t in await use_case.list_transactions()]


@router.post(
    "/transactions",
    response_model=TransactionResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def add_transaction(
    request: GeneralTransactionRequest,
    use_case: RecordGeneralTransactionUseCase = Depends(get_general_transaction_use_case),
) -> TransactionResponse:
    """Record a deposit or an expense."""
    return TransactionResponse.from_entity(await use_case.add(request))


@router.delete(
    "/transactions/{transaction_id}",
    response_model=DeleteRecordResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_transaction(
    transaction_id: str,
    use_case: RecordGeneralTransactionUseCase = Depends(get_general_transaction_use_case),
) -> DeleteRecordResponse:
    txn = await use_case.delete(transaction_id)
    return DeleteRecordResponse(id=txn.id, record_type=RecordType.GENERAL.value)
