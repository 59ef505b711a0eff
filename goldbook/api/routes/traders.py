"""Trader (supplier) endpoints: traders, their transactions and accounts."""

from fastapi import APIRouter, Depends, Query, status

from goldbook.api.dependencies import (
    get_manage_traders_use_case,
    get_trader_accounts_use_case,
    get_trader_transaction_use_case,
)
from goldbook.application.dto.requests import (
    CreateTraderRequest,
    TraderTransactionRequest,
    UpdateTraderRequest,
    UpdateTraderTransactionRequest,
)
from goldbook.application.dto.responses import (
    DeleteRecordResponse,
    DeleteTraderResponse,
    ErrorResponse,
    TraderAccountResponse,
    TraderAccountsResponse,
    TraderDetailResponse,
    TraderResponse,
    TraderTransactionResponse,
)
from goldbook.application.use_cases import (
    ManageTradersUseCase,
    RecordTraderTransactionUseCase,
    TraderAccountsUseCase,
)
from goldbook.core.entities import RecordType, TraderCategory

router = APIRouter(prefix="/api/traders", tags=["traders"])


@router.get("", response_model=TraderAccountsResponse)
async def list_trader_accounts(
    category: TraderCategory | None = Query(default=None),
    use_case: TraderAccountsUseCase = Depends(get_trader_accounts_use_case),
) -> TraderAccountsResponse:
    """Every trader with its current balances."""
    statements = await use_case.execute(category)
    return TraderAccountsResponse(
        accounts=[
            TraderAccountResponse(trader=TraderResponse.from_entity(s.trader), account=s.account)
            for s in statements
        ],
        total=len(statements),
    )


@router.post(
    "",
    response_model=TraderResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_trader(
    request: CreateTraderRequest,
    use_case: ManageTradersUseCase = Depends(get_manage_traders_use_case),
) -> TraderResponse:
    return TraderResponse.from_entity(await use_case.create(request))


@router.get(
    "/{trader_id}",
    response_model=TraderDetailResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_trader_statement(
    trader_id: str,
    use_case: TraderAccountsUseCase = Depends(get_trader_accounts_use_case),
) -> TraderDetailResponse:
    """Account and transaction history, newest first."""
    statement = await use_case.statement(trader_id)
    return TraderDetailResponse(
        trader=TraderResponse.from_entity(statement.trader),
        account=statement.account,
        transactions=[
            TraderTransactionResponse.from_entity(t) for t in statement.transactions
        ],
    )


@router.patch(
    "/{trader_id}",
    response_model=TraderResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_trader(
    trader_id: str,
    request: UpdateTraderRequest,
    use_case: ManageTradersUseCase = Depends(get_manage_traders_use_case),
) -> TraderResponse:
    return TraderResponse.from_entity(await use_case.update(trader_id, request))


@router.delete(
    "/{trader_id}",
    response_model=DeleteTraderResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_trader(
    trader_id: str,
    use_case: ManageTradersUseCase = Depends(get_manage_traders_use_case),
) -> DeleteTraderResponse:
    """Delete the trader together with all of its transactions."""
    result = await use_case.delete(trader_id)
    return DeleteTraderResponse(
        trader_id=result.trader.id,
        deleted_transactions=len(result.transactions),
    )


@router.post(
    "/{trader_id}/transactions",
    response_model=TraderTransactionResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def add_trader_transaction(
    trader_id: str,
    request: TraderTransactionRequest,
    use_case: RecordTraderTransactionUseCase = Depends(get_trader_transaction_use_case),
) -> TraderTransactionResponse:
    return TraderTransactionResponse.from_entity(await use_case.add(trader_id, request))


@router.patch(
    "/transactions/{transaction_id}",
    response_model=TraderTransactionResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_trader_transaction(
    transaction_id: str,
    request: UpdateTraderTransactionRequest,
    use_case: RecordTraderTransactionUseCase = Depends(get_trader_transaction_use_case),
) -> TraderTransactionResponse:
    return TraderTransactionResponse.from_entity(
        await use_case.update(transaction_id, request)
    )


@router.delete(
    "/transactions/{transaction_id}",
    response_model=DeleteRecordResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_trader_transaction(
    transaction_id: str,
    use_case: RecordTraderTransactionUseCase = Depends(get_trader_transaction_use_case),
) -> DeleteRecordResponse:
    txn = await use_case.delete(transaction_id)
    return DeleteRecordResponse(id=txn.id, record_type=RecordType.TRADER_TRANSACTION.value)
