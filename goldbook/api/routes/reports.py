"""Report endpoints: dashboard, trend and the unified log."""

from datetime import date, timedelta

from fastapi import APIRouter, Depends, Query

from goldbook.api.dependencies import get_dashboard_use_case, get_delete_record_use_case
from goldbook.application.dto.responses import (
    DashboardResponse,
    DeleteRecordResponse,
    ErrorResponse,
    LogEntryResponse,
    LogResponse,
    TrendResponse,
    WalletsResponse,
)
from goldbook.application.use_cases import BuildDashboardUseCase, DeleteRecordUseCase
from goldbook.core.entities import RecordType
from goldbook.core.services import TimeRange

router = APIRouter(prefix="/api/reports", tags=["reports"])


@router.get("/dashboard", response_model=DashboardResponse)
async def dashboard(
    time_range: TimeRange = Query(default=TimeRange.ALL, alias="range"),
    start: date | None = Query(default=None, description="custom range start"),
    end: date | None = Query(default=None, description="custom range end"),
    use_case: BuildDashboardUseCase = Depends(get_dashboard_use_case),
) -> DashboardResponse:
    result = await use_case.execute(time_range, start, end)
    return DashboardResponse(
        time_range=result.time_range,
        totals=result.totals,
        sales_summary=result.sales,
        purchases_summary=result.purchases,
        inventory=result.inventory,
        wallets=WalletsResponse.from_entity(result.wallets),
        trend=result.trend,
    )


@router.get("/trend", response_model=TrendResponse)
async def trend(
    use_case: BuildDashboardUseCase = Depends(get_dashboard_use_case),
) -> TrendResponse:
    """Daily sales and purchases over the trailing trend window."""
    points = await use_case.trend()
    today = date.today()
    return TrendResponse(
        start=points[0].day if points else today - timedelta(days=1),
        end=points[-1].day if points else today,
        points=points,
    )


@router.get("/log", response_model=LogResponse)
async def unified_log(
    time_range: TimeRange = Query(default=TimeRange.ALL, alias="range"),
    start: date | None = Query(default=None),
    end: date | None = Query(default=None),
    record_type: RecordType | None = Query(default=None),
    q: str = Query(default="", description="Customer, description or trader name"),
    use_case: BuildDashboardUseCase = Depends(get_dashboard_use_case),
) -> LogResponse:
    """All records newest first."""
    entries = await use_case.log(time_range, start, end, record_type, q)
    return LogResponse(
        entries=[LogEntryResponse.from_entry(e) for e in entries],
        total=len(entries),
    )


@router.delete(
    "/log/{record_type}/{record_id}",
    response_model=DeleteRecordResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_log_record(
    record_type: RecordType,
    record_id: str,
    use_case: DeleteRecordUseCase = Depends(get_delete_record_use_case),
) -> DeleteRecordResponse:
    result = await use_case.execute(record_id, record_type)
    return DeleteRecordResponse(id=result.record_id, record_type=result.record_type.value)
