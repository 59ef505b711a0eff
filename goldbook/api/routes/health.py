"""
Health check endpoints.
"""

import time

from fastapi import APIRouter, Depends

from goldbook.api.dependencies import get_app_settings, get_store
from goldbook.application.dto.responses import ComponentHealthResponse, HealthResponse
from goldbook.config import Settings
from goldbook.core.interfaces import ILedgerStore

router = APIRouter(prefix="/api/health", tags=["health"])

_start_time = time.time()


@router.get("", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    """Service status and uptime."""
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        uptime_seconds=time.time() - _start_time,
    )


@router.get("/db", response_model=HealthResponse)
async def db_health(
    settings: Settings = Depends(get_app_settings),
    store: ILedgerStore = Depends(get_store),
) -> HealthResponse:
    """Load the ledger snapshot once and report how long it took."""
    db_status = ComponentHealthResponse(name=store.__class__.__name__, available=False)
    try:
        start = time.time()
        await store.load_snapshot()
        db_status.available = True
        db_status.latency_ms = (time.time() - start) * 1000
    except Exception as e:
        db_status.error = str(e)

    return HealthResponse(
        status="healthy" if db_status.available else "unhealthy",
        version=settings.app_version,
        uptime_seconds=time.time() - _start_time,
        database=db_status,
    )
