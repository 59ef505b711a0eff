"""API route modules."""

from goldbook.api.routes.health import router as health_router
from goldbook.api.routes.invoices import router as invoices_router
from goldbook.api.routes.reports import router as reports_router
from goldbook.api.routes.traders import router as traders_router
from goldbook.api.routes.treasury import router as treasury_router

__all__ = [
    "health_router",
    "invoices_router",
    "traders_router",
    "treasury_router",
    "reports_router",
]
