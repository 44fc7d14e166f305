"""API route modules."""

from ledgerdesk.api.routes.company_profile import router as company_profile_router
from ledgerdesk.api.routes.dashboard import router as dashboard_router
from ledgerdesk.api.routes.expenses import router as expenses_router
from ledgerdesk.api.routes.health import router as health_router
from ledgerdesk.api.routes.invoices import router as invoices_router
from ledgerdesk.api.routes.tax_entries import router as tax_entries_router

__all__ = [
    "health_router",
    "invoices_router",
    "tax_entries_router",
    "expenses_router",
    "company_profile_router",
    "dashboard_router",
]
