"""
Dependency injection container for FastAPI.

Provides the caller's UserContext, stores, and use cases to route handlers.
"""

from functools import lru_cache

from fastapi import Header, HTTPException, status

from ledgerdesk.application.use_cases import (
    ExportInvoicePdfUseCase,
    ExportTaxReportUseCase,
    GetDashboardUseCase,
    SaveInvoiceUseCase,
)
from ledgerdesk.config import Settings, bind_request_context, get_settings
from ledgerdesk.core.entities.context import UserContext
from ledgerdesk.infrastructure.storage.sqlite import (
    SQLiteCompanyProfileStore,
    SQLiteExpenseStore,
    SQLiteInvoiceStore,
    SQLiteTaxEntryStore,
    get_company_profile_store,
    get_expense_store,
    get_invoice_store,
    get_tax_entry_store,
)

USER_ID_HEADER = "X-User-ID"


@lru_cache
def get_app_settings() -> Settings:
    """Get cached application settings."""
    return get_settings()


# Caller context
def get_user_context(
    x_user_id: str | None = Header(default=None, alias=USER_ID_HEADER),
) -> UserContext:
    """Build the explicit UserContext from the X-User-ID header."""
    if x_user_id is None or not x_user_id.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Missing {USER_ID_HEADER} header",
        )
    ctx = UserContext(user_id=x_user_id.strip())
    bind_request_context(user_id=ctx.user_id)
    return ctx


# Store dependencies
async def get_inv_store() -> SQLiteInvoiceStore:
    """Get invoice store."""
    return await get_invoice_store()


async def get_tax_store() -> SQLiteTaxEntryStore:
    """Get tax entry store."""
    return await get_tax_entry_store()


async def get_exp_store() -> SQLiteExpenseStore:
    """Get expense store."""
    return await get_expense_store()


async def get_profile_store() -> SQLiteCompanyProfileStore:
    """Get company profile store."""
    return await get_company_profile_store()


# Use case dependencies
def get_save_invoice_use_case() -> SaveInvoiceUseCase:
    """Get save invoice use case."""
    return SaveInvoiceUseCase()


def get_export_invoice_pdf_use_case() -> ExportInvoicePdfUseCase:
    """Get export invoice PDF use case."""
    return ExportInvoicePdfUseCase()


def get_export_tax_report_use_case() -> ExportTaxReportUseCase:
    """Get export tax report use case."""
    return ExportTaxReportUseCase()


def get_dashboard_use_case() -> GetDashboardUseCase:
    """Get dashboard use case."""
    return GetDashboardUseCase()
