"""Data Transfer Objects for API layer.

Request DTOs: Validate and parse incoming API requests.
Response DTOs: Structure and serialize API responses.

These are the ONLY contracts between API handlers and use cases.
"""

from ledgerdesk.application.dto.requests import (
    CompanyProfileRequest,
    ExpenseRequest,
    ExpenseStatusRequest,
    InvoiceRequest,
    LineItemRequest,
    TaxEntryRequest,
)
from ledgerdesk.application.dto.responses import (
    CompanyProfileResponse,
    DashboardResponse,
    ErrorResponse,
    ExpenseListResponse,
    ExpenseResponse,
    ExpenseSummaryResponse,
    GroupTotalResponse,
    HealthResponse,
    InvoiceListResponse,
    InvoiceResponse,
    LineItemResponse,
    ProviderHealthResponse,
    TaxEntryListResponse,
    TaxEntryResponse,
    TaxSummaryResponse,
    TaxYearSummaryResponse,
)

__all__ = [
    # Requests
    "LineItemRequest",
    "InvoiceRequest",
    "TaxEntryRequest",
    "ExpenseRequest",
    "ExpenseStatusRequest",
    "CompanyProfileRequest",
    # Responses
    "LineItemResponse",
    "InvoiceResponse",
    "InvoiceListResponse",
    "TaxEntryResponse",
    "TaxEntryListResponse",
    "GroupTotalResponse",
    "TaxYearSummaryResponse",
    "TaxSummaryResponse",
    "ExpenseResponse",
    "ExpenseListResponse",
    "ExpenseSummaryResponse",
    "CompanyProfileResponse",
    "DashboardResponse",
    "ProviderHealthResponse",
    "HealthResponse",
    "ErrorResponse",
]
