"""Response DTOs for API endpoints.

Pydantic v2 models for API response serialization.
These are the ONLY contracts between use cases and API layer.
Money fields are Decimal and serialize as strings.
"""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, Field

# --- Invoices ---


class LineItemResponse(BaseModel):
    """Invoice line item response DTO."""

    id: int | None = None
    description: str
    quantity: Decimal
    unit_price: Decimal
    amount: Decimal


class InvoiceResponse(BaseModel):
    """Invoice response DTO."""

    id: int
    invoice_number: str
    client_name: str
    issue_date: date
    due_date: date
    status: str
    notes: str | None = None
    items: list[LineItemResponse]
    total_amount: Decimal
    created_at: datetime
    updated_at: datetime
    warnings: list[str] = Field(default_factory=list)


class InvoiceListResponse(BaseModel):
    """List of invoices."""

    invoices: list[InvoiceResponse]
    total: int


# --- Tax entries ---


class TaxEntryResponse(BaseModel):
    """Tax entry response DTO."""

    id: int
    tax_year: int
    category: str
    amount: Decimal
    description: str | None = None
    date_added: date
    created_at: datetime
    updated_at: datetime


class TaxEntryListResponse(BaseModel):
    """List of tax entries."""

    entries: list[TaxEntryResponse]
    total: int


class GroupTotalResponse(BaseModel):
    """One row of a grouped summary."""

    label: str
    amount: Decimal


class TaxYearSummaryResponse(BaseModel):
    """Category totals for one tax year."""

    tax_year: int
    categories: list[GroupTotalResponse]
    total: Decimal


class TaxSummaryResponse(BaseModel):
    """Per-year category totals, most recent year first."""

    years: list[TaxYearSummaryResponse]
    grand_total: Decimal


# --- Expenses ---


class ExpenseResponse(BaseModel):
    """Expense response DTO."""

    id: int
    expense_date: date
    merchant: str
    category: str
    amount: Decimal
    status: str
    receipt_url: str | None = None
    created_at: datetime


class ExpenseListResponse(BaseModel):
    """List of expenses."""

    expenses: list[ExpenseResponse]
    total: int


class ExpenseSummaryResponse(BaseModel):
    """Totals of a filtered expense set."""

    count: int
    total: Decimal
    categories: list[GroupTotalResponse]


# --- Company profile ---


class CompanyProfileResponse(BaseModel):
    """Company profile response DTO."""

    id: int | None = None
    company_name: str
    logo_url: str | None = None
    address: str | None = None
    email: str | None = None
    phone: str | None = None
    tax_id: str | None = None
    business_type: str


# --- Dashboard ---


class DashboardResponse(BaseModel):
    """Headline figures for the caller's books."""

    invoice_count: int
    invoice_totals_by_status: list[GroupTotalResponse]
    invoice_grand_total: Decimal
    expense_total: Decimal
    tax_deduction_total: Decimal


# --- Health ---


class ProviderHealthResponse(BaseModel):
    """Dependency health status."""

    name: str
    available: bool
    latency_ms: float | None = None
    error: str | None = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = "1.0.0"
    uptime_seconds: float
    database: ProviderHealthResponse | None = None


# --- Errors ---


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. INVOICE_NOT_FOUND)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)
