"""Request DTOs for API endpoints.

Pydantic v2 models for API request validation.
These are the ONLY contracts between API and use cases.

Request models check shape and types only. Value rules (non-negative
amounts, tax year range) live on the domain entities so they hold no
matter where a record comes from.
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from ledgerdesk.core.entities.company import BusinessType
from ledgerdesk.core.entities.expense import ExpenseStatus
from ledgerdesk.core.entities.invoice import InvoiceStatus
from ledgerdesk.core.entities.tax import TaxCategory

# --- Invoices ---


class LineItemRequest(BaseModel):
    """A single invoice line. The amount is always computed."""

    description: str = Field(default="", description="Item description")
    quantity: Decimal = Field(default=Decimal("1"), description="Quantity")
    unit_price: Decimal = Field(default=Decimal("0"), description="Price per unit")


class InvoiceRequest(BaseModel):
    """Request to create or replace an invoice."""

    client_name: str = Field(..., min_length=1, description="Bill-to client name")
    invoice_number: str | None = Field(
        default=None,
        description="Invoice number (generated as INV-###### when omitted)",
        examples=["INV-482913"],
    )
    issue_date: date | None = Field(default=None, description="Defaults to today")
    due_date: date | None = Field(default=None, description="Defaults to issue date + 30 days")
    status: InvoiceStatus = Field(default=InvoiceStatus.DRAFT)
    notes: str | None = Field(default=None, description="Free-text notes printed on the invoice")
    items: list[LineItemRequest] = Field(default_factory=list)


# --- Tax entries ---


class TaxEntryRequest(BaseModel):
    """Request to create or replace a tax deduction entry."""

    tax_year: int = Field(..., description="Tax year", examples=[2024])
    category: TaxCategory = Field(..., description="Deduction category")
    amount: Decimal = Field(..., description="Deductible amount, at least 0.01")
    description: str | None = Field(default=None)
    date_added: date | None = Field(default=None, description="Defaults to today")


# --- Expenses ---


class ExpenseRequest(BaseModel):
    """Request to record an expense."""

    expense_date: date = Field(..., description="Date the expense was paid")
    merchant: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1, examples=["Software", "Travel"])
    amount: Decimal = Field(..., description="Amount paid, at least 0.01")
    status: ExpenseStatus = Field(default=ExpenseStatus.PENDING)
    receipt_url: str | None = Field(default=None)


class ExpenseStatusRequest(BaseModel):
    """Request to move an expense to another approval state."""

    status: ExpenseStatus


# --- Company profile ---


class CompanyProfileRequest(BaseModel):
    """Request to create or replace the caller's company profile."""

    company_name: str = Field(default="", description="Printed as the document header name")
    logo_url: str | None = Field(default=None, description="Local path or URL of the logo image")
    address: str | None = None
    email: str | None = None
    phone: str | None = None
    tax_id: str | None = None
    business_type: BusinessType = Field(default=BusinessType.SOLE_PROPRIETORSHIP)
