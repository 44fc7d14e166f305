"""
Invoice domain entities with Pydantic v2 validation.

Derived money fields (line amount, invoice total) are recomputed on
construction, so a stored or submitted value can never disagree with
quantity x unit price.
"""

import time
from datetime import date, datetime, timedelta
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from ledgerdesk.core.money import ZERO, to_decimal

PAYMENT_TERMS_DAYS = 30


class InvoiceStatus(str, Enum):
    """Invoice status. Transitions between values are free-form edits."""

    DRAFT = "draft"
    SENT = "sent"
    PAID = "paid"
    OVERDUE = "overdue"


def default_invoice_number() -> str:
    """INV- followed by the last six digits of the epoch in milliseconds."""
    return f"INV-{str(int(time.time() * 1000))[-6:]}"


def default_due_date() -> date:
    return date.today() + timedelta(days=PAYMENT_TERMS_DAYS)


class LineItem(BaseModel):
    """
    One row of an invoice: quantity x unit price.

    ``amount`` is always recomputed; any supplied value is ignored.
    """

    id: int | None = None
    invoice_id: int | None = None

    description: str = ""
    quantity: Decimal = Decimal("1")
    unit_price: Decimal = ZERO
    amount: Decimal = ZERO

    @field_validator("quantity", "unit_price", "amount", mode="before")
    @classmethod
    def coerce_numeric(cls, v: Any) -> Decimal:
        """Accept ints, floats, numeric strings and None."""
        return to_decimal(v)

    @field_validator("description", mode="before")
    @classmethod
    def coerce_string(cls, v: Any) -> str:
        """Ensure description is never None."""
        if v is None:
            return ""
        return str(v).strip()

    @model_validator(mode="after")
    def compute_amount(self) -> "LineItem":
        """amount = round_half_up(quantity * unit_price, 2)."""
        from ledgerdesk.core.services.aggregator import compute_line_amount

        self.amount = compute_line_amount(self.quantity, self.unit_price)
        return self


class InvoiceDocument(BaseModel):
    """An invoice with its ordered line items."""

    id: int | None = None
    user_id: str | None = None

    client_name: str
    invoice_number: str = Field(default_factory=default_invoice_number)
    issue_date: date = Field(default_factory=date.today)
    due_date: date = Field(default_factory=default_due_date)
    status: InvoiceStatus = InvoiceStatus.DRAFT
    notes: str | None = None

    items: list[LineItem] = Field(default_factory=list)
    total_amount: Decimal = ZERO

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    @field_validator("total_amount", mode="before")
    @classmethod
    def coerce_total(cls, v: Any) -> Decimal:
        return to_decimal(v)

    @field_validator("notes", mode="before")
    @classmethod
    def blank_notes_to_none(cls, v: Any) -> str | None:
        if v is None:
            return None
        v = str(v).strip()
        return v or None

    @model_validator(mode="after")
    def compute_total(self) -> "InvoiceDocument":
        """total_amount = round_half_up(sum of item amounts, 2)."""
        from ledgerdesk.core.services.aggregator import compute_document_total

        self.total_amount = compute_document_total(self.items)
        return self

    @property
    def has_items(self) -> bool:
        return bool(self.items)
