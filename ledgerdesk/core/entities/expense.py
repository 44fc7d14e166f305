"""Expense domain entities."""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from ledgerdesk.core.exceptions import InvalidAmountError
from ledgerdesk.core.money import CENT, round_money

# Categories offered by the expense form; free text is still accepted.
EXPENSE_CATEGORIES: tuple[str, ...] = (
    "Software",
    "Office Supplies",
    "Hosting",
    "Travel",
    "Rent",
    "Transportation",
    "Marketing",
    "Food",
)


class ExpenseStatus(str, Enum):
    """Approval state of an expense."""

    APPROVED = "approved"
    PENDING = "pending"
    REJECTED = "rejected"


class Expense(BaseModel):
    """A business expense paid to a merchant."""

    id: int | None = None
    user_id: str | None = None

    expense_date: date
    merchant: str
    category: str
    amount: Decimal
    status: ExpenseStatus = ExpenseStatus.PENDING
    receipt_url: str | None = None

    created_at: datetime = Field(default_factory=datetime.utcnow)

    @field_validator("merchant", "category", mode="before")
    @classmethod
    def strip_text(cls, v: Any) -> str:
        if v is None:
            return ""
        return str(v).strip()

    @field_validator("amount", mode="before")
    @classmethod
    def validate_amount(cls, v: Any) -> Decimal:
        amount = round_money(v)
        if amount < CENT:
            raise InvalidAmountError("amount", v, minimum=str(CENT))
        return amount
