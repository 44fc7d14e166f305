"""Tax entry domain entities."""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from ledgerdesk.core.exceptions import InvalidAmountError
from ledgerdesk.core.money import CENT, round_money

MIN_TAX_YEAR = 2000
MAX_TAX_YEAR = 2100


class TaxCategory(str, Enum):
    """The fixed set of deduction categories."""

    BUSINESS_EXPENSES = "Business Expenses"
    CHARITABLE_DONATIONS = "Charitable Donations"
    EDUCATION = "Education"
    HEALTHCARE = "Healthcare"
    HOME_OFFICE = "Home Office"
    INTEREST_PAYMENTS = "Interest Payments"
    INVESTMENT_EXPENSES = "Investment Expenses"
    RETIREMENT_CONTRIBUTIONS = "Retirement Contributions"
    SELF_EMPLOYMENT_TAXES = "Self-Employment Taxes"
    TRAVEL_EXPENSES = "Travel Expenses"
    OTHER = "Other"


class TaxEntry(BaseModel):
    """
    A single deductible amount logged against a tax year.

    Entries are never merged; grouping by year and category happens
    at read time only.
    """

    id: int | None = None
    user_id: str | None = None

    tax_year: int = Field(ge=MIN_TAX_YEAR, le=MAX_TAX_YEAR)
    category: TaxCategory
    amount: Decimal
    description: str | None = None
    date_added: date = Field(default_factory=date.today)

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    @field_validator("amount", mode="before")
    @classmethod
    def validate_amount(cls, v: Any) -> Decimal:
        amount = round_money(v)
        if amount < CENT:
            raise InvalidAmountError("amount", v, minimum=str(CENT))
        return amount
