"""Shared pytest fixtures."""

from datetime import date
from decimal import Decimal

import pytest

from ledgerdesk.core.entities import (
    CompanyProfile,
    Expense,
    ExpenseStatus,
    InvoiceDocument,
    InvoiceStatus,
    LineItem,
    TaxCategory,
    TaxEntry,
    UserContext,
)


@pytest.fixture
def ctx() -> UserContext:
    """Context of the user every test acts for."""
    return UserContext(user_id="user-1")


@pytest.fixture
def other_ctx() -> UserContext:
    """A second user, for isolation checks."""
    return UserContext(user_id="user-2")


@pytest.fixture
def sample_line_items() -> list[LineItem]:
    return [
        LineItem(description="Consulting", quantity=10, unit_price="120.00"),
        LineItem(description="Hosting", quantity=1, unit_price="49.99"),
    ]


@pytest.fixture
def sample_invoice(sample_line_items: list[LineItem]) -> InvoiceDocument:
    """Invoice totalling 1249.99."""
    return InvoiceDocument(
        id=1,
        user_id="user-1",
        invoice_number="INV-000123",
        client_name="Acme Corp",
        issue_date=date(2024, 3, 1),
        due_date=date(2024, 3, 31),
        status=InvoiceStatus.SENT,
        notes="Thank you for your business",
        items=sample_line_items,
    )


@pytest.fixture
def sample_tax_entries() -> list[TaxEntry]:
    """Entries over two years, 2023 listed first."""
    return [
        TaxEntry(
            id=1,
            tax_year=2023,
            category=TaxCategory.HOME_OFFICE,
            amount="1200.00",
            description="Desk and chair",
            date_added=date(2023, 5, 2),
        ),
        TaxEntry(
            id=2,
            tax_year=2024,
            category=TaxCategory.EDUCATION,
            amount="300.00",
            description="Course",
            date_added=date(2024, 2, 10),
        ),
        TaxEntry(
            id=3,
            tax_year=2024,
            category=TaxCategory.HEALTHCARE,
            amount="150.25",
            date_added=date(2024, 3, 15),
        ),
        TaxEntry(
            id=4,
            tax_year=2024,
            category=TaxCategory.EDUCATION,
            amount="99.75",
            description="Books",
            date_added=date(2024, 4, 1),
        ),
    ]


@pytest.fixture
def sample_expenses() -> list[Expense]:
    return [
        Expense(
            id=1,
            expense_date=date(2024, 1, 5),
            merchant="GitHub",
            category="Software",
            amount="21.00",
            status=ExpenseStatus.APPROVED,
        ),
        Expense(
            id=2,
            expense_date=date(2024, 1, 9),
            merchant="Staples",
            category="Office Supplies",
            amount="35.40",
        ),
        Expense(
            id=3,
            expense_date=date(2024, 2, 1),
            merchant="GitLab",
            category="Software",
            amount=Decimal("19.00"),
            status=ExpenseStatus.REJECTED,
        ),
    ]


@pytest.fixture
def sample_profile() -> CompanyProfile:
    return CompanyProfile(
        id=1,
        user_id="user-1",
        company_name="Northwind Studio",
        address="1 Harbour Road, Springfield",
        email="billing@northwind.test",
        phone="+1-555-0100",
        tax_id="TX-998877",
    )
