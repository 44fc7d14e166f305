"""Core domain entities."""

from ledgerdesk.core.entities.company import BusinessType, CompanyProfile
from ledgerdesk.core.entities.context import UserContext
from ledgerdesk.core.entities.document import (
    Block,
    Column,
    DocumentKind,
    GeneratedDocument,
    ImageBlock,
    KeyValueBlock,
    TableBlock,
    TextBlock,
    TotalBlock,
)
from ledgerdesk.core.entities.expense import EXPENSE_CATEGORIES, Expense, ExpenseStatus
from ledgerdesk.core.entities.invoice import InvoiceDocument, InvoiceStatus, LineItem
from ledgerdesk.core.entities.tax import TaxCategory, TaxEntry

__all__ = [
    # Context
    "UserContext",
    # Invoice entities
    "LineItem",
    "InvoiceDocument",
    "InvoiceStatus",
    # Tax entities
    "TaxEntry",
    "TaxCategory",
    # Expense entities
    "Expense",
    "ExpenseStatus",
    "EXPENSE_CATEGORIES",
    # Company profile
    "CompanyProfile",
    "BusinessType",
    # Document model
    "Block",
    "Column",
    "DocumentKind",
    "GeneratedDocument",
    "ImageBlock",
    "KeyValueBlock",
    "TableBlock",
    "TextBlock",
    "TotalBlock",
]
