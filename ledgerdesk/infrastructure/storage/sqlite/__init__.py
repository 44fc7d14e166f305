"""SQLite storage implementations."""

from ledgerdesk.infrastructure.storage.sqlite.company_profile_store import (
    SQLiteCompanyProfileStore,
)
from ledgerdesk.infrastructure.storage.sqlite.connection import (
    ConnectionPool,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
)
from ledgerdesk.infrastructure.storage.sqlite.expense_store import SQLiteExpenseStore
from ledgerdesk.infrastructure.storage.sqlite.invoice_store import SQLiteInvoiceStore
from ledgerdesk.infrastructure.storage.sqlite.tax_entry_store import SQLiteTaxEntryStore

# Singleton instances
_invoice_store: SQLiteInvoiceStore | None = None
_tax_entry_store: SQLiteTaxEntryStore | None = None
_expense_store: SQLiteExpenseStore | None = None
_company_profile_store: SQLiteCompanyProfileStore | None = None


async def get_invoice_store() -> SQLiteInvoiceStore:
    """Get singleton invoice store instance."""
    global _invoice_store
    if _invoice_store is None:
        _invoice_store = SQLiteInvoiceStore()
    return _invoice_store


async def get_tax_entry_store() -> SQLiteTaxEntryStore:
    """Get singleton tax entry store instance."""
    global _tax_entry_store
    if _tax_entry_store is None:
        _tax_entry_store = SQLiteTaxEntryStore()
    return _tax_entry_store


async def get_expense_store() -> SQLiteExpenseStore:
    """Get singleton expense store instance."""
    global _expense_store
    if _expense_store is None:
        _expense_store = SQLiteExpenseStore()
    return _expense_store


async def get_company_profile_store() -> SQLiteCompanyProfileStore:
    """Get singleton company profile store instance."""
    global _company_profile_store
    if _company_profile_store is None:
        _company_profile_store = SQLiteCompanyProfileStore()
    return _company_profile_store


__all__ = [
    # Connection
    "ConnectionPool",
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
    # Store classes
    "SQLiteInvoiceStore",
    "SQLiteTaxEntryStore",
    "SQLiteExpenseStore",
    "SQLiteCompanyProfileStore",
    # Factory functions
    "get_invoice_store",
    "get_tax_entry_store",
    "get_expense_store",
    "get_company_profile_store",
]
