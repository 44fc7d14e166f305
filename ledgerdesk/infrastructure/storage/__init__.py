"""Storage infrastructure implementations."""

from ledgerdesk.infrastructure.storage.sqlite import (
    SQLiteCompanyProfileStore,
    SQLiteExpenseStore,
    SQLiteInvoiceStore,
    SQLiteTaxEntryStore,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
)

__all__ = [
    # SQLite stores
    "SQLiteInvoiceStore",
    "SQLiteTaxEntryStore",
    "SQLiteExpenseStore",
    "SQLiteCompanyProfileStore",
    # Connection pool
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
]
