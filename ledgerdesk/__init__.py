"""LedgerDesk: invoices, tax deductions and expenses with PDF export."""

__version__ = "1.0.0"
