"""
Core business logic services.

Layer-pure services that depend only on:
- ledgerdesk/core/entities/*
- ledgerdesk/core/exceptions.py
- ledgerdesk/core/money.py
- ledgerdesk/config (logging only)

NO infrastructure imports.
"""

from ledgerdesk.core.services.aggregator import (
    GRAND_TOTAL,
    category_totals,
    compute_document_total,
    compute_expense_total,
    compute_line_amount,
    filter_expenses,
    group_by_key,
    group_tax_entries_by_year,
    invoice_totals_by_status,
    sum_by_group,
    summarize_tax_entries,
)
from ledgerdesk.core.services.document_builder import (
    INVOICE_COLUMNS,
    TAX_ENTRY_COLUMNS,
    DocumentBuilder,
    invoice_file_name,
    tax_report_file_name,
)

__all__ = [
    # Aggregator
    "GRAND_TOTAL",
    "compute_line_amount",
    "compute_document_total",
    "group_by_key",
    "sum_by_group",
    "group_tax_entries_by_year",
    "summarize_tax_entries",
    "category_totals",
    "compute_expense_total",
    "filter_expenses",
    "invoice_totals_by_status",
    # Document builder
    "DocumentBuilder",
    "INVOICE_COLUMNS",
    "TAX_ENTRY_COLUMNS",
    "invoice_file_name",
    "tax_report_file_name",
]
