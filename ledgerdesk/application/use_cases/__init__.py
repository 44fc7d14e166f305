"""Application use cases."""

from ledgerdesk.application.use_cases.export_document import ExportResult, render_document
from ledgerdesk.application.use_cases.export_invoice_pdf import ExportInvoicePdfUseCase
from ledgerdesk.application.use_cases.export_tax_report import ExportTaxReportUseCase
from ledgerdesk.application.use_cases.get_dashboard import DashboardResult, GetDashboardUseCase
from ledgerdesk.application.use_cases.save_invoice import (
    NO_ITEMS_WARNING,
    SaveInvoiceResult,
    SaveInvoiceUseCase,
    invoice_to_response,
)

__all__ = [
    "ExportResult",
    "render_document",
    "ExportInvoicePdfUseCase",
    "ExportTaxReportUseCase",
    "GetDashboardUseCase",
    "DashboardResult",
    "SaveInvoiceUseCase",
    "SaveInvoiceResult",
    "NO_ITEMS_WARNING",
    "invoice_to_response",
]
