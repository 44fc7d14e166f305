"""
Application layer - Use cases, DTOs, and service factories.

This layer orchestrates business logic by:
1. Defining request/response DTOs for API contracts
2. Implementing use cases that coordinate core services and stores
3. Providing factory functions for dependency injection
"""

from ledgerdesk.application.services import (
    get_document_builder,
    get_document_renderer,
    reset_services,
)
from ledgerdesk.application.use_cases import (
    ExportInvoicePdfUseCase,
    ExportResult,
    ExportTaxReportUseCase,
    GetDashboardUseCase,
    SaveInvoiceUseCase,
)

__all__ = [
    # Use Cases
    "SaveInvoiceUseCase",
    "ExportInvoicePdfUseCase",
    "ExportTaxReportUseCase",
    "GetDashboardUseCase",
    "ExportResult",
    # Service factories
    "get_document_builder",
    "get_document_renderer",
    "reset_services",
]
