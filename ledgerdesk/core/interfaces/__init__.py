"""Core interfaces (ports) for dependency injection."""

from ledgerdesk.core.interfaces.renderer import IDocumentRenderer
from ledgerdesk.core.interfaces.storage import (
    ICompanyProfileStore,
    IExpenseStore,
    IInvoiceStore,
    ITaxEntryStore,
)

__all__ = [
    # Rendering
    "IDocumentRenderer",
    # Storage interfaces
    "IInvoiceStore",
    "ITaxEntryStore",
    "IExpenseStore",
    "ICompanyProfileStore",
]
