"""
Abstract interfaces for storage providers.

Defines contracts for invoice, tax entry, expense, and company profile
stores. Every operation is scoped by the caller's UserContext.
"""

from abc import ABC, abstractmethod

from ledgerdesk.core.entities.company import CompanyProfile
from ledgerdesk.core.entities.context import UserContext
from ledgerdesk.core.entities.expense import Expense, ExpenseStatus
from ledgerdesk.core.entities.invoice import InvoiceDocument
from ledgerdesk.core.entities.tax import TaxEntry


class IInvoiceStore(ABC):
    """
    Abstract interface for invoice storage.

    Handles invoice headers and their line items.
    """

    @abstractmethod
    async def create_invoice(self, ctx: UserContext, invoice: InvoiceDocument) -> InvoiceDocument:
        """Create an invoice with all its items in one transaction."""
        pass

    @abstractmethod
    async def get_invoice(self, ctx: UserContext, invoice_id: int) -> InvoiceDocument | None:
        """Get invoice by ID with items."""
        pass

    @abstractmethod
    async def list_invoices(
        self,
        ctx: UserContext,
        limit: int | None = 100,
        offset: int = 0,
    ) -> list[InvoiceDocument]:
        """List invoices, newest first. ``limit=None`` returns all of them."""
        pass

    @abstractmethod
    async def count_invoices(self, ctx: UserContext) -> int:
        """Number of invoices the user owns."""
        pass

    @abstractmethod
    async def update_invoice(self, ctx: UserContext, invoice: InvoiceDocument) -> InvoiceDocument:
        """Replace invoice header fields and items."""
        pass

    @abstractmethod
    async def delete_invoice(self, ctx: UserContext, invoice_id: int) -> bool:
        """Delete invoice; items cascade."""
        pass


class ITaxEntryStore(ABC):
    """Abstract interface for tax deduction entries."""

    @abstractmethod
    async def create_entry(self, ctx: UserContext, entry: TaxEntry) -> TaxEntry:
        pass

    @abstractmethod
    async def get_entry(self, ctx: UserContext, entry_id: int) -> TaxEntry | None:
        pass

    @abstractmethod
    async def list_entries(
        self,
        ctx: UserContext,
        tax_year: int | None = None,
    ) -> list[TaxEntry]:
        """List entries, most recently added first."""
        pass

    @abstractmethod
    async def update_entry(self, ctx: UserContext, entry: TaxEntry) -> TaxEntry:
        pass

    @abstractmethod
    async def delete_entry(self, ctx: UserContext, entry_id: int) -> bool:
        pass


class IExpenseStore(ABC):
    """Abstract interface for expenses."""

    @abstractmethod
    async def create_expense(self, ctx: UserContext, expense: Expense) -> Expense:
        pass

    @abstractmethod
    async def get_expense(self, ctx: UserContext, expense_id: int) -> Expense | None:
        pass

    @abstractmethod
    async def list_expenses(self, ctx: UserContext) -> list[Expense]:
        """List expenses, most recent expense date first."""
        pass

    @abstractmethod
    async def update_status(
        self,
        ctx: UserContext,
        expense_id: int,
        status: ExpenseStatus,
    ) -> Expense:
        pass

    @abstractmethod
    async def delete_expense(self, ctx: UserContext, expense_id: int) -> bool:
        pass


class ICompanyProfileStore(ABC):
    """Abstract interface for the per-user company profile."""

    @abstractmethod
    async def get_profile(self, ctx: UserContext) -> CompanyProfile | None:
        pass

    @abstractmethod
    async def upsert_profile(self, ctx: UserContext, profile: CompanyProfile) -> CompanyProfile:
        """Create the profile or replace the existing one."""
        pass
