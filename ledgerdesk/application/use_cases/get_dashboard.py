"""Get Dashboard Use Case: headline totals across invoices, expenses and tax entries."""

import asyncio
from dataclasses import dataclass
from decimal import Decimal

from ledgerdesk.application.dto.responses import DashboardResponse, GroupTotalResponse
from ledgerdesk.config import get_logger
from ledgerdesk.core.entities.context import UserContext
from ledgerdesk.core.interfaces import IExpenseStore, IInvoiceStore, ITaxEntryStore
from ledgerdesk.core.services import (
    GRAND_TOTAL,
    compute_document_total,
    compute_expense_total,
    invoice_totals_by_status,
)

logger = get_logger(__name__)


@dataclass
class DashboardResult:
    invoice_count: int
    invoice_totals: dict[str, Decimal]
    expense_total: Decimal
    tax_deduction_total: Decimal


class GetDashboardUseCase:
    """Aggregate snapshots of the caller's records into dashboard figures."""

    def __init__(
        self,
        invoice_store: IInvoiceStore | None = None,
        expense_store: IExpenseStore | None = None,
        tax_store: ITaxEntryStore | None = None,
    ):
        self._invoice_store = invoice_store
        self._expense_store = expense_store
        self._tax_store = tax_store

    async def _get_stores(self) -> tuple[IInvoiceStore, IExpenseStore, ITaxEntryStore]:
        from ledgerdesk.infrastructure.storage.sqlite import (
            get_expense_store,
            get_invoice_store,
            get_tax_entry_store,
        )

        if self._invoice_store is None:
            self._invoice_store = await get_invoice_store()
        if self._expense_store is None:
            self._expense_store = await get_expense_store()
        if self._tax_store is None:
            self._tax_store = await get_tax_entry_store()
        return self._invoice_store, self._expense_store, self._tax_store

    async def execute(self, ctx: UserContext) -> DashboardResult:
        invoice_store, expense_store, tax_store = await self._get_stores()

        invoices, expenses, entries = await asyncio.gather(
            invoice_store.list_invoices(ctx, limit=None),
            expense_store.list_expenses(ctx),
            tax_store.list_entries(ctx),
        )

        result = DashboardResult(
            invoice_count=len(invoices),
            invoice_totals=invoice_totals_by_status(invoices),
            expense_total=compute_expense_total(expenses),
            tax_deduction_total=compute_document_total(entries),
        )
        logger.debug(
            "dashboard_computed",
            user_id=ctx.user_id,
            invoices=len(invoices),
            expenses=len(expenses),
            tax_entries=len(entries),
        )
        return result

    @staticmethod
    def to_response(result: DashboardResult) -> DashboardResponse:
        totals = dict(result.invoice_totals)
        grand_total = totals.pop(GRAND_TOTAL)
        return DashboardResponse(
            invoice_count=result.invoice_count,
            invoice_totals_by_status=[
                GroupTotalResponse(label=label, amount=amount)
                for label, amount in totals.items()
            ],
            invoice_grand_total=grand_total,
            expense_total=result.expense_total,
            tax_deduction_total=result.tax_deduction_total,
        )
