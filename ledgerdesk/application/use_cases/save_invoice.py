"""Save Invoice Use Case: create or replace an invoice with computed amounts."""

from dataclasses import dataclass, field

from ledgerdesk.application.dto.requests import InvoiceRequest
from ledgerdesk.application.dto.responses import InvoiceResponse, LineItemResponse
from ledgerdesk.config import get_logger
from ledgerdesk.core.entities.context import UserContext
from ledgerdesk.core.entities.invoice import InvoiceDocument, LineItem
from ledgerdesk.core.exceptions import InvoiceNotFoundError
from ledgerdesk.core.interfaces import IInvoiceStore

logger = get_logger(__name__)

NO_ITEMS_WARNING = "Invoice has no line items"


@dataclass
class SaveInvoiceResult:
    """Result of saving an invoice."""

    invoice: InvoiceDocument
    warnings: list[str] = field(default_factory=list)


class SaveInvoiceUseCase:
    """
    Build typed line items from a request and persist the invoice.

    Zero-item invoices are saved with a warning; they only become an
    error when someone tries to export them.
    """

    def __init__(self, invoice_store: IInvoiceStore | None = None):
        self._invoice_store = invoice_store

    async def _get_invoice_store(self) -> IInvoiceStore:
        if self._invoice_store is None:
            from ledgerdesk.infrastructure.storage.sqlite import get_invoice_store

            self._invoice_store = await get_invoice_store()
        return self._invoice_store

    @staticmethod
    def _build_invoice(
        ctx: UserContext,
        request: InvoiceRequest,
        existing: InvoiceDocument | None = None,
    ) -> InvoiceDocument:
        """Entity validators compute every line amount and the total."""
        values: dict = {
            "user_id": ctx.user_id,
            "client_name": request.client_name,
            "status": request.status,
            "notes": request.notes,
            "items": [
                LineItem(
                    description=item.description,
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                )
                for item in request.items
            ],
        }
        if request.invoice_number:
            values["invoice_number"] = request.invoice_number
        elif existing is not None:
            values["invoice_number"] = existing.invoice_number
        if request.issue_date:
            values["issue_date"] = request.issue_date
        elif existing is not None:
            values["issue_date"] = existing.issue_date
        if request.due_date:
            values["due_date"] = request.due_date
        elif existing is not None:
            values["due_date"] = existing.due_date
        if existing is not None:
            values["id"] = existing.id
            values["created_at"] = existing.created_at
        return InvoiceDocument(**values)

    @staticmethod
    def _warnings_for(invoice: InvoiceDocument) -> list[str]:
        if not invoice.has_items:
            logger.warning(
                "invoice_saved_without_items",
                invoice_number=invoice.invoice_number,
            )
            return [NO_ITEMS_WARNING]
        return []

    async def create(self, ctx: UserContext, request: InvoiceRequest) -> SaveInvoiceResult:
        """Create a new invoice."""
        logger.info(
            "save_invoice_started",
            user_id=ctx.user_id,
            items=len(request.items),
        )
        store = await self._get_invoice_store()

        invoice = self._build_invoice(ctx, request)
        warnings = self._warnings_for(invoice)
        invoice = await store.create_invoice(ctx, invoice)

        logger.info(
            "save_invoice_complete",
            invoice_id=invoice.id,
            total=str(invoice.total_amount),
        )
        return SaveInvoiceResult(invoice=invoice, warnings=warnings)

    async def update(
        self,
        ctx: UserContext,
        invoice_id: int,
        request: InvoiceRequest,
    ) -> SaveInvoiceResult:
        """Replace an existing invoice, items included."""
        store = await self._get_invoice_store()
        existing = await store.get_invoice(ctx, invoice_id)
        if existing is None:
            raise InvoiceNotFoundError(invoice_id)

        invoice = self._build_invoice(ctx, request, existing=existing)
        warnings = self._warnings_for(invoice)
        invoice = await store.update_invoice(ctx, invoice)

        logger.info(
            "invoice_replaced",
            invoice_id=invoice.id,
            total=str(invoice.total_amount),
        )
        return SaveInvoiceResult(invoice=invoice, warnings=warnings)

    @staticmethod
    def to_response(result: SaveInvoiceResult) -> InvoiceResponse:
        """Convert result to API response."""
        return invoice_to_response(result.invoice, warnings=result.warnings)


def invoice_to_response(
    invoice: InvoiceDocument,
    warnings: list[str] | None = None,
) -> InvoiceResponse:
    """Convert an InvoiceDocument entity to its response DTO."""
    return InvoiceResponse(
        id=invoice.id,  # type: ignore[arg-type]
        invoice_number=invoice.invoice_number,
        client_name=invoice.client_name,
        issue_date=invoice.issue_date,
        due_date=invoice.due_date,
        status=invoice.status.value,
        notes=invoice.notes,
        items=[
            LineItemResponse(
                id=item.id,
                description=item.description,
                quantity=item.quantity,
                unit_price=item.unit_price,
                amount=item.amount,
            )
            for item in invoice.items
        ],
        total_amount=invoice.total_amount,
        created_at=invoice.created_at,
        updated_at=invoice.updated_at,
        warnings=warnings or [],
    )
