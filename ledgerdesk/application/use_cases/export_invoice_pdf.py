"""
Export Invoice PDF Use Case.

Generates a PDF document from a stored invoice and the caller's
company profile.
"""

from ledgerdesk.application.use_cases.export_document import ExportResult, render_document
from ledgerdesk.config import get_logger
from ledgerdesk.core.entities.context import UserContext
from ledgerdesk.core.exceptions import InvoiceNotFoundError
from ledgerdesk.core.interfaces import ICompanyProfileStore, IDocumentRenderer, IInvoiceStore
from ledgerdesk.core.services import DocumentBuilder

logger = get_logger(__name__)


class ExportInvoicePdfUseCase:
    """
    Use case for generating invoice PDFs.

    Flow:
    1. Load invoice and company profile for the caller
    2. Build blocks via DocumentBuilder
    3. Render via IDocumentRenderer and return bytes plus metadata
    """

    def __init__(
        self,
        invoice_store: IInvoiceStore | None = None,
        profile_store: ICompanyProfileStore | None = None,
        builder: DocumentBuilder | None = None,
        renderer: IDocumentRenderer | None = None,
    ):
        self._invoice_store = invoice_store
        self._profile_store = profile_store
        self._builder = builder
        self._renderer = renderer

    async def _get_invoice_store(self) -> IInvoiceStore:
        if self._invoice_store is None:
            from ledgerdesk.infrastructure.storage.sqlite import get_invoice_store

            self._invoice_store = await get_invoice_store()
        return self._invoice_store

    async def _get_profile_store(self) -> ICompanyProfileStore:
        if self._profile_store is None:
            from ledgerdesk.infrastructure.storage.sqlite import get_company_profile_store

            self._profile_store = await get_company_profile_store()
        return self._profile_store

    def _get_builder(self) -> DocumentBuilder:
        if self._builder is None:
            from ledgerdesk.application.services import get_document_builder

            self._builder = get_document_builder()
        return self._builder

    def _get_renderer(self) -> IDocumentRenderer:
        if self._renderer is None:
            from ledgerdesk.application.services import get_document_renderer

            self._renderer = get_document_renderer()
        return self._renderer

    async def execute(
        self,
        ctx: UserContext,
        invoice_id: int,
        page_width: float | None = None,
    ) -> ExportResult:
        """
        Generate an invoice PDF.

        Raises:
            InvoiceNotFoundError: If the caller has no such invoice.
            NoRecordsToExportError: If the invoice has no line items.
            RenderFailureError: If rendering fails.
        """
        logger.info("export_invoice_pdf_started", invoice_id=invoice_id, user_id=ctx.user_id)

        invoice = await (await self._get_invoice_store()).get_invoice(ctx, invoice_id)
        if invoice is None:
            raise InvoiceNotFoundError(invoice_id)

        profile = await (await self._get_profile_store()).get_profile(ctx)
        document = self._get_builder().build_invoice_document(invoice, profile)
        result = render_document(self._get_renderer(), document, page_width=page_width)

        logger.info(
            "export_invoice_pdf_complete",
            invoice_id=invoice_id,
            file_name=result.file_name,
            file_size=result.file_size,
        )
        return result
