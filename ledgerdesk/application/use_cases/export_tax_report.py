"""
Export Tax Report Use Case.

Generates a tax deduction report for all years or a single year.
"""

from ledgerdesk.application.use_cases.export_document import ExportResult, render_document
from ledgerdesk.config import get_logger
from ledgerdesk.core.entities.context import UserContext
from ledgerdesk.core.interfaces import ICompanyProfileStore, IDocumentRenderer, ITaxEntryStore
from ledgerdesk.core.services import DocumentBuilder

logger = get_logger(__name__)


class ExportTaxReportUseCase:
    """Load the caller's tax entries, build the report, render it."""

    def __init__(
        self,
        tax_store: ITaxEntryStore | None = None,
        profile_store: ICompanyProfileStore | None = None,
        builder: DocumentBuilder | None = None,
        renderer: IDocumentRenderer | None = None,
    ):
        self._tax_store = tax_store
        self._profile_store = profile_store
        self._builder = builder
        self._renderer = renderer

    async def _get_tax_store(self) -> ITaxEntryStore:
        if self._tax_store is None:
            from ledgerdesk.infrastructure.storage.sqlite import get_tax_entry_store

            self._tax_store = await get_tax_entry_store()
        return self._tax_store

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
        year: int | None = None,
        page_width: float | None = None,
    ) -> ExportResult:
        """
        Generate a tax report PDF.

        Raises:
            NoRecordsToExportError: If there are no entries (for the year).
            RenderFailureError: If rendering fails.
        """
        logger.info("export_tax_report_started", year=year, user_id=ctx.user_id)

        entries = await (await self._get_tax_store()).list_entries(ctx, tax_year=year)
        profile = await (await self._get_profile_store()).get_profile(ctx)

        document = self._get_builder().build_tax_report(entries, profile, year=year)
        result = render_document(self._get_renderer(), document, page_width=page_width)

        logger.info(
            "export_tax_report_complete",
            year=year,
            entries=len(entries),
            file_name=result.file_name,
            file_size=result.file_size,
        )
        return result
