"""
Document builder.

Turns invoices and tax entries into an ordered list of renderer-neutral
blocks. The block order is the visual contract of every export:

    header -> title/metadata -> table -> summary or total -> notes

Nothing here touches fonts, pages or bytes; see the render adapter.
"""

import re
from collections.abc import Callable, Mapping, Sequence
from datetime import date
from decimal import Decimal
from typing import Any

from ledgerdesk.config import get_logger
from ledgerdesk.core.entities.company import CompanyProfile
from ledgerdesk.core.entities.document import (
    Block,
    Column,
    DocumentKind,
    GeneratedDocument,
    ImageBlock,
    KeyValueBlock,
    TableBlock,
    TextBlock,
    TotalBlock,
)
from ledgerdesk.core.entities.invoice import InvoiceDocument, LineItem
from ledgerdesk.core.entities.tax import TaxEntry
from ledgerdesk.core.exceptions import NoRecordsToExportError
from ledgerdesk.core.money import round_money
from ledgerdesk.core.services.aggregator import (
    GRAND_TOTAL,
    group_tax_entries_by_year,
    sum_by_group,
    summarize_tax_entries,
)

logger = get_logger(__name__)

INVOICE_COLUMNS = (
    Column("Description"),
    Column("Quantity", "R"),
    Column("Unit Price", "R"),
    Column("Amount", "R"),
)

TAX_ENTRY_COLUMNS = (
    Column("Date"),
    Column("Category"),
    Column("Description"),
    Column("Amount", "R"),
)

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]")


def invoice_file_name(invoice_number: str) -> str:
    """Invoice_<invoice_number>.pdf with path-unsafe characters replaced."""
    return f"Invoice_{_UNSAFE_FILENAME_CHARS.sub('_', invoice_number)}.pdf"


def tax_report_file_name(year: int | None = None) -> str:
    return f"Tax-Report-{year}.pdf" if year is not None else "Tax-Report.pdf"


def _format_quantity(quantity: Decimal) -> str:
    return f"{quantity.normalize():f}"


class DocumentBuilder:
    """
    Builds block sequences for invoices and tax reports.

    Args:
        default_company_name: Header name used when no profile (or no
            profile name) exists. ``None`` or ``""`` omits the header
            when there is no profile at all.
        currency_symbol: Prefix for every money value.
        date_format: strftime pattern for dates in tables and metadata.
        today: Clock for the "Generated" line of reports.
    """

    def __init__(
        self,
        default_company_name: str | None = None,
        currency_symbol: str = "$",
        date_format: str = "%m/%d/%Y",
        today: Callable[[], date] = date.today,
    ):
        self._default_company_name = default_company_name or ""
        self._currency_symbol = currency_symbol
        self._date_format = date_format
        self._today = today

    @classmethod
    def from_settings(cls) -> "DocumentBuilder":
        from ledgerdesk.config import get_settings

        pdf = get_settings().pdf
        return cls(
            default_company_name=pdf.default_company_name,
            currency_symbol=pdf.currency_symbol,
            date_format=pdf.date_format,
        )

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def format_money(self, value: Any) -> str:
        return f"{self._currency_symbol}{round_money(value):,.2f}"

    def format_date(self, value: date) -> str:
        return value.strftime(self._date_format)

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------

    def build_header(self, profile: CompanyProfile | None) -> list[Block]:
        """
        Company identity lines: logo, name, address, email, phone, tax id.

        Absent fields are skipped, never padded with blank lines.
        """
        if profile is None:
            if not self._default_company_name:
                return []
            return [TextBlock(self._default_company_name, style="heading")]

        blocks: list[Block] = []
        if profile.logo_url:
            blocks.append(ImageBlock(profile.logo_url))
        name = profile.company_name or self._default_company_name
        if name:
            blocks.append(TextBlock(name, style="heading"))
        if profile.address:
            blocks.append(TextBlock(profile.address, style="small"))
        if profile.email:
            blocks.append(TextBlock(f"Email: {profile.email}", style="small"))
        if profile.phone:
            blocks.append(TextBlock(f"Tel: {profile.phone}", style="small"))
        if profile.tax_id:
            blocks.append(TextBlock(f"Tax ID: {profile.tax_id}", style="small"))
        return blocks

    def build_table(
        self,
        records: Sequence[Any],
        kind: DocumentKind | None = None,
    ) -> TableBlock:
        """
        Tabular region with the fixed column set of the document kind.

        ``kind`` is inferred from the records when omitted; an empty
        collection then has no kind to infer.
        """
        if kind is None:
            if not records:
                raise NoRecordsToExportError("table")
            kind = DocumentKind.INVOICE if isinstance(records[0], LineItem) else DocumentKind.TAX_REPORT
        if kind == DocumentKind.INVOICE:
            return self._build_invoice_table(records)
        return self._build_tax_table(records)

    def _build_invoice_table(self, items: Sequence[LineItem]) -> TableBlock:
        rows = tuple(
            (
                item.description,
                _format_quantity(item.quantity),
                self.format_money(item.unit_price),
                self.format_money(item.amount),
            )
            for item in items
        )
        return TableBlock(columns=INVOICE_COLUMNS, rows=rows)

    def _build_tax_table(self, entries: Sequence[TaxEntry]) -> TableBlock:
        rows = tuple(
            (
                self.format_date(entry.date_added),
                entry.category.value,
                entry.description or "",
                self.format_money(entry.amount),
            )
            for entry in entries
        )
        return TableBlock(columns=TAX_ENTRY_COLUMNS, rows=rows)

    def build_summary(
        self,
        totals_by_group: Mapping[Any, Decimal],
        label_header: str = "Category",
    ) -> TableBlock:
        """Two-column label/amount table; the last row is always GRAND TOTAL."""
        totals = dict(totals_by_group)
        if GRAND_TOTAL not in totals:
            totals = sum_by_group({k: [v] for k, v in totals.items()}, amount_fn=lambda v: v)
        grand_total = totals.pop(GRAND_TOTAL)

        rows = [(str(label), self.format_money(amount)) for label, amount in totals.items()]
        rows.append((GRAND_TOTAL, self.format_money(grand_total)))
        return TableBlock(
            columns=(Column(label_header), Column("Amount", "R")),
            rows=tuple(rows),
        )

    # ------------------------------------------------------------------
    # Documents
    # ------------------------------------------------------------------

    def build_invoice_document(
        self,
        invoice: InvoiceDocument,
        profile: CompanyProfile | None = None,
    ) -> GeneratedDocument:
        """
        Header, invoice metadata, items table, total line, then notes.

        Raises:
            NoRecordsToExportError: If the invoice has no line items.
        """
        if not invoice.items:
            raise NoRecordsToExportError(DocumentKind.INVOICE.value)

        blocks: list[Block] = self.build_header(profile)
        blocks.extend(
            [
                TextBlock("INVOICE", style="title", align="C"),
                KeyValueBlock("Invoice No", invoice.invoice_number),
                KeyValueBlock("Bill To", invoice.client_name),
                KeyValueBlock("Issue Date", self.format_date(invoice.issue_date)),
                KeyValueBlock("Due Date", self.format_date(invoice.due_date)),
                KeyValueBlock("Status", invoice.status.value.capitalize()),
            ]
        )
        blocks.append(self.build_table(invoice.items, DocumentKind.INVOICE))
        blocks.append(TotalBlock("Total", self.format_money(invoice.total_amount)))
        if invoice.notes:
            blocks.append(KeyValueBlock("Notes", invoice.notes))

        logger.debug(
            "invoice_document_built",
            invoice_number=invoice.invoice_number,
            items=len(invoice.items),
            blocks=len(blocks),
        )
        return GeneratedDocument(
            kind=DocumentKind.INVOICE,
            file_name=invoice_file_name(invoice.invoice_number),
            blocks=blocks,
            total=invoice.total_amount,
        )

    def build_tax_report(
        self,
        entries: Sequence[TaxEntry],
        profile: CompanyProfile | None = None,
        year: int | None = None,
    ) -> GeneratedDocument:
        """
        Header, title, entries table, then per-year category summaries.

        A by-year summary follows when the report spans several years.

        Raises:
            NoRecordsToExportError: If no entries (for ``year``) exist.
        """
        if year is not None:
            entries = [e for e in entries if e.tax_year == year]
        if not entries:
            raise NoRecordsToExportError(DocumentKind.TAX_REPORT.value)

        by_year = group_tax_entries_by_year(entries)
        ordered = [entry for year_entries in by_year.values() for entry in year_entries]

        blocks: list[Block] = self.build_header(profile)
        title = f"Tax Report {year}" if year is not None else "Tax Report"
        blocks.append(TextBlock(title, style="title", align="C"))
        blocks.append(KeyValueBlock("Generated", self.format_date(self._today())))
        blocks.append(self.build_table(ordered, DocumentKind.TAX_REPORT))

        summary = summarize_tax_entries(ordered)
        for tax_year, totals in summary.items():
            blocks.append(TextBlock(f"Tax Year {tax_year}", style="heading"))
            blocks.append(self.build_summary(totals))

        year_totals = sum_by_group(by_year)
        if len(by_year) > 1:
            blocks.append(TextBlock("Totals by Year", style="heading"))
            blocks.append(self.build_summary(year_totals, label_header="Tax Year"))

        logger.debug(
            "tax_report_built",
            year=year,
            entries=len(ordered),
            years=len(by_year),
            blocks=len(blocks),
        )
        return GeneratedDocument(
            kind=DocumentKind.TAX_REPORT,
            file_name=tax_report_file_name(year),
            blocks=blocks,
            total=year_totals[GRAND_TOTAL],
        )

    def build_document(
        self,
        record: InvoiceDocument | Sequence[TaxEntry],
        profile: CompanyProfile | None = None,
    ) -> GeneratedDocument:
        """Dispatch on record type: an invoice or a collection of tax entries."""
        if isinstance(record, InvoiceDocument):
            return self.build_invoice_document(record, profile)
        return self.build_tax_report(list(record), profile)
