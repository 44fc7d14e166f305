"""Tests for ExportTaxReportUseCase."""

from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest

from ledgerdesk.application.use_cases.export_tax_report import ExportTaxReportUseCase
from ledgerdesk.core.entities import DocumentKind, TextBlock
from ledgerdesk.core.exceptions import NoRecordsToExportError
from ledgerdesk.core.interfaces import IDocumentRenderer
from ledgerdesk.core.services import DocumentBuilder


@pytest.fixture
def mock_renderer() -> MagicMock:
    renderer = MagicMock(spec=IDocumentRenderer)
    renderer.render.return_value = b"%PDF-1.4 report"
    return renderer


@pytest.fixture
def mock_tax_store(sample_tax_entries) -> AsyncMock:
    store = AsyncMock()
    store.list_entries.return_value = sample_tax_entries
    return store


@pytest.fixture
def mock_profile_store() -> AsyncMock:
    store = AsyncMock()
    store.get_profile.return_value = None
    return store


@pytest.fixture
def use_case(mock_tax_store, mock_profile_store, mock_renderer) -> ExportTaxReportUseCase:
    return ExportTaxReportUseCase(
        tax_store=mock_tax_store,
        profile_store=mock_profile_store,
        builder=DocumentBuilder(default_company_name="Your Company", today=lambda: date(2024, 12, 31)),
        renderer=mock_renderer,
    )


class TestExportTaxReportUseCase:
    async def test_all_years(self, use_case, mock_tax_store, mock_renderer, ctx):
        result = await use_case.execute(ctx)

        assert result.file_name == "Tax-Report.pdf"
        assert result.kind == DocumentKind.TAX_REPORT
        mock_tax_store.list_entries.assert_awaited_once_with(ctx, tax_year=None)

        blocks = mock_renderer.render.call_args.args[0]
        assert TextBlock("Totals by Year", style="heading") in blocks

    async def test_single_year(self, use_case, mock_tax_store, sample_tax_entries, ctx):
        mock_tax_store.list_entries.return_value = [
            e for e in sample_tax_entries if e.tax_year == 2024
        ]

        result = await use_case.execute(ctx, year=2024)

        assert result.file_name == "Tax-Report-2024.pdf"
        mock_tax_store.list_entries.assert_awaited_once_with(ctx, tax_year=2024)

    async def test_no_entries(self, use_case, mock_tax_store, mock_renderer, ctx):
        mock_tax_store.list_entries.return_value = []

        with pytest.raises(NoRecordsToExportError):
            await use_case.execute(ctx, year=2020)
        mock_renderer.render.assert_not_called()
