"""Tests for ExportInvoicePdfUseCase."""

from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest

from ledgerdesk.application.use_cases.export_invoice_pdf import ExportInvoicePdfUseCase
from ledgerdesk.core.entities import DocumentKind, InvoiceDocument, TextBlock
from ledgerdesk.core.exceptions import (
    InvoiceNotFoundError,
    NoRecordsToExportError,
    RenderFailureError,
)
from ledgerdesk.core.interfaces import IDocumentRenderer
from ledgerdesk.core.services import DocumentBuilder


@pytest.fixture
def mock_renderer() -> MagicMock:
    renderer = MagicMock(spec=IDocumentRenderer)
    renderer.render.return_value = b"%PDF-1.4 mock pdf content"
    return renderer


@pytest.fixture
def mock_invoice_store(sample_invoice: InvoiceDocument) -> AsyncMock:
    store = AsyncMock()
    store.get_invoice.return_value = sample_invoice
    return store


@pytest.fixture
def mock_profile_store(sample_profile) -> AsyncMock:
    store = AsyncMock()
    store.get_profile.return_value = sample_profile
    return store


@pytest.fixture
def use_case(mock_invoice_store, mock_profile_store, mock_renderer) -> ExportInvoicePdfUseCase:
    return ExportInvoicePdfUseCase(
        invoice_store=mock_invoice_store,
        profile_store=mock_profile_store,
        builder=DocumentBuilder(default_company_name="Your Company", today=lambda: date(2024, 12, 31)),
        renderer=mock_renderer,
    )


class TestExportInvoicePdfUseCase:
    async def test_execute_success(self, use_case, mock_renderer, mock_invoice_store, ctx):
        result = await use_case.execute(ctx, 1)

        assert result.pdf_bytes == b"%PDF-1.4 mock pdf content"
        assert result.file_name == "Invoice_INV-000123.pdf"
        assert result.file_size == len(b"%PDF-1.4 mock pdf content")
        assert result.kind == DocumentKind.INVOICE
        mock_invoice_store.get_invoice.assert_awaited_once_with(ctx, 1)

        blocks = mock_renderer.render.call_args.args[0]
        assert result.block_count == len(blocks)
        assert blocks[0] == TextBlock("Northwind Studio", style="heading")

    async def test_page_width_passed_to_renderer(self, use_case, mock_renderer, ctx):
        await use_case.execute(ctx, 1, page_width=150)
        assert mock_renderer.render.call_args.kwargs["page_width"] == 150

    async def test_without_profile_uses_default_header(
        self, use_case, mock_profile_store, mock_renderer, ctx
    ):
        mock_profile_store.get_profile.return_value = None

        await use_case.execute(ctx, 1)

        blocks = mock_renderer.render.call_args.args[0]
        assert blocks[0] == TextBlock("Your Company", style="heading")

    async def test_invoice_not_found(self, use_case, mock_invoice_store, mock_renderer, ctx):
        mock_invoice_store.get_invoice.return_value = None

        with pytest.raises(InvoiceNotFoundError):
            await use_case.execute(ctx, 999)
        mock_renderer.render.assert_not_called()

    async def test_invoice_without_items(self, use_case, mock_invoice_store, mock_renderer, ctx):
        mock_invoice_store.get_invoice.return_value = InvoiceDocument(id=2, client_name="Acme")

        with pytest.raises(NoRecordsToExportError):
            await use_case.execute(ctx, 2)
        mock_renderer.render.assert_not_called()

    async def test_renderer_error_is_wrapped(self, use_case, mock_renderer, ctx):
        mock_renderer.render.side_effect = OSError("disk gone")

        with pytest.raises(RenderFailureError) as exc_info:
            await use_case.execute(ctx, 1)
        assert "disk gone" in exc_info.value.message

    async def test_render_failure_passes_through(self, use_case, mock_renderer, ctx):
        original = RenderFailureError("bad logo", block_kind="ImageBlock")
        mock_renderer.render.side_effect = original

        with pytest.raises(RenderFailureError) as exc_info:
            await use_case.execute(ctx, 1)
        assert exc_info.value is original
