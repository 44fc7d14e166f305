"""Tests for SaveInvoiceUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from ledgerdesk.application.dto.requests import InvoiceRequest, LineItemRequest
from ledgerdesk.application.use_cases.save_invoice import (
    NO_ITEMS_WARNING,
    SaveInvoiceUseCase,
)
from ledgerdesk.core.entities import InvoiceDocument, InvoiceStatus, UserContext
from ledgerdesk.core.exceptions import InvalidAmountError, InvoiceNotFoundError


def _echo_create(ctx: UserContext, invoice: InvoiceDocument) -> InvoiceDocument:
    invoice.id = 10
    return invoice


def _echo_update(ctx: UserContext, invoice: InvoiceDocument) -> InvoiceDocument:
    return invoice


@pytest.fixture
def mock_invoice_store() -> AsyncMock:
    store = AsyncMock()
    store.create_invoice.side_effect = _echo_create
    store.update_invoice.side_effect = _echo_update
    return store


@pytest.fixture
def use_case(mock_invoice_store: AsyncMock) -> SaveInvoiceUseCase:
    return SaveInvoiceUseCase(invoice_store=mock_invoice_store)


class TestCreate:
    async def test_computes_amounts(self, use_case, mock_invoice_store, ctx):
        request = InvoiceRequest(
            client_name="Acme",
            items=[
                LineItemRequest(description="Widget", quantity=Decimal("2"), unit_price=Decimal("10.005")),
                LineItemRequest(description="Setup", quantity=Decimal("1"), unit_price=Decimal("50")),
            ],
        )

        result = await use_case.create(ctx, request)

        assert result.warnings == []
        assert [i.amount for i in result.invoice.items] == [Decimal("20.01"), Decimal("50.00")]
        assert result.invoice.total_amount == Decimal("70.01")
        assert result.invoice.user_id == "user-1"
        mock_invoice_store.create_invoice.assert_awaited_once()
        assert mock_invoice_store.create_invoice.await_args.args[0] == ctx

    async def test_zero_items_saved_with_warning(self, use_case, mock_invoice_store, ctx):
        result = await use_case.create(ctx, InvoiceRequest(client_name="Acme"))

        assert result.warnings == [NO_ITEMS_WARNING]
        assert result.invoice.total_amount == Decimal("0.00")
        mock_invoice_store.create_invoice.assert_awaited_once()

    async def test_explicit_number_and_dates(self, use_case, ctx):
        request = InvoiceRequest(
            client_name="Acme",
            invoice_number="INV-777777",
            issue_date=date(2024, 1, 1),
            due_date=date(2024, 2, 15),
            status=InvoiceStatus.SENT,
        )
        result = await use_case.create(ctx, request)

        assert result.invoice.invoice_number == "INV-777777"
        assert result.invoice.issue_date == date(2024, 1, 1)
        assert result.invoice.due_date == date(2024, 2, 15)
        assert result.invoice.status == InvoiceStatus.SENT

    async def test_negative_quantity_rejected(self, use_case, mock_invoice_store, ctx):
        request = InvoiceRequest(
            client_name="Acme",
            items=[LineItemRequest(quantity=Decimal("-1"), unit_price=Decimal("5"))],
        )
        with pytest.raises(InvalidAmountError):
            await use_case.create(ctx, request)
        mock_invoice_store.create_invoice.assert_not_awaited()


class TestUpdate:
    async def test_keeps_number_and_dates_when_omitted(
        self, use_case, mock_invoice_store, ctx, sample_invoice
    ):
        mock_invoice_store.get_invoice.return_value = sample_invoice
        request = InvoiceRequest(
            client_name="Acme Corp",
            status=InvoiceStatus.PAID,
            items=[LineItemRequest(description="Consulting", quantity=Decimal("3"), unit_price=Decimal("100"))],
        )

        result = await use_case.update(ctx, 1, request)

        invoice = result.invoice
        assert invoice.id == 1
        assert invoice.invoice_number == "INV-000123"
        assert invoice.issue_date == date(2024, 3, 1)
        assert invoice.due_date == date(2024, 3, 31)
        assert invoice.created_at == sample_invoice.created_at
        assert invoice.status == InvoiceStatus.PAID
        assert invoice.total_amount == Decimal("300.00")
        mock_invoice_store.update_invoice.assert_awaited_once()

    async def test_missing_invoice(self, use_case, mock_invoice_store, ctx):
        mock_invoice_store.get_invoice.return_value = None

        with pytest.raises(InvoiceNotFoundError):
            await use_case.update(ctx, 99, InvoiceRequest(client_name="Acme"))
        mock_invoice_store.update_invoice.assert_not_awaited()


class TestToResponse:
    async def test_response_carries_warnings(self, use_case, ctx):
        result = await use_case.create(ctx, InvoiceRequest(client_name="Acme"))
        response = use_case.to_response(result)

        assert response.id == 10
        assert response.items == []
        assert response.warnings == [NO_ITEMS_WARNING]
        assert response.model_dump(mode="json")["total_amount"] == "0.00"
