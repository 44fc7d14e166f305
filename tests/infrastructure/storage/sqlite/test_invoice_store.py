"""Tests for SQLiteInvoiceStore."""

from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

from ledgerdesk.core.entities import InvoiceDocument, InvoiceStatus, LineItem, UserContext
from ledgerdesk.core.exceptions import DuplicateInvoiceNumberError, InvoiceNotFoundError
from ledgerdesk.infrastructure.storage.sqlite.connection import get_connection
from ledgerdesk.infrastructure.storage.sqlite.invoice_store import SQLiteInvoiceStore


def _invoice(number: str = "INV-000001", **kwargs) -> InvoiceDocument:
    values = {
        "invoice_number": number,
        "client_name": "Acme Corp",
        "issue_date": date(2024, 3, 1),
        "due_date": date(2024, 3, 31),
        "items": [
            LineItem(description="Widget", quantity=2, unit_price="10.005"),
            LineItem(description="Setup", quantity=1, unit_price="50"),
        ],
    }
    values.update(kwargs)
    return InvoiceDocument(**values)


@pytest.fixture
def store(pool_on_temp_db: Path) -> SQLiteInvoiceStore:
    return SQLiteInvoiceStore()


class TestCreateAndGet:
    async def test_roundtrip_keeps_exact_amounts(self, store, ctx: UserContext):
        created = await store.create_invoice(ctx, _invoice(notes="Net 30"))
        assert created.id is not None
        assert created.user_id == "user-1"

        loaded = await store.get_invoice(ctx, created.id)

        assert loaded is not None
        assert loaded.invoice_number == "INV-000001"
        assert loaded.issue_date == date(2024, 3, 1)
        assert loaded.notes == "Net 30"
        assert [i.description for i in loaded.items] == ["Widget", "Setup"]
        assert [i.amount for i in loaded.items] == [Decimal("20.01"), Decimal("50.00")]
        assert loaded.items[0].unit_price == Decimal("10.005")
        assert loaded.total_amount == Decimal("70.01")

    async def test_amounts_stored_as_text(self, store, ctx):
        created = await store.create_invoice(ctx, _invoice())

        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT total_amount FROM invoices WHERE id = ?", (created.id,)
            )
            row = await cursor.fetchone()
        assert row["total_amount"] == "70.01"

    async def test_zero_item_invoice(self, store, ctx):
        created = await store.create_invoice(ctx, _invoice(items=[]))
        loaded = await store.get_invoice(ctx, created.id)
        assert loaded.items == []
        assert loaded.total_amount == Decimal("0.00")

    async def test_get_missing(self, store, ctx):
        assert await store.get_invoice(ctx, 12345) is None

    async def test_other_user_cannot_read(self, store, ctx, other_ctx):
        created = await store.create_invoice(ctx, _invoice())
        assert await store.get_invoice(other_ctx, created.id) is None

    async def test_duplicate_number_for_same_user(self, store, ctx):
        await store.create_invoice(ctx, _invoice("INV-1"))
        with pytest.raises(DuplicateInvoiceNumberError):
            await store.create_invoice(ctx, _invoice("INV-1"))

    async def test_same_number_for_different_users(self, store, ctx, other_ctx):
        await store.create_invoice(ctx, _invoice("INV-1"))
        created = await store.create_invoice(other_ctx, _invoice("INV-1"))
        assert created.id is not None


class TestList:
    async def test_newest_first_and_user_scoped(self, store, ctx, other_ctx):
        first = await store.create_invoice(ctx, _invoice("INV-1"))
        second = await store.create_invoice(ctx, _invoice("INV-2"))
        await store.create_invoice(other_ctx, _invoice("INV-3"))

        invoices = await store.list_invoices(ctx)

        assert [i.id for i in invoices] == [second.id, first.id]
        assert all(len(i.items) == 2 for i in invoices)

    async def test_limit_offset(self, store, ctx):
        for n in range(3):
            await store.create_invoice(ctx, _invoice(f"INV-{n}"))

        page = await store.list_invoices(ctx, limit=1, offset=1)
        assert [i.invoice_number for i in page] == ["INV-1"]

    async def test_no_limit_returns_everything(self, store, ctx):
        for n in range(105):
            await store.create_invoice(ctx, _invoice(f"INV-{n}", items=[]))

        assert len(await store.list_invoices(ctx)) == 100
        assert len(await store.list_invoices(ctx, limit=None)) == 105

    async def test_count_is_user_scoped(self, store, ctx, other_ctx):
        assert await store.count_invoices(ctx) == 0

        for n in range(3):
            await store.create_invoice(ctx, _invoice(f"INV-{n}"))
        await store.create_invoice(other_ctx, _invoice("INV-9"))

        assert await store.count_invoices(ctx) == 3
        assert await store.count_invoices(other_ctx) == 1


class TestUpdate:
    async def test_replaces_items_and_header(self, store, ctx):
        created = await store.create_invoice(ctx, _invoice())

        created.status = InvoiceStatus.PAID
        created.client_name = "Acme Ltd"
        created.items = [LineItem(description="Only", quantity=3, unit_price=5)]
        replaced = InvoiceDocument(**created.model_dump())
        await store.update_invoice(ctx, replaced)

        loaded = await store.get_invoice(ctx, created.id)
        assert loaded.status == InvoiceStatus.PAID
        assert loaded.client_name == "Acme Ltd"
        assert [i.description for i in loaded.items] == ["Only"]
        assert loaded.total_amount == Decimal("15.00")

    async def test_update_missing(self, store, ctx):
        with pytest.raises(InvoiceNotFoundError):
            await store.update_invoice(ctx, _invoice(id=999))

    async def test_update_other_users_invoice(self, store, ctx, other_ctx):
        created = await store.create_invoice(ctx, _invoice())
        with pytest.raises(InvoiceNotFoundError):
            await store.update_invoice(other_ctx, _invoice(id=created.id))

    async def test_update_to_duplicate_number(self, store, ctx):
        await store.create_invoice(ctx, _invoice("INV-1"))
        second = await store.create_invoice(ctx, _invoice("INV-2"))
        with pytest.raises(DuplicateInvoiceNumberError):
            await store.update_invoice(ctx, _invoice("INV-1", id=second.id))


class TestDelete:
    async def test_delete_cascades_items(self, store, ctx):
        created = await store.create_invoice(ctx, _invoice())

        assert await store.delete_invoice(ctx, created.id) is True
        assert await store.get_invoice(ctx, created.id) is None

        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT COUNT(*) FROM invoice_items WHERE invoice_id = ?", (created.id,)
            )
            assert (await cursor.fetchone())[0] == 0

    async def test_delete_missing(self, store, ctx):
        assert await store.delete_invoice(ctx, 999) is False

    async def test_delete_other_users_invoice(self, store, ctx, other_ctx):
        created = await store.create_invoice(ctx, _invoice())
        assert await store.delete_invoice(other_ctx, created.id) is False
