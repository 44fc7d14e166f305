"""Tests for SQLiteTaxEntryStore."""

from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

from ledgerdesk.core.entities import TaxCategory, TaxEntry
from ledgerdesk.core.exceptions import TaxEntryNotFoundError
from ledgerdesk.infrastructure.storage.sqlite.tax_entry_store import SQLiteTaxEntryStore


def _entry(year: int = 2024, amount: str = "100.00", added: date = date(2024, 1, 1), **kwargs):
    return TaxEntry(
        tax_year=year,
        category=kwargs.pop("category", TaxCategory.EDUCATION),
        amount=amount,
        date_added=added,
        **kwargs,
    )


@pytest.fixture
def store(pool_on_temp_db: Path) -> SQLiteTaxEntryStore:
    return SQLiteTaxEntryStore()


class TestSQLiteTaxEntryStore:
    async def test_create_and_get(self, store, ctx):
        created = await store.create_entry(ctx, _entry(description="Course"))

        loaded = await store.get_entry(ctx, created.id)

        assert loaded.tax_year == 2024
        assert loaded.category == TaxCategory.EDUCATION
        assert loaded.amount == Decimal("100.00")
        assert loaded.description == "Course"
        assert loaded.user_id == "user-1"

    async def test_get_other_user(self, store, ctx, other_ctx):
        created = await store.create_entry(ctx, _entry())
        assert await store.get_entry(other_ctx, created.id) is None

    async def test_list_newest_first(self, store, ctx):
        older = await store.create_entry(ctx, _entry(added=date(2024, 1, 1)))
        newer = await store.create_entry(ctx, _entry(added=date(2024, 6, 1)))

        entries = await store.list_entries(ctx)
        assert [e.id for e in entries] == [newer.id, older.id]

    async def test_list_by_year(self, store, ctx, other_ctx):
        await store.create_entry(ctx, _entry(year=2023, added=date(2023, 4, 1)))
        await store.create_entry(ctx, _entry(year=2024))
        await store.create_entry(other_ctx, _entry(year=2024))

        entries = await store.list_entries(ctx, tax_year=2024)
        assert len(entries) == 1
        assert entries[0].tax_year == 2024

    async def test_entries_are_never_merged(self, store, ctx):
        await store.create_entry(ctx, _entry(amount="10.00"))
        await store.create_entry(ctx, _entry(amount="10.00"))

        assert len(await store.list_entries(ctx, tax_year=2024)) == 2

    async def test_update(self, store, ctx):
        created = await store.create_entry(ctx, _entry())
        created.amount = Decimal("250.50")
        created.category = TaxCategory.HOME_OFFICE

        await store.update_entry(ctx, created)

        loaded = await store.get_entry(ctx, created.id)
        assert loaded.amount == Decimal("250.50")
        assert loaded.category == TaxCategory.HOME_OFFICE

    async def test_update_missing(self, store, ctx):
        entry = _entry()
        entry.id = 999
        with pytest.raises(TaxEntryNotFoundError):
            await store.update_entry(ctx, entry)

    async def test_delete(self, store, ctx, other_ctx):
        created = await store.create_entry(ctx, _entry())

        assert await store.delete_entry(other_ctx, created.id) is False
        assert await store.delete_entry(ctx, created.id) is True
        assert await store.get_entry(ctx, created.id) is None
