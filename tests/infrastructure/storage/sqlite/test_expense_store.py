"""Tests for SQLiteExpenseStore."""

from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

from ledgerdesk.core.entities import Expense, ExpenseStatus
from ledgerdesk.core.exceptions import ExpenseNotFoundError
from ledgerdesk.infrastructure.storage.sqlite.expense_store import SQLiteExpenseStore


def _expense(merchant: str = "GitHub", spent: date = date(2024, 1, 5), **kwargs) -> Expense:
    return Expense(
        expense_date=spent,
        merchant=merchant,
        category=kwargs.pop("category", "Software"),
        amount=kwargs.pop("amount", "21.00"),
        **kwargs,
    )


@pytest.fixture
def store(pool_on_temp_db: Path) -> SQLiteExpenseStore:
    return SQLiteExpenseStore()


class TestSQLiteExpenseStore:
    async def test_create_and_get(self, store, ctx):
        created = await store.create_expense(ctx, _expense(receipt_url="https://r.test/1"))

        loaded = await store.get_expense(ctx, created.id)

        assert loaded.merchant == "GitHub"
        assert loaded.amount == Decimal("21.00")
        assert loaded.status == ExpenseStatus.PENDING
        assert loaded.receipt_url == "https://r.test/1"
        assert loaded.expense_date == date(2024, 1, 5)

    async def test_list_by_date_desc(self, store, ctx, other_ctx):
        await store.create_expense(ctx, _expense("Old", date(2023, 12, 1)))
        await store.create_expense(ctx, _expense("New", date(2024, 2, 1)))
        await store.create_expense(other_ctx, _expense("Theirs"))

        assert [e.merchant for e in await store.list_expenses(ctx)] == ["New", "Old"]

    async def test_update_status(self, store, ctx):
        created = await store.create_expense(ctx, _expense())

        updated = await store.update_status(ctx, created.id, ExpenseStatus.APPROVED)

        assert updated.status == ExpenseStatus.APPROVED
        assert (await store.get_expense(ctx, created.id)).status == ExpenseStatus.APPROVED

    async def test_update_status_missing(self, store, ctx):
        with pytest.raises(ExpenseNotFoundError):
            await store.update_status(ctx, 999, ExpenseStatus.REJECTED)

    async def test_update_status_other_user(self, store, ctx, other_ctx):
        created = await store.create_expense(ctx, _expense())
        with pytest.raises(ExpenseNotFoundError):
            await store.update_status(other_ctx, created.id, ExpenseStatus.REJECTED)

    async def test_delete(self, store, ctx):
        created = await store.create_expense(ctx, _expense())

        assert await store.delete_expense(ctx, created.id) is True
        assert await store.delete_expense(ctx, created.id) is False
