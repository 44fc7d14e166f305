"""SQLite implementation of expense storage."""

from datetime import datetime

import aiosqlite

from ledgerdesk.config import get_logger
from ledgerdesk.core.entities.context import UserContext
from ledgerdesk.core.entities.expense import Expense, ExpenseStatus
from ledgerdesk.core.exceptions import ExpenseNotFoundError
from ledgerdesk.core.interfaces.storage import IExpenseStore
from ledgerdesk.infrastructure.storage.sqlite.connection import get_connection, get_transaction

logger = get_logger(__name__)


class SQLiteExpenseStore(IExpenseStore):
    """SQLite implementation of expense storage."""

    async def create_expense(self, ctx: UserContext, expense: Expense) -> Expense:
        expense.user_id = ctx.user_id
        expense.created_at = datetime.utcnow()

        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                INSERT INTO expenses (
                    user_id, expense_date, merchant, category,
                    amount, status, receipt_url, created_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    ctx.user_id,
                    expense.expense_date.isoformat(),
                    expense.merchant,
                    expense.category,
                    str(expense.amount),
                    expense.status.value,
                    expense.receipt_url,
                    expense.created_at.isoformat(),
                ),
            )
            expense.id = cursor.lastrowid

        logger.info(
            "expense_created",
            expense_id=expense.id,
            user_id=ctx.user_id,
            category=expense.category,
        )
        return expense

    async def get_expense(self, ctx: UserContext, expense_id: int) -> Expense | None:
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM expenses WHERE id = ? AND user_id = ?",
                (expense_id, ctx.user_id),
            )
            row = await cursor.fetchone()
            return self._row_to_expense(row) if row else None

    async def list_expenses(self, ctx: UserContext) -> list[Expense]:
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT * FROM expenses
                WHERE user_id = ?
                ORDER BY expense_date DESC, id DESC
                """,
                (ctx.user_id,),
            )
            return [self._row_to_expense(r) for r in await cursor.fetchall()]

    async def update_status(
        self,
        ctx: UserContext,
        expense_id: int,
        status: ExpenseStatus,
    ) -> Expense:
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "UPDATE expenses SET status = ? WHERE id = ? AND user_id = ?",
                (status.value, expense_id, ctx.user_id),
            )
            if cursor.rowcount == 0:
                raise ExpenseNotFoundError(expense_id)

        logger.info(
            "expense_status_updated",
            expense_id=expense_id,
            user_id=ctx.user_id,
            status=status.value,
        )
        expense = await self.get_expense(ctx, expense_id)
        if expense is None:
            raise ExpenseNotFoundError(expense_id)
        return expense

    async def delete_expense(self, ctx: UserContext, expense_id: int) -> bool:
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "DELETE FROM expenses WHERE id = ? AND user_id = ?",
                (expense_id, ctx.user_id),
            )
            deleted = cursor.rowcount > 0

        if deleted:
            logger.info("expense_deleted", expense_id=expense_id, user_id=ctx.user_id)
        return deleted

    @staticmethod
    def _row_to_expense(row: aiosqlite.Row) -> Expense:
        """Convert a database row to an Expense entity."""
        return Expense(
            id=row["id"],
            user_id=row["user_id"],
            expense_date=row["expense_date"],
            merchant=row["merchant"],
            category=row["category"],
            amount=row["amount"],
            status=row["status"],
            receipt_url=row["receipt_url"],
            created_at=row["created_at"],
        )
