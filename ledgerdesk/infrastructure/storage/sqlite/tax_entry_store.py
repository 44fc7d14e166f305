"""SQLite implementation of tax entry storage."""

from datetime import datetime

import aiosqlite

from ledgerdesk.config import get_logger
from ledgerdesk.core.entities.context import UserContext
from ledgerdesk.core.entities.tax import TaxEntry
from ledgerdesk.core.exceptions import TaxEntryNotFoundError
from ledgerdesk.core.interfaces.storage import ITaxEntryStore
from ledgerdesk.infrastructure.storage.sqlite.connection import get_connection, get_transaction

logger = get_logger(__name__)


class SQLiteTaxEntryStore(ITaxEntryStore):
    """SQLite implementation of tax entry storage."""

    async def create_entry(self, ctx: UserContext, entry: TaxEntry) -> TaxEntry:
        now = datetime.utcnow()
        entry.user_id = ctx.user_id
        entry.created_at = now
        entry.updated_at = now

        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                INSERT INTO tax_entries (
                    user_id, tax_year, category, amount, description,
                    date_added, created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    ctx.user_id,
                    entry.tax_year,
                    entry.category.value,
                    str(entry.amount),
                    entry.description,
                    entry.date_added.isoformat(),
                    entry.created_at.isoformat(),
                    entry.updated_at.isoformat(),
                ),
            )
            entry.id = cursor.lastrowid

        logger.info(
            "tax_entry_created",
            entry_id=entry.id,
            user_id=ctx.user_id,
            tax_year=entry.tax_year,
            category=entry.category.value,
        )
        return entry

    async def get_entry(self, ctx: UserContext, entry_id: int) -> TaxEntry | None:
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM tax_entries WHERE id = ? AND user_id = ?",
                (entry_id, ctx.user_id),
            )
            row = await cursor.fetchone()
            return self._row_to_entry(row) if row else None

    async def list_entries(
        self,
        ctx: UserContext,
        tax_year: int | None = None,
    ) -> list[TaxEntry]:
        query = "SELECT * FROM tax_entries WHERE user_id = ?"
        params: list = [ctx.user_id]
        if tax_year is not None:
            query += " AND tax_year = ?"
            params.append(tax_year)
        query += " ORDER BY date_added DESC, id DESC"

        async with get_connection() as conn:
            cursor = await conn.execute(query, params)
            rows = await cursor.fetchall()
            return [self._row_to_entry(r) for r in rows]

    async def update_entry(self, ctx: UserContext, entry: TaxEntry) -> TaxEntry:
        if entry.id is None:
            raise TaxEntryNotFoundError(0)

        entry.user_id = ctx.user_id
        entry.updated_at = datetime.utcnow()

        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                UPDATE tax_entries SET
                    tax_year = ?, category = ?, amount = ?, description = ?,
                    date_added = ?, updated_at = ?
                WHERE id = ? AND user_id = ?
                """,
                (
                    entry.tax_year,
                    entry.category.value,
                    str(entry.amount),
                    entry.description,
                    entry.date_added.isoformat(),
                    entry.updated_at.isoformat(),
                    entry.id,
                    ctx.user_id,
                ),
            )
            if cursor.rowcount == 0:
                raise TaxEntryNotFoundError(entry.id)

        logger.info("tax_entry_updated", entry_id=entry.id, user_id=ctx.user_id)
        return entry

    async def delete_entry(self, ctx: UserContext, entry_id: int) -> bool:
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "DELETE FROM tax_entries WHERE id = ? AND user_id = ?",
                (entry_id, ctx.user_id),
            )
            deleted = cursor.rowcount > 0

        if deleted:
            logger.info("tax_entry_deleted", entry_id=entry_id, user_id=ctx.user_id)
        return deleted

    @staticmethod
    def _row_to_entry(row: aiosqlite.Row) -> TaxEntry:
        """Convert a database row to a TaxEntry entity."""
        return TaxEntry(
            id=row["id"],
            user_id=row["user_id"],
            tax_year=row["tax_year"],
            category=row["category"],
            amount=row["amount"],
            description=row["description"],
            date_added=row["date_added"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
