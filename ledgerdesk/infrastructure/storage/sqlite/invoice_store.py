"""SQLite implementation of invoice storage."""

from datetime import datetime

import aiosqlite

from ledgerdesk.config import get_logger
from ledgerdesk.core.entities.context import UserContext
from ledgerdesk.core.entities.invoice import InvoiceDocument, LineItem
from ledgerdesk.core.exceptions import DuplicateInvoiceNumberError, InvoiceNotFoundError
from ledgerdesk.core.interfaces.storage import IInvoiceStore
from ledgerdesk.infrastructure.storage.sqlite.connection import get_connection, get_transaction

logger = get_logger(__name__)


class SQLiteInvoiceStore(IInvoiceStore):
    """SQLite implementation of invoice storage."""

    async def create_invoice(self, ctx: UserContext, invoice: InvoiceDocument) -> InvoiceDocument:
        """Insert header and items in one transaction."""
        now = datetime.utcnow()
        invoice.user_id = ctx.user_id
        invoice.created_at = now
        invoice.updated_at = now

        try:
            async with get_transaction() as conn:
                cursor = await conn.execute(
                    """
                    INSERT INTO invoices (
                        user_id, invoice_number, client_name,
                        issue_date, due_date, status, notes, total_amount,
                        created_at, updated_at
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        ctx.user_id,
                        invoice.invoice_number,
                        invoice.client_name,
                        invoice.issue_date.isoformat(),
                        invoice.due_date.isoformat(),
                        invoice.status.value,
                        invoice.notes,
                        str(invoice.total_amount),
                        invoice.created_at.isoformat(),
                        invoice.updated_at.isoformat(),
                    ),
                )
                invoice.id = cursor.lastrowid
                await self._insert_items(conn, invoice)
        except aiosqlite.IntegrityError as e:
            raise DuplicateInvoiceNumberError(invoice.invoice_number) from e

        logger.info(
            "invoice_created",
            invoice_id=invoice.id,
            user_id=ctx.user_id,
            items=len(invoice.items),
            total=str(invoice.total_amount),
        )
        return invoice

    async def get_invoice(self, ctx: UserContext, invoice_id: int) -> InvoiceDocument | None:
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM invoices WHERE id = ? AND user_id = ?",
                (invoice_id, ctx.user_id),
            )
            row = await cursor.fetchone()
            if row is None:
                return None

            items = await self._load_items(conn, invoice_id)
            return self._row_to_invoice(row, items)

    async def list_invoices(
        self,
        ctx: UserContext,
        limit: int | None = 100,
        offset: int = 0,
    ) -> list[InvoiceDocument]:
        # SQLite treats a negative LIMIT as no limit
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT * FROM invoices
                WHERE user_id = ?
                ORDER BY created_at DESC, id DESC
                LIMIT ? OFFSET ?
                """,
                (ctx.user_id, -1 if limit is None else limit, offset),
            )
            rows = await cursor.fetchall()

            invoices = []
            for row in rows:
                items = await self._load_items(conn, row["id"])
                invoices.append(self._row_to_invoice(row, items))
            return invoices

    async def count_invoices(self, ctx: UserContext) -> int:
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT COUNT(*) FROM invoices WHERE user_id = ?",
                (ctx.user_id,),
            )
            row = await cursor.fetchone()
            return row[0]

    async def update_invoice(self, ctx: UserContext, invoice: InvoiceDocument) -> InvoiceDocument:
        """Replace header fields and the whole item list."""
        if invoice.id is None:
            raise InvoiceNotFoundError(0)

        invoice.user_id = ctx.user_id
        invoice.updated_at = datetime.utcnow()

        try:
            async with get_transaction() as conn:
                cursor = await conn.execute(
                    """
                    UPDATE invoices SET
                        invoice_number = ?, client_name = ?,
                        issue_date = ?, due_date = ?, status = ?, notes = ?,
                        total_amount = ?, updated_at = ?
                    WHERE id = ? AND user_id = ?
                    """,
                    (
                        invoice.invoice_number,
                        invoice.client_name,
                        invoice.issue_date.isoformat(),
                        invoice.due_date.isoformat(),
                        invoice.status.value,
                        invoice.notes,
                        str(invoice.total_amount),
                        invoice.updated_at.isoformat(),
                        invoice.id,
                        ctx.user_id,
                    ),
                )
                if cursor.rowcount == 0:
                    raise InvoiceNotFoundError(invoice.id)

                await conn.execute(
                    "DELETE FROM invoice_items WHERE invoice_id = ?",
                    (invoice.id,),
                )
                await self._insert_items(conn, invoice)
        except aiosqlite.IntegrityError as e:
            raise DuplicateInvoiceNumberError(invoice.invoice_number) from e

        logger.info(
            "invoice_updated",
            invoice_id=invoice.id,
            user_id=ctx.user_id,
            items=len(invoice.items),
        )
        return invoice

    async def delete_invoice(self, ctx: UserContext, invoice_id: int) -> bool:
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "DELETE FROM invoices WHERE id = ? AND user_id = ?",
                (invoice_id, ctx.user_id),
            )
            deleted = cursor.rowcount > 0

        if deleted:
            logger.info("invoice_deleted", invoice_id=invoice_id, user_id=ctx.user_id)
        return deleted

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------

    @staticmethod
    async def _insert_items(conn: aiosqlite.Connection, invoice: InvoiceDocument) -> None:
        for line_number, item in enumerate(invoice.items, 1):
            item.invoice_id = invoice.id
            cursor = await conn.execute(
                """
                INSERT INTO invoice_items (
                    invoice_id, line_number, description,
                    quantity, unit_price, amount
                ) VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    invoice.id,
                    line_number,
                    item.description,
                    str(item.quantity),
                    str(item.unit_price),
                    str(item.amount),
                ),
            )
            item.id = cursor.lastrowid

    async def _load_items(self, conn: aiosqlite.Connection, invoice_id: int) -> list[LineItem]:
        cursor = await conn.execute(
            "SELECT * FROM invoice_items WHERE invoice_id = ? ORDER BY line_number, id",
            (invoice_id,),
        )
        return [self._row_to_item(r) for r in await cursor.fetchall()]

    @staticmethod
    def _row_to_invoice(row: aiosqlite.Row, items: list[LineItem]) -> InvoiceDocument:
        """Convert a database row to an InvoiceDocument entity."""
        return InvoiceDocument(
            id=row["id"],
            user_id=row["user_id"],
            invoice_number=row["invoice_number"],
            client_name=row["client_name"],
            issue_date=row["issue_date"],
            due_date=row["due_date"],
            status=row["status"],
            notes=row["notes"],
            items=items,
            total_amount=row["total_amount"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )

    @staticmethod
    def _row_to_item(row: aiosqlite.Row) -> LineItem:
        return LineItem(
            id=row["id"],
            invoice_id=row["invoice_id"],
            description=row["description"],
            quantity=row["quantity"],
            unit_price=row["unit_price"],
        )
