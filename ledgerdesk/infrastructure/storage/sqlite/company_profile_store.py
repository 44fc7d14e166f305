"""SQLite implementation of company profile storage."""

from datetime import datetime

import aiosqlite

from ledgerdesk.config import get_logger
from ledgerdesk.core.entities.company import CompanyProfile
from ledgerdesk.core.entities.context import UserContext
from ledgerdesk.core.interfaces.storage import ICompanyProfileStore
from ledgerdesk.infrastructure.storage.sqlite.connection import get_connection, get_transaction

logger = get_logger(__name__)


class SQLiteCompanyProfileStore(ICompanyProfileStore):
    """One row per user, keyed by the unique user_id column."""

    async def get_profile(self, ctx: UserContext) -> CompanyProfile | None:
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM company_profiles WHERE user_id = ?",
                (ctx.user_id,),
            )
            row = await cursor.fetchone()
            return self._row_to_profile(row) if row else None

    async def upsert_profile(self, ctx: UserContext, profile: CompanyProfile) -> CompanyProfile:
        now = datetime.utcnow().isoformat()

        async with get_transaction() as conn:
            await conn.execute(
                """
                INSERT INTO company_profiles (
                    user_id, company_name, logo_url, address, email,
                    phone, tax_id, business_type, created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT(user_id) DO UPDATE SET
                    company_name = excluded.company_name,
                    logo_url = excluded.logo_url,
                    address = excluded.address,
                    email = excluded.email,
                    phone = excluded.phone,
                    tax_id = excluded.tax_id,
                    business_type = excluded.business_type,
                    updated_at = excluded.updated_at
                """,
                (
                    ctx.user_id,
                    profile.company_name,
                    profile.logo_url,
                    profile.address,
                    profile.email,
                    profile.phone,
                    profile.tax_id,
                    profile.business_type.value,
                    now,
                    now,
                ),
            )
            cursor = await conn.execute(
                "SELECT * FROM company_profiles WHERE user_id = ?",
                (ctx.user_id,),
            )
            row = await cursor.fetchone()

        logger.info("company_profile_saved", user_id=ctx.user_id)
        return self._row_to_profile(row)

    @staticmethod
    def _row_to_profile(row: aiosqlite.Row) -> CompanyProfile:
        return CompanyProfile(
            id=row["id"],
            user_id=row["user_id"],
            company_name=row["company_name"],
            logo_url=row["logo_url"],
            address=row["address"],
            email=row["email"],
            phone=row["phone"],
            tax_id=row["tax_id"],
            business_type=row["business_type"],
        )
