"""
Diagnostics service.

Backs the database time check and the operator-only table dump.

Dependencies: sqlalchemy, docvault.boundary.db
System role: Operational diagnostics
"""

from datetime import datetime
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from docvault.boundary.db.base import Base
from docvault.core.exceptions import DatabaseError

# Columns never rendered by the table dump
REDACTED_COLUMNS = {"password_hash"}
REDACTED = "***"


class DiagnosticsService:
    """Read-only database diagnostics."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def database_time(self) -> datetime:
        """
        Current time according to the database server.

        Raises:
            DatabaseError: If the database cannot be queried
        """
        try:
            result = await self.db.execute(select(func.now()))
        except SQLAlchemyError as e:
            raise DatabaseError(f"Database unreachable: {e}") from e
        return result.scalar_one()

    async def dump_tables(self) -> dict[str, list[dict[str, Any]]]:
        """
        Read every mapped table, redacting credential columns.

        Returns:
            dict: Table name -> list of row dicts, in dependency order

        Raises:
            DatabaseError: If any table cannot be read
        """
        dump: dict[str, list[dict[str, Any]]] = {}
        try:
            for table in Base.metadata.sorted_tables:
                result = await self.db.execute(select(table).order_by(*table.primary_key.columns))
                dump[table.name] = [
                    {
                        key: (REDACTED if key in REDACTED_COLUMNS else value)
                        for key, value in row.items()
                    }
                    for row in result.mappings().all()
                ]
        except SQLAlchemyError as e:
            raise DatabaseError(f"Failed to read tables: {e}") from e
        return dump
