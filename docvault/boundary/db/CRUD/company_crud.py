"""
Company CRUD operations.

Dependencies: sqlalchemy, docvault.boundary.db.models
System role: Tenant persistence operations
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from docvault.boundary.db.CRUD.base_crud import BaseCRUD
from docvault.boundary.db.models.company_model import CompanyModel


class CompanyCRUD(BaseCRUD[CompanyModel]):
    """CRUD operations for CompanyModel."""

    def __init__(self) -> None:
        """Initialize CompanyCRUD with CompanyModel."""
        super().__init__(CompanyModel)

    async def get_by_name(self, session: AsyncSession, name: str) -> CompanyModel | None:
        """
        Retrieve a company by its unique name.

        Args:
            session: Async database session
            name: Company name

        Returns:
            CompanyModel if found, None otherwise
        """
        stmt = select(CompanyModel).where(CompanyModel.name == name)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()


company_crud = CompanyCRUD()
