"""
Production CRUD operations.

All reads are scoped by company id.

Dependencies: sqlalchemy, docvault.boundary.db.models
System role: Production persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from docvault.boundary.db.CRUD.base_crud import BaseCRUD
from docvault.boundary.db.models.production_model import ProductionModel


class ProductionCRUD(BaseCRUD[ProductionModel]):
    """
    CRUD operations for ProductionModel.

    Extends BaseCRUD with company-scoped queries.
    """

    def __init__(self) -> None:
        """Initialize ProductionCRUD with ProductionModel."""
        super().__init__(ProductionModel)

    async def get_by_company_id(
        self,
        session: AsyncSession,
        company_id: int,
    ) -> Sequence[ProductionModel]:
        """
        Retrieve all productions owned by a company.

        Args:
            session: Async database session
            company_id: Owning company id

        Returns:
            Sequence of ProductionModels ordered by id
        """
        stmt = (
            select(ProductionModel)
            .where(ProductionModel.company_id == company_id)
            .order_by(ProductionModel.id)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_for_company(
        self,
        session: AsyncSession,
        production_id: int,
        company_id: int,
    ) -> ProductionModel | None:
        """
        Retrieve a production only if it belongs to the given company.

        Args:
            session: Async database session
            production_id: Production primary key
            company_id: Caller's company id

        Returns:
            ProductionModel if found and owned by the company, None otherwise
        """
        stmt = select(ProductionModel).where(
            ProductionModel.id == production_id,
            ProductionModel.company_id == company_id,
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()


production_crud = ProductionCRUD()
