"""
Document CRUD operations.

Provides Create and Read operations for DocumentModel with
company-scoped joins through productions and companies.

Dependencies: sqlalchemy, docvault.boundary.db.models
System role: Document persistence operations
"""

from typing import Sequence

from sqlalchemy import Row, select
from sqlalchemy.ext.asyncio import AsyncSession

from docvault.boundary.db.CRUD.base_crud import BaseCRUD
from docvault.boundary.db.models.company_model import CompanyModel
from docvault.boundary.db.models.document_model import DocumentModel
from docvault.boundary.db.models.production_model import ProductionModel


class DocumentCRUD(BaseCRUD[DocumentModel]):
    """
    CRUD operations for DocumentModel.

    Extends BaseCRUD with queries that resolve a document's tenant through
    documents -> productions -> companies.
    """

    def __init__(self) -> None:
        """Initialize DocumentCRUD with DocumentModel."""
        super().__init__(DocumentModel)

    async def get_with_context_by_company_id(
        self,
        session: AsyncSession,
        company_id: int,
    ) -> Sequence[Row]:
        """
        Retrieve all documents of a company with production and company names.

        Args:
            session: Async database session
            company_id: Caller's company id

        Returns:
            Rows of (DocumentModel, production_name, company_name) ordered by document id
        """
        stmt = (
            select(
                DocumentModel,
                ProductionModel.name.label("production_name"),
                CompanyModel.name.label("company_name"),
            )
            .join(ProductionModel, DocumentModel.production_id == ProductionModel.id)
            .join(CompanyModel, ProductionModel.company_id == CompanyModel.id)
            .where(CompanyModel.id == company_id)
            .order_by(DocumentModel.id)
        )
        result = await session.execute(stmt)
        return result.all()

    async def get_for_company(
        self,
        session: AsyncSession,
        document_id: int,
        company_id: int,
    ) -> DocumentModel | None:
        """
        Retrieve a document only if its production belongs to the company.

        Args:
            session: Async database session
            document_id: Document primary key
            company_id: Caller's company id

        Returns:
            DocumentModel if visible to the company, None otherwise
        """
        stmt = (
            select(DocumentModel)
            .join(ProductionModel, DocumentModel.production_id == ProductionModel.id)
            .where(
                DocumentModel.id == document_id,
                ProductionModel.company_id == company_id,
            )
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()


document_crud = DocumentCRUD()
