"""
Metadata catalog.

Company-scoped reads and writes over productions and documents. Handlers
never issue raw queries; every visible row is filtered by the caller's
company id here.

Dependencies: sqlalchemy, docvault.boundary.db
System role: Metadata catalog over the relational store
"""

import logging
from typing import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from docvault.boundary.db.CRUD.document_crud import document_crud
from docvault.boundary.db.CRUD.production_crud import production_crud
from docvault.boundary.db.models.document_model import DocumentModel
from docvault.boundary.db.models.production_model import ProductionModel
from docvault.core.exceptions import DatabaseError
from docvault.models.document import DocumentWithContext

logger = logging.getLogger(__name__)


class CatalogService:
    """Scoped access to production and document metadata."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize catalog.

        Args:
            db: AsyncSession for the current request
        """
        self.db = db

    async def list_productions(self, company_id: int) -> Sequence[ProductionModel]:
        """
        List productions owned by a company.

        Raises:
            DatabaseError: If the query fails
        """
        try:
            return await production_crud.get_by_company_id(self.db, company_id)
        except SQLAlchemyError as e:
            raise DatabaseError(f"Failed to list productions: {e}") from e

    async def list_documents(self, company_id: int) -> list[DocumentWithContext]:
        """
        List documents of a company with production and company names.

        Args:
            company_id: Caller's company id

        Returns:
            list[DocumentWithContext]: Documents ordered by id

        Raises:
            DatabaseError: If the query fails
        """
        try:
            rows = await document_crud.get_with_context_by_company_id(self.db, company_id)
        except SQLAlchemyError as e:
            raise DatabaseError(f"Failed to list documents: {e}") from e

        return [
            DocumentWithContext(
                id=document.id,
                production_id=document.production_id,
                file_name=document.file_name,
                blob_key=document.blob_key,
                version=document.version,
                content_type=document.content_type,
                size_bytes=document.size_bytes,
                created_at=document.created_at,
                production_name=production_name,
                company_name=company_name,
            )
            for document, production_name, company_name in rows
        ]

    async def get_document(self, document_id: int) -> DocumentModel | None:
        """Fetch a document by primary key without tenant scoping."""
        try:
            return await document_crud.get_by_id(self.db, document_id)
        except SQLAlchemyError as e:
            raise DatabaseError(f"Failed to fetch document: {e}") from e

    async def get_document_for_company(
        self,
        document_id: int,
        company_id: int,
    ) -> DocumentModel | None:
        """Fetch a document only if it belongs to the company."""
        try:
            return await document_crud.get_for_company(self.db, document_id, company_id)
        except SQLAlchemyError as e:
            raise DatabaseError(f"Failed to fetch document: {e}") from e

    async def get_production_for_company(
        self,
        production_id: int,
        company_id: int,
    ) -> ProductionModel | None:
        """Fetch a production only if it belongs to the company."""
        try:
            return await production_crud.get_for_company(self.db, production_id, company_id)
        except SQLAlchemyError as e:
            raise DatabaseError(f"Failed to fetch production: {e}") from e

    async def insert_document(
        self,
        production_id: int,
        file_name: str,
        blob_key: str,
        version: str | None,
        content_type: str | None = None,
        size_bytes: int | None = None,
    ) -> int:
        """
        Insert a document row (flushed, not committed).

        Returns:
            int: New document id

        Raises:
            SQLAlchemyError: Propagated so the caller can roll back and report
        """
        document = await document_crud.create(
            self.db,
            production_id=production_id,
            file_name=file_name,
            blob_key=blob_key,
            version=version,
            content_type=content_type,
            size_bytes=size_bytes,
        )
        return document.id
