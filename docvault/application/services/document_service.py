"""
Document service orchestrator.

Coordinates upload (blob first, then metadata row) and download (scoped
metadata lookup, then blob stream). The two stores are not covered by one
transaction: if the metadata insert fails after the blob write, the blob is
left orphaned and logged, and the failure is reported to the caller.

Dependencies: sqlalchemy, docvault.boundary, docvault.application.services.catalog_service
System role: Document lifecycle orchestration
"""

import logging
import mimetypes
from dataclasses import dataclass
from typing import BinaryIO, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from docvault.application.services.catalog_service import CatalogService
from docvault.boundary.aws.s3_client import BlobStream, S3BlobStore
from docvault.boundary.db.models.production_model import ProductionModel
from docvault.core.exceptions import (
    DatabaseError,
    DocumentNotFoundError,
    NotFoundError,
    ValidationError,
)
from docvault.core.security.tokens import Claim
from docvault.models.document import DocumentWithContext

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"


@dataclass
class UploadConfirmation:
    """Outcome of a successful upload."""

    document_id: int
    file_name: str
    blob_key: str
    location: str


@dataclass
class DownloadedDocument:
    """Metadata plus an open byte stream, ready to pipe to a response."""

    file_name: str
    content_type: str
    stream: BlobStream


class DocumentService:
    """
    Document service orchestrator.

    Every operation takes the caller's verified Claim and scopes all reads
    and writes to claim.company_id.
    """

    def __init__(
        self,
        db: AsyncSession,
        blob_store: S3BlobStore,
        catalog: CatalogService | None = None,
    ) -> None:
        """
        Initialize document service.

        Args:
            db: AsyncSession for document metadata
            blob_store: Object storage adapter
            catalog: Optional CatalogService (created from db if None)
        """
        self.db = db
        self.blob_store = blob_store
        self.catalog = catalog or CatalogService(db)

    async def upload(
        self,
        claim: Claim,
        fileobj: BinaryIO,
        file_name: str,
        production_id: int,
        version: str | None,
        content_type: str | None = None,
        size_bytes: int | None = None,
    ) -> UploadConfirmation:
        """
        Store file bytes and record their metadata.

        Steps:
        1. Validate the filename
        2. Check the production belongs to the caller's company
        3. Write the blob under a generated key
        4. Insert the document row and commit

        Args:
            claim: Caller identity
            fileobj: Readable binary file object
            file_name: Original filename
            production_id: Target production
            version: Free-text version label
            content_type: MIME type reported by the client
            size_bytes: File size when known

        Returns:
            UploadConfirmation: New document id, key and location

        Raises:
            ValidationError: If the filename is empty
            NotFoundError: If the production is not visible to the caller
            StorageError: If the blob write fails (nothing is recorded)
            DatabaseError: If the metadata write fails (blob is orphaned)
        """
        if not file_name or not file_name.strip():
            raise ValidationError("A file with a name is required", field="file")

        production = await self.catalog.get_production_for_company(
            production_id, claim.company_id
        )
        if production is None:
            raise NotFoundError("Production", production_id, {"production_id": production_id})

        key = self.blob_store.build_key(file_name)
        stored = await self.blob_store.put(key, fileobj, content_type)

        try:
            document_id = await self.catalog.insert_document(
                production_id=production_id,
                file_name=file_name,
                blob_key=stored.key,
                version=version,
                content_type=content_type,
                size_bytes=size_bytes,
            )
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                "Metadata insert failed after blob write; blob orphaned",
                extra={"blob_key": stored.key, "production_id": production_id},
            )
            raise DatabaseError(
                f"Failed to record document metadata: {e}",
                details={"blob_key": stored.key},
            ) from e

        logger.info(
            "Document uploaded",
            extra={
                "document_id": document_id,
                "production_id": production_id,
                "company_id": claim.company_id,
                "user_id": claim.user_id,
            },
        )
        return UploadConfirmation(
            document_id=document_id,
            file_name=file_name,
            blob_key=stored.key,
            location=stored.location,
        )

    async def download(self, claim: Claim, document_id: int) -> DownloadedDocument:
        """
        Open a document's bytes for streaming.

        Documents of other companies are reported as not found. The session
        is closed after the metadata lookup, so no database connection is held
        while the bytes are streamed.

        Args:
            claim: Caller identity
            document_id: Document primary key

        Returns:
            DownloadedDocument: Filename, content type and open stream

        Raises:
            DocumentNotFoundError: If the document is absent or not visible
            BlobNotFoundError: If the metadata points at a missing object
            StorageError: If the object cannot be opened
        """
        document = await self.catalog.get_document_for_company(document_id, claim.company_id)
        # The stream outlives this call; return the connection to the pool first
        await self.db.close()
        if document is None:
            raise DocumentNotFoundError(document_id)

        stream = await self.blob_store.get(document.blob_key)
        content_type = (
            document.content_type
            or stream.content_type
            or mimetypes.guess_type(document.file_name)[0]
            or DEFAULT_CONTENT_TYPE
        )
        return DownloadedDocument(
            file_name=document.file_name,
            content_type=content_type,
            stream=stream,
        )

    async def list_documents(self, claim: Claim) -> list[DocumentWithContext]:
        """List documents visible to the caller's company."""
        return await self.catalog.list_documents(claim.company_id)

    async def list_productions(self, claim: Claim) -> Sequence[ProductionModel]:
        """List productions owned by the caller's company."""
        return await self.catalog.list_productions(claim.company_id)
