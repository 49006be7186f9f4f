"""
Document API endpoints.

Routes:
- GET /documents - List documents of the caller's company
- POST /upload - Upload a file into a production (multipart)
- GET /download/{document_id} - Stream a document's bytes

Dependencies: docvault.application.services, docvault.api.deps, docvault.models
System role: Document HTTP API
"""

import logging
from urllib.parse import quote

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import StreamingResponse
from starlette.background import BackgroundTask

from docvault.api.deps import get_document_service, require_claim
from docvault.application.services import DocumentService
from docvault.core.security import Claim
from docvault.models.document import DocumentWithContext, UploadResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["documents"], dependencies=[Depends(require_claim)])


def content_disposition(file_name: str) -> str:
    """
    Build an attachment Content-Disposition header value.

    Plain ASCII names are sent quoted; anything else uses the RFC 5987
    filename* form.
    """
    quoted = quote(file_name)
    if quoted != file_name:
        return f"attachment; filename*=utf-8''{quoted}"
    return f'attachment; filename="{file_name}"'


@router.get("/documents", response_model=list[DocumentWithContext])
async def list_documents(
    claim: Claim = Depends(require_claim),
    document_service: DocumentService = Depends(get_document_service),
) -> list[DocumentWithContext]:
    """List documents with production and company names for the caller's company."""
    return await document_service.list_documents(claim)


@router.post("/upload", response_model=UploadResponse)
async def upload_document(
    file: UploadFile = File(...),
    production_id: int = Form(...),
    version: str | None = Form(None),
    claim: Claim = Depends(require_claim),
    document_service: DocumentService = Depends(get_document_service),
) -> UploadResponse:
    """
    Upload a file and record it under a production.

    Args:
        file: Multipart file part
        production_id: Target production (must belong to the caller's company)
        version: Free-text version label
        claim: Caller identity
        document_service: Injected document service

    Returns:
        UploadResponse: Confirmation with document id and object location

    Raises:
        ValidationError: 400 if the file has no name
        NotFoundError: 404 if the production is not visible to the caller
        DependencyError: 500 if storage or the database fails
    """
    try:
        confirmation = await document_service.upload(
            claim=claim,
            fileobj=file.file,
            file_name=file.filename or "",
            production_id=production_id,
            version=version,
            content_type=file.content_type,
            size_bytes=file.size,
        )
    finally:
        await file.close()

    return UploadResponse(
        message=f"File uploaded successfully: {confirmation.location}",
        document_id=confirmation.document_id,
        file_name=confirmation.file_name,
        blob_key=confirmation.blob_key,
        location=confirmation.location,
    )


@router.get("/download/{document_id}")
async def download_document(
    document_id: int,
    claim: Claim = Depends(require_claim),
    document_service: DocumentService = Depends(get_document_service),
) -> StreamingResponse:
    """
    Stream a document as an attachment.

    The body is streamed chunk by chunk from object storage; the stream is
    closed when the response finishes or the client disconnects.

    Raises:
        DocumentNotFoundError: 404 if absent or owned by another company
    """
    downloaded = await document_service.download(claim, document_id)
    headers = {"Content-Disposition": content_disposition(downloaded.file_name)}
    if downloaded.stream.content_length is not None:
        headers["Content-Length"] = str(downloaded.stream.content_length)

    return StreamingResponse(
        downloaded.stream,
        media_type=downloaded.content_type,
        headers=headers,
        background=BackgroundTask(downloaded.stream.close),
    )
