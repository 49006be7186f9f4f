"""
Document domain models and schemas.

Request/response schemas for document operations.

Dependencies: pydantic
System role: Document API contracts
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class DocumentWithContext(BaseModel):
    """Document row denormalized with its production and company names."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    production_id: int
    file_name: str
    blob_key: str
    version: str | None = None
    content_type: str | None = None
    size_bytes: int | None = None
    created_at: datetime
    production_name: str
    company_name: str


class UploadResponse(BaseModel):
    """Upload confirmation."""

    message: str = Field(description="Confirmation text including the object location")
    document_id: int
    file_name: str
    blob_key: str
    location: str
