"""Service orchestrators."""

from .catalog_service import CatalogService
from .credential_store import CredentialStore
from .diagnostics_service import DiagnosticsService
from .document_service import DocumentService, DownloadedDocument, UploadConfirmation

__all__ = [
    "CatalogService",
    "CredentialStore",
    "DiagnosticsService",
    "DocumentService",
    "DownloadedDocument",
    "UploadConfirmation",
]
