"""FastAPI dependencies."""

from .auth import require_claim, require_operator
from .dependencies import (
    ServiceContainer,
    get_async_db,
    get_blob_store,
    get_catalog_service,
    get_credential_store,
    get_diagnostics_service,
    get_document_service,
    get_password_hasher,
    get_service_container,
    get_token_service,
    get_token_verifier,
)

__all__ = [
    "ServiceContainer",
    "get_async_db",
    "get_blob_store",
    "get_catalog_service",
    "get_credential_store",
    "get_diagnostics_service",
    "get_document_service",
    "get_password_hasher",
    "get_service_container",
    "get_token_service",
    "get_token_verifier",
    "require_claim",
    "require_operator",
]
