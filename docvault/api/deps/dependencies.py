"""
Dependency injection container.

Holds the process-wide resources (engine, session factory, blob store,
token service, password hasher) and exposes them as FastAPI dependencies.
The container is created in the application lifespan and stored on
app.state.services; tests swap individual pieces via dependency_overrides.

Dependencies: fastapi, sqlalchemy, docvault.configs, docvault.boundary, docvault.core
System role: DI container for service injection
"""

import logging
from datetime import timedelta
from typing import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from docvault.application.services import (
    CatalogService,
    CredentialStore,
    DiagnosticsService,
    DocumentService,
)
from docvault.boundary.aws.s3_client import S3BlobStore
from docvault.boundary.db.connection import (
    create_engine_from_settings,
    create_session_factory,
    session_scope,
)
from docvault.configs import Settings
from docvault.core.exceptions import ConfigurationError
from docvault.core.security import PasswordHasher, TokenService, TokenVerifier

logger = logging.getLogger(__name__)


class ServiceContainer:
    """Container for process-wide resources, built lazily from settings."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None
        self._blob_store: S3BlobStore | None = None
        self._token_service: TokenService | None = None
        self._password_hasher: PasswordHasher | None = None

    @property
    def engine(self) -> AsyncEngine:
        """Get the single async engine (owns the connection pool)."""
        if self._engine is None:
            self._engine = create_engine_from_settings(self.settings.database)
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        """Get the session factory bound to the engine."""
        if self._session_factory is None:
            self._session_factory = create_session_factory(self.engine)
        return self._session_factory

    @property
    def blob_store(self) -> S3BlobStore:
        """Get cached S3 blob store."""
        if self._blob_store is None:
            self._blob_store = S3BlobStore.from_settings(self.settings.storage)
        return self._blob_store

    @property
    def token_service(self) -> TokenService:
        """
        Get cached token service.

        Raises:
            ConfigurationError: If no signing secret is configured
        """
        if self._token_service is None:
            auth = self.settings.auth
            if not auth.secret:
                raise ConfigurationError(
                    "JWT_SECRET is not set; refusing to issue or verify tokens"
                )
            self._token_service = TokenService(
                secret=auth.secret,
                algorithm=auth.algorithm,
                lifetime=timedelta(seconds=auth.expiration_seconds),
            )
        return self._token_service

    @property
    def password_hasher(self) -> PasswordHasher:
        """Get cached password hasher."""
        if self._password_hasher is None:
            self._password_hasher = PasswordHasher(rounds=self.settings.auth.bcrypt_rounds)
        return self._password_hasher

    def warm(self) -> None:
        """
        Build every resource up front so misconfiguration fails at startup.

        Raises:
            ConfigurationError: If the signing secret is missing
        """
        _ = self.token_service
        _ = self.password_hasher
        _ = self.session_factory
        _ = self.blob_store

    async def dispose(self) -> None:
        """Close pooled connections and drop cached instances."""
        if self._engine is not None:
            await self._engine.dispose()
        self._engine = None
        self._session_factory = None
        self._blob_store = None
        self._token_service = None
        self._password_hasher = None


def get_service_container(request: Request) -> ServiceContainer:
    """Get the container created by the application lifespan."""
    return request.app.state.services


async def get_async_db(
    container: ServiceContainer = Depends(get_service_container),
) -> AsyncGenerator[AsyncSession, None]:
    """
    Get a request-scoped database session.

    Yields:
        AsyncSession: Session returned to the pool when the request ends
    """
    async for session in session_scope(container.session_factory):
        yield session


def get_token_verifier(
    container: ServiceContainer = Depends(get_service_container),
) -> TokenVerifier:
    """Get the token verifier used by the authorization guard."""
    return container.token_service


def get_token_service(
    container: ServiceContainer = Depends(get_service_container),
) -> TokenService:
    """Get the token service used to issue tokens at login."""
    return container.token_service


def get_password_hasher(
    container: ServiceContainer = Depends(get_service_container),
) -> PasswordHasher:
    """Get the password hasher."""
    return container.password_hasher


def get_blob_store(
    container: ServiceContainer = Depends(get_service_container),
) -> S3BlobStore:
    """Get the S3 blob store."""
    return container.blob_store


def get_credential_store(
    db: AsyncSession = Depends(get_async_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> CredentialStore:
    """
    Get credential store instance.

    Args:
        db: Async database session (injected via Depends)
        hasher: Password hasher (injected via Depends)

    Returns:
        CredentialStore: Credential store instance
    """
    return CredentialStore(db=db, hasher=hasher)


def get_catalog_service(db: AsyncSession = Depends(get_async_db)) -> CatalogService:
    """Get catalog service instance."""
    return CatalogService(db=db)


def get_document_service(
    db: AsyncSession = Depends(get_async_db),
    blob_store: S3BlobStore = Depends(get_blob_store),
) -> DocumentService:
    """
    Get document service instance.

    Args:
        db: Async database session (injected via Depends)
        blob_store: S3 blob store (injected via Depends)

    Returns:
        DocumentService: Document service bound to this request's session
    """
    return DocumentService(db=db, blob_store=blob_store)


def get_diagnostics_service(db: AsyncSession = Depends(get_async_db)) -> DiagnosticsService:
    """Get diagnostics service instance."""
    return DiagnosticsService(db=db)
