"""
API test fixtures.

Builds the application with test settings and overrides the token and
service dependencies so routes run without PostgreSQL or S3. Every service
factory override records its use, so tests can assert that rejected
requests never reached a service.

Dependencies: pytest, fastapi
System role: HTTP test harness
"""

from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from docvault.api.deps import (
    get_blob_store,
    get_catalog_service,
    get_credential_store,
    get_diagnostics_service,
    get_document_service,
    get_token_service,
    get_token_verifier,
)
from docvault.api.main import create_app
from docvault.configs import Settings
from docvault.configs.auth import AuthSettings
from docvault.configs.database import DatabaseSettings
from docvault.configs.storage import S3StorageSettings


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        database=DatabaseSettings(url="sqlite+aiosqlite:///:memory:"),
        storage=S3StorageSettings(bucket_name="test-bucket"),
        auth=AuthSettings(secret="test-signing-secret-0123456789abcdef", bcrypt_rounds=4),
    )


@pytest.fixture
def service_calls() -> list[str]:
    """Names of service factories the app resolved."""
    return []


@pytest.fixture
def mock_document_service() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def mock_credential_store() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def mock_catalog_service() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def mock_diagnostics_service() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def mock_blob_store() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def app(
    test_settings,
    token_service,
    service_calls,
    mock_document_service,
    mock_credential_store,
    mock_catalog_service,
    mock_diagnostics_service,
    mock_blob_store,
) -> FastAPI:
    app = create_app(test_settings)

    def tracked(name, service):
        def factory():
            service_calls.append(name)
            return service

        return factory

    app.dependency_overrides[get_token_verifier] = lambda: token_service
    app.dependency_overrides[get_token_service] = lambda: token_service
    app.dependency_overrides[get_document_service] = tracked(
        "document_service", mock_document_service
    )
    app.dependency_overrides[get_credential_store] = tracked(
        "credential_store", mock_credential_store
    )
    app.dependency_overrides[get_catalog_service] = tracked("catalog", mock_catalog_service)
    app.dependency_overrides[get_diagnostics_service] = tracked(
        "diagnostics", mock_diagnostics_service
    )
    app.dependency_overrides[get_blob_store] = tracked("blob_store", mock_blob_store)
    return app


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def auth_headers(token_service):
    """Factory for Authorization headers carrying a fresh token."""

    def _headers(user_id: int = 1, company_id: int = 1, role: str = "member") -> dict[str, str]:
        token = token_service.issue(user_id, company_id, role)
        return {"Authorization": f"Bearer {token}"}

    return _headers
