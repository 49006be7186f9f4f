"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory database sessions, seeded tenants, an in-memory blob
store, token service with a controllable clock, and password hasher.
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import itertools
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import BinaryIO

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from docvault.boundary.aws.s3_client import BlobStream, StoredObject
from docvault.boundary.db.base import Base
from docvault.boundary.db.models import CompanyModel, ProductionModel
from docvault.core.exceptions import BlobNotFoundError
from docvault.core.security import Claim, PasswordHasher, TokenService

TEST_SECRET = "test-signing-secret-0123456789abcdef"
FIXED_NOW = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class FakeBlobStore:
    """In-memory stand-in for S3BlobStore."""

    def __init__(self, chunk_size: int = 4):
        self.objects: dict[str, bytes] = {}
        self.content_types: dict[str, str | None] = {}
        self.chunk_size = chunk_size
        self._counter = itertools.count(1)

    def build_key(self, file_name: str, timestamp_ms: int | None = None) -> str:
        return f"uploads/{next(self._counter)}_{file_name}"

    def location_for(self, key: str) -> str:
        return f"https://test-bucket.s3.eu-north-1.amazonaws.com/{key}"

    async def put(self, key: str, fileobj: BinaryIO, content_type: str | None = None) -> StoredObject:
        self.objects[key] = fileobj.read()
        self.content_types[key] = content_type
        return StoredObject(key=key, location=self.location_for(key))

    async def get(self, key: str) -> BlobStream:
        if key not in self.objects:
            raise BlobNotFoundError(key)
        data = self.objects[key]
        chunks = [data[i : i + self.chunk_size] for i in range(0, len(data), self.chunk_size)]
        return BlobStream(
            iter(chunks),
            content_length=len(data),
            content_type=self.content_types[key],
        )


class MutableClock:
    """Clock whose current time tests can move forward."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now = self.now + timedelta(seconds=seconds)


@dataclass
class Tenants:
    """Two companies, each with productions."""

    company_a: CompanyModel
    company_b: CompanyModel
    production_a: ProductionModel
    production_b: ProductionModel


async def create_schema(engine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@pytest.fixture
async def db_engine():
    """In-memory SQLite engine shared by every session of one test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def test_async_db(db_engine):
    """
    Create in-memory SQLite async database session for testing.

    Yields:
        AsyncSession: Test database session
    """
    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def tenants(test_async_db: AsyncSession) -> Tenants:
    """Seed company A (production 42) and company B (production 7)."""
    company_a = CompanyModel(name="Acme Films")
    company_b = CompanyModel(name="Globex Studios")
    test_async_db.add_all([company_a, company_b])
    await test_async_db.flush()

    production_a = ProductionModel(id=42, name="Spring Campaign", company_id=company_a.id)
    production_b = ProductionModel(id=7, name="Winter Launch", company_id=company_b.id)
    test_async_db.add_all([production_a, production_b])
    await test_async_db.commit()

    return Tenants(company_a, company_b, production_a, production_b)


@pytest.fixture
def fake_blob_store() -> FakeBlobStore:
    return FakeBlobStore()


@pytest.fixture
def clock() -> MutableClock:
    return MutableClock(FIXED_NOW)


@pytest.fixture
def token_service(clock: MutableClock) -> TokenService:
    return TokenService(secret=TEST_SECRET, lifetime=timedelta(hours=1), clock=clock)


@pytest.fixture
def password_hasher() -> PasswordHasher:
    """Lowest bcrypt cost keeps the suite fast."""
    return PasswordHasher(rounds=4)


@pytest.fixture
def make_claim():
    """Factory for verified claims."""

    def _make(company_id: int, user_id: int = 1, role: str = "member") -> Claim:
        return Claim(
            user_id=user_id,
            company_id=company_id,
            role=role,
            expires_at=FIXED_NOW + timedelta(hours=1),
        )

    return _make
