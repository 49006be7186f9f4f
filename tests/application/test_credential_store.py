"""
Test suite for CredentialStore.

Covers registration rules, login verification (both failure branches are
indistinguishable) and user lookup, using a real in-memory database.

System role: Verification of credential handling
"""

import asyncio
from unittest.mock import patch

import pytest

from docvault.application.services import CredentialStore
from docvault.boundary.db.models import UserModel, UserRole
from docvault.core.exceptions import (
    DuplicateUsername,
    InvalidCredentials,
    UserNotFoundError,
    ValidationError,
)
from docvault.core.security import PasswordHasher


@pytest.fixture
def store(test_async_db, password_hasher) -> CredentialStore:
    return CredentialStore(test_async_db, password_hasher)


class TestRegister:
    async def test_stores_verifier_not_password(self, store, tenants):
        user_id = await store.register("alice", "s3cret-pass", tenants.company_a.id)

        user = await store.db.get(UserModel, user_id)
        assert user.username == "alice"
        assert user.password_hash != "s3cret-pass"
        assert user.company_id == tenants.company_a.id
        assert user.role == "member"

    async def test_duplicate_username(self, store, tenants):
        await store.register("alice", "s3cret-pass", tenants.company_a.id)

        with pytest.raises(DuplicateUsername):
            await store.register("alice", "other-pass", tenants.company_b.id)

    async def test_unknown_company(self, store, tenants):
        with pytest.raises(ValidationError) as exc_info:
            await store.register("alice", "s3cret-pass", 999)

        assert exc_info.value.details["field"] == "company_id"

    async def test_blank_username(self, store, tenants):
        with pytest.raises(ValidationError):
            await store.register("   ", "s3cret-pass", tenants.company_a.id)

    async def test_operator_role(self, store, tenants):
        user_id = await store.register(
            "root", "s3cret-pass", tenants.company_a.id, role=UserRole.OPERATOR
        )

        assert (await store.get_user(user_id)).role == "operator"


class TestVerify:
    async def test_correct_password(self, store, tenants):
        user_id = await store.register("alice", "s3cret-pass", tenants.company_a.id)

        user = await store.verify("alice", "s3cret-pass")

        assert user.id == user_id
        assert user.company_id == tenants.company_a.id

    async def test_wrong_password(self, store, tenants):
        await store.register("alice", "s3cret-pass", tenants.company_a.id)

        with pytest.raises(InvalidCredentials) as exc_info:
            await store.verify("alice", "wrong-pass")

        assert exc_info.value.message == "Invalid credentials"

    async def test_overlong_password_is_invalid_credentials(self, store, tenants):
        await store.register("alice", "s3cret-pass", tenants.company_a.id)

        with pytest.raises(InvalidCredentials):
            await store.verify("alice", "z" * 100)

    async def test_unknown_user_same_error(self, store, tenants):
        with patch.object(store.hasher, "verify_dummy", wraps=store.hasher.verify_dummy) as dummy:
            with pytest.raises(InvalidCredentials) as exc_info:
                await store.verify("nobody", "whatever-pass")

        assert exc_info.value.message == "Invalid credentials"
        dummy.assert_called_once_with("whatever-pass")


class TestGetUser:
    async def test_found(self, store, tenants):
        user_id = await store.register("alice", "s3cret-pass", tenants.company_a.id)

        assert (await store.get_user(user_id)).username == "alice"

    async def test_missing(self, store, tenants):
        with pytest.raises(UserNotFoundError):
            await store.get_user(424242)


async def test_password_hashing_does_not_block_event_loop(test_async_db, tenants):
    store = CredentialStore(test_async_db, PasswordHasher(rounds=12))
    loop = asyncio.get_running_loop()
    gaps: list[float] = []
    done = asyncio.Event()

    async def ticker():
        last = loop.time()
        while not done.is_set():
            await asyncio.sleep(0.005)
            now = loop.time()
            gaps.append(now - last)
            last = now

    async def register_and_verify():
        try:
            await store.register("alice", "s3cret-pass", tenants.company_a.id)
            await store.verify("alice", "s3cret-pass")
            with pytest.raises(InvalidCredentials):
                await store.verify("nobody", "s3cret-pass")
        finally:
            done.set()

    await asyncio.gather(ticker(), register_and_verify())

    assert gaps
    assert max(gaps) < 0.1
