"""
Credential store.

Registers users with a bcrypt verifier and checks login attempts. Unknown
usernames and wrong passwords fail with the same error. bcrypt is CPU-bound,
so hashing and verification run in the thread pool.

Dependencies: sqlalchemy, docvault.boundary.db, docvault.core.security
System role: Sole writer of user rows
"""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from docvault.boundary.db.CRUD.company_crud import company_crud
from docvault.boundary.db.CRUD.user_crud import user_crud
from docvault.boundary.db.models.user_model import UserModel, UserRole
from docvault.core.exceptions import (
    DatabaseError,
    DuplicateUsername,
    InvalidCredentials,
    UserNotFoundError,
    ValidationError,
)
from docvault.core.security.passwords import PasswordHasher

logger = logging.getLogger(__name__)


class CredentialStore:
    """User registration, login verification and lookup."""

    def __init__(self, db: AsyncSession, hasher: PasswordHasher) -> None:
        """
        Initialize credential store.

        Args:
            db: AsyncSession for the current request
            hasher: Password hasher (bcrypt)
        """
        self.db = db
        self.hasher = hasher

    async def register(
        self,
        username: str,
        raw_password: str,
        company_id: int,
        role: UserRole = UserRole.MEMBER,
    ) -> int:
        """
        Create a user.

        Steps:
        1. Reject duplicate usernames
        2. Reject unknown companies
        3. Store a bcrypt verifier of the password and commit

        Args:
            username: Unique login name
            raw_password: Plain text password (never stored or logged)
            company_id: Tenant the user joins
            role: User role

        Returns:
            int: New user id

        Raises:
            DuplicateUsername: If the username is taken
            ValidationError: If the company does not exist or the password is unusable
            DatabaseError: If the insert fails for another reason
        """
        username = username.strip()
        if not username:
            raise ValidationError("Username must not be empty", field="username")

        if await user_crud.get_by_username(self.db, username) is not None:
            raise DuplicateUsername(username)

        if not await company_crud.exists(self.db, company_id):
            raise ValidationError(f"Unknown company: {company_id}", field="company_id")

        password_hash = await run_in_threadpool(self.hasher.hash, raw_password)

        try:
            user = await user_crud.create(
                self.db,
                username=username,
                password_hash=password_hash,
                company_id=company_id,
                role=role.value,
            )
            await self.db.commit()
        except IntegrityError as e:
            # Lost a race with a concurrent registration of the same name
            await self.db.rollback()
            raise DuplicateUsername(username) from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise DatabaseError(f"Failed to register user: {e}") from e

        logger.info(
            "User registered",
            extra={"user_id": user.id, "company_id": company_id},
        )
        return user.id

    async def verify(self, username: str, raw_password: str) -> UserModel:
        """
        Check a login attempt.

        Args:
            username: Login name
            raw_password: Plain text password

        Returns:
            UserModel: The authenticated user

        Raises:
            InvalidCredentials: If the user is absent or the password is wrong
        """
        user = await user_crud.get_by_username(self.db, username.strip())
        if user is None:
            await run_in_threadpool(self.hasher.verify_dummy, raw_password)
            raise InvalidCredentials()

        if not await run_in_threadpool(self.hasher.verify, raw_password, user.password_hash):
            logger.info("Login rejected", extra={"user_id": user.id})
            raise InvalidCredentials()

        return user

    async def get_user(self, user_id: int) -> UserModel:
        """
        Look up a user by id.

        Raises:
            UserNotFoundError: If no such user exists
        """
        user = await user_crud.get_by_id(self.db, user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user
