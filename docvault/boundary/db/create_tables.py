"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata, and
optionally seeds a company with an operator user.

Dependencies: sqlalchemy, docvault.configs
System role: Database schema initialization

Usage:
    python -m docvault.boundary.db.create_tables
    python -m docvault.boundary.db.create_tables --company Acme \
        --operator admin --operator-password 'change-me-now'
"""

import argparse
import asyncio

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from docvault.application.services.credential_store import CredentialStore
from docvault.boundary.db.base import Base
from docvault.boundary.db.connection import create_engine_from_settings, create_session_factory
from docvault.boundary.db.CRUD import company_crud, user_crud

# Import all models to register them with Base.metadata
from docvault.boundary.db.models import (  # noqa: F401
    CompanyModel,
    DocumentModel,
    ProductionModel,
    UserModel,
    UserRole,
)
from docvault.configs import get_settings
from docvault.core.security import PasswordHasher


async def create_all_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: existing tables remain unchanged, so safe to run multiple times.

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    print("All tables created successfully.")


async def drop_all_tables(engine: AsyncEngine) -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    print("All tables dropped successfully.")


async def seed_company(db: AsyncSession, name: str) -> CompanyModel:
    """Get or create a company by name."""
    company = await company_crud.get_by_name(db, name)
    if company is None:
        company = await company_crud.create(db, name=name)
        await db.commit()
        print(f"Company created: {name} (id={company.id})")
    return company


async def seed_operator(
    db: AsyncSession,
    company: CompanyModel,
    username: str,
    password: str,
    bcrypt_rounds: int = 12,
) -> None:
    """Create an operator user in the company unless the username exists."""
    if await user_crud.get_by_username(db, username) is not None:
        print(f"User already exists: {username}")
        return

    store = CredentialStore(db, PasswordHasher(rounds=bcrypt_rounds))
    user_id = await store.register(username, password, company.id, role=UserRole.OPERATOR)
    print(f"Operator created: {username} (id={user_id})")


async def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Create docvault tables and seed data")
    parser.add_argument("--drop", action="store_true", help="Drop all tables first")
    parser.add_argument("--company", help="Company to create if missing")
    parser.add_argument("--operator", help="Operator username to create in --company")
    parser.add_argument("--operator-password", help="Password for --operator")
    args = parser.parse_args(argv)

    if args.operator and not (args.company and args.operator_password):
        parser.error("--operator requires --company and --operator-password")

    settings = get_settings()
    engine = create_engine_from_settings(settings.database)
    try:
        if args.drop:
            await drop_all_tables(engine)
        await create_all_tables(engine)

        if args.company:
            factory = create_session_factory(engine)
            async with factory() as db:
                company = await seed_company(db, args.company)
                if args.operator:
                    await seed_operator(
                        db,
                        company,
                        args.operator,
                        args.operator_password,
                        settings.auth.bcrypt_rounds,
                    )
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
