"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, IntegerIDMixin, TimestampMixin: Model building blocks
  - create_engine_from_settings(), create_session_factory(), session_scope(): Async connection management
  - CompanyModel, ProductionModel, DocumentModel, UserModel: Core domain entities
  - company_crud, production_crud, document_crud, user_crud: CRUD operation singletons

Dependencies: sqlalchemy, docvault.configs
System role: Database adapter providing persistent storage for tenants,
productions, document metadata and users.
"""

from docvault.boundary.db.base import Base, IntegerIDMixin, TimestampMixin
from docvault.boundary.db.connection import (
    create_engine_from_settings,
    create_session_factory,
    session_scope,
)
from docvault.boundary.db.models import (
    CompanyModel,
    DocumentModel,
    ProductionModel,
    UserModel,
    UserRole,
)
from docvault.boundary.db.CRUD import (
    BaseCRUD,
    CompanyCRUD,
    DocumentCRUD,
    ProductionCRUD,
    UserCRUD,
    company_crud,
    document_crud,
    production_crud,
    user_crud,
)

__all__ = [
    # Base classes
    "Base",
    "IntegerIDMixin",
    "TimestampMixin",
    # Connection
    "create_engine_from_settings",
    "create_session_factory",
    "session_scope",
    # Models
    "CompanyModel",
    "DocumentModel",
    "ProductionModel",
    "UserModel",
    "UserRole",
    # CRUD classes
    "BaseCRUD",
    "CompanyCRUD",
    "DocumentCRUD",
    "ProductionCRUD",
    "UserCRUD",
    # CRUD singletons
    "company_crud",
    "document_crud",
    "production_crud",
    "user_crud",
]
