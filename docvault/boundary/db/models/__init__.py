"""
Database models package.

Exports:
  - CompanyModel: Tenant root
  - ProductionModel: Company-owned project
  - DocumentModel: Document metadata pointing at a blob
  - UserModel, UserRole: Credentials and roles

Dependencies: sqlalchemy, docvault.boundary.db.base
System role: Database model definitions for domain entities
"""

from docvault.boundary.db.models.company_model import CompanyModel
from docvault.boundary.db.models.document_model import DocumentModel
from docvault.boundary.db.models.production_model import ProductionModel
from docvault.boundary.db.models.user_model import UserModel, UserRole

__all__ = [
    "CompanyModel",
    "DocumentModel",
    "ProductionModel",
    "UserModel",
    "UserRole",
]
