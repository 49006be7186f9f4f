"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from docvault.boundary.db.CRUD import document_crud, production_crud

    # Use singleton instances
    productions = await production_crud.get_by_company_id(db, company_id)
"""

from docvault.boundary.db.CRUD.base_crud import BaseCRUD
from docvault.boundary.db.CRUD.company_crud import CompanyCRUD, company_crud
from docvault.boundary.db.CRUD.document_crud import DocumentCRUD, document_crud
from docvault.boundary.db.CRUD.production_crud import ProductionCRUD, production_crud
from docvault.boundary.db.CRUD.user_crud import UserCRUD, user_crud

__all__ = [
    "BaseCRUD",
    "CompanyCRUD",
    "company_crud",
    "DocumentCRUD",
    "document_crud",
    "ProductionCRUD",
    "production_crud",
    "UserCRUD",
    "user_crud",
]
