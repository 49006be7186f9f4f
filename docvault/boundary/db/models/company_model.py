"""
Company ORM model.

Tenant root: every production, document and user resolves to one company.

Dependencies: sqlalchemy, docvault.boundary.db.base
System role: Tenant persistence
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from docvault.boundary.db.base import Base, IntegerIDMixin, TimestampMixin


class CompanyModel(Base, IntegerIDMixin, TimestampMixin):
    """
    Company (tenant) ORM model.

    Attributes:
        id: Integer primary key
        name: Display name, unique across tenants

    Relationships:
        productions: Productions owned by the company
        users: Users belonging to the company
    """

    __tablename__ = "companies"

    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    productions = relationship("ProductionModel", back_populates="company")
    users = relationship("UserModel", back_populates="company")
