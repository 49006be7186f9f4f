"""
Production ORM model.

A production is a project owned by exactly one company and groups documents.

Dependencies: sqlalchemy, docvault.boundary.db.base
System role: Project persistence
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from docvault.boundary.db.base import Base, IntegerIDMixin, TimestampMixin


class ProductionModel(Base, IntegerIDMixin, TimestampMixin):
    """
    Production ORM model.

    Attributes:
        id: Integer primary key
        name: Production name
        company_id: Owning company; immutable once set

    Relationships:
        company: Owning CompanyModel
        documents: Documents filed under this production
    """

    __tablename__ = "productions"

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    company_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("companies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Relationships
    company = relationship("CompanyModel", back_populates="productions")
    documents = relationship("DocumentModel", back_populates="production")

    @validates("company_id")
    def _validate_company_id(self, key: str, value: int) -> int:
        current = self.__dict__.get("company_id")
        if current is not None and value != current:
            raise ValueError("Production company_id cannot be changed once set")
        return value
