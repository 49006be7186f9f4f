"""
User ORM model.

Dependencies: sqlalchemy, docvault.boundary.db.base
System role: Credential persistence
"""

import enum

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from docvault.boundary.db.base import Base, IntegerIDMixin, TimestampMixin


class UserRole(str, enum.Enum):
    """
    User roles.

    MEMBER: Regular tenant user
    OPERATOR: May view the diagnostic status page
    """

    MEMBER = "member"
    OPERATOR = "operator"


class UserModel(Base, IntegerIDMixin, TimestampMixin):
    """
    User ORM model.

    Attributes:
        id: Integer primary key
        username: Login name, unique
        password_hash: bcrypt verifier; the raw password is never stored
        company_id: Tenant the user belongs to
        role: UserRole value
    """

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    company_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("companies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    role: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        default=UserRole.MEMBER.value,
    )

    company = relationship("CompanyModel", back_populates="users")
