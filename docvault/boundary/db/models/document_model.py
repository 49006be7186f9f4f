"""
Document ORM model.

Metadata row pointing at a blob in object storage plus a free-text
version label.

Dependencies: sqlalchemy, docvault.boundary.db.base
System role: Document metadata persistence
"""

from sqlalchemy import BigInteger, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from docvault.boundary.db.base import Base, IntegerIDMixin, TimestampMixin


class DocumentModel(Base, IntegerIDMixin, TimestampMixin):
    """
    Document ORM model.

    Rows are only written after the referenced blob exists. There is no
    uniqueness constraint on (production_id, version): concurrent uploads
    with the same label produce independent rows.

    Attributes:
        id: Integer primary key
        production_id: Owning production (company is reached through it)
        file_name: Original filename as uploaded
        blob_key: Object storage key holding the bytes
        version: Free-text version label
        content_type: MIME type reported at upload
        size_bytes: Stored object size when known

    Relationships:
        production: Parent ProductionModel
    """

    __tablename__ = "documents"

    production_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("productions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    file_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        doc="Original filename",
    )

    blob_key: Mapped[str] = mapped_column(
        String(1024),
        nullable=False,
        doc="Object storage key for raw bytes",
    )

    version: Mapped[str | None] = mapped_column(String(64), nullable=True)

    content_type: Mapped[str | None] = mapped_column(String(255), nullable=True)

    size_bytes: Mapped[int | None] = mapped_column(BigInteger, nullable=True)

    # Relationships
    production = relationship("ProductionModel", back_populates="documents")
