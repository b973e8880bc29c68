from __future__ import annotations

import datetime as dt

from sqlalchemy import DateTime, Enum, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from casedesk.db.session import Base
from casedesk.models.enums import DocumentCategory


class Document(Base):
    """Metadata for a stored artifact. The bytes live in the blob store."""

    __tablename__ = "documents"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    case_id: Mapped[int] = mapped_column(ForeignKey("cases.id", ondelete="CASCADE"), index=True)

    file_name: Mapped[str] = mapped_column(String(255))
    file_type: Mapped[str] = mapped_column(String(100), default="application/pdf")
    file_size: Mapped[int] = mapped_column(Integer)
    storage_path: Mapped[str] = mapped_column(String(500))
    file_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    category: Mapped[DocumentCategory] = mapped_column(Enum(DocumentCategory), default=DocumentCategory.LETTERS)
    uploaded_by: Mapped[str] = mapped_column(String(200))
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), index=True)

    case = relationship("Case", back_populates="documents")
