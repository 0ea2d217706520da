"""Note models."""
import uuid

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.db.base import Base
from app.db.types import StringList


class Note(Base):
    """A free-form study note."""

    __tablename__ = "notes"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    excerpt = Column(String(140))
    tags = Column(StringList, default=list)
    color = Column(String(20))
    folder_id = Column(String(64))
    is_public = Column(Boolean, default=False)
    is_pinned = Column(Boolean, default=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    material_links = relationship(
        "NoteMaterialLink", back_populates="note", cascade="all, delete-orphan"
    )


class NoteMaterialLink(Base):
    """Associates a note with the material it was written about."""

    __tablename__ = "note_material_links"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    note_id = Column(
        UUID(as_uuid=True), ForeignKey("notes.id", ondelete="CASCADE"), nullable=False, index=True
    )
    material_id = Column(
        UUID(as_uuid=True),
        ForeignKey("study_materials.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    note = relationship("Note", back_populates="material_links")
