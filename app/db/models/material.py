"""Study material model."""
import uuid

from sqlalchemy import BigInteger, Column, DateTime, ForeignKey, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func

from app.db.base import Base
from app.db.types import StringList


class StudyMaterial(Base):
    """A document, link or media item the user studies from."""

    __tablename__ = "study_materials"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    title = Column(String(255), nullable=False)
    description = Column(Text)
    type = Column(String(20), nullable=False)
    url = Column(String(2048))
    category = Column(String(100))
    tags = Column(StringList, default=list)
    color = Column(String(20))
    folder_id = Column(String(64))

    # Uploaded file metadata
    file_path = Column(String(512))
    file_name = Column(String(255))
    mime_type = Column(String(255))
    file_size = Column(BigInteger)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
