"""Study session models."""
import uuid

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.db.base import Base
from app.db.types import StringList


class StudySession(Base):
    """One timed study interval, usually logged from the pomodoro timer."""

    __tablename__ = "study_sessions"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    goal_id = Column(
        UUID(as_uuid=True), ForeignKey("goals.id", ondelete="SET NULL"), nullable=True, index=True
    )

    type = Column(String(20), nullable=False, default="pomodoro")  # pomodoro, custom, break
    duration = Column(Integer, nullable=False)  # minutes
    planned_duration = Column(Integer)
    focus_rating = Column(Integer)
    notes = Column(Text)
    tags = Column(StringList, default=list)
    completed = Column(Boolean, nullable=False, default=False)

    started_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    ended_at = Column(DateTime(timezone=True))
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    goal = relationship("Goal")
    material_links = relationship(
        "StudySessionMaterial", back_populates="session", cascade="all, delete-orphan"
    )

    @property
    def materials(self):
        return [link.material for link in self.material_links]


class StudySessionMaterial(Base):
    """Materials studied during a session."""

    __tablename__ = "study_session_materials"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    session_id = Column(
        UUID(as_uuid=True),
        ForeignKey("study_sessions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    material_id = Column(
        UUID(as_uuid=True),
        ForeignKey("study_materials.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    session = relationship("StudySession", back_populates="material_links")
    material = relationship("StudyMaterial")
