"""Goal tracking models."""
import uuid

from sqlalchemy import Boolean, Column, DateTime, Float, ForeignKey, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.db.base import Base


class Goal(Base):
    """A numeric study objective, e.g. 600 minutes or 20 sessions."""

    __tablename__ = "goals"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    title = Column(String(255), nullable=False)
    description = Column(Text)
    type = Column(String(20), nullable=False)  # time, materials, flashcards, sessions
    target = Column(Float, nullable=False)
    current = Column(Float, nullable=False, default=0)
    unit = Column(String(50), nullable=False)
    deadline = Column(DateTime(timezone=True))
    priority = Column(String(10), nullable=False, default="medium")
    completed = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    progress = relationship(
        "GoalProgress",
        back_populates="goal",
        cascade="all, delete-orphan",
        order_by="GoalProgress.created_at.desc()",
    )


class GoalProgress(Base):
    """Log entry recording an increment towards a goal."""

    __tablename__ = "goal_progress"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    goal_id = Column(
        UUID(as_uuid=True), ForeignKey("goals.id", ondelete="CASCADE"), nullable=False, index=True
    )
    value = Column(Float, nullable=False)
    notes = Column(Text)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    goal = relationship("Goal", back_populates="progress")


class GoalMaterial(Base):
    """Associates a goal with the materials it covers."""

    __tablename__ = "goal_materials"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    goal_id = Column(
        UUID(as_uuid=True), ForeignKey("goals.id", ondelete="CASCADE"), nullable=False, index=True
    )
    material_id = Column(
        UUID(as_uuid=True),
        ForeignKey("study_materials.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
