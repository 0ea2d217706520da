"""Pydantic models for goals."""
from __future__ import annotations

import uuid
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

GoalType = Literal["time", "materials", "flashcards", "sessions"]
GoalPriority = Literal["low", "medium", "high"]

# Columns that may be omitted from an update but never cleared.
REQUIRED_GOAL_FIELDS = frozenset(
    {"title", "type", "target", "current", "unit", "deadline", "priority", "completed"}
)


class GoalCreate(BaseModel):
    """Payload for creating a goal; progress always starts at zero."""

    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    type: GoalType
    target: float = Field(..., ge=1)
    unit: str = Field(..., min_length=1, max_length=50)
    deadline: datetime
    priority: GoalPriority = "medium"


class GoalUpdate(BaseModel):
    """Partial update for an existing goal."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    type: Optional[GoalType] = None
    target: Optional[float] = Field(default=None, ge=1)
    current: Optional[float] = Field(default=None, ge=0)
    unit: Optional[str] = Field(default=None, min_length=1, max_length=50)
    deadline: Optional[datetime] = None
    priority: Optional[GoalPriority] = None
    completed: Optional[bool] = None

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def validate_changes(self) -> "GoalUpdate":
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided")
        cleared = sorted(
            name
            for name in self.model_fields_set & REQUIRED_GOAL_FIELDS
            if getattr(self, name) is None
        )
        if cleared:
            raise ValueError(f"Fields cannot be null: {', '.join(cleared)}")
        return self


class GoalProgressRead(BaseModel):
    id: uuid.UUID
    value: float
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class GoalRead(BaseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    title: str
    description: Optional[str] = None
    type: str
    target: float
    current: float
    unit: str
    deadline: Optional[datetime] = None
    priority: str
    completed: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    progress: List[GoalProgressRead] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class GoalSummary(BaseModel):
    id: uuid.UUID
    title: str

    model_config = ConfigDict(from_attributes=True)


class GoalListResponse(BaseModel):
    goals: List[GoalRead] = Field(default_factory=list)


class GoalResponse(BaseModel):
    goal: GoalRead
