"""Pydantic models for study sessions."""
from __future__ import annotations

import uuid
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.goal import GoalSummary
from app.schemas.material import MaterialSummary


class StudySessionCreate(BaseModel):
    """A finished study interval reported by the timer."""

    type: Literal["pomodoro", "custom", "break"] = "pomodoro"
    duration: int = Field(..., ge=1, description="Minutes studied")
    planned_duration: Optional[int] = Field(default=None, ge=1)
    focus_rating: Optional[int] = Field(default=None, ge=1, le=5)
    notes: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    goal_id: Optional[uuid.UUID] = None
    material_ids: List[uuid.UUID] = Field(default_factory=list)


class StudySessionRead(BaseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    type: str
    duration: int
    planned_duration: Optional[int] = None
    focus_rating: Optional[int] = None
    notes: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    completed: bool
    started_at: Optional[datetime] = None
    ended_at: Optional[datetime] = None
    goal_id: Optional[uuid.UUID] = None
    goal: Optional[GoalSummary] = None
    materials: List[MaterialSummary] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class StudySessionListResponse(BaseModel):
    sessions: List[StudySessionRead] = Field(default_factory=list)
    total_sessions: int
    has_more: bool


class StudySessionResponse(BaseModel):
    session: StudySessionRead
