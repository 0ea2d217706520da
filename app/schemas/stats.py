"""Pydantic models for the dashboard statistics endpoint."""

from __future__ import annotations

from pydantic import BaseModel, Field

# The streak walk stops once it passes this many days.
MAX_STREAK_DAYS = 730


class DashboardStats(BaseModel):
    """Headline numbers shown on the study dashboard."""

    # Current counts
    total_materials: int = Field(ge=0)
    total_notes: int = Field(ge=0)
    total_flashcards: int = Field(ge=0)
    total_decks: int = Field(ge=0)
    total_goals: int = Field(ge=0)
    active_goals: int = Field(ge=0)
    completed_goals: int = Field(ge=0)

    # Study time in minutes
    total_study_time: int = Field(ge=0)
    today_study_time: int = Field(ge=0)
    week_study_time: int = Field(ge=0)
    month_study_time: int = Field(ge=0)

    study_streak: int = Field(ge=0, le=MAX_STREAK_DAYS + 1)
    average_session_length: int = Field(ge=0)
    total_sessions: int = Field(ge=0)
    overall_progress: int = Field(ge=0, le=100)

    today_study_time_formatted: str
    week_study_time_formatted: str
    month_study_time_formatted: str


class DashboardStatsResponse(BaseModel):
    stats: DashboardStats
