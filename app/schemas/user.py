"""Pydantic models for user API interactions."""
from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserCreate(BaseModel):
    """Schema for user registration input."""

    email: EmailStr
    password: str = Field(min_length=8, max_length=128)
    name: Optional[str] = Field(default=None, max_length=255)


class UserLogin(BaseModel):
    """Schema for user login request."""

    email: EmailStr
    password: str


class PreferencesRead(BaseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    theme: str
    study_goal_minutes: int
    notifications: bool
    email_notifications: bool
    default_view: str
    auto_save: bool
    pomodoro_focus: int
    pomodoro_break: int
    pomodoro_long_break: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class UserRead(BaseModel):
    """Public user profile; never includes the password hash."""

    id: uuid.UUID
    email: EmailStr
    name: Optional[str] = None
    image: Optional[str] = None
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    preferences: Optional[PreferencesRead] = None

    model_config = ConfigDict(from_attributes=True)


class CurrentUserResponse(BaseModel):
    user: UserRead
