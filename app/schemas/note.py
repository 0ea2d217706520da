"""Pydantic models for notes."""
from __future__ import annotations

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class NoteCreate(BaseModel):
    """Payload for creating a note."""

    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    tags: Optional[List[str]] = None
    folder_id: Optional[str] = None
    material_id: Optional[uuid.UUID] = None
    color: Optional[str] = Field(default=None, max_length=20)
    is_public: Optional[bool] = None
    is_pinned: Optional[bool] = None


class NoteRead(BaseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    title: str
    content: str
    excerpt: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    color: Optional[str] = None
    folder_id: Optional[str] = None
    is_public: bool = False
    is_pinned: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class NoteListResponse(BaseModel):
    notes: List[NoteRead] = Field(default_factory=list)


class NoteResponse(BaseModel):
    note: NoteRead
