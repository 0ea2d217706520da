"""Pydantic models for study materials."""
from __future__ import annotations

import uuid
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import AnyUrl, BaseModel, ConfigDict, Field

MaterialType = Literal["pdf", "doc", "video", "audio", "image", "url", "other"]


class MaterialCreate(BaseModel):
    """Payload for registering a material, optionally pointing at an upload."""

    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    type: MaterialType
    url: Optional[AnyUrl] = None
    category: Optional[str] = Field(default=None, max_length=100)
    tags: List[str] = Field(default_factory=list)
    color: Optional[str] = Field(default=None, max_length=20)
    folder_id: Optional[str] = None
    file_path: Optional[str] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = Field(default=None, ge=0)


class MaterialRead(BaseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    title: str
    description: Optional[str] = None
    type: str
    url: Optional[str] = None
    category: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    color: Optional[str] = None
    folder_id: Optional[str] = None
    file_path: Optional[str] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class MaterialSummary(BaseModel):
    """Compact material reference embedded in study sessions."""

    id: uuid.UUID
    title: str
    type: str

    model_config = ConfigDict(from_attributes=True)


class MaterialListResponse(BaseModel):
    materials: List[MaterialRead] = Field(default_factory=list)


class MaterialResponse(BaseModel):
    material: MaterialRead
