"""Schemas for file uploads."""
from __future__ import annotations

from pydantic import BaseModel


class UploadResponse(BaseModel):
    """Where an uploaded file was stored and what it was."""

    path: str
    file_name: str
    size: int
    mime_type: str
