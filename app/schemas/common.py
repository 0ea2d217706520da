"""Small response models shared by several routers."""
from __future__ import annotations

from pydantic import BaseModel


class MessageResponse(BaseModel):
    message: str
