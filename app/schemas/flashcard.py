"""Pydantic models for flashcard decks."""
from __future__ import annotations

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CardCreate(BaseModel):
    front: str = Field(..., min_length=1)
    back: str = Field(..., min_length=1)
    hint: Optional[str] = None


class DeckCreate(BaseModel):
    """Payload for creating a deck, optionally with its first cards."""

    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    cards: Optional[List[CardCreate]] = None


class CardRead(BaseModel):
    id: uuid.UUID
    deck_id: uuid.UUID
    front: str
    back: str
    hint: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class DeckRead(BaseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    name: str
    description: Optional[str] = None
    card_count: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class DeckDetail(DeckRead):
    cards: List[CardRead] = Field(default_factory=list)


class DeckListResponse(BaseModel):
    decks: List[DeckRead] = Field(default_factory=list)


class DeckResponse(BaseModel):
    deck: DeckRead


class DeckDetailResponse(BaseModel):
    deck: DeckDetail


class CardResponse(BaseModel):
    card: CardRead
