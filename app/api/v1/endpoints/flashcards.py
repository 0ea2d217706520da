"""Flashcard deck endpoints."""
from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api import deps
from app.db.models.user import User
from app.schemas import (
    CardCreate,
    CardResponse,
    DeckCreate,
    DeckDetail,
    DeckDetailResponse,
    DeckListResponse,
    DeckRead,
    DeckResponse,
    MessageResponse,
)
from app.services.flashcards import DeckWithCount, FlashcardService
from app.utils.exceptions import NotFoundError, handle_not_found

router = APIRouter(prefix="/flashcards", tags=["flashcards"])


def _deck_read(item: DeckWithCount) -> DeckRead:
    deck = DeckRead.model_validate(item.deck)
    deck.card_count = item.card_count
    return deck


@router.get("", response_model=DeckListResponse)
def list_decks(
    current_user: User = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
) -> DeckListResponse:
    """Return decks with their card counts."""

    decks = FlashcardService(db).list_decks(current_user.id)
    return DeckListResponse(decks=[_deck_read(item) for item in decks])


@router.post("", response_model=DeckResponse, status_code=status.HTTP_201_CREATED)
def create_deck(
    payload: DeckCreate,
    current_user: User = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
) -> DeckResponse:
    created = FlashcardService(db).create_deck(current_user.id, payload)
    return DeckResponse(deck=_deck_read(created))


@router.get("/{deck_id}", response_model=DeckDetailResponse)
def read_deck(
    deck_id: uuid.UUID,
    current_user: User = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
) -> DeckDetailResponse:
    """Return a deck with its cards, newest first."""

    try:
        deck = FlashcardService(db).get_owned(current_user.id, deck_id, with_cards=True)
    except NotFoundError as exc:
        raise handle_not_found(exc) from exc
    detail = DeckDetail.model_validate(deck)
    detail.card_count = len(detail.cards)
    return DeckDetailResponse(deck=detail)


@router.post("/{deck_id}", response_model=CardResponse, status_code=status.HTTP_201_CREATED)
def add_card(
    deck_id: uuid.UUID,
    payload: CardCreate,
    current_user: User = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
) -> CardResponse:
    try:
        card = FlashcardService(db).add_card(current_user.id, deck_id, payload)
    except NotFoundError as exc:
        raise handle_not_found(exc) from exc
    return CardResponse(card=card)


@router.delete("/{deck_id}", response_model=MessageResponse)
def delete_deck(
    deck_id: uuid.UUID,
    current_user: User = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
) -> MessageResponse:
    try:
        FlashcardService(db).delete_deck(current_user.id, deck_id)
    except NotFoundError as exc:
        raise handle_not_found(exc) from exc
    return MessageResponse(message="Deck deleted successfully")
