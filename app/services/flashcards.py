"""Service layer for flashcard decks and cards."""
from __future__ import annotations

import uuid
from dataclasses import dataclass

from loguru import logger
from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session, selectinload

from app.db.models.flashcard import Flashcard, FlashcardDeck
from app.schemas.flashcard import CardCreate, DeckCreate
from app.utils.exceptions import NotFoundError


@dataclass(slots=True)
class DeckWithCount:
    deck: FlashcardDeck
    card_count: int


class FlashcardService:
    """Deck and card operations scoped to the owning user."""

    def __init__(self, db: Session):
        self.db = db

    def list_decks(self, user_id: uuid.UUID) -> list[DeckWithCount]:
        card_count = (
            select(func.count(Flashcard.id))
            .where(Flashcard.deck_id == FlashcardDeck.id)
            .correlate(FlashcardDeck)
            .scalar_subquery()
        )
        stmt = (
            select(FlashcardDeck, card_count)
            .where(FlashcardDeck.user_id == user_id)
            .order_by(FlashcardDeck.created_at.desc())
        )
        return [DeckWithCount(deck=deck, card_count=int(count or 0)) for deck, count in self.db.execute(stmt)]

    def get_owned(self, user_id: uuid.UUID, deck_id: uuid.UUID, *, with_cards: bool = False) -> FlashcardDeck:
        stmt = select(FlashcardDeck).where(
            FlashcardDeck.id == deck_id, FlashcardDeck.user_id == user_id
        )
        if with_cards:
            stmt = stmt.options(selectinload(FlashcardDeck.cards))
        deck = self.db.scalar(stmt)
        if not deck:
            raise NotFoundError("Not found")
        return deck

    def create_deck(self, user_id: uuid.UUID, payload: DeckCreate) -> DeckWithCount:
        deck = FlashcardDeck(user_id=user_id, name=payload.name, description=payload.description)
        for card in payload.cards or []:
            deck.cards.append(Flashcard(front=card.front, back=card.back, hint=card.hint))
        self.db.add(deck)
        self.db.commit()
        self.db.refresh(deck)
        return DeckWithCount(deck=deck, card_count=len(payload.cards or []))

    def add_card(self, user_id: uuid.UUID, deck_id: uuid.UUID, payload: CardCreate) -> Flashcard:
        deck = self.get_owned(user_id, deck_id)
        card = Flashcard(deck_id=deck.id, front=payload.front, back=payload.back, hint=payload.hint)
        self.db.add(card)
        self.db.commit()
        self.db.refresh(card)
        return card

    def delete_deck(self, user_id: uuid.UUID, deck_id: uuid.UUID) -> None:
        deck = self.get_owned(user_id, deck_id)
        try:
            self.db.execute(delete(Flashcard).where(Flashcard.deck_id == deck.id))
            self.db.delete(deck)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        logger.info(f"Deleted deck {deck_id} for user {user_id}")
