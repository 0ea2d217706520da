"""Service layer for notes."""
from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.db.models.material import StudyMaterial
from app.db.models.note import Note, NoteMaterialLink
from app.schemas.note import NoteCreate
from app.utils.exceptions import NotFoundError

EXCERPT_LENGTH = 140


class NoteService:
    def __init__(self, db: Session):
        self.db = db

    def list_notes(self, user_id: uuid.UUID) -> list[Note]:
        stmt = select(Note).where(Note.user_id == user_id).order_by(Note.created_at.desc())
        return list(self.db.scalars(stmt))

    def get_owned(self, user_id: uuid.UUID, note_id: uuid.UUID) -> Note:
        note = self.db.scalar(select(Note).where(Note.id == note_id, Note.user_id == user_id))
        if not note:
            raise NotFoundError("Not found")
        return note

    def create(self, user_id: uuid.UUID, payload: NoteCreate) -> Note:
        """Store a note; an owned ``material_id`` is recorded as a link."""

        note = Note(
            user_id=user_id,
            title=payload.title,
            content=payload.content,
            excerpt=payload.content[:EXCERPT_LENGTH],
            tags=payload.tags or [],
            color=payload.color,
            folder_id=payload.folder_id,
            is_public=bool(payload.is_public),
            is_pinned=bool(payload.is_pinned),
        )
        if payload.material_id is not None:
            material = self.db.scalar(
                select(StudyMaterial).where(
                    StudyMaterial.id == payload.material_id,
                    StudyMaterial.user_id == user_id,
                )
            )
            if material is None:
                raise NotFoundError("Material not found or access denied")
            note.material_links.append(NoteMaterialLink(material_id=material.id))

        self.db.add(note)
        self.db.commit()
        self.db.refresh(note)
        return note
