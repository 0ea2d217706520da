"""Note endpoints."""
from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api import deps
from app.db.models.user import User
from app.schemas import NoteCreate, NoteListResponse, NoteResponse
from app.services.notes import NoteService
from app.utils.exceptions import NotFoundError, handle_not_found

router = APIRouter(prefix="/notes", tags=["notes"])


@router.get("", response_model=NoteListResponse)
def list_notes(
    current_user: User = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
) -> NoteListResponse:
    return NoteListResponse(notes=NoteService(db).list_notes(current_user.id))


@router.post("", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
def create_note(
    payload: NoteCreate,
    current_user: User = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
) -> NoteResponse:
    try:
        note = NoteService(db).create(current_user.id, payload)
    except NotFoundError as exc:
        raise handle_not_found(exc) from exc
    return NoteResponse(note=note)


@router.get("/{note_id}", response_model=NoteResponse)
def read_note(
    note_id: uuid.UUID,
    current_user: User = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
) -> NoteResponse:
    try:
        note = NoteService(db).get_owned(current_user.id, note_id)
    except NotFoundError as exc:
        raise handle_not_found(exc) from exc
    return NoteResponse(note=note)
