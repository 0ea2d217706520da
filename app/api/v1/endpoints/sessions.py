"""Study session endpoints."""
from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api import deps
from app.db.models.user import User
from app.schemas import (
    MessageResponse,
    StudySessionCreate,
    StudySessionListResponse,
    StudySessionResponse,
)
from app.services.study_sessions import StudySessionService
from app.utils.exceptions import NotFoundError, handle_not_found

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.get("", response_model=StudySessionListResponse)
def list_sessions(
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    current_user: User = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
) -> StudySessionListResponse:
    """Return a page of sessions, most recent first."""

    sessions, total = StudySessionService(db).list_sessions(
        current_user.id, limit=limit, offset=offset
    )
    return StudySessionListResponse(
        sessions=sessions,
        total_sessions=total,
        has_more=offset + len(sessions) < total,
    )


@router.post("", response_model=StudySessionResponse, status_code=status.HTTP_201_CREATED)
def create_session(
    payload: StudySessionCreate,
    current_user: User = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
) -> StudySessionResponse:
    """Log a finished session and advance the linked goal."""

    try:
        session_obj = StudySessionService(db).create(current_user.id, payload)
    except NotFoundError as exc:
        raise handle_not_found(exc) from exc
    return StudySessionResponse(session=session_obj)


@router.delete("/{session_id}", response_model=MessageResponse)
def delete_session(
    session_id: uuid.UUID,
    current_user: User = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
) -> MessageResponse:
    try:
        StudySessionService(db).delete(current_user.id, session_id)
    except NotFoundError as exc:
        raise handle_not_found(exc) from exc
    return MessageResponse(message="Session deleted successfully")
