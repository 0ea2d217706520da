"""Goal endpoints."""
from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api import deps
from app.db.models.user import User
from app.schemas import (
    GoalCreate,
    GoalListResponse,
    GoalRead,
    GoalResponse,
    GoalUpdate,
    MessageResponse,
)
from app.services.goals import RECENT_PROGRESS_ENTRIES, GoalService
from app.utils.exceptions import NotFoundError, handle_not_found

router = APIRouter(prefix="/goals", tags=["goals"])


@router.get("", response_model=GoalListResponse)
def list_goals(
    current_user: User = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
) -> GoalListResponse:
    """Return goals, newest first, each with its latest progress entries."""

    goals = []
    for goal in GoalService(db).list_goals(current_user.id):
        read = GoalRead.model_validate(goal)
        read.progress = read.progress[:RECENT_PROGRESS_ENTRIES]
        goals.append(read)
    return GoalListResponse(goals=goals)


@router.post("", response_model=GoalResponse, status_code=status.HTTP_201_CREATED)
def create_goal(
    payload: GoalCreate,
    current_user: User = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
) -> GoalResponse:
    return GoalResponse(goal=GoalService(db).create(current_user.id, payload))


@router.put("/{goal_id}", response_model=GoalResponse)
def update_goal(
    goal_id: uuid.UUID,
    payload: GoalUpdate,
    current_user: User = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
) -> GoalResponse:
    try:
        goal = GoalService(db).update(current_user.id, goal_id, payload)
    except NotFoundError as exc:
        raise handle_not_found(exc) from exc
    return GoalResponse(goal=goal)


@router.delete("/{goal_id}", response_model=MessageResponse)
def delete_goal(
    goal_id: uuid.UUID,
    current_user: User = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
) -> MessageResponse:
    """Delete a goal; sessions that referenced it are kept without a goal."""

    try:
        GoalService(db).delete(current_user.id, goal_id)
    except NotFoundError as exc:
        raise handle_not_found(exc) from exc
    return MessageResponse(message="Goal deleted successfully")
