"""Service layer for goals and goal progress."""
from __future__ import annotations

import uuid

from loguru import logger
from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session, selectinload

from app.db.models.goal import Goal, GoalMaterial, GoalProgress
from app.db.models.study_session import StudySession
from app.schemas.goal import GoalCreate, GoalUpdate
from app.utils.exceptions import NotFoundError

RECENT_PROGRESS_ENTRIES = 5


def progress_increment(goal: Goal, *, duration: int, material_count: int) -> float:
    """Return how far a study session moves ``goal`` forward."""

    if goal.type == "time":
        return duration
    if goal.type == "sessions":
        return 1
    if goal.type == "materials":
        return material_count
    return 0


def record_progress(db: Session, goal: Goal, value: float, notes: str | None = None) -> None:
    """Advance ``goal`` by ``value`` and log it; the caller commits."""

    goal.current = (goal.current or 0) + value
    goal.completed = goal.current >= goal.target
    db.add(GoalProgress(goal_id=goal.id, value=value, notes=notes))


class GoalService:
    def __init__(self, db: Session):
        self.db = db

    def list_goals(self, user_id: uuid.UUID) -> list[Goal]:
        stmt = (
            select(Goal)
            .where(Goal.user_id == user_id)
            .options(selectinload(Goal.progress))
            .order_by(Goal.created_at.desc())
        )
        return list(self.db.scalars(stmt))

    def get_owned(self, user_id: uuid.UUID, goal_id: uuid.UUID) -> Goal:
        goal = self.db.scalar(select(Goal).where(Goal.id == goal_id, Goal.user_id == user_id))
        if not goal:
            raise NotFoundError("Goal not found or access denied")
        return goal

    def create(self, user_id: uuid.UUID, payload: GoalCreate) -> Goal:
        goal = Goal(user_id=user_id, current=0, completed=False, **payload.model_dump())
        self.db.add(goal)
        self.db.commit()
        self.db.refresh(goal)
        return goal

    def update(self, user_id: uuid.UUID, goal_id: uuid.UUID, payload: GoalUpdate) -> Goal:
        """Apply a partial update; completion follows progress unless set explicitly."""

        goal = self.get_owned(user_id, goal_id)
        changes = payload.model_dump(exclude_unset=True)
        for field, value in changes.items():
            setattr(goal, field, value)
        if "completed" not in changes and {"current", "target"} & changes.keys():
            goal.completed = goal.current >= goal.target

        try:
            self.db.add(goal)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(goal)
        return goal

    def delete(self, user_id: uuid.UUID, goal_id: uuid.UUID) -> None:
        goal = self.get_owned(user_id, goal_id)
        try:
            self.db.execute(delete(GoalProgress).where(GoalProgress.goal_id == goal.id))
            self.db.execute(delete(GoalMaterial).where(GoalMaterial.goal_id == goal.id))
            self.db.execute(
                update(StudySession).where(StudySession.goal_id == goal.id).values(goal_id=None)
            )
            self.db.delete(goal)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        logger.info(f"Deleted goal {goal_id} for user {user_id}")
