"""Service layer for logging and browsing study sessions."""
from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone

from loguru import logger
from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from app.db.models.goal import Goal
from app.db.models.material import StudyMaterial
from app.db.models.study_session import StudySession, StudySessionMaterial
from app.schemas.study_session import StudySessionCreate
from app.services.goals import progress_increment, record_progress
from app.utils.exceptions import NotFoundError


def _session_query():
    return select(StudySession).options(
        selectinload(StudySession.goal),
        selectinload(StudySession.material_links).selectinload(StudySessionMaterial.material),
    )


class StudySessionService:
    """Persist finished timer sessions and feed their progress into goals."""

    def __init__(self, db: Session):
        self.db = db

    def list_sessions(
        self, user_id: uuid.UUID, *, limit: int = 20, offset: int = 0
    ) -> tuple[list[StudySession], int]:
        stmt = (
            _session_query()
            .where(StudySession.user_id == user_id)
            .order_by(StudySession.started_at.desc())
            .offset(offset)
            .limit(limit)
        )
        sessions = list(self.db.scalars(stmt))
        total = self.db.scalar(
            select(func.count(StudySession.id)).where(StudySession.user_id == user_id)
        )
        return sessions, int(total or 0)

    def get_owned(self, user_id: uuid.UUID, session_id: uuid.UUID) -> StudySession:
        session_obj = self.db.scalar(
            _session_query().where(StudySession.id == session_id, StudySession.user_id == user_id)
        )
        if not session_obj:
            raise NotFoundError("Session not found or access denied")
        return session_obj

    def create(
        self, user_id: uuid.UUID, payload: StudySessionCreate, *, now: datetime | None = None
    ) -> StudySession:
        """Store a completed session in a single transaction.

        Owned materials are linked to the session. Unless the session is a
        break, the referenced goal advances according to its type and the
        increment is logged as goal progress.
        """

        ended_at = now or datetime.now(timezone.utc)
        session_obj = StudySession(
            user_id=user_id,
            type=payload.type,
            duration=payload.duration,
            planned_duration=payload.planned_duration,
            focus_rating=payload.focus_rating,
            notes=payload.notes,
            tags=payload.tags,
            completed=True,
            started_at=ended_at - timedelta(minutes=payload.duration),
            ended_at=ended_at,
        )

        try:
            goal = None
            if payload.goal_id is not None:
                goal = self.db.scalar(
                    select(Goal).where(Goal.id == payload.goal_id, Goal.user_id == user_id)
                )
                if goal is None:
                    raise NotFoundError("Goal not found or access denied")
                session_obj.goal_id = goal.id

            material_ids = list(dict.fromkeys(payload.material_ids))
            if material_ids:
                owned = set(
                    self.db.scalars(
                        select(StudyMaterial.id).where(
                            StudyMaterial.id.in_(material_ids),
                            StudyMaterial.user_id == user_id,
                        )
                    )
                )
                missing = [str(mid) for mid in material_ids if mid not in owned]
                if missing:
                    raise NotFoundError(
                        "Material not found or access denied", details={"material_ids": missing}
                    )
                for material_id in material_ids:
                    session_obj.material_links.append(StudySessionMaterial(material_id=material_id))

            self.db.add(session_obj)

            if goal is not None and payload.type != "break":
                increment = progress_increment(
                    goal, duration=payload.duration, material_count=len(material_ids)
                )
                if increment > 0:
                    record_progress(
                        self.db,
                        goal,
                        increment,
                        notes=f"Study session: {payload.duration} minutes",
                    )

            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info(f"Logged {payload.duration} minute {payload.type} session for user {user_id}")
        return self.get_owned(user_id, session_obj.id)

    def delete(self, user_id: uuid.UUID, session_id: uuid.UUID) -> None:
        session_obj = self.get_owned(user_id, session_id)
        self.db.delete(session_obj)
        self.db.commit()
