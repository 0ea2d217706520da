"""Dashboard statistics for a single learner.

The service fans out the independent storage reads (content counts, completed
sessions, goals) on worker threads, joins them, and then hands the fetched
records to :func:`aggregate_stats`, which is pure and takes the current time
as an argument. Results are recomputed on every call.
"""

from __future__ import annotations

import asyncio
import math
import uuid
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Callable, Iterable, TypeVar
from zoneinfo import ZoneInfo

from loguru import logger
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import settings
from app.db.models.flashcard import Flashcard, FlashcardDeck
from app.db.models.goal import Goal
from app.db.models.material import StudyMaterial
from app.db.models.note import Note
from app.db.models.study_session import StudySession
from app.schemas.stats import MAX_STREAK_DAYS, DashboardStats
from app.utils.exceptions import StatsRetrievalError

T = TypeVar("T")


@dataclass(slots=True, frozen=True)
class SessionRecord:
    duration_minutes: int
    started_at: datetime | None


@dataclass(slots=True, frozen=True)
class GoalRecord:
    target: float
    current: float
    completed: bool


@dataclass(slots=True)
class StatsSnapshot:
    """Everything read from storage for one statistics computation."""

    total_materials: int = 0
    total_notes: int = 0
    total_flashcards: int = 0
    total_decks: int = 0
    sessions: list[SessionRecord] = field(default_factory=list)
    goals: list[GoalRecord] = field(default_factory=list)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (``2.5 -> 3``)."""

    return int(math.floor(value + 0.5))


def format_minutes(minutes: int) -> str:
    """Render a minute count as ``"<hours>h <minutes>m"``."""

    return f"{minutes // 60}h {minutes % 60}m"


def _localize(value: datetime, tz: tzinfo) -> datetime:
    # SQLite hands back naive datetimes; they are stored as UTC.
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(tz)


def calculate_study_streak(study_days: set[date], today: date) -> int:
    """Count consecutive study days ending today.

    Today itself may be missing without breaking the streak, so an unfinished
    day does not reset yesterday's run.
    """

    streak = 0
    check_day = today
    is_first_day = True
    while True:
        if check_day in study_days:
            streak += 1
        elif not is_first_day:
            break

        check_day -= timedelta(days=1)
        is_first_day = False
        if streak > MAX_STREAK_DAYS:
            break
    return streak


def goal_progress_percent(goal: GoalRecord) -> float:
    """Return a goal's completion percentage capped at 100."""

    if goal.target <= 0:
        return 0.0
    return min(goal.current / goal.target * 100, 100.0)


def calculate_overall_progress(goals: Iterable[GoalRecord]) -> int:
    goals = list(goals)
    if not goals:
        return 0
    total = sum(goal_progress_percent(goal) for goal in goals)
    return round_half_up(total / len(goals))


def aggregate_stats(snapshot: StatsSnapshot, *, now: datetime, tz: tzinfo) -> DashboardStats:
    """Derive dashboard metrics from fetched records relative to ``now``."""

    local_now = _localize(now, tz)
    today = local_now.date()
    today_start = datetime.combine(today, time.min, tzinfo=tz)
    week_start = local_now - timedelta(days=7)
    month_start = local_now - timedelta(days=30)

    total_time = today_time = week_time = month_time = 0
    study_days: set[date] = set()
    for record in snapshot.sessions:
        minutes = record.duration_minutes
        total_time += minutes
        if record.started_at is None:
            continue
        started = _localize(record.started_at, tz)
        study_days.add(started.date())
        if started >= today_start:
            today_time += minutes
        if started >= week_start:
            week_time += minutes
        if started >= month_start:
            month_time += minutes

    session_count = len(snapshot.sessions)
    average_length = round_half_up(total_time / session_count) if session_count else 0

    completed_goals = sum(1 for goal in snapshot.goals if goal.completed)
    active_goals = len(snapshot.goals) - completed_goals

    return DashboardStats(
        total_materials=snapshot.total_materials,
        total_notes=snapshot.total_notes,
        total_flashcards=snapshot.total_flashcards,
        total_decks=snapshot.total_decks,
        total_goals=len(snapshot.goals),
        active_goals=active_goals,
        completed_goals=completed_goals,
        total_study_time=total_time,
        today_study_time=today_time,
        week_study_time=week_time,
        month_study_time=month_time,
        study_streak=calculate_study_streak(study_days, today),
        average_session_length=average_length,
        total_sessions=session_count,
        overall_progress=calculate_overall_progress(snapshot.goals),
        today_study_time_formatted=format_minutes(today_time),
        week_study_time_formatted=format_minutes(week_time),
        month_study_time_formatted=format_minutes(month_time),
    )


# ----------------------------------------------------------------------
# Storage reads
# ----------------------------------------------------------------------
def _count_materials(db: Session, user_id: uuid.UUID) -> int:
    stmt = select(func.count(StudyMaterial.id)).where(StudyMaterial.user_id == user_id)
    return int(db.scalar(stmt) or 0)


def _count_notes(db: Session, user_id: uuid.UUID) -> int:
    stmt = select(func.count(Note.id)).where(Note.user_id == user_id)
    return int(db.scalar(stmt) or 0)


def _count_flashcards(db: Session, user_id: uuid.UUID) -> int:
    stmt = (
        select(func.count(Flashcard.id))
        .join(FlashcardDeck, Flashcard.deck_id == FlashcardDeck.id)
        .where(FlashcardDeck.user_id == user_id)
    )
    return int(db.scalar(stmt) or 0)


def _count_decks(db: Session, user_id: uuid.UUID) -> int:
    stmt = select(func.count(FlashcardDeck.id)).where(FlashcardDeck.user_id == user_id)
    return int(db.scalar(stmt) or 0)


def _completed_sessions(db: Session, user_id: uuid.UUID) -> list[SessionRecord]:
    stmt = select(StudySession.duration, StudySession.started_at).where(
        StudySession.user_id == user_id,
        StudySession.completed.is_(True),
    )
    return [
        SessionRecord(duration_minutes=int(duration or 0), started_at=started_at)
        for duration, started_at in db.execute(stmt)
    ]


def _goals(db: Session, user_id: uuid.UUID) -> list[GoalRecord]:
    stmt = select(Goal.target, Goal.current, Goal.completed).where(Goal.user_id == user_id)
    return [
        GoalRecord(
            target=float(target or 0),
            current=float(current or 0),
            completed=bool(completed),
        )
        for target, current, completed in db.execute(stmt)
    ]


class StatsService:
    """Compute dashboard statistics from independent concurrent reads.

    Each read opens its own session from ``session_factory`` so the reads can
    run on separate worker threads.
    """

    def __init__(
        self,
        session_factory: Callable[[], Session],
        *,
        tz: tzinfo | None = None,
    ) -> None:
        self.session_factory = session_factory
        self.tz = tz or ZoneInfo(settings.STATS_TIMEZONE)

    async def compute_stats(
        self, user_id: uuid.UUID, *, now: datetime | None = None
    ) -> DashboardStats:
        """Return fresh statistics for ``user_id``.

        Raises ``StatsRetrievalError`` if any read fails; nothing partial is
        returned.
        """

        now = now or datetime.now(timezone.utc)
        snapshot = await self.load_snapshot(user_id)
        stats = aggregate_stats(snapshot, now=now, tz=self.tz)
        logger.debug(
            "Computed dashboard stats for {user_id}: {sessions} sessions, streak {streak}",
            user_id=user_id,
            sessions=stats.total_sessions,
            streak=stats.study_streak,
        )
        return stats

    async def load_snapshot(self, user_id: uuid.UUID) -> StatsSnapshot:
        try:
            (
                total_materials,
                total_notes,
                total_flashcards,
                total_decks,
                sessions,
                goals,
            ) = await asyncio.gather(
                self._read(_count_materials, user_id),
                self._read(_count_notes, user_id),
                self._read(_count_flashcards, user_id),
                self._read(_count_decks, user_id),
                self._read(_completed_sessions, user_id),
                self._read(_goals, user_id),
            )
        except SQLAlchemyError as exc:
            raise StatsRetrievalError(
                "Failed to read dashboard statistics",
                details={"user_id": str(user_id), "error": str(exc)},
            ) from exc

        return StatsSnapshot(
            total_materials=total_materials,
            total_notes=total_notes,
            total_flashcards=total_flashcards,
            total_decks=total_decks,
            sessions=sessions,
            goals=goals,
        )

    async def _read(self, reader: Callable[[Session, uuid.UUID], T], user_id: uuid.UUID) -> T:
        def _blocking_call() -> T:
            with self.session_factory() as db:
                return reader(db, user_id)

        return await asyncio.to_thread(_blocking_call)
