"""Integration tests for the dashboard statistics endpoint and service."""
from __future__ import annotations

import asyncio
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, sessionmaker

from app.api import deps
from app.db.models import Flashcard, FlashcardDeck, Goal, StudyMaterial, StudySession, User
from app.services import stats as stats_module
from app.services.stats import StatsService
from app.utils.exceptions import StatsRetrievalError
from tests.conftest import register_and_login

NOW = datetime(2024, 5, 15, 12, 0, tzinfo=timezone.utc)


def _create_user(db: Session, email: str) -> User:
    user = User(email=email, hashed_password="not-a-real-hash")
    db.add(user)
    db.commit()
    return user


def _add_session(db: Session, user: User, minutes: int, started_at: datetime, completed: bool = True):
    db.add(
        StudySession(
            user_id=user.id,
            type="pomodoro",
            duration=minutes,
            completed=completed,
            started_at=started_at,
            ended_at=started_at + timedelta(minutes=minutes),
        )
    )


def test_dashboard_stats_requires_auth(client: TestClient) -> None:
    response = client.get("/api/dashboard/stats")

    assert response.status_code == 401
    assert response.json()["detail"] == "Unauthorized"


def test_dashboard_stats_for_new_user(client: TestClient, auth_headers: dict[str, str]) -> None:
    response = client.get("/api/dashboard/stats", headers=auth_headers)

    assert response.status_code == 200
    stats = response.json()["stats"]
    assert stats["total_materials"] == 0
    assert stats["total_study_time"] == 0
    assert stats["study_streak"] == 0
    assert stats["average_session_length"] == 0
    assert stats["overall_progress"] == 0
    assert stats["today_study_time_formatted"] == "0h 0m"
    assert stats["week_study_time_formatted"] == "0h 0m"
    assert stats["month_study_time_formatted"] == "0h 0m"


def test_dashboard_stats_end_to_end(client: TestClient, auth_headers: dict[str, str]) -> None:
    client.post(
        "/api/materials", json={"title": "Linear Algebra", "type": "pdf"}, headers=auth_headers
    )
    client.post(
        "/api/notes", json={"title": "Eigenvalues", "content": "Av = lv"}, headers=auth_headers
    )
    client.post(
        "/api/flashcards",
        json={
            "name": "Matrices",
            "cards": [{"front": "det(I)", "back": "1"}, {"front": "rank(0)", "back": "0"}],
        },
        headers=auth_headers,
    )
    goal = client.post(
        "/api/goals",
        json={
            "title": "Read 100 pages",
            "type": "materials",
            "target": 100,
            "unit": "pages",
            "deadline": "2030-01-01T00:00:00Z",
        },
        headers=auth_headers,
    ).json()["goal"]
    client.put(f"/api/goals/{goal['id']}", json={"current": 50}, headers=auth_headers)
    for minutes in (30, 45, 20):
        created = client.post(
            "/api/sessions", json={"type": "custom", "duration": minutes}, headers=auth_headers
        )
        assert created.status_code == 201

    response = client.get("/api/dashboard/stats", headers=auth_headers)

    assert response.status_code == 200
    stats = response.json()["stats"]
    assert stats["total_materials"] == 1
    assert stats["total_notes"] == 1
    assert stats["total_flashcards"] == 2
    assert stats["total_decks"] == 1
    assert stats["total_goals"] == 1
    assert stats["active_goals"] == 1
    assert stats["completed_goals"] == 0
    assert stats["total_study_time"] == 95
    assert stats["week_study_time"] == 95
    assert stats["month_study_time"] == 95
    assert stats["today_study_time"] <= stats["week_study_time"]
    assert stats["total_sessions"] == 3
    assert stats["average_session_length"] == 32
    assert stats["study_streak"] >= 1
    assert stats["overall_progress"] == 50
    assert stats["week_study_time_formatted"] == "1h 35m"


def test_dashboard_stats_are_scoped_to_current_user(client: TestClient) -> None:
    first = register_and_login(client, "first@example.com")
    second = register_and_login(client, "second@example.com")

    client.post("/api/materials", json={"title": "Mine", "type": "url"}, headers=first)
    client.post("/api/sessions", json={"duration": 25}, headers=first)

    first_stats = client.get("/api/dashboard/stats", headers=first).json()["stats"]
    second_stats = client.get("/api/dashboard/stats", headers=second).json()["stats"]

    assert first_stats["total_materials"] == 1
    assert first_stats["total_study_time"] == 25
    assert second_stats["total_materials"] == 0
    assert second_stats["total_study_time"] == 0
    assert second_stats["total_sessions"] == 0


def test_dashboard_stats_read_failure_returns_500(
    client: TestClient, auth_headers: dict[str, str]
) -> None:
    def broken_factory():
        raise OperationalError("SELECT 1", {}, Exception("database is unavailable"))

    client.app.dependency_overrides[deps.get_session_factory] = lambda: broken_factory

    response = client.get("/api/dashboard/stats", headers=auth_headers)

    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to fetch statistics"}


def test_service_computes_with_injected_now(
    db_session: Session, session_factory: sessionmaker
) -> None:
    user = _create_user(db_session, "service@example.com")
    _add_session(db_session, user, 30, NOW - timedelta(hours=1))
    _add_session(db_session, user, 40, NOW - timedelta(days=1))
    _add_session(db_session, user, 50, NOW - timedelta(days=2))
    _add_session(db_session, user, 90, NOW - timedelta(days=10))
    # Unfinished sessions never count.
    _add_session(db_session, user, 500, NOW - timedelta(hours=2), completed=False)

    deck = FlashcardDeck(user_id=user.id, name="Verbs")
    deck.cards = [Flashcard(front="ir", back="to go"), Flashcard(front="ser", back="to be")]
    db_session.add(deck)
    db_session.add(StudyMaterial(user_id=user.id, title="Grammar", type="doc"))
    db_session.add_all(
        [
            Goal(user_id=user.id, title="A", type="time", target=60, current=90, unit="minutes", completed=True),
            Goal(user_id=user.id, title="B", type="time", target=60, current=15, unit="minutes"),
        ]
    )
    db_session.commit()

    service = StatsService(session_factory, tz=timezone.utc)
    stats = asyncio.run(service.compute_stats(user.id, now=NOW))

    assert stats.total_materials == 1
    assert stats.total_flashcards == 2
    assert stats.total_decks == 1
    assert stats.total_sessions == 4
    assert stats.total_study_time == 210
    assert stats.today_study_time == 30
    assert stats.week_study_time == 120
    assert stats.month_study_time == 210
    assert stats.study_streak == 3
    assert stats.average_session_length == 53
    assert stats.completed_goals == 1
    assert stats.active_goals == 1
    # (100 + 25) / 2
    assert stats.overall_progress == 63


def test_service_ignores_other_users(db_session: Session, session_factory: sessionmaker) -> None:
    owner = _create_user(db_session, "owner@example.com")
    other = _create_user(db_session, "other@example.com")
    _add_session(db_session, other, 45, NOW - timedelta(hours=1))
    db_session.add(StudyMaterial(user_id=other.id, title="Not mine", type="url"))
    db_session.commit()

    stats = asyncio.run(
        StatsService(session_factory, tz=timezone.utc).compute_stats(owner.id, now=NOW)
    )

    assert stats.total_sessions == 0
    assert stats.total_materials == 0


def test_service_raises_when_any_read_fails(
    db_session: Session, session_factory: sessionmaker, monkeypatch: pytest.MonkeyPatch
) -> None:
    user = _create_user(db_session, "failing@example.com")

    def failing_goal_read(db: Session, user_id):
        raise OperationalError("SELECT goals", {}, Exception("connection reset"))

    monkeypatch.setattr(stats_module, "_goals", failing_goal_read)

    with pytest.raises(StatsRetrievalError) as exc_info:
        asyncio.run(StatsService(session_factory, tz=timezone.utc).compute_stats(user.id, now=NOW))

    assert exc_info.value.details["user_id"] == str(user.id)
