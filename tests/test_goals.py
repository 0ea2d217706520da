"""Tests for goal endpoints."""
from __future__ import annotations

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.db.models import Goal, GoalProgress, StudySession, User
from app.schemas.goal import GoalUpdate
from app.services.goals import RECENT_PROGRESS_ENTRIES, GoalService
from tests.conftest import register_and_login


def _create_goal(client: TestClient, headers: dict[str, str], **overrides) -> dict:
    payload = {
        "title": "Study 10 hours",
        "type": "time",
        "target": 600,
        "unit": "minutes",
        "deadline": "2030-06-01T00:00:00Z",
        "priority": "high",
    }
    payload.update(overrides)
    response = client.post("/api/goals", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["goal"]


def test_create_goal_starts_at_zero(client: TestClient, auth_headers: dict[str, str]) -> None:
    goal = _create_goal(client, auth_headers)

    assert goal["current"] == 0
    assert goal["completed"] is False
    assert goal["priority"] == "high"
    assert goal["progress"] == []


def test_create_goal_validates_payload(client: TestClient, auth_headers: dict[str, str]) -> None:
    base = {"title": "Bad", "type": "time", "unit": "minutes", "deadline": "2030-06-01T00:00:00Z"}

    zero_target = client.post("/api/goals", json={**base, "target": 0}, headers=auth_headers)
    bad_type = client.post(
        "/api/goals", json={**base, "target": 5, "type": "vibes"}, headers=auth_headers
    )

    assert zero_target.status_code == 422
    assert bad_type.status_code == 422


def test_update_goal_recomputes_completion(client: TestClient, auth_headers: dict[str, str]) -> None:
    goal = _create_goal(client, auth_headers, target=10, unit="sessions", type="sessions")

    reached = client.put(f"/api/goals/{goal['id']}", json={"current": 10}, headers=auth_headers)
    raised_target = client.put(
        f"/api/goals/{goal['id']}", json={"target": 20}, headers=auth_headers
    )

    assert reached.status_code == 200
    assert reached.json()["goal"]["completed"] is True
    assert raised_target.json()["goal"]["completed"] is False


def test_update_goal_explicit_completion_wins(client: TestClient, auth_headers: dict[str, str]) -> None:
    goal = _create_goal(client, auth_headers)

    response = client.put(
        f"/api/goals/{goal['id']}",
        json={"current": 5, "completed": True, "title": "Done early"},
        headers=auth_headers,
    )

    body = response.json()["goal"]
    assert body["completed"] is True
    assert body["title"] == "Done early"
    assert body["current"] == 5


def test_update_goal_rejects_empty_payload(client: TestClient, auth_headers: dict[str, str]) -> None:
    goal = _create_goal(client, auth_headers)

    response = client.put(f"/api/goals/{goal['id']}", json={}, headers=auth_headers)

    assert response.status_code == 422


@pytest.mark.parametrize("field", ["target", "title", "current", "deadline", "completed"])
def test_update_goal_rejects_null_for_required_fields(
    client: TestClient, auth_headers: dict[str, str], field: str
) -> None:
    goal = _create_goal(client, auth_headers)

    response = client.put(f"/api/goals/{goal['id']}", json={field: None}, headers=auth_headers)

    assert response.status_code == 422
    assert response.json()["message"] == "Validation failed"
    stored = client.get("/api/goals", headers=auth_headers).json()["goals"][0]
    assert stored["title"] == "Study 10 hours"
    assert stored["target"] == 600


def test_update_goal_allows_clearing_description(
    client: TestClient, auth_headers: dict[str, str]
) -> None:
    goal = _create_goal(client, auth_headers, description="Read two chapters a week")

    response = client.put(
        f"/api/goals/{goal['id']}", json={"description": None}, headers=auth_headers
    )

    assert response.status_code == 200
    assert response.json()["goal"]["description"] is None


def test_list_goals_includes_latest_progress(client: TestClient, auth_headers: dict[str, str]) -> None:
    goal = _create_goal(client, auth_headers, type="sessions", target=50, unit="sessions")
    for _ in range(RECENT_PROGRESS_ENTRIES + 2):
        client.post(
            "/api/sessions", json={"duration": 25, "goal_id": goal["id"]}, headers=auth_headers
        )

    response = client.get("/api/goals", headers=auth_headers)

    assert response.status_code == 200
    listed = response.json()["goals"][0]
    assert listed["current"] == RECENT_PROGRESS_ENTRIES + 2
    assert len(listed["progress"]) == RECENT_PROGRESS_ENTRIES
    assert all(entry["value"] == 1 for entry in listed["progress"])


def test_delete_goal_detaches_sessions(
    client: TestClient, auth_headers: dict[str, str], db_session: Session
) -> None:
    goal = _create_goal(client, auth_headers)
    session = client.post(
        "/api/sessions", json={"duration": 30, "goal_id": goal["id"]}, headers=auth_headers
    ).json()["session"]

    response = client.delete(f"/api/goals/{goal['id']}", headers=auth_headers)

    assert response.status_code == 200
    assert client.get("/api/goals", headers=auth_headers).json()["goals"] == []
    assert db_session.scalars(select(GoalProgress)).all() == []
    stored = db_session.scalars(select(StudySession)).one()
    assert str(stored.id) == session["id"]
    assert stored.goal_id is None


def test_goals_of_other_users_are_hidden(client: TestClient) -> None:
    owner = register_and_login(client, "owner@example.com")
    stranger = register_and_login(client, "stranger@example.com")
    goal = _create_goal(client, owner)

    assert client.get("/api/goals", headers=stranger).json()["goals"] == []
    assert (
        client.put(f"/api/goals/{goal['id']}", json={"current": 1}, headers=stranger).status_code
        == 404
    )
    assert client.delete(f"/api/goals/{goal['id']}", headers=stranger).status_code == 404


def test_failed_update_rolls_back_session(db_session: Session) -> None:
    user = User(email="rollback@example.com", hashed_password="not-a-real-hash")
    db_session.add(user)
    db_session.commit()
    goal = Goal(
        user_id=user.id,
        title="Finish the course",
        type="materials",
        target=4,
        unit="materials",
        deadline=datetime(2030, 6, 1, tzinfo=timezone.utc),
    )
    db_session.add(goal)
    db_session.commit()
    service = GoalService(db_session)

    with pytest.raises(IntegrityError):
        service.update(user.id, goal.id, GoalUpdate.model_construct(title=None))

    assert service.get_owned(user.id, goal.id).title == "Finish the course"
