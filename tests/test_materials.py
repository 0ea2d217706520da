"""Tests for study material endpoints."""
from __future__ import annotations

import uuid

from fastapi.testclient import TestClient
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.db.models import NoteMaterialLink, StudySessionMaterial
from tests.conftest import register_and_login


def test_create_and_list_materials(client: TestClient, auth_headers: dict[str, str]) -> None:
    payload = {
        "title": "Organic Chemistry",
        "type": "url",
        "url": "https://example.com/chem",
        "category": "Chemistry",
        "tags": ["exam", "week-3"],
    }

    created = client.post("/api/materials", json=payload, headers=auth_headers)

    assert created.status_code == 201
    material = created.json()["material"]
    assert material["title"] == "Organic Chemistry"
    assert material["url"] == "https://example.com/chem"
    assert material["tags"] == ["exam", "week-3"]

    listed = client.get("/api/materials", headers=auth_headers)
    assert listed.status_code == 200
    assert [item["id"] for item in listed.json()["materials"]] == [material["id"]]


def test_create_material_with_uploaded_file(client: TestClient, auth_headers: dict[str, str]) -> None:
    payload = {
        "title": "Lecture slides",
        "type": "pdf",
        "file_path": "/uploads/slides.pdf",
        "file_name": "slides.pdf",
        "mime_type": "application/pdf",
        "file_size": 2048,
    }

    response = client.post("/api/materials", json=payload, headers=auth_headers)

    assert response.status_code == 201
    assert response.json()["material"]["file_size"] == 2048


def test_create_material_rejects_unknown_type(client: TestClient, auth_headers: dict[str, str]) -> None:
    response = client.post(
        "/api/materials", json={"title": "Mystery", "type": "hologram"}, headers=auth_headers
    )

    assert response.status_code == 422


def test_materials_are_private(client: TestClient) -> None:
    owner = register_and_login(client, "owner@example.com")
    stranger = register_and_login(client, "stranger@example.com")
    material = client.post(
        "/api/materials", json={"title": "Diary", "type": "doc"}, headers=owner
    ).json()["material"]

    assert client.get("/api/materials", headers=stranger).json()["materials"] == []
    response = client.delete(f"/api/materials/{material['id']}", headers=stranger)
    assert response.status_code == 404


def test_delete_material_removes_links(
    client: TestClient, auth_headers: dict[str, str], db_session: Session
) -> None:
    material = client.post(
        "/api/materials", json={"title": "Physics", "type": "video"}, headers=auth_headers
    ).json()["material"]
    client.post(
        "/api/notes",
        json={"title": "Kinematics", "content": "v = u + at", "material_id": material["id"]},
        headers=auth_headers,
    )
    client.post(
        "/api/sessions",
        json={"duration": 25, "material_ids": [material["id"]]},
        headers=auth_headers,
    )

    response = client.delete(f"/api/materials/{material['id']}", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["message"] == "Material deleted successfully"
    assert client.get("/api/materials", headers=auth_headers).json()["materials"] == []
    material_id = uuid.UUID(material["id"])
    assert db_session.scalar(
        select(func.count(NoteMaterialLink.id)).where(NoteMaterialLink.material_id == material_id)
    ) == 0
    assert db_session.scalar(
        select(func.count(StudySessionMaterial.id)).where(
            StudySessionMaterial.material_id == material_id
        )
    ) == 0
    # The note and the session themselves survive.
    assert len(client.get("/api/notes", headers=auth_headers).json()["notes"]) == 1
    assert client.get("/api/sessions", headers=auth_headers).json()["total_sessions"] == 1


def test_delete_missing_material(client: TestClient, auth_headers: dict[str, str]) -> None:
    response = client.delete(f"/api/materials/{uuid.uuid4()}", headers=auth_headers)

    assert response.status_code == 404
