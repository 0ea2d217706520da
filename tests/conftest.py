"""Pytest fixtures for API tests."""

import os
from collections.abc import Generator
from pathlib import Path

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from app.api import deps
from app.db import models  # noqa: F401  # Imported for side effects
from app.db.base import Base
from app.main import create_app
from app.services.uploads import UploadService


@pytest.fixture()
def db_engine(tmp_path: Path):
    # A file database lets the dashboard's concurrent reads each use their own connection.
    engine = create_engine(
        f"sqlite:///{tmp_path / 'study_tracker.db'}",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def session_factory(db_engine) -> sessionmaker:
    return sessionmaker(
        autocommit=False, autoflush=False, bind=db_engine, expire_on_commit=False
    )


@pytest.fixture()
def db_session(session_factory: sessionmaker) -> Generator[Session, None, None]:
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def upload_dir(tmp_path: Path) -> Path:
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture()
def client(session_factory: sessionmaker, upload_dir: Path) -> Generator[TestClient, None, None]:
    app = create_app()

    def override_get_db() -> Generator[Session, None, None]:
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[deps.get_db] = override_get_db
    app.dependency_overrides[deps.get_session_factory] = lambda: session_factory
    app.dependency_overrides[deps.get_upload_service] = lambda: UploadService(
        upload_dir, max_bytes=1024
    )
    with TestClient(app) as test_client:
        yield test_client


def register_and_login(
    client: TestClient, email: str, password: str = "verysecure", name: str | None = None
) -> dict[str, str]:
    """Create an account and return bearer headers for it."""

    payload = {"email": email, "password": password}
    if name:
        payload["name"] = name
    client.post("/api/auth/register", json=payload)
    login_response = client.post("/api/auth/login", json={"email": email, "password": password})
    token = login_response.json()["access_token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def auth_headers(client: TestClient) -> dict[str, str]:
    return register_and_login(client, "learner@example.com", name="Learner One")
