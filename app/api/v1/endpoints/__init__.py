"""API endpoint modules for v1."""

from app.api.v1.endpoints import (
    auth,
    dashboard,
    files,
    flashcards,
    goals,
    materials,
    notes,
    sessions,
)

__all__ = [
    "auth",
    "dashboard",
    "files",
    "flashcards",
    "goals",
    "materials",
    "notes",
    "sessions",
]
