"""API router for version 1."""
from fastapi import APIRouter

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


api_router = APIRouter()
api_router.include_router(auth.router)
api_router.include_router(dashboard.router)
api_router.include_router(materials.router)
api_router.include_router(notes.router)
api_router.include_router(flashcards.router)
api_router.include_router(goals.router)
api_router.include_router(sessions.router)
api_router.include_router(files.router)
