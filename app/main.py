"""FastAPI application factory."""
from __future__ import annotations

from typing import List

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from app.api.v1 import api_router
from app.config import settings
from app.utils.exceptions import DatabaseError, handle_database_error


tags_metadata: List[dict[str, str]] = [
    {"name": "auth", "description": "Register, sign in and inspect the current user."},
    {"name": "dashboard", "description": "Aggregated study statistics."},
    {"name": "materials", "description": "Documents, links and media to study from."},
    {"name": "notes", "description": "Free-form study notes."},
    {"name": "flashcards", "description": "Flashcard decks and cards."},
    {"name": "goals", "description": "Numeric study goals and their progress."},
    {"name": "sessions", "description": "Timed study sessions."},
    {"name": "files", "description": "Upload and download study files."},
]


def create_app() -> FastAPI:
    """Create and configure the FastAPI application instance."""

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Personal study management: materials, notes, flashcards, goals and sessions.",
        version="0.1.0",
        openapi_tags=tags_metadata,
        docs_url=f"{settings.API_PREFIX}/docs",
        redoc_url=f"{settings.API_PREFIX}/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": jsonable_encoder(exc.errors()), "message": "Validation failed"},
        )

    @app.exception_handler(DatabaseError)
    async def database_exception_handler(request: Request, exc: DatabaseError) -> JSONResponse:
        logger.error(f"Unhandled database error on {request.url.path}")
        http_exc = handle_database_error(exc)
        return JSONResponse(status_code=http_exc.status_code, content={"detail": http_exc.detail})

    app.include_router(api_router, prefix=settings.API_PREFIX)
    return app


app = create_app()
