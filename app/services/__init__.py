"""Service layer package."""

from app.services.auth import AuthService
from app.services.flashcards import FlashcardService
from app.services.goals import GoalService
from app.services.materials import MaterialService
from app.services.notes import NoteService
from app.services.stats import StatsService
from app.services.study_sessions import StudySessionService
from app.services.uploads import UploadService

__all__ = [
    "AuthService",
    "FlashcardService",
    "GoalService",
    "MaterialService",
    "NoteService",
    "StatsService",
    "StudySessionService",
    "UploadService",
]
