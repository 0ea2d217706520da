"""Database models package."""
from app.db.models.user import User, UserPreferences
from app.db.models.material import StudyMaterial
from app.db.models.note import Note, NoteMaterialLink
from app.db.models.flashcard import Flashcard, FlashcardDeck
from app.db.models.goal import Goal, GoalMaterial, GoalProgress
from app.db.models.study_session import StudySession, StudySessionMaterial

__all__ = [
    "User",
    "UserPreferences",
    "StudyMaterial",
    "Note",
    "NoteMaterialLink",
    "FlashcardDeck",
    "Flashcard",
    "Goal",
    "GoalProgress",
    "GoalMaterial",
    "StudySession",
    "StudySessionMaterial",
]
