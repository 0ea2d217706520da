"""Pydantic schemas package."""

from app.schemas.auth import Token, TokenPayload
from app.schemas.common import MessageResponse
from app.schemas.flashcard import (
    CardCreate,
    CardRead,
    CardResponse,
    DeckCreate,
    DeckDetail,
    DeckDetailResponse,
    DeckListResponse,
    DeckRead,
    DeckResponse,
)
from app.schemas.goal import (
    GoalCreate,
    GoalListResponse,
    GoalRead,
    GoalResponse,
    GoalUpdate,
)
from app.schemas.material import (
    MaterialCreate,
    MaterialListResponse,
    MaterialRead,
    MaterialResponse,
)
from app.schemas.note import NoteCreate, NoteListResponse, NoteRead, NoteResponse
from app.schemas.stats import DashboardStats, DashboardStatsResponse
from app.schemas.study_session import (
    StudySessionCreate,
    StudySessionListResponse,
    StudySessionRead,
    StudySessionResponse,
)
from app.schemas.upload import UploadResponse
from app.schemas.user import (
    CurrentUserResponse,
    PreferencesRead,
    UserCreate,
    UserLogin,
    UserRead,
)

__all__ = [
    "Token",
    "TokenPayload",
    "MessageResponse",
    "CardCreate",
    "CardRead",
    "CardResponse",
    "DeckCreate",
    "DeckDetail",
    "DeckDetailResponse",
    "DeckListResponse",
    "DeckRead",
    "DeckResponse",
    "GoalCreate",
    "GoalListResponse",
    "GoalRead",
    "GoalResponse",
    "GoalUpdate",
    "MaterialCreate",
    "MaterialListResponse",
    "MaterialRead",
    "MaterialResponse",
    "NoteCreate",
    "NoteListResponse",
    "NoteRead",
    "NoteResponse",
    "DashboardStats",
    "DashboardStatsResponse",
    "StudySessionCreate",
    "StudySessionListResponse",
    "StudySessionRead",
    "StudySessionResponse",
    "UploadResponse",
    "CurrentUserResponse",
    "PreferencesRead",
    "UserCreate",
    "UserLogin",
    "UserRead",
]
