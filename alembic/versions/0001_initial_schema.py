"""Create study tracker tables"""
from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = "0001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None

NOW = sa.text("timezone('utc', now())")


def _timestamps(*, updated: bool = True) -> list[sa.Column]:
    columns = [sa.Column("created_at", sa.DateTime(timezone=True), server_default=NOW, nullable=True)]
    if updated:
        columns.append(
            sa.Column("updated_at", sa.DateTime(timezone=True), server_default=NOW, nullable=True)
        )
    return columns


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True, nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("hashed_password", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.Column("image", sa.String(length=512), nullable=True),
        *_timestamps(),
        sa.Column("is_active", sa.Boolean(), server_default=sa.text("true"), nullable=True),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "user_preferences",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True, nullable=False),
        sa.Column(
            "user_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("theme", sa.String(length=20), server_default=sa.text("'system'"), nullable=False),
        sa.Column("study_goal_minutes", sa.Integer(), server_default=sa.text("60"), nullable=False),
        sa.Column("notifications", sa.Boolean(), server_default=sa.text("true"), nullable=False),
        sa.Column("email_notifications", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        sa.Column("default_view", sa.String(length=20), server_default=sa.text("'grid'"), nullable=False),
        sa.Column("auto_save", sa.Boolean(), server_default=sa.text("true"), nullable=False),
        sa.Column("pomodoro_focus", sa.Integer(), server_default=sa.text("25"), nullable=False),
        sa.Column("pomodoro_break", sa.Integer(), server_default=sa.text("5"), nullable=False),
        sa.Column("pomodoro_long_break", sa.Integer(), server_default=sa.text("15"), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_user_preferences_user_id", "user_preferences", ["user_id"], unique=True)

    op.create_table(
        "study_materials",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True, nullable=False),
        sa.Column(
            "user_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("type", sa.String(length=20), nullable=False),
        sa.Column("url", sa.String(length=2048), nullable=True),
        sa.Column("category", sa.String(length=100), nullable=True),
        sa.Column("tags", postgresql.ARRAY(sa.Text()), nullable=True),
        sa.Column("color", sa.String(length=20), nullable=True),
        sa.Column("folder_id", sa.String(length=64), nullable=True),
        sa.Column("file_path", sa.String(length=512), nullable=True),
        sa.Column("file_name", sa.String(length=255), nullable=True),
        sa.Column("mime_type", sa.String(length=255), nullable=True),
        sa.Column("file_size", sa.BigInteger(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_study_materials_user_id", "study_materials", ["user_id"], unique=False)

    op.create_table(
        "notes",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True, nullable=False),
        sa.Column(
            "user_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("excerpt", sa.String(length=140), nullable=True),
        sa.Column("tags", postgresql.ARRAY(sa.Text()), nullable=True),
        sa.Column("color", sa.String(length=20), nullable=True),
        sa.Column("folder_id", sa.String(length=64), nullable=True),
        sa.Column("is_public", sa.Boolean(), server_default=sa.text("false"), nullable=True),
        sa.Column("is_pinned", sa.Boolean(), server_default=sa.text("false"), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_notes_user_id", "notes", ["user_id"], unique=False)

    op.create_table(
        "note_material_links",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True, nullable=False),
        sa.Column(
            "note_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("notes.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "material_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("study_materials.id", ondelete="CASCADE"),
            nullable=False,
        ),
        *_timestamps(updated=False),
    )
    op.create_index("ix_note_material_links_note_id", "note_material_links", ["note_id"], unique=False)
    op.create_index(
        "ix_note_material_links_material_id", "note_material_links", ["material_id"], unique=False
    )

    op.create_table(
        "flashcard_decks",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True, nullable=False),
        sa.Column(
            "user_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_flashcard_decks_user_id", "flashcard_decks", ["user_id"], unique=False)

    op.create_table(
        "flashcards",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True, nullable=False),
        sa.Column(
            "deck_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("flashcard_decks.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("front", sa.Text(), nullable=False),
        sa.Column("back", sa.Text(), nullable=False),
        sa.Column("hint", sa.Text(), nullable=True),
        *_timestamps(updated=False),
    )
    op.create_index("ix_flashcards_deck_id", "flashcards", ["deck_id"], unique=False)

    op.create_table(
        "goals",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True, nullable=False),
        sa.Column(
            "user_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("type", sa.String(length=20), nullable=False),
        sa.Column("target", sa.Float(), nullable=False),
        sa.Column("current", sa.Float(), server_default=sa.text("0"), nullable=False),
        sa.Column("unit", sa.String(length=50), nullable=False),
        sa.Column("deadline", sa.DateTime(timezone=True), nullable=True),
        sa.Column("priority", sa.String(length=10), server_default=sa.text("'medium'"), nullable=False),
        sa.Column("completed", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_goals_user_id", "goals", ["user_id"], unique=False)

    op.create_table(
        "goal_progress",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True, nullable=False),
        sa.Column(
            "goal_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("goals.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("value", sa.Float(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(updated=False),
    )
    op.create_index("ix_goal_progress_goal_id", "goal_progress", ["goal_id"], unique=False)

    op.create_table(
        "goal_materials",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True, nullable=False),
        sa.Column(
            "goal_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("goals.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "material_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("study_materials.id", ondelete="CASCADE"),
            nullable=False,
        ),
    )
    op.create_index("ix_goal_materials_goal_id", "goal_materials", ["goal_id"], unique=False)
    op.create_index("ix_goal_materials_material_id", "goal_materials", ["material_id"], unique=False)

    op.create_table(
        "study_sessions",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True, nullable=False),
        sa.Column(
            "user_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "goal_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("goals.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("type", sa.String(length=20), server_default=sa.text("'pomodoro'"), nullable=False),
        sa.Column("duration", sa.Integer(), nullable=False),
        sa.Column("planned_duration", sa.Integer(), nullable=True),
        sa.Column("focus_rating", sa.Integer(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("tags", postgresql.ARRAY(sa.Text()), nullable=True),
        sa.Column("completed", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        sa.Column("started_at", sa.DateTime(timezone=True), server_default=NOW, nullable=True),
        sa.Column("ended_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(updated=False),
    )
    op.create_index("ix_study_sessions_user_id", "study_sessions", ["user_id"], unique=False)
    op.create_index("ix_study_sessions_goal_id", "study_sessions", ["goal_id"], unique=False)
    op.create_index("ix_study_sessions_started_at", "study_sessions", ["started_at"], unique=False)

    op.create_table(
        "study_session_materials",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True, nullable=False),
        sa.Column(
            "session_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("study_sessions.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "material_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("study_materials.id", ondelete="CASCADE"),
            nullable=False,
        ),
    )
    op.create_index(
        "ix_study_session_materials_session_id", "study_session_materials", ["session_id"], unique=False
    )
    op.create_index(
        "ix_study_session_materials_material_id", "study_session_materials", ["material_id"], unique=False
    )


def downgrade() -> None:
    op.drop_table("study_session_materials")
    op.drop_table("study_sessions")
    op.drop_table("goal_materials")
    op.drop_table("goal_progress")
    op.drop_table("goals")
    op.drop_table("flashcards")
    op.drop_table("flashcard_decks")
    op.drop_table("note_material_links")
    op.drop_table("notes")
    op.drop_table("study_materials")
    op.drop_index("ix_user_preferences_user_id", table_name="user_preferences")
    op.drop_table("user_preferences")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
