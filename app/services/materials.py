"""Service layer for study materials."""
from __future__ import annotations

import uuid

from loguru import logger
from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from app.db.models.goal import GoalMaterial
from app.db.models.material import StudyMaterial
from app.db.models.note import NoteMaterialLink
from app.db.models.study_session import StudySessionMaterial
from app.schemas.material import MaterialCreate
from app.utils.exceptions import NotFoundError


class MaterialService:
    """CRUD operations over a user's study materials."""

    def __init__(self, db: Session):
        self.db = db

    def list_materials(self, user_id: uuid.UUID) -> list[StudyMaterial]:
        stmt = (
            select(StudyMaterial)
            .where(StudyMaterial.user_id == user_id)
            .order_by(StudyMaterial.created_at.desc())
        )
        return list(self.db.scalars(stmt))

    def get_owned(self, user_id: uuid.UUID, material_id: uuid.UUID) -> StudyMaterial:
        material = self.db.scalar(
            select(StudyMaterial).where(
                StudyMaterial.id == material_id, StudyMaterial.user_id == user_id
            )
        )
        if not material:
            raise NotFoundError("Material not found or access denied")
        return material

    def create(self, user_id: uuid.UUID, payload: MaterialCreate) -> StudyMaterial:
        data = payload.model_dump()
        if data["url"] is not None:
            data["url"] = str(data["url"])
        material = StudyMaterial(user_id=user_id, **data)
        self.db.add(material)
        self.db.commit()
        self.db.refresh(material)
        return material

    def delete(self, user_id: uuid.UUID, material_id: uuid.UUID) -> None:
        """Remove a material together with every link pointing at it."""

        material = self.get_owned(user_id, material_id)
        try:
            self.db.execute(
                delete(NoteMaterialLink).where(NoteMaterialLink.material_id == material.id)
            )
            self.db.execute(
                delete(StudySessionMaterial).where(StudySessionMaterial.material_id == material.id)
            )
            self.db.execute(delete(GoalMaterial).where(GoalMaterial.material_id == material.id))
            self.db.delete(material)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        logger.info(f"Deleted material {material_id} for user {user_id}")
