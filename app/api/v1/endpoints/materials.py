"""Study material endpoints."""
from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api import deps
from app.db.models.user import User
from app.schemas import MaterialCreate, MaterialListResponse, MaterialResponse, MessageResponse
from app.services.materials import MaterialService
from app.utils.exceptions import NotFoundError, handle_not_found

router = APIRouter(prefix="/materials", tags=["materials"])


@router.get("", response_model=MaterialListResponse)
def list_materials(
    current_user: User = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
) -> MaterialListResponse:
    """Return the user's materials, newest first."""

    return MaterialListResponse(materials=MaterialService(db).list_materials(current_user.id))


@router.post("", response_model=MaterialResponse, status_code=status.HTTP_201_CREATED)
def create_material(
    payload: MaterialCreate,
    current_user: User = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
) -> MaterialResponse:
    material = MaterialService(db).create(current_user.id, payload)
    return MaterialResponse(material=material)


@router.delete("/{material_id}", response_model=MessageResponse)
def delete_material(
    material_id: uuid.UUID,
    current_user: User = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
) -> MessageResponse:
    """Delete a material and detach it from notes, sessions and goals."""

    try:
        MaterialService(db).delete(current_user.id, material_id)
    except NotFoundError as exc:
        raise handle_not_found(exc) from exc
    return MessageResponse(message="Material deleted successfully")
