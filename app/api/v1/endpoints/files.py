"""Upload and download endpoints for study files."""
from __future__ import annotations

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import FileResponse

from app.api import deps
from app.db.models.user import User
from app.schemas import UploadResponse
from app.services.uploads import UploadService, content_type_for
from app.utils.exceptions import NotFoundError, UploadError, handle_not_found, handle_upload_error

router = APIRouter(tags=["files"])


@router.post("/upload", response_model=UploadResponse)
async def upload_file(
    file: UploadFile = File(..., description="Material file to store"),
    current_user: User = Depends(deps.get_current_user),
    service: UploadService = Depends(deps.get_upload_service),
) -> UploadResponse:
    """Store an uploaded file and return where it can be fetched."""

    # One byte past the limit is enough to tell an oversized upload apart.
    content = await file.read(service.max_bytes + 1)
    try:
        stored = service.store(content, original_name=file.filename, mime_type=file.content_type)
    except UploadError as exc:
        raise handle_upload_error(exc) from exc
    return UploadResponse(
        path=stored.path,
        file_name=stored.file_name,
        size=stored.size,
        mime_type=stored.mime_type,
    )


@router.get("/files/{filename}")
def read_file(
    filename: str,
    service: UploadService = Depends(deps.get_upload_service),
) -> FileResponse:
    """Serve a stored file inline."""

    try:
        path = service.resolve(filename)
    except NotFoundError as exc:
        raise handle_not_found(exc) from exc
    return FileResponse(
        path,
        media_type=content_type_for(path.name),
        filename=path.name,
        content_disposition_type="inline",
    )
