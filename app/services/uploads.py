"""Local file storage for uploaded study materials."""
from __future__ import annotations

import uuid
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from loguru import logger

from app.config import settings
from app.utils.exceptions import NotFoundError, UploadError

PUBLIC_PREFIX = "/uploads"

CONTENT_TYPES = {
    ".pdf": "application/pdf",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".doc": "application/msword",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}


@dataclass(slots=True)
class StoredFile:
    path: str
    file_name: str
    size: int
    mime_type: str


def guess_extension(original_name: str, mime_type: str | None) -> str:
    """Keep the uploaded file's extension, otherwise infer one from its MIME type."""

    suffix = PurePosixPath(original_name).suffix
    if suffix:
        return suffix
    if not mime_type:
        return ""
    if "pdf" in mime_type:
        return ".pdf"
    if "word" in mime_type or "document" in mime_type:
        return ".docx"
    if mime_type.startswith("image/"):
        return ".png"
    return ""


def content_type_for(filename: str) -> str:
    return CONTENT_TYPES.get(PurePosixPath(filename.lower()).suffix, "application/octet-stream")


class UploadService:
    """Write uploads under ``upload_dir`` with random names and read them back."""

    def __init__(self, upload_dir: Path | None = None, *, max_bytes: int | None = None):
        self.upload_dir = Path(upload_dir or settings.UPLOAD_DIR)
        self.max_bytes = max_bytes if max_bytes is not None else settings.MAX_UPLOAD_BYTES

    def store(self, content: bytes, *, original_name: str | None, mime_type: str | None) -> StoredFile:
        if len(content) > self.max_bytes:
            raise UploadError(
                "File too large",
                details={"size": len(content), "limit": self.max_bytes},
                status_code=413,
            )

        original_name = original_name or uuid.uuid4().hex
        mime_type = mime_type or "application/octet-stream"
        out_name = f"{uuid.uuid4()}{guess_extension(original_name, mime_type)}"

        try:
            self.upload_dir.mkdir(parents=True, exist_ok=True)
            (self.upload_dir / out_name).write_bytes(content)
        except OSError as exc:
            raise UploadError("Upload failed", details={"error": str(exc)}, status_code=500) from exc

        logger.info(f"Stored upload {original_name!r} as {out_name} ({len(content)} bytes)")
        return StoredFile(
            path=f"{PUBLIC_PREFIX}/{out_name}",
            file_name=original_name,
            size=len(content),
            mime_type=mime_type,
        )

    def resolve(self, filename: str) -> Path:
        """Return the stored file for ``filename``; directory parts are ignored."""

        safe_name = PurePosixPath(filename.replace("\\", "/")).name
        path = self.upload_dir / safe_name
        if not safe_name or not path.is_file():
            raise NotFoundError("Not found")
        return path
