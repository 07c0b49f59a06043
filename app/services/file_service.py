"""
File service - profile image uploads stored on local disk.
Challenge: Reject bad uploads before anything is written; never trust the client filename.
Design: Content type and size are checked first, then the file gets a UUID name under
<upload_dir>/profiles and is served from /uploads.
"""

import logging
import uuid
from pathlib import Path

import aiofiles
from fastapi import UploadFile

from app.config import get_settings
from app.core.exceptions import FileStorageError, UploadError

logger = logging.getLogger(__name__)

ALLOWED_IMAGE_TYPES = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/webp": ".webp",
    "image/gif": ".gif",
}
PROFILE_SUBDIR = "profiles"
UPLOADS_URL_PREFIX = "/uploads"


class FileService:
    def __init__(self, upload_root: str | Path | None = None, max_bytes: int | None = None):
        settings = get_settings()
        self.upload_root = Path(upload_root or settings.upload_dir)
        self.max_bytes = max_bytes or settings.max_upload_bytes

    def validate_content_type(self, content_type: str | None) -> str:
        """Return the stored extension for an allowed type, UploadError otherwise."""
        extension = ALLOWED_IMAGE_TYPES.get((content_type or "").lower())
        if extension is None:
            raise UploadError(
                "Only JPEG, PNG, WebP, or GIF images are allowed",
                context={"contentType": content_type, "allowed": list(ALLOWED_IMAGE_TYPES)},
            )
        return extension

    def validate_size(self, size: int) -> None:
        if size > self.max_bytes:
            raise UploadError(
                f"Image exceeds maximum size of {self.max_bytes // (1024 * 1024)}MB",
                context={"maxBytes": self.max_bytes},
            )

    async def save_profile_image(self, upload: UploadFile | None) -> str:
        """Validate and store an uploaded profile image. Returns its public URL."""
        if upload is None or not upload.filename:
            raise UploadError("No image file provided", context={"field": "image"})
        extension = self.validate_content_type(upload.content_type)
        # Read one byte past the limit so oversize files are caught without buffering them whole
        content = await upload.read(self.max_bytes + 1)
        self.validate_size(len(content))

        name = f"{uuid.uuid4().hex}{extension}"
        target = self.upload_root / PROFILE_SUBDIR / name
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(target, "wb") as f:
                await f.write(content)
        except OSError as e:
            logger.error("Failed to store upload at %s: %s", target, e)
            raise FileStorageError(
                "Failed to save uploaded image", context={"path": str(target), "os_error": str(e)}
            ) from e
        logger.info("Profile image stored: %s (%d bytes)", name, len(content))
        return f"{UPLOADS_URL_PREFIX}/{PROFILE_SUBDIR}/{name}"


def get_file_service() -> FileService:
    """FastAPI dependency; overridden in tests to point at a temp directory."""
    return FileService()
