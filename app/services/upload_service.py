import logging
import re
import time
from pathlib import Path

from app.config import settings
from app.utils.exceptions import InvalidUploadException

logger = logging.getLogger(__name__)


def sanitize_filename(filename: str) -> str:
    """Keep letters, digits, dots and dashes; everything else becomes '_'."""
    name = re.sub(r"[^a-zA-Z0-9.-]", "_", Path(filename or "").name)
    return name.lstrip(".") or "upload"


def unique_filename(filename: str, now_ms: int | None = None) -> str:
    """``photo.jpg`` -> ``photo_<epoch-millis>.jpg`` so concurrent uploads never collide on disk."""
    safe = sanitize_filename(filename)
    path = Path(safe)
    stamp = now_ms if now_ms is not None else int(time.time() * 1000)
    return f"{path.stem}_{stamp}{path.suffix}"


def validate_image(content_type: str | None, size: int) -> None:
    allowed = settings.get_upload_types()
    if content_type not in allowed:
        raise InvalidUploadException(
            f"File type '{content_type}' is not allowed. Allowed: JPG, PNG, WebP, GIF"
        )
    if size > settings.UPLOAD_MAX_BYTES:
        max_mb = settings.UPLOAD_MAX_BYTES // (1024 * 1024)
        raise InvalidUploadException(f"File is too large. Maximum size: {max_mb}MB")
    if size == 0:
        raise InvalidUploadException("File is empty")


def save_image(filename: str, content_type: str | None, content: bytes) -> dict:
    """Validate and write an uploaded image, returning its public URL."""
    validate_image(content_type, len(content))

    upload_dir = Path(settings.UPLOAD_DIR)
    upload_dir.mkdir(parents=True, exist_ok=True)

    stored_name = unique_filename(filename)
    (upload_dir / stored_name).write_bytes(content)

    url = f"{settings.UPLOAD_URL_PREFIX.rstrip('/')}/{stored_name}"
    logger.info(f"Stored upload {stored_name} ({len(content)} bytes)")
    return {
        "url":      url,
        "filename": stored_name,
        "size":     len(content),
        "type":     content_type,
    }
