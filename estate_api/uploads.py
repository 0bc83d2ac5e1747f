# estate_api/uploads.py
import logging
import os
import time
from pathlib import Path
from typing import Optional

from fastapi import UploadFile

from .config import Settings

logger = logging.getLogger(__name__)


class UploadRejected(Exception):
    """An uploaded image failed the type or size checks."""


def generate_filename(original: str) -> str:
    # epoch milliseconds + original extension; two uploads in the same ms collide
    ext = os.path.splitext(original or "")[1]
    return f"{int(time.time() * 1000)}{ext}"


def save_image(upload: Optional[UploadFile], settings: Settings) -> str:
    """
    Validate and store an uploaded image.

    Returns the public path (``/uploads/<filename>``) to embed in a record, or an
    empty string when the request carried no file. Raises ``UploadRejected``
    before anything is written if the content type is not allowed or the file is
    larger than ``settings.max_upload_bytes``.
    """
    if upload is None or not upload.filename:
        return ""

    if upload.content_type not in settings.allowed_image_types:
        raise UploadRejected(f"Invalid file type: {upload.content_type}")

    contents = upload.file.read(settings.max_upload_bytes + 1)
    if len(contents) > settings.max_upload_bytes:
        raise UploadRejected(f"File too large: limit is {settings.max_upload_bytes} bytes")

    fname = generate_filename(upload.filename)
    dest = Path(settings.uploads_dir) / fname
    with open(dest, "wb") as f:
        f.write(contents)
    logger.info("Stored upload %s as %s (%d bytes)", upload.filename, dest, len(contents))
    return f"{settings.uploads_url.rstrip('/')}/{fname}"


def discard_image(image: str, settings: Settings) -> None:
    """Best-effort removal of a record's image; failures are only logged."""
    if not isinstance(image, str) or not image:
        return
    path = Path(settings.uploads_dir) / Path(image).name
    try:
        path.unlink()
    except OSError:
        logger.warning("Error deleting image file %s", path, exc_info=True)
