import logging
import os
import uuid

from fastapi import UploadFile

from attendance_api.config import UPLOAD_DIR, PHOTO_BASE_URL, MAX_PHOTO_SIZE
from attendance_api.exceptions import ValidationError

ALLOWED_EXTENSIONS = {"jpeg", "jpg", "png"}
ALLOWED_CONTENT_TYPES = {"image/jpeg", "image/png"}


def allowed_file(filename: str | None) -> bool:
    return bool(filename) and "." in filename and (
        filename.rsplit(".", 1)[1].lower() in ALLOWED_EXTENSIONS
    )


def validate_photo(upload: UploadFile):
    """Checks the type and size of an uploaded photo.
    Returns the normalised extension and the file content.
    """
    if not allowed_file(upload.filename):
        raise ValidationError("Only jpeg, jpg and png images are allowed")
    if upload.content_type not in ALLOWED_CONTENT_TYPES:
        raise ValidationError(f"Unsupported image type: {upload.content_type}")

    # Read one byte past the limit so oversized files are detected without
    # loading them completely
    content = upload.file.read(MAX_PHOTO_SIZE + 1)
    if not content:
        raise ValidationError("Uploaded image is empty")
    if len(content) > MAX_PHOTO_SIZE:
        raise ValidationError(f"Image exceeds the {MAX_PHOTO_SIZE} byte limit")

    extension = upload.filename.rsplit(".", 1)[1].lower()
    return extension, content


def store_photo(owner: str, extension: str, content: bytes) -> str:
    os.makedirs(UPLOAD_DIR, exist_ok=True)
    safe_id = "".join(c for c in owner if c.isalnum() or c in "-_")
    reference = f"{safe_id}_{uuid.uuid4().hex}.{extension}"
    with open(os.path.join(UPLOAD_DIR, reference), "wb") as photo_file:
        photo_file.write(content)
    return reference


def remove_photo(reference: str | None):
    if not reference:
        return
    path = os.path.join(UPLOAD_DIR, os.path.basename(reference))
    try:
        os.remove(path)
    except FileNotFoundError:
        logging.warning(f"Photo {reference} was already removed")


def photo_url(reference: str | None):
    if not reference:
        return None
    return f"{PHOTO_BASE_URL}/{reference}"
