"""Upload service — validate and store a single image on local disk."""

import os
import random
import time

import structlog
from starlette.datastructures import UploadFile

from app.config import get_settings
from app.core.exceptions import UploadRejectedException
from app.domain.schemas.upload import UploadedImage

settings = get_settings()
logger = structlog.get_logger(__name__)

IMAGE_FIELD = "image"

ALLOWED_MIME_TYPES = frozenset({
    "image/jpeg",
    "image/jpg",
    "image/png",
    "image/gif",
    "image/webp",
    "image/bmp",
    "image/svg+xml",
})
ALLOWED_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".gif", ".webp", ".bmp", ".svg"})

NO_FILE_MESSAGE = "No image file provided. Please select an image file."
UNEXPECTED_FILE_MESSAGE = 'Unexpected field name. Use "image" as field name.'
TOO_MANY_FILES_MESSAGE = "Too many files. Upload a single image."
TOO_LARGE_MESSAGE = "File too large. Maximum size is 10MB."


def is_allowed_image(filename: str, content_type: str) -> bool:
    extension = os.path.splitext(filename)[1].lower()
    return content_type in ALLOWED_MIME_TYPES or extension in ALLOWED_EXTENSIONS


def generate_filename(original_name: str) -> str:
    """image-<epoch ms>-<random>.<ext>"""
    extension = os.path.splitext(original_name)[1]
    unique_suffix = f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}"
    return f"{IMAGE_FIELD}-{unique_suffix}{extension}"


def public_url(scheme: str, host: str, filename: str) -> str:
    prefix = settings.UPLOAD_URL_PREFIX.strip("/")
    return f"{scheme}://{host}/{prefix}/{filename}"


def select_single_image(form_items: list) -> UploadFile:
    """Pick the one uploaded file out of the multipart form items."""
    files = [(key, value) for key, value in form_items if isinstance(value, UploadFile)]
    if not files:
        raise UploadRejectedException(NO_FILE_MESSAGE)
    if any(key != IMAGE_FIELD for key, _ in files):
        raise UploadRejectedException(UNEXPECTED_FILE_MESSAGE)
    if len(files) > 1:
        raise UploadRejectedException(TOO_MANY_FILES_MESSAGE)

    upload = files[0][1]
    if not upload.filename:
        raise UploadRejectedException(NO_FILE_MESSAGE)
    return upload


async def store_image(upload: UploadFile, scheme: str, host: str) -> UploadedImage:
    content_type = upload.content_type or "application/octet-stream"
    if not is_allowed_image(upload.filename, content_type):
        raise UploadRejectedException(f"Only image files are allowed! Received: {content_type}")

    content = await upload.read(settings.MAX_UPLOAD_SIZE + 1)
    if len(content) > settings.MAX_UPLOAD_SIZE:
        raise UploadRejectedException(TOO_LARGE_MESSAGE)

    os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
    filename = generate_filename(upload.filename)
    with open(os.path.join(settings.UPLOAD_DIR, filename), "wb") as f:
        f.write(content)

    logger.info("Image stored", filename=filename, size=len(content), mimetype=content_type)
    return UploadedImage(
        url=public_url(scheme, host, filename),
        filename=filename,
        originalname=upload.filename,
        mimetype=content_type,
        size=len(content),
    )
