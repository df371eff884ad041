"""Generation of storage names that are independent of user input."""

import re
import uuid

from aws_lambda_powertools import Logger

from media_ingest.models.errors import ValidationError
from media_ingest.utils.constants import (
    DEFAULT_EXTENSION,
    ERROR_CODE_INVALID_FOLDER,
    FOLDER_PATTERN,
    MIME_TYPE_EXTENSION_MAP,
)
from media_ingest.utils.time import utc_now_millis

logger = Logger(UTC=True)

_FOLDER_RE = re.compile(FOLDER_PATTERN)


def get_extension(content_type: str) -> str:
    """Return the file extension (with leading dot) for a MIME type."""
    return MIME_TYPE_EXTENSION_MAP.get(content_type, DEFAULT_EXTENSION)


def generate_safe_filename(original_name: str, content_type: str) -> str:
    """Generate a random file name for validated content.

    ``original_name`` is only logged. It never contributes to the result,
    so names like ``../../etc/passwd.jpg`` cannot influence where the
    object ends up.

    Example:
        >>> generate_safe_filename("../../etc/passwd.jpg", "image/jpeg")
        'a1b2c3d4e5f67890abcdef1234567890.jpg'
    """
    name = f"{uuid.uuid4().hex}{get_extension(content_type)}"
    logger.debug(
        "Generated safe file name",
        extra={"original_name": original_name, "content_type": content_type, "file_name": name},
    )
    return name


def validate_folder(folder: str) -> str:
    """Ensure a logical folder is a plain relative path.

    Raises:
        ValidationError: If the folder is empty, absolute or contains
            parent-directory segments or other unexpected characters
    """
    if not _FOLDER_RE.fullmatch(folder or ""):
        raise ValidationError(
            message="Invalid storage folder",
            error_code=ERROR_CODE_INVALID_FOLDER,
            details={"folder": folder},
        )
    return folder


def build_object_key(folder: str, original_name: str, content_type: str) -> str:
    """Build ``{folder}/{timestamp}-{safe file name}`` for a new object.

    Raises:
        ValidationError: If the folder is not a plain relative path
    """
    validate_folder(folder)
    return f"{folder}/{utc_now_millis()}-{generate_safe_filename(original_name, content_type)}"
