"""Content validation for uploaded media.

Each entry point cross-checks a caller-declared MIME type against the
format detected from the file's magic bytes and an allow-list. The
outcome is always returned as a ``ValidationVerdict``; nothing here raises.
"""

from collections.abc import Collection

from aws_lambda_powertools import Logger

from media_ingest.models.media import DetectedType, MediaCategory, ValidationVerdict
from media_ingest.utils.constants import (
    DEFAULT_IMAGE_ALLOW_LIST,
    DEFAULT_VIDEO_ALLOW_LIST,
    ERROR_CODE_DISALLOWED_FORMAT,
    ERROR_CODE_FILE_SIZE_EXCEEDED,
    ERROR_CODE_NOT_MEDIA,
    ERROR_CODE_TYPE_MISMATCH,
    ERROR_CODE_UNKNOWN_FORMAT,
    IMAGE_MIME_PREFIX,
    IMAGE_MIME_TYPES,
    MAX_IMAGE_SIZE,
    MAX_VIDEO_SIZE,
    VIDEO_MIME_PREFIX,
    VIDEO_MIME_TYPES,
    format_file_size,
)
from media_ingest.utils.mime import canonical_mime, compatible_mimes, detect_type

logger = Logger(UTC=True)

_CATEGORY_MIME_TYPES = {
    MediaCategory.IMAGE: IMAGE_MIME_TYPES,
    MediaCategory.VIDEO: VIDEO_MIME_TYPES,
}


def _validate(
    file_data: bytes,
    claimed_type: str,
    allowed_types: Collection[str],
    *,
    category: MediaCategory,
    max_size: int | None,
) -> ValidationVerdict:
    allowed = frozenset(allowed_types)

    # Step 1: the claimed type must be allow-listed
    if claimed_type not in allowed:
        logger.warning(
            "Disallowed format",
            extra={"claimed_type": claimed_type, "category": category.value},
        )
        return ValidationVerdict.reject(
            f"Disallowed format. Allowed formats: {', '.join(sorted(allowed))}",
            ERROR_CODE_DISALLOWED_FORMAT,
        )

    # Step 2: size limit
    if max_size is not None and len(file_data) > max_size:
        logger.warning(
            "File too large",
            extra={"size": len(file_data), "max_size": max_size},
        )
        return ValidationVerdict.reject(
            f"File too large. Maximum size is {format_file_size(max_size)}",
            ERROR_CODE_FILE_SIZE_EXCEEDED,
        )

    # Step 3: identify the real format
    detected = detect_type(file_data)
    if detected is DetectedType.UNKNOWN:
        logger.warning(
            "Cannot identify format",
            extra={"claimed_type": claimed_type, "size": len(file_data)},
        )
        return ValidationVerdict.reject(
            f"Cannot identify format. Please select a valid {category.value} file",
            ERROR_CODE_UNKNOWN_FORMAT,
            detected_type=detected,
        )

    # Step 4: the detected identity must back the claim and be allow-listed itself
    detected_mime = canonical_mime(detected)
    if (
        claimed_type not in compatible_mimes(detected)
        or detected_mime not in allowed
        or detected_mime not in _CATEGORY_MIME_TYPES[category]
    ):
        logger.warning(
            "Claimed type does not match content",
            extra={
                "claimed_type": claimed_type,
                "detected_type": detected.value,
                "detected_mime": detected_mime,
            },
        )
        return ValidationVerdict.reject(
            f"Claimed type not allowed: content is {detected_mime}",
            ERROR_CODE_TYPE_MISMATCH,
            detected_type=detected,
        )

    logger.debug(
        "Media validated",
        extra={"claimed_type": claimed_type, "detected_type": detected.value},
    )
    return ValidationVerdict.accept(detected)


def validate_image(
    file_data: bytes,
    claimed_type: str,
    allowed_types: Collection[str] = DEFAULT_IMAGE_ALLOW_LIST,
    *,
    max_size: int | None = MAX_IMAGE_SIZE,
) -> ValidationVerdict:
    """Validate an image buffer against its claimed MIME type.

    Args:
        file_data: Raw image bytes
        claimed_type: MIME type declared by the client (untrusted)
        allowed_types: Permitted MIME types (defaults to JPEG, PNG, WebP)
        max_size: Size limit in bytes, or None to disable the check

    Returns:
        A verdict; ``detected_type`` is set whenever the format was identified
    """
    return _validate(
        file_data,
        claimed_type,
        allowed_types,
        category=MediaCategory.IMAGE,
        max_size=max_size,
    )


def validate_video(
    file_data: bytes,
    claimed_type: str,
    allowed_types: Collection[str] = DEFAULT_VIDEO_ALLOW_LIST,
    *,
    max_size: int | None = MAX_VIDEO_SIZE,
) -> ValidationVerdict:
    """Validate a video buffer against its claimed MIME type.

    Args:
        file_data: Raw video bytes
        claimed_type: MIME type declared by the client (untrusted)
        allowed_types: Permitted MIME types (defaults to MP4, QuickTime, WebM)
        max_size: Size limit in bytes, or None to disable the check

    Returns:
        A verdict; ``detected_type`` is set whenever the format was identified
    """
    return _validate(
        file_data,
        claimed_type,
        allowed_types,
        category=MediaCategory.VIDEO,
        max_size=max_size,
    )


def category_of(claimed_type: str) -> MediaCategory | None:
    """Return the media category implied by a MIME type prefix."""
    if claimed_type.startswith(IMAGE_MIME_PREFIX):
        return MediaCategory.IMAGE
    if claimed_type.startswith(VIDEO_MIME_PREFIX):
        return MediaCategory.VIDEO
    return None


def validate_media(file_data: bytes, claimed_type: str) -> ValidationVerdict:
    """Validate an image or a video, chosen by the claimed type's category."""
    category = category_of(claimed_type)

    if category is MediaCategory.IMAGE:
        return validate_image(file_data, claimed_type)

    if category is MediaCategory.VIDEO:
        return validate_video(file_data, claimed_type)

    logger.warning("Neither image nor video", extra={"claimed_type": claimed_type})
    return ValidationVerdict.reject(
        "Neither image nor video. Please select an image or video file",
        ERROR_CODE_NOT_MEDIA,
    )
