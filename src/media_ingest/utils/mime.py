"""Byte-signature detection of media formats."""

from collections.abc import Mapping

from media_ingest.models.media import DetectedType
from media_ingest.utils.constants import (
    MIME_AVI,
    MIME_GIF,
    MIME_JPEG,
    MIME_MP4,
    MIME_PNG,
    MIME_QUICKTIME,
    MIME_WEBM,
    MIME_WEBP,
)

RIFF = b"RIFF"

# JPEG: SOI marker followed by an APP0 (JFIF) or APP1 (EXIF) marker
JPEG_PREFIX = b"\xff\xd8\xff"
JPEG_APP_MARKERS = frozenset({0xE0, 0xE1})

# (offset, signature, detected type), checked in order
SIGNATURES: tuple[tuple[int, bytes, DetectedType], ...] = (
    (0, b"\x89PNG\r\n\x1a\n", DetectedType.PNG),
    (0, b"GIF87a", DetectedType.GIF),
    (0, b"GIF89a", DetectedType.GIF),
    (4, b"ftyp", DetectedType.MP4),
    (0, b"\x1a\x45\xdf\xa3", DetectedType.WEBM),
)

# RIFF form type at bytes 8..11
RIFF_FORMS: Mapping[bytes, DetectedType] = {
    b"WEBP": DetectedType.WEBP,
    b"AVI ": DetectedType.AVI,
}

CANONICAL_MIME: Mapping[DetectedType, str] = {
    DetectedType.JPEG: MIME_JPEG,
    DetectedType.PNG: MIME_PNG,
    DetectedType.WEBP: MIME_WEBP,
    DetectedType.GIF: MIME_GIF,
    DetectedType.MP4: MIME_MP4,
    DetectedType.WEBM: MIME_WEBM,
    DetectedType.AVI: MIME_AVI,
}

# MIME types a detected container may legitimately be declared as.
# QuickTime and MP4 share the ISO base media "ftyp" box.
COMPATIBLE_MIMES: Mapping[DetectedType, frozenset[str]] = {
    **{detected: frozenset({mime}) for detected, mime in CANONICAL_MIME.items()},
    DetectedType.MP4: frozenset({MIME_MP4, MIME_QUICKTIME}),
}


def _matches(file_data: bytes, signature: bytes, offset: int = 0) -> bool:
    return file_data[offset : offset + len(signature)] == signature


def detect_type(file_data: bytes) -> DetectedType:
    """Identify a media format from the leading bytes of a buffer.

    Never raises: empty, short or unrecognised buffers yield
    ``DetectedType.UNKNOWN``.

    Args:
        file_data: Raw file content (only the first 12 bytes are inspected)

    Returns:
        The detected format
    """
    if len(file_data) >= 4 and _matches(file_data, JPEG_PREFIX) and file_data[3] in JPEG_APP_MARKERS:
        return DetectedType.JPEG

    # WEBP and AVI share the RIFF container; the form type decides
    if _matches(file_data, RIFF):
        form = RIFF_FORMS.get(bytes(file_data[8:12]))
        if form is not None:
            return form

    for offset, signature, detected in SIGNATURES:
        if _matches(file_data, signature, offset):
            return detected

    return DetectedType.UNKNOWN


def canonical_mime(detected: DetectedType) -> str | None:
    """Return the canonical MIME type of a detected format, or None for UNKNOWN."""
    return CANONICAL_MIME.get(detected)


def compatible_mimes(detected: DetectedType) -> frozenset[str]:
    return COMPATIBLE_MIMES.get(detected, frozenset())
