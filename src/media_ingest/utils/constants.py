"""Global constants used throughout the package.

This module centralizes the signature table inputs, allow-lists, extension
maps, error codes and environment variable names shared by the validators,
the name generator and the storage providers.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================

# Validation Errors
ERROR_CODE_VALIDATION_FAILED = "VALIDATION_FAILED"
ERROR_CODE_DISALLOWED_FORMAT = "DISALLOWED_FORMAT"
ERROR_CODE_UNKNOWN_FORMAT = "UNKNOWN_FORMAT"
ERROR_CODE_TYPE_MISMATCH = "CLAIMED_TYPE_NOT_ALLOWED"
ERROR_CODE_NOT_MEDIA = "NOT_MEDIA"
ERROR_CODE_FILE_SIZE_EXCEEDED = "FILE_SIZE_EXCEEDED"
ERROR_CODE_INVALID_FOLDER = "INVALID_FOLDER"

# Storage Errors
ERROR_CODE_CONFIGURATION = "CONFIGURATION_ERROR"
ERROR_CODE_NETWORK = "NETWORK_ERROR"
ERROR_CODE_RESOURCE_NOT_FOUND = "NOT_FOUND"
ERROR_CODE_INVALID_URL = "INVALID_URL"
ERROR_CODE_FILESYSTEM = "FILESYSTEM_ERROR"

# Internal / Unexpected
ERROR_CODE_INTERNAL_ERROR = "INTERNAL_ERROR"


# ============================================================================
# MIME Types
# ============================================================================

MIME_JPEG = "image/jpeg"
MIME_PNG = "image/png"
MIME_WEBP = "image/webp"
MIME_GIF = "image/gif"
MIME_MP4 = "video/mp4"
MIME_QUICKTIME = "video/quicktime"
MIME_WEBM = "video/webm"
MIME_AVI = "video/x-msvideo"

IMAGE_MIME_PREFIX = "image/"
VIDEO_MIME_PREFIX = "video/"

IMAGE_MIME_TYPES: Final[frozenset[str]] = frozenset({MIME_JPEG, MIME_PNG, MIME_WEBP, MIME_GIF})
VIDEO_MIME_TYPES: Final[frozenset[str]] = frozenset({MIME_MP4, MIME_QUICKTIME, MIME_WEBM, MIME_AVI})

DEFAULT_IMAGE_ALLOW_LIST: Final[frozenset[str]] = frozenset({MIME_JPEG, MIME_PNG, MIME_WEBP})
DEFAULT_VIDEO_ALLOW_LIST: Final[frozenset[str]] = frozenset({MIME_MP4, MIME_QUICKTIME, MIME_WEBM})


# ============================================================================
# File Upload Constraints
# ============================================================================

MAX_IMAGE_SIZE = 5 * 1024 * 1024  # 5MB in bytes
MAX_VIDEO_SIZE = 256 * 1024 * 1024  # 256MB in bytes

MIME_TYPE_EXTENSION_MAP: Final[dict[str, str]] = {
    MIME_JPEG: ".jpg",
    MIME_PNG: ".png",
    MIME_WEBP: ".webp",
    MIME_GIF: ".gif",
    MIME_MP4: ".mp4",
    MIME_QUICKTIME: ".mov",
    MIME_WEBM: ".webm",
    MIME_AVI: ".avi",
}

DEFAULT_EXTENSION = ".bin"

FOLDER_PATTERN = r"^[A-Za-z0-9_-]+(/[A-Za-z0-9_-]+)*$"

# Keys produced by build_object_key: {folder}/{millis}-{32 hex chars}{ext}
OBJECT_KEY_PATTERN = r"^[A-Za-z0-9_-]+(/[A-Za-z0-9_-]+)*/[0-9]+-[0-9a-f]{32}\.[a-z0-9]+$"


# ============================================================================
# Storage Backends
# ============================================================================

LOCAL_PUBLIC_PREFIX = "/uploads/"
DEFAULT_LOCAL_UPLOAD_DIR = "public/uploads"
DEFAULT_CONTAINER_NAME = "uploads"
DEFAULT_BUCKET_NAME = "uploads"
DEFAULT_S3_REGION = "auto"

AZURE_BLOB_URL_TEMPLATE = "https://{account}.blob.core.windows.net/{container}"
AZURE_CONNECTION_STRING_TEMPLATE = (
    "DefaultEndpointsProtocol=https;AccountName={account};"
    "AccountKey={key};EndpointSuffix=core.windows.net"
)
S3_ENDPOINT_TEMPLATE = "https://{account}.r2.cloudflarestorage.com"
S3_PUBLIC_URL_TEMPLATE = "https://{bucket}.{account}.r2.dev"
REST_OBJECT_PATH = "/storage/v1/object/{bucket}/{key}"
REST_PUBLIC_PATH = "/storage/v1/object/public/{bucket}/{key}"


# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_STORAGE_PROVIDER = "STORAGE_PROVIDER"
ENV_LOCAL_UPLOAD_DIR = "LOCAL_UPLOAD_DIR"

ENV_AZURE_ACCOUNT_NAME = "AZURE_STORAGE_ACCOUNT_NAME"
ENV_AZURE_ACCOUNT_KEY = "AZURE_STORAGE_ACCOUNT_KEY"
ENV_AZURE_CONTAINER_NAME = "AZURE_STORAGE_CONTAINER_NAME"
ENV_AZURE_PUBLIC_URL = "AZURE_STORAGE_PUBLIC_URL"

ENV_S3_ACCOUNT_ID = "S3_ACCOUNT_ID"
ENV_S3_ACCESS_KEY_ID = "S3_ACCESS_KEY_ID"
ENV_S3_SECRET_ACCESS_KEY = "S3_SECRET_ACCESS_KEY"
ENV_S3_BUCKET_NAME = "S3_BUCKET_NAME"
ENV_S3_PUBLIC_URL = "S3_PUBLIC_URL"
ENV_S3_ENDPOINT_URL = "S3_ENDPOINT_URL"
ENV_S3_REGION = "S3_REGION"

ENV_REST_STORAGE_URL = "REST_STORAGE_URL"
ENV_REST_SERVICE_KEY = "REST_STORAGE_SERVICE_KEY"
ENV_REST_BUCKET = "REST_STORAGE_BUCKET"


# ============================================================================
# Helper Functions
# ============================================================================


def format_file_size(size_bytes: int) -> str:
    """Format file size in human-readable format.

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted file size string
    """
    size: float = float(size_bytes)

    for unit in ("B", "KB", "MB", "GB"):
        if size < 1024.0:
            return f"{size:.1f} {unit}"
        size /= 1024.0

    return f"{size:.1f} TB"
