"""Custom exception classes for the media ingest package."""

from typing import Any

from media_ingest.utils.constants import (
    ERROR_CODE_CONFIGURATION,
    ERROR_CODE_FILESYSTEM,
    ERROR_CODE_INVALID_URL,
    ERROR_CODE_NETWORK,
    ERROR_CODE_RESOURCE_NOT_FOUND,
    ERROR_CODE_VALIDATION_FAILED,
)


class MediaIngestError(Exception):
    """
    Base exception for all media ingest errors.

    All custom errors must inherit from this class.
    Callers must explicitly provide a message and error code.
    Optional contextual information can be supplied via `details`.
    """

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(self.message)


class ValidationError(MediaIngestError):
    """Raised when media or request input fails validation."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_VALIDATION_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class ConfigurationError(MediaIngestError):
    """Raised when a provider's required settings are missing."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_CONFIGURATION,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class StorageNetworkError(MediaIngestError):
    """Raised when a backend is unreachable or answers with a failure status."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_NETWORK,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class NotFoundError(MediaIngestError):
    """Raised when a delete target does not exist."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_RESOURCE_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class InvalidURLError(MediaIngestError):
    """Raised when a URL does not match the provider's URL shape."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_INVALID_URL,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class FilesystemError(MediaIngestError):
    """Raised when a local filesystem operation fails."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_FILESYSTEM,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )
