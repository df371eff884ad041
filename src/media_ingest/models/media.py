"""Shared media and storage result models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictBytes, StrictStr


class DetectedType(str, Enum):
    """Formats recognised by the signature sniffer."""

    JPEG = "jpeg"
    PNG = "png"
    WEBP = "webp"
    GIF = "gif"
    MP4 = "mp4"
    WEBM = "webm"
    AVI = "avi"
    UNKNOWN = "unknown"


class MediaCategory(str, Enum):
    """Validation category selected by the caller."""

    IMAGE = "image"
    VIDEO = "video"


class ValidationVerdict(BaseModel):
    """Outcome of a content validation call."""

    model_config = ConfigDict(frozen=True)

    valid: StrictBool = Field(..., description="Whether the buffer may be stored")
    detected_type: DetectedType | None = Field(
        None, description="Format identified from the leading bytes"
    )
    error: StrictStr | None = Field(None, description="Rejection reason")
    error_code: StrictStr | None = Field(None, description="Machine-readable rejection code")

    @classmethod
    def accept(cls, detected_type: DetectedType) -> "ValidationVerdict":
        return cls(valid=True, detected_type=detected_type)

    @classmethod
    def reject(
        cls,
        error: str,
        error_code: str,
        detected_type: DetectedType | None = None,
    ) -> "ValidationVerdict":
        return cls(valid=False, detected_type=detected_type, error=error, error_code=error_code)


class UploadTarget(BaseModel):
    """Everything a caller hands over for a single upload."""

    model_config = ConfigDict(frozen=True)

    buffer: StrictBytes = Field(..., description="Raw media bytes")
    original_name: StrictStr = Field(
        "", description="Client file name, used for diagnostics only"
    )
    content_type: StrictStr = Field(..., description="Untrusted claimed MIME type")
    folder: StrictStr = Field(..., min_length=1, description="Logical namespace, e.g. avatars")


class StorageResult(BaseModel):
    """Result of an upload or delete call."""

    model_config = ConfigDict(frozen=True)

    success: StrictBool
    url: StrictStr | None = Field(None, description="Public URL of the stored object")
    error: StrictStr | None = Field(None, description="Failure reason")
    error_code: StrictStr | None = Field(None, description="Machine-readable failure code")

    @classmethod
    def uploaded(cls, url: str) -> "StorageResult":
        return cls(success=True, url=url)

    @classmethod
    def deleted(cls) -> "StorageResult":
        return cls(success=True)

    @classmethod
    def failed(cls, error: str, error_code: str) -> "StorageResult":
        return cls(success=False, error=error, error_code=error_code)
