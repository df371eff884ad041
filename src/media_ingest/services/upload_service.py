"""Business logic for media uploads.

This module runs the ingest flow: validate the bytes against the claimed
type, then persist through the storage provider under a generated name.
Nothing reaches storage unless validation succeeded.
"""

from collections.abc import Collection

from aws_lambda_powertools import Logger

from media_ingest.models.media import MediaCategory, StorageResult, UploadTarget, ValidationVerdict
from media_ingest.repositories.storage_repository import StorageProvider
from media_ingest.storage import get_storage_provider
from media_ingest.utils.constants import DEFAULT_IMAGE_ALLOW_LIST, DEFAULT_VIDEO_ALLOW_LIST
from media_ingest.utils.validators import validate_image, validate_media, validate_video

logger = Logger(UTC=True)


class MediaUploadService:
    """Application service responsible for media uploads.

    This service orchestrates:
    - Content validation (magic bytes vs. claimed type vs. allow-list)
    - Uploading content to the configured storage provider
    """

    def __init__(self, storage: StorageProvider | None = None) -> None:
        """Initialize the service, defaulting to the process-wide provider."""
        self._storage = storage

    @property
    def storage(self) -> StorageProvider:
        if self._storage is None:
            self._storage = get_storage_provider()
        return self._storage

    @staticmethod
    def validate(
        target: UploadTarget,
        category: MediaCategory | None = None,
        allowed_types: Collection[str] | None = None,
    ) -> ValidationVerdict:
        """Validate an upload target for the requested category.

        With no category, the category is inferred from the claimed type.
        """
        if category is MediaCategory.IMAGE:
            return validate_image(
                target.buffer,
                target.content_type,
                allowed_types if allowed_types is not None else DEFAULT_IMAGE_ALLOW_LIST,
            )

        if category is MediaCategory.VIDEO:
            return validate_video(
                target.buffer,
                target.content_type,
                allowed_types if allowed_types is not None else DEFAULT_VIDEO_ALLOW_LIST,
            )

        return validate_media(target.buffer, target.content_type)

    def upload_media(
        self,
        target: UploadTarget,
        category: MediaCategory | None = None,
        allowed_types: Collection[str] | None = None,
    ) -> StorageResult:
        """Validate and store a media file.

        The upload flow is:
        1. Validate the content against the claimed type and allow-list
        2. Upload through the storage provider, which derives the object key
           from a freshly generated safe name

        Args:
            target: Buffer, client file name, claimed type and folder
            category: Force image or video rules; inferred when omitted
            allowed_types: Override the category's default allow-list

        Returns:
            ``StorageResult`` with the public URL, or the rejection/failure
        """
        logger.debug(
            "Starting media upload",
            extra={
                "original_name": target.original_name,
                "content_type": target.content_type,
                "folder": target.folder,
                "size": len(target.buffer),
            },
        )

        # Step 1: Validate content
        verdict = self.validate(target, category, allowed_types)
        if not verdict.valid:
            logger.warning(
                "Media rejected",
                extra={"error_code": verdict.error_code, "original_name": target.original_name},
            )
            return StorageResult.failed(verdict.error or "Invalid file", verdict.error_code or "")

        # Step 2: Upload under the claimed type, which validation tied to the bytes
        result = self.storage.upload(
            target.buffer,
            target.original_name,
            target.content_type,
            target.folder,
        )

        if result.success:
            logger.info(
                "Media uploaded successfully",
                extra={"url": result.url, "detected_type": verdict.detected_type},
            )
        return result

    def delete_media(self, url: str) -> StorageResult:
        """Delete a previously uploaded media file."""
        return self.storage.delete(url)
