"""Abstract contract for media file storage."""

from abc import ABC, abstractmethod

from aws_lambda_powertools import Logger

from media_ingest.models.errors import MediaIngestError
from media_ingest.models.media import StorageResult
from media_ingest.utils.constants import ERROR_CODE_INTERNAL_ERROR

logger = Logger(UTC=True)


class StorageProvider(ABC):
    """Contract for storing and deleting media files.

    Implementations are local disk, Azure Blob, S3-compatible buckets and
    an HTTP object API. Callers depend on this interface, not the
    implementation.

    Public methods never raise: subclasses implement the ``_upload`` /
    ``_delete`` hooks, which raise ``MediaIngestError`` subclasses, and the
    base class turns every outcome into a ``StorageResult``.
    """

    name: str = "storage"

    def upload(
        self,
        file_data: bytes,
        filename: str,
        content_type: str,
        folder: str,
    ) -> StorageResult:
        """Store a file and return its public URL.

        Args:
            file_data: Binary content, already validated by the caller
            filename: Client file name, used for diagnostics only
            content_type: Validated MIME type (selects the extension)
            folder: Trusted logical namespace, e.g. ``avatars``

        Returns:
            ``StorageResult`` with ``url`` on success, ``error`` otherwise
        """
        logger.debug(
            "Uploading file",
            extra={
                "provider": self.name,
                "filename": filename,
                "content_type": content_type,
                "folder": folder,
                "size": len(file_data),
            },
        )
        try:
            url = self._upload(file_data, filename, content_type, folder)
        except MediaIngestError as exc:
            logger.error(
                "Upload failed",
                extra={"provider": self.name, "error_code": exc.error_code, "error": exc.message},
            )
            return StorageResult.failed(exc.message, exc.error_code)
        except Exception as exc:
            logger.exception("Unexpected error uploading file", extra={"provider": self.name})
            return StorageResult.failed(str(exc) or "Unknown error", ERROR_CODE_INTERNAL_ERROR)

        logger.info("File uploaded successfully", extra={"provider": self.name, "url": url})
        return StorageResult.uploaded(url)

    def delete(self, url: str) -> StorageResult:
        """Delete the object behind a URL previously returned by ``upload``.

        Returns:
            ``StorageResult`` with ``success=True`` or an ``error``
        """
        logger.debug("Deleting file", extra={"provider": self.name, "url": url})
        try:
            self._delete(url)
        except MediaIngestError as exc:
            logger.error(
                "Delete failed",
                extra={"provider": self.name, "error_code": exc.error_code, "error": exc.message},
            )
            return StorageResult.failed(exc.message, exc.error_code)
        except Exception as exc:
            logger.exception("Unexpected error deleting file", extra={"provider": self.name})
            return StorageResult.failed(str(exc) or "Unknown error", ERROR_CODE_INTERNAL_ERROR)

        logger.info("File deleted successfully", extra={"provider": self.name, "url": url})
        return StorageResult.deleted()

    @abstractmethod
    def _upload(self, file_data: bytes, filename: str, content_type: str, folder: str) -> str:
        """Write the object and return its public URL.

        Raises:
            MediaIngestError: On configuration, network or filesystem failure
        """

    @abstractmethod
    def _delete(self, url: str) -> None:
        """Delete the object addressed by ``url``.

        Raises:
            InvalidURLError: If ``url`` does not have this provider's shape
            MediaIngestError: On configuration, network or filesystem failure
        """
