"""Storage facade.

Selects one provider from configuration the first time it is needed and
reuses it for the lifetime of the process. Changing backend requires a
restart.

The facade performs no content validation: callers must run the
validators in ``media_ingest.utils.validators`` before ``upload_file``.
"""

from collections.abc import Callable, Mapping
import threading

from aws_lambda_powertools import Logger

from media_ingest.config import StorageBackend, StorageSettings, get_settings
from media_ingest.infrastructure.storage.blob_storage import AzureBlobStorageProvider
from media_ingest.infrastructure.storage.local_storage import LocalStorageProvider
from media_ingest.infrastructure.storage.rest_storage import RestStorageProvider
from media_ingest.infrastructure.storage.s3_storage import S3StorageProvider
from media_ingest.models.media import StorageResult
from media_ingest.repositories.storage_repository import StorageProvider

logger = Logger(UTC=True)

PROVIDER_FACTORIES: Mapping[StorageBackend, Callable[[StorageSettings], StorageProvider]] = {
    StorageBackend.LOCAL: lambda settings: LocalStorageProvider(settings.local),
    StorageBackend.AZURE: lambda settings: AzureBlobStorageProvider(settings.azure),
    StorageBackend.S3: lambda settings: S3StorageProvider(settings.s3),
    StorageBackend.REST: lambda settings: RestStorageProvider(settings.rest),
}

_provider: StorageProvider | None = None
_provider_lock = threading.Lock()


def create_storage_provider(settings: StorageSettings) -> StorageProvider:
    """Build the provider selected by ``settings.provider``."""
    return PROVIDER_FACTORIES[settings.provider](settings)


def get_storage_provider(settings: StorageSettings | None = None) -> StorageProvider:
    """Return the process-wide provider, creating it on first call.

    Concurrent first callers are serialized so the provider is built
    exactly once. ``settings`` is only consulted on that first call.
    """
    global _provider
    if _provider is None:
        with _provider_lock:
            if _provider is None:
                active = settings or get_settings()
                _provider = create_storage_provider(active)
                logger.info("Storage provider selected", extra={"provider": active.provider.value})
    return _provider


def reset_storage_provider() -> None:
    """Drop the memoized provider. Intended for tests."""
    global _provider
    with _provider_lock:
        _provider = None


def upload_file(
    file_data: bytes,
    filename: str,
    content_type: str,
    folder: str,
) -> StorageResult:
    """Upload a file through the active provider.

    Args:
        file_data: Validated file content
        filename: Client file name (diagnostic only)
        content_type: Validated MIME type
        folder: Destination namespace (avatars, headers, posts, ...)
    """
    return get_storage_provider().upload(file_data, filename, content_type, folder)


def delete_file(url: str) -> StorageResult:
    """Delete a file previously stored through the active provider."""
    return get_storage_provider().delete(url)
