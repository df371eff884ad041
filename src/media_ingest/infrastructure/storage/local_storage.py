"""Local filesystem implementation of StorageProvider."""

from pathlib import Path

from aws_lambda_powertools import Logger

from media_ingest.config import LocalStorageSettings
from media_ingest.models.errors import FilesystemError, InvalidURLError, NotFoundError
from media_ingest.repositories.storage_repository import StorageProvider
from media_ingest.utils.constants import LOCAL_PUBLIC_PREFIX
from media_ingest.utils.naming import build_object_key
from media_ingest.utils.urls import join_url, key_from_url

logger = Logger(UTC=True)


class LocalStorageProvider(StorageProvider):
    """Stores files under a root directory served at ``/uploads/``."""

    name = "local"

    def __init__(self, settings: LocalStorageSettings) -> None:
        self._root = Path(settings.root_dir).resolve()
        logger.info("Storage provider initialized", extra={"provider": self.name, "root_dir": str(self._root)})

    @property
    def root_dir(self) -> Path:
        return self._root

    def _path_for(self, key: str) -> Path:
        path = (self._root / key).resolve()
        if not path.is_relative_to(self._root):
            raise InvalidURLError(
                message="URL resolves outside the upload directory",
                details={"key": key},
            )
        return path

    def _upload(self, file_data: bytes, filename: str, content_type: str, folder: str) -> str:
        key = build_object_key(folder, filename, content_type)
        path = self._path_for(key)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(file_data)
        except OSError as exc:
            raise FilesystemError(
                message=exc.strerror or str(exc),
                details={"key": key},
            ) from exc

        return join_url(LOCAL_PUBLIC_PREFIX, key)

    def _delete(self, url: str) -> None:
        key = key_from_url(url, LOCAL_PUBLIC_PREFIX, provider=self.name)
        path = self._path_for(key)

        try:
            path.unlink()
        except FileNotFoundError as exc:
            raise NotFoundError(
                message="File not found",
                details={"url": url},
            ) from exc
        except OSError as exc:
            raise FilesystemError(
                message=exc.strerror or str(exc),
                details={"url": url},
            ) from exc
