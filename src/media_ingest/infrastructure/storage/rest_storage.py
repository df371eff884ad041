"""HTTP object API implementation of StorageProvider."""

from http import HTTPStatus

from aws_lambda_powertools import Logger
import requests

from media_ingest.config import RestStorageSettings
from media_ingest.infrastructure.adapters.rest_adapter import RestAdapter, RestAdapterProtocol
from media_ingest.infrastructure.storage.lazy_provider import LazyAdapterProvider
from media_ingest.models.errors import StorageNetworkError
from media_ingest.utils.constants import REST_PUBLIC_PATH
from media_ingest.utils.naming import build_object_key
from media_ingest.utils.urls import join_url, key_from_url

logger = Logger(UTC=True)


class RestStorageProvider(LazyAdapterProvider[RestAdapterProtocol]):
    """Media storage behind a REST object API with bearer authentication."""

    name = "rest"

    def __init__(self, settings: RestStorageSettings, adapter: RestAdapterProtocol | None = None) -> None:
        super().__init__(adapter)
        self._settings = settings
        logger.info("Storage provider initialized", extra={"provider": self.name, "bucket": settings.bucket})

    def _build_adapter(self) -> RestAdapterProtocol:
        return RestAdapter(self._settings)

    @property
    def public_base_url(self) -> str:
        base_url = (self._settings.base_url or "").rstrip("/")
        # Strip the "{key}" placeholder, keeping the bucket prefix
        return base_url + REST_PUBLIC_PATH.format(bucket=self._settings.bucket, key="")

    def _upload(self, file_data: bytes, filename: str, content_type: str, folder: str) -> str:
        adapter = self._get_adapter()
        key = build_object_key(folder, filename, content_type)

        try:
            response = adapter.put_object(key=key, body=file_data, content_type=content_type)
        except requests.RequestException as exc:
            raise StorageNetworkError(
                message=f"Object API upload failed: {exc}",
                details={"key": key},
            ) from exc

        if not response.ok:
            raise StorageNetworkError(
                message=f"Object API upload failed: {response.text}",
                details={"key": key, "status_code": response.status_code},
            )

        return join_url(self.public_base_url, key)

    def _delete(self, url: str) -> None:
        adapter = self._get_adapter()
        key = key_from_url(url, self.public_base_url, provider=self.name)

        try:
            response = adapter.delete_object(key=key)
        except requests.RequestException as exc:
            raise StorageNetworkError(
                message=f"Object API delete failed: {exc}",
                details={"key": key},
            ) from exc

        if response.status_code == HTTPStatus.NOT_FOUND:
            logger.info("Object already absent", extra={"key": key})
            return

        if not response.ok:
            raise StorageNetworkError(
                message=f"Object API delete failed: {response.text}",
                details={"key": key, "status_code": response.status_code},
            )
