"""Azure Blob Storage implementation of StorageProvider."""

from aws_lambda_powertools import Logger
from azure.core.exceptions import AzureError, ResourceNotFoundError

from media_ingest.config import AzureStorageSettings
from media_ingest.infrastructure.adapters.blob_adapter import BlobAdapter, BlobAdapterProtocol
from media_ingest.infrastructure.storage.lazy_provider import LazyAdapterProvider
from media_ingest.models.errors import StorageNetworkError
from media_ingest.utils.constants import AZURE_BLOB_URL_TEMPLATE
from media_ingest.utils.naming import build_object_key
from media_ingest.utils.urls import join_url, key_from_url

logger = Logger(UTC=True)


class AzureBlobStorageProvider(LazyAdapterProvider[BlobAdapterProtocol]):
    """Media storage backed by a blob container."""

    name = "azure"

    def __init__(self, settings: AzureStorageSettings, adapter: BlobAdapterProtocol | None = None) -> None:
        super().__init__(adapter)
        self._settings = settings
        logger.info(
            "Storage provider initialized",
            extra={"provider": self.name, "container": settings.container_name},
        )

    def _build_adapter(self) -> BlobAdapterProtocol:
        return BlobAdapter(self._settings)

    def _on_adapter_ready(self, adapter: BlobAdapterProtocol) -> None:
        try:
            adapter.ensure_container()
        except AzureError as exc:
            raise StorageNetworkError(
                message=f"Unable to prepare blob container: {exc}",
                details={"container": self._settings.container_name},
            ) from exc

    @property
    def public_base_url(self) -> str:
        return self._settings.public_url or AZURE_BLOB_URL_TEMPLATE.format(
            account=self._settings.account_name,
            container=self._settings.container_name,
        )

    def _upload(self, file_data: bytes, filename: str, content_type: str, folder: str) -> str:
        adapter = self._get_adapter()
        key = build_object_key(folder, filename, content_type)

        try:
            adapter.upload_blob(name=key, body=file_data, content_type=content_type)
        except AzureError as exc:
            raise StorageNetworkError(
                message=f"Azure Blob upload failed: {exc}",
                details={"key": key},
            ) from exc

        return join_url(self.public_base_url, key)

    def _delete(self, url: str) -> None:
        adapter = self._get_adapter()
        key = key_from_url(url, self.public_base_url, provider=self.name)

        try:
            adapter.delete_blob(name=key)
        except ResourceNotFoundError:
            logger.info("Blob already absent", extra={"key": key})
        except AzureError as exc:
            raise StorageNetworkError(
                message=f"Azure Blob delete failed: {exc}",
                details={"key": key},
            ) from exc
