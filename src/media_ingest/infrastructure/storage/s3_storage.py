"""S3-compatible bucket implementation of StorageProvider."""

from aws_lambda_powertools import Logger
from botocore.exceptions import BotoCoreError, ClientError

from media_ingest.config import S3StorageSettings
from media_ingest.infrastructure.adapters.s3_adapter import S3Adapter, S3AdapterProtocol
from media_ingest.infrastructure.storage.lazy_provider import LazyAdapterProvider
from media_ingest.models.errors import ConfigurationError, StorageNetworkError
from media_ingest.utils.constants import ENV_S3_ACCOUNT_ID, ENV_S3_PUBLIC_URL, S3_PUBLIC_URL_TEMPLATE
from media_ingest.utils.naming import build_object_key
from media_ingest.utils.urls import join_url, key_from_url

logger = Logger(UTC=True)


class S3StorageProvider(LazyAdapterProvider[S3AdapterProtocol]):
    """Media storage backed by an S3-compatible bucket (e.g. Cloudflare R2)."""

    name = "s3"

    def __init__(self, settings: S3StorageSettings, adapter: S3AdapterProtocol | None = None) -> None:
        super().__init__(adapter)
        self._settings = settings
        logger.info("Storage provider initialized", extra={"provider": self.name, "bucket": settings.bucket_name})

    def _build_adapter(self) -> S3AdapterProtocol:
        return S3Adapter(self._settings)

    @property
    def public_base_url(self) -> str:
        if self._settings.public_url:
            return self._settings.public_url
        if not self._settings.account_id:
            raise ConfigurationError(
                message="S3 public URL not configured",
                details={"missing": [ENV_S3_PUBLIC_URL, ENV_S3_ACCOUNT_ID]},
            )
        return S3_PUBLIC_URL_TEMPLATE.format(
            bucket=self._settings.bucket_name,
            account=self._settings.account_id,
        )

    def _upload(self, file_data: bytes, filename: str, content_type: str, folder: str) -> str:
        adapter = self._get_adapter()
        base_url = self.public_base_url
        key = build_object_key(folder, filename, content_type)

        try:
            adapter.put_object(key=key, body=file_data, content_type=content_type)
        except (ClientError, BotoCoreError) as exc:
            raise StorageNetworkError(
                message=f"S3 upload failed: {exc}",
                details={"key": key},
            ) from exc

        return join_url(base_url, key)

    def _delete(self, url: str) -> None:
        adapter = self._get_adapter()
        key = key_from_url(url, self.public_base_url, provider=self.name)

        # DeleteObject succeeds for absent keys
        try:
            adapter.delete_object(key=key)
        except (ClientError, BotoCoreError) as exc:
            raise StorageNetworkError(
                message=f"S3 delete failed: {exc}",
                details={"key": key},
            ) from exc
