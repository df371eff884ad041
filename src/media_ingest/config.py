"""Storage configuration.

Settings are read from the environment once, validated into pydantic
models and injected into the storage providers. Required credentials are
optional here; each provider checks the values it needs on first use.
"""

from collections.abc import Mapping
from enum import Enum
import os
from pathlib import Path
import threading

from aws_lambda_powertools import Logger
from pydantic import BaseModel, ConfigDict, Field

from media_ingest.utils.constants import (
    DEFAULT_BUCKET_NAME,
    DEFAULT_CONTAINER_NAME,
    DEFAULT_LOCAL_UPLOAD_DIR,
    DEFAULT_S3_REGION,
    ENV_AZURE_ACCOUNT_KEY,
    ENV_AZURE_ACCOUNT_NAME,
    ENV_AZURE_CONTAINER_NAME,
    ENV_AZURE_PUBLIC_URL,
    ENV_LOCAL_UPLOAD_DIR,
    ENV_REST_BUCKET,
    ENV_REST_SERVICE_KEY,
    ENV_REST_STORAGE_URL,
    ENV_S3_ACCESS_KEY_ID,
    ENV_S3_ACCOUNT_ID,
    ENV_S3_BUCKET_NAME,
    ENV_S3_ENDPOINT_URL,
    ENV_S3_PUBLIC_URL,
    ENV_S3_REGION,
    ENV_S3_SECRET_ACCESS_KEY,
    ENV_STORAGE_PROVIDER,
)

logger = Logger(UTC=True)


class StorageBackend(str, Enum):
    """Closed set of storage backends."""

    LOCAL = "local"
    AZURE = "azure"
    S3 = "s3"
    REST = "rest"


class LocalStorageSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    root_dir: Path = Field(default_factory=lambda: Path.cwd() / DEFAULT_LOCAL_UPLOAD_DIR)


class AzureStorageSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    account_name: str | None = None
    account_key: str | None = None
    container_name: str = DEFAULT_CONTAINER_NAME
    public_url: str | None = None


class S3StorageSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    account_id: str | None = None
    access_key_id: str | None = None
    secret_access_key: str | None = None
    bucket_name: str = DEFAULT_BUCKET_NAME
    public_url: str | None = None
    endpoint_url: str | None = None
    region: str = DEFAULT_S3_REGION


class RestStorageSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_url: str | None = None
    service_key: str | None = None
    bucket: str = DEFAULT_BUCKET_NAME


class StorageSettings(BaseModel):
    """Process-wide storage configuration."""

    model_config = ConfigDict(frozen=True)

    provider: StorageBackend = StorageBackend.LOCAL
    local: LocalStorageSettings = Field(default_factory=LocalStorageSettings)
    azure: AzureStorageSettings = Field(default_factory=AzureStorageSettings)
    s3: S3StorageSettings = Field(default_factory=S3StorageSettings)
    rest: RestStorageSettings = Field(default_factory=RestStorageSettings)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "StorageSettings":
        """Build settings from environment variables.

        Empty strings are treated as unset. An unrecognised provider name
        falls back to local storage.
        """
        env = os.environ if environ is None else environ

        def get(name: str) -> str | None:
            value = env.get(name, "").strip()
            return value or None

        raw_provider = (get(ENV_STORAGE_PROVIDER) or StorageBackend.LOCAL.value).lower()
        try:
            provider = StorageBackend(raw_provider)
        except ValueError:
            logger.warning(
                "Unknown storage provider, falling back to local",
                extra={"provider": raw_provider},
            )
            provider = StorageBackend.LOCAL

        local_dir = get(ENV_LOCAL_UPLOAD_DIR)

        return cls(
            provider=provider,
            local=LocalStorageSettings(root_dir=Path(local_dir))
            if local_dir
            else LocalStorageSettings(),
            azure=AzureStorageSettings(
                account_name=get(ENV_AZURE_ACCOUNT_NAME),
                account_key=get(ENV_AZURE_ACCOUNT_KEY),
                container_name=get(ENV_AZURE_CONTAINER_NAME) or DEFAULT_CONTAINER_NAME,
                public_url=get(ENV_AZURE_PUBLIC_URL),
            ),
            s3=S3StorageSettings(
                account_id=get(ENV_S3_ACCOUNT_ID),
                access_key_id=get(ENV_S3_ACCESS_KEY_ID),
                secret_access_key=get(ENV_S3_SECRET_ACCESS_KEY),
                bucket_name=get(ENV_S3_BUCKET_NAME) or DEFAULT_BUCKET_NAME,
                public_url=get(ENV_S3_PUBLIC_URL),
                endpoint_url=get(ENV_S3_ENDPOINT_URL),
                region=get(ENV_S3_REGION) or DEFAULT_S3_REGION,
            ),
            rest=RestStorageSettings(
                base_url=get(ENV_REST_STORAGE_URL),
                service_key=get(ENV_REST_SERVICE_KEY),
                bucket=get(ENV_REST_BUCKET) or DEFAULT_BUCKET_NAME,
            ),
        )


_settings: StorageSettings | None = None
_settings_lock = threading.Lock()


def get_settings() -> StorageSettings:
    """Return the process-wide settings, reading the environment on first call."""
    global _settings
    if _settings is None:
        with _settings_lock:
            if _settings is None:
                _settings = StorageSettings.from_env()
    return _settings


def reset_settings() -> None:
    """Forget cached settings so the next call re-reads the environment."""
    global _settings
    with _settings_lock:
        _settings = None
