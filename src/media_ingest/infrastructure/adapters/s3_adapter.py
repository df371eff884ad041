"""Thin adapter for interacting with S3-compatible object storage."""

from typing import Any, Protocol

import boto3

from media_ingest.config import S3StorageSettings
from media_ingest.models.errors import ConfigurationError
from media_ingest.utils.constants import (
    ENV_S3_ACCESS_KEY_ID,
    ENV_S3_ACCOUNT_ID,
    ENV_S3_SECRET_ACCESS_KEY,
    S3_ENDPOINT_TEMPLATE,
)


class _Boto3S3Client(Protocol):
    """Internal typing for boto3 S3 client (backend-facing only)."""

    def put_object(
        self,
        *,
        Bucket: str,
        Key: str,
        Body: bytes,
        ContentType: str,
    ) -> Any: ...

    def delete_object(
        self,
        *,
        Bucket: str,
        Key: str,
    ) -> Any: ...


class S3AdapterProtocol(Protocol):
    """Minimal S3 adapter protocol (provider-facing)."""

    def put_object(self, *, key: str, body: bytes, content_type: str) -> None: ...

    def delete_object(self, *, key: str) -> None: ...


class S3Adapter:
    """Low-level S3 operations (mechanical, no error handling).

    This adapter:
    - Wraps boto3 S3 client
    - Does NOT handle errors (lets them bubble up)
    - Provider implementations catch and translate errors
    """

    def __init__(self, settings: S3StorageSettings) -> None:
        """Create S3 client from injected configuration.

        Raises:
            ConfigurationError: If credentials are missing, or the account id
                is missing when no explicit endpoint is configured. No network
                call is made before this check.
        """
        missing = [
            env_name
            for env_name, value in (
                (ENV_S3_ACCOUNT_ID, settings.account_id or settings.endpoint_url),
                (ENV_S3_ACCESS_KEY_ID, settings.access_key_id),
                (ENV_S3_SECRET_ACCESS_KEY, settings.secret_access_key),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(
                message="S3 storage credentials not configured",
                details={"missing": missing},
            )

        self._bucket = settings.bucket_name
        self._client: _Boto3S3Client = boto3.client(
            "s3",
            endpoint_url=settings.endpoint_url
            or S3_ENDPOINT_TEMPLATE.format(account=settings.account_id),
            region_name=settings.region,
            aws_access_key_id=settings.access_key_id,
            aws_secret_access_key=settings.secret_access_key,
        )

    @property
    def bucket(self) -> str:
        return self._bucket

    def put_object(self, *, key: str, body: bytes, content_type: str) -> None:
        """Store object in S3.
        Raises boto3 exceptions - caught by provider implementation.
        """
        self._client.put_object(
            Bucket=self._bucket,
            Key=key,
            Body=body,
            ContentType=content_type,
        )

    def delete_object(self, *, key: str) -> None:
        """Delete object from S3.
        Raises boto3 exceptions - caught by provider implementation.
        """
        self._client.delete_object(
            Bucket=self._bucket,
            Key=key,
        )

