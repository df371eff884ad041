"""Thin adapter for an HTTP object storage API."""

from typing import Protocol

import requests

from media_ingest.config import RestStorageSettings
from media_ingest.models.errors import ConfigurationError
from media_ingest.utils.constants import (
    ENV_REST_SERVICE_KEY,
    ENV_REST_STORAGE_URL,
    REST_OBJECT_PATH,
)


class RestAdapterProtocol(Protocol):
    """Minimal HTTP object API adapter protocol (provider-facing)."""

    def put_object(self, *, key: str, body: bytes, content_type: str) -> requests.Response: ...

    def delete_object(self, *, key: str) -> requests.Response: ...


class RestAdapter:
    """Low-level object API calls (mechanical, no error handling).

    This adapter:
    - Wraps a ``requests.Session`` carrying bearer authentication
    - Returns raw responses; transport errors bubble up
    - Provider implementations inspect status codes and translate errors
    """

    def __init__(self, settings: RestStorageSettings, session: requests.Session | None = None) -> None:
        """Prepare an authenticated session.

        Raises:
            ConfigurationError: If the base URL or service key is missing
        """
        missing = [
            env_name
            for env_name, value in (
                (ENV_REST_STORAGE_URL, settings.base_url),
                (ENV_REST_SERVICE_KEY, settings.service_key),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(
                message="HTTP object storage credentials not configured",
                details={"missing": missing},
            )

        self._base_url = (settings.base_url or "").rstrip("/")
        self._bucket = settings.bucket
        self._session = session or requests.Session()
        self._session.headers.update({"Authorization": f"Bearer {settings.service_key}"})

    def _object_url(self, key: str) -> str:
        return self._base_url + REST_OBJECT_PATH.format(bucket=self._bucket, key=key)

    def put_object(self, *, key: str, body: bytes, content_type: str) -> requests.Response:
        """Upload an object.
        Raises requests exceptions on transport failure.
        """
        return self._session.post(
            self._object_url(key),
            data=body,
            headers={"Content-Type": content_type},
        )

    def delete_object(self, *, key: str) -> requests.Response:
        """Delete an object.
        Raises requests exceptions on transport failure.
        """
        return self._session.delete(self._object_url(key))
