"""Thin adapter for interacting with an Azure Blob Storage container."""

from typing import Protocol

from azure.core.exceptions import ResourceExistsError
from azure.storage.blob import BlobServiceClient, ContainerClient, ContentSettings

from media_ingest.config import AzureStorageSettings
from media_ingest.models.errors import ConfigurationError
from media_ingest.utils.constants import (
    AZURE_CONNECTION_STRING_TEMPLATE,
    ENV_AZURE_ACCOUNT_KEY,
    ENV_AZURE_ACCOUNT_NAME,
)


class BlobAdapterProtocol(Protocol):
    """Minimal blob container adapter protocol (provider-facing)."""

    def ensure_container(self) -> None: ...

    def upload_blob(self, *, name: str, body: bytes, content_type: str) -> None: ...

    def delete_blob(self, *, name: str) -> None: ...


class BlobAdapter:
    """Low-level blob container operations (mechanical, no error handling).

    This adapter:
    - Wraps the azure-storage-blob container client
    - Does NOT handle errors (lets them bubble up)
    - Provider implementations catch and translate errors
    """

    def __init__(self, settings: AzureStorageSettings) -> None:
        """Create the container client from injected configuration.

        Raises:
            ConfigurationError: If the account name or key is missing
        """
        missing = [
            env_name
            for env_name, value in (
                (ENV_AZURE_ACCOUNT_NAME, settings.account_name),
                (ENV_AZURE_ACCOUNT_KEY, settings.account_key),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(
                message="Azure Storage credentials not configured",
                details={"missing": missing},
            )

        connection_string = AZURE_CONNECTION_STRING_TEMPLATE.format(
            account=settings.account_name,
            key=settings.account_key,
        )
        service = BlobServiceClient.from_connection_string(connection_string)
        self._container: ContainerClient = service.get_container_client(settings.container_name)

    def ensure_container(self) -> None:
        """Create the container with public blob access if it does not exist."""
        try:
            self._container.create_container(public_access="blob")
        except ResourceExistsError:
            pass

    def upload_blob(self, *, name: str, body: bytes, content_type: str) -> None:
        """Upload a block blob.
        Raises azure-core exceptions - caught by provider implementation.
        """
        self._container.upload_blob(
            name=name,
            data=body,
            length=len(body),
            content_settings=ContentSettings(content_type=content_type),
        )

    def delete_blob(self, *, name: str) -> None:
        """Delete a blob.
        Raises azure-core exceptions - caught by provider implementation.
        """
        self._container.delete_blob(name)
