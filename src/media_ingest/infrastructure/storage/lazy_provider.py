"""Base class for providers whose backend client is built on first use."""

from abc import abstractmethod
import threading
from typing import Generic, TypeVar

from media_ingest.repositories.storage_repository import StorageProvider

AdapterT = TypeVar("AdapterT")


class LazyAdapterProvider(StorageProvider, Generic[AdapterT]):
    """Provider that builds its backend adapter once, on first use.

    Adapter construction validates configuration before any I/O, so a
    missing credential surfaces as a ``ConfigurationError`` on the first
    upload or delete instead of at import time.
    """

    def __init__(self, adapter: AdapterT | None = None) -> None:
        self._adapter = adapter
        self._adapter_lock = threading.Lock()

    def _get_adapter(self) -> AdapterT:
        if self._adapter is None:
            with self._adapter_lock:
                if self._adapter is None:
                    adapter = self._build_adapter()
                    self._on_adapter_ready(adapter)
                    self._adapter = adapter
        return self._adapter

    @abstractmethod
    def _build_adapter(self) -> AdapterT:
        """Create the adapter.

        Raises:
            ConfigurationError: If required settings are missing
        """

    def _on_adapter_ready(self, adapter: AdapterT) -> None:
        """Hook for one-time backend preparation after construction."""
