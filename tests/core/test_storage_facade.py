import threading

import pytest

from media_ingest import storage
from media_ingest.config import StorageBackend, StorageSettings
from media_ingest.infrastructure.storage.blob_storage import AzureBlobStorageProvider
from media_ingest.infrastructure.storage.local_storage import LocalStorageProvider
from media_ingest.infrastructure.storage.rest_storage import RestStorageProvider
from media_ingest.infrastructure.storage.s3_storage import S3StorageProvider
from media_ingest.storage import (
    create_storage_provider,
    delete_file,
    get_storage_provider,
    reset_storage_provider,
    upload_file,
)


class TestCreateStorageProvider:
    @pytest.mark.parametrize(
        ("backend", "provider_cls"),
        [
            (StorageBackend.LOCAL, LocalStorageProvider),
            (StorageBackend.AZURE, AzureBlobStorageProvider),
            (StorageBackend.S3, S3StorageProvider),
            (StorageBackend.REST, RestStorageProvider),
        ],
    )
    def test_selects_provider(self, backend, provider_cls) -> None:
        assert isinstance(create_storage_provider(StorageSettings(provider=backend)), provider_cls)


class TestGetStorageProvider:
    def test_memoized(self) -> None:
        first = get_storage_provider(StorageSettings(provider=StorageBackend.REST))

        assert get_storage_provider(StorageSettings(provider=StorageBackend.S3)) is first
        assert isinstance(first, RestStorageProvider)

    def test_reads_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("STORAGE_PROVIDER", "azure")

        assert isinstance(get_storage_provider(), AzureBlobStorageProvider)

    def test_reset(self) -> None:
        first = get_storage_provider(StorageSettings(provider=StorageBackend.LOCAL))
        reset_storage_provider()

        assert get_storage_provider(StorageSettings(provider=StorageBackend.LOCAL)) is not first

    def test_concurrent_first_calls_build_once(self, monkeypatch) -> None:
        calls = []
        original = storage.create_storage_provider

        def counting_factory(settings):
            calls.append(settings.provider)
            return original(settings)

        monkeypatch.setattr(storage, "create_storage_provider", counting_factory)
        settings = StorageSettings(provider=StorageBackend.LOCAL)
        barrier = threading.Barrier(8)
        results = []

        def worker() -> None:
            barrier.wait()
            results.append(get_storage_provider(settings))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(calls) == 1
        assert len({id(provider) for provider in results}) == 1


class TestFacadeOperations:
    def test_local_round_trip(self, monkeypatch, tmp_path, png_bytes) -> None:
        monkeypatch.setenv("STORAGE_PROVIDER", "local")
        monkeypatch.setenv("LOCAL_UPLOAD_DIR", str(tmp_path))

        uploaded = upload_file(png_bytes, "me.png", "image/png", "avatars")

        assert uploaded.success is True
        stored = tmp_path / (uploaded.url or "").removeprefix("/uploads/")
        assert stored.read_bytes() == png_bytes

        deleted = delete_file(uploaded.url or "")

        assert deleted.success is True
        assert not stored.exists()

    def test_missing_s3_credentials(self, monkeypatch, png_bytes) -> None:
        monkeypatch.setenv("STORAGE_PROVIDER", "s3")
        for name in ("S3_ACCOUNT_ID", "S3_ACCESS_KEY_ID", "S3_SECRET_ACCESS_KEY"):
            monkeypatch.delenv(name, raising=False)

        result = upload_file(png_bytes, "me.png", "image/png", "avatars")

        assert result.success is False
        assert result.error_code == "CONFIGURATION_ERROR"

    def test_delete_foreign_url(self, monkeypatch, tmp_path) -> None:
        monkeypatch.setenv("STORAGE_PROVIDER", "local")
        monkeypatch.setenv("LOCAL_UPLOAD_DIR", str(tmp_path))

        result = delete_file("https://elsewhere.example.com/uploads/avatars/1-0123456789abcdef0123456789abcdef.png")

        assert result.success is False
        assert result.error_code == "INVALID_URL"
