"""
Pytest configuration and fixtures for media-ingest tests.
Provides sample media buffers, storage settings and AWS mocking with
proper cleanup of the process-wide provider and settings caches.
"""

from collections.abc import Iterator
from pathlib import Path

import boto3
import pytest
from moto import mock_aws

from media_ingest.config import (
    AzureStorageSettings,
    LocalStorageSettings,
    RestStorageSettings,
    S3StorageSettings,
    reset_settings,
)
from media_ingest.storage import reset_storage_provider

S3_TEST_ENDPOINT = "https://s3.us-east-1.amazonaws.com"
S3_TEST_REGION = "us-east-1"


@pytest.fixture(autouse=True)
def _reset_process_state() -> Iterator[None]:
    """Forget memoized settings and provider around every test."""
    reset_settings()
    reset_storage_provider()
    yield
    reset_settings()
    reset_storage_provider()


# ============================================================================
# Sample media buffers
# ============================================================================


@pytest.fixture
def jpeg_bytes() -> bytes:
    """Minimal JFIF header."""
    return b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00"


@pytest.fixture
def png_bytes() -> bytes:
    """Sample binary image data (PNG signature + IHDR start)."""
    return b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR"


@pytest.fixture
def webp_bytes() -> bytes:
    return b"RIFF\x24\x00\x00\x00WEBPVP8 "


@pytest.fixture
def gif_bytes() -> bytes:
    return b"GIF89a\x01\x00\x01\x00\x80\x00\x00"


@pytest.fixture
def mp4_bytes() -> bytes:
    return b"\x00\x00\x00\x20ftypisom\x00\x00\x02\x00"


@pytest.fixture
def webm_bytes() -> bytes:
    return b"\x1a\x45\xdf\xa3\x9f\x42\x86\x81\x01"


@pytest.fixture
def avi_bytes() -> bytes:
    return b"RIFF\x24\x00\x00\x00AVI LIST"


# ============================================================================
# Provider settings
# ============================================================================


@pytest.fixture
def local_settings(tmp_path: Path) -> LocalStorageSettings:
    return LocalStorageSettings(root_dir=tmp_path / "uploads")


@pytest.fixture
def s3_settings() -> S3StorageSettings:
    return S3StorageSettings(
        account_id="acct123",
        access_key_id="testing",
        secret_access_key="testing",
        bucket_name="media-test",
    )


@pytest.fixture
def azure_settings() -> AzureStorageSettings:
    return AzureStorageSettings(
        account_name="mediaacct",
        account_key="a2V5",
        container_name="uploads",
    )


@pytest.fixture
def rest_settings() -> RestStorageSettings:
    return RestStorageSettings(
        base_url="https://project.example.co",
        service_key="service-role-key",
        bucket="uploads",
    )


# ============================================================================
# AWS mocking
# ============================================================================


@pytest.fixture(scope="function")
def aws_mock(monkeypatch) -> Iterator[None]:
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    with mock_aws():
        yield


@pytest.fixture(scope="function")
def moto_s3_settings(s3_settings: S3StorageSettings) -> S3StorageSettings:
    """S3 settings pointing at an endpoint moto intercepts."""
    return s3_settings.model_copy(
        update={"endpoint_url": S3_TEST_ENDPOINT, "region": S3_TEST_REGION}
    )


@pytest.fixture(scope="function")
def s3_bucket(aws_mock, moto_s3_settings: S3StorageSettings):
    """Create the test bucket and return a raw S3 client for assertions."""
    client = boto3.client("s3", region_name=S3_TEST_REGION)
    client.create_bucket(Bucket=moto_s3_settings.bucket_name)
    return client
