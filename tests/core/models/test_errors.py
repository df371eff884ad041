"""
Unit tests for media_ingest.models.errors
"""

import pytest

from media_ingest.models.errors import (
    ConfigurationError,
    FilesystemError,
    InvalidURLError,
    MediaIngestError,
    NotFoundError,
    StorageNetworkError,
    ValidationError,
)


class TestMediaIngestError:
    def test_base_error(self) -> None:
        err = MediaIngestError(
            message="Something went wrong",
            error_code="TEST_ERROR",
            details={"foo": "bar"},
        )

        assert isinstance(err, Exception)
        assert err.message == "Something went wrong"
        assert err.error_code == "TEST_ERROR"
        assert err.details == {"foo": "bar"}
        assert str(err) == "Something went wrong"

    def test_requires_keyword_arguments(self) -> None:
        with pytest.raises(TypeError):
            MediaIngestError("message", "CODE")  # type: ignore[misc]


@pytest.mark.parametrize(
    ("error_cls", "expected_code"),
    [
        (ValidationError, "VALIDATION_FAILED"),
        (ConfigurationError, "CONFIGURATION_ERROR"),
        (StorageNetworkError, "NETWORK_ERROR"),
        (NotFoundError, "NOT_FOUND"),
        (InvalidURLError, "INVALID_URL"),
        (FilesystemError, "FILESYSTEM_ERROR"),
    ],
)
class TestErrorDefaults:
    def test_default_code(self, error_cls: type[MediaIngestError], expected_code: str) -> None:
        err = error_cls(message="boom")

        assert isinstance(err, MediaIngestError)
        assert err.error_code == expected_code
        assert err.details == {}

    def test_code_and_details_override(self, error_cls: type[MediaIngestError], expected_code: str) -> None:
        err = error_cls(message="boom", error_code="CUSTOM", details={"key": "a/b.jpg"})

        assert err.error_code == "CUSTOM"
        assert err.details == {"key": "a/b.jpg"}
