"""Unit tests for media content validation."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from media_ingest.models.media import DetectedType
from media_ingest.utils.validators import category_of, validate_image, validate_media, validate_video


class TestValidateImage:
    def test_valid_jpeg(self, jpeg_bytes: bytes) -> None:
        verdict = validate_image(jpeg_bytes, "image/jpeg")

        assert verdict.valid is True
        assert verdict.detected_type is DetectedType.JPEG
        assert verdict.error is None

    def test_valid_png(self, png_bytes: bytes) -> None:
        verdict = validate_image(png_bytes, "image/png")

        assert verdict.valid is True
        assert verdict.detected_type is DetectedType.PNG

    def test_valid_webp(self, webp_bytes: bytes) -> None:
        assert validate_image(webp_bytes, "image/webp").valid is True

    def test_gif_rejected_by_default(self, gif_bytes: bytes) -> None:
        verdict = validate_image(gif_bytes, "image/gif")

        assert verdict.valid is False
        assert verdict.error_code == "DISALLOWED_FORMAT"
        assert "Disallowed format" in (verdict.error or "")

    def test_gif_allowed_when_listed(self, gif_bytes: bytes) -> None:
        verdict = validate_image(gif_bytes, "image/gif", ["image/gif"])

        assert verdict.valid is True
        assert verdict.detected_type is DetectedType.GIF

    def test_png_spoofed_as_jpeg_is_rejected(self, png_bytes: bytes) -> None:
        verdict = validate_image(png_bytes, "image/jpeg", ["image/jpeg"])

        assert verdict.valid is False
        assert verdict.error_code == "CLAIMED_TYPE_NOT_ALLOWED"
        assert verdict.detected_type is DetectedType.PNG

    def test_png_spoofed_as_jpeg_rejected_even_if_both_allowed(self, png_bytes: bytes) -> None:
        verdict = validate_image(png_bytes, "image/jpeg")

        assert verdict.valid is False
        assert verdict.error_code == "CLAIMED_TYPE_NOT_ALLOWED"

    def test_unknown_content(self) -> None:
        verdict = validate_image(b"\x00\x01\x02\x03", "image/jpeg")

        assert verdict.valid is False
        assert verdict.error_code == "UNKNOWN_FORMAT"
        assert "Cannot identify format" in (verdict.error or "")

    def test_empty_buffer(self) -> None:
        verdict = validate_image(b"", "image/png")

        assert verdict.valid is False
        assert verdict.error_code == "UNKNOWN_FORMAT"

    def test_video_bytes_claimed_as_listed_image(self, mp4_bytes: bytes) -> None:
        verdict = validate_image(mp4_bytes, "image/png")

        assert verdict.valid is False
        assert verdict.error_code == "CLAIMED_TYPE_NOT_ALLOWED"

    def test_video_type_in_image_allow_list_is_still_rejected(self, mp4_bytes: bytes) -> None:
        verdict = validate_image(mp4_bytes, "video/mp4", ["video/mp4"])

        assert verdict.valid is False
        assert verdict.error_code == "CLAIMED_TYPE_NOT_ALLOWED"

    def test_oversized_image(self, png_bytes: bytes) -> None:
        verdict = validate_image(png_bytes + b"\x00" * 64, "image/png", max_size=32)

        assert verdict.valid is False
        assert verdict.error_code == "FILE_SIZE_EXCEEDED"

    def test_size_check_can_be_disabled(self, png_bytes: bytes) -> None:
        assert validate_image(png_bytes * 10, "image/png", max_size=None).valid is True


class TestValidateVideo:
    def test_valid_mp4(self, mp4_bytes: bytes) -> None:
        verdict = validate_video(mp4_bytes, "video/mp4")

        assert verdict.valid is True
        assert verdict.detected_type is DetectedType.MP4

    def test_quicktime_claim_for_ftyp_container(self, mp4_bytes: bytes) -> None:
        verdict = validate_video(mp4_bytes, "video/quicktime")

        assert verdict.valid is True
        assert verdict.detected_type is DetectedType.MP4

    def test_valid_webm(self, webm_bytes: bytes) -> None:
        assert validate_video(webm_bytes, "video/webm").valid is True

    def test_avi_rejected_by_default(self, avi_bytes: bytes) -> None:
        verdict = validate_video(avi_bytes, "video/x-msvideo")

        assert verdict.valid is False
        assert verdict.error_code == "DISALLOWED_FORMAT"

    def test_avi_allowed_when_listed(self, avi_bytes: bytes) -> None:
        verdict = validate_video(avi_bytes, "video/x-msvideo", ["video/x-msvideo"])

        assert verdict.valid is True
        assert verdict.detected_type is DetectedType.AVI

    def test_narrowed_allow_list_rejects_unlisted_container(self, mp4_bytes: bytes) -> None:
        verdict = validate_video(mp4_bytes, "video/quicktime", ["video/quicktime"])

        assert verdict.valid is False
        assert verdict.error_code == "CLAIMED_TYPE_NOT_ALLOWED"
        assert verdict.detected_type is DetectedType.MP4

    def test_avi_claimed_as_mp4(self, avi_bytes: bytes) -> None:
        verdict = validate_video(avi_bytes, "video/mp4")

        assert verdict.valid is False
        assert verdict.error_code == "CLAIMED_TYPE_NOT_ALLOWED"

    def test_image_bytes_claimed_as_video(self, jpeg_bytes: bytes) -> None:
        verdict = validate_video(jpeg_bytes, "video/mp4")

        assert verdict.valid is False
        assert verdict.detected_type is DetectedType.JPEG

    def test_image_claim_rejected(self, mp4_bytes: bytes) -> None:
        verdict = validate_video(mp4_bytes, "image/jpeg")

        assert verdict.valid is False
        assert verdict.error_code == "DISALLOWED_FORMAT"


class TestValidateMedia:
    def test_dispatches_images(self, png_bytes: bytes) -> None:
        assert validate_media(png_bytes, "image/png").detected_type is DetectedType.PNG

    def test_dispatches_videos(self, webm_bytes: bytes) -> None:
        assert validate_media(webm_bytes, "video/webm").detected_type is DetectedType.WEBM

    @pytest.mark.parametrize("claimed", ["application/pdf", "text/plain", ""])
    def test_neither_image_nor_video(self, png_bytes: bytes, claimed: str) -> None:
        verdict = validate_media(png_bytes, claimed)

        assert verdict.valid is False
        assert verdict.error_code == "NOT_MEDIA"
        assert "Neither image nor video" in (verdict.error or "")

    def test_verdict_is_immutable(self, png_bytes: bytes) -> None:
        verdict = validate_media(png_bytes, "image/png")

        with pytest.raises(PydanticValidationError):
            verdict.valid = False  # type: ignore[misc]


class TestCategoryOf:
    def test_category_of(self) -> None:
        assert category_of("image/png").value == "image"
        assert category_of("video/mp4").value == "video"
        assert category_of("audio/mpeg") is None
