import base64

from pydantic import ValidationError as PydanticValidationError
import pytest

from portfolio_images.handlers.upload_image.models import ImageUploadRequest, ImageUploadResponse


def _encode(data: bytes) -> str:
    return base64.b64encode(data).decode("utf-8")


class TestImageUploadRequest:
    def test_aliases(self, sample_image_binary) -> None:
        request = ImageUploadRequest.model_validate(
            {
                "image": _encode(sample_image_binary),
                "imageKey": " hero-1 ",
                "fileName": "hero.png",
                "mimeType": "image/png",
            }
        )

        assert request.image_key == "hero-1"
        assert request.file_name == "hero.png"
        assert request.mime_type == "image/png"

    def test_everything_optional(self) -> None:
        request = ImageUploadRequest.model_validate({})

        assert request.image is None
        assert request.to_uploaded_file() is None

    def test_invalid_base64(self) -> None:
        with pytest.raises(PydanticValidationError, match="Invalid base64 encoded file"):
            ImageUploadRequest.model_validate({"image": "!!!invalid!!!", "imageKey": "k"})

    def test_size_limit(self, monkeypatch) -> None:
        monkeypatch.setenv("MAX_UPLOAD_BYTES", "10")

        with pytest.raises(PydanticValidationError, match="File size exceeds 10.0 B limit"):
            ImageUploadRequest.model_validate({"image": _encode(b"x" * 11), "imageKey": "k"})

    def test_to_uploaded_file_sniffs_mime_type(self, sample_jpeg_binary) -> None:
        request = ImageUploadRequest.model_validate(
            {"image": _encode(sample_jpeg_binary), "imageKey": "k", "fileName": "hero.jpg"}
        )

        uploaded = request.to_uploaded_file()

        assert uploaded.file_data == sample_jpeg_binary
        assert uploaded.mime_type == "image/jpeg"
        assert uploaded.original_name == "hero.jpg"
        assert uploaded.size_bytes == len(sample_jpeg_binary)

    def test_declared_mime_type_wins(self, sample_jpeg_binary) -> None:
        request = ImageUploadRequest.model_validate(
            {"image": _encode(sample_jpeg_binary), "mimeType": "application/pdf"}
        )

        assert request.to_uploaded_file().mime_type == "application/pdf"

    def test_default_original_name(self, sample_image_binary) -> None:
        request = ImageUploadRequest.model_validate({"image": _encode(sample_image_binary)})
        assert request.to_uploaded_file().original_name == "image"


def test_response_serializes_wire_names() -> None:
    response = ImageUploadResponse(image_url="/uploads/a.png", image_key="hero-1")

    assert response.model_dump(by_alias=True, exclude_none=True) == {
        "success": True,
        "imageUrl": "/uploads/a.png",
        "imageKey": "hero-1",
    }
