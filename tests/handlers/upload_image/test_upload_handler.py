import json
from unittest.mock import patch

from portfolio_images.core.models.errors import BlobStorageError, MetadataStorageError
from portfolio_images.handlers.upload_image.handler import handler


def _body(response):
    return json.loads(response["body"])


class TestUploadHandler:
    def test_upload_success_local(
        self, local_backends, lambda_context, make_upload_event, sample_image_binary
    ) -> None:
        response = handler(make_upload_event(sample_image_binary), lambda_context)

        assert response["statusCode"] == 200
        body = _body(response)

        assert body["success"] is True
        assert body["imageKey"] == "hero-1"
        assert body["imageUrl"] == f"/uploads/{body['publicId']}"
        assert (local_backends["upload_dir"] / body["publicId"]).read_bytes() == sample_image_binary

    def test_upload_success_aws(
        self, aws_backends, lambda_context, make_upload_event, sample_jpeg_binary, s3_get_object
    ) -> None:
        response = handler(
            make_upload_event(sample_jpeg_binary, file_name="hero.jpg"),
            lambda_context,
        )

        assert response["statusCode"] == 200
        body = _body(response)

        assert body["publicId"].startswith("portfolio/image-")
        assert body["publicId"].endswith(".jpg")
        assert s3_get_object(body["publicId"]) == sample_jpeg_binary

        item = aws_backends["table"].get_item(Key={"imageKey": "hero-1"})["Item"]
        assert item["mimetype"] == "image/jpeg"
        assert item["url"] == body["imageUrl"]

    def test_missing_file(self, local_backends, lambda_context, make_upload_event) -> None:
        response = handler(make_upload_event(None), lambda_context)

        assert response["statusCode"] == 400
        assert _body(response)["error"] == "No file uploaded"
        assert not local_backends["metadata_file"].exists()

    def test_missing_image_key(
        self, local_backends, lambda_context, make_upload_event, sample_image_binary
    ) -> None:
        response = handler(make_upload_event(sample_image_binary, image_key=None), lambda_context)

        assert response["statusCode"] == 400
        assert _body(response)["error"] == "Image key is required"
        assert not local_backends["upload_dir"].exists()

    def test_non_image_rejected(self, local_backends, lambda_context, make_upload_event) -> None:
        response = handler(
            make_upload_event(b"%PDF-1.7", file_name="cv.pdf", mime_type="application/pdf"),
            lambda_context,
        )

        assert response["statusCode"] == 400
        body = _body(response)
        assert body["error"] == "Only image files are allowed"
        assert body["code"] == "UNSUPPORTED_MIME_TYPE"
        assert not local_backends["upload_dir"].exists()

    def test_invalid_base64(self, local_backends, lambda_context) -> None:
        event = {"body": json.dumps({"image": "!!!invalid!!!", "imageKey": "hero-1"})}

        response = handler(event, lambda_context)

        assert response["statusCode"] == 400
        assert _body(response)["details"]["errors"][0]["field"] == "image"

    def test_file_too_large(
        self, local_backends, lambda_context, make_upload_event, monkeypatch
    ) -> None:
        monkeypatch.setenv("MAX_UPLOAD_BYTES", "16")

        response = handler(make_upload_event(b"\x89PNG\r\n\x1a\n" + b"x" * 16), lambda_context)

        assert response["statusCode"] == 400
        assert "File size exceeds" in _body(response)["error"]

    def test_invalid_json(self, local_backends, lambda_context) -> None:
        response = handler({"body": "{not json"}, lambda_context)

        assert response["statusCode"] == 400
        assert _body(response)["error"] == "Invalid JSON body"

    def test_blob_store_failure(
        self, local_backends, lambda_context, make_upload_event, sample_image_binary
    ) -> None:
        with patch(
            "portfolio_images.handlers.upload_image.service.UploadService.upload_image",
            side_effect=BlobStorageError(message="Unable to upload image at this time"),
        ):
            response = handler(make_upload_event(sample_image_binary), lambda_context)

        assert response["statusCode"] == 500
        assert _body(response)["error"] == "Unable to upload image at this time"

    def test_metadata_failure(
        self, local_backends, lambda_context, make_upload_event, sample_image_binary
    ) -> None:
        with patch(
            "portfolio_images.core.infrastructure.local.json_file_metadata.JsonFileMetadata.upsert_record",
            side_effect=MetadataStorageError(message="Unable to save image metadata at this time"),
        ):
            response = handler(make_upload_event(sample_image_binary), lambda_context)

        assert response["statusCode"] == 500
        # the blob stays behind for the orphan sweep
        assert len(list(local_backends["upload_dir"].iterdir())) == 1

    def test_options_preflight(self, lambda_context) -> None:
        response = handler({"httpMethod": "OPTIONS"}, lambda_context)
        assert response["statusCode"] == 204
