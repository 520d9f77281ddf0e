"""
Pytest configuration and fixtures for portfolio-images tests.
Provides AWS mocking, DynamoDB, S3 and SES fixtures with proper cleanup.
"""

import os

os.environ.setdefault("AWS_REGION", "us-east-1")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("IMAGE_S3_BUCKET_NAME", "portfolio-images-test")
os.environ.setdefault("IMAGE_METADATA_TABLE_NAME", "portfolio-image-metadata-test")
os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "true")
os.environ.setdefault("POWERTOOLS_METRICS_NAMESPACE", "PortfolioImagesTest")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "portfolio-images")
os.environ.setdefault("FROM_NAME", "Test Studio")
os.environ.setdefault("FROM_EMAIL", "studio@example.com")
os.environ.setdefault("TO_EMAIL", "inbox@example.com")
os.environ.setdefault("ADMIN_USERNAME", "admin")
os.environ.setdefault("ADMIN_PASSWORD", "s3cret")

import base64  # noqa: E402
from collections.abc import Callable  # noqa: E402
import json  # noqa: E402
from types import SimpleNamespace  # noqa: E402
from typing import Any  # noqa: E402

import boto3  # noqa: E402
from botocore.exceptions import ClientError  # noqa: E402
from moto import mock_aws  # noqa: E402
import pytest  # noqa: E402

from portfolio_images.core.infrastructure.factory import reset_backends  # noqa: E402
from portfolio_images.core.models.image import ImageRecord  # noqa: E402


@pytest.fixture(autouse=True)
def _isolated_backends(monkeypatch):
    """Each test builds its own backends from its own environment."""
    for name in ("AWS_ENDPOINT_URL", "BLOB_STORE_BACKEND", "METADATA_STORE_BACKEND",
                 "IMAGE_PUBLIC_BASE_URL", "IMAGE_KEY_PREFIX", "MAX_UPLOAD_BYTES"):
        monkeypatch.delenv(name, raising=False)

    reset_backends()
    yield
    reset_backends()


@pytest.fixture(scope="function")
def aws_mock():
    with mock_aws():
        yield


@pytest.fixture(scope="function")
def dynamodb_resource(aws_mock):
    return boto3.resource("dynamodb", region_name=os.getenv("AWS_REGION"))


@pytest.fixture(scope="function")
def dynamodb_table(dynamodb_resource):
    """
    Create the metadata table keyed by `imageKey`.

    moto discards the table when the mock context exits.
    """
    table = dynamodb_resource.create_table(
        TableName=os.getenv("IMAGE_METADATA_TABLE_NAME"),
        BillingMode="PAY_PER_REQUEST",
        KeySchema=[{"AttributeName": "imageKey", "KeyType": "HASH"}],
        AttributeDefinitions=[{"AttributeName": "imageKey", "AttributeType": "S"}],
    )
    table.wait_until_exists()
    return table


@pytest.fixture
def dynamodb_put_item(dynamodb_table) -> Callable[[dict[str, Any]], dict[str, Any]]:
    """
    Helper to insert a single item into DynamoDB.

    Usage:
        item = dynamodb_put_item({"imageKey": "hero-1", ...})
    """

    def _put(item: dict[str, Any]) -> dict[str, Any]:
        dynamodb_table.put_item(Item=item)
        return item

    return _put


@pytest.fixture
def dynamodb_get_item(dynamodb_table) -> Callable[[str], dict[str, Any] | None]:
    def _get(image_key: str) -> dict[str, Any] | None:
        response: dict[str, Any] = dynamodb_table.get_item(Key={"imageKey": image_key})
        item: dict[str, Any] | None = response.get("Item")
        return item

    return _get


@pytest.fixture(scope="function")
def s3_client(aws_mock):
    """S3 client for bucket operations."""
    return boto3.client("s3", region_name=os.getenv("AWS_REGION"))


@pytest.fixture(scope="function")
def s3_bucket(s3_client):
    """Create the image bucket. moto discards it when the mock context exits."""
    s3_client.create_bucket(Bucket=os.getenv("IMAGE_S3_BUCKET_NAME"))
    return s3_client


@pytest.fixture
def s3_put_object(s3_bucket) -> Callable[..., dict[str, Any]]:
    """
    Helper to upload an object to S3.

    Usage:
        response = s3_put_object("portfolio/image-1.jpg", image_bytes, "image/jpeg")
    """

    def _put(key: str, body: bytes, content_type: str = "application/octet-stream"):
        return s3_bucket.put_object(
            Bucket=os.getenv("IMAGE_S3_BUCKET_NAME"),
            Key=key,
            Body=body,
            ContentType=content_type,
        )

    return _put


@pytest.fixture
def s3_get_object(s3_bucket) -> Callable[[str], bytes]:
    """
    Helper to get an object from S3.

    Usage:
        content = s3_get_object("portfolio/image-1.jpg")
    """

    def _get(key: str) -> bytes:
        response: dict[str, Any] = s3_bucket.get_object(
            Bucket=os.getenv("IMAGE_S3_BUCKET_NAME"),
            Key=key,
        )
        data: bytes = response["Body"].read()
        return data

    return _get


@pytest.fixture
def s3_object_exists(s3_bucket) -> Callable[[str], bool]:
    def _exists(key: str) -> bool:
        try:
            s3_bucket.head_object(Bucket=os.getenv("IMAGE_S3_BUCKET_NAME"), Key=key)
        except ClientError:
            return False
        return True

    return _exists


@pytest.fixture(scope="function")
def ses_client(aws_mock):
    """SES client with the sender identity verified."""
    client = boto3.client("ses", region_name=os.getenv("AWS_REGION"))
    client.verify_email_identity(EmailAddress=os.getenv("FROM_EMAIL"))
    return client


@pytest.fixture
def local_backends(tmp_path, monkeypatch):
    """Select the filesystem blob store and the JSON file metadata store."""
    upload_dir = tmp_path / "uploads"
    metadata_file = tmp_path / "imageData.json"

    monkeypatch.setenv("BLOB_STORE_BACKEND", "local")
    monkeypatch.setenv("METADATA_STORE_BACKEND", "json_file")
    monkeypatch.setenv("UPLOAD_DIR", str(upload_dir))
    monkeypatch.setenv("UPLOAD_URL_PREFIX", "/uploads")
    monkeypatch.setenv("IMAGE_METADATA_FILE", str(metadata_file))
    reset_backends()

    return {"upload_dir": upload_dir, "metadata_file": metadata_file}


@pytest.fixture
def aws_backends(dynamodb_table, s3_bucket):
    """Select S3 and DynamoDB (the defaults) inside the moto mock."""
    return {"table": dynamodb_table, "s3": s3_bucket}


@pytest.fixture
def sample_record() -> ImageRecord:
    return ImageRecord(
        image_key="hero-1",
        url="https://portfolio-images-test.s3.amazonaws.com/portfolio/image-1.jpg",
        storage_handle="portfolio/image-1.jpg",
        original_name="hero.jpg",
        size_bytes=2048,
        mime_type="image/jpeg",
        uploaded_at="2024-01-01T10:00:00.000+00:00",
    )


@pytest.fixture
def sample_image_binary() -> bytes:
    """Sample binary image data (1x1 PNG)."""
    png_base64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk+M9QDwADhgGAWjR9awAAAABJRU5ErkJggg=="
    return base64.b64decode(png_base64)


@pytest.fixture
def sample_jpeg_binary() -> bytes:
    """Sample binary JPEG data (minimal valid JPEG)."""
    return (
        b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00"
        b"\xff\xdb\x00C\x00\x08\x06\x06\x07\x06\x05\x08\x07\x07\x07\t\t\x08\n\x0c"
        b"\x14\r\x0c\x0b\x0b\x0c\x19\x12\x13\x0f\x14\x1d\x1a\x1f\x1e\x1d\x1a\x1c"
        b"\x1c $.' \",#\x1c\x1c(7),01444\x1f'9=82<.342\xff\xc0\x00\x0b\x08"
        b"\x00\x01\x00\x01\x01\x01\x11\x00\xff\xc4\x00\x14\x00\x01\x00\x00\x00"
        b"\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\t\xff\xc4\x00\x14\x10"
        b"\x01\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00"
        b"\xff\xda\x00\x08\x01\x01\x00\x00?\x00\x7f\x00\xff\xd9"
    )

@pytest.fixture
def lambda_context():
    return SimpleNamespace(
        aws_request_id="test-request-id",
        function_name="test-function",
        memory_limit_in_mb=256,
        invoked_function_arn="arn:aws:lambda:us-east-1:000000000000:function:test",
        log_group_name="/aws/lambda/test-function",
        log_stream_name="2024/01/01/[$LATEST]test",
        get_remaining_time_in_millis=lambda: 30000,
    )


@pytest.fixture
def make_upload_event():
    def _make(
        file_data: bytes | None,
        image_key: str | None = "hero-1",
        *,
        file_name: str | None = "hero.png",
        mime_type: str | None = None,
    ) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if file_data is not None:
            body["image"] = base64.b64encode(file_data).decode("utf-8")
        if image_key is not None:
            body["imageKey"] = image_key
        if file_name is not None:
            body["fileName"] = file_name
        if mime_type is not None:
            body["mimeType"] = mime_type

        return {
            "httpMethod": "POST",
            "path": "/api/upload",
            "body": json.dumps(body),
            "headers": {"Content-Type": "application/json"},
        }

    return _make


@pytest.fixture
def make_key_event():
    def _make(image_key: str | None, method: str = "GET") -> dict[str, Any]:
        return {
            "httpMethod": method,
            "path": f"/api/images/{image_key}",
            "pathParameters": {"key": image_key} if image_key is not None else None,
        }

    return _make


@pytest.fixture
def list_images_event() -> dict[str, Any]:
    return {"httpMethod": "GET", "path": "/api/images"}
