"""S3-backed implementation of ImageStorageRepository."""

import os

from aws_lambda_powertools import Logger
from botocore.exceptions import ClientError

from portfolio_images.core.infrastructure.adapters.s3_adapter import S3Adapter, S3AdapterProtocol
from portfolio_images.core.models.errors import BlobStorageError
from portfolio_images.core.models.image import StoredBlob
from portfolio_images.core.repositories.storage_repository import ImageStorageRepository
from portfolio_images.core.utils.constants import (
    DEFAULT_IMAGE_KEY_PREFIX,
    ENV_IMAGE_KEY_PREFIX,
    ENV_IMAGE_PUBLIC_BASE_URL,
    ERROR_CODE_BLOB_DELETE_FAILED,
    ERROR_CODE_BLOB_LIST_FAILED,
    ERROR_CODE_BLOB_UPLOAD_FAILED,
)
from portfolio_images.core.utils.naming import generate_blob_name

logger = Logger(utc=True)

_MISSING_OBJECT_CODES = frozenset({"404", "NoSuchKey", "NotFound"})


class S3ImageStorage(ImageStorageRepository):
    """Image storage implementation backed by Amazon S3.

    The deletion handle is the S3 object key.
    """

    def __init__(
        self,
        adapter: S3AdapterProtocol | None = None,
        *,
        key_prefix: str | None = None,
        public_base_url: str | None = None,
    ) -> None:
        """Create storage using the provided S3 adapter."""
        self._s3: S3AdapterProtocol = adapter or S3Adapter()
        self._prefix = (
            key_prefix or os.getenv(ENV_IMAGE_KEY_PREFIX) or DEFAULT_IMAGE_KEY_PREFIX
        ).strip("/")
        self._public_base_url = public_base_url or os.getenv(ENV_IMAGE_PUBLIC_BASE_URL)

    def store_blob(
        self,
        *,
        file_data: bytes,
        original_name: str,
        mime_type: str,
    ) -> StoredBlob:
        """Upload image bytes to S3 and return the public URL and object key."""
        key = f"{self._prefix}/{generate_blob_name(original_name, mime_type)}"

        logger.debug(
            "Uploading image",
            extra={"key": key, "size": len(file_data), "mime_type": mime_type},
        )

        try:
            self._s3.put_object(
                key=key,
                body=file_data,
                content_type=mime_type,
                metadata={"original_name": original_name},
            )
        except ClientError as exc:
            logger.error("S3 upload failed", extra={"key": key})
            raise BlobStorageError(
                message="Unable to upload image at this time",
                error_code=ERROR_CODE_BLOB_UPLOAD_FAILED,
                details={"key": key},
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error uploading image")
            raise BlobStorageError(
                message="Unable to upload image at this time",
                error_code=ERROR_CODE_BLOB_UPLOAD_FAILED,
                details={"key": key},
            ) from exc

        logger.info("Image uploaded successfully", extra={"key": key})
        return StoredBlob(url=self.public_url(key), handle=key)

    def remove_blob(self, *, handle: str) -> bool:
        """Delete an image object from S3, treating a missing object as already removed."""
        logger.debug("Deleting image", extra={"key": handle})

        try:
            self._s3.head_object(key=handle)
        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") in _MISSING_OBJECT_CODES:
                logger.info("Image already absent from S3", extra={"key": handle})
                return False

            logger.error("S3 head_object failed", extra={"key": handle})
            raise BlobStorageError(
                message="Unable to delete image at this time",
                error_code=ERROR_CODE_BLOB_DELETE_FAILED,
                details={"key": handle},
            ) from exc

        try:
            self._s3.delete_object(key=handle)
        except ClientError as exc:
            logger.error("S3 deletion failed", extra={"key": handle})
            raise BlobStorageError(
                message="Unable to delete image at this time",
                error_code=ERROR_CODE_BLOB_DELETE_FAILED,
                details={"key": handle},
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error deleting image")
            raise BlobStorageError(
                message="Unable to delete image at this time",
                error_code=ERROR_CODE_BLOB_DELETE_FAILED,
                details={"key": handle},
            ) from exc

        logger.info("Image deleted successfully", extra={"key": handle})
        return True

    def list_handles(self) -> list[str]:
        """List every object key under the configured prefix."""
        try:
            return self._s3.list_keys(prefix=f"{self._prefix}/")
        except ClientError as exc:
            logger.error("S3 listing failed", extra={"prefix": self._prefix})
            raise BlobStorageError(
                message="Unable to list stored images",
                error_code=ERROR_CODE_BLOB_LIST_FAILED,
                details={"prefix": self._prefix},
            ) from exc

    def public_url(self, key: str) -> str:
        """Return the public URL of an object key."""
        if self._public_base_url:
            return f"{self._public_base_url.rstrip('/')}/{key}"

        region = self._s3.region
        if region and region != "us-east-1":
            return f"https://{self._s3.bucket}.s3.{region}.amazonaws.com/{key}"

        return f"https://{self._s3.bucket}.s3.amazonaws.com/{key}"
