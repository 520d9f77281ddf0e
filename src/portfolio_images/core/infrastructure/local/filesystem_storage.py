"""Local-disk implementation of ImageStorageRepository."""

import os
from pathlib import Path, PurePosixPath
from urllib.parse import urlparse

from aws_lambda_powertools import Logger

from portfolio_images.core.models.errors import BlobStorageError
from portfolio_images.core.models.image import ImageRecord, StoredBlob
from portfolio_images.core.repositories.storage_repository import ImageStorageRepository
from portfolio_images.core.utils.constants import (
    DEFAULT_UPLOAD_DIR,
    DEFAULT_UPLOAD_URL_PREFIX,
    ENV_UPLOAD_DIR,
    ENV_UPLOAD_URL_PREFIX,
    ERROR_CODE_BLOB_DELETE_FAILED,
    ERROR_CODE_BLOB_LIST_FAILED,
    ERROR_CODE_BLOB_UPLOAD_FAILED,
)
from portfolio_images.core.utils.naming import generate_blob_name

logger = Logger(utc=True)


class LocalImageStorage(ImageStorageRepository):
    """Stores blobs as files in one directory served under a URL prefix.

    The handle is the file name, which is also the last segment of the
    URL, so records without a stored handle can still be deleted.
    """

    def __init__(
        self,
        upload_dir: str | Path | None = None,
        *,
        url_prefix: str | None = None,
    ) -> None:
        self._upload_dir = Path(upload_dir or os.getenv(ENV_UPLOAD_DIR) or DEFAULT_UPLOAD_DIR)
        self._url_prefix = (
            url_prefix or os.getenv(ENV_UPLOAD_URL_PREFIX) or DEFAULT_UPLOAD_URL_PREFIX
        ).rstrip("/")

    @property
    def upload_dir(self) -> Path:
        return self._upload_dir

    def store_blob(
        self,
        *,
        file_data: bytes,
        original_name: str,
        mime_type: str,
    ) -> StoredBlob:
        filename = generate_blob_name(original_name, mime_type)
        path = self._upload_dir / filename

        logger.debug("Writing image file", extra={"path": str(path), "size": len(file_data)})

        try:
            self._upload_dir.mkdir(parents=True, exist_ok=True)
            path.write_bytes(file_data)
        except OSError as exc:
            logger.error("Writing image file failed", extra={"path": str(path)})
            raise BlobStorageError(
                message="Unable to upload image at this time",
                error_code=ERROR_CODE_BLOB_UPLOAD_FAILED,
                details={"handle": filename},
            ) from exc

        logger.info("Image file written", extra={"handle": filename})
        return StoredBlob(url=f"{self._url_prefix}/{filename}", handle=filename)

    def remove_blob(self, *, handle: str) -> bool:
        # Only the final path segment is honoured so handles cannot escape the directory.
        path = self._upload_dir / PurePosixPath(handle).name

        if not path.exists():
            logger.info("Image file already absent", extra={"handle": handle})
            return False

        try:
            path.unlink()
        except FileNotFoundError:
            logger.info("Image file already absent", extra={"handle": handle})
            return False
        except OSError as exc:
            logger.error("Deleting image file failed", extra={"handle": handle})
            raise BlobStorageError(
                message="Unable to delete image at this time",
                error_code=ERROR_CODE_BLOB_DELETE_FAILED,
                details={"handle": handle},
            ) from exc

        logger.info("Image file deleted", extra={"handle": handle})
        return True

    def list_handles(self) -> list[str]:
        if not self._upload_dir.exists():
            return []

        try:
            return sorted(entry.name for entry in self._upload_dir.iterdir() if entry.is_file())
        except OSError as exc:
            raise BlobStorageError(
                message="Unable to list stored images",
                error_code=ERROR_CODE_BLOB_LIST_FAILED,
                details={"upload_dir": str(self._upload_dir)},
            ) from exc

    def resolve_handle(self, record: ImageRecord) -> str | None:
        if record.storage_handle:
            return record.storage_handle

        name = PurePosixPath(urlparse(record.url).path).name
        return name or None
