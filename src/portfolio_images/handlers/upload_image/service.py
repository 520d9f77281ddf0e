"""Business logic for image upload operations.

This module validates an inbound file, writes it to the blob store and
upserts the metadata record for its image key. The two stores are updated
sequentially; a metadata failure after a successful blob write leaves an
orphaned blob behind, which is logged rather than rolled back.
"""

from aws_lambda_powertools import Logger

from portfolio_images.core.infrastructure.factory import get_image_storage, get_metadata_repository
from portfolio_images.core.models.errors import (
    MetadataStorageError,
    MIMETypeError,
    ValidationError,
)
from portfolio_images.core.models.image import ImageRecord, UploadedFile
from portfolio_images.core.repositories.metadata_repository import ImageMetadataRepository
from portfolio_images.core.repositories.storage_repository import ImageStorageRepository
from portfolio_images.core.utils.constants import (
    ERROR_CODE_METADATA_UPSERT_FAILED,
    ERROR_CODE_MISSING_FILE,
    ERROR_CODE_MISSING_IMAGE_KEY,
)
from portfolio_images.core.utils.mime import is_image_mime_type
from portfolio_images.core.utils.time import utc_now_iso

logger = Logger(utc=True)


class UploadService:
    """Application service responsible for image uploads.

    This service orchestrates:
    - Precondition checks (file, key, MIME type)
    - Writing image content to the blob store
    - Upserting the metadata record for the image key
    """

    def __init__(
        self,
        storage: ImageStorageRepository | None = None,
        metadata: ImageMetadataRepository | None = None,
    ) -> None:
        self.storage = storage or get_image_storage()
        self.metadata = metadata or get_metadata_repository()

    @staticmethod
    def validate_upload(*, image_key: str | None, file: UploadedFile | None) -> str:
        """Check upload preconditions and return the normalized image key.

        Raises:
            ValidationError: If the file or the key is missing
            MIMETypeError: If the file is not an image
        """
        if file is None or not file.file_data:
            raise ValidationError(message="No file uploaded", error_code=ERROR_CODE_MISSING_FILE)

        key = image_key.strip() if isinstance(image_key, str) else ""
        if not key:
            raise ValidationError(
                message="Image key is required",
                error_code=ERROR_CODE_MISSING_IMAGE_KEY,
            )

        if not is_image_mime_type(file.mime_type):
            logger.warning(
                "Rejected non-image upload",
                extra={"image_key": key, "mime_type": file.mime_type},
            )
            raise MIMETypeError(
                message="Only image files are allowed",
                details={"mime_type": file.mime_type},
            )

        return key

    def upload_image(self, *, image_key: str | None, file: UploadedFile | None) -> ImageRecord:
        """Store an image and create or replace the record for its key.

        The upload flow is:
        1. Validate preconditions (no side effects on failure)
        2. Write the bytes to the blob store
        3. Upsert the metadata record

        A re-upload replaces the record; the previous blob is left in place.

        Args:
            image_key: Caller-chosen image slot key
            file: Inbound file, or None if the request carried none

        Returns:
            The persisted record

        Raises:
            ValidationError: If a precondition fails
            BlobStorageError: If the blob write fails
            MetadataStorageError: If the record write fails after the blob was stored
        """
        key = self.validate_upload(image_key=image_key, file=file)

        logger.debug(
            "Starting image upload",
            extra={"image_key": key, "size_bytes": file.size_bytes, "mime_type": file.mime_type},
        )

        blob = self.storage.store_blob(
            file_data=file.file_data,
            original_name=file.original_name,
            mime_type=file.mime_type,
        )

        record = ImageRecord(
            image_key=key,
            url=blob.url,
            storage_handle=blob.handle,
            original_name=file.original_name,
            size_bytes=file.size_bytes,
            mime_type=file.mime_type,
            uploaded_at=utc_now_iso(),
        )

        try:
            self.metadata.upsert_record(record=record)
        except Exception as exc:
            logger.exception(
                "Metadata write failed, stored blob is orphaned",
                extra={"image_key": key, "handle": blob.handle, "operation": "upload"},
            )
            if isinstance(exc, MetadataStorageError):
                raise
            raise MetadataStorageError(
                message="Unable to save image metadata",
                error_code=ERROR_CODE_METADATA_UPSERT_FAILED,
                details={"image_key": key},
            ) from exc

        logger.info(
            "Image uploaded successfully",
            extra={"image_key": key, "handle": blob.handle},
        )
        return record
