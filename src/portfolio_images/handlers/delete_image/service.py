"""Business logic for image deletion.

The blob is removed before the metadata record so that a failed blob
deletion never leaves a record pointing at nothing. A blob that is already
gone counts as deleted.
"""

from typing import Any

from aws_lambda_powertools import Logger

from portfolio_images.core.infrastructure.factory import get_image_storage, get_metadata_repository
from portfolio_images.core.models.errors import BlobStorageError, NotFoundError
from portfolio_images.core.repositories.metadata_repository import ImageMetadataRepository
from portfolio_images.core.repositories.storage_repository import ImageStorageRepository
from portfolio_images.core.utils.constants import ERROR_CODE_IMAGE_NOT_FOUND
from portfolio_images.core.utils.time import utc_now_iso

logger = Logger(utc=True)


class DeleteService:
    """Application service responsible for deleting images.

    This service orchestrates:
    - Validation that the image record exists
    - Deletion of the blob from the blob store
    - Removal of the record from the metadata store
    """

    def __init__(
        self,
        storage: ImageStorageRepository | None = None,
        metadata: ImageMetadataRepository | None = None,
    ) -> None:
        self.storage = storage or get_image_storage()
        self.metadata = metadata or get_metadata_repository()

    def delete_image(self, image_key: str) -> dict[str, Any]:
        """Delete an image blob and its record.

        The deletion flow is:
        1. Fetch the record to confirm it exists
        2. Resolve the storage handle and delete the blob, if a handle is known
        3. Delete the record

        Args:
            image_key: Key of the image to delete

        Returns:
            Deletion summary with `image_key`, `deleted_at` and `blob_removed`

        Raises:
            NotFoundError: If no record exists for the key
            BlobStorageError: If blob deletion fails; the record is left intact
            MetadataStorageError: If the record cannot be read or removed
        """
        logger.debug("Starting image deletion", extra={"image_key": image_key})

        record = self.metadata.fetch_record(image_key=image_key)

        if record is None:
            logger.warning(
                "Image metadata not found",
                extra={"image_key": image_key, "operation": "delete"},
            )
            raise NotFoundError(
                message="Image not found",
                error_code=ERROR_CODE_IMAGE_NOT_FOUND,
                details={"image_key": image_key},
            )

        handle = self.storage.resolve_handle(record)
        blob_removed = False

        if handle:
            try:
                blob_removed = self.storage.remove_blob(handle=handle)
            except BlobStorageError:
                logger.exception(
                    "Blob deletion failed, record kept",
                    extra={"image_key": image_key, "handle": handle, "operation": "delete"},
                )
                raise

            if not blob_removed:
                logger.info(
                    "Blob already absent",
                    extra={"image_key": image_key, "handle": handle},
                )
        else:
            logger.warning(
                "No storage handle for record, skipping blob deletion",
                extra={"image_key": image_key, "url": record.url},
            )

        self.metadata.remove_record(image_key=image_key)

        logger.info(
            "Image deleted successfully",
            extra={"image_key": image_key, "blob_removed": blob_removed},
        )

        return {
            "image_key": image_key,
            "deleted_at": utc_now_iso(),
            "blob_removed": blob_removed,
        }
