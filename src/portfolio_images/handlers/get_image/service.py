"""
Business logic for image retrieval.
"""

from aws_lambda_powertools import Logger

from portfolio_images.core.infrastructure.factory import get_metadata_repository
from portfolio_images.core.models.errors import NotFoundError
from portfolio_images.core.models.image import ImageRecord
from portfolio_images.core.repositories.metadata_repository import ImageMetadataRepository
from portfolio_images.core.utils.constants import ERROR_CODE_IMAGE_NOT_FOUND

logger = Logger(utc=True)


class GetService:
    """Read-only lookup of a single image record."""

    def __init__(self, metadata: ImageMetadataRepository | None = None) -> None:
        self.metadata = metadata or get_metadata_repository()

    def get_image(self, image_key: str) -> ImageRecord:
        """
        Return the record stored under `image_key`.

        Raises:
            NotFoundError: If no record exists for the key
            MetadataStorageError: If the metadata store cannot be read
        """
        logger.debug("Fetching image record", extra={"image_key": image_key})

        record = self.metadata.fetch_record(image_key=image_key)

        if record is None:
            logger.warning(
                "Image metadata not found",
                extra={"image_key": image_key, "operation": "get"},
            )
            raise NotFoundError(
                message="Image not found",
                error_code=ERROR_CODE_IMAGE_NOT_FOUND,
                details={"image_key": image_key},
            )

        return record
