"""
Business logic for image listing.
"""

from aws_lambda_powertools import Logger

from portfolio_images.core.infrastructure.factory import get_metadata_repository
from portfolio_images.core.models.image import ImageRecord
from portfolio_images.core.repositories.metadata_repository import ImageMetadataRepository

logger = Logger(utc=True)


class ListService:
    """Application service responsible for listing every image record.

    Ordering is whatever the metadata store yields: newest first for
    DynamoDB, insertion order for the JSON file.
    """

    def __init__(self, metadata: ImageMetadataRepository | None = None) -> None:
        self.metadata = metadata or get_metadata_repository()

    def list_images(self) -> dict[str, ImageRecord]:
        """Return all records keyed by image key. An empty store yields `{}`."""
        records = self.metadata.list_records()

        images = {record.image_key: record for record in records}

        logger.info("Images listed", extra={"count": len(images)})
        return images
