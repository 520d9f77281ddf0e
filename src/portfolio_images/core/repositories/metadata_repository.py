"""Abstract contract for image metadata persistence."""

from abc import ABC, abstractmethod

from portfolio_images.core.models.image import ImageRecord


class ImageMetadataRepository(ABC):
    """Contract for storing and retrieving image metadata by `imageKey`.

    Implementations are DynamoDB and a flat JSON file.
    Services depend on this interface, not the implementation.
    """

    @abstractmethod
    def fetch_record(self, *, image_key: str) -> ImageRecord | None:
        """Fetch the record for an image key.

        Args:
            image_key: Caller-chosen image slot key

        Returns:
            The record or None if not found

        Raises:
            MetadataStorageError: If the fetch fails
        """

    @abstractmethod
    def upsert_record(self, *, record: ImageRecord) -> None:
        """Insert the record, or replace every field of an existing one.

        Raises:
            MetadataStorageError: If the write fails
        """

    @abstractmethod
    def remove_record(self, *, image_key: str) -> None:
        """Remove the record for an image key. Absent keys are a no-op.

        Raises:
            MetadataStorageError: If deletion fails
        """

    @abstractmethod
    def list_records(self) -> list[ImageRecord]:
        """List every record.

        Returns:
            Records newest first where the backend can order them,
            otherwise in backend order

        Raises:
            MetadataStorageError: If listing fails
        """
