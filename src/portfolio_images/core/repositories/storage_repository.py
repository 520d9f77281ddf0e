"""Abstract contract for image file storage."""

from abc import ABC, abstractmethod

from portfolio_images.core.models.image import ImageRecord, StoredBlob


class ImageStorageRepository(ABC):
    """Contract for storing and deleting image blobs.

    Implementations are S3 and local disk.
    Services depend on this interface, not the implementation.
    """

    @abstractmethod
    def store_blob(
        self,
        *,
        file_data: bytes,
        original_name: str,
        mime_type: str,
    ) -> StoredBlob:
        """Store bytes under a generated name.

        Args:
            file_data: Binary image content
            original_name: Client-side file name, used for the extension
            mime_type: MIME type (e.g., 'image/jpeg')

        Returns:
            Public URL and deletion handle of the new blob

        Raises:
            BlobStorageError: If the write fails
        """

    @abstractmethod
    def remove_blob(self, *, handle: str) -> bool:
        """Delete a blob by handle.

        Returns:
            True if a blob was deleted, False if it was already absent

        Raises:
            BlobStorageError: If deletion fails for any other reason
        """

    @abstractmethod
    def list_handles(self) -> list[str]:
        """List the handles of every stored blob.

        Raises:
            BlobStorageError: If listing fails
        """

    def resolve_handle(self, record: ImageRecord) -> str | None:
        """Return the deletion handle for a record, if one is known."""
        return record.storage_handle
