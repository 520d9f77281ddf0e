from unittest.mock import MagicMock

import pytest

from portfolio_images.core.models.errors import (
    BlobStorageError,
    MetadataStorageError,
    NotFoundError,
)
from portfolio_images.handlers.delete_image.service import DeleteService


@pytest.fixture
def storage(sample_record) -> MagicMock:
    mock = MagicMock()
    mock.resolve_handle.side_effect = lambda record: record.storage_handle
    mock.remove_blob.return_value = True
    return mock


@pytest.fixture
def metadata(sample_record) -> MagicMock:
    mock = MagicMock()
    mock.fetch_record.return_value = sample_record
    return mock


class TestDeleteService:
    def test_delete_removes_blob_then_record(self, storage, metadata) -> None:
        calls = MagicMock()
        calls.attach_mock(storage.remove_blob, "remove_blob")
        calls.attach_mock(metadata.remove_record, "remove_record")

        result = DeleteService(storage, metadata).delete_image("hero-1")

        assert result["image_key"] == "hero-1"
        assert result["blob_removed"] is True
        assert "deleted_at" in result
        assert [name for name, _, _ in calls.mock_calls] == ["remove_blob", "remove_record"]
        storage.remove_blob.assert_called_once_with(handle="portfolio/image-1.jpg")
        metadata.remove_record.assert_called_once_with(image_key="hero-1")

    def test_not_found_touches_nothing(self, storage, metadata) -> None:
        metadata.fetch_record.return_value = None

        with pytest.raises(NotFoundError, match="Image not found"):
            DeleteService(storage, metadata).delete_image("missing")

        storage.remove_blob.assert_not_called()
        metadata.remove_record.assert_not_called()

    def test_blob_already_absent_still_succeeds(self, storage, metadata) -> None:
        storage.remove_blob.return_value = False

        result = DeleteService(storage, metadata).delete_image("hero-1")

        assert result["blob_removed"] is False
        metadata.remove_record.assert_called_once_with(image_key="hero-1")

    def test_missing_handle_skips_blob_deletion(self, storage, metadata, sample_record) -> None:
        metadata.fetch_record.return_value = sample_record.model_copy(
            update={"storage_handle": None}
        )

        result = DeleteService(storage, metadata).delete_image("hero-1")

        assert result["blob_removed"] is False
        storage.remove_blob.assert_not_called()
        metadata.remove_record.assert_called_once_with(image_key="hero-1")

    def test_blob_failure_keeps_record(self, storage, metadata) -> None:
        storage.remove_blob.side_effect = BlobStorageError(message="Access denied")

        with pytest.raises(BlobStorageError):
            DeleteService(storage, metadata).delete_image("hero-1")

        metadata.remove_record.assert_not_called()

    def test_record_removal_failure_propagates(self, storage, metadata) -> None:
        metadata.remove_record.side_effect = MetadataStorageError(message="DB down")

        with pytest.raises(MetadataStorageError):
            DeleteService(storage, metadata).delete_image("hero-1")
