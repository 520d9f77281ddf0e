from unittest.mock import MagicMock

import pytest

from portfolio_images.core.models.errors import MetadataStorageError
from portfolio_images.handlers.list_images.service import ListService


class TestListService:
    def test_empty_store(self) -> None:
        metadata = MagicMock()
        metadata.list_records.return_value = []

        assert ListService(metadata).list_images() == {}

    def test_keyed_by_image_key_in_store_order(self, sample_record) -> None:
        records = [
            sample_record.model_copy(update={"image_key": key}) for key in ["newest", "middle", "oldest"]
        ]
        metadata = MagicMock()
        metadata.list_records.return_value = records

        images = ListService(metadata).list_images()

        assert list(images) == ["newest", "middle", "oldest"]
        assert images["middle"] == records[1]

    def test_store_failure_propagates(self) -> None:
        metadata = MagicMock()
        metadata.list_records.side_effect = MetadataStorageError(message="DB down")

        with pytest.raises(MetadataStorageError):
            ListService(metadata).list_images()
