import pytest

from portfolio_images.core.infrastructure.adapters.dynamodb_adapter import DynamoDBAdapter


class TestDynamoDBAdapter:
    def test_requires_table_name(self, monkeypatch) -> None:
        monkeypatch.delenv("IMAGE_METADATA_TABLE_NAME")

        with pytest.raises(RuntimeError, match="IMAGE_METADATA_TABLE_NAME"):
            DynamoDBAdapter()

    def test_put_get_delete(self, dynamodb_table) -> None:
        adapter = DynamoDBAdapter()

        adapter.put_item(item={"imageKey": "hero-1", "url": "/uploads/a.png"})
        assert adapter.get_item(key={"imageKey": "hero-1"})["Item"]["url"] == "/uploads/a.png"

        adapter.put_item(item={"imageKey": "hero-1", "url": "/uploads/b.png"})
        assert adapter.get_item(key={"imageKey": "hero-1"})["Item"]["url"] == "/uploads/b.png"

        adapter.delete_item(key={"imageKey": "hero-1"})
        assert "Item" not in adapter.get_item(key={"imageKey": "hero-1"})

    def test_scan(self, dynamodb_put_item) -> None:
        dynamodb_put_item({"imageKey": "a"})
        dynamodb_put_item({"imageKey": "b"})

        response = DynamoDBAdapter().scan()

        assert sorted(item["imageKey"] for item in response["Items"]) == ["a", "b"]
