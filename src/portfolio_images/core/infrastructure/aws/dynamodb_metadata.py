"""DynamoDB-backed implementation of ImageMetadataRepository."""

from decimal import Decimal
from typing import Any

from aws_lambda_powertools import Logger
from botocore.exceptions import ClientError
from pydantic import ValidationError as PydanticValidationError

from portfolio_images.core.infrastructure.adapters.dynamodb_adapter import (
    DynamoDBAdapter,
    DynamoDBAdapterProtocol,
)
from portfolio_images.core.models.errors import MetadataStorageError
from portfolio_images.core.models.image import ImageRecord
from portfolio_images.core.repositories.metadata_repository import ImageMetadataRepository
from portfolio_images.core.utils.constants import (
    ERROR_CODE_METADATA_DELETE_FAILED,
    ERROR_CODE_METADATA_FETCH_FAILED,
    ERROR_CODE_METADATA_INVALID_FORMAT,
    ERROR_CODE_METADATA_LIST_FAILED,
    ERROR_CODE_METADATA_UPSERT_FAILED,
)

PARTITION_KEY = "imageKey"

logger = Logger(utc=True)


def _item_to_record(item: dict[str, Any]) -> ImageRecord:
    """Convert a DynamoDB item (numbers come back as Decimal) into a record."""
    normalized = {
        name: int(value) if isinstance(value, Decimal) else value
        for name, value in item.items()
    }
    return ImageRecord.model_validate(normalized)


class DynamoDBMetadata(ImageMetadataRepository):
    """DynamoDB-backed metadata storage with error handling.

    `imageKey` is the table's partition key, so uniqueness is enforced
    by the table itself and `put_item` is an atomic replace-or-insert.
    All boto3 errors are caught and translated into domain-specific errors.
    """

    def __init__(self, adapter: DynamoDBAdapterProtocol | None = None) -> None:
        """Initialize with DynamoDB adapter."""
        self._db: DynamoDBAdapterProtocol = adapter or DynamoDBAdapter()

    def fetch_record(self, *, image_key: str) -> ImageRecord | None:
        """Fetch the record for an image key.

        Raises:
            MetadataStorageError: If fetch fails or the item is malformed
        """
        logger.debug("Fetching metadata", extra={"image_key": image_key})

        try:
            response = self._db.get_item(key={PARTITION_KEY: image_key})
        except ClientError as exc:
            logger.error("DynamoDB get_item failed", extra={"image_key": image_key})
            raise MetadataStorageError(
                message="Unable to retrieve image metadata",
                error_code=ERROR_CODE_METADATA_FETCH_FAILED,
                details={"image_key": image_key},
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error fetching metadata")
            raise MetadataStorageError(
                message="Unable to retrieve image metadata",
                error_code=ERROR_CODE_METADATA_FETCH_FAILED,
                details={"image_key": image_key},
            ) from exc

        item = response.get("Item")
        if item is None:
            return None

        try:
            return _item_to_record(item)
        except PydanticValidationError as exc:
            logger.error("Malformed metadata item", extra={"image_key": image_key})
            raise MetadataStorageError(
                message="Invalid image metadata format",
                error_code=ERROR_CODE_METADATA_INVALID_FORMAT,
                details={"image_key": image_key},
            ) from exc

    def upsert_record(self, *, record: ImageRecord) -> None:
        """Insert or fully replace the item for `record.image_key`.

        Raises:
            MetadataStorageError: If the write fails
        """
        logger.debug("Upserting metadata", extra={"image_key": record.image_key})

        try:
            self._db.put_item(item=record.to_item())
        except ClientError as exc:
            logger.error("DynamoDB put_item failed", extra={"image_key": record.image_key})
            raise MetadataStorageError(
                message="Unable to save image metadata at this time",
                error_code=ERROR_CODE_METADATA_UPSERT_FAILED,
                details={"image_key": record.image_key},
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error saving metadata")
            raise MetadataStorageError(
                message="Unable to save image metadata at this time",
                error_code=ERROR_CODE_METADATA_UPSERT_FAILED,
                details={"image_key": record.image_key},
            ) from exc

        logger.info("Metadata upserted", extra={"image_key": record.image_key})

    def remove_record(self, *, image_key: str) -> None:
        """Remove the item for an image key.

        Raises:
            MetadataStorageError: If deletion fails
        """
        logger.debug("Removing metadata", extra={"image_key": image_key})

        try:
            self._db.delete_item(key={PARTITION_KEY: image_key})
        except ClientError as exc:
            logger.error("DynamoDB delete_item failed", extra={"image_key": image_key})
            raise MetadataStorageError(
                message="Unable to delete image metadata",
                error_code=ERROR_CODE_METADATA_DELETE_FAILED,
                details={"image_key": image_key},
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error removing metadata")
            raise MetadataStorageError(
                message="Unable to delete image metadata",
                error_code=ERROR_CODE_METADATA_DELETE_FAILED,
                details={"image_key": image_key},
            ) from exc

        logger.info("Metadata removed", extra={"image_key": image_key})

    def list_records(self) -> list[ImageRecord]:
        """List every record, newest `uploadedAt` first.

        NOTE:
        - A scan has no ordering, so results are sorted after collection.
        - uploadedAt must be stored in ISO-8601 UTC format.
        - Malformed items are skipped with a warning.
        """
        items: list[dict[str, Any]] = []
        scan_kwargs: dict[str, Any] = {}

        try:
            while True:
                response = self._db.scan(**scan_kwargs)
                items.extend(response.get("Items", []))

                last_evaluated_key = response.get("LastEvaluatedKey")
                if not last_evaluated_key:
                    break

                scan_kwargs["ExclusiveStartKey"] = last_evaluated_key

        except ClientError as exc:
            logger.error("DynamoDB scan failed")
            raise MetadataStorageError(
                message="Unable to list images",
                error_code=ERROR_CODE_METADATA_LIST_FAILED,
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error listing images")
            raise MetadataStorageError(
                message="Unable to list images",
                error_code=ERROR_CODE_METADATA_LIST_FAILED,
            ) from exc

        records: list[ImageRecord] = []
        for item in items:
            try:
                records.append(_item_to_record(item))
            except PydanticValidationError as exc:
                logger.warning(
                    "Skipping malformed item",
                    extra={"image_key": item.get(PARTITION_KEY)},
                    exc_info=exc,
                )

        records.sort(key=lambda record: record.uploaded_at, reverse=True)

        logger.info("Images listed", extra={"count": len(records)})
        return records
