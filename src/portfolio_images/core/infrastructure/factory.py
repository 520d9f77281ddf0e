"""Backend selection.

The blob store and metadata store implementations are chosen once per
process from the environment. Services receive the built repositories
and never branch on the backend themselves.
"""

from functools import lru_cache
import os

from aws_lambda_powertools import Logger

from portfolio_images.core.repositories.metadata_repository import ImageMetadataRepository
from portfolio_images.core.repositories.notifier_repository import ContactNotifier
from portfolio_images.core.repositories.storage_repository import ImageStorageRepository
from portfolio_images.core.utils.constants import (
    BLOB_BACKEND_LOCAL,
    BLOB_BACKEND_S3,
    ENV_BLOB_STORE_BACKEND,
    ENV_METADATA_STORE_BACKEND,
    METADATA_BACKEND_DYNAMODB,
    METADATA_BACKEND_JSON_FILE,
)

logger = Logger(utc=True)


@lru_cache(maxsize=1)
def get_image_storage() -> ImageStorageRepository:
    backend = (os.getenv(ENV_BLOB_STORE_BACKEND) or BLOB_BACKEND_S3).lower()

    if backend == BLOB_BACKEND_S3:
        from portfolio_images.core.infrastructure.aws.s3_image_storage import S3ImageStorage

        storage: ImageStorageRepository = S3ImageStorage()
    elif backend == BLOB_BACKEND_LOCAL:
        from portfolio_images.core.infrastructure.local.filesystem_storage import LocalImageStorage

        storage = LocalImageStorage()
    else:
        raise RuntimeError(f"Unsupported {ENV_BLOB_STORE_BACKEND}: {backend!r}")

    logger.info("Blob store initialized", extra={"backend": backend})
    return storage


@lru_cache(maxsize=1)
def get_metadata_repository() -> ImageMetadataRepository:
    backend = (os.getenv(ENV_METADATA_STORE_BACKEND) or METADATA_BACKEND_DYNAMODB).lower()

    if backend == METADATA_BACKEND_DYNAMODB:
        from portfolio_images.core.infrastructure.aws.dynamodb_metadata import DynamoDBMetadata

        repository: ImageMetadataRepository = DynamoDBMetadata()
    elif backend == METADATA_BACKEND_JSON_FILE:
        from portfolio_images.core.infrastructure.local.json_file_metadata import JsonFileMetadata

        repository = JsonFileMetadata()
    else:
        raise RuntimeError(f"Unsupported {ENV_METADATA_STORE_BACKEND}: {backend!r}")

    logger.info("Metadata store initialized", extra={"backend": backend})
    return repository


@lru_cache(maxsize=1)
def get_contact_notifier() -> ContactNotifier:
    from portfolio_images.core.infrastructure.aws.ses_notifier import SESNotifier

    return SESNotifier()


def reset_backends() -> None:
    """Drop the cached backends so the next call re-reads the environment."""
    get_image_storage.cache_clear()
    get_metadata_repository.cache_clear()
    get_contact_notifier.cache_clear()
