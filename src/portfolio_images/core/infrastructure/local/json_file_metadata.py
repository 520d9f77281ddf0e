"""Flat JSON file implementation of ImageMetadataRepository."""

import json
import os
from pathlib import Path
import tempfile
import threading
from typing import Any

from aws_lambda_powertools import Logger
from pydantic import ValidationError as PydanticValidationError

from portfolio_images.core.models.errors import MetadataStorageError
from portfolio_images.core.models.image import ImageRecord
from portfolio_images.core.repositories.metadata_repository import ImageMetadataRepository
from portfolio_images.core.utils.constants import (
    DEFAULT_METADATA_FILE,
    ENV_IMAGE_METADATA_FILE,
    ERROR_CODE_METADATA_DELETE_FAILED,
    ERROR_CODE_METADATA_INVALID_FORMAT,
    ERROR_CODE_METADATA_UPSERT_FAILED,
)

logger = Logger(utc=True)

_MISSING = object()


class JsonFileMetadata(ImageMetadataRepository):
    """In-memory mapping of imageKey to record, persisted as one JSON object.

    Every mutation rewrites the whole file: the snapshot goes to a
    temporary file in the same directory which then replaces the target,
    so readers never observe a truncated file. Mutations within this
    process are serialized by a lock; separate processes are not
    coordinated and the last replacement wins.
    """

    def __init__(self, path: str | Path | None = None) -> None:
        self._path = Path(path or os.getenv(ENV_IMAGE_METADATA_FILE) or DEFAULT_METADATA_FILE)
        self._lock = threading.Lock()
        self._records: dict[str, dict[str, Any]] = self._load()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, dict[str, Any]]:
        if not self._path.exists():
            return {}

        try:
            data = json.loads(self._path.read_text(encoding="utf-8") or "{}")
        except (OSError, ValueError):
            logger.exception("Error loading image data", extra={"path": str(self._path)})
            return {}

        if not isinstance(data, dict):
            logger.error("Image data file is not a JSON object", extra={"path": str(self._path)})
            return {}

        return data

    def _persist(self) -> None:
        """Write the full mapping atomically. Caller must hold the lock."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self._path.parent,
            prefix=f".{self._path.name}.",
            suffix=".tmp",
        )

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(self._records, handle)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _mutate(self, image_key: str, value: Any, *, error_code: str, message: str) -> None:
        """Apply one change and persist it, restoring memory if the write fails."""
        with self._lock:
            snapshot = dict(self._records)

            if value is _MISSING:
                self._records.pop(image_key, None)
            else:
                self._records[image_key] = value

            try:
                self._persist()
            except OSError as exc:
                self._records = snapshot

                logger.error(
                    "Writing image data file failed",
                    extra={"image_key": image_key, "path": str(self._path)},
                )
                raise MetadataStorageError(
                    message=message,
                    error_code=error_code,
                    details={"image_key": image_key},
                ) from exc

    def _to_record(self, image_key: str, value: dict[str, Any]) -> ImageRecord:
        return ImageRecord.model_validate({**value, "imageKey": image_key})

    def fetch_record(self, *, image_key: str) -> ImageRecord | None:
        with self._lock:
            value = self._records.get(image_key)

        if value is None:
            return None

        try:
            return self._to_record(image_key, value)
        except (PydanticValidationError, TypeError) as exc:
            logger.error("Malformed metadata item", extra={"image_key": image_key})
            raise MetadataStorageError(
                message="Invalid image metadata format",
                error_code=ERROR_CODE_METADATA_INVALID_FORMAT,
                details={"image_key": image_key},
            ) from exc

    def upsert_record(self, *, record: ImageRecord) -> None:
        self._mutate(
            record.image_key,
            record.to_response(),
            error_code=ERROR_CODE_METADATA_UPSERT_FAILED,
            message="Unable to save image metadata at this time",
        )
        logger.info("Metadata upserted", extra={"image_key": record.image_key})

    def remove_record(self, *, image_key: str) -> None:
        with self._lock:
            if image_key not in self._records:
                return

        self._mutate(
            image_key,
            _MISSING,
            error_code=ERROR_CODE_METADATA_DELETE_FAILED,
            message="Unable to delete image metadata",
        )
        logger.info("Metadata removed", extra={"image_key": image_key})

    def list_records(self) -> list[ImageRecord]:
        """List records in insertion order; a flat file offers no ordering."""
        with self._lock:
            snapshot = list(self._records.items())

        records: list[ImageRecord] = []
        for image_key, value in snapshot:
            try:
                records.append(self._to_record(image_key, value))
            except (PydanticValidationError, TypeError) as exc:
                logger.warning(
                    "Skipping malformed item",
                    extra={"image_key": image_key},
                    exc_info=exc,
                )

        return records
