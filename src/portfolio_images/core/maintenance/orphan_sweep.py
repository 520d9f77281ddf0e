"""Reconcile the blob store against the metadata store.

Re-uploading an image key replaces its record but leaves the previous blob
in place, and a failed metadata write after a successful blob write leaves
a blob no record refers to. This sweep reports both kinds of drift and can
delete the unreferenced blobs. It never modifies records.

The sweep should not run alongside uploads. A blob stored before the sweep
whose record is written after it looks orphaned and would be deleted.
"""

from dataclasses import dataclass, field

from aws_lambda_powertools import Logger

from portfolio_images.core.infrastructure.factory import get_image_storage, get_metadata_repository
from portfolio_images.core.models.errors import BlobStorageError
from portfolio_images.core.repositories.metadata_repository import ImageMetadataRepository
from portfolio_images.core.repositories.storage_repository import ImageStorageRepository

logger = Logger(utc=True)


@dataclass
class SweepReport:
    orphaned_blobs: list[str] = field(default_factory=list)
    dangling_records: list[str] = field(default_factory=list)
    deleted_blobs: list[str] = field(default_factory=list)
    failed_deletions: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, list[str]]:
        return {
            "orphaned_blobs": self.orphaned_blobs,
            "dangling_records": self.dangling_records,
            "deleted_blobs": self.deleted_blobs,
            "failed_deletions": self.failed_deletions,
        }


class OrphanSweep:
    """Compares stored blob handles with the handles referenced by records."""

    def __init__(
        self,
        storage: ImageStorageRepository | None = None,
        metadata: ImageMetadataRepository | None = None,
    ) -> None:
        self.storage = storage or get_image_storage()
        self.metadata = metadata or get_metadata_repository()

    def run(self, *, delete: bool = False) -> SweepReport:
        """Build the drift report, optionally deleting orphaned blobs.

        Args:
            delete: Remove blobs that no record refers to

        Returns:
            Orphaned blob handles, keys of records whose blob is missing,
            and, when deleting, which removals succeeded or failed

        Raises:
            BlobStorageError: If the blob store cannot be listed
            MetadataStorageError: If the metadata store cannot be listed
        """
        # Handles before records; uploads write the blob first.
        stored = set(self.storage.list_handles())
        records = self.metadata.list_records()

        referenced: dict[str, str] = {}
        report = SweepReport()

        for record in records:
            handle = self.storage.resolve_handle(record)
            if not handle:
                continue

            referenced[handle] = record.image_key
            if handle not in stored:
                report.dangling_records.append(record.image_key)

        report.orphaned_blobs = sorted(stored - referenced.keys())
        report.dangling_records.sort()

        logger.info(
            "Orphan sweep completed",
            extra={
                "stored_blobs": len(stored),
                "orphaned_blobs": len(report.orphaned_blobs),
                "dangling_records": len(report.dangling_records),
            },
        )

        if delete:
            for handle in report.orphaned_blobs:
                try:
                    self.storage.remove_blob(handle=handle)
                except BlobStorageError:
                    logger.exception("Failed to delete orphaned blob", extra={"handle": handle})
                    report.failed_deletions.append(handle)
                else:
                    report.deleted_blobs.append(handle)

        return report
