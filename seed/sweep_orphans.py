#!/usr/bin/env python3
"""
Report, and optionally delete, blobs that no image record refers to.

Backends are selected from the same environment variables the Lambda
functions use (BLOB_STORE_BACKEND, METADATA_STORE_BACKEND, ...).

Run:
    python seed/sweep_orphans.py [--delete]
"""

import argparse
import sys

from aws_lambda_powertools import Logger

from portfolio_images.core.maintenance.orphan_sweep import OrphanSweep

logger = Logger(service="sweep")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Find blobs without an image record")

    parser.add_argument(
        "--delete",
        action="store_true",
        help="Delete orphaned blobs instead of only reporting them",
    )

    return parser.parse_args(argv)


def sweep_orphans(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    try:
        report = OrphanSweep().run(delete=args.delete)
    except Exception as exc:
        logger.exception("Orphan sweep failed", exc_info=exc)
        return 1

    logger.info("Orphan sweep report", extra=report.to_dict())
    return 1 if report.failed_deletions else 0


if __name__ == "__main__":
    sys.exit(sweep_orphans())
