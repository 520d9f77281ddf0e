#!/usr/bin/env python3
"""
Cleanup script to delete every image via the API.

Run:
    python seed/cleanup_images.py \
      --api-id <API-ID> \
      [--prefix hero-]
"""

import argparse
import sys
from typing import Any, cast
from urllib.parse import quote

from aws_lambda_powertools import Logger
import requests

logger = Logger(service="cleanup")

BASE_API_URL = "http://localhost:4566/restapis/{0}/snd/_user_request_/api/images"


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Delete images via the portfolio images API")

    parser.add_argument(
        "--api-id",
        required=True,
        help="API Gateway ID (LocalStack)",
    )
    parser.add_argument(
        "--api-key",
        default=None,
        help="API key for x-api-key header (optional for local)",
    )
    parser.add_argument(
        "--prefix",
        default="",
        help="Only delete image keys starting with this prefix",
    )

    return parser.parse_args()


def cleanup_images() -> None:
    try:
        args = parse_args()

        headers: dict[str, str] = {}
        if args.api_key:
            headers["x-api-key"] = args.api_key

        base_url = BASE_API_URL.format(args.api_id)

        logger.info(
            "Starting cleanup process",
            extra={"api_base_url": base_url, "prefix": args.prefix},
        )

        response = requests.get(base_url, headers=headers, timeout=30)

        if not response.ok:
            logger.error(
                "Failed to list images",
                extra={"status": response.status_code, "response": response.text},
            )
            sys.exit(1)

        images = cast(dict[str, Any], response.json())
        keys = [key for key in images if key.startswith(args.prefix)]

        if not keys:
            logger.info("No images found for cleanup")
            return

        for image_key in keys:
            delete_resp = requests.delete(
                f"{base_url}/{quote(image_key, safe='')}",
                headers=headers,
                timeout=30,
            )

            if delete_resp.ok:
                logger.info("Deleted image", extra={"image_key": image_key})
            else:
                logger.error(
                    "Failed to delete image",
                    extra={
                        "image_key": image_key,
                        "status": delete_resp.status_code,
                        "response": delete_resp.text,
                    },
                )

        logger.info("Cleanup completed successfully")

    except Exception as exc:
        logger.exception("Cleanup failed", exc_info=exc)
        sys.exit(1)


if __name__ == "__main__":
    cleanup_images()
