#!/usr/bin/env python3
"""
Seed script to upload portfolio images via the API.

Each image file in the directory is uploaded under its file stem as the
image key (e.g. `hero-1.jpg` -> `hero-1`).

Run:
    python seed/seed_images.py \
      --api-id <API-ID> \
      --images-dir <DIR>
"""

import argparse
import base64
import mimetypes
from pathlib import Path
import sys
from typing import Any, cast

from aws_lambda_powertools import Logger
import requests

logger = Logger(service="seed")

BASE_API_URL = "http://localhost:4566/restapis/{0}/snd/_user_request_/api"

IMAGE_SUFFIXES = {".jpg", ".jpeg", ".png", ".gif", ".webp"}


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed images via the portfolio images API")

    parser.add_argument(
        "--api-id",
        required=True,
        help="API Gateway ID (e.g. LocalStack API Gateway ID)",
    )
    parser.add_argument(
        "--api-key",
        default=None,
        help="API key for x-api-key header (optional for local)",
    )
    parser.add_argument(
        "--images-dir",
        type=Path,
        default=Path(__file__).parent / "images",
        help="Directory containing the images to upload",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=10,
        help="Maximum number of images to seed",
    )

    return parser.parse_args()


def find_images(images_dir: Path, limit: int) -> list[Path]:
    if not images_dir.is_dir():
        return []

    images = sorted(p for p in images_dir.iterdir() if p.suffix.lower() in IMAGE_SUFFIXES)
    return images[:limit]


def build_payload(image_path: Path) -> dict[str, Any]:
    mime_type, _ = mimetypes.guess_type(image_path.name)

    return {
        "image": base64.b64encode(image_path.read_bytes()).decode("utf-8"),
        "imageKey": image_path.stem,
        "fileName": image_path.name,
        "mimeType": mime_type,
    }


def seed_images() -> None:
    try:
        args = parse_args()

        headers: dict[str, str] = {
            "Content-Type": "application/json",
        }
        if args.api_key:
            headers["x-api-key"] = args.api_key

        base_url = BASE_API_URL.format(args.api_id)
        images = find_images(args.images_dir, args.limit)

        logger.info(
            "Starting seeding process",
            extra={"api_base_url": base_url, "image_count": len(images)},
        )

        if not images:
            logger.warning("No images found to seed", extra={"path": str(args.images_dir)})
            return

        for image_path in images:
            response = requests.post(
                f"{base_url}/upload",
                headers=headers,
                json=build_payload(image_path),
                timeout=30,
            )

            response_json = cast(dict[str, Any], response.json())

            if response.ok:
                logger.info(
                    "Seeded image",
                    extra={
                        "image_key": response_json.get("imageKey"),
                        "image_url": response_json.get("imageUrl"),
                    },
                )
            else:
                logger.error(
                    "Failed to seed image",
                    extra={
                        "image": image_path.name,
                        "status": response.status_code,
                        "response": response_json,
                    },
                )

        list_response = requests.get(f"{base_url}/images", headers=headers, timeout=30)

        logger.info(
            "Seeding completed",
            extra={
                "status": list_response.status_code,
                "image_keys": sorted(cast(dict[str, Any], list_response.json()))
                if list_response.ok
                else list_response.text,
            },
        )

    except Exception as exc:
        logger.exception("Seeding failed", exc_info=exc)
        sys.exit(1)


if __name__ == "__main__":
    seed_images()
