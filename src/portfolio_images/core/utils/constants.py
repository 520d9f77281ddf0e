"""Global constants used throughout the application.

This module centralizes all magic numbers, string literals, and configuration
values that are used across multiple modules. Using constants prevents hardcoding
values and makes it easy to change them globally.
"""

import os
from typing import Final

# ============================================================================
# Error Codes
# ============================================================================


# Validation Errors
ERROR_CODE_VALIDATION_FAILED = "VALIDATION_ERROR"
ERROR_CODE_MISSING_FILE = "MISSING_FILE"
ERROR_CODE_MISSING_IMAGE_KEY = "MISSING_IMAGE_KEY"
ERROR_CODE_UNSUPPORTED_MIME_TYPE = "UNSUPPORTED_MIME_TYPE"
ERROR_CODE_FILE_SIZE_EXCEEDED = "FILE_SIZE_EXCEEDED"

# Authentication Errors
ERROR_CODE_INVALID_CREDENTIALS = "INVALID_CREDENTIALS"

# Not Found Errors
ERROR_CODE_RESOURCE_NOT_FOUND = "NOT_FOUND"
ERROR_CODE_IMAGE_NOT_FOUND = "IMAGE_NOT_FOUND"

# Blob Storage Errors
ERROR_CODE_STORAGE = "STORAGE_ERROR"
ERROR_CODE_BLOB_UPLOAD_FAILED = "BLOB_UPLOAD_FAILED"
ERROR_CODE_BLOB_DELETE_FAILED = "BLOB_DELETE_FAILED"
ERROR_CODE_BLOB_LIST_FAILED = "BLOB_LIST_FAILED"

# Metadata Errors
ERROR_CODE_METADATA_OPERATION_FAILED = "METADATA_OPERATION_FAILED"
ERROR_CODE_METADATA_UPSERT_FAILED = "METADATA_UPSERT_FAILED"
ERROR_CODE_METADATA_FETCH_FAILED = "METADATA_FETCH_FAILED"
ERROR_CODE_METADATA_DELETE_FAILED = "METADATA_DELETE_FAILED"
ERROR_CODE_METADATA_LIST_FAILED = "METADATA_LIST_FAILED"
ERROR_CODE_METADATA_INVALID_FORMAT = "METADATA_INVALID_FORMAT"

# Notification Errors
ERROR_CODE_NOTIFICATION_FAILED = "NOTIFICATION_FAILED"


# ============================================================================
# File Upload Constraints
# ============================================================================

DEFAULT_MAX_UPLOAD_BYTES = 5 * 1024 * 1024  # 5MB in bytes

IMAGE_MIME_PREFIX = "image/"

UPLOAD_FIELD_NAME = "image"

MIME_TYPE_EXTENSION_MAP: Final[dict[str, tuple[str, ...]]] = {
    "image/jpeg": ("jpg", "jpeg"),
    "image/png": ("png",),
    "image/gif": ("gif",),
    "image/webp": ("webp",),
    "image/svg+xml": ("svg",),
    "image/heic": ("heic",),
    "image/tiff": ("tif", "tiff"),
}


# ============================================================================
# Backend Selection
# ============================================================================

BLOB_BACKEND_S3 = "s3"
BLOB_BACKEND_LOCAL = "local"
METADATA_BACKEND_DYNAMODB = "dynamodb"
METADATA_BACKEND_JSON_FILE = "json_file"

DEFAULT_IMAGE_KEY_PREFIX = "portfolio"
DEFAULT_UPLOAD_DIR = "uploads"
DEFAULT_UPLOAD_URL_PREFIX = "/uploads"
DEFAULT_METADATA_FILE = "imageData.json"

# ============================================================================
# API Gateway Configuration
# ============================================================================

CORS_ORIGIN = "*"
CORS_METHODS = "GET,POST,DELETE,OPTIONS"
CORS_HEADERS = "Content-Type,Authorization,X-Api-Key"
DEFAULT_CONTENT_TYPE = "application/json"

# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_AWS_ENDPOINT_URL = "AWS_ENDPOINT_URL"
ENV_AWS_REGION = "AWS_REGION"
ENV_BLOB_STORE_BACKEND = "BLOB_STORE_BACKEND"
ENV_METADATA_STORE_BACKEND = "METADATA_STORE_BACKEND"
ENV_IMAGE_S3_BUCKET_NAME = "IMAGE_S3_BUCKET_NAME"
ENV_IMAGE_KEY_PREFIX = "IMAGE_KEY_PREFIX"
ENV_IMAGE_PUBLIC_BASE_URL = "IMAGE_PUBLIC_BASE_URL"
ENV_IMAGE_METADATA_TABLE_NAME = "IMAGE_METADATA_TABLE_NAME"
ENV_UPLOAD_DIR = "UPLOAD_DIR"
ENV_UPLOAD_URL_PREFIX = "UPLOAD_URL_PREFIX"
ENV_IMAGE_METADATA_FILE = "IMAGE_METADATA_FILE"
ENV_MAX_UPLOAD_BYTES = "MAX_UPLOAD_BYTES"
ENV_FROM_NAME = "FROM_NAME"
ENV_FROM_EMAIL = "FROM_EMAIL"
ENV_TO_EMAIL = "TO_EMAIL"
ENV_ADMIN_USERNAME = "ADMIN_USERNAME"
ENV_ADMIN_PASSWORD = "ADMIN_PASSWORD"

# ============================================================================
# Helper Functions
# ============================================================================


def get_max_upload_bytes() -> int:
    """Get the configured upload size limit in bytes."""
    raw = os.getenv(ENV_MAX_UPLOAD_BYTES)
    if not raw:
        return DEFAULT_MAX_UPLOAD_BYTES

    return int(raw)


def format_file_size(size_bytes: int) -> str:
    """Format file size in human-readable format.

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted file size string
    """
    size: float = float(size_bytes)

    for unit in ("B", "KB", "MB", "GB"):
        if size < 1024.0:
            return f"{size:.1f} {unit}"
        size /= 1024.0

    return f"{size:.1f} TB"
