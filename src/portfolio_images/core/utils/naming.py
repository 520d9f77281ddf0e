"""Generated blob names."""

from pathlib import PurePosixPath
import secrets

from portfolio_images.core.utils.constants import MIME_TYPE_EXTENSION_MAP, UPLOAD_FIELD_NAME
from portfolio_images.core.utils.time import utc_now_millis


def extension_for(original_name: str, mime_type: str) -> str:
    """Return a dotted extension, preferring the one on the client file name."""
    suffix = PurePosixPath(original_name).suffix.lower()
    if suffix and len(suffix) > 1:
        return suffix

    extensions = MIME_TYPE_EXTENSION_MAP.get(mime_type.lower())
    if extensions:
        return f".{extensions[0]}"

    return ""


def generate_blob_name(original_name: str, mime_type: str) -> str:
    """Build a unique name such as `image-1700000000000-123456789.jpg`.

    The name never depends on the image key, so re-uploading a key
    always produces a new blob.
    """
    unique_suffix = f"{utc_now_millis()}-{secrets.randbelow(10**9):09d}"
    return f"{UPLOAD_FIELD_NAME}-{unique_suffix}{extension_for(original_name, mime_type)}"
