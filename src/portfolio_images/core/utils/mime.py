from collections.abc import Mapping

from portfolio_images.core.utils.constants import IMAGE_MIME_PREFIX

MAGIC_BYTES: Mapping[bytes, str] = {
    b"\xff\xd8\xff": "image/jpeg",
    b"\x89PNG\r\n\x1a\n": "image/png",
    b"GIF87a": "image/gif",
    b"GIF89a": "image/gif",
    b"RIFF": "image/webp",
}

FALLBACK_MIME_TYPE = "application/octet-stream"


def detect_mime_type(file_data: bytes) -> str:
    for signature, mime in MAGIC_BYTES.items():
        if file_data.startswith(signature):
            return mime

    raise ValueError("Unsupported or unknown file type")


def resolve_mime_type(declared: str | None, file_data: bytes) -> str:
    """Prefer the client-declared type; sniff the bytes only when none was sent."""
    if declared and declared.strip():
        return declared.strip().lower()

    try:
        return detect_mime_type(file_data)
    except ValueError:
        return FALLBACK_MIME_TYPE


def is_image_mime_type(mime_type: str | None) -> bool:
    return bool(mime_type) and mime_type.lower().startswith(IMAGE_MIME_PREFIX)
