"""Validation helpers for uploaded image content."""

from typing import Optional

from fastapi import UploadFile

DEFAULT_MEDIA_TYPE = "application/octet-stream"


def normalize_media_type(content_type: Optional[str]) -> str:
    """Return a bare, lower-cased media type for an upload.

    Any type is accepted and forwarded as-is; only MIME parameters
    (e.g. ``image/png; charset=binary``) and surrounding whitespace are
    dropped. A missing type falls back to ``application/octet-stream``,
    which is what browsers report for untyped files.
    """
    if not content_type:
        return DEFAULT_MEDIA_TYPE
    media_type = content_type.lower().split(";", 1)[0].strip()
    return media_type or DEFAULT_MEDIA_TYPE


async def read_upload_bytes(upload: UploadFile) -> bytes:
    """Read the raw bytes of an uploaded file, ensuring the upload is not empty."""
    try:
        data = await upload.read()
    except Exception as exc:  # pylint: disable=broad-exception-caught
        raise ValueError("Unable to read uploaded image.") from exc
    if not data:
        raise ValueError("Uploaded image is empty.")
    return data
