"""Convert selected image files into transportable, displayable values."""

from __future__ import annotations

import base64
from typing import Optional

from models.image_models import EncodedImage
from utils.media_validation import normalize_media_type


def load_image(file_bytes: bytes, media_type: Optional[str] = None) -> EncodedImage:
    """Encode raw image bytes for transmission and preview.

    No dimension, size, or content checks are made; whatever the user
    selected is forwarded.

    Args:
        file_bytes: Raw bytes of the selected file.
        media_type: Declared media type reported for the file.

    Returns:
        The base64 payload, a data URI preview, and the declared media type.

    Raises:
        ValueError: If the input is not binary data or is empty.
    """
    if not isinstance(file_bytes, (bytes, bytearray, memoryview)):
        raise ValueError("Image content must be binary data.")
    raw = bytes(file_bytes)
    if not raw:
        raise ValueError("Image content is empty.")

    declared = normalize_media_type(media_type)
    payload = base64.b64encode(raw).decode("ascii")
    return EncodedImage(
        payload=payload,
        preview_uri=f"data:{declared};base64,{payload}",
        media_type=declared,
    )
