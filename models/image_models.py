"""Image intake domain models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ImageSlot(str, Enum):
    """The two independent upload slots of an analysis session."""

    PRIMARY = "primary"
    REFERENCE = "reference"


@dataclass(frozen=True)
class EncodedImage:
    """An uploaded image ready for transmission and display.

    Attributes:
        payload: Base64 text encoding of the raw image bytes.
        preview_uri: Data URI carrying the same bytes and the media type.
        media_type: Declared media type, e.g. ``image/png``.
    """

    payload: str
    preview_uri: str
    media_type: str
