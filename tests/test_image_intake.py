import base64

import pytest

from services.image_intake import load_image
from utils.media_validation import normalize_media_type


def test_load_image_encodes_payload_and_preview():
    raw = b"\x89PNG\r\n\x1a\nfake"
    image = load_image(raw, "image/png")

    assert base64.b64decode(image.payload) == raw
    assert image.media_type == "image/png"
    assert image.preview_uri == f"data:image/png;base64,{image.payload}"


def test_load_image_forwards_any_media_type():
    image = load_image(b"%PDF-1.4", "application/pdf")
    assert image.media_type == "application/pdf"
    assert image.preview_uri.startswith("data:application/pdf;base64,")


def test_load_image_without_media_type_uses_octet_stream():
    image = load_image(b"abc", None)
    assert image.media_type == "application/octet-stream"


@pytest.mark.parametrize("bad", [b"", "not bytes", None])
def test_load_image_rejects_unreadable_input(bad):
    with pytest.raises(ValueError):
        load_image(bad, "image/png")


def test_normalize_media_type_strips_parameters():
    assert normalize_media_type("Image/JPEG; charset=binary") == "image/jpeg"
    assert normalize_media_type("") == "application/octet-stream"
