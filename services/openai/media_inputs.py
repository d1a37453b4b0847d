"""Utilities to build multimodal input payloads for the Responses API."""

from typing import Any, Dict, List, Optional

from models.image_models import EncodedImage


def to_image_data_url(image: EncodedImage) -> str:
    """Return a data URL carrying the image payload and its declared media type."""
    return f"data:{image.media_type};base64,{image.payload}"


def build_image_content(image: EncodedImage) -> Dict[str, Any]:
    """Wrap an encoded image as an `input_image` content part."""
    return {"type": "input_image", "image_url": to_image_data_url(image)}


def build_inputs(
    primary: EncodedImage,
    reference: Optional[EncodedImage],
    instruction_prompt: str,
) -> List[Dict[str, Any]]:
    """Build the input array: primary image, optional reference, then instructions."""
    content: List[Dict[str, Any]] = [build_image_content(primary)]
    if reference is not None:
        content.append(build_image_content(reference))
    content.append({"type": "input_text", "text": instruction_prompt})
    return [{"type": "message", "role": "user", "content": content}]
