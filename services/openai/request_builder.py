"""Assemble the outbound photo analysis request."""

import os
from typing import Any, Dict, Optional

from models.image_models import EncodedImage
from services.openai.analysis_prompts import build_instruction_prompt
from services.openai.analysis_schema import build_response_format
from services.openai.media_inputs import build_inputs

DEFAULT_MODEL = os.getenv("OPENAI_MODEL", "gpt-5")


def build_request(
    primary: EncodedImage,
    reference: Optional[EncodedImage] = None,
    *,
    model: str = DEFAULT_MODEL,
) -> Dict[str, Any]:
    """Return keyword arguments for `AsyncOpenAI.responses.create`.

    The result depends only on the arguments, so building twice from the
    same images yields identical content.

    Args:
        primary: The black-and-white photograph to analyze.
        reference: Optional color photograph steering the palette.
        model: Model name to request.

    Returns:
        A dict with `model`, `input`, and the `text` output format.
    """
    if primary is None:
        raise ValueError("A primary image is required to build an analysis request.")

    instruction_prompt = build_instruction_prompt(reference_present=reference is not None)
    return {
        "model": model,
        "input": build_inputs(primary, reference, instruction_prompt),
        "text": build_response_format(),
    }
