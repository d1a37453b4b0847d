"""Helpers to parse Responses API outputs."""

from typing import Any, Dict, Optional

from pydantic import ValidationError

from models.analysis_models import AnalysisResult


class AnalysisParseError(ValueError):
    """The model output is not JSON conforming to the analysis schema."""


def extract_output_text(response: Any) -> str:
    """Return the concatenated output text of a Responses API result."""
    text = getattr(response, "output_text", None)
    if text:
        return text

    chunks = []
    for item in getattr(response, "output", None) or []:
        if getattr(item, "type", None) != "message":
            continue
        for content in getattr(item, "content", None) or []:
            if getattr(content, "type", None) == "output_text":
                chunks.append(getattr(content, "text", "") or "")
    return "".join(chunks)


def parse_analysis(text: Optional[str]) -> AnalysisResult:
    """Validate model output against the analysis schema.

    Raises:
        AnalysisParseError: If the text is empty, not JSON, or missing or
            mistyping any required field.
    """
    if not text or not text.strip():
        raise AnalysisParseError("Model returned no output text.")
    try:
        return AnalysisResult.model_validate_json(text)
    except ValidationError as exc:
        raise AnalysisParseError(
            f"Model output does not match the analysis schema ({exc.error_count()} errors)."
        ) from exc


def extract_usage(response: Any) -> Dict[str, Optional[int]]:
    """Return token usage information from the response, if present."""
    usage = getattr(response, "usage", None)
    return {
        "input_tokens": getattr(usage, "input_tokens", None) if usage else None,
        "output_tokens": getattr(usage, "output_tokens", None) if usage else None,
    }
