"""Photo analysis service using OpenAI's Responses API."""

import logging
import time
from typing import Any, Dict, Optional

from openai import AsyncOpenAI

from models.analysis_models import AnalysisRequest, AnalysisResult
from services.openai.request_builder import DEFAULT_MODEL, build_request
from services.openai.response_parser import extract_output_text, extract_usage, parse_analysis

LOGGER = logging.getLogger(__name__)


class AnalysisClient:
    """Send one analysis request and decode the structured result."""

    def __init__(self, client: Optional[AsyncOpenAI], model: str = DEFAULT_MODEL) -> None:
        """Initialize with the shared OpenAI client.

        A missing client is accepted here so that a deployment without an
        API key still reaches `submit`, where it fails like any other
        transport error.
        """
        self.client = client
        self.model = model

    async def submit(self, request: AnalysisRequest) -> AnalysisResult:
        """Analyze the requested images with a single, non-retrying call.

        Raises:
            RuntimeError: If no OpenAI client is configured.
            AnalysisParseError: If the output does not match the schema.
            openai.OpenAIError: On any transport, authentication, or quota failure.
        """
        if self.client is None:
            raise RuntimeError("OpenAI client is not configured.")

        payload = build_request(request.primary, request.reference, model=self.model)
        start_time = time.time()
        response = await self._create_response(payload)
        latency = time.time() - start_time

        usage = extract_usage(response)
        LOGGER.info(
            "Analysis response received in %.3fs (input_tokens=%s, output_tokens=%s)",
            latency,
            usage["input_tokens"],
            usage["output_tokens"],
        )
        return self._parse_response(response)

    async def _create_response(self, payload: Dict[str, Any]) -> Any:
        """Send the multimodal request to the OpenAI Responses API."""
        try:
            return await self.client.responses.create(**payload)
        except Exception as exc:
            LOGGER.error("Error during OpenAI Responses API call: %s", exc)
            raise

    def _parse_response(self, response: Any) -> AnalysisResult:
        """Decode the structured result from the model output."""
        try:
            return parse_analysis(extract_output_text(response))
        except Exception as exc:
            LOGGER.error("Error parsing OpenAI response: %s", exc)
            LOGGER.debug("Full response object: %r", response)
            raise
