"""Structured analysis result returned by the multimodal model.

These pydantic models are the single declaration of the response contract:
the outbound JSON schema is derived from them and inbound responses are
validated against them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from models.image_models import EncodedImage

HEX_COLOR_PATTERN = r"^#?[0-9A-Fa-f]{6}$"


class _ContractModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True, extra="forbid")


class SceneDetection(_ContractModel):
    description: str
    objects: List[str]
    era: str
    context: str
    text_analysis: Optional[str] = Field(
        default=None,
        description="Reading of any visible text, captions, or notes. Omit when there is none.",
    )


class ColorSwatch(_ContractModel):
    hex: str = Field(pattern=HEX_COLOR_PATTERN, description="Six hex digit color, e.g. #A0522D.")
    label: str
    description: str


class RestorationStep(_ContractModel):
    step: str = Field(description="Short title of the step.")
    action: str = Field(description="Short category tag, e.g. Denoise.")
    details: str


class AnalysisResult(_ContractModel):
    scene_detection: SceneDetection
    color_palette: List[ColorSwatch]
    restoration_guide: List[RestorationStep]
    imagen_prompt: str


@dataclass(frozen=True)
class AnalysisRequest:
    """Images selected for one analysis attempt."""

    primary: EncodedImage
    reference: Optional[EncodedImage] = None
