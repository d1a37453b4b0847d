import json
import os
import sys
from types import SimpleNamespace

import pytest

# Ensure project root is importable during tests
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from models.image_models import EncodedImage  # noqa: E402


def analysis_payload(text_analysis=True):
    scene = {
        "description": "A family posing in front of a timber farmhouse.",
        "objects": ["farmhouse", "horse cart", "linen dresses"],
        "era": "1920s",
        "context": "Rural Central Europe",
    }
    if text_analysis:
        scene["textAnalysis"] = "Handwritten caption: 'Leto 1926'."
    return {
        "sceneDetection": scene,
        "colorPalette": [
            {"hex": "#8B5A2B", "label": "Weathered timber", "description": "Sun-bleached wall planks."},
            {"hex": "#E8DCC4", "label": "Linen", "description": "Undyed summer dresses."},
        ],
        "restorationGuide": [
            {"step": "Remove dust", "action": "Denoise", "details": "Clean specks across the sky."},
            {"step": "Repair crease", "action": "Inpaint", "details": "Fill the fold at the left edge."},
        ],
        "imagenPrompt": "Colorize this 1920s rural family photograph with natural tones.",
    }


class FakeResponses:
    """Stand-in for `AsyncOpenAI.responses` that records every call."""

    def __init__(self, output_text=None, error=None, on_create=None):
        self.output_text = output_text
        self.error = error
        self.on_create = on_create
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.on_create is not None:
            self.on_create(kwargs)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(
            output_text=self.output_text,
            output=[],
            usage=SimpleNamespace(input_tokens=1200, output_tokens=340),
        )


class FakeOpenAI:
    def __init__(self, output_text=None, error=None, on_create=None):
        self.responses = FakeResponses(output_text=output_text, error=error, on_create=on_create)


@pytest.fixture
def payload():
    return analysis_payload()


@pytest.fixture
def fake_openai(payload):
    return FakeOpenAI(output_text=json.dumps(payload))


@pytest.fixture
def primary_image():
    return EncodedImage(payload="UFJJTUFSWQ==", preview_uri="data:image/png;base64,UFJJTUFSWQ==", media_type="image/png")


@pytest.fixture
def reference_image():
    return EncodedImage(payload="UkVG", preview_uri="data:image/jpeg;base64,UkVG", media_type="image/jpeg")


@pytest.fixture
def make_payload():
    return analysis_payload


@pytest.fixture
def make_openai():
    return FakeOpenAI
