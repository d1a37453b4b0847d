"""Shape sessions and analysis results for the browser view."""

from __future__ import annotations

from typing import Any, Dict, Optional

from models.analysis_models import AnalysisResult
from models.image_models import EncodedImage, ImageSlot
from models.session_models import Error, Success
from services.analysis_session import AnalysisSession


def build_result_view(result: AnalysisResult) -> Dict[str, Any]:
    """Return the result sections in display order.

    The `textAnalysis` key is present only when the model supplied one, so
    the view can omit that block entirely.
    """
    scene = result.scene_detection
    scene_view: Dict[str, Any] = {
        "description": scene.description,
        "objects": list(scene.objects),
        "era": scene.era,
        "context": scene.context,
    }
    if scene.text_analysis is not None:
        scene_view["textAnalysis"] = scene.text_analysis

    return {
        "scene": scene_view,
        "palette": [swatch.model_dump(by_alias=True) for swatch in result.color_palette],
        "restorationGuide": [step.model_dump(by_alias=True) for step in result.restoration_guide],
        "imagenPrompt": result.imagen_prompt,
    }


def _image_view(image: Optional[EncodedImage]) -> Optional[Dict[str, str]]:
    if image is None:
        return None
    return {"previewUri": image.preview_uri, "mediaType": image.media_type}


def build_session_view(session: AnalysisSession) -> Dict[str, Any]:
    """Return everything the page needs to render the current state."""
    state = session.state
    return {
        "session_id": session.session_id,
        "status": state.status,
        "images": {slot.value: _image_view(session.get_slot(slot)) for slot in ImageSlot},
        "result": build_result_view(state.result) if isinstance(state, Success) else None,
        "error": state.message if isinstance(state, Error) else None,
        "copied": session.copy_ack.active,
    }
