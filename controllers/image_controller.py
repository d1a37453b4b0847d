import logging
from typing import Any, Dict

from fastapi import HTTPException, Request, UploadFile

from controllers.session_controller import get_session
from models.image_models import ImageSlot
from services.analysis_session import InvalidTransitionError
from services.image_intake import load_image
from services.presentation import build_session_view
from utils.media_validation import read_upload_bytes

LOGGER = logging.getLogger(__name__)


async def select_image(request: Request, session_id: str, slot: ImageSlot, file: UploadFile) -> Dict[str, Any]:
    """Encode an uploaded file into one of the session's image slots.

    A file that cannot be read is ignored: the session is left unchanged
    and its current view is returned.

    Args:
        request: FastAPI Request (used to access app.state.session_store).
        session_id: Id of the analysis session.
        slot: Which slot the file fills.
        file: The uploaded image file.

    Returns:
        The session view after the selection.

    Raises:
        HTTPException(404) if the session is unknown, 409 if it is not Idle.
    """
    session = get_session(request, session_id)

    try:
        raw = await read_upload_bytes(file)
        image = load_image(raw, file.content_type)
    except ValueError as exc:
        LOGGER.warning("Session %s: ignoring %s upload %r: %s", session_id, slot.value, file.filename, exc)
        return build_session_view(session)

    try:
        session.select_image(slot, image)
    except InvalidTransitionError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return build_session_view(session)


async def clear_image(request: Request, session_id: str, slot: ImageSlot) -> Dict[str, Any]:
    """Discard the image held in one slot."""
    session = get_session(request, session_id)
    try:
        session.clear_slot(slot)
    except InvalidTransitionError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return build_session_view(session)
