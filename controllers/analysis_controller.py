"""Controller for running analyses and copying their generated prompt."""

from typing import Any, Dict

from fastapi import HTTPException, Request

from controllers.session_controller import get_session
from models.session_models import COPY_ACK_SECONDS
from services.analysis_session import InvalidTransitionError, run_analysis
from services.openai.analysis_client import AnalysisClient
from services.presentation import build_session_view


async def start_analysis(request: Request, session_id: str) -> Dict[str, Any]:
    """Run the analysis for a session and return the resulting view.

    Without a primary image this is a no-op and the Idle view is returned.
    Transport and parsing failures are reported through the Error state,
    not as HTTP errors.

    Raises:
        HTTPException(404) if the session is unknown, 409 if it is not Idle.
    """
    session = get_session(request, session_id)
    client = AnalysisClient(getattr(request.app.state, "openai_client", None))
    try:
        await run_analysis(session, client)
    except InvalidTransitionError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return build_session_view(session)


async def copy_prompt(request: Request, session_id: str) -> Dict[str, Any]:
    """Acknowledge a clipboard copy of the generated prompt.

    The page writes the prompt to the clipboard first and calls this only
    once that write has succeeded.
    """
    session = get_session(request, session_id)
    try:
        text = session.copy_prompt()
    except InvalidTransitionError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return {"text": text, "copied": session.copy_ack.active, "ack_seconds": COPY_ACK_SECONDS}
