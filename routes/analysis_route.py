"""FastAPI routes for photo analysis."""

from fastapi import APIRouter, HTTPException, Request

from controllers.analysis_controller import copy_prompt, start_analysis

router = APIRouter(prefix="/api/sessions", tags=["analysis"])


@router.post("/{session_id}/analysis", summary="Analyze the selected photographs")
async def start_analysis_route(request: Request, session_id: str):
    """Run the analysis and return the session view in its final state.

    Args:
        request: The FastAPI request containing application state.
        session_id: Id of the analysis session.

    Returns:
        The session view: success with the result, error with the
        user-facing message, or idle when no primary image was selected.

    Raises:
        HTTPException: If the session is unknown or an analysis is not allowed now.
    """
    try:
        return await start_analysis(request, session_id)
    except HTTPException:
        raise
    except Exception as exc:  # pylint: disable=broad-exception-caught
        raise HTTPException(status_code=500, detail="Failed to run the analysis.") from exc


@router.post("/{session_id}/copy-prompt", summary="Copy the generated image prompt")
async def copy_prompt_route(request: Request, session_id: str):
    try:
        return await copy_prompt(request, session_id)
    except HTTPException:
        raise
    except Exception as exc:  # pylint: disable=broad-exception-caught
        raise HTTPException(status_code=500, detail=str(exc)) from exc
