"""FastAPI routes for analysis session lifecycle."""

from fastapi import APIRouter, HTTPException, Request

from controllers.session_controller import end_session, reset_session, retry_session, show_session, start_session

router = APIRouter(prefix="/api/sessions", tags=["sessions"])


@router.post("")
async def start_session_route(request: Request):
	try:
		return await start_session(request)
	except HTTPException:
		raise
	except Exception as exc:
		raise HTTPException(status_code=500, detail=str(exc))


@router.get("/{session_id}")
async def show_session_route(request: Request, session_id: str):
	try:
		return await show_session(request, session_id)
	except HTTPException:
		raise
	except Exception as exc:
		raise HTTPException(status_code=500, detail=str(exc))


@router.delete("/{session_id}")
async def end_session_route(request: Request, session_id: str):
	try:
		return await end_session(request, session_id)
	except HTTPException:
		raise
	except Exception as exc:
		raise HTTPException(status_code=500, detail=str(exc))


@router.post("/{session_id}/reset")
async def reset_session_route(request: Request, session_id: str):
	"""Start a new analysis after a successful one."""
	try:
		return await reset_session(request, session_id)
	except HTTPException:
		raise
	except Exception as exc:
		raise HTTPException(status_code=500, detail=str(exc))


@router.post("/{session_id}/retry")
async def retry_session_route(request: Request, session_id: str):
	"""Start over after a failed analysis."""
	try:
		return await retry_session(request, session_id)
	except HTTPException:
		raise
	except Exception as exc:
		raise HTTPException(status_code=500, detail=str(exc))
