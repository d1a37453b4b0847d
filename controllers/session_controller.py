"""Session lifecycle helpers for the analysis page."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import HTTPException, Request

from services.analysis_session import AnalysisSession, InvalidTransitionError
from services.presentation import build_session_view
from services.session_store import SessionStore


def get_store(request: Request) -> SessionStore:
	"""Retrieve the shared session store from the app state."""
	store = getattr(request.app.state, "session_store", None)
	if store is None:
		raise HTTPException(status_code=500, detail="Session store not initialized.")
	return store


def get_session(request: Request, session_id: str) -> AnalysisSession:
	"""Return the session or raise a 404."""
	try:
		return get_store(request).get(session_id)
	except KeyError as exc:
		raise HTTPException(status_code=404, detail=str(exc)) from exc


async def start_session(request: Request) -> Dict[str, Any]:
	"""Create a new Idle session and return its view."""
	session = get_store(request).create()
	return build_session_view(session)


async def show_session(request: Request, session_id: str) -> Dict[str, Any]:
	"""Return the current view of a session."""
	return build_session_view(get_session(request, session_id))


async def end_session(request: Request, session_id: str) -> Dict[str, Any]:
	"""Discard a session when its page goes away."""
	try:
		get_store(request).discard(session_id)
	except KeyError as exc:
		raise HTTPException(status_code=404, detail=str(exc)) from exc
	return {"session_id": session_id, "discarded": True}


async def reset_session(request: Request, session_id: str) -> Dict[str, Any]:
	"""Clear a successful session back to Idle."""
	session = get_session(request, session_id)
	try:
		session.reset()
	except InvalidTransitionError as exc:
		raise HTTPException(status_code=409, detail=str(exc)) from exc
	return build_session_view(session)


async def retry_session(request: Request, session_id: str) -> Dict[str, Any]:
	"""Clear a failed session back to Idle."""
	session = get_session(request, session_id)
	try:
		session.retry()
	except InvalidTransitionError as exc:
		raise HTTPException(status_code=409, detail=str(exc)) from exc
	return build_session_view(session)
