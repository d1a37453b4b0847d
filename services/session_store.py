"""Simple in-memory store for analysis sessions."""

from __future__ import annotations

from typing import Dict
from uuid import uuid4

from services.analysis_session import AnalysisSession


class SessionStore:
	"""Hold the analysis session of each open page."""

	def __init__(self) -> None:
		self._sessions: Dict[str, AnalysisSession] = {}

	def create(self) -> AnalysisSession:
		"""Create a new Idle session."""
		session_id = uuid4().hex
		session = AnalysisSession(session_id)
		self._sessions[session_id] = session
		return session

	def get(self, session_id: str) -> AnalysisSession:
		"""Return a session or raise KeyError if missing."""
		session = self._sessions.get(session_id)
		if session is None:
			raise KeyError(f"Session {session_id} not found")
		return session

	def discard(self, session_id: str) -> None:
		"""Drop a session; unknown ids raise KeyError."""
		self.get(session_id)
		del self._sessions[session_id]

	def __len__(self) -> int:
		return len(self._sessions)
