"""State machine driving a single photo analysis session."""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from models.analysis_models import AnalysisRequest, AnalysisResult
from models.image_models import EncodedImage, ImageSlot
from models.session_models import CopyAcknowledgement, Error, Idle, Loading, SessionState, Success
from services.openai.analysis_client import AnalysisClient

LOGGER = logging.getLogger(__name__)

ANALYSIS_ERROR_MESSAGE = (
	"Nepodarilo sa vykonať analýzu. Skontrolujte prosím pripojenie alebo platnosť API kľúča."
)


class InvalidTransitionError(RuntimeError):
	"""An operation was requested in a state that does not allow it."""


class AnalysisSession:
	"""Own the image slots, the session state, and the copy acknowledgement."""

	def __init__(self, session_id: str, clock: Callable[[], float] = time.monotonic) -> None:
		self.session_id = session_id
		self.primary: Optional[EncodedImage] = None
		self.reference: Optional[EncodedImage] = None
		self.state: SessionState = Idle()
		self.copy_ack = CopyAcknowledgement(clock=clock)

	def get_slot(self, slot: ImageSlot) -> Optional[EncodedImage]:
		return self.primary if slot is ImageSlot.PRIMARY else self.reference

	def select_image(self, slot: ImageSlot, image: EncodedImage) -> None:
		"""Fill one slot; the other slot is left untouched."""
		self._require(Idle, "select an image")
		if slot is ImageSlot.PRIMARY:
			self.primary = image
		else:
			self.reference = image

	def clear_slot(self, slot: ImageSlot) -> None:
		"""Discard one slot's image; the other slot is left untouched."""
		self._require(Idle, "clear an image")
		if slot is ImageSlot.PRIMARY:
			self.primary = None
		else:
			self.reference = None

	def begin_analysis(self) -> Optional[AnalysisRequest]:
		"""Move Idle -> Loading and return the images to analyze.

		Returns None, leaving the session Idle, when no primary image is selected.
		"""
		self._require(Idle, "start an analysis")
		if self.primary is None:
			return None
		self.state = Loading()
		return AnalysisRequest(primary=self.primary, reference=self.reference)

	def complete(self, result: AnalysisResult) -> None:
		self._require(Loading, "complete an analysis")
		self.state = Success(result=result)

	def fail(self, message: str) -> None:
		self._require(Loading, "fail an analysis")
		self.state = Error(message=message)

	def reset(self) -> None:
		"""Start a new analysis after a successful one."""
		self._require(Success, "reset")
		self._clear()

	def retry(self) -> None:
		"""Start over after a failed analysis."""
		self._require(Error, "retry")
		self._clear()

	def copy_prompt(self) -> str:
		"""Return the generated prompt for the clipboard and raise the acknowledgement."""
		self._require(Success, "copy the generated prompt")
		text = self.state.result.imagen_prompt
		self.copy_ack.trigger()
		return text

	def _clear(self) -> None:
		self.primary = None
		self.reference = None
		self.copy_ack.clear()
		self.state = Idle()

	def _require(self, expected: type, action: str) -> None:
		if not isinstance(self.state, expected):
			raise InvalidTransitionError(f"Cannot {action} while the session is {self.state.status}.")


async def run_analysis(session: AnalysisSession, analysis_client: AnalysisClient) -> SessionState:
	"""Run the single analysis action for a session and return its final state.

	Any failure of the call, including output that does not match the
	schema, ends in the Error state with the fixed user-facing message.
	"""
	analysis_request = session.begin_analysis()
	if analysis_request is None:
		LOGGER.info("Session %s: analysis requested without a primary image.", session.session_id)
		return session.state

	try:
		result = await analysis_client.submit(analysis_request)
	except Exception as exc:  # pylint: disable=broad-exception-caught
		LOGGER.error("Session %s: analysis failed: %s", session.session_id, exc)
		session.fail(ANALYSIS_ERROR_MESSAGE)
	else:
		session.complete(result)
	return session.state
