"""Session state models for the analysis workflow."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, ClassVar, Optional, Union

from models.analysis_models import AnalysisResult

COPY_ACK_SECONDS = 2.0


@dataclass(frozen=True)
class Idle:
	"""Waiting for image selection or an analysis trigger."""

	status: ClassVar[str] = "idle"


@dataclass(frozen=True)
class Loading:
	"""Exactly one analysis call is outstanding."""

	status: ClassVar[str] = "loading"


@dataclass(frozen=True)
class Success:
	"""The analysis completed and produced a result."""

	result: AnalysisResult
	status: ClassVar[str] = "success"


@dataclass(frozen=True)
class Error:
	"""The analysis failed; `message` is user-facing."""

	message: str
	status: ClassVar[str] = "error"


SessionState = Union[Idle, Loading, Success, Error]


@dataclass
class CopyAcknowledgement:
	"""Transient flag raised when the generated prompt is copied.

	The flag reads as active for `duration` seconds after `trigger()` and
	then reverts on its own.
	"""

	duration: float = COPY_ACK_SECONDS
	clock: Callable[[], float] = time.monotonic
	copied_at: Optional[float] = field(default=None, init=False)

	def trigger(self) -> None:
		self.copied_at = self.clock()

	def clear(self) -> None:
		self.copied_at = None

	@property
	def active(self) -> bool:
		if self.copied_at is None:
			return False
		return self.clock() - self.copied_at < self.duration
