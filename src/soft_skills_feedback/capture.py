"""Bind a speech capture source to the analyzer.

The capture source (a browser speech API, a streaming ASR client, ...) is
anything implementing ``SpeechCaptureSource``. ``TranscriptSession`` keeps the
listening flag and the latest transcript, and hands that transcript to
``analyze`` on request.
"""

from __future__ import annotations

import logging
from typing import Callable, Protocol

from soft_skills_feedback.core import analyze
from soft_skills_feedback.models import AnalysisResult
from soft_skills_feedback.scoring import ScoringParameters

logger = logging.getLogger(__name__)

ResultCallback = Callable[[str], None]
ErrorCallback = Callable[[str], None]


class TranscriptUnavailableError(RuntimeError):
    """Raised when analysis is requested before any transcript exists."""


class SpeechCaptureSource(Protocol):
    def start(self) -> None: ...

    def stop(self) -> None: ...

    def on_result(self, callback: ResultCallback) -> None: ...

    def on_error(self, callback: ErrorCallback) -> None: ...


class TranscriptSession:
    """Tracks one capture source and its most recent transcript.

    Not thread-safe. Sources that deliver callbacks on their own thread must be
    serialized by the caller.
    """

    def __init__(self, source: SpeechCaptureSource, parameters: ScoringParameters | None = None) -> None:
        self._source = source
        self._parameters = parameters
        self.is_listening = False
        self.transcript: str | None = None
        self.last_error: str | None = None
        source.on_result(self._handle_result)
        source.on_error(self._handle_error)

    def start_listening(self) -> None:
        if self.is_listening:
            logger.debug("Capture already running; ignoring start")
            return
        self.last_error = None
        self.is_listening = True
        self._source.start()
        logger.debug("Capture started")

    def stop_listening(self) -> None:
        if not self.is_listening:
            logger.debug("Capture not running; ignoring stop")
            return
        self.is_listening = False
        self._source.stop()
        logger.debug("Capture stopped")

    def set_transcript(self, text: str) -> None:
        self.transcript = text

    def _handle_result(self, text: str) -> None:
        self.transcript = text

    def _handle_error(self, reason: str) -> None:
        logger.error("Speech capture error: %s", reason)
        self.last_error = reason
        self.is_listening = False

    def analyze(self) -> AnalysisResult:
        if self.transcript is None or not self.transcript.strip():
            raise TranscriptUnavailableError("No transcript to analyze")
        result = analyze(self.transcript, self._parameters)
        logger.debug("Analysis result: %s", result.feedback_summary)
        return result
