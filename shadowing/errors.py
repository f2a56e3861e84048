"""Error kinds surfaced around the comparison engine.

The engine itself never fails on content. These errors belong to the calling
layer: configuration loading, stored-result decoding, and the upstream steps
(reference transcript, recording, speech recognition) that must succeed before
a comparison can run.
"""
from __future__ import annotations

from typing import Optional


class PracticeError(Exception):
    """Base class for practice evaluation errors."""

    recovery_suggestion: Optional[str] = None

    def __init__(self, message: str, *, recovery_suggestion: Optional[str] = None) -> None:
        super().__init__(message)
        if recovery_suggestion is not None:
            self.recovery_suggestion = recovery_suggestion


class ConfigurationError(PracticeError, ValueError):
    """Malformed normalization options."""


class ResultFormatError(PracticeError, ValueError):
    """A stored practice result could not be decoded."""


class MissingTranscriptError(PracticeError):
    """The practice material has no reference transcript."""

    recovery_suggestion = "Transcribe the material or enter its text before practicing."


class RecordingError(PracticeError):
    """The learner's recording is missing or unreadable."""

    recovery_suggestion = "Record the attempt again."


class RecognitionError(PracticeError):
    """Speech recognition of the recording did not produce a transcript."""


class RecognitionUnavailableError(RecognitionError):
    """The recognition service could not be reached."""

    recovery_suggestion = "Check that the speech recognition service is running and reachable."


class RecognitionFailedError(RecognitionError):
    """The recognition service answered with an error or an unusable payload."""
