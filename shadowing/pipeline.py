"""Evaluate practice attempts end to end."""
from __future__ import annotations

import logging
import os
import uuid
from typing import Callable, Optional

from .asr.recognizer import transcribe_audio
from .comparison import compare_texts
from .config import NormalizationOptions
from .errors import MissingTranscriptError, RecordingError
from .models.practice_result import PracticeResult, RecordingInfo
from .report import build_practice_result

logger = logging.getLogger(__name__)

Transcriber = Callable[[str], str]


def _require_transcript(original_text: Optional[str]) -> str:
    if original_text is None or not original_text.strip():
        raise MissingTranscriptError("The practice material has no reference transcript")
    return original_text


def evaluate_attempt(
    material_id: uuid.UUID,
    original_text: Optional[str],
    recognized_text: str,
    *,
    recording: Optional[RecordingInfo] = None,
    options: Optional[NormalizationOptions] = None,
) -> PracticeResult:
    """
    Compare an already-recognized attempt against its material and build the result.

    Args:
        material_id: Material the attempt belongs to
        original_text: Reference transcript of the material
        recognized_text: Recognized text of the recording (may be empty)
        recording: Recording metadata
        options: Normalization rules

    Returns:
        PracticeResult

    Raises:
        MissingTranscriptError: original_text is missing or blank
    """
    original_text = _require_transcript(original_text)

    comparison = compare_texts(original_text, recognized_text, options)
    result = build_practice_result(
        material_id,
        original_text=original_text,
        recognized_text=recognized_text,
        diff_entries=comparison.diff_entries,
        recording=recording,
    )
    logger.info(
        "Evaluated attempt %s for material %s: overall=%.1f (%s), distance=%d",
        result.id,
        material_id,
        result.overall_score,
        result.grade,
        comparison.edit_distance,
    )
    return result


def evaluate_recording(
    material_id: uuid.UUID,
    original_text: Optional[str],
    recording: RecordingInfo,
    *,
    options: Optional[NormalizationOptions] = None,
    transcriber: Transcriber = transcribe_audio,
) -> PracticeResult:
    """
    Recognize a recording and evaluate it.

    Pipeline flow:
    1. Check the material has a reference transcript
    2. Check the recording file is present
    3. Run speech recognition (external service)
    4. Compare and build the result

    Upstream failures are raised as distinct error kinds before the
    comparison engine runs.

    Args:
        material_id: Material the attempt belongs to
        original_text: Reference transcript of the material
        recording: Recording metadata; ``url`` must point to a local file
        options: Normalization rules
        transcriber: Callable mapping an audio path to text

    Returns:
        PracticeResult

    Raises:
        MissingTranscriptError, RecordingError, RecognitionError
    """
    original_text = _require_transcript(original_text)

    audio_path = recording.url
    if not audio_path or not os.path.isfile(audio_path):
        raise RecordingError(f"Recording not accessible: {audio_path!r}")

    recognized_text = transcriber(audio_path)
    return evaluate_attempt(
        material_id,
        original_text,
        recognized_text,
        recording=recording,
        options=options,
    )
