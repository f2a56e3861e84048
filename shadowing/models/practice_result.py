"""Immutable record of one evaluated practice attempt."""
from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Tuple

from ..scorer.scoring import grade_for_score
from .diff_entry import DiffEntry


class PracticeMode(str, Enum):
    READING = "reading"
    SHADOWING = "shadowing"


@dataclass(frozen=True)
class RecordingInfo:
    """Metadata of the learner's recording.

    Attributes:
        url: Location of the audio file, if kept
        duration: Length in seconds
        practice_type: Reading aloud or shadowing
    """
    url: Optional[str] = None
    duration: float = 0.0
    practice_type: PracticeMode = PracticeMode.READING


@dataclass(frozen=True)
class PracticeResult:
    """Snapshot of one attempt, built once by ``build_practice_result``.

    ``total_words`` counts reference-side entries only
    (correct + incorrect + missing); extra words are tracked separately.
    """
    id: uuid.UUID
    created_at: datetime
    material_id: uuid.UUID
    original_text: str
    recognized_text: str
    recording: RecordingInfo
    diff_entries: Tuple[DiffEntry, ...]
    total_words: int
    correct_words: int
    incorrect_words: int
    missing_words: int
    extra_words: int
    accuracy_score: float
    fluency_score: float
    overall_score: float

    @property
    def accuracy_rate(self) -> float:
        if self.total_words <= 0:
            return 0.0
        return self.correct_words / self.total_words * 100

    @property
    def word_error_rate(self) -> float:
        if self.total_words <= 0:
            return 0.0
        return (self.incorrect_words + self.missing_words) / self.total_words

    @property
    def words_per_minute(self) -> float:
        """Recognized words per minute of recording; 0 without a duration."""
        duration = self.recording.duration
        if duration <= 0:
            return 0.0
        recognized_word_count = len(self.recognized_text.split())
        return recognized_word_count / (duration / 60.0)

    @property
    def grade(self) -> str:
        return grade_for_score(self.overall_score)
