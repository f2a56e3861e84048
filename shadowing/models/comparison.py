"""Data model for the outcome of comparing two texts."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .diff_entry import DiffEntry


@dataclass(frozen=True)
class ComparisonResult:
    """Tokens, diff, edit distance and scores of one comparison.

    Attributes:
        original_tokens: Normalized reference tokens
        recognized_tokens: Normalized recognized tokens
        diff_entries: Word-level diff in output order
        edit_distance: Token-level Levenshtein distance
        accuracy_score: 0-100
        fluency_score: 0-100
        overall_score: 0-100
    """
    original_tokens: Tuple[str, ...]
    recognized_tokens: Tuple[str, ...]
    diff_entries: Tuple[DiffEntry, ...]
    edit_distance: int
    accuracy_score: float
    fluency_score: float
    overall_score: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "originalTokens": list(self.original_tokens),
            "recognizedTokens": list(self.recognized_tokens),
            "diffEntries": [entry.to_dict() for entry in self.diff_entries],
            "editDistance": self.edit_distance,
            "accuracyScore": self.accuracy_score,
            "fluencyScore": self.fluency_score,
            "overallScore": self.overall_score,
        }
