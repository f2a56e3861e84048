"""Data model for word-level diff entries between reference and recognized text."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DiffType(str, Enum):
    """Classification of a single diff entry.

    Values double as the storage format of stored results.
    """

    CORRECT = "correct"
    # Reserved: alignment never emits it; only stored/hand-authored data carries it
    INCORRECT = "incorrect"
    MISSING = "missing"
    EXTRA = "extra"


@dataclass(frozen=True)
class DiffEntry:
    """One classified token of an alignment.

    Attributes:
        word: The token (from the reference for correct/missing, from the
            recognized text for extra)
        type: Classification of the token
        position: 0-based index in the diff output order
    """
    word: str
    type: DiffType
    position: int

    @property
    def is_correct(self) -> bool:
        return self.type is DiffType.CORRECT

    @property
    def is_error(self) -> bool:
        return self.type is not DiffType.CORRECT

    def to_dict(self) -> dict:
        return {"word": self.word, "type": self.type.value, "position": self.position}
