"""Accuracy, fluency and overall scores derived from a word-level diff."""
from __future__ import annotations

from typing import Iterable, NamedTuple

from ..models.diff_entry import DiffEntry, DiffType
from .rules import (
    ACCURACY_WEIGHT,
    CONSECUTIVE_BONUS_CAP,
    EXTRA_WORD_PENALTY,
    FLUENCY_WEIGHT,
    GRADE_THRESHOLDS,
    LOWEST_GRADE,
    MAX_SCORE,
    MIN_SCORE,
)


class Scores(NamedTuple):
    accuracy: float
    fluency: float
    overall: float


ZERO_SCORES = Scores(0.0, 0.0, 0.0)


def _clamp(x: float, lo: float = MIN_SCORE, hi: float = MAX_SCORE) -> float:
    return max(lo, min(hi, x))


def score(diff_entries: Iterable[DiffEntry]) -> Scores:
    """Score a diff on a 0-100 scale.

    The denominator counts reference-side entries only (correct + missing).
    Extra words are left out of it so that saying more than the reference
    cannot dilute accuracy; they are charged through the fluency penalty
    instead.

    Fluency starts from accuracy, adds a bonus proportional to the longest
    run of consecutive correct words (the bonus can lift the score to 100 at
    most), then subtracts a fixed penalty per extra word.

    Args:
        diff_entries: Entries in diff order

    Returns:
        Scores(accuracy, fluency, overall); all zero when nothing from the
        reference was aligned
    """
    correct = 0
    missing = 0
    extra = 0
    consecutive = 0
    max_consecutive = 0

    for entry in diff_entries:
        if entry.is_correct:
            correct += 1
            consecutive += 1
            max_consecutive = max(max_consecutive, consecutive)
            continue

        consecutive = 0
        if entry.type is DiffType.MISSING:
            missing += 1
        elif entry.type is DiffType.EXTRA:
            extra += 1
        elif entry.type is DiffType.INCORRECT:
            # reserved; breaks the run but is outside the denominator
            pass

    total = correct + missing
    if total == 0:
        return ZERO_SCORES

    accuracy = correct / total * MAX_SCORE
    bonus = max_consecutive / total * CONSECUTIVE_BONUS_CAP
    penalty = EXTRA_WORD_PENALTY * extra
    fluency = _clamp(min(accuracy + bonus, MAX_SCORE) - penalty)
    overall = accuracy * ACCURACY_WEIGHT + fluency * FLUENCY_WEIGHT

    return Scores(accuracy, fluency, overall)


def grade_for_score(overall: float) -> str:
    """Map an overall score to a letter grade: S, A, B, C or D."""
    for lower_bound, grade in GRADE_THRESHOLDS:
        if lower_bound <= overall <= MAX_SCORE:
            return grade
    return LOWEST_GRADE
