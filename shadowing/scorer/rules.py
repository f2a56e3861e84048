"""Scoring weights and thresholds for practice evaluation."""
from __future__ import annotations

MIN_SCORE = 0.0
MAX_SCORE = 100.0

# Overall score split between accuracy and fluency
ACCURACY_WEIGHT = 0.7
FLUENCY_WEIGHT = 0.3

# Maximum fluency bonus for the longest unbroken run of correct words
CONSECUTIVE_BONUS_CAP = 20.0

# Fluency points lost per extra (spoken but not in reference) word
EXTRA_WORD_PENALTY = 5.0

# Lower bound of each grade band on the overall score, best first
GRADE_THRESHOLDS = (
    (90.0, "S"),
    (80.0, "A"),
    (70.0, "B"),
    (60.0, "C"),
)
LOWEST_GRADE = "D"
