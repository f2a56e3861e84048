"""Scoring of word-level practice diffs."""
from .scoring import Scores, grade_for_score, score

__all__ = ["Scores", "grade_for_score", "score"]
