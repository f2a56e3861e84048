"""Shadowing / read-aloud practice evaluation.

Compares a reference transcript with the recognized text of a learner's
recording and scores the attempt:

- tokenize both texts under configurable normalization rules
- LCS word alignment (correct / missing / extra) plus token edit distance
- accuracy, fluency and overall scores (0-100) and a letter grade
- immutable per-attempt results and history statistics
"""
from .comparison import compare_many, compare_texts, quick_compare
from .config import NormalizationOptions, load_options
from .models.comparison import ComparisonResult
from .models.diff_entry import DiffEntry, DiffType
from .models.practice_result import PracticeMode, PracticeResult, RecordingInfo
from .report import build_practice_result

__all__ = [
    "ComparisonResult",
    "DiffEntry",
    "DiffType",
    "NormalizationOptions",
    "PracticeMode",
    "PracticeResult",
    "RecordingInfo",
    "build_practice_result",
    "compare_many",
    "compare_texts",
    "load_options",
    "quick_compare",
]
