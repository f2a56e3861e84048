"""Compare a reference text with recognized speech."""
from __future__ import annotations

import concurrent.futures
import uuid
from typing import Iterable, List, Optional, Tuple

from .alignment.aligner import align
from .alignment.edit_distance import edit_distance
from .alignment.tokenizer import tokenize
from .config import NormalizationOptions
from .models.comparison import ComparisonResult
from .models.practice_result import PracticeResult
from .report import build_practice_result
from .scorer.scoring import score


def compare_texts(
    original: str,
    recognized: str,
    options: Optional[NormalizationOptions] = None,
) -> ComparisonResult:
    """Tokenize both texts, align them, and score the alignment.

    Pipeline flow:
    1. Tokenize reference and recognized text with the same options
    2. LCS alignment -> correct / missing / extra entries
    3. Scores from the diff
    4. Token-level edit distance as an auxiliary metric

    Args:
        original: Reference text
        recognized: Recognized text
        options: Normalization rules (defaults when None)

    Returns:
        ComparisonResult
    """
    original_tokens = tokenize(original, options)
    recognized_tokens = tokenize(recognized, options)

    diff_entries = align(original_tokens, recognized_tokens)
    scores = score(diff_entries)
    distance = edit_distance(original_tokens, recognized_tokens)

    return ComparisonResult(
        original_tokens=tuple(original_tokens),
        recognized_tokens=tuple(recognized_tokens),
        diff_entries=tuple(diff_entries),
        edit_distance=distance,
        accuracy_score=scores.accuracy,
        fluency_score=scores.fluency,
        overall_score=scores.overall,
    )


def compare_many(
    pairs: Iterable[Tuple[str, str]],
    options: Optional[NormalizationOptions] = None,
    max_workers: int = 4,
) -> List[ComparisonResult]:
    """Run independent comparisons on a thread pool.

    Each comparison allocates its own tables, so no locking is involved.

    Args:
        pairs: (original, recognized) text pairs
        options: Normalization rules shared by every comparison
        max_workers: Thread pool size

    Returns:
        Results in the same order as the input pairs
    """
    pairs = list(pairs)
    if not pairs:
        return []

    results: List[Optional[ComparisonResult]] = [None] * len(pairs)
    with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
        future_to_idx = {
            executor.submit(compare_texts, original, recognized, options): idx
            for idx, (original, recognized) in enumerate(pairs)
        }
        for future in concurrent.futures.as_completed(future_to_idx):
            results[future_to_idx[future]] = future.result()

    return results  # type: ignore[return-value]


def quick_compare(
    original: str,
    recognized: str,
    material_id: Optional[uuid.UUID] = None,
) -> PracticeResult:
    """Compare with default options and wrap the diff in a PracticeResult."""
    comparison = compare_texts(original, recognized)
    return build_practice_result(
        material_id or uuid.uuid4(),
        original_text=original,
        recognized_text=recognized,
        diff_entries=comparison.diff_entries,
    )
