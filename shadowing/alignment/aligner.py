"""LCS-based word alignment between reference tokens and recognized tokens."""
from __future__ import annotations

from typing import List, Sequence, Tuple

from ..models.diff_entry import DiffEntry, DiffType


def lcs_table(original: Sequence[str], recognized: Sequence[str]) -> List[List[int]]:
    """Build the LCS length table; cell [i][j] covers original[:i] and recognized[:j]."""
    m, n = len(original), len(recognized)
    dp = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if original[i - 1] == recognized[j - 1]:
                dp[i][j] = dp[i - 1][j - 1] + 1
            else:
                dp[i][j] = max(dp[i - 1][j], dp[i][j - 1])
    return dp


def align(original: Sequence[str], recognized: Sequence[str]) -> List[DiffEntry]:
    """Classify every token of both sequences as correct, missing or extra.

    Backtracks the LCS table from the bottom-right corner. When the table
    ties, the recognized side is consumed first, so an ambiguous mismatch is
    reported as extra rather than missing. Never produces DiffType.INCORRECT.

      correct -> token present in both, in order
      missing -> reference token that was not spoken
      extra   -> spoken token absent from the reference

    Args:
        original: Reference tokens
        recognized: Recognized tokens

    Returns:
        Diff entries in left-to-right order, positions numbered 0..N-1
    """
    dp = lcs_table(original, recognized)

    # backtrack
    steps: List[Tuple[str, DiffType]] = []
    i, j = len(original), len(recognized)
    while i > 0 or j > 0:
        if i > 0 and j > 0 and original[i - 1] == recognized[j - 1]:
            steps.append((original[i - 1], DiffType.CORRECT))
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or dp[i][j - 1] >= dp[i - 1][j]):
            steps.append((recognized[j - 1], DiffType.EXTRA))
            j -= 1
        else:
            steps.append((original[i - 1], DiffType.MISSING))
            i -= 1
    steps.reverse()

    return [DiffEntry(word=word, type=kind, position=pos) for pos, (word, kind) in enumerate(steps)]
