"""Levenshtein edit distance over token sequences."""
from __future__ import annotations

from typing import List, Sequence


def edit_distance(a: Sequence[str], b: Sequence[str]) -> int:
    """Minimum number of token insertions, deletions and substitutions turning a into b.

    Tokens are compared case-insensitively whatever the tokenizer settings
    were, so this metric is stricter about identity than the alignment.

    Args:
        a: Source token sequence
        b: Target token sequence

    Returns:
        Non-negative distance; symmetric in its arguments
    """
    m, n = len(a), len(b)
    if m == 0:
        return n
    if n == 0:
        return m

    left = [token.lower() for token in a]
    right = [token.lower() for token in b]

    dp: List[List[int]] = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(m + 1):
        dp[i][0] = i
    for j in range(n + 1):
        dp[0][j] = j

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            cost_sub = 0 if left[i - 1] == right[j - 1] else 1
            dp[i][j] = min(
                dp[i - 1][j] + 1,  # delete
                dp[i][j - 1] + 1,  # insert
                dp[i - 1][j - 1] + cost_sub,
            )

    return dp[m][n]
