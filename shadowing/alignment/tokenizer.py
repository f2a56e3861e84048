"""Text tokenization for alignment."""
from __future__ import annotations

from typing import List, Optional

from ..config import DEFAULT_OPTIONS, NormalizationOptions
from .normalizer import collapse_whitespace, expand_contractions, strip_punctuation


def tokenize(text: str, options: Optional[NormalizationOptions] = None) -> List[str]:
    """Split raw text into comparable word tokens.

    Example: "I don't know, really!" -> ["i", "do", "not", "know", "really"]

    Args:
        text: Raw reference or recognized text
        options: Normalization rules (defaults when None)

    Returns:
        Tokens in input order, none of them empty
    """
    opts = options or DEFAULT_OPTIONS

    if opts.trim_whitespace:
        text = collapse_whitespace(text)

    # Expansion changes word boundaries, so it has to happen before the split
    if opts.expand_contractions:
        text = expand_contractions(text)

    tokens: List[str] = []
    for word in text.split():
        if opts.ignore_punctuation:
            word = strip_punctuation(word)
        if not opts.case_sensitive:
            word = word.lower()
        if word:
            tokens.append(word)

    return tokens
