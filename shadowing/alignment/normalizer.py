"""Text and token normalization utilities for alignment."""
from __future__ import annotations

import re
import unicodedata
from typing import Dict, List, Tuple

# Whole-word contraction expansions, matched case-insensitively
CONTRACTIONS: Dict[str, str] = {
    "don't": "do not",
    "won't": "will not",
    "can't": "cannot",
    "isn't": "is not",
    "aren't": "are not",
    "wasn't": "was not",
    "weren't": "were not",
    "hasn't": "has not",
    "haven't": "have not",
    "hadn't": "had not",
    "doesn't": "does not",
    "didn't": "did not",
    "wouldn't": "would not",
    "couldn't": "could not",
    "shouldn't": "should not",
    "mightn't": "might not",
    "mustn't": "must not",
    "I'm": "I am",
    "you're": "you are",
    "he's": "he is",
    "she's": "she is",
    "it's": "it is",
    "we're": "we are",
    "they're": "they are",
    "I've": "I have",
    "you've": "you have",
    "we've": "we have",
    "they've": "they have",
    "I'd": "I would",
    "you'd": "you would",
    "he'd": "he would",
    "she'd": "she would",
    "we'd": "we would",
    "they'd": "they would",
    "I'll": "I will",
    "you'll": "you will",
    "he'll": "he will",
    "she'll": "she will",
    "we'll": "we will",
    "they'll": "they will",
}

_WHITESPACE_RE = re.compile(r"\s+")


def _contraction_pattern(contraction: str) -> "re.Pattern[str]":
    # ASR output often uses the typographic apostrophe
    body = re.escape(contraction).replace("'", "['’]")
    return re.compile(rf"\b{body}\b", re.IGNORECASE)


_CONTRACTION_PATTERNS: List[Tuple["re.Pattern[str]", str]] = [
    (_contraction_pattern(contraction), expanded)
    for contraction, expanded in CONTRACTIONS.items()
]


def collapse_whitespace(text: str) -> str:
    """Trim the edges and collapse internal whitespace runs to a single space."""
    return _WHITESPACE_RE.sub(" ", text.strip())


def expand_contractions(text: str) -> str:
    """Replace known contractions with their expansions.

    Matching is whole-word and case-insensitive ("DON'T" -> "do not"). Must
    run before splitting, since expansions introduce new word boundaries.
    """
    for pattern, expanded in _CONTRACTION_PATTERNS:
        text = pattern.sub(expanded, text)
    return text


def is_punctuation_or_symbol(char: str) -> bool:
    """Check whether a character is Unicode punctuation (P*) or a symbol (S*)."""
    return unicodedata.category(char)[0] in ("P", "S")


def strip_punctuation(token: str) -> str:
    """Strip leading and trailing punctuation/symbol characters from a token.

    Inner characters are kept, so "o'clock" and "e-mail" survive intact.
    """
    start, end = 0, len(token)
    while start < end and is_punctuation_or_symbol(token[start]):
        start += 1
    while end > start and is_punctuation_or_symbol(token[end - 1]):
        end -= 1
    return token[start:end]
