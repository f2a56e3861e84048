"""Alignment utilities for matching reference text to recognized speech."""
from .aligner import align
from .edit_distance import edit_distance
from .tokenizer import tokenize

__all__ = ["align", "edit_distance", "tokenize"]
