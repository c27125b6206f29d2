"""Alignment utilities for matching a spoken transcript to a script line."""
from .edit_distance import align, edit_distance
from .normalizer import CONTRACTIONS, expand_contractions, normalize, simple_tokenize

__all__ = [
    "align",
    "edit_distance",
    "CONTRACTIONS",
    "expand_contractions",
    "normalize",
    "simple_tokenize",
]
