"""Token normalization utilities for alignment."""
from __future__ import annotations

import re
from typing import List, Tuple

from ..logging_config import get_logger

logger = get_logger(__name__)


def _contraction(word: str, expansion: str) -> Tuple[re.Pattern[str], str]:
    return re.compile(r"\b" + re.escape(word) + r"\b", re.IGNORECASE), expansion


# Applied in order; none of the patterns overlap.
CONTRACTIONS: Tuple[Tuple[re.Pattern[str], str], ...] = (
    _contraction("can't", "cannot"),
    _contraction("won't", "will not"),
    _contraction("i'm", "i am"),
    _contraction("i'll", "i will"),
    _contraction("i'd", "i would"),
    _contraction("i've", "i have"),
    _contraction("you're", "you are"),
    _contraction("you'll", "you will"),
    _contraction("you've", "you have"),
    _contraction("it's", "it is"),
    _contraction("that's", "that is"),
    _contraction("don't", "do not"),
    _contraction("didn't", "did not"),
    _contraction("wasn't", "was not"),
    _contraction("weren't", "were not"),
    _contraction("couldn't", "could not"),
    _contraction("wouldn't", "would not"),
    _contraction("shouldn't", "should not"),
    _contraction("he's", "he is"),
    _contraction("she's", "she is"),
    _contraction("they're", "they are"),
    _contraction("we're", "we are"),
)

# ASCII word characters only: accented letters are stripped like any punctuation
_NON_WORD = re.compile(r"[^A-Za-z0-9_\s]")
_WHITESPACE = re.compile(r"\s+")


def expand_contractions(text: str) -> str:
    """Lowercase text and expand the contractions in CONTRACTIONS.

    Example: "I can't" -> "i cannot"
    """
    result = text.lower()
    for pattern, expansion in CONTRACTIONS:
        result = pattern.sub(expansion, result)
    return result


def _split(text: str) -> List[str]:
    return [t for t in _WHITESPACE.split(_NON_WORD.sub("", text)) if t]


def normalize(text: str) -> List[str]:
    """Normalize a line into comparable word tokens.

    Lowercases, expands contractions, strips punctuation and splits on
    whitespace. Anything that is not a string is treated as empty.

    Args:
        text: Raw line or transcript text

    Returns:
        List of tokens (empty for empty or whitespace-only input)
    """
    if not isinstance(text, str):
        logger.debug("normalize() got %s, treating as empty", type(text).__name__)
        return []
    return _split(expand_contractions(text))


def simple_tokenize(text: str) -> List[str]:
    """Coarse tokenizer for the similarity pre-screen (no contraction expansion)."""
    if not isinstance(text, str):
        return []
    return _split(text.lower())
