"""Cheap word-overlap similarity used as a pre-screen before full evaluation."""
from __future__ import annotations

from typing import Sequence

from ..alignment.normalizer import simple_tokenize


def word_similarity(spoken: str, correct: str) -> float:
    """Fraction of the correct line's words that appear anywhere in the spoken text.

    Order-insensitive and asymmetric: the denominator is always the number
    of correct-line words (repeats included), while the spoken side is
    reduced to a set. word_similarity(a, b) need not equal
    word_similarity(b, a).
    """
    correct_tokens = simple_tokenize(correct)
    if not correct_tokens:
        return 1.0
    spoken_tokens = simple_tokenize(spoken)
    if not spoken_tokens:
        return 0.0

    spoken_set = set(spoken_tokens)
    found = sum(1 for w in correct_tokens if w in spoken_set)
    return found / len(correct_tokens)


def pick_best_alternative(alternatives: Sequence[str], correct: str) -> str:
    """Pick the recognizer alternative closest to the correct line.

    The first candidate wins ties.

    Args:
        alternatives: Candidate transcripts, e.g. a recognizer's n-best list
        correct: The script line

    Returns:
        The candidate with the highest word_similarity

    Raises:
        ValueError: if alternatives is empty
    """
    if not alternatives:
        raise ValueError("pick_best_alternative() needs at least one candidate")
    if len(alternatives) == 1:
        return alternatives[0]

    best = alternatives[0]
    best_score = word_similarity(best, correct)
    for candidate in alternatives[1:]:
        score = word_similarity(candidate, correct)
        if score > best_score:
            best, best_score = candidate, score
    return best
