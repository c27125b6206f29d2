"""Offline hints, used when the remote hint service is unavailable."""
from __future__ import annotations

import math

HINT_FIRST_WORDS = 3
HINT_LEVELS = (1, 2, 3)


def _prefix(words, count: int) -> str:
    if count >= len(words):
        return " ".join(words)
    return " ".join(words[:count]) + "..."


def local_hint(correct: str, level: int) -> str:
    """Reveal progressively more of the line.

    level 1 -> first few words, level 2 -> first half, level 3 -> full line.
    """
    if level not in HINT_LEVELS:
        raise ValueError(f"Hint level must be one of {HINT_LEVELS}, got {level!r}")
    words = correct.split()
    if level == 1:
        return _prefix(words, HINT_FIRST_WORDS)
    if level == 2:
        return _prefix(words, math.ceil(len(words) / 2))
    return correct.strip()
