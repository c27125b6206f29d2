"""Heuristics for breaking long lines into memorizable chunks."""
from __future__ import annotations

import re
from typing import List

from .rules import LONG_LINE_WORDS, MIN_CHUNKS

# Sentence end followed by a capital or a quote. The delimiter is captured
# so it can be glued back onto the preceding text (no look-behind needed).
_SENTENCE_BREAK = re.compile(r"([.!?]+)\s+(?=[A-Z\"'])")
_CLAUSE_BREAK = re.compile(r"[,;]\s*")
_SENTENCE_END = re.compile(r"[.!?]")


def _word_count(text: str) -> int:
    return len(text.split())


def _sentence_pieces(text: str) -> List[str]:
    raw = _SENTENCE_BREAK.split(text)
    pieces: List[str] = []
    for i in range(0, len(raw), 2):
        delimiter = raw[i + 1] if i + 1 < len(raw) else ""
        piece = (raw[i] + delimiter).strip()
        if piece:
            pieces.append(piece)
    return pieces


def split_into_chunks(text: str) -> List[str]:
    """Split a line at sentence boundaries, keeping terminal punctuation.

    Falls back to commas and semicolons for long single-sentence lines.
    Returns [text] when neither strategy gives at least two pieces.

    Example: "Go now. Don't look back." -> ["Go now.", "Don't look back."]
    """
    pieces = _sentence_pieces(text)
    if len(pieces) >= MIN_CHUNKS:
        return pieces

    if _word_count(text) >= LONG_LINE_WORDS:
        fallback = [s.strip() for s in _CLAUSE_BREAK.split(text)]
        fallback = [s for s in fallback if s]
        if len(fallback) >= MIN_CHUNKS:
            return fallback

    return [text]


def is_chunkable(text: str) -> bool:
    return len(split_into_chunks(text)) >= MIN_CHUNKS


def needs_punctuation_tip(text: str) -> bool:
    """True for a long line (15+ words) with no sentence-ending punctuation."""
    return _word_count(text) >= LONG_LINE_WORDS and not _SENTENCE_END.search(text)
