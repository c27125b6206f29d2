"""Thresholds for line-structure heuristics."""
from __future__ import annotations

# Lines with at least this many words count as long
LONG_LINE_WORDS = 15

# A line is chunkable when it splits into at least this many pieces
MIN_CHUNKS = 2
