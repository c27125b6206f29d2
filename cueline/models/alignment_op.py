"""Data model for one step of a spoken-vs-correct word alignment."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

MATCH = "match"
SUB = "sub"
INS = "ins"
DEL = "del"


@dataclass(frozen=True)
class AlignmentOp:
    """One aligned position between a spoken transcript and the correct line.

    Attributes:
        op: Operation type - "match", "sub", "ins", or "del"
        spoken: The spoken token (None for deletions)
        correct: The correct-line token (None for insertions)

    "ins" is an extra word the speaker said, "del" a word they left out.
    """
    op: str  # "match" | "sub" | "ins" | "del"
    spoken: Optional[str] = None
    correct: Optional[str] = None

    @classmethod
    def match(cls, spoken: str, correct: str) -> "AlignmentOp":
        return cls(MATCH, spoken, correct)

    @classmethod
    def substitution(cls, spoken: str, correct: str) -> "AlignmentOp":
        return cls(SUB, spoken, correct)

    @classmethod
    def insertion(cls, spoken: str) -> "AlignmentOp":
        return cls(INS, spoken=spoken)

    @classmethod
    def deletion(cls, correct: str) -> "AlignmentOp":
        return cls(DEL, correct=correct)

    @property
    def is_match(self) -> bool:
        return self.op == MATCH
