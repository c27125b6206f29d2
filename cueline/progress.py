"""Per-line rehearsal progress bookkeeping."""
from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .models.feedback import FeedbackResult

# An attempt counts toward mastery at or above this score
MASTERY_SCORE = 90
# Correct attempts needed to mark a line mastered
MASTERY_STREAK = 3


@dataclass(frozen=True)
class LineProgress:
    line_id: str
    attempts: int = 0
    correct_attempts: int = 0
    last_practiced: str = ""
    mastered: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lineId": self.line_id,
            "attempts": self.attempts,
            "correctAttempts": self.correct_attempts,
            "lastPracticed": self.last_practiced,
            "mastered": self.mastered,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LineProgress":
        return cls(
            line_id=data["lineId"],
            attempts=int(data.get("attempts", 0)),
            correct_attempts=int(data.get("correctAttempts", 0)),
            last_practiced=data.get("lastPracticed", ""),
            mastered=bool(data.get("mastered", False)),
        )


def record_attempt(
    progress: LineProgress, result: FeedbackResult, *, now: Optional[datetime] = None
) -> LineProgress:
    """Return updated progress after one evaluated attempt."""
    now = now or datetime.now(timezone.utc)
    correct_attempts = progress.correct_attempts + (1 if result.score >= MASTERY_SCORE else 0)
    return replace(
        progress,
        attempts=progress.attempts + 1,
        correct_attempts=correct_attempts,
        last_practiced=now.isoformat(),
        mastered=correct_attempts >= MASTERY_STREAK,
    )
