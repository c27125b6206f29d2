"""Feedback returned for one rehearsal attempt."""
from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

LOCAL = "local"
REMOTE = "remote"

# Minimum score counted as an accurate attempt
ACCURATE_THRESHOLD = 80


@dataclass(frozen=True)
class FeedbackResult:
    """Outcome of evaluating a spoken attempt against the correct line.

    Attributes:
        accurate: True when score reaches the accuracy threshold (80)
        score: Integer 0-100
        feedback: Short message for the actor
        corrections: Rendered word-level corrections, only when score < 90
        hint: Optional hint text (remote evaluator only)
        source: "local" or "remote"
    """
    accurate: bool
    score: int
    feedback: str
    corrections: Optional[str] = None
    hint: Optional[str] = None
    source: str = LOCAL

    def to_dict(self) -> Dict[str, Any]:
        return {k: v for k, v in asdict(self).items() if v is not None}

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source: str = REMOTE) -> "FeedbackResult":
        """Build a result from a JSON payload such as the remote evaluator's.

        The score is rounded and clamped into [0, 100]; `accurate` defaults to
        score >= ACCURATE_THRESHOLD when the payload omits it.

        Raises:
            ValueError: if the payload has no usable score or feedback
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected an object, got {type(data).__name__}")
        try:
            raw_score = float(data["score"])
            if not math.isfinite(raw_score):
                raise ValueError("score is not finite")
            score = int(round(raw_score))
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid score in payload: {data.get('score')!r}") from e
        score = max(0, min(100, score))

        feedback = data.get("feedback")
        if not isinstance(feedback, str):
            raise ValueError("Payload has no feedback text")

        accurate = data.get("accurate")
        if not isinstance(accurate, bool):
            accurate = score >= ACCURATE_THRESHOLD

        return cls(
            accurate=accurate,
            score=score,
            feedback=feedback,
            corrections=data.get("corrections") or None,
            hint=data.get("hint") or None,
            source=source,
        )
