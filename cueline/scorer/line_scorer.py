"""Local (offline) scoring of a spoken attempt against the correct line."""
from __future__ import annotations

import math
from typing import Iterable, List, Optional

from ..alignment.edit_distance import align
from ..alignment.normalizer import normalize
from ..logging_config import get_logger
from ..models.alignment_op import DEL, INS, SUB, AlignmentOp
from ..models.feedback import FeedbackResult
from .rules import (
    ACCURATE_THRESHOLD,
    CORRECTIONS_SEPARATOR,
    CORRECTIONS_THRESHOLD,
    FEEDBACK_BANDS,
    MAX_CORRECTIONS,
    NO_SPEECH,
    NOTHING_TO_CHECK,
    TRUNCATION_MARKER,
)

logger = get_logger(__name__)


def feedback_for_score(score: int) -> str:
    """Pick the feedback message for the first band the score reaches."""
    for min_score, message in FEEDBACK_BANDS:
        if score >= min_score:
            return message
    return FEEDBACK_BANDS[-1][1]


def _render(op: AlignmentOp) -> Optional[str]:
    if op.op == SUB:
        return f'said "{op.spoken}" → correct: "{op.correct}"'
    if op.op == DEL:
        return f'missing: "{op.correct}"'
    if op.op == INS:
        return f'extra: "{op.spoken}"'
    return None


def render_corrections(
    ops: Iterable[AlignmentOp], max_items: int = MAX_CORRECTIONS
) -> Optional[str]:
    """Render non-match alignment ops as a short correction list.

    Args:
        ops: Alignment operations in reading order
        max_items: Items to keep before appending the truncation marker

    Returns:
        Items joined with "; ", or None if every op is a match
    """
    items: List[str] = []
    for op in ops:
        # Any op after a full list, matches included, marks it truncated
        if len(items) >= max_items:
            items.append(TRUNCATION_MARKER)
            break
        rendered = _render(op)
        if rendered is not None:
            items.append(rendered)
    if not items:
        return None
    return CORRECTIONS_SEPARATOR.join(items)


def _percent(matched: int, total: int) -> int:
    # Half-up rounding, so 12.5 -> 13 rather than Python's round-half-even
    return min(100, int(math.floor(100 * matched / total + 0.5)))


def evaluate_line_locally(
    spoken: str, correct: str, *, max_corrections: int = MAX_CORRECTIONS
) -> FeedbackResult:
    """Score a spoken attempt against the correct line without any network call.

    Score is the percentage of correct-line words matched in the alignment.
    An empty correct line always scores 100; empty speech against a
    non-empty line always scores 0.

    Args:
        spoken: Transcript of what the actor said
        correct: The script line
        max_corrections: Cap on rendered corrections

    Returns:
        FeedbackResult with source "local"
    """
    spoken_tokens = normalize(spoken)
    correct_tokens = normalize(correct)

    if not correct_tokens:
        return FeedbackResult(accurate=True, score=100, feedback=NOTHING_TO_CHECK)
    if not spoken_tokens:
        return FeedbackResult(accurate=False, score=0, feedback=NO_SPEECH)

    ops = align(spoken_tokens, correct_tokens)
    match_count = sum(1 for op in ops if op.is_match)
    score = _percent(match_count, len(correct_tokens))

    corrections = None
    if score < CORRECTIONS_THRESHOLD:
        corrections = render_corrections(ops, max_corrections)

    logger.debug(
        "Local score %d (%d/%d words matched)", score, match_count, len(correct_tokens)
    )
    return FeedbackResult(
        accurate=score >= ACCURATE_THRESHOLD,
        score=score,
        feedback=feedback_for_score(score),
        corrections=corrections,
    )
