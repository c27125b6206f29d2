"""Tiered line evaluation: fast local pre-screen, then the remote evaluator.

Flow:
1. Pick the best recognizer alternative (if several were given)
2. Word-similarity pre-screen against the correct line
3. Confident pass or no remote evaluator -> local evaluation
4. Otherwise ask the remote evaluator, falling back to local on failure
"""
from __future__ import annotations

from typing import Optional, Sequence

from .errors import RemoteEvaluationError
from .logging_config import get_logger
from .models.feedback import FeedbackResult
from .remote.client import RemoteEvaluator
from .scorer.line_scorer import evaluate_line_locally
from .scorer.rules import CONFIDENT_PASS_SIMILARITY
from .scorer.similarity import pick_best_alternative, word_similarity

logger = get_logger(__name__)


def choose_transcript(spoken: str, alternatives: Optional[Sequence[str]], correct: str) -> str:
    """Pick the transcript to evaluate from `spoken` plus any alternatives."""
    candidates = [spoken] if spoken else []
    candidates.extend(a for a in (alternatives or []) if a)
    if not candidates:
        return spoken or ""
    return pick_best_alternative(candidates, correct)


def evaluate_line(
    spoken: str,
    correct: str,
    *,
    character: str = "",
    context: str = "",
    alternatives: Optional[Sequence[str]] = None,
    remote: Optional[RemoteEvaluator] = None,
    confident_pass: float = CONFIDENT_PASS_SIMILARITY,
) -> FeedbackResult:
    """Evaluate an attempt, escalating to the remote evaluator only when needed.

    Args:
        spoken: Transcript of the attempt
        correct: The script line
        character: Character name (passed to the remote evaluator)
        context: Scene context (passed to the remote evaluator)
        alternatives: Other recognizer transcripts to consider
        remote: Remote evaluator, or None for local-only evaluation
        confident_pass: Similarity at or above which the remote call is skipped

    Returns:
        The remote FeedbackResult when it was used and succeeded, otherwise
        the local one
    """
    transcript = choose_transcript(spoken, alternatives, correct)
    similarity = word_similarity(transcript, correct)

    if remote is None or similarity >= confident_pass:
        logger.debug("Local evaluation (similarity %.2f)", similarity)
        return evaluate_line_locally(transcript, correct)

    logger.info("Similarity %.2f below %.2f, escalating to remote evaluator", similarity, confident_pass)
    try:
        return remote.evaluate(transcript, correct, character, context)
    except RemoteEvaluationError as e:
        logger.warning("Remote evaluation failed (%s), falling back to local scoring", e)
        return evaluate_line_locally(transcript, correct)
