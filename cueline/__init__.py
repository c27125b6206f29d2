"""CueLine: local line-matching and scoring for memorization rehearsal."""
from .alignment import align, normalize
from .models import AlignmentOp, FeedbackResult
from .scorer import evaluate_line_locally, pick_best_alternative, word_similarity
from .structure import is_chunkable, needs_punctuation_tip, split_into_chunks

__version__ = "0.1.0"

__all__ = [
    "align",
    "normalize",
    "AlignmentOp",
    "FeedbackResult",
    "evaluate_line_locally",
    "pick_best_alternative",
    "word_similarity",
    "is_chunkable",
    "needs_punctuation_tip",
    "split_into_chunks",
]
