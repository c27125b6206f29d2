"""Line scoring: full local evaluation and the fast similarity pre-screen."""
from .line_scorer import evaluate_line_locally, feedback_for_score, render_corrections
from .similarity import pick_best_alternative, word_similarity

__all__ = [
    "evaluate_line_locally",
    "feedback_for_score",
    "render_corrections",
    "pick_best_alternative",
    "word_similarity",
]
