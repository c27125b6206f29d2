"""Data models shared across the matching engine."""
from .alignment_op import AlignmentOp
from .feedback import FeedbackResult

__all__ = ["AlignmentOp", "FeedbackResult"]
