"""Line-structure heuristics: chunking and punctuation tips."""
from .chunker import is_chunkable, needs_punctuation_tip, split_into_chunks

__all__ = ["is_chunkable", "needs_punctuation_tip", "split_into_chunks"]
