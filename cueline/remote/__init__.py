"""Client for the remote (LLM-backed) line evaluator."""
from .client import HttpRemoteEvaluator, RemoteEvaluator

__all__ = ["HttpRemoteEvaluator", "RemoteEvaluator"]
