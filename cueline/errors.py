"""Exceptions raised outside the pure matching core."""


class CueLineError(Exception):
    """Base class for CueLine errors."""


class RemoteEvaluationError(CueLineError):
    """The remote evaluator could not produce a usable result."""
