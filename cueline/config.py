"""Runtime configuration read from the environment."""
from __future__ import annotations

import os
from typing import Optional

from .logging_config import get_logger
from .remote.client import HttpRemoteEvaluator
from .scorer.rules import CONFIDENT_PASS_SIMILARITY

logger = get_logger(__name__)


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric %s=%r", name, raw)
        return default


# Remote evaluator (unset URL -> local evaluation only)
REMOTE_URL: Optional[str] = os.getenv("CUELINE_REMOTE_URL") or None
REMOTE_TOKEN: Optional[str] = os.getenv("CUELINE_REMOTE_TOKEN") or None
REMOTE_TIMEOUT = _float_env("CUELINE_REMOTE_TIMEOUT", 10.0)

# Pre-screen similarity at or above which the remote evaluator is skipped
CONFIDENT_PASS = _float_env("CUELINE_CONFIDENT_PASS", CONFIDENT_PASS_SIMILARITY)


def build_remote_evaluator():
    """Return an HttpRemoteEvaluator for REMOTE_URL, or None when unset."""
    if not REMOTE_URL:
        return None
    return HttpRemoteEvaluator(REMOTE_URL, token=REMOTE_TOKEN, timeout=REMOTE_TIMEOUT)
