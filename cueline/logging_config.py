"""Logger setup shared by the package and the HTTP service."""
from __future__ import annotations

import logging
import os
from typing import Optional

ROOT_LOGGER = "cueline"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _configure_root() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER)
    if getattr(root, "_cueline_configured", False):
        return root

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.propagate = False

    level_name = os.getenv("LOG_LEVEL", "INFO").upper().strip()
    root.setLevel(getattr(logging, level_name, logging.INFO))
    root._cueline_configured = True  # type: ignore[attr-defined]
    return root


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the "cueline" namespace.

    Only the package logger gets a handler (level from LOG_LEVEL, default
    INFO); module loggers propagate to it. Names outside the namespace,
    e.g. "api", are nested under it.
    """
    root = _configure_root()
    if not name or name == ROOT_LOGGER:
        return root
    if not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
