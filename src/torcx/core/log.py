from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from torcx.core.utils.io import ensure_directory

LOGGER_NAME = "torcx"

_TORCX_HANDLER: logging.Handler | None = None
_CONFIGURED_TARGET: str | None = None


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(*, level: str = "INFO", log_path: Optional[Path] = None) -> logging.Logger:
    """Attach a single handler to the ``torcx`` logger.

    Records go to ``log_path`` when given, otherwise to stderr. Idempotent
    per-process: calling again with the same target only updates the level.
    """
    global _TORCX_HANDLER, _CONFIGURED_TARGET

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(_level_from_name(level))

    target = str(Path(log_path).resolve()) if log_path is not None else "<stderr>"
    if _TORCX_HANDLER is not None and _CONFIGURED_TARGET == target:
        _TORCX_HANDLER.setLevel(_level_from_name(level))
        return logger

    reset_logging()

    handler: logging.Handler
    if log_path is not None:
        ensure_directory(Path(target).parent)
        handler = logging.FileHandler(target, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(_level_from_name(level))
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)

    _TORCX_HANDLER = handler
    _CONFIGURED_TARGET = target
    return logger


def reset_logging() -> None:
    """Remove the handler installed by :func:`configure_logging`."""
    global _TORCX_HANDLER, _CONFIGURED_TARGET

    if _TORCX_HANDLER is not None:
        logging.getLogger(LOGGER_NAME).removeHandler(_TORCX_HANDLER)
        _TORCX_HANDLER.close()
    _TORCX_HANDLER = None
    _CONFIGURED_TARGET = None


__all__ = ["LOGGER_NAME", "configure_logging", "reset_logging"]
