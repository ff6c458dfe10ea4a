"""Root logger setup for the CLI."""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from landingkit.core.utils.io import ensure_directory

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
STDERR_FORMAT = "%(levelname)s: %(message)s"

_INSTALLED: list[logging.Handler] = []


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(*, level: str = "WARNING", log_path: Optional[Path] = None, json_mode: bool = False) -> None:
    """Configure the root logger for one CLI invocation.

    - ``log_path`` set: log to that file only
    - ``json_mode``: install a NullHandler so stdout/stderr stay machine-readable
    - otherwise: log to stderr

    Handlers installed by a previous call are replaced.
    """
    root = logging.getLogger()
    root.setLevel(_level_from_name(level))

    for old in _INSTALLED:
        root.removeHandler(old)
        old.close()
    _INSTALLED.clear()

    handler: logging.Handler
    if log_path is not None:
        ensure_directory(Path(log_path).parent)
        handler = logging.FileHandler(str(log_path), encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    elif json_mode:
        handler = logging.NullHandler()
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(STDERR_FORMAT))

    root.addHandler(handler)
    _INSTALLED.append(handler)


def reset_logging_for_tests() -> None:
    """Test-only: remove handlers installed by ``configure_logging``."""
    root = logging.getLogger()
    root.setLevel(logging.WARNING)
    for handler in _INSTALLED:
        root.removeHandler(handler)
        handler.close()
    _INSTALLED.clear()


__all__ = ["configure_logging", "reset_logging_for_tests"]
