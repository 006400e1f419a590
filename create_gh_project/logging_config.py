from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

LOG_LEVEL_ENV_VAR = "CREATE_GH_PROJECT_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
# Diagnostics share the terminal with the CLI's own output, so keep them short.
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
VERBOSE_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_RESET = "\x1b[0m"
_LEVEL_COLORS = {
    logging.DEBUG: "\x1b[36m",
    logging.INFO: "\x1b[32m",
    logging.WARNING: "\x1b[33m",
    logging.ERROR: "\x1b[31m",
    logging.CRITICAL: "\x1b[1;31m",
}


class _ColorFormatter(logging.Formatter):
    def __init__(self, fmt: str, *, use_color: bool) -> None:
        super().__init__(fmt=fmt, datefmt="%H:%M:%S")
        self._use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = _LEVEL_COLORS.get(record.levelno) if self._use_color else None
        return f"{color}{message}{_RESET}" if color else message


def _should_use_color(stream: TextIO) -> bool:
    if os.getenv("NO_COLOR"):
        return False
    return hasattr(stream, "isatty") and stream.isatty()


def resolve_level(level: str | int | None) -> int:
    if isinstance(level, int):
        return level
    candidate = (level or os.getenv(LOG_LEVEL_ENV_VAR) or DEFAULT_LOG_LEVEL).upper()
    resolved = logging.getLevelName(candidate)
    if isinstance(resolved, int):
        return resolved
    return logging.WARNING


def configure_logging(*, level: str | int | None = None, force: bool = False) -> None:
    """Route log records to stderr at ``level``.

    Without ``force`` an already configured root logger only has its level
    adjusted, so test harnesses and embedding applications keep their handlers.
    """
    root = logging.getLogger()
    resolved_level = resolve_level(level)
    root.setLevel(resolved_level)

    if root.handlers and not force:
        for handler in root.handlers:
            handler.setLevel(resolved_level)
        return

    stream = sys.stderr
    handler = logging.StreamHandler(stream)
    handler.setLevel(resolved_level)
    handler.setFormatter(
        _ColorFormatter(
            VERBOSE_LOG_FORMAT if resolved_level <= logging.DEBUG else LOG_FORMAT,
            use_color=_should_use_color(stream),
        )
    )
    root.handlers.clear()
    root.addHandler(handler)
