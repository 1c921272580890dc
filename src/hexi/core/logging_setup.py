"""Logging bootstrap for hexi.

The terminal belongs to the UI, so records only ever go to a rotating file.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler
from pathlib import Path


@dataclass(frozen=True)
class LoggingRuntime:
    """Resolved runtime logging configuration."""

    level_name: str
    level: int
    file_path: str


_RUNTIME: LoggingRuntime | None = None


def _parse_level(raw: str | None) -> tuple[str, int]:
    normalized = str(raw or "WARNING").strip().upper()
    level = getattr(logging, normalized, logging.WARNING)
    if not isinstance(level, int):
        level = logging.WARNING
    return str(logging.getLevelName(level)), level


def _default_log_path() -> str:
    log_dir = Path(os.path.expanduser("~/.local/share/hexi/logs"))
    return str(log_dir / "hexi.log")


def _make_file_handler(level: int, file_path: str) -> logging.Handler:
    handler = RotatingFileHandler(
        file_path,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )
    return handler


def configure(
    level: str | None = None,
    file_path: str | None = None,
    *,
    config_level: str | None = None,
) -> LoggingRuntime:
    """Configure the `hexi` logger with a rotating file handler.

    Level: `level`, then $HEXI_LOG_LEVEL, then `config_level`, then WARNING.
    File: `file_path`, then $HEXI_LOG_FILE, then ~/.local/share/hexi/logs/hexi.log.

    Idempotent: repeated calls return the originally configured runtime.
    """
    global _RUNTIME
    if _RUNTIME is not None:
        return _RUNTIME

    level_name, numeric = _parse_level(level or os.environ.get("HEXI_LOG_LEVEL") or config_level)
    path = file_path or os.environ.get("HEXI_LOG_FILE") or _default_log_path()
    Path(path).parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger("hexi")
    logger.setLevel(numeric)
    logger.propagate = False
    logger.handlers.clear()
    logger.addHandler(_make_file_handler(numeric, path))

    logging.captureWarnings(True)

    _RUNTIME = LoggingRuntime(level_name=level_name, level=numeric, file_path=path)
    return _RUNTIME


def get_runtime() -> LoggingRuntime | None:
    """Return configured logging runtime, if configure() has run."""
    return _RUNTIME


def reset() -> None:
    """Detach handlers and forget the runtime so configure() can run again."""
    global _RUNTIME
    logger = logging.getLogger("hexi")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    _RUNTIME = None
