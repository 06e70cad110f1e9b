"""Centralized logging bootstrap for tailtext.

Library modules only create loggers; handlers are attached here, on the
``tailtext`` logger, when an application calls configure().

// [LAW:single-enforcer] Logger handler wiring is enforced in this module only.
// [LAW:one-source-of-truth] Runtime log path/level are derived here and returned to callers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler
from pathlib import Path

import tailtext.settings


@dataclass(frozen=True)
class LoggingRuntime:
    """Resolved runtime logging configuration."""

    level_name: str
    level: int
    file_path: str | None


_RUNTIME: LoggingRuntime | None = None


def _parse_level(raw: str) -> tuple[str, int]:
    normalized = str(raw or tailtext.settings.DEFAULT_LOG_LEVEL).strip().upper()
    level = getattr(logging, normalized, logging.WARNING)
    if not isinstance(level, int):
        level = logging.WARNING
    level_name = logging.getLevelName(level)
    return str(level_name), int(level)


def _make_stream_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("[%(name)s] %(levelname)s %(message)s"))
    return handler


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
            "%(asctime)s %(levelname)s %(name)s [%(threadName)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )
    return handler


def configure() -> LoggingRuntime:
    """Configure the tailtext logger with a stderr handler and optional file handler.

    Level comes from TAILTEXT_LOG_LEVEL (default WARNING); a rotating file
    handler is added when TAILTEXT_LOG_FILE is set.

    Idempotent: repeated calls return the originally configured runtime.
    """
    global _RUNTIME
    if _RUNTIME is not None:
        return _RUNTIME

    level_name, level = _parse_level(tailtext.settings.load_log_level())
    file_path = tailtext.settings.load_log_file()

    # [LAW:single-enforcer] All tailtext module loggers propagate to this one logger.
    logger = logging.getLogger("tailtext")
    logger.setLevel(level)
    logger.propagate = False
    logger.handlers.clear()
    logger.addHandler(_make_stream_handler(level))
    if file_path:
        Path(file_path).parent.mkdir(parents=True, exist_ok=True)
        logger.addHandler(_make_file_handler(level, file_path))

    _RUNTIME = LoggingRuntime(level_name=level_name, level=level, file_path=file_path)
    return _RUNTIME


def get_runtime() -> LoggingRuntime | None:
    """Return configured logging runtime, if configure() has run."""
    return _RUNTIME
