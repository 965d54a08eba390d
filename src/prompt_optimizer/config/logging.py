# prompt_optimizer/config/logging.py
"""
Logging setup for the prompt-optimizer CLI.

The rendered prompt is written to stdout, so every log line goes to stderr.
A rotating JSON file log can be added for debugging sessions.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from prompt_optimizer.config.defaults import (
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_LOG_MAX_BYTES,
)

PACKAGE_LOGGER = "prompt_optimizer"

CONSOLE_FORMATS: dict[str, str] = {
    "simple": "%(levelname)-8s %(message)s",
    "detailed": "%(asctime)s [%(levelname)-8s] %(name)s:%(lineno)d - %(message)s",
    "json": (
        '{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
        '"logger": "%(name)s", "message": "%(message)s"}'
    ),
}

FILE_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
    '"logger": "%(name)s", "line": %(lineno)d, "message": "%(message)s"}'
)


def resolve_level(level: str, quiet: bool = False, verbose: bool = False) -> int:
    """Turn CLI flags and a level name into a numeric level.

    ``quiet`` wins over ``verbose``, which wins over ``level``.

    Raises:
        ValueError: If ``level`` is not a logging level name
    """
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG

    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Invalid log level: {level}")
    return numeric


def setup_logging(
    level: str = DEFAULT_LOG_LEVEL,
    quiet: bool = False,
    verbose: bool = False,
    format_style: str = "simple",
    log_file: str | None = None,
) -> None:
    """
    Configure the root logger for a CLI run.

    Args:
        level: Level name used when neither ``quiet`` nor ``verbose`` is set
        quiet: Only show errors
        verbose: Show debug output
        format_style: One of ``simple``, ``detailed`` or ``json``
        log_file: Optional rotating log file, always written at DEBUG
    """
    log_level = resolve_level(level, quiet=quiet, verbose=verbose)

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(log_level)
    console.setFormatter(
        logging.Formatter(CONSOLE_FORMATS.get(format_style, CONSOLE_FORMATS["simple"]))
    )
    root.addHandler(console)
    root.setLevel(log_level)

    if log_file:
        root.addHandler(_file_handler(log_file))
        # the file handler needs DEBUG records to reach it
        root.setLevel(logging.DEBUG)

    logging.getLogger(PACKAGE_LOGGER).setLevel(root.level)


def _file_handler(log_file: str) -> RotatingFileHandler:
    path = Path(log_file).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        str(path),
        maxBytes=DEFAULT_LOG_MAX_BYTES,
        backupCount=DEFAULT_LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler
