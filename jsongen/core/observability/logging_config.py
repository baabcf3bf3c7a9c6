"""
Logging setup for the jsongen CLI.

``main.py`` calls ``setup_logging`` once; modules only ever do
``logger = logging.getLogger(__name__)``.

Console level, highest precedence first:
    --debug / --verbose / --quiet  >  JSONGEN_LOG_LEVEL  >  WARNING

A log file is added when JSONGEN_LOG_FILE is set; its level comes from
JSONGEN_LOG_FILE_LEVEL and defaults to the console level.
"""

from __future__ import annotations

import logging
import os
import sys

ENV_LEVEL = "JSONGEN_LOG_LEVEL"
ENV_FILE = "JSONGEN_LOG_FILE"
ENV_FILE_LEVEL = "JSONGEN_LOG_FILE_LEVEL"

# Console format per level: the quieter the level, the barer the line
_CONSOLE_FORMATS: dict[int, tuple[str, str | None]] = {
    logging.DEBUG: ("%(asctime)s %(levelname)-5s %(name)s:%(lineno)d  %(message)s", "%H:%M:%S"),
    logging.INFO: ("%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
}
_CONSOLE_DEFAULT = ("%(message)s", None)

_FILE_FORMAT = ("%(asctime)s %(levelname)-5s %(name)s:%(lineno)d  %(message)s", "%Y-%m-%d %H:%M:%S")

# Subprocess chatter and the echoed transcript; only wanted when debugging
_CHATTY_LOGGERS = ("jsongen.adapters", "jsongen.output")


def resolve_level(debug: bool = False, verbose: bool = False, quiet: bool = False) -> str:
    """Pick the console level name from CLI flags, then the environment."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    return os.environ.get(ENV_LEVEL, "WARNING")


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
    quiet_noisy: bool = True,
) -> None:
    """Install the console (and optional file) handler on the root logger.

    Args:
        level: Console level name. Unknown names fall back to WARNING.
        log_file: Path of an extra log file, if any.
        log_file_level: Level for the file; the console level when None.
        quiet_noisy: Hold the adapter and transcript loggers at WARNING
            unless something is logging at DEBUG.
    """
    console_level = _parse_level(level)
    handlers = [_console_handler(console_level)]
    lowest = console_level

    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        handlers.append(_file_handler(log_file, file_level))
        lowest = min(lowest, file_level)

    root = logging.getLogger()
    root.handlers.clear()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(lowest)

    chatty_level = logging.WARNING if quiet_noisy and lowest > logging.DEBUG else logging.NOTSET
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(chatty_level)

    # A broken stream must not take the command down with it
    logging.raiseExceptions = False


def setup_logging_from_env(level: str) -> None:
    """``setup_logging`` with the file options taken from the environment."""
    setup_logging(
        level=level,
        log_file=os.environ.get(ENV_FILE),
        log_file_level=os.environ.get(ENV_FILE_LEVEL),
        quiet_noisy=_parse_level(level) > logging.DEBUG,
    )


def _console_format(level: int) -> tuple[str, str | None]:
    for threshold in (logging.DEBUG, logging.INFO):
        if level <= threshold:
            return _CONSOLE_FORMATS[threshold]
    return _CONSOLE_DEFAULT


def _console_handler(level: int) -> logging.Handler:
    fmt, datefmt = _console_format(level)
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    return handler


def _file_handler(path: str, level: int) -> logging.Handler:
    fmt, datefmt = _FILE_FORMAT
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    return handler


def _parse_level(level: str | None) -> int:
    if not level:
        return logging.WARNING
    numeric = logging.getLevelName(level.upper())
    return numeric if isinstance(numeric, int) else logging.WARNING
