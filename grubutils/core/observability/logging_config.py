"""
Logging configuration for the grubutils CLI.

``main()`` calls ``setup_logging`` before the privilege check, from the
``GRUBUTILS_LOG_*`` variables alone, so the sudo hand-off is logged.
The click group calls it again once ``-v``/``-q``/``--debug`` are parsed.
Each call replaces (and closes) the handlers of the previous one.

Console level precedence:
    --debug  >  --verbose  >  --quiet  >  GRUBUTILS_LOG_LEVEL  >  WARNING

GRUBUTILS_LOG_FILE adds a file handler at GRUBUTILS_LOG_FILE_LEVEL
(default: the console level).
"""

from __future__ import annotations

import logging
import sys

LOG_LEVEL_ENV_VAR = "GRUBUTILS_LOG_LEVEL"
LOG_FILE_ENV_VAR = "GRUBUTILS_LOG_FILE"
LOG_FILE_LEVEL_ENV_VAR = "GRUBUTILS_LOG_FILE_LEVEL"

# Console output shares stderr with the editor and grub-mkconfig, so
# WARNING and above print the bare message.
_CONSOLE_FORMATS: dict[int, tuple[str, str | None]] = {
    logging.DEBUG: ("%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s", "%H:%M:%S"),
    logging.INFO: ("%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
}
_CONSOLE_DEFAULT_FORMAT: tuple[str, str | None] = ("%(message)s", None)

_FILE_FORMAT = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"


def resolve_level(
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    env_level: str | None = None,
) -> str:
    """Pick the console level name from the global flags and the env var."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    return env_level or "WARNING"


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Install a stderr handler, plus a file handler when ``log_file`` is set.

    Unknown level names fall back to WARNING.
    """
    numeric_level = _level_number(level)
    fmt, datefmt = _console_format(numeric_level)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(numeric_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=datefmt))

    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    root.addHandler(console)

    effective_level = numeric_level
    if log_file:
        file_level = _level_number(log_file_level) if log_file_level else numeric_level
        effective_level = min(effective_level, file_level)

        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_FILE_DATEFMT))
        root.addHandler(fh)

    root.setLevel(effective_level)
    logging.raiseExceptions = False


def _console_format(numeric_level: int) -> tuple[str, str | None]:
    for threshold in (logging.DEBUG, logging.INFO):
        if numeric_level <= threshold:
            return _CONSOLE_FORMATS[threshold]
    return _CONSOLE_DEFAULT_FORMAT


def _level_number(level: str | None) -> int:
    numeric = logging.getLevelName(level.upper()) if level else None
    return numeric if isinstance(numeric, int) else logging.WARNING
