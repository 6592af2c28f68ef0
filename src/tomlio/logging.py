# topmark:header:start
#
#   project      : tomlio
#   file         : logging.py
#   file_relpath : src/tomlio/logging.py
#   license      : MIT
#   copyright    : (c) 2025 The tomlio Authors
#
# topmark:header:end

"""Logging for tomlio.

Library modules log through `get_logger(__name__)`. Search-path probing is
logged at TRACE (below DEBUG), resolution results at DEBUG, and open or decode
failures at ERROR just before the typed exception is raised. The library never
configures handlers itself; `setup_logging` is called by the CLI.

Level selection, first match wins:
    1. ``TOMLIO_LOG_LEVEL`` (level name or number),
    2. an explicit level (the CLI derives it from ``-v`` via `level_for_verbosity`),
    3. CRITICAL.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from tomlio.constants import ENV_LOG_LEVEL

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class TomlioLogger(logging.Logger):
    """Logger class for tomlio with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log a search-path probe or other fine-grained detail at TRACE."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(TomlioLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"


class ChalkFormatter(logging.Formatter):
    """Formatter that colors log records with chalk based on severity level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the specified record with colors based on log level.

        Args:
            record (logging.LogRecord): The LogRecord to be formatted.

        Returns:
            str: The colorized formatted log message.
        """
        level = record.levelno
        message = super().format(record)

        if level >= logging.CRITICAL:
            return chalk.red_bright(message)
        if level >= logging.ERROR:
            return chalk.red(message)
        if level >= logging.WARNING:
            return chalk.yellow(message)
        if level >= logging.INFO:
            return chalk.green(message)
        if level >= logging.DEBUG:
            return chalk.gray(message)
        return chalk.blue(message)


# CLI verbosity: no flag, -v, -vv, -vvv
_VERBOSITY_LEVELS: Final[tuple[int, ...]] = (
    logging.CRITICAL,
    logging.INFO,
    logging.DEBUG,
    TRACE_LEVEL,
)

_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def resolve_env_log_level() -> int | None:
    """Return a logging level from the environment or None if unset.

    Honors TOMLIO_LOG_LEVEL (e.g., "TRACE", "DEBUG", "INFO", numeric "10").
    """
    val = os.environ.get(ENV_LOG_LEVEL)
    if not val:
        return None
    v = val.strip().upper()
    if v.isdigit():
        return int(v)
    return _LEVEL_NAMES.get(v)


def level_for_verbosity(verbose: int) -> int:
    """Map a count of ``-v`` flags to a log level; extra flags saturate at TRACE."""
    return _VERBOSITY_LEVELS[max(0, min(verbose, len(_VERBOSITY_LEVELS) - 1))]


def setup_logging(level: int | None = None) -> None:
    """Configure the root logger with a log level and colored output.

    If ``level`` is None, the environment is consulted via `resolve_env_log_level`.
    Default is CRITICAL when unspecified.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Iterate over a copy since we're modifying the list
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    formatter = ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str) -> TomlioLogger:
    """Retrieve a TomlioLogger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        TomlioLogger: A TomlioLogger instance.
    """
    return cast("TomlioLogger", logging.getLogger(name))
