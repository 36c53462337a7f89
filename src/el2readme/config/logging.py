# topmark:header:start
#
#   project      : El2Readme
#   file         : logging.py
#   file_relpath : src/el2readme/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom El2Readme logging with TRACE logging.

This module extends the standard logging module with El2Readme-specific features,
including a custom TRACE level, a specialized logger class, and colored output formatting.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from el2readme.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class El2ReadmeLogger(logging.Logger):
    """Custom logger class for El2Readme with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Variable length argument list for the message.
            extra (Mapping[str, object] | None): Optional dictionary of extra information to pass
                to the logger.
        """
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

logging.setLoggerClass(El2ReadmeLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"

NAME_TO_LEVEL: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


# Colorizers by minimum level, most severe first
_LEVEL_COLORS: Final[tuple[tuple[int, Callable[..., str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors log records by severity using `yachalk`.

    Args:
        fmt (str): Record format string.
        enable_color (bool): When False, records are emitted without ANSI codes
            (mirrors the CLI ``--no-color`` flag).
    """

    def __init__(self, fmt: str, *, enable_color: bool = True) -> None:
        super().__init__(fmt)
        self.enable_color = enable_color

    def format(self, record: logging.LogRecord) -> str:
        """Format the specified record with colors based on log level.

        Args:
            record (logging.LogRecord): The LogRecord to be formatted.

        Returns:
            str: The (possibly colorized) formatted log message.
        """
        message: str = super().format(record)
        if not self.enable_color:
            return message
        for threshold, colorize in _LEVEL_COLORS:
            if record.levelno >= threshold:
                return colorize(message)
        # Below TRACE
        return chalk.dim.red(message)


def resolve_env_log_level() -> int | None:
    """Return a logging level from environment or None if unset.

    Honors EL2README_LOG_LEVEL (e.g., "TRACE", "DEBUG", "INFO", numeric "10").
    """
    val = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not val:
        return None
    v = val.strip().upper()
    if v.isdigit():
        return int(v)
    return NAME_TO_LEVEL.get(v)


def setup_logging(level: int | None = None, *, enable_color: bool = True) -> None:
    """Configure the root logger to write colored records to stderr.

    Logs never go to stdout, which ``el2readme convert --stdout`` reserves for
    the converted document.

    If ``level`` is None, environment variables are consulted via
    [`resolve_env_log_level`][el2readme.config.logging.resolve_env_log_level].
    Default is CRITICAL when unspecified.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove all existing handlers to prevent duplicate log messages
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        ChalkFormatter(
            LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT,
            enable_color=enable_color,
        )
    )
    root_logger.addHandler(handler)

    root_logger.propagate = False


def get_logger(name: str) -> El2ReadmeLogger:
    """Return the `El2ReadmeLogger` registered under ``name``."""
    return cast("El2ReadmeLogger", logging.getLogger(name))
