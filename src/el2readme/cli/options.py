# topmark:header:start
#
#   project      : El2Readme
#   file         : options.py
#   file_relpath : src/el2readme/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, config) and their
resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from el2readme.cli.errors import El2ReadmeUsageError

P = ParamSpec("P")
R = TypeVar("R")

#: Program-output verbosity levels (independent from internal logging).
VERBOSITY_QUIET: int = -1
VERBOSITY_DEFAULT: int = 0
VERBOSITY_VERBOSE: int = 1


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v``/``-q`` counts.

    Raises:
        El2ReadmeUsageError: If both verbose and quiet flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise El2ReadmeUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return VERBOSITY_QUIET
    return min(verbose_count, 2)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify twice to also list diagnostics.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress per-file status output.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add a ``--no-color`` flag to a command."""
    return click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        default=False,
        help="Disable ANSI colors in program output.",
    )(f)


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add a ``--config`` option pointing at an explicit TOML file."""
    return click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Read configuration from this TOML file instead of discovering one.",
    )(f)
