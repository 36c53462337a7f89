# topmark:header:start
#
#   project      : El2Readme
#   file         : cmd_common.py
#   file_relpath : src/el2readme/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small helpers shared by ``convert`` and ``batch``: configuration resolution
from the Click context, per-file reporting and exit code mapping.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from el2readme.cli.errors import (
    El2ReadmeConfigError,
    El2ReadmeEncodingError,
    El2ReadmeError,
    El2ReadmeFileNotFoundError,
    El2ReadmeIOError,
)
from el2readme.cli.options import VERBOSITY_QUIET, VERBOSITY_VERBOSE
from el2readme.config import Config, MutableConfig
from el2readme.config.logging import get_logger
from el2readme.core.diagnostics import DiagnosticLevel, worst_level
from el2readme.core.exit_codes import ExitCode
from el2readme.pipeline.status import ReadStatus, WriteStatus

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from el2readme.cli.console import ClickConsole
    from el2readme.config.logging import El2ReadmeLogger
    from el2readme.pipeline.context import ConversionContext

logger: El2ReadmeLogger = get_logger(__name__)

_READ_FAILURES: dict[ReadStatus, type[El2ReadmeError]] = {
    ReadStatus.NOT_FOUND: El2ReadmeFileNotFoundError,
    ReadStatus.NO_READ_PERMISSION: El2ReadmeIOError,
    ReadStatus.UNICODE_DECODE_ERROR: El2ReadmeEncodingError,
    ReadStatus.UNREADABLE: El2ReadmeIOError,
}


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console stored on the Click context by the group callback."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored on the Click context (default 0)."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", 0))


def resolve_config_from_click(ctx: click.Context) -> Config:
    """Build the effective `Config` for the current invocation.

    Raises:
        El2ReadmeConfigError: If ``--config`` names a missing file or the
            configuration is invalid.
    """
    ctx.ensure_object(dict)
    config_path: Path | None = ctx.obj.get("config_path")
    if config_path is not None and not config_path.is_file():
        raise El2ReadmeConfigError(f"Config file not found: {config_path}")
    try:
        return MutableConfig.load_merged(config_path=config_path).freeze()
    except ValueError as exc:
        raise El2ReadmeConfigError(str(exc)) from exc


def error_for(result: ConversionContext) -> El2ReadmeError | None:
    """Return the CLI error matching a failed conversion (None on success)."""
    error_cls: type[El2ReadmeError] | None = _READ_FAILURES.get(result.status.read)
    if error_cls is None and result.status.write == WriteStatus.FAILED:
        error_cls = El2ReadmeIOError
    if error_cls is None and worst_level(result.diagnostics) == DiagnosticLevel.ERROR:
        error_cls = El2ReadmeError
    if error_cls is None:
        return None
    message: str = result.diagnostics[-1].message if result.diagnostics else str(result.path)
    return error_cls(message)


def exit_code_for(results: Sequence[ConversionContext]) -> ExitCode:
    """Return the exit code of a batch: SUCCESS, the shared error code, or FAILURE."""
    codes: set[int] = set()
    for result in results:
        error: El2ReadmeError | None = error_for(result)
        if error is not None:
            codes.add(error.exit_code)
    if not codes:
        return ExitCode.SUCCESS
    if len(codes) == 1:
        return ExitCode(codes.pop())
    return ExitCode.FAILURE


def report_results(
    console: ClickConsole,
    results: Sequence[ConversionContext],
    *,
    verbosity: int,
) -> None:
    """Print one status line per conversion (and diagnostics with ``-vv``).

    Failures are always reported, even with ``--quiet``.
    """
    for result in results:
        failed: bool = error_for(result) is not None
        if verbosity <= VERBOSITY_QUIET and not failed:
            continue
        if failed:
            console.error(result.format_summary())
        else:
            console.status(result.format_summary(color=console.enable_color))
        if verbosity > VERBOSITY_VERBOSE:
            for diag in result.diagnostics:
                console.status(f"    {diag.render(color=console.enable_color)}")
