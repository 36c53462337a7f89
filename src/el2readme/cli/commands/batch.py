# topmark:header:start
#
#   project      : El2Readme
#   file         : batch.py
#   file_relpath : src/el2readme/cli/commands/batch.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""El2Readme `batch` command.

Converts several files in argument order, writing the configured output name
(``README.org``) next to each source. A file that fails is reported and the
remaining files are still converted; the exit code reflects the failures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from el2readme.api.runtime import run_convert_files
from el2readme.cli.cmd_common import (
    exit_code_for,
    get_console,
    get_effective_verbosity,
    report_results,
    resolve_config_from_click,
)
from el2readme.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from el2readme.config import Config
    from el2readme.pipeline.context import ConversionContext


@click.command(
    name="batch",
    help="Convert each PATH, writing README.org in the directory of each file.",
)
@click.argument(
    "paths",
    nargs=-1,
    required=True,
    type=click.Path(path_type=Path),
)
@click.option("--dry-run", is_flag=True, help="Convert without writing anything.")
def batch_command(*, paths: tuple[Path, ...], dry_run: bool) -> None:
    """Convert several files, one at a time.

    Args:
        paths (tuple[Path, ...]): Emacs Lisp source files, processed in order.
        dry_run (bool): Skip the writes entirely.
    """
    ctx = click.get_current_context()
    config: Config = resolve_config_from_click(ctx)
    results: list[ConversionContext] = run_convert_files(paths, config=config, dry_run=dry_run)
    report_results(get_console(ctx), results, verbosity=get_effective_verbosity(ctx))

    code: ExitCode = exit_code_for(results)
    if code != ExitCode.SUCCESS:
        ctx.exit(int(code))
