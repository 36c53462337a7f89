# topmark:header:start
#
#   project      : El2Readme
#   file         : convert.py
#   file_relpath : src/el2readme/cli/commands/convert.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""El2Readme `convert` command.

Converts the header of one Emacs Lisp file into an Org document:

    el2readme convert foo.el             # writes ./README.org
    el2readme convert foo.el docs/foo.org
    el2readme convert foo.el --stdout
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from el2readme.api.runtime import run_convert_file
from el2readme.cli.cmd_common import (
    error_for,
    get_console,
    get_effective_verbosity,
    report_results,
    resolve_config_from_click,
)
from el2readme.cli.errors import El2ReadmeUsageError
from el2readme.config.logging import get_logger

if TYPE_CHECKING:
    from el2readme.cli.errors import El2ReadmeError
    from el2readme.config import Config
    from el2readme.config.logging import El2ReadmeLogger
    from el2readme.pipeline.context import ConversionContext

logger: El2ReadmeLogger = get_logger(__name__)


@click.command(
    name="convert",
    help="Convert the header of INPUT to Org (OUTPUT defaults to README.org).",
)
@click.argument("input_path", metavar="INPUT", type=click.Path(path_type=Path))
@click.argument(
    "output_path",
    metavar="[OUTPUT]",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option("--stdout", "to_stdout", is_flag=True, help="Print the document instead of writing it.")
@click.option("--dry-run", is_flag=True, help="Convert without writing anything.")
def convert_command(
    *,
    input_path: Path,
    output_path: Path | None,
    to_stdout: bool,
    dry_run: bool,
) -> None:
    """Convert a single file.

    Args:
        input_path (Path): Emacs Lisp source file.
        output_path (Path | None): Destination; defaults to the configured output name.
        to_stdout (bool): Print instead of writing.
        dry_run (bool): Skip the write entirely.

    Raises:
        El2ReadmeUsageError: If OUTPUT is combined with ``--stdout``.
    """
    ctx = click.get_current_context()
    if to_stdout and output_path is not None:
        raise El2ReadmeUsageError("OUTPUT cannot be combined with '--stdout'.")

    config: Config = resolve_config_from_click(ctx)
    result: ConversionContext = run_convert_file(
        input_path,
        output=output_path,
        config=config,
        dry_run=dry_run,
        to_stdout=to_stdout,
    )

    error: El2ReadmeError | None = error_for(result)
    if error is not None:
        raise error
    if not to_stdout:
        report_results(get_console(ctx), [result], verbosity=get_effective_verbosity(ctx))
