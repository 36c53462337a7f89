# topmark:header:start
#
#   project      : El2Readme
#   file         : main.py
#   file_relpath : src/el2readme/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""El2Readme Click entry point.

Group-level options are initialized once and placed into ``ctx.obj``;
subcommands read the console, verbosity and config path from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from el2readme.cli.commands.batch import batch_command
from el2readme.cli.commands.convert import convert_command
from el2readme.cli.commands.version import version_command
from el2readme.cli.console import ClickConsole
from el2readme.cli.options import (
    common_color_options,
    common_config_options,
    common_verbose_options,
    resolve_verbosity,
)
from el2readme.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from pathlib import Path

    from el2readme.config.logging import El2ReadmeLogger

logger: El2ReadmeLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
    config_path: Path | None,
) -> None:
    """Initialize shared state (verbosity, color, config path) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_path (Path | None): Explicit configuration file, if any.
    """
    ctx.ensure_object(dict)

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)
    enable_color: bool = not no_color

    # Internal logging is configured via the environment
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env, enable_color=enable_color)

    ctx.obj["config_path"] = config_path

    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Convert Emacs Lisp file headers to README.org documents.",
)
@common_verbose_options
@common_color_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
    config_path: Path | None,
) -> None:
    """Entry point for the El2Readme CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        no_color=no_color,
        config_path=config_path,
    )
    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print("Hint: use 'el2readme convert FILE.el' to write README.org.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(convert_command)

cli.add_command(batch_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
