# topmark:header:start
#
#   project      : El2Readme
#   file         : version.py
#   file_relpath : src/el2readme/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""El2Readme `version` command.

Prints the current El2Readme version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from el2readme.cli.cmd_common import get_console, get_effective_verbosity
from el2readme.constants import EL2README_VERSION


@click.command(
    name="version",
    help="Show the current version of El2Readme.",
)
def version_command() -> None:
    """Show the current version of El2Readme."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("El2Readme version:", bold=True, underline=True))
        console.print(f"    {console.styled(EL2README_VERSION, bold=True)}")
    else:
        console.print(console.styled(EL2README_VERSION, bold=True))
