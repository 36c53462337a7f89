# topmark:header:start
#
#   project      : El2Readme
#   file         : __init__.py
#   file_relpath : src/el2readme/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public API for El2Readme.

This module exposes a small, typed surface for converting Emacs Lisp headers
to Org documents from Python code:

- `convert_text`: convert in-memory text and return the Org document.
- `convert_file`: convert one file and write the result (``README.org`` by default).
- `convert_files`: convert several files, each to ``README.org`` beside it;
  one file failing never stops the others.

Example:
    ```python
    from pathlib import Path
    from el2readme.api import convert_file, convert_text

    org = convert_text(Path("foo.el").read_text(), filename="foo.el")
    ctx = convert_file(Path("foo.el"), output=Path("README.org"))
    assert ctx.succeeded
    ```
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from el2readme.api.runtime import (
    default_output_path,
    resolve_config,
    run_convert_file,
    run_convert_files,
    run_convert_text,
)
from el2readme.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from el2readme.config import Config
    from el2readme.config.logging import El2ReadmeLogger
    from el2readme.pipeline.context import ConversionContext

logger: El2ReadmeLogger = get_logger(__name__)

__all__: list[str] = [
    "convert_file",
    "convert_files",
    "convert_text",
    "default_output_path",
]


def convert_text(text: str, *, filename: str = "module.el", config: Config | None = None) -> str:
    """Convert the header of ``text`` and return the Org document.

    Args:
        text (str): Full source file content.
        filename (str): Name used in the attribution line.
        config (Config | None): Configuration; defaults to the merged project configuration.

    Returns:
        str: The Org document (always ends with a newline).
    """
    ctx: ConversionContext = run_convert_text(
        text, filename=filename, config=resolve_config(config)
    )
    assert ctx.text is not None
    return ctx.text


def convert_file(
    path: Path | str,
    output: Path | str | None = None,
    *,
    config: Config | None = None,
    dry_run: bool = False,
    to_stdout: bool = False,
) -> ConversionContext:
    """Convert one file and write (or print) the result.

    Args:
        path (Path | str): Source file.
        output (Path | str | None): Destination; defaults to the configured
            output name (``README.org``) in the working directory.
        config (Config | None): Configuration; defaults to the merged project configuration.
        dry_run (bool): Convert without writing anything.
        to_stdout (bool): Print the document instead of writing a file.

    Returns:
        ConversionContext: Final context; check ``succeeded`` and ``diagnostics``.
    """
    return run_convert_file(
        Path(path),
        output=Path(output) if output is not None else None,
        config=resolve_config(config),
        dry_run=dry_run,
        to_stdout=to_stdout,
    )


def convert_files(
    paths: Iterable[Path | str],
    *,
    config: Config | None = None,
    dry_run: bool = False,
    to_stdout: bool = False,
) -> list[ConversionContext]:
    """Convert several files, in order, each to the output name in its own directory.

    Args:
        paths (Iterable[Path | str]): Source files.
        config (Config | None): Configuration; defaults to the merged project configuration.
        dry_run (bool): Convert without writing anything.
        to_stdout (bool): Print every document instead of writing files.

    Returns:
        list[ConversionContext]: One final context per input, in input order.
    """
    return run_convert_files(
        [Path(p) for p in paths],
        config=resolve_config(config),
        dry_run=dry_run,
        to_stdout=to_stdout,
    )
