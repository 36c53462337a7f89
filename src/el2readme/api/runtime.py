# topmark:header:start
#
#   project      : El2Readme
#   file         : runtime.py
#   file_relpath : src/el2readme/api/runtime.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime helpers behind the public API.

These functions build one `ConversionContext` per file, run the matching
pipeline and return the context. Batch runs process files strictly in the
given order; each file gets a fresh context, so a failure is confined to the
file that caused it.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from el2readme.config import Config, MutableConfig
from el2readme.config.logging import get_logger
from el2readme.pipeline import runner
from el2readme.pipeline.context import ConversionContext
from el2readme.pipeline.pipelines import get_pipeline
from el2readme.pipeline.steps.writer import FileSystemSink, NullSink, StdoutSink

if TYPE_CHECKING:
    from collections.abc import Iterable

    from el2readme.config.logging import El2ReadmeLogger
    from el2readme.pipeline.steps.writer import WriteSink

logger: El2ReadmeLogger = get_logger(__name__)


def resolve_config(config: Config | None) -> Config:
    """Return ``config`` or the merged defaults/project configuration."""
    if config is not None:
        return config
    return MutableConfig.load_merged().freeze()


def default_output_path(source: Path, config: Config) -> Path:
    """Return the conventional output path next to ``source`` (e.g. ``README.org``)."""
    return source.parent / config.output_name


def select_sink(*, dry_run: bool, to_stdout: bool) -> WriteSink:
    """Return the sink matching the caller's intent."""
    if dry_run:
        logger.debug("Selected NULL sink (dry run)")
        return NullSink()
    if to_stdout:
        logger.debug("Selected STDOUT sink")
        return StdoutSink()
    logger.debug("Selected file system sink")
    return FileSystemSink()


def run_convert_text(text: str, *, filename: str, config: Config) -> ConversionContext:
    """Convert in-memory ``text`` without touching the filesystem."""
    ctx: ConversionContext = ConversionContext.bootstrap(
        path=Path(filename), config=config, sink=NullSink()
    )
    ctx.document = text.splitlines()
    return runner.run(ctx, get_pipeline("convert-file"))


def run_convert_file(
    path: Path,
    *,
    output: Path | None,
    config: Config,
    dry_run: bool = False,
    to_stdout: bool = False,
) -> ConversionContext:
    """Convert one file; ``output`` defaults to the configured name in the working directory."""
    ctx: ConversionContext = ConversionContext.bootstrap(
        path=path,
        config=config,
        output_path=output if output is not None else Path(config.output_name),
        sink=select_sink(dry_run=dry_run, to_stdout=to_stdout),
    )
    return runner.run(ctx, get_pipeline("convert-file"))


def run_convert_files(
    paths: Iterable[Path],
    *,
    config: Config,
    dry_run: bool = False,
    to_stdout: bool = False,
) -> list[ConversionContext]:
    """Convert each file to the configured output name in its own directory.

    Errors the steps do not map to a status are logged and recorded on that
    file's context; the remaining files are still converted.
    """
    results: list[ConversionContext] = []
    for path in paths:
        ctx: ConversionContext = ConversionContext.bootstrap(
            path=path,
            config=config,
            output_path=default_output_path(path, config),
            sink=select_sink(dry_run=dry_run, to_stdout=to_stdout),
        )
        try:
            ctx = runner.run(ctx, get_pipeline("convert-file"))
        except Exception as e:
            logger.exception("Unexpected error converting %s: %s", path, e)
            ctx.add_error(f"Unexpected error converting {path}: {e}")
            ctx.stop_flow("unexpected-error")
        results.append(ctx)
    return results
