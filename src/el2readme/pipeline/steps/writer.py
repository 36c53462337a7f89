# topmark:header:start
#
#   project      : El2Readme
#   file         : writer.py
#   file_relpath : src/el2readme/pipeline/steps/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Writer step for committing the converted document to a sink.

Sinks
-----
- FileSystemSink: writes ``ctx.text`` to ``ctx.output_path``.
- StdoutSink: prints ``ctx.text`` to standard output.
- NullSink: no-op (dry run, in-memory conversions).

Write failures are recorded on the write axis; they halt the current file
only and never raise.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, TextIO

from el2readme.config.logging import get_logger
from el2readme.pipeline.status import Axis, WriteStatus
from el2readme.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from el2readme.config.logging import El2ReadmeLogger
    from el2readme.pipeline.context import ConversionContext

logger: El2ReadmeLogger = get_logger(__name__)


@dataclass
class WriteResult:
    """Structured result of a write operation."""

    status: WriteStatus
    bytes_written: int = 0


class WriteSink(Protocol):
    """Protocol for write sinks used by the writer step."""

    def write(self, *, ctx: ConversionContext) -> WriteResult:
        """Write ``ctx.text`` to the target sink.

        Args:
            ctx (ConversionContext): Context that holds the converted text.

        Returns:
            WriteResult: Structured result indicating the write status and the number
            of bytes written (if applicable).
        """
        ...


class NullSink:
    """Dry-run sink: does not write anything."""

    def write(self, *, ctx: ConversionContext) -> WriteResult:
        """No-op write for dry-run mode."""
        return WriteResult(status=WriteStatus.DRY_RUN, bytes_written=0)


class StdoutSink:
    """Standard-output sink."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream

    def write(self, *, ctx: ConversionContext) -> WriteResult:
        """Emit the converted text to standard output."""
        if ctx.text is None:
            return WriteResult(status=WriteStatus.SKIPPED, bytes_written=0)
        stream: TextIO = self.stream or sys.stdout
        stream.write(ctx.text)
        stream.flush()
        return WriteResult(
            status=WriteStatus.PRINTED, bytes_written=len(ctx.text.encode("utf-8"))
        )


class FileSystemSink:
    """Filesystem sink that writes to ``ctx.output_path``."""

    def write(self, *, ctx: ConversionContext) -> WriteResult:
        """Write the converted text as UTF-8 with ``\\n`` newlines.

        Raises:
            OSError: Propagated to `WriterStep`, which records it.
        """
        if ctx.text is None or ctx.output_path is None:
            logger.debug("FileSystemSink: nothing to write for %s", ctx.path)
            return WriteResult(status=WriteStatus.SKIPPED, bytes_written=0)
        with open(ctx.output_path, "w", encoding="utf-8", newline="\n") as f:
            f.write(ctx.text)
        bytes_written: int = len(ctx.text.encode("utf-8"))
        logger.debug("FileSystemSink: wrote %d bytes to file %s", bytes_written, ctx.output_path)
        return WriteResult(status=WriteStatus.WRITTEN, bytes_written=bytes_written)


class WriterStep(BaseStep):
    """Hand ``ctx.text`` to ``ctx.sink`` (a `NullSink` when unset).

    Axes written:
      - write
    """

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            primary_axis=Axis.WRITE,
            axes_written=(Axis.WRITE,),
        )

    def may_proceed(self, ctx: ConversionContext) -> bool:
        """Write only a finished conversion; otherwise mark the write as skipped."""
        if ctx.is_halted or ctx.text is None:
            ctx.status.write = WriteStatus.SKIPPED
            return False
        return True

    def run(self, ctx: ConversionContext) -> None:
        """Commit the text; an ``OSError`` becomes ``WriteStatus.FAILED``."""
        sink: WriteSink = ctx.sink or NullSink()
        try:
            result: WriteResult = sink.write(ctx=ctx)
        except OSError as exc:
            message: str = f"Cannot write {ctx.output_path}: {exc}"
            logger.error(message)
            ctx.status.write = WriteStatus.FAILED
            ctx.add_error(message)
            ctx.stop_flow("write-failed", self)
            return
        ctx.status.write = result.status
