# topmark:header:start
#
#   project      : El2Readme
#   file         : reader.py
#   file_relpath : src/el2readme/pipeline/steps/reader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File reader step for the El2Readme pipeline.

Loads the source file as UTF-8 text into ``ctx.document`` (lines without
terminators). Failures are recorded on the read axis and halt this file only;
they never propagate to the caller.

Contexts that already carry a document (API ``convert_text``) are left as-is.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from el2readme.config.logging import get_logger
from el2readme.pipeline.status import Axis, ReadStatus
from el2readme.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from el2readme.config.logging import El2ReadmeLogger
    from el2readme.pipeline.context import ConversionContext

logger: El2ReadmeLogger = get_logger(__name__)


class ReaderStep(BaseStep):
    """Load the document and set `ReadStatus`.

    Axes written:
      - read
    """

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            primary_axis=Axis.READ,
            axes_written=(Axis.READ,),
        )

    def run(self, ctx: ConversionContext) -> None:
        """Read ``ctx.path`` unless the document is already in memory.

        Args:
            ctx (ConversionContext): The context of the current file.
        """
        if ctx.document is not None:
            ctx.status.read = ReadStatus.FROM_MEMORY
            return

        try:
            text: str = ctx.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            self._fail(ctx, ReadStatus.NOT_FOUND, f"File not found: {ctx.path}")
            return
        except PermissionError:
            self._fail(ctx, ReadStatus.NO_READ_PERMISSION, f"Permission denied: {ctx.path}")
            return
        except UnicodeDecodeError as exc:
            self._fail(ctx, ReadStatus.UNICODE_DECODE_ERROR, f"Not UTF-8 text: {ctx.path} ({exc})")
            return
        except OSError as exc:
            self._fail(ctx, ReadStatus.UNREADABLE, f"Cannot read {ctx.path}: {exc}")
            return

        ctx.document = text.splitlines()
        ctx.status.read = ReadStatus.OK
        logger.debug("Read %d line(s) from %s", len(ctx.document), ctx.path)

    def _fail(self, ctx: ConversionContext, status: ReadStatus, message: str) -> None:
        logger.error(message)
        ctx.status.read = status
        ctx.add_error(message)
        ctx.stop_flow(status.name.lower(), self)
