# topmark:header:start
#
#   project      : El2Readme
#   file         : context.py
#   file_relpath : src/el2readme/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Conversion context for the El2Readme pipeline.

A `ConversionContext` carries the complete, mutable state of one conversion
as it flows through the pipeline steps: configuration, per-axis status,
diagnostics and the intermediate line images. Contexts are never shared
between files, so a failure in one conversion cannot leak into the next.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from el2readme.config.logging import get_logger
from el2readme.core.diagnostics import Diagnostic, DiagnosticLevel
from el2readme.pipeline.status import ConversionStatus

if TYPE_CHECKING:
    from el2readme.config import Config
    from el2readme.config.logging import El2ReadmeLogger
    from el2readme.pipeline.steps.base import BaseStep
    from el2readme.pipeline.steps.writer import WriteSink

logger: El2ReadmeLogger = get_logger(__name__)

__all__: list[str] = [
    "ConversionContext",
    "FlowControl",
]


@dataclass
class FlowControl:
    """Execution flow control for the current file."""

    halt: bool = False
    reason: str = ""  # short code, e.g. "not-found", "write-failed"
    at_step: str = ""  # step name that requested the halt


@dataclass
class ConversionContext:
    """State of a single conversion.

    Attributes:
        path (Path): Source file (used for reading and for the attribution line).
        config (Config): Effective configuration.
        output_path (Path | None): Destination when writing to the filesystem.
        sink (WriteSink | None): Output sink chosen by the caller; ``None`` means dry run.
        steps (list[BaseStep]): Steps executed so far, in order.
        status (ConversionStatus): Per-axis status.
        flow (FlowControl): Halt request, if any.
        diagnostics (list[Diagnostic]): Messages collected along the way.
        document (list[str] | None): Source lines without line terminators.
        header (list[str] | None): Leading comment block (after the disclaimer rewrite).
        disclaimer_index (int | None): Index of the collapsed GPL attribution in ``header``.
        converted (list[str] | None): Org lines produced by the line pass.
        text (str | None): Final document text.
    """

    path: Path
    config: Config
    output_path: Path | None = None
    sink: WriteSink | None = None
    steps: list[BaseStep] = field(default_factory=lambda: [])
    status: ConversionStatus = field(default_factory=ConversionStatus)
    flow: FlowControl = field(default_factory=FlowControl)
    diagnostics: list[Diagnostic] = field(default_factory=lambda: [])

    document: list[str] | None = None
    header: list[str] | None = None
    disclaimer_index: int | None = None
    converted: list[str] | None = None
    text: str | None = None

    @classmethod
    def bootstrap(
        cls,
        *,
        path: Path,
        config: Config,
        output_path: Path | None = None,
        sink: WriteSink | None = None,
    ) -> ConversionContext:
        """Create a fresh context with no derived state."""
        return cls(path=path, config=config, output_path=output_path, sink=sink)

    @property
    def is_halted(self) -> bool:
        """Return True if a step requested to stop processing this file."""
        return self.flow.halt

    def stop_flow(self, reason: str, at_step: BaseStep | None = None) -> None:
        """Request that the remaining steps skip this file.

        Args:
            reason (str): Short machine-friendly reason code for halting the flow.
            at_step (BaseStep | None): Step instance requesting the halt; defaults to
                the step that ran last.
        """
        if at_step is None and self.steps:
            at_step = self.steps[-1]
        step_name: str = at_step.name if at_step is not None else ""
        logger.info("Flow halted in %s: %s", step_name or "<no step>", reason)
        self.flow = FlowControl(halt=True, reason=reason, at_step=step_name)

    # --- Convenience helpers -------------------------------------------------
    def add_info(self, message: str) -> None:
        """Add an ``info`` diagnostic."""
        self.diagnostics.append(Diagnostic(DiagnosticLevel.INFO, message))

    def add_warning(self, message: str) -> None:
        """Add a ``warning`` diagnostic."""
        self.diagnostics.append(Diagnostic(DiagnosticLevel.WARNING, message))

    def add_error(self, message: str) -> None:
        """Add an ``error`` diagnostic."""
        self.diagnostics.append(Diagnostic(DiagnosticLevel.ERROR, message))

    @property
    def succeeded(self) -> bool:
        """Return True if the conversion produced text and nothing failed."""
        return self.text is not None and not self.is_halted

    def format_summary(self, *, color: bool = False) -> str:
        """Return a one-line summary: ``<path>: <read> | <convert> | <write>``.

        Args:
            color (bool): Colorize status fragments with their `yachalk` style.
        """
        parts: list[str] = [
            self.status.read.render(color=color),
            self.status.convert.render(color=color),
            self.status.write.render(color=color),
        ]
        target: str = f" -> {self.output_path}" if self.output_path is not None else ""
        return f"{self.path}{target}: {' | '.join(parts)}"

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly snapshot (for logging and debugging)."""
        return {
            "path": str(self.path),
            "output_path": str(self.output_path) if self.output_path else None,
            "status": {
                "read": self.status.read.name,
                "convert": self.status.convert.name,
                "write": self.status.write.name,
            },
            "flow": {
                "halt": self.flow.halt,
                "reason": self.flow.reason,
                "at_step": self.flow.at_step,
            },
            "steps": [step.name for step in self.steps],
            "diagnostics": [d.render() for d in self.diagnostics],
            "header_lines": len(self.header) if self.header is not None else None,
        }
