# topmark:header:start
#
#   project      : El2Readme
#   file         : test_steps.py
#   file_relpath : tests/pipeline/test_steps.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for individual steps, sinks and the context helpers."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from el2readme.config import Config
from el2readme.core.diagnostics import Diagnostic, DiagnosticLevel, worst_level
from el2readme.pipeline.context import ConversionContext
from el2readme.pipeline.pipelines import get_pipeline
from el2readme.pipeline.status import ConvertStatus, ReadStatus, WriteStatus
from el2readme.pipeline.steps.base import BaseStep
from el2readme.pipeline.steps.disclaimer import DisclaimerStep
from el2readme.pipeline.steps.extractor import ExtractorStep
from el2readme.pipeline.steps.finalizer import attribution_line, finalize_lines
from el2readme.pipeline.steps.inline import InlineMarkupStep
from el2readme.pipeline.steps.writer import NullSink, StdoutSink, WriteSink, WriterStep
from tests.conftest import mark_pipeline

URL: str = "https://example.org/el2readme"


def _ctx(*, output_path: Path | None = None, sink: WriteSink | None = None) -> ConversionContext:
    return ConversionContext.bootstrap(
        path=Path("pkg/a.el"), config=Config(), output_path=output_path, sink=sink
    )


def test_attribution_line() -> None:
    assert attribution_line("a.el", URL) == (
        "Converted from =a.el= by [[https://example.org/el2readme][el2readme]]."
    )


def test_finalize_appends_blank_and_attribution() -> None:
    lines: list[str] = finalize_lines(["#+TITLE: a  ", "text\t"], "a.el", URL)
    assert lines == ["#+TITLE: a", "text", "", attribution_line("a.el", URL)]


def test_finalize_collapses_trailing_blanks() -> None:
    lines: list[str] = finalize_lines(["text", "", "  ", ""], "a.el", URL)
    assert lines == ["text", "", attribution_line("a.el", URL)]


def test_finalize_all_blank() -> None:
    assert finalize_lines(["", " "], "a.el", URL) == [attribution_line("a.el", URL)]


@mark_pipeline
def test_extractor_requires_document() -> None:
    """Without a loaded document the extractor does not run."""
    ctx: ConversionContext = ExtractorStep()(_ctx())
    assert ctx.header is None
    assert ctx.steps[-1].name == "ExtractorStep"


@mark_pipeline
def test_disclaimer_step_records_info() -> None:
    ctx: ConversionContext = _ctx()
    ctx.header = [
        ";; a is free software",
        ";; If not, see <http://www.gnu.org/licenses/>.",
        ";; after",
    ]
    ctx = DisclaimerStep()(ctx)

    assert ctx.disclaimer_index == 0
    assert ctx.header == [
        "This program is licensed under [[https://www.gnu.org/licenses/][GPL]].",
        ";; after",
    ]
    assert worst_level(ctx.diagnostics) == DiagnosticLevel.INFO


@mark_pipeline
def test_inline_step_sweeps_all_lines() -> None:
    ctx: ConversionContext = _ctx()
    ctx.converted = ["Use `a'.", "", "And `b' too."]
    ctx = InlineMarkupStep()(ctx)
    assert ctx.converted == ["Use ~a~.", "", "And ~b~ too."]


@mark_pipeline
def test_halted_flow_skips_later_steps() -> None:
    ctx: ConversionContext = _ctx()
    ctx.document = [";; a"]
    ctx.stop_flow("test", ExtractorStep())
    ctx = ExtractorStep()(ctx)
    assert ctx.header is None
    assert ctx.status.convert == ConvertStatus.SKIPPED


def test_base_step_run_is_abstract() -> None:
    step = BaseStep(name="bare", primary_axis=None)
    with pytest.raises(NotImplementedError):
        step(_ctx())


@mark_pipeline
def test_stdout_sink_writes_stream() -> None:
    stream = io.StringIO()
    ctx: ConversionContext = _ctx(sink=StdoutSink(stream))
    ctx.text = "#+TITLE: a\n"
    ctx = WriterStep()(ctx)

    assert stream.getvalue() == "#+TITLE: a\n"
    assert ctx.status.write == WriteStatus.PRINTED


@mark_pipeline
def test_writer_defaults_to_null_sink() -> None:
    ctx: ConversionContext = _ctx()
    ctx.text = "x\n"
    ctx = WriterStep()(ctx)
    assert ctx.status.write == WriteStatus.DRY_RUN


@mark_pipeline
def test_writer_skips_without_text() -> None:
    ctx: ConversionContext = WriterStep()(_ctx(sink=NullSink()))
    assert ctx.status.write == WriteStatus.SKIPPED


def test_pipeline_registry() -> None:
    assert len(get_pipeline("convert")) == 5
    assert len(get_pipeline("convert-file")) == 7
    with pytest.raises(KeyError):
        get_pipeline("nope")


def test_format_summary_and_to_dict() -> None:
    ctx: ConversionContext = _ctx(output_path=Path("pkg/README.org"))
    ctx.status.read = ReadStatus.NOT_FOUND
    ctx.add_error("File not found: pkg/a.el")

    summary: str = ctx.format_summary()
    assert summary.startswith(str(Path("pkg/a.el")) + " -> " + str(Path("pkg/README.org")))
    assert "not found | conversion pending | write pending" in summary

    snapshot: dict[str, object] = ctx.to_dict()
    assert snapshot["status"] == {"read": "NOT_FOUND", "convert": "PENDING", "write": "PENDING"}
    assert snapshot["diagnostics"] == ["error: File not found: pkg/a.el"]


def test_worst_level() -> None:
    assert worst_level([]) is None
    diags: list[Diagnostic] = [
        Diagnostic(DiagnosticLevel.WARNING, "w"),
        Diagnostic(DiagnosticLevel.INFO, "i"),
    ]
    assert worst_level(diags) == DiagnosticLevel.WARNING


def test_status_render_plain() -> None:
    assert WriteStatus.WRITTEN.render() == "written"
    assert WriteStatus.WRITTEN == "written"
