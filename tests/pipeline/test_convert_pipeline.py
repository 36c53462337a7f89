# topmark:header:start
#
#   project      : El2Readme
#   file         : test_convert_pipeline.py
#   file_relpath : tests/pipeline/test_convert_pipeline.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pipeline tests: run the step sequences against a `ConversionContext`."""

from __future__ import annotations

from pathlib import Path

from el2readme.config import Config
from el2readme.core.diagnostics import DiagnosticLevel, worst_level
from el2readme.pipeline import runner
from el2readme.pipeline.context import ConversionContext
from el2readme.pipeline.pipelines import get_pipeline
from el2readme.pipeline.status import ConvertStatus, ReadStatus, WriteStatus
from el2readme.pipeline.steps.writer import FileSystemSink
from tests.conftest import SAMPLE_EL, SAMPLE_ORG, make_config, mark_pipeline


def _run_text(
    text: str, *, filename: str = "mylib.el", config: Config | None = None
) -> ConversionContext:
    ctx: ConversionContext = ConversionContext.bootstrap(
        path=Path(filename), config=config or Config()
    )
    ctx.document = text.splitlines()
    return runner.run(ctx, get_pipeline("convert-file"))


@mark_pipeline
def test_sample_document() -> None:
    """The sample package header converts to the expected Org document."""
    ctx: ConversionContext = _run_text(SAMPLE_EL)

    assert ctx.text == SAMPLE_ORG
    assert ctx.status.read == ReadStatus.FROM_MEMORY
    assert ctx.status.convert == ConvertStatus.CONVERTED
    assert ctx.status.write == WriteStatus.DRY_RUN
    assert ctx.succeeded
    assert ctx.disclaimer_index == 10
    assert [step.name for step in ctx.steps] == [
        "ReaderStep",
        "ExtractorStep",
        "DisclaimerStep",
        "RewriterStep",
        "InlineMarkupStep",
        "FinalizerStep",
        "WriterStep",
    ]


@mark_pipeline
def test_text_after_header_never_converted() -> None:
    """Quoted references after the first code line stay out of the output."""
    ctx: ConversionContext = _run_text(SAMPLE_EL)
    assert ctx.text is not None
    assert "not-header" not in ctx.text
    assert "defun" not in ctx.text


@mark_pipeline
def test_empty_header() -> None:
    """A document opening with code yields only the attribution line."""
    ctx: ConversionContext = _run_text("(provide 'x)\n;; comment\n", filename="x.el")

    assert ctx.text == (
        "Converted from =x.el= by [[https://pypi.org/project/el2readme/][el2readme]].\n"
    )
    assert ctx.status.convert == ConvertStatus.EMPTY_HEADER
    assert worst_level(ctx.diagnostics) == DiagnosticLevel.WARNING
    assert ctx.succeeded


@mark_pipeline
def test_empty_document() -> None:
    ctx: ConversionContext = _run_text("", filename="empty.el")
    assert ctx.status.convert == ConvertStatus.EMPTY_HEADER
    assert ctx.text is not None
    assert ctx.text.startswith("Converted from =empty.el=")


@mark_pipeline
def test_unterminated_disclaimer_is_plain_text() -> None:
    """Without the closing sentinel the GPL lines flow through the line pass."""
    text: str = (
        ";;; a.el --- x\n"
        ";; This program is free software; you can redistribute it.\n"
        ";; Nothing else.\n"
    )
    ctx: ConversionContext = _run_text(text, filename="a.el")

    assert ctx.text is not None
    assert "This program is free software; you can redistribute it." in ctx.text
    assert "licensed under" not in ctx.text
    assert ctx.disclaimer_index is None
    assert any("closing sentinel" in d.message for d in ctx.diagnostics)


@mark_pipeline
def test_trailing_whitespace_stripped() -> None:
    """No output line ends in whitespace."""
    text: str = ";;; a.el --- x   \n;; Some prose.   \n;;    (code)   \n"
    ctx: ConversionContext = _run_text(text, filename="a.el")
    assert ctx.text is not None
    assert all(line == line.rstrip() for line in ctx.text.splitlines())
    assert ctx.text.endswith("]].\n")


@mark_pipeline
def test_configured_values_flow_through() -> None:
    """Extension, language and tool URL come from the configuration."""
    config: Config = make_config(
        file_extension=".lisp", src_language="lisp", tool_url="https://example.org/tool"
    )
    text: str = ";;; util.lisp --- helpers\n;;    (util-run)\n"
    ctx: ConversionContext = _run_text(text, filename="util.lisp", config=config)

    assert ctx.text == (
        "#+TITLE: util\n"
        "\n"
        "helpers\n"
        "#+begin_src lisp\n"
        "(util-run)\n"
        "#+end_src\n"
        "\n"
        "Converted from =util.lisp= by [[https://example.org/tool][el2readme]].\n"
    )


@mark_pipeline
def test_missing_file_halts_at_reader(tmp_path: Path) -> None:
    """A read failure halts the flow; later steps are visited but skipped."""
    ctx: ConversionContext = ConversionContext.bootstrap(
        path=tmp_path / "missing.el",
        config=Config(),
        output_path=tmp_path / "README.org",
        sink=FileSystemSink(),
    )
    ctx = runner.run(ctx, get_pipeline("convert-file"))

    assert ctx.status.read == ReadStatus.NOT_FOUND
    assert ctx.status.convert == ConvertStatus.SKIPPED
    assert ctx.status.write == WriteStatus.SKIPPED
    assert ctx.is_halted
    assert ctx.flow.at_step == "ReaderStep"
    assert ctx.text is None
    assert not ctx.succeeded
    assert len(ctx.steps) == 7
    assert not (tmp_path / "README.org").exists()


@mark_pipeline
def test_undecodable_file(tmp_path: Path) -> None:
    path: Path = tmp_path / "latin1.el"
    path.write_bytes(";; caf\xe9\n".encode("latin-1"))
    ctx: ConversionContext = ConversionContext.bootstrap(path=path, config=Config())
    ctx = runner.run(ctx, get_pipeline("convert-file"))

    assert ctx.status.read == ReadStatus.UNICODE_DECODE_ERROR
    assert worst_level(ctx.diagnostics) == DiagnosticLevel.ERROR


@mark_pipeline
def test_write_failure_is_recorded(tmp_path: Path) -> None:
    """An unwritable output path becomes WriteStatus.FAILED, not an exception."""
    source: Path = tmp_path / "a.el"
    source.write_text(";;; a.el --- x\n", encoding="utf-8")
    ctx: ConversionContext = ConversionContext.bootstrap(
        path=source,
        config=Config(),
        output_path=tmp_path / "no-such-dir" / "README.org",
        sink=FileSystemSink(),
    )
    ctx = runner.run(ctx, get_pipeline("convert-file"))

    assert ctx.status.convert == ConvertStatus.CONVERTED
    assert ctx.status.write == WriteStatus.FAILED
    assert ctx.flow.reason == "write-failed"
    assert not ctx.succeeded


@mark_pipeline
def test_file_written(tmp_path: Path) -> None:
    source: Path = tmp_path / "mylib.el"
    source.write_text(SAMPLE_EL, encoding="utf-8")
    out: Path = tmp_path / "README.org"
    ctx: ConversionContext = ConversionContext.bootstrap(
        path=source, config=Config(), output_path=out, sink=FileSystemSink()
    )
    ctx = runner.run(ctx, get_pipeline("convert-file"))

    assert ctx.status.read == ReadStatus.OK
    assert ctx.status.write == WriteStatus.WRITTEN
    assert out.read_text(encoding="utf-8") == SAMPLE_ORG
