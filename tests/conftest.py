# topmark:header:start
#
#   project      : El2Readme
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the El2Readme test suite.

This file sets up global fixtures, typed mark wrappers and the logging
configuration used for test runs.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build configs using `el2readme.config.MutableConfig` (mutable), then
      `freeze()` into a `el2readme.config.Config` for **public API** calls
      (``el2readme.api.convert_text/convert_file``).
    - Do **not** mutate a frozen `Config`. If you need to tweak one, call
      `Config.thaw()`, edit the returned `MutableConfig`, then `freeze()` again.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from el2readme.config import MutableConfig
from el2readme.config import logging as el2readme_logging
from el2readme.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from pathlib import Path

    from el2readme.config import Config

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.pipeline`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_el2readme_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure El2Readme's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    el2readme_logging.setup_logging(level=el2readme_logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test in an empty project directory.

    Config discovery walks upward from the working directory, so tests that
    rely on defaults must not see this repository's files.

    Returns:
        Path: The temporary working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


SAMPLE_EL: str = """\
;;; mylib.el --- does a thing  -*- lexical-binding: t -*-

;; Copyright (C) 2025 Jane Hacker

;; Author: Jane Hacker <jane@example.org>
;; Keywords: convenience, tools
;; Version: 1.2.0

;; This file is not part of GNU Emacs.

;; This program is free software; you can redistribute it and/or modify
;; it under the terms of the GNU General Public License as published by
;; the Free Software Foundation, either version 3 of the License, or
;; (at your option) any later version.
;;
;; This program is distributed in the hope that it will be useful,
;; but WITHOUT ANY WARRANTY; without even the implied warranty of
;; MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
;; GNU General Public License for more details.
;;
;; You should have received a copy of the GNU General Public License
;; along with this program.  If not, see <http://www.gnu.org/licenses/>.

;;; Commentary:

;; Call `mylib-do' to do the thing with `mylib-thing'.
;;
;;    (require 'mylib)
;;    (mylib-do)
;;
;;;;
;; Plain text after the divider.

;;; Code:

(defun mylib-do ()
  "Do the thing."
  (message "done"))

;; `not-header' comments after code never reach the README.
"""
"""A typical package header: title, labels, GPL paragraph, commentary and code."""


SAMPLE_ORG: str = """\
#+TITLE: mylib

does a thing

Copyright (C) 2025 Jane Hacker

  - Author: Jane Hacker <jane@example.org>
  - Keywords: convenience, tools
  - Version: 1.2.0

This file is not part of GNU Emacs.

This program is licensed under [[https://www.gnu.org/licenses/gpl-3.0.html][GPL 3]] or later.

* Commentary

Call ~mylib-do~ to do the thing with ~mylib-thing~.

#+begin_src emacs-lisp
(require 'mylib)
(mylib-do)
#+end_src

-----
Plain text after the divider.

Converted from =mylib.el= by [[https://pypi.org/project/el2readme/][el2readme]].
"""
"""Expected Org rendering of `SAMPLE_EL` with the default configuration."""


@pytest.fixture
def sample_el(tmp_path: Path) -> Path:
    """Write `SAMPLE_EL` to ``<tmp>/pkg/mylib.el`` and return its path."""
    pkg: Path = tmp_path / "pkg"
    pkg.mkdir()
    path: Path = pkg / "mylib.el"
    path.write_text(SAMPLE_EL, encoding="utf-8")
    return path


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and overrides.

    Args:
        **overrides (Any): Keyword overrides applied to the mutable builder before freezing.

    Returns:
        Config: An immutable configuration snapshot for use in tests.
    """
    return make_mutable_config(**overrides).freeze()


def make_mutable_config(**overrides: Any) -> MutableConfig:
    """Return a defaults-populated mutable builder with ``overrides`` applied."""
    m: MutableConfig = MutableConfig.from_defaults()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m
