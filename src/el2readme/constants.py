# topmark:header:start
#
#   project      : El2Readme
#   file         : constants.py
#   file_relpath : src/el2readme/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""El2Readme Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    EL2README_VERSION: str = get_version("el2readme")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    EL2README_VERSION = "0.0.0"

EL2README_NAME: str = "el2readme"

# Configuration discovery
CONFIG_FILE_NAME: str = "el2readme.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"

# Environment variable consulted for the internal log level
LOG_LEVEL_ENV_VAR: str = "EL2README_LOG_LEVEL"

# Runtime defaults (see `el2readme.config.model.MutableConfig.from_defaults`)
DEFAULT_COMMENT_MARKER: str = ";;"
DEFAULT_FILE_EXTENSION: str = ".el"
DEFAULT_SRC_LANGUAGE: str = "emacs-lisp"
DEFAULT_OUTPUT_NAME: str = "README.org"
DEFAULT_TOOL_URL: str = "https://pypi.org/project/el2readme/"

# GPL disclaimer sentinels (literal, matched verbatim)
DISCLAIMER_START_SENTINEL: str = "is free software"
DISCLAIMER_END_SENTINEL: str = "If not, see <http://www.gnu.org/licenses/>."
DISCLAIMER_OR_LATER_PHRASE: str = "any later version"
GPL_LICENSES_URL: str = "https://www.gnu.org/licenses/"

# Org markup tokens
ORG_TITLE_LABEL: str = "#+TITLE:"
ORG_HEADING_MARKER: str = "*"
ORG_LIST_MARKER: str = "  -"
ORG_DIVIDER: str = "-----"
ORG_VERBATIM: str = "~"
ORG_SRC_BEGIN: str = "#+begin_src"
ORG_SRC_END: str = "#+end_src"

# Heading separator between the file name and its summary on the title line
TITLE_SEPARATOR: str = " --- "
