# topmark:header:start
#
#   project      : El2Readme
#   file         : __main__.py
#   file_relpath : src/el2readme/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Allow ``python -m el2readme``."""

from el2readme.cli.main import cli

if __name__ == "__main__":
    cli()
