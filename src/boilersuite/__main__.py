# boilersuite:header:start
#
#   project      : Boilersuite
#   file         : __main__.py
#   file_relpath : src/boilersuite/__main__.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 The Boilersuite Authors
#
# boilersuite:header:end

"""Module entry point for running Boilersuite via ``python -m boilersuite``.

Examples:
    Check a source tree::

        python -m boilersuite check .
"""

from __future__ import annotations

from boilersuite.cli.main import cli

if __name__ == "__main__":
    cli()
