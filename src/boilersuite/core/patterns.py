# boilersuite:header:start
#
#   project      : Boilersuite
#   file         : patterns.py
#   file_relpath : src/boilersuite/core/patterns.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 The Boilersuite Authors
#
# boilersuite:header:end

"""Markers and compiled patterns shared by the boilerplate engine.

All patterns are compiled once at import time and never mutated, so they can
be shared freely between validations.
"""

from __future__ import annotations

import re
from typing import Final

# Placeholders which appear in template sources but never in checked files
YEAR_MARKER: Final[str] = "<<YEAR>>"
AUTHOR_MARKER: Final[str] = "<<AUTHOR>>"

YEAR_MARKER_RE: Final[re.Pattern[str]] = re.compile(re.escape(YEAR_MARKER))
AUTHOR_MARKER_RE: Final[re.Pattern[str]] = re.compile(re.escape(AUTHOR_MARKER))

# Copyright line inside an existing header; group 1 is the year
COPYRIGHT_RE: Final[re.Pattern[str]] = re.compile(r"Copyright (20\d\d)")

# Go build constraints (old and new style) at the very start of the content
BUILD_CONSTRAINTS_RE: Final[re.Pattern[str]] = re.compile(r"\A(?://(?:go:build| \+build).*\n)+")

# Interpreter line; normally the first line, but matched on any line
SHEBANG_RE: Final[re.Pattern[str]] = re.compile(r"^#!.*\n", re.MULTILINE)

# Files which opt out of validation
SKIP_FILE_RE: Final[re.Pattern[str]] = re.compile(
    r"^(?://|#) \+skip_license_check\r?$", re.MULTILINE
)

# Comments added by code generators ("Code generated by X. DO NOT EDIT.")
GENERATED_RE: Final[re.Pattern[str]] = re.compile(r"^[/*#]+.*DO NOT EDIT\.\r?$", re.MULTILINE)


def is_exempt(content: str) -> bool:
    """Return True if ``content`` carries a skip marker or a generated-file marker."""
    return bool(SKIP_FILE_RE.search(content) or GENERATED_RE.search(content))
