# boilersuite:header:start
#
#   project      : Boilersuite
#   file         : __init__.py
#   file_relpath : src/boilersuite/__init__.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 The Boilersuite Authors
#
# boilersuite:header:end

"""Boilersuite package.

Boilersuite checks that source files start with the copyright/license
boilerplate of their file category and can print a patch fixing the ones that
don't. It exposes a Click CLI and a small typed core
(`boilersuite.core.template.Template`) for automation.
"""

from __future__ import annotations
