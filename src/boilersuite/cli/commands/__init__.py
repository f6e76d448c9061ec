# boilersuite:header:start
#
#   project      : Boilersuite
#   file         : __init__.py
#   file_relpath : src/boilersuite/cli/commands/__init__.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 The Boilersuite Authors
#
# boilersuite:header:end

"""Boilersuite CLI subcommands."""

from __future__ import annotations
