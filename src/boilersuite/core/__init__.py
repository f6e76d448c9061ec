# boilersuite:header:start
#
#   project      : Boilersuite
#   file         : __init__.py
#   file_relpath : src/boilersuite/core/__init__.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 The Boilersuite Authors
#
# boilersuite:header:end

"""Boilerplate detection and comparison engine.

The ``boilersuite.core`` package performs no I/O; callers hand it file
content and get a verdict back.

Included modules:

- ``patterns``
  Markers and compiled regular expressions (copyright line, shebang, Go build
  constraints, skip and generated-file markers).

- ``locator``
  The comment-block state machine finding an existing boilerplate.

- ``template``
  `Template` construction and validation.

- ``outcomes``
  `Failure` values returned by validation.
"""

from __future__ import annotations
