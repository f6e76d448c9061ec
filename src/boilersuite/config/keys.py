# boilersuite:header:start
#
#   project      : Boilersuite
#   file         : keys.py
#   file_relpath : src/boilersuite/config/keys.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 The Boilersuite Authors
#
# boilersuite:header:end

"""Canonical TOML section and key names for Boilersuite configuration.

Keys defined here are the external configuration API as it appears in
``boilersuite.toml`` and in ``[tool.boilersuite]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by Boilersuite configuration."""

    # [tool.boilersuite] in pyproject.toml
    SECTION_TOOL: Final[str] = "tool"
    SECTION_BOILERSUITE: Final[str] = "boilersuite"

    KEY_AUTHOR: Final[str] = "author"
    KEY_SKIP: Final[str] = "skip"
    KEY_PATCH: Final[str] = "patch"
    KEY_TEMPLATE_DIR: Final[str] = "template_dir"

    ALL_KEYS: Final[frozenset[str]] = frozenset(
        {KEY_AUTHOR, KEY_SKIP, KEY_PATCH, KEY_TEMPLATE_DIR}
    )
