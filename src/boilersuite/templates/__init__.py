# boilersuite:header:start
#
#   project      : Boilersuite
#   file         : __init__.py
#   file_relpath : src/boilersuite/templates/__init__.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 The Boilersuite Authors
#
# boilersuite:header:end

"""Boilerplate template repository.

The bundled templates live in ``boilerplate-templates/`` next to this file,
one ``boilerplate.<category>.boilertmpl`` per file category. See
`boilersuite.templates.registry` for loading and lookup.
"""

from __future__ import annotations
