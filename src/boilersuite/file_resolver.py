# boilersuite:header:start
#
#   project      : Boilersuite
#   file         : file_resolver.py
#   file_relpath : src/boilersuite/file_resolver.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 The Boilersuite Authors
#
# boilersuite:header:end

"""Resolve the files a Boilersuite run should validate.

Starting from a single target (a file or a directory), this module walks the
tree and keeps the files for which a template exists. Directories named in
the skip list are pruned, ``.gitignore`` files are honoured (root and nested,
with git wildmatch semantics via `pathspec`), and a few well-known files are
always skipped. The result is a deterministic, sorted list of paths.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import GitIgnoreSpec

from boilersuite.config.logging import get_logger
from boilersuite.constants import SKIPPED_FILE_NAMES, SKIPPED_FILE_PREFIXES

if TYPE_CHECKING:
    from collections.abc import Iterable

    from boilersuite.config.logging import BoilersuiteLogger
    from boilersuite.templates.registry import TemplateMap

logger: BoilersuiteLogger = get_logger(__name__)

GITIGNORE_FILE_NAME = ".gitignore"


@dataclass(frozen=True)
class IgnoreSource:
    """A parsed ``.gitignore`` and the directory its patterns are relative to."""

    base: Path
    spec: GitIgnoreSpec


def load_ignore_source(directory: Path) -> IgnoreSource | None:
    """Parse ``directory/.gitignore`` if present.

    Unreadable files are logged and ignored.
    """
    path: Path = directory / GITIGNORE_FILE_NAME
    if not path.is_file():
        return None
    try:
        text: str = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read ignore patterns from '%s': %s", path, e)
        return None
    spec = GitIgnoreSpec.from_lines(text.splitlines())
    logger.debug("Loaded %d ignore pattern(s) from %s", len(spec.patterns), path)
    return IgnoreSource(base=directory, spec=spec)


def is_ignored(path: Path, sources: Iterable[IgnoreSource], *, is_dir: bool) -> bool:
    """Return True if any applicable ignore source matches ``path``."""
    for src in sources:
        try:
            rel: str = path.relative_to(src.base).as_posix()
        except ValueError:
            continue
        if is_dir:
            rel += "/"
        if src.spec.match_file(rel):
            return True
    return False


def is_skipped_file(name: str) -> bool:
    """Return True for files which are never validated (Go module files, generated code)."""
    return name in SKIPPED_FILE_NAMES or name.startswith(SKIPPED_FILE_PREFIXES)


def is_skipped_dir(name: str, skipped_dirs: Iterable[str]) -> bool:
    """Return True if a directory with this base name must not be descended into."""
    return name in set(skipped_dirs)


def resolve_targets(
    base: Path,
    templates: TemplateMap,
    skipped_dirs: Iterable[str],
) -> list[Path]:
    """Return the files under ``base`` which have a template.

    Args:
        base (Path): A file or a directory.
        templates (TemplateMap): Loaded templates; files without one are dropped.
        skipped_dirs (Iterable[str]): Directory base names to prune.

    Returns:
        list[Path]: Sorted list of files to validate.

    Raises:
        FileNotFoundError: If ``base`` does not exist.
    """
    if not base.exists():
        raise FileNotFoundError(f"no such file or directory: {str(base)!r}")

    if base.is_file():
        return [base] if templates.template_for(base) is not None else []

    skip_set: frozenset[str] = frozenset(skipped_dirs)
    ignore_sources: dict[Path, IgnoreSource] = {}
    targets: list[Path] = []

    for dirpath, dirnames, filenames in os.walk(base, topdown=True):
        current = Path(dirpath)
        src: IgnoreSource | None = load_ignore_source(current)
        if src is not None:
            ignore_sources[current] = src
        active: list[IgnoreSource] = [
            s for b, s in ignore_sources.items() if current == b or b in current.parents
        ]

        kept_dirs: list[str] = []
        for name in sorted(dirnames):
            sub: Path = current / name
            if is_skipped_dir(name, skip_set) or is_ignored(sub, active, is_dir=True):
                logger.info("skipping directory %s", sub)
                continue
            kept_dirs.append(name)
        # Prune in place so os.walk does not descend into skipped directories
        dirnames[:] = kept_dirs

        for name in filenames:
            path: Path = current / name
            if is_skipped_file(name) or is_ignored(path, active, is_dir=False):
                logger.info("skipping file %s", path)
                continue
            if templates.template_for(path) is None:
                logger.trace("no template for %s", path)
                continue
            targets.append(path)

    logger.debug("Resolved %d target(s) under %s", len(targets), base)
    return sorted(targets)
