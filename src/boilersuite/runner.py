# boilersuite:header:start
#
#   project      : Boilersuite
#   file         : runner.py
#   file_relpath : src/boilersuite/runner.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 The Boilersuite Authors
#
# boilersuite:header:end

"""Validate a list of files against their templates.

This is the I/O side of validation: it reads each file, looks up its
template and hands the content to `Template.validate`. Read errors are turned
into `FailureReason.READ_ERROR` failures so one unreadable file never stops
the scan of the others.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from boilersuite.config.logging import get_logger
from boilersuite.core.outcomes import Failure, FailureReason

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from boilersuite.config.logging import BoilersuiteLogger
    from boilersuite.core.template import Template
    from boilersuite.templates.registry import TemplateMap

logger: BoilersuiteLogger = get_logger(__name__)


@dataclass(frozen=True)
class FileResult:
    """Verdict for one file; ``failure`` is ``None`` when the file is compliant."""

    path: Path
    failure: Failure | None = None

    @property
    def ok(self) -> bool:
        """Whether the file passed validation."""
        return self.failure is None


def read_content(path: Path) -> str:
    """Read ``path`` as UTF-8 without translating line endings."""
    return path.read_bytes().decode("utf-8")


def validate_file(path: Path, template: Template, *, want_patch: bool = False) -> FileResult:
    """Read and validate a single file.

    Args:
        path (Path): File to validate.
        template (Template): Template for the file's category.
        want_patch (bool): Attach a unified diff to failures.

    Returns:
        FileResult: The verdict.
    """
    try:
        content: str = read_content(path)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Failed to read %s: %s", path, e)
        return FileResult(path=path, failure=Failure(reason=FailureReason.READ_ERROR, error=e))

    failure: Failure | None = template.validate(content, str(path), want_patch)
    if failure is None:
        logger.info("validated %s successfully", path)
    return FileResult(path=path, failure=failure)


def validate_files(
    paths: Iterable[Path],
    templates: TemplateMap,
    *,
    want_patch: bool = False,
) -> list[FileResult]:
    """Validate every path and return the verdicts in input order.

    Raises:
        LookupError: If a path has no template; callers are expected to pass
            paths obtained from `boilersuite.file_resolver.resolve_targets`.
    """
    results: list[FileResult] = []
    for path in paths:
        template: Template | None = templates.template_for(path)
        if template is None:
            raise LookupError(f"no template for target {str(path)!r}")
        results.append(validate_file(path, template, want_patch=want_patch))
    return results
