# boilersuite:header:start
#
#   project      : Boilersuite
#   file         : template.py
#   file_relpath : src/boilersuite/core/template.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 The Boilersuite Authors
#
# boilersuite:header:end

"""Boilerplate templates and file validation.

A `Template` is built once per file category from a template source and then
validates any number of files of that category. Validation is a pure function
of the template and the file content: it never reads files and never raises
for a non-compliant file, it returns a `Failure` value instead.

Expected layout of a validated file::

    <head: shebang / build constraints, if any>
    <blank line>
    <boilerplate>
    <blank line>
    <rest of the file>
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Final

from boilersuite.config.logging import get_logger
from boilersuite.core.locator import find_existing_boilerplate
from boilersuite.core.outcomes import Failure, FailureReason
from boilersuite.core.patterns import (
    AUTHOR_MARKER,
    BUILD_CONSTRAINTS_RE,
    COPYRIGHT_RE,
    SHEBANG_RE,
    YEAR_MARKER,
    is_exempt,
)
from boilersuite.utils.diff import unified_patch

if TYPE_CHECKING:
    from boilersuite.config.logging import BoilersuiteLogger
    from boilersuite.core.locator import Span

logger: BoilersuiteLogger = get_logger(__name__)

_SAMPLE_YEAR: Final[str] = "2000"


class TemplateError(ValueError):
    """Raised when a template source cannot be turned into a `Template`."""


class HeaderSkip(Enum):
    """Header-exempt prefix which may precede the boilerplate.

    Attributes:
        NONE: The boilerplate must start the file.
        BUILD_CONSTRAINTS: Leading ``//go:build`` / ``// +build`` lines stay first.
        SHEBANG: A leading ``#!`` interpreter line stays first.
    """

    NONE = "none"
    BUILD_CONSTRAINTS = "build_constraints"
    SHEBANG = "shebang"


def skip_build_constraints(content: str) -> int:
    """Return the offset just past the leading Go build constraints, or 0."""
    match = BUILD_CONSTRAINTS_RE.match(content)
    return match.end() if match else 0


def skip_shebang(content: str) -> int:
    """Return the offset just past the shebang line, or 0."""
    match = SHEBANG_RE.search(content)
    return match.end() if match else 0


def _skip_nothing(content: str) -> int:
    return 0


HEADER_SKIP_STRATEGIES: Final[dict[HeaderSkip, Callable[[str], int]]] = {
    HeaderSkip.NONE: _skip_nothing,
    HeaderSkip.BUILD_CONSTRAINTS: skip_build_constraints,
    HeaderSkip.SHEBANG: skip_shebang,
}

CATEGORY_HEADER_SKIP: Final[dict[str, HeaderSkip]] = {
    "go": HeaderSkip.BUILD_CONSTRAINTS,
    "sh": HeaderSkip.SHEBANG,
    "bash": HeaderSkip.SHEBANG,
    "py": HeaderSkip.SHEBANG,
}


def current_year() -> str:
    """Year used for files which do not carry a copyright year yet."""
    return str(datetime.date.today().year)


@dataclass(frozen=True)
class Template:
    """Pre-processed boilerplate for one file category.

    Attributes:
        text (str): Boilerplate with the author substituted, trimmed and
            terminated by a single ``\\n``; still contains the year marker.
        category (str): File category (extension or file name prefix).
        header_skip (HeaderSkip): Prefix allowed before the boilerplate.
    """

    text: str
    category: str = ""
    header_skip: HeaderSkip = HeaderSkip.NONE

    @classmethod
    def from_source(cls, content: str, category: str, expected_author: str) -> Template:
        """Build a template from its raw source.

        Args:
            content (str): Template source containing the year and author markers.
            category (str): File category; selects the header-skip strategy.
            expected_author (str): Substituted for the author marker.

        Returns:
            Template: The ready-to-use template.

        Raises:
            TemplateError: If a marker is missing, the source uses CRLF line
                endings, or no copyright line can be derived from it.
        """
        if YEAR_MARKER not in content:
            raise TemplateError(f"couldn't find replacement marker {YEAR_MARKER!r}")
        if AUTHOR_MARKER not in content:
            raise TemplateError(f"couldn't find replacement marker {AUTHOR_MARKER!r}")
        if "\r" in content:
            raise TemplateError("template has Windows style line endings, Unix style are required")
        if not COPYRIGHT_RE.search(content.replace(YEAR_MARKER, _SAMPLE_YEAR)):
            raise TemplateError(f"template has no 'Copyright {YEAR_MARKER}' line")

        text: str = content.replace(AUTHOR_MARKER, expected_author).strip() + "\n"
        header_skip: HeaderSkip = CATEGORY_HEADER_SKIP.get(category, HeaderSkip.NONE)
        logger.debug("Loaded template %r (header skip: %s)", category, header_skip.value)
        return cls(text=text, category=category, header_skip=header_skip)

    def skip_header(self, content: str) -> int:
        """Return the offset where the boilerplate may start in ``content``."""
        return HEADER_SKIP_STRATEGIES[self.header_skip](content)

    def expected_boilerplate(self, year: str, newline: str = "\n") -> str:
        """Return the boilerplate for ``year`` using ``newline`` as line terminator."""
        text: str = self.text.replace(YEAR_MARKER, year)
        if newline != "\n":
            text = text.replace("\n", newline)
        return text

    def expected_content(self, content: str) -> tuple[str, Span]:
        """Return what ``content`` should look like, and the boilerplate span found in it.

        Args:
            content (str): Actual file content.

        Returns:
            tuple[str, Span]: The expected content and the located span.
        """
        span: Span = find_existing_boilerplate(content)
        if span.found:
            start, stop = span.start, span.stop
            # e.g. a shebang directly followed by the boilerplate comment block
            start += self.skip_header(content[start:stop])
        else:
            start = stop = self.skip_header(content)

        year: str = span.year or current_year()
        head, foot = content[:start], content[stop:]

        newline: str = "\r\n" if "\r\n" in content else "\n"
        boil_expect: str = self.expected_boilerplate(year, newline)

        head = head.strip()
        if head:
            head += newline + newline
        if foot:
            foot = newline + foot.lstrip()

        return head + boil_expect + foot, span

    def validate(self, content: str, path: str, want_patch: bool = False) -> Failure | None:
        """Check ``content`` against this template.

        Files carrying a skip marker or a generated-file marker always pass.

        Args:
            content (str): Actual file content.
            path (str): Path used in diagnostics and as the patch label.
            want_patch (bool): Attach a unified diff to the failure.

        Returns:
            Failure | None: ``None`` when the file is compliant.
        """
        if is_exempt(content):
            logger.debug("%s: skip or generated marker found", path)
            return None

        expect, span = self.expected_content(content)
        if expect == content:
            return None

        reason = (
            FailureReason.INCORRECT_BOILERPLATE if span.found else FailureReason.MISSING_BOILERPLATE
        )
        logger.debug("%s: %s", path, reason.value)
        patch: str | None = unified_patch(path, content, expect) if want_patch else None
        return Failure(reason=reason, patch=patch)
