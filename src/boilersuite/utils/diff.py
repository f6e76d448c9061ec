# boilersuite:header:start
#
#   project      : Boilersuite
#   file         : diff.py
#   file_relpath : src/boilersuite/utils/diff.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 The Boilersuite Authors
#
# boilersuite:header:end

"""Unified diff generation and colorized rendering.

`unified_patch` produces the patch attached to a failed validation; the
labels are the checked path on the ``---`` side and ``expected`` on the
``+++`` side, so the output can be fed to ``patch -p0`` style tooling.
`render_patch` formats such a patch for terminal display.
"""

from __future__ import annotations

import difflib
from typing import Final, Sequence

from yachalk import chalk

from boilersuite.config.logging import get_logger
from boilersuite.core.locator import iter_lines

logger = get_logger(__name__)

EXPECTED_LABEL: Final[str] = "expected"
NO_NEWLINE_MARKER: Final[str] = "\\ No newline at end of file\n"


def unified_patch(path: str, have: str, want: str, *, context: int = 3) -> str:
    """Return a unified diff transforming ``have`` into ``want``.

    Line terminators are kept as they are (so CRLF changes show up in the
    patch). A final line without terminator is followed by the usual
    ``\\ No newline at end of file`` marker.

    Args:
        path (str): Label for the original side.
        have (str): Actual content.
        want (str): Expected content.
        context (int): Number of context lines around each hunk.

    Returns:
        str: The patch text, empty if both sides are equal.
    """
    have_lines: list[str] = list(iter_lines(have))
    want_lines: list[str] = list(iter_lines(want))

    out: list[str] = []
    for line in difflib.unified_diff(
        have_lines,
        want_lines,
        fromfile=path,
        tofile=EXPECTED_LABEL,
        n=context,
        lineterm="\n",
    ):
        if line.endswith("\n"):
            out.append(line)
        else:
            out.append(line + "\n")
            out.append(NO_NEWLINE_MARKER)

    logger.trace("patch for %s: %d line(s)", path, len(out))
    return "".join(out)


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch: A unified diff as **either** a sequence of lines **or** a single
            multiline string.
        show_line_numbers: Whether to prefix output with line numbers.

    Returns:
        The formatted, colorized diff preview.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=False)
    else:
        lines = list(patch)

    def process_line(line: str) -> str:
        # Show carriage returns explicitly so CRLF fixes are visible
        content = line.replace("\r", "\\r").replace("\n", "")
        if not content:
            return content
        if content.startswith(("---", "+++")):
            return chalk.bold.white(content)
        match content[0]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.white(content)

    if show_line_numbers:
        return "".join(f"{i:04d}|{process_line(line)}\n" for i, line in enumerate(lines, 1))
    return "".join(f"{process_line(line)}\n" for line in lines)
