# boilersuite:header:start
#
#   project      : Boilersuite
#   file         : locator.py
#   file_relpath : src/boilersuite/core/locator.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 The Boilersuite Authors
#
# boilersuite:header:end

"""Locate an existing boilerplate block inside file content.

A boilerplate block is a comment block (``/* ... */``, ``//`` or ``#`` style)
which contains a copyright line. The scan walks the content line by line,
driven by a small state machine:

* `BlockState` enumerates where the scanner currently is.
* `step` is the pure per-line transition function.
* `find_existing_boilerplate` runs the scan and returns a `Span`.

Offsets are measured against the untrimmed lines, so ``content[start:stop]``
is exactly the detected block including its line terminators.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Final

from boilersuite.config.logging import get_logger
from boilersuite.core.patterns import COPYRIGHT_RE

if TYPE_CHECKING:
    from collections.abc import Iterator

    from boilersuite.config.logging import BoilersuiteLogger

logger: BoilersuiteLogger = get_logger(__name__)

# Lines including their "\n"; a final unterminated line is yielded as-is
_LINE_RE: Final[re.Pattern[str]] = re.compile(r"[^\n]*\n|[^\n]+")


class BlockState(Enum):
    """Scanner position relative to comment blocks."""

    OUTSIDE = "outside"
    IN_BLOCK_STAR = "/*"
    IN_BLOCK_SLASH = "//"
    IN_BLOCK_HASH = "#"


class Transition(Enum):
    """Effect of a single line on the current block.

    Attributes:
        NONE: The line does not open or close a block.
        OPEN: A block starts on this line.
        OPEN_AND_CLOSE: A ``/* ... */`` block starts and ends on this line.
        CLOSE_BEFORE: The block ended on the previous line; this line is not part of it.
        CLOSE_AFTER: The block ends with this line (inclusive).
    """

    NONE = "none"
    OPEN = "open"
    OPEN_AND_CLOSE = "open_and_close"
    CLOSE_BEFORE = "close_before"
    CLOSE_AFTER = "close_after"


_LINE_LEADS: Final[dict[BlockState, str]] = {
    BlockState.IN_BLOCK_SLASH: "//",
    BlockState.IN_BLOCK_HASH: "#",
}


@dataclass(frozen=True)
class Span:
    """Byte range of a detected boilerplate block and the year found inside it."""

    start: int
    stop: int
    year: str = ""

    @property
    def found(self) -> bool:
        """Whether this span denotes an actual block."""
        return self.start >= 0


NOT_FOUND: Final[Span] = Span(start=-1, stop=-1, year="")


def step(state: BlockState, line: str) -> tuple[BlockState, Transition]:
    """Compute the next scanner state for one trimmed line.

    Args:
        state (BlockState): Current scanner state.
        line (str): The line with surrounding whitespace removed.

    Returns:
        tuple[BlockState, Transition]: The next state and what happened to the block.
    """
    if state is BlockState.OUTSIDE:
        if line.startswith("/*"):
            if len(line) >= 4 and line.endswith("*/"):
                return BlockState.OUTSIDE, Transition.OPEN_AND_CLOSE
            return BlockState.IN_BLOCK_STAR, Transition.OPEN
        if line.startswith("//"):
            return BlockState.IN_BLOCK_SLASH, Transition.OPEN
        if line.startswith("#"):
            return BlockState.IN_BLOCK_HASH, Transition.OPEN
        return BlockState.OUTSIDE, Transition.NONE

    if state is BlockState.IN_BLOCK_STAR:
        if line.endswith("*/"):
            return BlockState.OUTSIDE, Transition.CLOSE_AFTER
        return state, Transition.NONE

    if line.startswith(_LINE_LEADS[state]):
        return state, Transition.NONE
    # The closing line is not re-examined as the opener of another block.
    return BlockState.OUTSIDE, Transition.CLOSE_BEFORE


def iter_lines(content: str) -> Iterator[str]:
    """Yield the lines of ``content`` with their ``\\n`` terminators kept."""
    for match in _LINE_RE.finditer(content):
        yield match.group(0)


def find_existing_boilerplate(content: str) -> Span:
    """Return the span of the first comment block containing a copyright line.

    Comment blocks without a copyright line (a shebang, unrelated notices) are
    skipped over and end up in the head of the file.

    Args:
        content (str): Raw file content.

    Returns:
        Span: The detected block, or `NOT_FOUND`.
    """
    state: BlockState = BlockState.OUTSIDE
    is_boiler = False
    start = -1
    year = ""
    pos = 0

    for line in iter_lines(content):
        stripped: str = line.strip()

        match: re.Match[str] | None = COPYRIGHT_RE.search(stripped)
        if match is not None:
            is_boiler = True
            year = match.group(1)

        state, transition = step(state, stripped)
        logger.trace("offset %d: %s -> %s", pos, transition.value, state.value)

        if transition is Transition.OPEN:
            start = pos
        elif transition is Transition.OPEN_AND_CLOSE:
            if is_boiler:
                return Span(start=pos, stop=pos + len(line), year=year)
            start = -1
            is_boiler = False
        elif transition is Transition.CLOSE_BEFORE:
            if start >= 0 and is_boiler:
                return Span(start=start, stop=pos, year=year)
            start = -1
            is_boiler = False
        elif transition is Transition.CLOSE_AFTER:
            if start >= 0 and is_boiler:
                return Span(start=start, stop=pos + len(line), year=year)
            start = -1
            is_boiler = False

        pos += len(line)

    # Boilerplate reaching the end of the file
    if state is not BlockState.OUTSIDE and start >= 0 and is_boiler:
        return Span(start=start, stop=pos, year=year)

    return NOT_FOUND
