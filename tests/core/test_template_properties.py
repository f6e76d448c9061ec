# boilersuite:header:start
#
#   project      : Boilersuite
#   file         : test_template_properties.py
#   file_relpath : tests/core/test_template_properties.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 The Boilersuite Authors
#
# boilersuite:header:end

"""Property-based tests for template validation.

Properties covered:
- the expected content of any file validates cleanly (fixing is idempotent);
- applying the reported patch to a failing file yields its expected content;
- with CRLF content the expected boilerplate uses CRLF throughout.
"""

from __future__ import annotations

import re

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from boilersuite.core.locator import iter_lines
from boilersuite.core.template import Template
from boilersuite.utils.diff import NO_NEWLINE_MARKER

# Fixtures are function-scoped; hypothesis wants module-level data instead.
SH_TEMPLATE: Template = Template.from_source(
    "#header\n#Copyright <<YEAR>> by <<AUTHOR>>\n#footer", "sh", "Unittest"
)
GO_TEMPLATE: Template = Template.from_source(
    "/*\nCopyright <<YEAR>> The <<AUTHOR>> Authors.\n*/\n", "go", "Unittest"
)

_HUNK_RE = re.compile(r"@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@")

# Plain code lines: never a comment, never a marker
code_lines = st.lists(st.from_regex(r"[a-z][a-z ]{0,20}", fullmatch=True), max_size=8)

# Anything built from comment-ish characters, line breaks included
noisy_content = st.text(alphabet="ab #/*!\n\r", max_size=80)


def apply_unified_patch(original: str, patch: str) -> str:
    """Apply a unified diff produced by `unified_patch` to ``original``."""
    src: list[str] = list(iter_lines(original))
    lines: list[str] = list(iter_lines(patch))
    out: list[str] = []
    pos = 0
    prev_tag = ""
    i = 2  # skip the ---/+++ labels
    while i < len(lines):
        match = _HUNK_RE.match(lines[i])
        assert match is not None, lines[i]
        old_start = int(match.group(1))
        old_len = int(match.group(2)) if match.group(2) is not None else 1
        start: int = old_start - 1 if old_len else old_start
        out.extend(src[pos:start])
        pos = start
        i += 1
        while i < len(lines) and not lines[i].startswith("@@"):
            line: str = lines[i]
            i += 1
            if line == NO_NEWLINE_MARKER:
                if prev_tag in (" ", "+"):
                    out[-1] = out[-1].removesuffix("\n")
                continue
            tag, text = line[0], line[1:]
            if tag in (" ", "+"):
                out.append(text)
            if tag in (" ", "-"):
                pos += 1
            prev_tag = tag
    out.extend(src[pos:])
    return "".join(out)


@pytest.mark.hypothesis_slow
@settings(max_examples=100, deadline=None)
@given(body=code_lines, newline=st.sampled_from(["\n", "\r\n"]), shebang=st.booleans())
def test_expected_content_is_idempotent(body: list[str], newline: str, shebang: bool) -> None:
    """Whatever a plain file looks like, its expected content validates cleanly."""
    content: str = "".join(line + newline for line in body)
    if shebang:
        content = "#!/bin/sh" + newline + content
    expect, _ = SH_TEMPLATE.expected_content(content)
    assert SH_TEMPLATE.validate(expect, "x.sh") is None
    assert SH_TEMPLATE.expected_content(expect)[0] == expect


@pytest.mark.hypothesis_slow
@settings(max_examples=200, deadline=None)
@given(content=noisy_content)
def test_patch_turns_content_into_expected(content: str) -> None:
    """The reported patch transforms the file into its expected content."""
    for template in (SH_TEMPLATE, GO_TEMPLATE):
        failure = template.validate(content, "x", True)
        expect, _ = template.expected_content(content)
        if failure is None:
            assert expect == content
            continue
        assert failure.patch is not None
        assert apply_unified_patch(content, failure.patch) == expect


@pytest.mark.hypothesis_slow
@settings(max_examples=100, deadline=None)
@given(
    content=noisy_content,
    marker=st.sampled_from(
        [
            "// +skip_license_check",
            "# +skip_license_check",
            "// Code generated by controller-gen. DO NOT EDIT.",
        ]
    ),
    at_start=st.booleans(),
)
def test_exempt_markers_override_everything(content: str, marker: str, at_start: bool) -> None:
    """A skip or generated marker on its own line makes any content pass."""
    text: str = marker + "\n" + content if at_start else content + "\n" + marker + "\n"
    assert SH_TEMPLATE.validate(text, "x.sh") is None
    assert GO_TEMPLATE.validate(text, "x.go") is None


@pytest.mark.hypothesis_slow
@settings(max_examples=100, deadline=None)
@given(body=code_lines.filter(bool))
def test_crlf_content_gets_crlf_boilerplate(body: list[str]) -> None:
    """Every boilerplate line ends with CRLF when the file uses CRLF."""
    content: str = "".join(line + "\r\n" for line in body)
    expect, span = GO_TEMPLATE.expected_content(content)
    assert not span.found
    boilerplate: str = expect[: expect.index("*/") + 4]
    assert boilerplate.count("\n") == boilerplate.count("\r\n")
    assert boilerplate.endswith("*/\r\n")
