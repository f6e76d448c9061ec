# boilersuite:header:start
#
#   project      : Boilersuite
#   file         : test_runner.py
#   file_relpath : tests/test_runner.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 The Boilersuite Authors
#
# boilersuite:header:end

"""Validating files on disk."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from boilersuite.core.outcomes import FailureReason
from boilersuite.core.template import Template
from boilersuite.runner import FileResult, read_content, validate_file, validate_files
from boilersuite.templates.registry import TemplateMap

GOOD = "#header\n#Copyright 2000 by Unittest\n#footer\n\nfoo\n"


@pytest.fixture
def template_map(sh_template: Template) -> TemplateMap:
    """A map holding only the ``sh`` template."""
    return TemplateMap(sh=sh_template)


def test_read_content_keeps_crlf(write_file: Callable[[str, str], Path]) -> None:
    """Line endings are not translated on read."""
    path: Path = write_file("a.sh", "foo\r\n")
    assert read_content(path) == "foo\r\n"


def test_validate_file_ok(write_file: Callable[[str, str], Path], sh_template: Template) -> None:
    """A compliant file yields a result without failure."""
    path = write_file("a.sh", GOOD)
    result: FileResult = validate_file(path, sh_template)
    assert result.ok
    assert result.path == path


def test_validate_file_missing(
    write_file: Callable[[str, str], Path], sh_template: Template
) -> None:
    """A file without boilerplate fails with a patch when requested."""
    path = write_file("a.sh", "foo\n")
    result = validate_file(path, sh_template, want_patch=True)
    assert not result.ok
    assert result.failure is not None
    assert result.failure.reason is FailureReason.MISSING_BOILERPLATE
    assert result.failure.patch is not None
    assert result.failure.patch.startswith(f"--- {path}\n+++ expected\n")


def test_validate_file_not_utf8(tmp_path: Path, sh_template: Template) -> None:
    """Undecodable content is reported as a read failure instead of raising."""
    path: Path = tmp_path / "bin.sh"
    path.write_bytes(b"\xff\xfe\x00")
    result = validate_file(path, sh_template)
    assert result.failure is not None
    assert result.failure.reason is FailureReason.READ_ERROR
    assert result.failure.message.startswith("failed to read: ")


def test_validate_file_unreadable(tmp_path: Path, sh_template: Template) -> None:
    """A path that cannot be opened is reported as a read failure."""
    result = validate_file(tmp_path / "gone.sh", sh_template)
    assert result.failure is not None
    assert result.failure.reason is FailureReason.READ_ERROR
    assert isinstance(result.failure.error, OSError)


def test_validate_files_keeps_order(
    write_file: Callable[[str, str], Path], template_map: TemplateMap
) -> None:
    """Every file gets a verdict; one failure does not stop the others."""
    bad = write_file("a.sh", "foo\n")
    good = write_file("b.sh", GOOD)
    results = validate_files([bad, good], template_map)
    assert [r.path for r in results] == [bad, good]
    assert [r.ok for r in results] == [False, True]


def test_validate_files_without_template(
    write_file: Callable[[str, str], Path], template_map: TemplateMap
) -> None:
    """Passing a path with no template is a programming error."""
    path = write_file("main.go", "package main\n")
    with pytest.raises(LookupError):
        validate_files([path], template_map)
