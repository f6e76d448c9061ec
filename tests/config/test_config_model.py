# boilersuite:header:start
#
#   project      : Boilersuite
#   file         : test_config_model.py
#   file_relpath : tests/config/test_config_model.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 The Boilersuite Authors
#
# boilersuite:header:end

"""Config construction from TOML tables and CLI overrides."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from boilersuite.config import Config, ConfigError
from boilersuite.constants import DEFAULT_AUTHOR, DEFAULT_SKIPPED_DIRS


def test_defaults() -> None:
    """Without any source the defaults apply."""
    cfg = Config()
    assert cfg.author == DEFAULT_AUTHOR
    assert cfg.skip == ()
    assert cfg.patch is False
    assert cfg.template_dir is None
    assert cfg.skipped_dirs == DEFAULT_SKIPPED_DIRS


def test_from_toml_dict(tmp_path: Path) -> None:
    """All known keys are read; a relative template dir is anchored at the source."""
    source: Path = tmp_path / "boilersuite.toml"
    cfg = Config.from_toml_dict(
        {"author": "ACME", "skip": ["testdata"], "patch": True, "template_dir": "tmpl"},
        source=source,
    )
    assert cfg.author == "ACME"
    assert cfg.skip == ("testdata",)
    assert cfg.patch is True
    assert cfg.template_dir == tmp_path / "tmpl"
    assert cfg.source == source
    assert cfg.skipped_dirs == (*DEFAULT_SKIPPED_DIRS, "testdata")


def test_skip_accepts_space_separated_string() -> None:
    """``skip`` may be written like the command line flag."""
    cfg = Config.from_toml_dict({"skip": "fixtures  testdata"})
    assert cfg.skip == ("fixtures", "testdata")


def test_skipped_dirs_are_not_duplicated() -> None:
    """Extra entries already in the default list are not repeated."""
    cfg = Config(skip=("vendor", "testdata"))
    assert cfg.skipped_dirs.count("vendor") == 1
    assert cfg.skipped_dirs[-1] == "testdata"


def test_absolute_template_dir_kept(tmp_path: Path) -> None:
    """Absolute template dirs are used as given."""
    cfg = Config.from_toml_dict({"template_dir": str(tmp_path)}, source=Path("/elsewhere/x.toml"))
    assert cfg.template_dir == tmp_path


@pytest.mark.parametrize(
    "data",
    [
        {"author": 42},
        {"author": "  "},
        {"skip": [1, 2]},
        {"skip": {"a": 1}},
        {"patch": "yes"},
        {"template_dir": ["a"]},
    ],
)
def test_invalid_values(data: dict[str, Any]) -> None:
    """Values of the wrong type are rejected."""
    with pytest.raises(ConfigError):
        Config.from_toml_dict(data)


def test_unknown_keys_warn(caplog: pytest.LogCaptureFixture) -> None:
    """Unknown keys are ignored with a warning."""
    with caplog.at_level("WARNING"):
        cfg = Config.from_toml_dict({"autor": "typo"})
    assert cfg == Config()
    assert "autor" in caplog.text


def test_with_overrides() -> None:
    """CLI values replace file values, except ``skip`` which is appended."""
    base = Config(author="ACME", skip=("testdata",), patch=False)
    cfg = base.with_overrides(author="Other", skip=["fixtures"], patch=True, template_dir=Path("t"))
    assert cfg.author == "Other"
    assert cfg.skip == ("testdata", "fixtures")
    assert cfg.patch is True
    assert cfg.template_dir == Path("t")
    assert base.author == "ACME"


def test_with_overrides_none_keeps_values() -> None:
    """Unset overrides keep the current configuration."""
    base = Config(author="ACME", patch=True)
    assert base.with_overrides() == base
