# boilersuite:header:start
#
#   project      : Boilersuite
#   file         : model.py
#   file_relpath : src/boilersuite/config/model.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 The Boilersuite Authors
#
# boilersuite:header:end

"""Immutable runtime configuration.

`Config` is built from defaults, then from a TOML source (if any) via
`Config.from_toml_dict`, and finally from CLI overrides via
`Config.with_overrides`. Each step returns a new frozen instance.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

from boilersuite.config.keys import Toml
from boilersuite.config.logging import get_logger
from boilersuite.constants import DEFAULT_AUTHOR, DEFAULT_SKIPPED_DIRS

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from boilersuite.config.logging import BoilersuiteLogger

logger: BoilersuiteLogger = get_logger(__name__)


class ConfigError(ValueError):
    """Raised when a configuration value has the wrong shape."""


@dataclass(frozen=True)
class Config:
    """Effective Boilersuite configuration.

    Attributes:
        author (str): Substituted for the author marker in every template.
        skip (tuple[str, ...]): Extra directory names to skip, on top of
            `DEFAULT_SKIPPED_DIRS`.
        patch (bool): Whether failures carry a unified diff.
        template_dir (Path | None): Directory with ``*.boilertmpl`` files used
            instead of the bundled templates.
        source (Path | None): File the configuration was read from, if any.
    """

    author: str = DEFAULT_AUTHOR
    skip: tuple[str, ...] = ()
    patch: bool = False
    template_dir: Path | None = None
    source: Path | None = field(default=None, compare=False)

    @property
    def skipped_dirs(self) -> tuple[str, ...]:
        """All directory names which are never descended into."""
        return DEFAULT_SKIPPED_DIRS + tuple(s for s in self.skip if s not in DEFAULT_SKIPPED_DIRS)

    @classmethod
    def from_toml_dict(cls, data: Mapping[str, Any], *, source: Path | None = None) -> Config:
        """Build a config from a ``[tool.boilersuite]``-style table.

        Relative ``template_dir`` values are anchored at the directory of
        ``source``.

        Args:
            data (Mapping[str, Any]): The table content.
            source (Path | None): File the table was read from.

        Returns:
            Config: The resulting configuration.

        Raises:
            ConfigError: If a value has the wrong type.
        """
        unknown: list[str] = sorted(k for k in data if k not in Toml.ALL_KEYS)
        if unknown:
            logger.warning("Ignoring unknown configuration key(s) in %s: %s", source, ", ".join(unknown))

        cfg = cls(source=source)

        author: Any = data.get(Toml.KEY_AUTHOR)
        if author is not None:
            if not isinstance(author, str) or not author.strip():
                raise ConfigError(f"'{Toml.KEY_AUTHOR}' must be a non-empty string")
            cfg = replace(cfg, author=author)

        skip: Any = data.get(Toml.KEY_SKIP)
        if skip is not None:
            if isinstance(skip, str):
                skip = skip.split()
            if not isinstance(skip, list) or not all(isinstance(s, str) for s in skip):
                raise ConfigError(f"'{Toml.KEY_SKIP}' must be a list of strings")
            cfg = replace(cfg, skip=tuple(skip))

        patch: Any = data.get(Toml.KEY_PATCH)
        if patch is not None:
            if not isinstance(patch, bool):
                raise ConfigError(f"'{Toml.KEY_PATCH}' must be a boolean")
            cfg = replace(cfg, patch=patch)

        template_dir: Any = data.get(Toml.KEY_TEMPLATE_DIR)
        if template_dir is not None:
            if not isinstance(template_dir, str):
                raise ConfigError(f"'{Toml.KEY_TEMPLATE_DIR}' must be a string")
            path = Path(template_dir)
            if not path.is_absolute() and source is not None:
                path = source.parent / path
            cfg = replace(cfg, template_dir=path)

        return cfg

    def with_overrides(
        self,
        *,
        author: str | None = None,
        skip: Iterable[str] = (),
        patch: bool | None = None,
        template_dir: Path | None = None,
    ) -> Config:
        """Return a copy with CLI overrides applied.

        ``None`` (or an empty ``skip``) keeps the current value; ``skip``
        entries are appended.
        """
        cfg = self
        if author is not None:
            cfg = replace(cfg, author=author)
        extra: tuple[str, ...] = tuple(skip)
        if extra:
            cfg = replace(cfg, skip=cfg.skip + extra)
        if patch is not None:
            cfg = replace(cfg, patch=patch)
        if template_dir is not None:
            cfg = replace(cfg, template_dir=template_dir)
        return cfg
