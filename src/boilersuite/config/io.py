# boilersuite:header:start
#
#   project      : Boilersuite
#   file         : io.py
#   file_relpath : src/boilersuite/config/io.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 The Boilersuite Authors
#
# boilersuite:header:end

"""Load Boilersuite configuration from TOML sources.

Sources, in order of discovery:
- an explicit file given on the command line;
- ``boilersuite.toml`` in the target directory;
- ``[tool.boilersuite]`` in ``pyproject.toml`` in the target directory.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from boilersuite.config.keys import Toml
from boilersuite.config.logging import get_logger
from boilersuite.config.model import Config, ConfigError
from boilersuite.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME

if TYPE_CHECKING:
    from boilersuite.config.logging import BoilersuiteLogger

logger: BoilersuiteLogger = get_logger(__name__)


def load_toml_dict(path: Path, *, strict: bool = False) -> dict[str, Any]:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document.
        strict: Raise instead of logging when the file cannot be read or parsed.

    Returns:
        The parsed TOML content.

    Raises:
        ConfigError: In strict mode, if the file cannot be read or parsed.

    Notes:
        - Unless strict, errors are logged and an empty dict is returned.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("dict[str, Any]", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        if strict:
            raise ConfigError(f"cannot read {path}: {e}") from e
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        if strict:
            raise ConfigError(f"invalid TOML in {path}: {e}") from e
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_tool_table(data: dict[str, Any], *, path: Path) -> dict[str, Any] | None:
    """Return the Boilersuite table of a parsed TOML document.

    For ``pyproject.toml`` this is ``[tool.boilersuite]``; any other file is
    taken as a whole.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    tool: Any = data.get(Toml.SECTION_TOOL, {})
    if not isinstance(tool, dict):
        return None
    table: Any = tool.get(Toml.SECTION_BOILERSUITE)
    return cast("dict[str, Any]", table) if isinstance(table, dict) else None


def discover_config_file(base: Path) -> Path | None:
    """Find a configuration file for the target ``base`` (a file or a directory)."""
    root: Path = base if base.is_dir() else base.parent

    candidate: Path = root / CONFIG_FILE_NAME
    if candidate.is_file():
        return candidate

    pyproject: Path = root / PYPROJECT_FILE_NAME
    if pyproject.is_file() and extract_tool_table(load_toml_dict(pyproject), path=pyproject):
        return pyproject

    return None


def load_config(*, base: Path, config_path: Path | None = None) -> Config:
    """Return the configuration for a run over ``base``.

    Args:
        base: Target file or directory of the run.
        config_path: Explicit configuration file; disables discovery.

    Returns:
        The configuration, or the defaults if no source was found.

    Raises:
        ConfigError: If the source cannot be read or parsed, or holds values
            of the wrong type.
    """
    path: Path | None = config_path or discover_config_file(base)
    if path is None:
        logger.debug("No configuration file found for %s; using defaults", base)
        return Config()

    table: dict[str, Any] | None = extract_tool_table(
        load_toml_dict(path, strict=True), path=path
    )
    if table is None:
        logger.warning("No [%s.%s] table in %s", Toml.SECTION_TOOL, Toml.SECTION_BOILERSUITE, path)
        return Config(source=path)

    logger.info("Using configuration from %s", path)
    return Config.from_toml_dict(table, source=path)
