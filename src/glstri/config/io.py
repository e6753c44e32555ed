# topmark:header:start
#
#   project      : glstri
#   file         : io.py
#   file_relpath : src/glstri/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load glstri configuration tables from TOML files.

Parsing is done with `tomlkit` and returned as plain ``dict`` structures. The
typed getters validate value shapes so that a wrong type in a config file is
reported instead of silently changing behavior.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from glstri.config.logging import get_logger
from glstri.constants import GLSTRI_TOML_NAME, PYPROJECT_TOML_NAME, PYPROJECT_TOOL_TABLE

logger = get_logger(__name__)

TomlTable = dict[str, Any]


class ConfigError(ValueError):
    """A configuration file is unreadable, malformed, or holds a wrongly typed value."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise ConfigError(f"cannot read config file: {e.strerror or e}", path=path) from e
    except TomlkitParseError as e:
        raise ConfigError(f"invalid TOML: {e}", path=path) from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_glstri_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the glstri table of a parsed config file.

    ``pyproject.toml`` keeps the settings under ``[tool.glstri]``; any other file
    is a glstri config file at its top level.

    Returns:
        TomlTable | None: The table, or None if a ``pyproject.toml`` has no
        ``[tool.glstri]`` section.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: Any = data.get("tool", {})
    section: Any = tool.get(PYPROJECT_TOOL_TABLE) if isinstance(tool, dict) else None
    if not isinstance(section, dict):
        logger.debug("No [tool.%s] table in %s", PYPROJECT_TOOL_TABLE, path)
        return None
    return cast("TomlTable", section)


def discover_config_file(start: Path) -> tuple[Path, TomlTable] | None:
    """Return the project config file in ``start`` with its glstri table, if any.

    ``glstri.toml`` wins over ``pyproject.toml``; a ``pyproject.toml`` only counts
    when it has a ``[tool.glstri]`` table. The file is parsed once here and the
    table handed back, so callers do not read it again.

    Raises:
        ConfigError: If ``glstri.toml`` is unreadable or malformed.
    """
    candidate = start / GLSTRI_TOML_NAME
    if candidate.is_file():
        return candidate, load_toml_dict(candidate)
    candidate = start / PYPROJECT_TOML_NAME
    if candidate.is_file():
        try:
            data = load_toml_dict(candidate)
        except ConfigError as e:
            # An unrelated, broken pyproject.toml must not stop an embed.
            logger.warning("Ignoring %s: %s", candidate, e)
            return None
        table = extract_glstri_table(candidate, data)
        if table is not None:
            return candidate, table
    return None


def get_bool_value_or_none(table: TomlTable, key: str, *, path: Path | None = None) -> bool | None:
    """Extract an optional boolean.

    Raises:
        ConfigError: If the key is present but not a boolean.
    """
    value: Any = table.get(key)
    if value is None or isinstance(value, bool):
        return value
    raise ConfigError(f"'{key}' must be a boolean, got {value!r}", path=path)


def get_string_value_or_none(
    table: TomlTable, key: str, *, path: Path | None = None
) -> str | None:
    """Extract an optional string.

    Raises:
        ConfigError: If the key is present but not a string.
    """
    value: Any = table.get(key)
    if value is None or isinstance(value, str):
        return value
    raise ConfigError(f"'{key}' must be a string, got {value!r}", path=path)
