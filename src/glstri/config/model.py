# topmark:header:start
#
#   project      : glstri
#   file         : model.py
#   file_relpath : src/glstri/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model for glstri.

Two layers, as for every run-time setting in glstri:
    - `MutableConfig`: a builder with tri-state fields (``None`` means "not set")
      that merges defaults, config files and CLI arguments, last wins.
    - `Config`: the frozen snapshot passed explicitly to every component that
      needs it. Nothing in glstri reads settings from global state.

TOML mapping (``glstri.toml`` or ``[tool.glstri]`` in ``pyproject.toml``)::

    warnings = true
    silence = false
    declaration_type = "static const char*"
    indent = "\\t"

The variable name is deliberately not configurable from files: it belongs to
one source file, not to a project.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from glstri.config.io import (
    ConfigError,
    TomlTable,
    discover_config_file,
    extract_glstri_table,
    get_bool_value_or_none,
    get_string_value_or_none,
    load_toml_dict,
)
from glstri.config.logging import get_logger
from glstri.constants import DEFAULT_DECLARATION_TYPE, DEFAULT_INDENT

# Generic mapping accepted by apply_cli_args (CLI parameters or plain dicts in tests).
ArgsLike = Mapping[str, Any]

logger = get_logger(__name__)

TOML_KEYS: frozenset[str] = frozenset({"warnings", "silence", "declaration_type", "indent"})

_NON_IDENTIFIER = re.compile(r"\W", re.ASCII)


def variable_name_from_path(path: Path | str) -> str:
    """Derive a C identifier from a source file name.

    The base name loses its last extension and every character that cannot
    appear in an identifier becomes ``_``: ``shaders/blur.frag.glsl`` gives
    ``blur_frag``.
    """
    name = _NON_IDENTIFIER.sub("_", Path(path).stem)
    if not name or name[0].isdigit():
        name = f"_{name}"
    return name


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable run-time configuration.

    Attributes:
        variable (str | None): Declaration name override; None derives it from the
            source file name.
        warnings (bool): Print warnings (``WARNING: ...``) to stderr.
        silence (bool): Suppress regular program output; warnings still follow
            ``warnings``.
        declaration_type (str): Type written in front of a new declaration.
        indent (str): Indentation of each literal fragment.
        check_only (bool): Compute the outcome but never write the target.
        config_files (tuple[str, ...]): Config sources merged into this snapshot,
            in order (for diagnostics).
    """

    variable: str | None = None
    warnings: bool = False
    silence: bool = False
    declaration_type: str = DEFAULT_DECLARATION_TYPE
    indent: str = DEFAULT_INDENT
    check_only: bool = False
    config_files: tuple[str, ...] = ()

    def variable_for(self, source: Path | str) -> str:
        """Return the declaration name to use for ``source``."""
        return self.variable or variable_name_from_path(source)

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            variable=self.variable,
            warnings=self.warnings,
            silence=self.silence,
            declaration_type=self.declaration_type,
            indent=self.indent,
            check_only=self.check_only,
            config_files=list(self.config_files),
        )


@dataclass
class MutableConfig:
    """Mutable configuration draft used while merging sources.

    Every setting is tri-state so that a later source only overrides what it
    actually sets.
    """

    variable: str | None = None
    warnings: bool | None = None
    silence: bool | None = None
    declaration_type: str | None = None
    indent: str | None = None
    check_only: bool | None = None
    config_files: list[str] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Resolve unset fields to their defaults and return a frozen `Config`.

        Raises:
            ConfigError: If the declaration type is blank or the indent holds
                anything but spaces and tabs.
        """
        declaration_type = (
            self.declaration_type.strip()
            if self.declaration_type is not None
            else DEFAULT_DECLARATION_TYPE
        )
        if not declaration_type:
            raise ConfigError("'declaration_type' must not be empty")
        indent = self.indent if self.indent is not None else DEFAULT_INDENT
        if indent.strip(" \t"):
            raise ConfigError(f"'indent' may only contain spaces and tabs, got {indent!r}")

        return Config(
            variable=self.variable or None,
            warnings=bool(self.warnings),
            silence=bool(self.silence),
            declaration_type=declaration_type,
            indent=indent,
            check_only=bool(self.check_only),
            config_files=tuple(self.config_files),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a draft holding the built-in defaults."""
        return cls(
            warnings=False,
            silence=False,
            declaration_type=DEFAULT_DECLARATION_TYPE,
            indent=DEFAULT_INDENT,
            check_only=False,
        )

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, config_file: Path | None = None) -> MutableConfig:
        """Build a draft from a glstri TOML table.

        Unknown keys are logged and ignored.

        Raises:
            ConfigError: If a known key has the wrong value type.
        """
        for key in sorted(set(data) - TOML_KEYS):
            logger.warning("Ignoring unknown config key '%s' in %s", key, config_file or "<dict>")
        draft = cls(
            warnings=get_bool_value_or_none(data, "warnings", path=config_file),
            silence=get_bool_value_or_none(data, "silence", path=config_file),
            declaration_type=get_string_value_or_none(data, "declaration_type", path=config_file),
            indent=get_string_value_or_none(data, "indent", path=config_file),
        )
        if config_file is not None:
            draft.config_files = [str(config_file)]
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load a draft from ``glstri.toml`` or the ``[tool.glstri]`` table of ``pyproject.toml``.

        Returns:
            MutableConfig | None: The draft, or None when a ``pyproject.toml`` has
            no glstri table.

        Raises:
            ConfigError: If the file is unreadable or malformed.
        """
        logger.debug("Loading config from %s", path)
        table = extract_glstri_table(path, load_toml_dict(path))
        if table is None:
            return None
        return cls.from_toml_dict(table, config_file=path)

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where the fields set in ``other`` override this draft."""

        def pick(mine: Any, theirs: Any) -> Any:
            return theirs if theirs is not None else mine

        return MutableConfig(
            variable=pick(self.variable, other.variable),
            warnings=pick(self.warnings, other.warnings),
            silence=pick(self.silence, other.silence),
            declaration_type=pick(self.declaration_type, other.declaration_type),
            indent=pick(self.indent, other.indent),
            check_only=pick(self.check_only, other.check_only),
            config_files=self.config_files + other.config_files,
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Override fields from a parsed arguments mapping.

        Flags only override when they are set: an absent ``-w`` leaves a
        ``warnings = true`` from a config file in place.

        Args:
            args (ArgsLike): Parsed arguments (CLI parameters or a plain dict).

        Returns:
            MutableConfig: ``self``, updated.
        """
        logger.debug("Applying CLI arguments: %s", args)
        self.config_files.append("<CLI overrides>")
        if args.get("variable"):
            self.variable = args["variable"]
        for flag in ("warnings", "silence", "check_only"):
            if args.get(flag):
                setattr(self, flag, True)
        if args.get("declaration_type") is not None:
            self.declaration_type = args["declaration_type"]
        if args.get("indent") is not None:
            self.indent = args["indent"]
        return self

    @classmethod
    def load_merged(
        cls,
        *,
        search_dir: Path | None,
        extra_files: list[Path] | tuple[Path, ...] = (),
    ) -> MutableConfig:
        """Merge defaults, the discovered project file and explicit config files.

        Args:
            search_dir (Path | None): Directory searched for ``glstri.toml`` /
                ``pyproject.toml``; None skips discovery (``--no-config``).
            extra_files (list[Path] | tuple[Path, ...]): Explicit config files,
                applied in order after the discovered one.

        Returns:
            MutableConfig: The merged draft, ready for CLI overrides.
        """
        draft = cls.from_defaults()
        if search_dir is not None:
            found = discover_config_file(search_dir)
            if found is not None:
                path, table = found
                logger.debug("Loading config from %s", path)
                draft = draft.merge_with(cls.from_toml_dict(table, config_file=path))

        for path in extra_files:
            layer = cls.from_toml_file(path)
            if layer is None:
                logger.warning("No [tool.glstri] table in %s; ignored", path)
                continue
            draft = draft.merge_with(layer)
        return draft
