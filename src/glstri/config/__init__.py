# topmark:header:start
#
#   project      : glstri
#   file         : __init__.py
#   file_relpath : src/glstri/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for glstri: frozen `Config`, mutable builder, TOML loading and logging."""

from __future__ import annotations

from glstri.config.io import ConfigError
from glstri.config.model import Config, MutableConfig, variable_name_from_path

__all__ = [
    "Config",
    "ConfigError",
    "MutableConfig",
    "variable_name_from_path",
]
