# topmark:header:start
#
#   project      : glstri
#   file         : constants.py
#   file_relpath : src/glstri/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""glstri constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    GLSTRI_VERSION: str = get_version("glstri")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    GLSTRI_VERSION = "0.0.0"

# Name of the project-local config file and the pyproject.toml table:
GLSTRI_TOML_NAME: str = "glstri.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_TABLE: str = "glstri"

LOG_LEVEL_ENV: str = "GLSTRI_LOG_LEVEL"

DEFAULT_DECLARATION_TYPE: str = "const char*"
DEFAULT_INDENT: str = "    "

# Target files must look like C or C++ sources/headers.
TARGET_SUFFIXES: frozenset[str] = frozenset(
    {".c", ".h", ".cc", ".cpp", ".cxx", ".hh", ".hpp", ".hxx"}
)

NO_DIFFERENCE_MESSAGE: str = "Found no difference between shader code!"
CHANGE_ARROW: str = "--->"
