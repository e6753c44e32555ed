# topmark:header:start
#
#   project      : glstri
#   file         : __init__.py
#   file_relpath : src/glstri/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""glstri CLI package.

The console script entry point is defined in ``pyproject.toml`` as::

    [project.scripts]
    glstri = "glstri.cli.main:cli"
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main at module import time
