# topmark:header:start
#
#   project      : glstri
#   file         : __main__.py
#   file_relpath : src/glstri/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running glstri via ``python -m glstri``.

Delegates to :func:`glstri.cli.main.cli`, the same entry point as the
``glstri`` console script.

Examples:
    Embed a shader::

        python -m glstri shaders/blur.frag src/shaders.h
"""

from __future__ import annotations

from glstri.cli.main import cli

if __name__ == "__main__":
    cli()
