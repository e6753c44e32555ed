# topmark:header:start
#
#   project      : glstri
#   file         : __init__.py
#   file_relpath : src/glstri/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""glstri package.

glstri embeds a text file (typically a shader) into a C or C++ source file as a
string-literal declaration. When the target already holds a previous embedding,
only the declaration is regenerated; every byte around it is left untouched.
"""

from __future__ import annotations
