# topmark:header:start
#
#   project      : glstri
#   file         : __init__.py
#   file_relpath : src/glstri/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line-oriented text engine behind glstri.

All modules work on binary streams and single-byte text. Leaves first:
``line`` (buffer), ``comments`` (stripper), ``reader`` (normalizing reader),
``render`` (fragments), ``locator`` (declaration / insertion point),
``splice`` (verbatim copies) and ``merge`` (the diff/merge engine).
"""

from __future__ import annotations
