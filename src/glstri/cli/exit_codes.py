# topmark:header:start
#
#   project      : glstri
#   file         : exit_codes.py
#   file_relpath : src/glstri/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the glstri CLI.

glstri follows the BSD `sysexits` convention where practical. ``WOULD_CHANGE = 2``
is only returned by ``--check`` runs; Click's own usage errors also exit with 2,
so tests assert ``result.exception is None`` to tell the two apart.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for glstri.

    Attributes:
        SUCCESS: The target is up to date or was written.
        FAILURE: Generic failure.
        WOULD_CHANGE: ``--check``: the target would be written.
        USAGE_ERROR: Invalid flags or arguments. Mirrors ``EX_USAGE (64)``.
        FILE_NOT_FOUND: The source does not exist. Mirrors ``EX_NOINPUT (66)``.
        UNSUPPORTED_FILE_TYPE: The target is not a C/C++ file. Mirrors
            ``EX_UNAVAILABLE (69)``.
        IO_ERROR: Reading or writing a file failed. Mirrors ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions. Mirrors ``EX_NOPERM (77)``.
        CONFIG_ERROR: Invalid config file. Mirrors ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # deliberate divergence from sysexits

    USAGE_ERROR = 64  # EX_USAGE
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    UNSUPPORTED_FILE_TYPE = 69  # EX_UNAVAILABLE
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG
