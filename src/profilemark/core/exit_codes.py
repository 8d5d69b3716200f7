# profilemark:header:start
#
#   project      : ProfileMark
#   file         : exit_codes.py
#   file_relpath : src/profilemark/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""Exit codes for the ProfileMark CLI.

ProfileMark aligns with the BSD `sysexits` convention where practical, so that other
tooling can interpret failures consistently. The one deliberate divergence is
`WOULD_CHANGE=2`, which signals a dry run where changes would be made. Click also
uses 2 for usage errors, so tests must assert `result.exception is None` to tell
the two apart.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the ProfileMark CLI.

    Attributes:
        SUCCESS: Successful execution; the profile is (or would stay) configured.
        FAILURE: Generic failure. Prefer a more specific code if available.
        WOULD_CHANGE: Dry run: changes would be made if ``--apply`` were set.
        USAGE_ERROR: Invalid flags or arguments. Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: The profile could not be decoded. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: An input file does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        COMMAND_FAILED: An external command (package manager, vendor installer)
            failed. Mirrors BSD ``EX_UNAVAILABLE (69)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions. Mirrors BSD ``EX_NOPERM (77)``.
        CONFIG_ERROR: Missing, invalid or malformed plan. Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled error (last resort).
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # deliberate divergence from sysexits; see module docstring

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    COMMAND_FAILED = 69  # EX_UNAVAILABLE
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
