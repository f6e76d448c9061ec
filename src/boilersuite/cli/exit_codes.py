# boilersuite:header:start
#
#   project      : Boilersuite
#   file         : exit_codes.py
#   file_relpath : src/boilersuite/cli/exit_codes.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 The Boilersuite Authors
#
# boilersuite:header:end

"""Exit codes for the Boilersuite CLI.

Boilersuite aligns with the BSD `sysexits` convention where practical, so that
other tooling can interpret failures consistently. A run where at least one
file failed validation exits with `ExitCode.FAILURE`.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Boilersuite CLI.

    Attributes:
        SUCCESS: All files validated (or there was nothing to validate).
        FAILURE: At least one file failed validation.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        FILE_NOT_FOUND: Target path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        CONFIG_ERROR: Invalid template or configuration. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    CONFIG_ERROR = 78  # EX_CONFIG
