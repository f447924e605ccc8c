"""Exit codes used by the CLI error paths.

Contents:
    * :class:`ExitCode` - IntEnum of every code the commands raise.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit codes, following errno and sysexits.h where one fits.

    * 22: EINVAL, a printer option or selector was rejected
    * 78: EX_CONFIG, the ``[objprinter]`` section is invalid

    Example:
        >>> int(ExitCode.CONFIG_ERROR)
        78
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
