"""Constants shared by the CLI modules.

Contents:
    * :data:`CLICK_CONTEXT_SETTINGS` - Help flags for every command.
    * :data:`TRACEBACK_SUMMARY_LIMIT` - Traceback length without ``--traceback``.
    * :data:`TRACEBACK_VERBOSE_LIMIT` - Traceback length with ``--traceback``.
"""

from __future__ import annotations

from typing import Final

CLICK_CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}

#: Characters printed for an error summary.
TRACEBACK_SUMMARY_LIMIT: Final[int] = 500

#: Characters printed when full tracebacks are requested.
TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
]
