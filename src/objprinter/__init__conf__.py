"""Static package metadata surfaced to CLI commands and documentation.

Values mirror ``pyproject.toml`` so the CLI can report them without
touching the installed distribution metadata.

Contents:
    * Module-level metadata constants (``name``, ``version``, ...).
    * ``LAYEREDCONF_*`` identifiers used for configuration file discovery.
    * :func:`print_info` - Render the metadata block for ``objprinter info``.
"""

from __future__ import annotations

#: Distribution name as published.
name = "objprinter"
#: One-line summary used as CLI help text.
title = "Render arbitrary object graphs as indented, configurable text"
#: Current release version.
version = "1.0.0"
#: Author names.
author = "objprinter maintainers"
#: Console script name.
shell_command = "objprinter"

#: Vendor directory used on macOS/Windows configuration paths.
LAYEREDCONF_VENDOR = "objprinter"
#: Application directory used on macOS/Windows configuration paths.
LAYEREDCONF_APP = "objprinter"
#: Slug used for XDG configuration paths on Linux.
LAYEREDCONF_SLUG = "objprinter"


def print_info() -> None:
    """Print the summarised metadata block.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for objprinter:
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
