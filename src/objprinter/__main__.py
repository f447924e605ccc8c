"""``python -m objprinter`` runs the same console script as ``objprinter``."""

from __future__ import annotations

from .entry import main

if __name__ == "__main__":
    raise SystemExit(main())
