"""Console script ``objprinter`` wired with production services."""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the CLI with :func:`~objprinter.composition.build_production`."""
    return cli_main(services_factory=build_production)


__all__ = ["main"]
