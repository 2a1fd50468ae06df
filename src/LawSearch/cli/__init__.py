"""CLI package for LawSearch command orchestration."""

from __future__ import annotations

__all__ = ["CommandRunner", "main"]

from LawSearch.cli.runner import CommandRunner
from LawSearch.cli.ui import cli


def main() -> None:
    """Run LawSearch CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
