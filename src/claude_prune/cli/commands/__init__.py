"""CLI command modules."""

from claude_prune.cli.commands import prune, restore

__all__ = [
    "prune",
    "restore",
]
