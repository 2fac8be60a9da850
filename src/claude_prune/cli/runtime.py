"""Shared runtime bootstrap helpers for CLI entrypoints."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.markup import escape

from claude_prune.cli.console import error
from claude_prune.config import ConfigError, PruneConfig, load_config
from claude_prune.logging import configure_logging


def bootstrap_runtime(config_path: Path | None, verbose: bool) -> PruneConfig:
    """Load settings and configure logging for a command.

    Exits with status 1 when the settings file is missing or invalid.
    """
    try:
        config = load_config(config_path)
    except (FileNotFoundError, ConfigError) as e:
        configure_logging(level="DEBUG" if verbose else None, use_rich=True)
        error(escape(str(e)))
        raise typer.Exit(1) from None

    configure_logging(
        level="DEBUG" if verbose else config.log_level, use_rich=True
    )
    return config
