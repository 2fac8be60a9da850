"""Centralized logging configuration for claude-prune.

The CLI calls configure_logging() once before doing any work. Output goes to
stderr so it never mixes with command output.

Logging Levels:
- DEBUG: Line counts, cutoff positions, config resolution
- INFO: Backups created and restored
- WARNING: Unexpected transcript content that was passed through as-is
- ERROR: Failures that abort a command
"""

import logging
import os
import sys

ENV_VAR = "CLAUDE_PRUNE_LOG_LEVEL"
DEFAULT_LEVEL = "WARNING"
LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class ComponentFormatter(logging.Formatter):
    """Formatter that extracts component name from logger path.

    - claude_prune.sessions.prune -> sessions
    - claude_prune.config.loader -> config
    """

    def format(self, record: logging.LogRecord) -> str:
        parts = record.name.split(".")
        if len(parts) >= 2 and parts[0] == "claude_prune":
            record.component = parts[1]
        else:
            record.component = parts[0]
        return super().format(record)


def resolve_level(level: str | None = None) -> str:
    """Resolve a level name from the argument or CLAUDE_PRUNE_LOG_LEVEL."""
    if level is None:
        level = os.environ.get(ENV_VAR, DEFAULT_LEVEL)
    level = level.upper()
    if level not in LEVELS:
        return DEFAULT_LEVEL
    return level


def configure_logging(level: str | None = None, use_rich: bool = False) -> None:
    """Configure logging for claude-prune.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
            If None, uses CLAUDE_PRUNE_LOG_LEVEL env var or WARNING.
        use_rich: Use Rich handler for colorful output.
    """
    log_level = getattr(logging, resolve_level(level))

    console_handler: logging.Handler
    if use_rich:
        from rich.console import Console
        from rich.logging import RichHandler

        console_handler = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=False,
            show_path=False,
            show_time=True,
            markup=False,
        )
        console_handler.setFormatter(ComponentFormatter("%(component)s | %(message)s"))
    else:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                datefmt="%H:%M:%S",
            )
        )

    logging.basicConfig(
        level=log_level,
        handlers=[console_handler],
        force=True,
    )
