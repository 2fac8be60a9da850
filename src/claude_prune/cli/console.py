"""Shared console utilities for CLI commands."""

from __future__ import annotations

import sys

import typer
from rich.console import Console

# Shared console instance for all CLI commands
console = Console()


def error(msg: str) -> None:
    """Print an error message in red."""
    console.print(f"[red]{msg}[/red]")


def success(msg: str) -> None:
    """Print a success message in green."""
    console.print(f"[green]{msg}[/green]")


def info(msg: str) -> None:
    """Print an info message in cyan."""
    console.print(f"[cyan]{msg}[/cyan]")


def dim(msg: str) -> None:
    """Print a dimmed message."""
    console.print(f"[dim]{msg}[/dim]")


def is_interactive() -> bool:
    """True when stdin is attached to a terminal."""
    return sys.stdin is not None and sys.stdin.isatty()


def confirm_or_cancel(prompt: str, force: bool, default: bool = False) -> bool:
    """Return True if the user confirms (or force is set). Print cancel on decline."""
    if force:
        return True
    confirmed = typer.confirm(prompt, default=default)
    if not confirmed:
        dim("Cancelled")
    return confirmed
