"""Prune command."""

import asyncio
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from claude_prune.cli.console import (
    confirm_or_cancel,
    console,
    dim,
    error,
    info,
    is_interactive,
    success,
)


async def _prune_transcript(
    transcript: Path,
    backup_dir: Path,
    session_id: str,
    keep: int,
    dry_run: bool,
) -> None:
    from claude_prune.sessions import (
        create_backup,
        prune_session_lines,
        read_transcript_lines,
        write_transcript_lines,
    )

    with console.status(f"Reading {transcript}"):
        lines = await read_transcript_lines(transcript)
        result = prune_session_lines(lines, keep)

    success(
        f"Scanned {len(lines)} lines "
        f"({result.kept_count} kept, {result.dropped_count} dropped) - "
        f"{result.assistant_message_count} assistant messages found"
    )

    if dry_run:
        info("Dry-run only: no files written.")
        return

    backup = create_backup(transcript, backup_dir, session_id)
    await write_transcript_lines(transcript, result.kept_lines)

    console.print(f"[bold green]Done:[/bold green] {transcript}")
    dim(f"Backup at {backup}")


def run_prune(
    session_id: str,
    keep: int,
    dry_run: bool = False,
    force: bool = False,
    config_path: Path | None = None,
    verbose: bool = False,
) -> None:
    """Prune a session transcript in the current project."""
    from claude_prune.cli.runtime import bootstrap_runtime
    from claude_prune.config import get_backup_dir, get_transcript_path

    config = bootstrap_runtime(config_path, verbose)
    transcript = get_transcript_path(session_id)

    if not transcript.exists():
        error(f"No transcript at {transcript}")
        raise typer.Exit(1)

    if not dry_run and config.confirm and is_interactive():
        if not confirm_or_cancel("Overwrite original file?", force, default=True):
            raise typer.Exit(0)

    try:
        asyncio.run(
            _prune_transcript(
                transcript,
                get_backup_dir(dir_name=config.backup_dir_name),
                session_id,
                keep,
                dry_run,
            )
        )
    except (OSError, UnicodeError) as e:
        error(f"Error: {escape(str(e))}")
        raise typer.Exit(1) from None


def register(app: typer.Typer) -> None:
    """Register the prune command."""

    @app.command()
    def prune(
        session_id: Annotated[
            str,
            typer.Argument(help="UUID of the session (without .jsonl)"),
        ],
        keep: Annotated[
            int,
            typer.Option(
                "--keep",
                "-k",
                help="Number of assistant messages to keep",
            ),
        ],
        dry_run: Annotated[
            bool,
            typer.Option(
                "--dry-run",
                help="Show what would happen but don't write",
            ),
        ] = False,
        force: Annotated[
            bool,
            typer.Option(
                "--force",
                "-f",
                help="Skip the confirmation prompt",
            ),
        ] = False,
        config: Annotated[
            Path | None,
            typer.Option(
                "--config",
                "-c",
                help="Path to settings file",
            ),
        ] = None,
        verbose: Annotated[
            bool,
            typer.Option(
                "--verbose",
                "-v",
                help="Enable debug logging",
            ),
        ] = False,
    ) -> None:
        """Prune early messages from a session.

        Keeps the session header, every non-message record, and the last
        KEEP assistant messages along with everything after the first of
        them. The original file is backed up before it is overwritten.

        Examples:
            claude-prune prune 3f2a... -k 20            # Keep last 20 replies
            claude-prune prune 3f2a... -k 20 --dry-run  # Report only
        """
        run_prune(
            session_id,
            keep,
            dry_run=dry_run,
            force=force,
            config_path=config,
            verbose=verbose,
        )
