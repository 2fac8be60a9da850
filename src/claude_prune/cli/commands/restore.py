"""Restore command."""

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


BACKUP_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def register(app: typer.Typer) -> None:
    """Register the restore command."""

    @app.command()
    def restore(
        session_id: Annotated[
            str,
            typer.Argument(help="UUID of the session to restore (without .jsonl)"),
        ],
        dry_run: Annotated[
            bool,
            typer.Option(
                "--dry-run",
                help="Show what would be restored but don't write",
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
        """Restore a session from the latest backup."""
        from claude_prune.cli.runtime import bootstrap_runtime
        from claude_prune.config import get_backup_dir, get_transcript_path
        from claude_prune.sessions import (
            find_latest_backup,
            list_backup_names,
            restore_backup,
        )

        settings = bootstrap_runtime(config, verbose)
        transcript = get_transcript_path(session_id)
        backup_dir = get_backup_dir(dir_name=settings.backup_dir_name)

        if not backup_dir.is_dir():
            error(f"No backup directory found at {backup_dir}")
            raise typer.Exit(1)

        try:
            with console.status(f"Finding latest backup for {session_id}"):
                latest = find_latest_backup(list_backup_names(backup_dir), session_id)

            if latest is None:
                error(f"No backups found for session {session_id}")
                raise typer.Exit(1)

            backup_path = backup_dir / latest.name
            backup_date = latest.created_at.strftime(BACKUP_DATE_FORMAT)
            success(f"Found latest backup from {backup_date}")

            if dry_run:
                info(f"Would restore from: {backup_path}")
                info(f"Would restore to: {transcript}")
                return

            if settings.confirm and is_interactive():
                if not confirm_or_cancel(
                    f"Restore session from backup ({backup_date})?", force
                ):
                    raise typer.Exit(0)

            restore_backup(backup_path, transcript)
        except (OSError, UnicodeError) as e:
            error(f"Error: {escape(str(e))}")
            raise typer.Exit(1) from None

        console.print(f"[bold green]Restored:[/bold green] {transcript}")
        dim(f"From backup: {backup_path}")
