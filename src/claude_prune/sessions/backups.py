"""Timestamped transcript backups.

Backups live in a per-project directory and are named
``<session_id>.jsonl.<unix_millis>``. Restoring picks the newest one.
"""

from __future__ import annotations

import logging
import re
import shutil
import time
from collections.abc import Iterable
from pathlib import Path

from claude_prune.sessions.types import BackupEntry

logger = logging.getLogger(__name__)

_TIMESTAMP_RE = re.compile(r"[0-9]+")


def backup_prefix(session_id: str) -> str:
    return f"{session_id}.jsonl."


def backup_name(session_id: str, timestamp_ms: int) -> str:
    """Build the backup filename for a session at a point in time."""
    return f"{backup_prefix(session_id)}{timestamp_ms}"


def parse_backup_name(name: str, session_id: str) -> BackupEntry | None:
    """Parse a backup filename belonging to ``session_id``.

    The timestamp is the final dot-separated segment and must be all digits.
    """
    if not name.startswith(backup_prefix(session_id)):
        return None
    suffix = name.rsplit(".", 1)[-1]
    if not _TIMESTAMP_RE.fullmatch(suffix):
        return None
    return BackupEntry(name=name, timestamp=int(suffix))


def find_latest_backup(
    filenames: Iterable[str], session_id: str
) -> BackupEntry | None:
    """Select the most recent backup for a session.

    Args:
        filenames: Names found in the backup directory.
        session_id: Session whose backups to consider.

    Returns:
        The entry with the highest timestamp (first one wins on ties),
        or None if no filename qualifies.
    """
    latest: BackupEntry | None = None
    for name in filenames:
        entry = parse_backup_name(name, session_id)
        if entry is None:
            continue
        if latest is None or entry.timestamp > latest.timestamp:
            latest = entry
    return latest


def list_backup_names(backup_dir: Path) -> list[str]:
    """List file names in the backup directory (empty if it doesn't exist)."""
    if not backup_dir.is_dir():
        return []
    return sorted(p.name for p in backup_dir.iterdir() if p.is_file())


def create_backup(
    transcript: Path,
    backup_dir: Path,
    session_id: str,
    now_ms: int | None = None,
) -> Path:
    """Copy a transcript into the backup directory.

    Args:
        transcript: Live transcript file.
        backup_dir: Directory to hold backups (created if missing).
        session_id: Session the transcript belongs to.
        now_ms: Timestamp to use; defaults to the current time.

    Returns:
        Path of the new backup file.
    """
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    backup_dir.mkdir(parents=True, exist_ok=True)
    backup = backup_dir / backup_name(session_id, now_ms)
    shutil.copyfile(transcript, backup)
    logger.info(
        "backup_created",
        extra={"session_id": session_id, "backup": str(backup)},
    )
    return backup


def restore_backup(backup: Path, transcript: Path) -> None:
    """Copy a backup over the live transcript."""
    shutil.copyfile(backup, transcript)
    logger.info(
        "backup_restored",
        extra={"backup": str(backup), "transcript": str(transcript)},
    )
