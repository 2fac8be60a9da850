"""Pruning and backup handling for JSONL session transcripts.

Transcripts are stored at ~/.claude/projects/{project}/{session_id}.jsonl
with backups under ~/.claude/projects/{project}/prune-backup/.
"""

from claude_prune.sessions.backups import (
    backup_name,
    create_backup,
    find_latest_backup,
    list_backup_names,
    parse_backup_name,
    restore_backup,
)
from claude_prune.sessions.prune import (
    compute_cutoff,
    prune_session_lines,
    try_parse_json,
)
from claude_prune.sessions.reader import read_transcript_lines, split_lines
from claude_prune.sessions.types import (
    MESSAGE_TYPES,
    BackupEntry,
    MessageKind,
    PruneResult,
)
from claude_prune.sessions.writer import write_transcript_lines

__all__ = [
    "MESSAGE_TYPES",
    "BackupEntry",
    "MessageKind",
    "PruneResult",
    "backup_name",
    "compute_cutoff",
    "create_backup",
    "find_latest_backup",
    "list_backup_names",
    "parse_backup_name",
    "prune_session_lines",
    "read_transcript_lines",
    "restore_backup",
    "split_lines",
    "try_parse_json",
    "write_transcript_lines",
]
