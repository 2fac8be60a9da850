"""Path resolution for Claude session transcripts.

Claude stores per-project state under a single home directory, which can be
overridden with the CLAUDE_CONFIG_DIR environment variable.

Default locations:
- Home: ~/.claude
- Transcripts: ~/.claude/projects/{project}/{session_id}.jsonl
- Backups: ~/.claude/projects/{project}/prune-backup/
"""

import os
from functools import lru_cache
from pathlib import Path

ENV_VAR = "CLAUDE_CONFIG_DIR"
CONFIG_ENV_VAR = "CLAUDE_PRUNE_CONFIG"

DEFAULT_BACKUP_DIR_NAME = "prune-backup"


@lru_cache(maxsize=1)
def get_claude_home() -> Path:
    """Get the Claude home directory.

    Resolution order:
    1. CLAUDE_CONFIG_DIR environment variable (if set)
    2. ~/.claude

    Returns:
        Path to the Claude home directory.
    """
    if env_home := os.environ.get(ENV_VAR):
        return Path(env_home).expanduser().resolve()
    return Path.home() / ".claude"


def get_config_path() -> Path:
    """Get the default settings file path."""
    return get_claude_home() / "prune.toml"


def get_projects_path() -> Path:
    """Get the directory holding one subdirectory per project."""
    return get_claude_home() / "projects"


def project_dir_name(cwd: Path) -> str:
    """Encode a working directory the way Claude names project directories.

    /home/me/app -> -home-me-app
    """
    return str(cwd).replace("/", "-")


def get_project_dir(cwd: Path | None = None) -> Path:
    """Get the project directory for a working directory (default: cwd)."""
    return get_projects_path() / project_dir_name(cwd or Path.cwd())


def get_transcript_path(session_id: str, cwd: Path | None = None) -> Path:
    """Get the transcript file for a session in the current project."""
    return get_project_dir(cwd) / f"{session_id}.jsonl"


def get_backup_dir(
    cwd: Path | None = None,
    dir_name: str = DEFAULT_BACKUP_DIR_NAME,
) -> Path:
    """Get the backup directory for the current project."""
    return get_project_dir(cwd) / dir_name
