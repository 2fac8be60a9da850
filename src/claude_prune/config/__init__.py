"""Configuration module."""

from claude_prune.config.loader import load_config
from claude_prune.config.models import ConfigError, PruneConfig
from claude_prune.config.paths import (
    get_backup_dir,
    get_claude_home,
    get_config_path,
    get_project_dir,
    get_projects_path,
    get_transcript_path,
)

__all__ = [
    "ConfigError",
    "PruneConfig",
    "get_backup_dir",
    "get_claude_home",
    "get_config_path",
    "get_project_dir",
    "get_projects_path",
    "get_transcript_path",
    "load_config",
]
