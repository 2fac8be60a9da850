"""Configuration models using Pydantic."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

from claude_prune.config.paths import DEFAULT_BACKUP_DIR_NAME


class ConfigError(Exception):
    """Configuration error."""


class PruneConfig(BaseModel):
    """Settings for claude-prune.

    All fields are optional in the TOML file; a missing file means defaults.
    """

    model_config = ConfigDict(extra="forbid")

    backup_dir_name: str = DEFAULT_BACKUP_DIR_NAME
    confirm: bool = True  # Prompt before overwriting when attached to a TTY
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] | None = None

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.upper()
        return value

    @field_validator("backup_dir_name")
    @classmethod
    def _validate_backup_dir_name(cls, value: str) -> str:
        if not value or value in (".", "..") or "/" in value or "\\" in value:
            raise ValueError("backup_dir_name must be a plain directory name")
        return value
