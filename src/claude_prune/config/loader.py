"""Configuration loading from TOML files and environment variables."""

import logging
import os
import tomllib
from pathlib import Path

from pydantic import ValidationError

from claude_prune.config.models import ConfigError, PruneConfig
from claude_prune.config.paths import CONFIG_ENV_VAR, get_config_path

logger = logging.getLogger(__name__)


def _get_default_config_paths() -> list[Path]:
    """Get ordered list of default config file locations."""
    paths: list[Path] = []
    if env_path := os.environ.get(CONFIG_ENV_VAR):
        paths.append(Path(env_path))
    paths.append(get_config_path())
    return paths


def load_config(path: Path | None = None) -> PruneConfig:
    """Load settings from a TOML file.

    Args:
        path: Explicit path to config file. If None, searches default
            locations and falls back to defaults when none exists.

    Returns:
        Validated PruneConfig instance.

    Raises:
        FileNotFoundError: If an explicit path does not exist.
        ConfigError: If the file is not valid TOML or fails validation.
    """
    config_path: Path | None = None

    if path is not None:
        config_path = Path(path).expanduser()
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        for default_path in _get_default_config_paths():
            expanded = default_path.expanduser()
            if expanded.exists():
                config_path = expanded
                break

    if config_path is None:
        logger.debug("config_defaults_used")
        return PruneConfig()

    try:
        with config_path.open("rb") as f:
            raw_config = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e

    try:
        config = PruneConfig.model_validate(raw_config)
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {config_path}: {e}") from e

    logger.debug("config_loaded", extra={"file": str(config_path)})
    return config
