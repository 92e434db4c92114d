"""Load and save the slacks configuration file."""

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path

from ..constants import CONFIG_PATH_SUFFIX, HOME_ENV_VAR
from ..errors import ConfigLoadError, ConfigSaveError, HomeDirectoryUnset
from .models import ConfigurationRecord

logger = logging.getLogger(__name__)


def resolve_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the location of the configuration file.

    Args:
        env: Environment lookup, defaults to ``os.environ``

    Returns:
        ``$HOME/.config/slacks.json``

    Raises:
        HomeDirectoryUnset: If HOME is missing or empty
    """
    if env is None:
        env = os.environ

    home = env.get(HOME_ENV_VAR)
    if not home:
        raise HomeDirectoryUnset(HOME_ENV_VAR)

    return Path(home) / CONFIG_PATH_SUFFIX


def load_config(path: Path) -> ConfigurationRecord:
    """Load a configuration record from a JSON file.

    Args:
        path: File to read

    Returns:
        The stored record

    Raises:
        ConfigLoadError: If the file is missing, unreadable or malformed
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        record = ConfigurationRecord.model_validate(data)
    except (OSError, RecursionError, ValueError) as e:
        raise ConfigLoadError(Path(path), e) from e

    logger.debug(f"Loaded configuration from {path}")
    return record


def save_config(record: ConfigurationRecord, path: Path) -> Path:
    """Save a configuration record as pretty-printed JSON.

    Parent directories are created as needed and an existing file is
    overwritten. ``debug_mode`` is always written as false.

    Args:
        record: Record to persist
        path: Destination file

    Returns:
        Path to the saved file

    Raises:
        ConfigSaveError: If the directory or file cannot be written
    """
    path = Path(path)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(record.to_file_dict(), f, indent=2, ensure_ascii=False)
            f.write("\n")
    except (OSError, TypeError, ValueError) as e:
        raise ConfigSaveError(path, e) from e

    logger.debug(f"Saved configuration to {path}")
    return path
