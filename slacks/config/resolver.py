"""Combine defaults, the configuration file and the environment."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from ..constants import (
    DEFAULT_CHANNEL,
    DEFAULT_ICON_EMOJI,
    DEFAULT_USERNAME,
    WEBHOOK_URL_ENV_VAR,
)
from ..errors import ConfigError
from .models import ConfigurationRecord
from .store import load_config, resolve_config_path

logger = logging.getLogger(__name__)


def default_configuration(debug: bool = False) -> ConfigurationRecord:
    """Build the record used when nothing has been configured."""
    return ConfigurationRecord(
        webhook_url=None,
        channel=DEFAULT_CHANNEL,
        username=DEFAULT_USERNAME,
        icon=DEFAULT_ICON_EMOJI,
        debug_mode=debug,
    )


def load_stored_configuration(
    debug: bool = False,
    env: Mapping[str, str] | None = None,
    path: Path | None = None,
) -> ConfigurationRecord:
    """Overlay the configuration file, if it can be read, onto the defaults.

    Load failures are logged at debug level and otherwise ignored.
    """
    configs = default_configuration(debug)

    try:
        config_path = path if path is not None else resolve_config_path(env)
        stored = load_config(config_path)
    except ConfigError as e:
        logger.debug(str(e))
        return configs

    configs = configs.merged_with(stored)
    logger.debug(f"Loaded {configs!r}")
    return configs


def get_configuration(
    debug: bool = False,
    env: Mapping[str, str] | None = None,
    path: Path | None = None,
) -> ConfigurationRecord:
    """Resolve the configuration used to send a message.

    Precedence, lowest first: built-in defaults, the configuration file,
    then ``SLACK_WEBHOOK_URL`` which always replaces the webhook URL when set.
    Never raises; unreadable configuration degrades to the defaults.

    Args:
        debug: Runtime debug flag carried on the returned record
        env: Environment lookup, defaults to ``os.environ``
        path: Configuration file, defaults to ``$HOME/.config/slacks.json``

    Returns:
        The resolved, unvalidated record
    """
    if env is None:
        env = os.environ

    configs = load_stored_configuration(debug, env=env, path=path)

    # Deprecated variable kept for backward compatibility; not persisted
    env_url = env.get(WEBHOOK_URL_ENV_VAR)
    if env_url is not None:
        logger.debug(f"Using webhook URL from {WEBHOOK_URL_ENV_VAR}")
        configs = configs.model_copy(update={"webhook_url": env_url})

    return configs
