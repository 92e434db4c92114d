"""Configuration resolution, validation and interactive setup."""

from .configurator import ConsolePrompter, Prompter, configure, prompt_for_value
from .models import ConfigurationRecord
from .resolver import default_configuration, get_configuration
from .store import load_config, resolve_config_path, save_config
from .validators import (
    validate_channel,
    validate_icon,
    validate_record,
    validate_username,
    validate_webhook_url,
)

__all__ = [
    "ConfigurationRecord",
    "ConsolePrompter",
    "Prompter",
    "configure",
    "default_configuration",
    "get_configuration",
    "load_config",
    "prompt_for_value",
    "resolve_config_path",
    "save_config",
    "validate_channel",
    "validate_icon",
    "validate_record",
    "validate_username",
    "validate_webhook_url",
]
