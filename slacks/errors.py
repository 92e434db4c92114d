"""Exception types raised by slacks."""

from enum import Enum
from pathlib import Path


class SlacksError(Exception):
    """Base class for all slacks errors."""


class ConfigError(SlacksError):
    """Problem locating, reading or writing the configuration file."""


class ConfigLoadError(ConfigError):
    """The configuration file is missing, unreadable or malformed."""

    def __init__(self, path: Path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to load config file {path}. Cause: {cause}")


class ConfigSaveError(ConfigError):
    """The configuration file could not be written."""

    def __init__(self, path: Path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to save config file {path}. Cause: {cause}")


class HomeDirectoryUnset(ConfigError):
    """$HOME is not available, so the configuration path cannot be built."""

    def __init__(self, variable: str = "HOME"):
        self.variable = variable
        super().__init__(
            f"{variable} is not set; cannot locate the configuration file"
        )


class ValidationReason(str, Enum):
    """Why a configuration value was rejected."""

    UNSET = "unset"
    EMPTY = "empty"
    TOO_LONG = "too_long"
    INVALID_FORMAT = "invalid_format"


class ValidationError(SlacksError, ValueError):
    """A configuration value failed its validator."""

    def __init__(self, field: str, reason: ValidationReason, message: str):
        self.field = field
        self.reason = reason
        self.message = message
        super().__init__(message)


class InputError(SlacksError):
    """Interactive input could not be read."""


class MessageError(SlacksError):
    """The message text is missing or could not be read."""


class PostError(SlacksError):
    """The webhook did not accept the message."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
