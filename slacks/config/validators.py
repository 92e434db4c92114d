"""Validators for configuration fields.

Each validator accepts an optional string and either returns it unchanged or
raises ``ValidationError``. The same checks gate the interactive configurator
and the final payload before a message is sent.
"""

import re

from ..constants import MAX_NAME_LENGTH, WEBHOOK_HOST
from ..errors import ValidationError, ValidationReason
from .models import ConfigurationRecord

# One or more alphanumeric path segments, each optionally slash-terminated
WEBHOOK_URL_PATTERN = re.compile(
    rf"https://{re.escape(WEBHOOK_HOST)}/[A-Za-z0-9]+(?:/[A-Za-z0-9]+)*/?"
)
ICON_EMOJI_PATTERN = re.compile(r":[a-z0-9\-_+]+:")


def validate_webhook_url(url: str | None) -> str:
    """Validate an incoming webhook URL.

    Args:
        url: Candidate URL

    Returns:
        The URL, unchanged

    Raises:
        ValidationError: If the URL is unset or not a Slack webhook URL
    """
    if url is None:
        raise ValidationError(
            "webhook_url", ValidationReason.UNSET, "webhook_url is not set."
        )
    if not WEBHOOK_URL_PATTERN.fullmatch(url):
        raise ValidationError(
            "webhook_url",
            ValidationReason.INVALID_FORMAT,
            "webhook_url is invalid format.",
        )
    return url


def _validate_name(field: str, value: str | None) -> str:
    if value is None:
        raise ValidationError(field, ValidationReason.UNSET, f"{field} is not set")
    if not value:
        raise ValidationError(field, ValidationReason.EMPTY, f"{field} is empty")
    if len(value) > MAX_NAME_LENGTH:
        raise ValidationError(
            field, ValidationReason.TOO_LONG, f"{field} is too long"
        )
    return value


def validate_channel(channel: str | None) -> str:
    """Validate a channel name: ``#public``, ``private`` and ``@user`` are all fine."""
    return _validate_name("channel", channel)


def validate_username(username: str | None) -> str:
    """Validate a display name."""
    return _validate_name("username", username)


def validate_icon(icon: str | None) -> str:
    """Validate an emoji code such as ``:robot_face:`` or ``:+1:``.

    Args:
        icon: Candidate emoji code

    Returns:
        The emoji code, unchanged

    Raises:
        ValidationError: If the code is unset, empty or not wrapped in colons
    """
    if icon is None:
        raise ValidationError(
            "icon_emoji", ValidationReason.UNSET, "icon_emoji is not set."
        )
    if not icon:
        raise ValidationError(
            "icon_emoji", ValidationReason.EMPTY, "icon_emoji is empty."
        )
    if not ICON_EMOJI_PATTERN.fullmatch(icon):
        raise ValidationError(
            "icon_emoji",
            ValidationReason.INVALID_FORMAT,
            "icon_emoji is invalid format. (e.g. :robot_face:)",
        )
    return icon


def validate_record(record: ConfigurationRecord) -> ConfigurationRecord:
    """Check every sendable field of a record, raising on the first failure.

    ``debug_mode`` is not validated.
    """
    validate_webhook_url(record.webhook_url)
    validate_channel(record.channel)
    validate_username(record.username)
    validate_icon(record.icon)
    return record
