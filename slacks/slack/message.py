"""Build the webhook payload from the resolved configuration and CLI flags."""

import sys
from collections.abc import Callable
from typing import TextIO

from pydantic import BaseModel, Field

from ..config.models import ConfigurationRecord
from ..config.validators import (
    validate_channel,
    validate_icon,
    validate_username,
    validate_webhook_url,
)
from ..errors import MessageError

STDIN_MARKER = "-"


class Payload(BaseModel):
    """JSON body accepted by Slack incoming webhooks."""

    channel: str = Field(..., description="Destination channel or @user")
    username: str = Field(..., description="Display name")
    icon_emoji: str = Field(..., description="Emoji code used as the avatar")
    text: str = Field(..., description="Message text")


def resolve_override(
    flag_value: str | None,
    configured: str | None,
    validator: Callable[[str | None], str],
) -> str:
    """Use the command-line value if given, else the configured one, and validate."""
    value = flag_value.strip() if flag_value is not None else ""
    return validator(value if value else configured)


def read_message(message: str | None, stdin: TextIO | None = None) -> str:
    """Get the message text from the argument, or from stdin when it is ``-``.

    Raises:
        MessageError: If the message is empty or stdin cannot be read
    """
    if message == STDIN_MARKER:
        stream = stdin if stdin is not None else sys.stdin
        try:
            return stream.read()
        except (OSError, ValueError) as e:
            raise MessageError(f"Failed to read from STDIN. Error: {e}") from e

    if message is None:
        raise MessageError("Missing message. Pass MESSAGE, or - to read from STDIN")
    if not message:
        raise MessageError("Empty message")
    return message


def build_payload(
    configs: ConfigurationRecord,
    text: str,
    channel: str | None = None,
    username: str | None = None,
    icon: str | None = None,
) -> Payload:
    """Validate the configuration and overrides and assemble the payload.

    The webhook URL is checked first so a missing setup is reported before
    anything about the message itself.

    Raises:
        ValidationError: If the webhook URL or any resolved field is invalid
    """
    validate_webhook_url(configs.webhook_url)

    return Payload(
        channel=resolve_override(channel, configs.channel, validate_channel),
        username=resolve_override(username, configs.username, validate_username),
        icon_emoji=resolve_override(icon, configs.icon, validate_icon),
        text=text,
    )
