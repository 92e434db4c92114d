"""Slack incoming-webhook messaging."""

from .client import WebhookClient, send_message
from .message import Payload, build_payload, read_message

__all__ = ["Payload", "WebhookClient", "build_payload", "read_message", "send_message"]
