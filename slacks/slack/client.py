"""HTTP client for Slack incoming webhooks."""

import logging

import httpx

from ..config.models import ConfigurationRecord
from ..constants import TIMEOUT_IN_SEC
from ..errors import PostError
from .message import Payload, build_payload

logger = logging.getLogger(__name__)


class WebhookClient:
    """Posts payloads to a single incoming webhook URL."""

    def __init__(
        self,
        url: str,
        timeout: float = TIMEOUT_IN_SEC,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize webhook client.

        Args:
            url: Validated incoming webhook URL
            timeout: Request timeout in seconds
            transport: Optional httpx transport, mainly for tests
        """
        self.url = url
        self.timeout = timeout
        self.transport = transport

    def post(self, payload: Payload) -> httpx.Response:
        """Send one payload.

        Args:
            payload: Message to deliver

        Returns:
            The successful response

        Raises:
            PostError: If the request fails or Slack answers with a non-2xx status
        """
        body = payload.model_dump_json()
        logger.debug(f"JSON: {body}")

        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.post(
                    self.url,
                    content=body,
                    headers={"Content-Type": "application/json"},
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise PostError(
                f"Failed to post to Slack. StatusCode: {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise PostError(f"Failed to post to Slack. Error: {e}") from e

        logger.debug(f"Url: {response.url}")
        logger.debug(f"Status: {response.status_code}")
        return response


def send_message(
    configs: ConfigurationRecord,
    text: str,
    channel: str | None = None,
    username: str | None = None,
    icon: str | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Response:
    """Validate, build and post one message using the resolved configuration.

    Raises:
        ValidationError: If the configuration or any override is invalid
        PostError: If Slack does not accept the message
    """
    payload = build_payload(
        configs, text, channel=channel, username=username, icon=icon
    )
    logger.debug(f"Payload: {payload!r}")

    assert configs.webhook_url is not None  # checked by build_payload
    client = WebhookClient(configs.webhook_url, transport=transport)
    return client.post(payload)
