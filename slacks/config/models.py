"""Pydantic model for the slacks configuration file.

The on-disk layout is the JSON form of ``ConfigurationRecord`` with the icon
stored under the ``icon_emoji`` key:

    {
      "webhook_url": "https://hooks.slack.com/...",
      "channel": "#general",
      "username": "slacks",
      "icon_emoji": ":slack:",
      "debug_mode": false
    }
"""

from pydantic import BaseModel, ConfigDict, Field


class ConfigurationRecord(BaseModel):
    """Settings needed to post a message to a Slack webhook."""

    model_config = ConfigDict(populate_by_name=True)

    webhook_url: str | None = Field(None, description="Incoming webhook URL")
    channel: str | None = Field(
        None, description="Channel, private group or @user to post to"
    )
    username: str | None = Field(None, description="Display name for the message")
    icon: str | None = Field(
        None,
        alias="icon_emoji",
        description="Emoji code used as the avatar, e.g. ':robot_face:'",
    )
    debug_mode: bool = Field(
        False, description="Show diagnostics; never persisted as true"
    )

    def merged_with(self, other: "ConfigurationRecord") -> "ConfigurationRecord":
        """Return a copy with all string fields replaced by ``other``'s.

        ``debug_mode`` is a runtime flag and keeps the value from ``self``.
        """
        return self.model_copy(
            update={
                "webhook_url": other.webhook_url,
                "channel": other.channel,
                "username": other.username,
                "icon": other.icon,
            }
        )

    def to_file_dict(self) -> dict[str, str | bool | None]:
        """Serialize for the configuration file with ``debug_mode`` forced off."""
        data = self.model_dump(by_alias=True)
        data["debug_mode"] = False
        return data
