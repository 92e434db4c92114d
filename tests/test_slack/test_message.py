"""Tests for payload building and message input."""

import io

import pytest

from slacks.config.models import ConfigurationRecord
from slacks.config.validators import validate_channel
from slacks.errors import MessageError, ValidationError, ValidationReason
from slacks.slack.message import Payload, build_payload, read_message, resolve_override

VALID_URL = "https://hooks.slack.com/services/T000/B000/XXXX"


@pytest.fixture
def configs() -> ConfigurationRecord:
    """Create a complete resolved configuration."""
    return ConfigurationRecord(
        webhook_url=VALID_URL,
        channel="#general",
        username="slacks",
        icon=":slack:",
    )


class TestResolveOverride:
    """Test command-line overrides of configured values."""

    def test_no_flag_uses_configured(self) -> None:
        """Test fallback to the configured value."""
        assert resolve_override(None, "#general", validate_channel) == "#general"

    def test_blank_flag_uses_configured(self) -> None:
        """Test that a whitespace-only flag is ignored."""
        assert resolve_override("   ", "#general", validate_channel) == "#general"

    def test_flag_wins_and_is_stripped(self) -> None:
        """Test that the flag value replaces the configured one."""
        assert resolve_override(" #ops ", "#general", validate_channel) == "#ops"

    def test_flag_is_validated(self) -> None:
        """Test that overrides go through the same validator."""
        with pytest.raises(ValidationError) as exc:
            resolve_override("#" + "x" * 25, "#general", validate_channel)
        assert exc.value.reason == ValidationReason.TOO_LONG

    def test_missing_configured_value(self) -> None:
        """Test that an unset configured value without a flag is rejected."""
        with pytest.raises(ValidationError) as exc:
            resolve_override(None, None, validate_channel)
        assert exc.value.reason == ValidationReason.UNSET


class TestReadMessage:
    """Test message text handling."""

    def test_plain_message(self) -> None:
        """Test that the argument is used as-is."""
        assert read_message("this is a test") == "this is a test"

    def test_empty(self) -> None:
        """Test that an empty message is rejected."""
        with pytest.raises(MessageError, match="Empty message"):
            read_message("")

    def test_missing(self) -> None:
        """Test that no message at all is rejected."""
        with pytest.raises(MessageError, match="Missing message"):
            read_message(None)

    def test_read_from_stdin(self) -> None:
        """Test reading the whole of stdin for '-'."""
        stdin = io.StringIO("this is a test from stdin")
        assert read_message("-", stdin=stdin) == "this is a test from stdin"

    def test_stdin_read_failure(self) -> None:
        """Test that stdin errors become MessageError."""
        stdin = io.StringIO("closed")
        stdin.close()

        with pytest.raises(MessageError, match="Failed to read from STDIN"):
            read_message("-", stdin=stdin)


class TestBuildPayload:
    """Test payload assembly."""

    def test_from_configuration(self, configs: ConfigurationRecord) -> None:
        """Test a payload built only from configured values."""
        payload = build_payload(configs, "hello")

        assert payload == Payload(
            channel="#general", username="slacks", icon_emoji=":slack:", text="hello"
        )

    def test_overrides(self, configs: ConfigurationRecord) -> None:
        """Test that flags replace configured values."""
        payload = build_payload(
            configs, "hello", channel="@you", username="ci", icon=":+1:"
        )

        assert payload.channel == "@you"
        assert payload.username == "ci"
        assert payload.icon_emoji == ":+1:"

    def test_webhook_checked_first(self, configs: ConfigurationRecord) -> None:
        """Test that an unset webhook is reported before invalid overrides."""
        configs = configs.model_copy(update={"webhook_url": None})

        with pytest.raises(ValidationError) as exc:
            build_payload(configs, "hello", icon="robot_face")

        assert exc.value.field == "webhook_url"
        assert exc.value.reason == ValidationReason.UNSET

    def test_invalid_icon_override(self, configs: ConfigurationRecord) -> None:
        """Test that an invalid icon override is rejected."""
        with pytest.raises(ValidationError, match="invalid format"):
            build_payload(configs, "hello", icon="robot_face")

    def test_json_shape(self, configs: ConfigurationRecord) -> None:
        """Test the serialized body keys."""
        payload = build_payload(configs, "hello")

        assert payload.model_dump() == {
            "channel": "#general",
            "username": "slacks",
            "icon_emoji": ":slack:",
            "text": "hello",
        }
