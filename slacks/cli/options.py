"""CLI option definitions for the slacks command."""

import typer

from ..constants import DEFAULT_CHANNEL, DEFAULT_ICON_EMOJI, DEFAULT_USERNAME

MESSAGE_ARGUMENT = typer.Argument(
    None,
    help="Message text, or - to read it from STDIN",
    show_default=False,
)

# Per-message overrides of the configured values
USERNAME_OPTION = typer.Option(
    None, "-u", "--username", help=f"Set username. (default: {DEFAULT_USERNAME})"
)

ICON_OPTION = typer.Option(
    None, "-i", "--icon-emoji", help=f"Set icon emoji. (default: {DEFAULT_ICON_EMOJI})"
)

CHANNEL_OPTION = typer.Option(
    None, "-c", "--channel", help=f"Set posting channel. (default: {DEFAULT_CHANNEL})"
)

CONFIGURE_OPTION = typer.Option(
    False, "--configure", help="Do configuration for your Slack."
)

DEBUG_OPTION = typer.Option(False, "--debug", help="Show debug messages.")
