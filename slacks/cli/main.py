"""Main CLI entry point."""

import logging
from typing import NoReturn

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from .. import __version__
from ..config import configure, get_configuration, validate_webhook_url
from ..errors import ConfigError, InputError, SlacksError
from ..log import setup as setup_logging
from ..slack import read_message, send_message
from .options import (
    CHANNEL_OPTION,
    CONFIGURE_OPTION,
    DEBUG_OPTION,
    ICON_OPTION,
    MESSAGE_ARGUMENT,
    USERNAME_OPTION,
)

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="slacks",
    help="Post a message to Slack via an incoming webhook.",
    epilog="Environment variables: SLACK_WEBHOOK_URL  Incoming Webhook URL. "
    "(deprecated)",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()
err_console = Console(stderr=True)


def _fail(message: str) -> NoReturn:
    err_console.print(
        f"❌ [red]Error: {escape(message)}[/red]", emoji=False, highlight=False
    )
    raise typer.Exit(1)


def version_callback(value: bool) -> None:
    """Show version information."""
    if value:
        console.print(f"slacks v{__version__}")
        raise typer.Exit()


@app.command()
def main(
    message: str | None = MESSAGE_ARGUMENT,
    username: str | None = USERNAME_OPTION,
    icon_emoji: str | None = ICON_OPTION,
    channel: str | None = CHANNEL_OPTION,
    configure_mode: bool = CONFIGURE_OPTION,
    debug: bool = DEBUG_OPTION,
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Post a message to Slack via an incoming webhook.

    The webhook URL, channel, username and icon come from the configuration
    file written by --configure. -u, -i and -c override them for one message.

    Examples:
        # First run: store the webhook URL and defaults
        slacks --configure

        # Post a message
        slacks -c '#random' 'Deploy finished'

        # Post the output of another command
        make test 2>&1 | tail -n 20 | slacks -
    """
    setup_logging(debug)

    if configure_mode:
        try:
            configure(debug)
        except (ConfigError, InputError) as e:
            _fail(str(e))
        return

    configs = get_configuration(debug)
    logger.debug(f"Configs: {configs!r}")
    logger.debug(
        f"Args: message={message!r} username={username!r} "
        f"icon_emoji={icon_emoji!r} channel={channel!r}"
    )

    try:
        validate_webhook_url(configs.webhook_url)
        text = read_message(message)
        send_message(
            configs, text, channel=channel, username=username, icon=icon_emoji
        )
    except SlacksError as e:
        _fail(str(e))


if __name__ == "__main__":
    app()
