"""Interactive first-run configuration."""

from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Protocol

from rich.console import Console
from rich.markup import escape

from ..errors import InputError, ValidationError
from .models import ConfigurationRecord
from .resolver import load_stored_configuration
from .store import resolve_config_path, save_config
from .validators import (
    validate_channel,
    validate_icon,
    validate_username,
    validate_webhook_url,
)

console = Console(highlight=False)

Validator = Callable[[str | None], str]


class Prompter(Protocol):
    """Line-oriented terminal I/O used by the configurator."""

    def ask(self, prompt: str) -> str:
        """Show ``prompt`` and return one line of input without the newline."""
        ...

    def show(self, message: str) -> None:
        """Display a line of output."""
        ...


class ConsolePrompter:
    """Prompter backed by a rich console on stdin/stdout."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(highlight=False)

    def ask(self, prompt: str) -> str:
        try:
            return self.console.input(escape(prompt), emoji=False)
        except (EOFError, OSError, ValueError) as e:
            raise InputError("Failed to read from STDIN") from e

    def show(self, message: str) -> None:
        self.console.print(escape(message), emoji=False, soft_wrap=True)


def prompt_for_value(
    prompter: Prompter,
    description: str,
    current: str | None,
    validator: Validator,
) -> str:
    """Prompt until ``validator`` accepts the input.

    Empty input keeps ``current`` when there is one. The validator's reason is
    shown before every re-prompt, but not before the first.

    Args:
        prompter: Terminal I/O
        description: Field label shown in the prompt
        current: Value offered as the default, or None
        validator: Field validator

    Returns:
        The accepted value
    """
    inputted: str | None = None

    while True:
        try:
            return validator(inputted)
        except ValidationError as e:
            if inputted is not None:
                prompter.show(str(e))

        default = current if current is not None else "None"
        line = prompter.ask(f"{description} [{default}]: ").strip()

        if not line and current is not None:
            inputted = current
        else:
            inputted = line


def configure(
    debug: bool = False,
    prompter: Prompter | None = None,
    env: Mapping[str, str] | None = None,
    path: Path | None = None,
) -> Path:
    """Ask for each setting and save the result to the configuration file.

    The current configuration (or the defaults) is offered as the default for
    each prompt. The new record is always saved with ``debug_mode`` off.

    Args:
        debug: Show the saved record after writing it
        prompter: Terminal I/O, defaults to the console
        env: Environment lookup, defaults to ``os.environ``
        path: Configuration file, defaults to ``$HOME/.config/slacks.json``

    Returns:
        Path to the saved configuration file

    Raises:
        HomeDirectoryUnset: If no path was given and HOME is not set
        ConfigSaveError: If the file cannot be written
        InputError: If input ends before every field is accepted
    """
    prompter = prompter or ConsolePrompter(console)
    config_path = path if path is not None else resolve_config_path(env)

    configs = load_stored_configuration(debug, env=env, path=config_path)

    new_conf = ConfigurationRecord(
        webhook_url=prompt_for_value(
            prompter, "Slack Webhook URL", configs.webhook_url, validate_webhook_url
        ),
        channel=prompt_for_value(
            prompter, "Default Channel", configs.channel, validate_channel
        ),
        username=prompt_for_value(
            prompter, "Default Username", configs.username, validate_username
        ),
        icon=prompt_for_value(
            prompter, "Default Icon Emoji", configs.icon, validate_icon
        ),
        debug_mode=False,
    )

    saved_path = save_config(new_conf, config_path)
    if debug:
        prompter.show(f"Saved: {new_conf!r}")
    prompter.show(f"Saved your configuration: {saved_path}")
    return saved_path
